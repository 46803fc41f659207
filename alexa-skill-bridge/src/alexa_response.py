# alexa_response.py

import uuid

from alexa_errors import ErrorType


class AlexaResponse:
    """
    Baut die Antwort-Struktur (event.header / event.payload, optional
    event.endpoint und context.properties) für Alexa Smart Home v3.

    Jede Instanz bekommt eine eigene messageId, Instanzen werden nicht
    wiederverwendet.
    """

    def __init__(self, namespace="Alexa", name="Response", correlation_token=None,
                 payload=None, endpoint=None, with_context=False, payload_version="3"):
        self.namespace = namespace
        self.name = name
        self.correlation_token = correlation_token
        self.payload_version = payload_version
        self.payload = dict(payload or {})
        self.endpoint = endpoint
        self.context_properties = [] if with_context else None
        self.message_id = str(uuid.uuid4())

    def add_context_property(self, namespace="Alexa.EndpointHealth", name="connectivity", value=None):
        if self.context_properties is None:
            self.context_properties = []
        self.context_properties.append({
            "namespace": namespace,
            "name": name,
            "value": value
        })

    def set_payload(self, payload):
        self.payload = dict(payload)

    def set_payload_endpoints(self, endpoints):
        self.payload["endpoints"] = list(endpoints)

    def get_header(self):
        header = {
            "namespace": self.namespace,
            "name": self.name,
            "payloadVersion": self.payload_version,
            "messageId": self.message_id
        }
        if self.correlation_token is not None:
            header["correlationToken"] = self.correlation_token
        return header

    def get(self):
        event = {
            "header": self.get_header(),
            "payload": self.payload
        }
        if self.endpoint is not None:
            event["endpoint"] = self.endpoint

        response = {"event": event}
        if self.context_properties is not None:
            response["context"] = {"properties": self.context_properties}
        return response


def discover_response(endpoints, correlation_token=None):
    adr = AlexaResponse(namespace="Alexa.Discovery", name="Discover.Response",
                        correlation_token=correlation_token)
    adr.set_payload_endpoints(endpoints)
    return adr.get()


def controller_response(endpoint, correlation_token=None):
    # Erfolg: context.properties ist immer eine leere Liste
    return AlexaResponse(correlation_token=correlation_token, endpoint=endpoint,
                         with_context=True).get()


def error_response(error_type, message, correlation_token=None, endpoint=None):
    return AlexaResponse(
        name="ErrorResponse",
        correlation_token=correlation_token,
        endpoint=endpoint,
        payload={
            "type": ErrorType(error_type).value,
            "message": str(message)
        }
    ).get()
