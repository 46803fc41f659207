# test_alexa_response.py

from alexa_errors import ErrorType
from alexa_response import AlexaResponse, controller_response, discover_response, error_response


def test_message_id_unique():
    ids = {AlexaResponse().get()["event"]["header"]["messageId"] for _ in range(50)}
    assert len(ids) == 50


def test_header_without_correlation_token():
    header = AlexaResponse(namespace="Alexa.Discovery", name="Discover.Response").get()["event"]["header"]
    assert header["namespace"] == "Alexa.Discovery"
    assert header["name"] == "Discover.Response"
    assert header["payloadVersion"] == "3"
    assert "correlationToken" not in header


def test_discover_response():
    response = discover_response([{"endpointId": "a"}], "tok")
    assert response["event"]["payload"] == {"endpoints": [{"endpointId": "a"}]}
    assert response["event"]["header"]["correlationToken"] == "tok"
    assert "endpoint" not in response["event"]
    assert "context" not in response


def test_controller_response_has_empty_context():
    endpoint = {"endpointId": "light#lamp1"}
    response = controller_response(endpoint, "tok")
    assert response["context"] == {"properties": []}
    assert response["event"]["endpoint"] == endpoint
    assert response["event"]["payload"] == {}


def test_error_response():
    endpoint = {"endpointId": "light#lamp1"}
    response = error_response(ErrorType.BRIDGE_UNREACHABLE, ConnectionRefusedError("refused"), "tok", endpoint)
    assert response["event"]["header"]["namespace"] == "Alexa"
    assert response["event"]["header"]["name"] == "ErrorResponse"
    assert response["event"]["payload"] == {"type": "BRIDGE_UNREACHABLE", "message": "refused"}
    assert response["event"]["endpoint"] == endpoint


def test_error_response_accepts_plain_string_type():
    response = error_response("INVALID_DIRECTIVE", "nope")
    assert response["event"]["payload"]["type"] == "INVALID_DIRECTIVE"


def test_add_context_property():
    adr = AlexaResponse()
    adr.add_context_property(namespace="Alexa.PowerController", name="powerState", value="ON")
    assert adr.get()["context"]["properties"] == [
        {"namespace": "Alexa.PowerController", "name": "powerState", "value": "ON"}
    ]
