# lambda_function.py
import asyncio
import json
import logging
import time
from urllib.parse import quote

from alexa_device import translate
from alexa_errors import BridgeError, ErrorType, UnsupportedNamespaceError
from alexa_response import controller_response, discover_response, error_response
from bridge_client import BridgeClient
from config import get_log_level, load_bridge_uri
from controllers import CONTROLLER_BY_NAMESPACE

logger = logging.getLogger()
logger.setLevel(get_log_level())

DEPLOY_DATE = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())

DISCOVERY_NAMESPACE = "Alexa.Discovery"
SUPPORTED_NAMESPACES = (DISCOVERY_NAMESPACE,) + tuple(CONTROLLER_BY_NAMESPACE)


def bridge_action(action_id, cookie_value):
    """
    Name der Aktion auf der Bridge. Steht im Cookie ein Text, wird dieser
    verwendet (z.B. TurnOn -> turn_on), sonst die Alexa-Aktion selbst.
    """
    if isinstance(cookie_value, str) and cookie_value:
        return cookie_value
    return action_id


class DirectiveRouter:
    """Leitet eine Alexa-Direktive anhand des Namespace an den passenden Handler."""

    def __init__(self, base_uri, client=None):
        self.base_uri = base_uri.rstrip("/")
        self.client = client or BridgeClient()

        self.handlers = {DISCOVERY_NAMESPACE: self.handle_discovery}
        for namespace in CONTROLLER_BY_NAMESPACE:
            self.handlers[namespace] = self.handle_control

    async def dispatch(self, request):
        directive = request["directive"]
        namespace = directive["header"].get("namespace")

        handler = self.handlers.get(namespace)
        if handler is None:
            raise UnsupportedNamespaceError(namespace)
        return await handler(directive)

    def devices_uri(self):
        return f"{self.base_uri}/devices"

    def action_uri(self, endpoint_id, action):
        return f"{self.devices_uri()}/{quote(endpoint_id, safe='')}/actions/{quote(action, safe='')}"

    async def handle_discovery(self, directive):
        """
        Holt die Geräteliste von der Bridge und baut daraus die Discover.Response.
        Schlägt irgendetwas fehl, antworten wir mit einer leeren Liste.
        """
        correlation_token = directive["header"].get("correlationToken")

        try:
            devices = json.loads(await self.client.get(self.devices_uri()))
            endpoints = [translate(record) for record in devices]
        except (BridgeError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Discovery fehlgeschlagen, melde keine Geräte: {e!r}")
            endpoints = []

        logger.info(f"Discovery: {len(endpoints)} Endpunkte")
        return discover_response(endpoints, correlation_token)

    async def handle_control(self, directive):
        """
        Verarbeitet TurnOn, AdjustVolume, Play, ... für alle Controller gleich:
        die Aktion muss im Cookie des Endpunkts stehen, dann geht ein POST an die Bridge.
        """
        header = directive["header"]
        endpoint = directive.get("endpoint") or {}
        action_id = header.get("name")
        correlation_token = header.get("correlationToken")
        endpoint_id = endpoint.get("endpointId")
        cookie = endpoint.get("cookie")

        if not endpoint_id or not isinstance(cookie, dict) or action_id not in cookie:
            message = f"command not available on endpoint: {action_id}, {endpoint_id}"
            logger.warning(message)
            return error_response(ErrorType.INVALID_DIRECTIVE, message, correlation_token, endpoint)

        controller = CONTROLLER_BY_NAMESPACE.get(header.get("namespace"))
        body = controller.handle_directive(action_id, directive.get("payload")) if controller else None
        uri = self.action_uri(endpoint_id, bridge_action(action_id, cookie[action_id]))

        try:
            await self.client.post(uri, body)
        except BridgeError as e:
            logger.error(f"Bridge nicht erreichbar für {action_id} auf {endpoint_id}: {e}")
            return error_response(ErrorType.BRIDGE_UNREACHABLE, e, correlation_token, endpoint)

        return controller_response(endpoint, correlation_token)


def lambda_handler(request, context):
    logger.info(f"--- LAMBDA START: {DEPLOY_DATE} ---")

    # Logge den kompletten Request, damit wir sehen, was Alexa genau will
    logger.info("FULL REQUEST: %s", json.dumps(request))

    if "directive" not in request:
        return {}

    header = request["directive"]["header"]
    logger.info(f"Namespace: {header.get('namespace')} | Name: {header.get('name')}")

    # Erst den Namespace prüfen, dann die Konfiguration laden
    if header.get("namespace") not in SUPPORTED_NAMESPACES:
        raise UnsupportedNamespaceError(header.get("namespace"))

    router = DirectiveRouter(load_bridge_uri())
    response = asyncio.run(router.dispatch(request))

    logger.info("RESPONSE: %s", json.dumps(response))
    return response
