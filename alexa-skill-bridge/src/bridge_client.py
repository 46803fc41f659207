# bridge_client.py

import json
import logging

import httpx

from alexa_errors import BridgeUnreachableError
from bridge_uri import parse_uri

logger = logging.getLogger(__name__)


class BridgeClient:
    """
    Minimaler asynchroner HTTP-Client für die Device-Bridge.

    Ein Request pro Aufruf, keine Retries und kein Timeout. Die Antwort wird
    komplett gelesen und als Text zurückgegeben.
    """

    def __init__(self, headers=None, transport=None, verify=True):
        self.headers = dict(headers or {})
        # transport nur für Tests (httpx.MockTransport)
        self.transport = transport
        self.verify = verify

    async def get(self, uri):
        return await self.request("GET", uri)

    async def post(self, uri, body=None):
        return await self.request("POST", uri, body)

    async def request(self, method, uri, body=None):
        # InvalidUriError wird bewusst nicht abgefangen, der Aufrufer entscheidet
        target = parse_uri(uri)
        url = f"{target.protocol}://{target.hostname}:{target.port}{target.path}"

        post_data = body
        if post_data is not None and not isinstance(post_data, str):
            post_data = json.dumps(post_data)

        headers = dict(self.headers)
        headers["Content-Type"] = "application/json"
        payload = None
        if post_data is not None or method == "POST":
            payload = (post_data or "").encode("utf-8")
            headers["Content-Length"] = str(len(payload))

        logger.info(f"Bridge request: {method} {url}")

        try:
            async with httpx.AsyncClient(timeout=None, verify=self.verify,
                                         transport=self.transport) as client:
                response = await client.request(method, url, content=payload, headers=headers)
        except httpx.TransportError as e:
            raise BridgeUnreachableError(f"{method} {uri} failed: {e!r}") from e

        if not response.is_success:
            logger.warning(f"Bridge antwortet mit Status {response.status_code} auf {method} {target.path}")

        return response.text
