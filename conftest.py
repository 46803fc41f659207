import json
import sys
import os
import pytest

# Pfade sofort setzen, nicht erst in einer Fixture!
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
paths = [
    os.path.join(BASE_DIR, 'alexa-skill-bridge', 'src'),
]

for p in paths:
    if p not in sys.path:
        sys.path.insert(0, p)

# Die Bridge-URI setzen, damit lambda_function ohne Deployment importierbar ist
os.environ.setdefault("SMART_PREFIX", "http://bridge.local:8080/api")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")


class FakeBridgeClient:
    """Ersetzt BridgeClient und merkt sich alle Aufrufe."""

    def __init__(self, devices=None, get_error=None, post_error=None, get_text=None):
        self.devices = devices if devices is not None else []
        self.get_error = get_error
        self.post_error = post_error
        self.get_text = get_text
        self.get_calls = []
        self.post_calls = []

    async def get(self, uri):
        self.get_calls.append(uri)
        if self.get_error:
            raise self.get_error
        if self.get_text is not None:
            return self.get_text
        return json.dumps(self.devices)

    async def post(self, uri, body=None):
        self.post_calls.append((uri, body))
        if self.post_error:
            raise self.post_error
        return ""


@pytest.fixture
def fake_client():
    return FakeBridgeClient()


@pytest.fixture
def make_client():
    return FakeBridgeClient
