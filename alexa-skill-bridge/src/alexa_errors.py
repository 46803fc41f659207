# alexa_errors.py

from enum import Enum


class ErrorType(str, Enum):
    """Werte für payload.type einer Alexa ErrorResponse."""
    BRIDGE_UNREACHABLE = "BRIDGE_UNREACHABLE"
    INVALID_DIRECTIVE = "INVALID_DIRECTIVE"


class BridgeError(Exception):
    """Basisklasse für alles, was beim Gespräch mit der Bridge schiefgeht."""


class InvalidUriError(BridgeError):
    code = "INVALID_URI"

    def __init__(self, uri):
        super().__init__(f"could not parse uri {uri}")
        self.uri = uri


class BridgeUnreachableError(BridgeError):
    code = ErrorType.BRIDGE_UNREACHABLE.value


class UnsupportedNamespaceError(Exception):
    def __init__(self, namespace):
        super().__init__(f"Unsupported namespace: {namespace}")
        self.namespace = namespace


class ConfigurationError(Exception):
    pass
