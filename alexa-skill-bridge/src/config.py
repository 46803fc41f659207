# config.py

import logging
import os

import boto3

from alexa_errors import ConfigurationError
from bridge_uri import is_valid_uri

logger = logging.getLogger(__name__)

BRIDGE_URI_ENV = "SMART_PREFIX"
BRIDGE_URI_PARAMETER_ENV = "SMART_PREFIX_PARAMETER"
LOG_LEVEL_ENV = "LOG_LEVEL"


def get_log_level(environ=None):
    environ = os.environ if environ is None else environ
    level = environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return level if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else "INFO"


def load_bridge_uri(environ=None, ssm_client=None):
    """
    Liest die Basis-URI der Bridge (z.B. http://bridge.local:8080/api).

    Reihenfolge: Umgebungsvariable SMART_PREFIX, danach der SSM Parameter,
    dessen Name in SMART_PREFIX_PARAMETER steht.
    """
    environ = os.environ if environ is None else environ

    uri = environ.get(BRIDGE_URI_ENV)
    if not uri and environ.get(BRIDGE_URI_PARAMETER_ENV):
        uri = _read_ssm_parameter(environ[BRIDGE_URI_PARAMETER_ENV], ssm_client)

    if not uri:
        raise ConfigurationError(
            f"Keine Bridge-URI konfiguriert ({BRIDGE_URI_ENV} oder {BRIDGE_URI_PARAMETER_ENV})"
        )

    uri = uri.strip().rstrip("/")
    # Ohne Pfad-Präfix fehlt der '/' hinter dem Port, den der Parser verlangt
    if not is_valid_uri(uri) and not is_valid_uri(uri + "/"):
        raise ConfigurationError(f"Ungültige Bridge-URI: {uri}")
    return uri


def _read_ssm_parameter(name, ssm_client=None):
    ssm = ssm_client or boto3.client("ssm")
    logger.info(f"Lese Bridge-URI aus SSM Parameter {name}")
    try:
        res = ssm.get_parameter(Name=name, WithDecryption=True)
        return res["Parameter"]["Value"]
    except Exception as e:
        raise ConfigurationError(f"SSM Parameter {name} nicht lesbar: {e}") from e
