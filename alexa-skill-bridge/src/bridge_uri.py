# bridge_uri.py

import re
from collections import namedtuple

from alexa_errors import InvalidUriError

BridgeUri = namedtuple("BridgeUri", ["protocol", "hostname", "port", "path"])

SCHEME_PATTERN = re.compile(r"https?", re.IGNORECASE)
HOST_PATTERN = re.compile(r"[A-Za-z0-9\-_.]+")
# Nur der Anfang wird geprüft: Port mit 3-5 Ziffern, danach ein Pfad ab '/'
PORT_AND_PATH_PATTERN = re.compile(r"[0-9]{3,5}/[A-Za-z0-9\-_~]*")


def parse_uri(uri):
    """
    Zerlegt eine URI der Form scheme://host:port/path.

    Es wird bewusst kein urllib.parse verwendet: erlaubt ist nur diese eine,
    eingeschränkte Form. Alles andere führt zu InvalidUriError.
    """
    if not isinstance(uri, str):
        raise InvalidUriError(uri)

    comps = uri.replace("//", "", 1).split(":")
    if len(comps) != 3:
        raise InvalidUriError(uri)

    scheme, hostname, port_and_path = comps
    if not SCHEME_PATTERN.fullmatch(scheme):
        raise InvalidUriError(uri)
    if not HOST_PATTERN.fullmatch(hostname):
        raise InvalidUriError(uri)
    if not PORT_AND_PATH_PATTERN.match(port_and_path):
        raise InvalidUriError(uri)

    slash = port_and_path.index("/")
    return BridgeUri(
        protocol=scheme.lower(),
        hostname=hostname,
        port=int(port_and_path[:slash]),
        path=port_and_path[slash:],
    )


def is_valid_uri(uri):
    try:
        parse_uri(uri)
    except InvalidUriError:
        return False
    return True
