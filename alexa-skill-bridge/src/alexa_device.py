# alexa_device.py

from enum import Enum

from controllers import PowerController, StepSpeakerController, PlaybackController


class Platform(Enum):
    LIRC = "lirc"
    HOMEASSISTANT = "homeassistant"
    ROKU = "roku"
    ROKUAPP = "rokuapp"
    OTHER = "other"

    @classmethod
    def of(cls, value):
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


# Home Assistant Domains, die Alexa als eigene Kategorie kennt
HOMEASSISTANT_CATEGORIES = ("LIGHT", "SWITCH")


def homeassistant_category(device_id):
    """light.lamp1 -> LIGHT, switch.x -> SWITCH, alles andere -> OTHER"""
    domain = device_id[:device_id.find(".")].upper() if "." in device_id else ""
    return domain if domain in HOMEASSISTANT_CATEGORIES else "OTHER"


# Plattform -> (Kategorie, Controller). Eine Kategorie als Funktion wird aus der ID abgeleitet.
PLATFORM_MAPPING = {
    Platform.LIRC: ("TV", (PowerController, StepSpeakerController)),
    Platform.HOMEASSISTANT: (homeassistant_category, (PowerController,)),
    Platform.ROKU: ("TV", (PlaybackController,)),
    Platform.ROKUAPP: ("OTHER", (PowerController,)),
    Platform.OTHER: ("OTHER", ()),
}


def cleanse_endpoint_id(device_id):
    # Alexa erlaubt keinen Punkt in der endpointId
    return device_id.replace(".", "#")


class AlexaDevice:
    def __init__(self, record):
        self.device_id = record['id']
        self.endpoint_id = cleanse_endpoint_id(self.device_id)
        self.manufacturer_name = record.get('manufacturer')
        self.friendly_name = record.get('name')
        self.platform_name = record.get('platform')
        self.platform = Platform.of(self.platform_name)

        # Die Capabilities der Bridge wandern unverändert in das Cookie
        self.raw_capabilities = dict(record.get('capabilities') or {})

        category, self.controllers = PLATFORM_MAPPING[self.platform]
        if callable(category):
            category = category(self.device_id)
        self.display_categories = [category]

    def get_discovery_capabilities(self):
        """Erstellt die Liste aller Capabilities für die Discovery."""
        return [ctrl.get_capability(self.raw_capabilities) for ctrl in self.controllers]

    def get_discovery_payload(self):
        """Erzeugt das vollständige Objekt für einen Endpunkt im Discovery-Payload."""
        return {
            "endpointId": self.endpoint_id,
            "manufacturerName": self.manufacturer_name,
            "friendlyName": self.friendly_name,
            "description": self.platform_name,
            "displayCategories": self.display_categories,
            "capabilities": self.get_discovery_capabilities(),
            "cookie": dict(self.raw_capabilities)
        }


def translate(record):
    return AlexaDevice(record).get_discovery_payload()
