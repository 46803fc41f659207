# controllers/alexa_controller.py

from abc import ABC, abstractmethod


class AlexaController(ABC):
    @property
    @abstractmethod
    def namespace(self):
        pass

    # Weitere Namespaces, unter denen Alexa Direktiven für dieses Interface schickt
    aliases = ()

    @staticmethod
    @abstractmethod
    def get_capability(device_capabilities=None):
        """Gibt das Discovery-JSON zurück."""
        pass

    @staticmethod
    def handle_directive(name, payload):
        """Übersetzt eine Direktive in den Body für den POST an die Bridge (None = kein Body)."""
        return None

    @classmethod
    def namespaces(cls):
        return (cls.namespace,) + tuple(cls.aliases)


def build_capability(interface, merge=None):
    """Capability-Deklaration; die festen Felder überschreiben alles aus merge."""
    capability = dict(merge or {})
    capability.update({
        "type": "AlexaInterface",
        "interface": interface,
        "version": "3"
    })
    return capability
