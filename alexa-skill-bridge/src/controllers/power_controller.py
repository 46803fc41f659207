# controllers/power_controller.py

from .alexa_controller import AlexaController, build_capability


class PowerController(AlexaController):
    namespace = "Alexa.PowerController"

    # TurnOn / TurnOff tragen keine Daten, die Aktion steckt in der URL.
    # handle_directive der Basisklasse (kein Body) reicht daher aus.

    @staticmethod
    def get_capability(device_capabilities=None):
        return build_capability("Alexa.PowerController")
