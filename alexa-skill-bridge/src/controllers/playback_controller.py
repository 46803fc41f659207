# controllers/playback_controller.py

from .alexa_controller import AlexaController, build_capability


class PlaybackController(AlexaController):
    namespace = "Alexa.PlaybackController"

    @staticmethod
    def get_capability(device_capabilities=None):
        # Jede Capability der Bridge (Play, Pause, ...) wird als Operation angeboten,
        # in der Reihenfolge, in der die Bridge sie liefert
        return build_capability("Alexa.PlaybackController", {
            "supportedOperations": list(device_capabilities or {})
        })
