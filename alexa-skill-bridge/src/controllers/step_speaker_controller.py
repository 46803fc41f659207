# controllers/step_speaker_controller.py

import logging
from .alexa_controller import AlexaController, build_capability

logger = logging.getLogger(__name__)


class StepSpeakerController(AlexaController):
    namespace = "Alexa.StepSpeakerController"
    # Alexa schickt Direktiven für das Interface Alexa.StepSpeaker unter diesem Namespace
    aliases = ("Alexa.StepSpeaker",)

    @staticmethod
    def get_capability(device_capabilities=None):
        # StepSpeaker kennt nur relative Befehle (lauter/leiser), daher keine Properties
        return build_capability("Alexa.StepSpeaker")

    @staticmethod
    def handle_directive(name, payload):
        if name == "AdjustVolume":
            # Positiv -> lauter, negativ -> leiser. Die Bridge bekommt die Schritte 1:1.
            steps = (payload or {}).get('volumeSteps', 1)
            logger.info(f"StepSpeakerController: AdjustVolume um {steps} Schritte")
            return {"volumeSteps": steps}
        if name == "SetMute":
            return {"mute": bool((payload or {}).get('mute', False))}
        return None
