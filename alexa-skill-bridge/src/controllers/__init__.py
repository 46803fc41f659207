# controllers/__init__.py

from .power_controller import PowerController
from .step_speaker_controller import StepSpeakerController
from .playback_controller import PlaybackController

# Alle Controller, deren Direktiven an die Bridge weitergereicht werden
CONTROLLERS = (PowerController, StepSpeakerController, PlaybackController)

# Namespace -> Controller (inkl. Aliase)
CONTROLLER_BY_NAMESPACE = {
    namespace: controller
    for controller in CONTROLLERS
    for namespace in controller.namespaces()
}

__all__ = [
    'PowerController',
    'StepSpeakerController',
    'PlaybackController',
    'CONTROLLERS',
    'CONTROLLER_BY_NAMESPACE'
]
