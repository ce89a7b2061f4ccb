"""
Voice generation: preview voices and their promotion to permanent voices.
"""

from .dto import (
    Accent,
    Age,
    CreateVoiceRequest,
    Gender,
    GeneratedVoiceOptions,
    GeneratedVoiceRequest,
)
from .endpoint import VoiceGenerationEndpoint

__all__ = [
    "Accent",
    "Age",
    "CreateVoiceRequest",
    "Gender",
    "GeneratedVoiceOptions",
    "GeneratedVoiceRequest",
    "VoiceGenerationEndpoint",
]
