"""
Voices: DTOs and the ``voices`` endpoint group.
"""

from .dto import (
    ADAM,
    ANTONI,
    ARNOLD,
    BELLA,
    DOMI,
    ELLI,
    JOSH,
    PREMADE_VOICES,
    RACHEL,
    SAM,
    Sample,
    Voice,
    VoiceSettings,
)
from .endpoint import VoicesEndpoint

__all__ = [
    "Voice",
    "VoiceSettings",
    "Sample",
    "VoicesEndpoint",
    "PREMADE_VOICES",
    "ADAM",
    "ANTONI",
    "ARNOLD",
    "BELLA",
    "DOMI",
    "ELLI",
    "JOSH",
    "RACHEL",
    "SAM",
]
