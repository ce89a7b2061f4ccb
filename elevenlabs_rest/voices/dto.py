"""Voice DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Tuple

from elevenlabs_rest.common.dto import JsonDto, wire


@dataclass(frozen=True)
class VoiceSettings(JsonDto):
    """
    Tuning parameters of a voice.

    stability / similarity_boost / style are expected in [0, 1]; the range is
    enforced by the API, not here.
    """

    _always_include: ClassVar[Tuple[str, ...]] = (
        "stability",
        "similarity_boost",
        "style",
        "use_speaker_boost",
        "speed",
    )

    stability: float = 0.75
    similarity_boost: float = 0.75
    style: float = 0.45
    use_speaker_boost: bool = True
    speed: float = 1.0


@dataclass(frozen=True)
class Sample(JsonDto):
    sample_id: str = ""
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    size_bytes: int = 0
    hash: Optional[str] = None

    @property
    def id(self) -> str:
        return self.sample_id


@dataclass(frozen=True)
class Voice(JsonDto):
    voice_id: str = ""
    name: Optional[str] = None
    samples: List[Sample] = wire(dto=Sample, many=True, default_factory=list)
    category: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)
    preview_url: Optional[str] = None
    available_for_tiers: List[str] = field(default_factory=list)
    high_quality_base_model_ids: List[str] = field(default_factory=list)
    settings: Optional[VoiceSettings] = wire(dto=VoiceSettings, default=None)

    @property
    def id(self) -> str:
        return self.voice_id

    @classmethod
    def from_id(cls, voice_id: str, name: Optional[str] = None) -> "Voice":
        return cls(voice_id=voice_id, name=name)

    def __str__(self) -> str:
        return self.voice_id


# Premade voices available on every account.
ADAM = Voice.from_id("pNInz6obpgDQGcFmaJgB", "Adam")
ANTONI = Voice.from_id("ErXwobaYiN019PkySvjV", "Antoni")
ARNOLD = Voice.from_id("VR6AewLTigWG4xSOukaG", "Arnold")
BELLA = Voice.from_id("EXAVITQu4vr4xnSDxMaL", "Bella")
DOMI = Voice.from_id("AZnzlk1XvdvUeBnXmlld", "Domi")
ELLI = Voice.from_id("MF3mGyEYCl7XYWbV9V6O", "Elli")
JOSH = Voice.from_id("TxGEqnHWrfWFTfGW9XjX", "Josh")
RACHEL = Voice.from_id("21m00Tcm4TlvDq8ikWAM", "Rachel")
SAM = Voice.from_id("yoZ06aMxZJJ28mfd3POQ", "Sam")

PREMADE_VOICES = (ADAM, ANTONI, ARNOLD, BELLA, DOMI, ELLI, JOSH, RACHEL, SAM)
