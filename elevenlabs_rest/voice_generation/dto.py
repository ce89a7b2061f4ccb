"""Voice generation DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional
import math

from elevenlabs_rest.common.dto import JsonDto, wire


MIN_TEXT_LENGTH = 100
MAX_TEXT_LENGTH = 1000
MIN_ACCENT_STRENGTH = 0.3
MAX_ACCENT_STRENGTH = 2.0


@dataclass(frozen=True)
class Gender(JsonDto):
    name: str = ""
    code: str = ""

    FEMALE: ClassVar["Gender"]
    MALE: ClassVar["Gender"]


@dataclass(frozen=True)
class Accent(JsonDto):
    name: str = ""
    code: str = ""

    AMERICAN: ClassVar["Accent"]
    BRITISH: ClassVar["Accent"]
    AFRICAN: ClassVar["Accent"]
    AUSTRALIAN: ClassVar["Accent"]
    INDIAN: ClassVar["Accent"]


@dataclass(frozen=True)
class Age(JsonDto):
    name: str = ""
    code: str = ""

    YOUNG: ClassVar["Age"]
    MIDDLE_AGED: ClassVar["Age"]
    OLD: ClassVar["Age"]


Gender.FEMALE = Gender("Female", "female")
Gender.MALE = Gender("Male", "male")
Accent.AMERICAN = Accent("American", "american")
Accent.BRITISH = Accent("British", "british")
Accent.AFRICAN = Accent("African", "african")
Accent.AUSTRALIAN = Accent("Australian", "australian")
Accent.INDIAN = Accent("Indian", "indian")
Age.YOUNG = Age("Young", "young")
Age.MIDDLE_AGED = Age("Middle Aged", "middle_aged")
Age.OLD = Age("Old", "old")


@dataclass(frozen=True)
class GeneratedVoiceOptions(JsonDto):
    """Parameter values accepted by ``generate-voice``."""

    genders: List[Gender] = wire(dto=Gender, many=True, default_factory=list)
    accents: List[Accent] = wire(dto=Accent, many=True, default_factory=list)
    ages: List[Age] = wire(dto=Age, many=True, default_factory=list)
    minimum_characters: int = 0
    maximum_characters: int = 0
    minimum_accent_strength: float = 0.0
    maximum_accent_strength: float = 0.0


@dataclass(frozen=True)
class GeneratedVoiceRequest:
    """
    Describes a preview voice to generate.

    ``text`` must hold between 100 and 1000 characters. ``accent_strength`` is
    clamped into [0.3, 2.0]; NaN becomes 0.3.
    """

    text: str
    gender: Gender
    accent: Accent
    age: Age
    accent_strength: float = 1.0

    def __post_init__(self):
        length = len(self.text or "")
        if length < MIN_TEXT_LENGTH or length > MAX_TEXT_LENGTH:
            raise ValueError(
                f"text must be between {MIN_TEXT_LENGTH} and {MAX_TEXT_LENGTH} characters, got {length}"
            )
        strength = float(self.accent_strength)
        if math.isnan(strength):
            strength = MIN_ACCENT_STRENGTH
        clamped = min(max(strength, MIN_ACCENT_STRENGTH), MAX_ACCENT_STRENGTH)
        object.__setattr__(self, "accent_strength", clamped)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "gender": self.gender.code,
            "accent": self.accent.code,
            "age": self.age.code,
            "accent_strength": self.accent_strength,
        }


@dataclass(frozen=True)
class CreateVoiceRequest(JsonDto):
    """Promotes a generated preview voice into a permanent voice."""

    voice_name: str = ""
    generated_voice_id: str = ""
    labels: Optional[Dict[str, str]] = field(default=None)

    def __post_init__(self):
        if not self.voice_name or not self.voice_name.strip():
            raise ValueError("voice_name is required")
        if not self.generated_voice_id or not self.generated_voice_id.strip():
            raise ValueError("generated_voice_id is required")
