"""Synthesis model descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from elevenlabs_rest.common.dto import JsonDto, wire


@dataclass(frozen=True)
class Language(JsonDto):
    language_id: str = ""
    name: Optional[str] = None


@dataclass(frozen=True)
class Model(JsonDto):
    model_id: str = ""
    name: Optional[str] = None
    description: Optional[str] = None
    can_be_finetuned: bool = False
    can_do_text_to_speech: bool = False
    can_do_voice_conversion: bool = False
    token_cost_factor: float = 0.0
    languages: List[Language] = wire(dto=Language, many=True, default_factory=list)

    MONOLINGUAL_V1: ClassVar["Model"]
    MULTILINGUAL_V1: ClassVar["Model"]
    MULTILINGUAL_V2: ClassVar["Model"]
    ENGLISH_TURBO_V2: ClassVar["Model"]
    TURBO_V2_5: ClassVar["Model"]

    @property
    def id(self) -> str:
        return self.model_id

    def __str__(self) -> str:
        return self.model_id


Model.MONOLINGUAL_V1 = Model("eleven_monolingual_v1")
Model.MULTILINGUAL_V1 = Model("eleven_multilingual_v1")
Model.MULTILINGUAL_V2 = Model("eleven_multilingual_v2")
Model.ENGLISH_TURBO_V2 = Model("eleven_turbo_v2")
Model.TURBO_V2_5 = Model("eleven_turbo_v2_5")
