"""Account and subscription DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from elevenlabs_rest.common.dto import JsonDto, wire
from elevenlabs_rest.common.utils import unix_to_datetime


@dataclass(frozen=True)
class SupportedLanguage(JsonDto):
    iso_code: str = ""
    display_name: Optional[str] = None


@dataclass(frozen=True)
class AvailableModel(JsonDto):
    model_id: str = ""
    display_name: Optional[str] = None
    supported_languages: List[SupportedLanguage] = wire(
        dto=SupportedLanguage, many=True, default_factory=list
    )


@dataclass(frozen=True)
class NextInvoice(JsonDto):
    amount_due_cents: float = 0.0
    next_payment_attempt_unix: int = 0

    @property
    def next_payment_attempt(self) -> datetime:
        return unix_to_datetime(self.next_payment_attempt_unix)


@dataclass(frozen=True)
class SubscriptionInfo(JsonDto):
    tier: Optional[str] = None
    character_count: int = 0
    character_limit: int = 0
    can_extend_character_limit: bool = False
    allowed_to_extend_character_limit: bool = False
    next_character_count_reset_unix: int = 0
    voice_limit: int = 0
    can_extend_voice_limit: bool = False
    can_use_instant_voice_cloning: bool = False
    available_models: List[AvailableModel] = wire(
        dto=AvailableModel, many=True, default_factory=list
    )
    status: Optional[str] = None
    next_invoice: Optional[NextInvoice] = wire(dto=NextInvoice, default=None)

    @property
    def next_character_count_reset(self) -> datetime:
        return unix_to_datetime(self.next_character_count_reset_unix)

    @property
    def characters_remaining(self) -> int:
        return max(self.character_limit - self.character_count, 0)


@dataclass(frozen=True)
class UserInfo(JsonDto):
    subscription: Optional[SubscriptionInfo] = wire(dto=SubscriptionInfo, default=None)
    is_new_user: bool = False
    xi_api_key: Optional[str] = None
