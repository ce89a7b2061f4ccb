"""History DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
import uuid

from elevenlabs_rest.common.dto import JsonDto, wire
from elevenlabs_rest.common.utils import generate_guid, unix_to_datetime


@dataclass(frozen=True)
class HistoryItem(JsonDto):
    """One past synthesis call."""

    history_item_id: str = ""
    voice_id: Optional[str] = None
    voice_name: Optional[str] = None
    text: str = ""
    date_unix: int = 0
    character_count_change_from: int = 0
    character_count_change_to: int = 0
    content_type: Optional[str] = None
    state: Optional[str] = None

    @property
    def id(self) -> str:
        return self.history_item_id

    @property
    def date(self) -> datetime:
        return unix_to_datetime(self.date_unix)

    @property
    def text_hash(self) -> uuid.UUID:
        return generate_guid(f"{self.voice_id or ''}{self.text}")

    def __str__(self) -> str:
        return self.history_item_id


@dataclass(frozen=True)
class HistoryInfo(JsonDto):
    history: List[HistoryItem] = wire(dto=HistoryItem, many=True, default_factory=list)
    last_history_item_id: Optional[str] = None
    has_more: bool = False
