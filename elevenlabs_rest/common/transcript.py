"""
Character timing returned by the ``with-timestamps`` synthesis routes.

The API sends alignment column-wise::

    {
        "characters": ["H", "i"],
        "character_start_times_seconds": [0.0, 0.1],
        "character_end_times_seconds": [0.1, 0.2]
    }

and ``parse_alignment`` turns it into one ``TimestampedTranscriptCharacter``
per spoken character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple
import base64

from .dto import JsonDto, wire


@dataclass(frozen=True)
class TimestampedTranscriptCharacter(JsonDto):
    character: str = ""
    start_time: float = wire(key="character_start_times_seconds", default=0.0)
    end_time: float = wire(key="character_end_times_seconds", default=0.0)


def parse_alignment(alignment: Optional[Mapping[str, Any]]) -> List[TimestampedTranscriptCharacter]:
    if not alignment:
        return []
    characters = alignment.get("characters") or []
    starts = alignment.get("character_start_times_seconds") or []
    ends = alignment.get("character_end_times_seconds") or []
    if not (len(characters) == len(starts) == len(ends)):
        raise ValueError(
            f"Alignment columns differ in length: {len(characters)}/{len(starts)}/{len(ends)}"
        )
    return [
        TimestampedTranscriptCharacter(character, float(start), float(end))
        for character, start, end in zip(characters, starts, ends)
    ]


def parse_transcription(payload: Mapping[str, Any]) -> Tuple[bytes, List[TimestampedTranscriptCharacter]]:
    """Split a transcription payload into audio bytes and character timings."""
    audio = base64.b64decode(payload.get("audio_base64") or "")
    return audio, parse_alignment(payload.get("alignment"))
