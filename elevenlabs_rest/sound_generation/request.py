"""Sound effect generation request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


MIN_DURATION_SECONDS = 0.5
MAX_DURATION_SECONDS = 22.0


@dataclass(frozen=True)
class SoundGenerationRequest:
    """
    Describes a sound effect.

    Attributes:
        text: Prompt describing the sound.
        duration_seconds: Length of the sound in [0.5, 22]. Guessed by the API when None.
        prompt_influence: How closely the prompt is followed, in [0, 1]. API default (0.3) when None.
    """

    text: str
    duration_seconds: Optional[float] = None
    prompt_influence: Optional[float] = None

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("text is required")
        if self.duration_seconds is not None and not (
            MIN_DURATION_SECONDS <= self.duration_seconds <= MAX_DURATION_SECONDS
        ):
            raise ValueError(
                f"duration_seconds must be between {MIN_DURATION_SECONDS} and "
                f"{MAX_DURATION_SECONDS}, got {self.duration_seconds}"
            )
        if self.prompt_influence is not None and not 0.0 <= self.prompt_influence <= 1.0:
            raise ValueError(f"prompt_influence must be between 0 and 1, got {self.prompt_influence}")

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"text": self.text}
        if self.duration_seconds is not None:
            payload["duration_seconds"] = self.duration_seconds
        if self.prompt_influence is not None:
            payload["prompt_influence"] = self.prompt_influence
        return payload
