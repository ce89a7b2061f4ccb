"""Audio output formats accepted by the synthesis endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class OutputFormat(str, Enum):
    MP3_44100_64 = "mp3_44100_64"
    MP3_44100_96 = "mp3_44100_96"
    MP3_44100_128 = "mp3_44100_128"
    MP3_44100_192 = "mp3_44100_192"
    PCM_16000 = "pcm_16000"
    PCM_22050 = "pcm_22050"
    PCM_24000 = "pcm_24000"
    PCM_44100 = "pcm_44100"
    ULAW_8000 = "ulaw_8000"

    @property
    def is_mp3(self) -> bool:
        return self.value.startswith("mp3_")

    @property
    def is_pcm(self) -> bool:
        return self.value.startswith("pcm_")

    @property
    def sample_rate(self) -> int:
        return int(self.value.split("_")[1])

    @property
    def extension(self) -> Optional[str]:
        """File extension of the cached clip; None when the format can't be cached."""
        if self.is_mp3:
            return ".mp3"
        if self.is_pcm:
            return ".wav"
        return None
