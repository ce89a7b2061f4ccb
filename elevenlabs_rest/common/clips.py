"""
Audio results returned by the synthesis and download endpoints.

Clips are backed by a file in the download cache. Decoding is done on demand
with pydub, so constructing a clip never touches ffmpeg.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Union
import uuid

from .transcript import TimestampedTranscriptCharacter
from .utils import generate_guid

if TYPE_CHECKING:
    from pydub import AudioSegment
    from elevenlabs_rest.voices.dto import Voice


PCM_SAMPLE_WIDTH = 2  # 16-bit little endian
PCM_CHANNELS = 1


def _require_pydub():
    try:
        from pydub import AudioSegment
    except ImportError:
        raise ImportError(
            "pydub is required. Install it with: pip install pydub\n"
            "Also install ffmpeg system package for mp3/ogg codec support."
        )
    return AudioSegment


def pcm_to_segment(pcm: bytes, sample_rate: int) -> "AudioSegment":
    AudioSegment = _require_pydub()
    return AudioSegment(
        data=bytes(pcm),
        sample_width=PCM_SAMPLE_WIDTH,
        frame_rate=sample_rate,
        channels=PCM_CHANNELS,
    )


def write_pcm_as_wav(pcm: bytes, sample_rate: int, output_path: Union[str, Path]) -> Path:
    """Wrap raw 16-bit mono PCM into a WAV file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pcm_to_segment(pcm, sample_rate).export(str(output_path), format="wav")
    return output_path


@dataclass(frozen=True)
class GeneratedClip:
    """
    A piece of generated audio stored in the download cache.

    Attributes:
        id: Server-side id (history item id, sample id, generated voice id...)
        text: Text the clip was generated from; empty for voice samples
        cached_path: Location of the audio file
        sample_rate: Sample rate if known (PCM based clips)
    """

    id: str
    text: str
    cached_path: Optional[Path] = None
    sample_rate: Optional[int] = None

    @property
    def text_hash(self) -> uuid.UUID:
        return generate_guid(f"{self.id}{self.text}")

    def load_audio(self) -> "AudioSegment":
        """Decode the cached file with pydub."""
        if self.cached_path is None:
            raise FileNotFoundError(f"Clip {self.id} has no cached file")
        path = Path(self.cached_path)
        if not path.exists():
            raise FileNotFoundError(f"Cached clip not found: {path}")
        AudioSegment = _require_pydub()
        return AudioSegment.from_file(str(path))


@dataclass(frozen=True)
class VoiceClip(GeneratedClip):
    voice: Optional["Voice"] = field(default=None, compare=False)
    # Only filled for requests made with timestamps.
    timestamped_transcript_characters: Tuple[TimestampedTranscriptCharacter, ...] = ()


@dataclass(frozen=True)
class AudioChunk:
    """One partial piece of streamed PCM audio, in arrival order."""

    index: int
    clip_id: Optional[str]
    data: bytes
    sample_rate: int
    timestamped_transcript_characters: Tuple[TimestampedTranscriptCharacter, ...] = ()

    @property
    def duration_seconds(self) -> float:
        return len(self.data) / float(PCM_SAMPLE_WIDTH * PCM_CHANNELS * self.sample_rate)

    def to_segment(self) -> "AudioSegment":
        return pcm_to_segment(self.data, self.sample_rate)
