"""Dubbing DTOs and the upload request."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Union
import io
import os

from elevenlabs_rest.common.dto import JsonDto, wire


MEDIA_TYPES = {
    ".3gp": "video/3gpp",
    ".acc": "audio/aac",
    ".avi": "video/x-msvideo",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".mov": "video/quicktime",
    ".mp3": "audio/mp3",
    ".mp4": "video/mp4",
    ".raw": "audio/raw",
    ".wav": "audio/wav",
    ".webm": "video/webm",
}
DEFAULT_MEDIA_TYPE = "application/octet-stream"


def media_type_for(path: Union[str, Path]) -> str:
    return MEDIA_TYPES.get(Path(path).suffix.lower(), DEFAULT_MEDIA_TYPE)


class DubbingFormat(str, Enum):
    SRT = "srt"
    WEBVTT = "webvtt"


class DubbingStream:
    """
    A media stream to upload for dubbing.

    The stream must be readable and not empty. A stream that can't seek needs
    a ``peek()`` method, so wrap raw streams in ``io.BufferedReader``. ``name``
    must not be blank and ``media_type`` must look like ``type/subtype``. The
    stream is closed with this object.
    """

    def __init__(self, stream: BinaryIO, name: str, media_type: str):
        if stream is None:
            raise TypeError("stream is required")
        if name is None:
            raise TypeError("name is required")
        if media_type is None:
            raise TypeError("media_type is required")

        readable = getattr(stream, "readable", None)
        if readable is None or not readable():
            raise ValueError("stream must be readable")
        if _is_empty(stream):
            raise ValueError("stream is empty")
        if not name.strip():
            raise ValueError("name is required")

        parts = media_type.split("/")
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            raise ValueError(f"Invalid media type: {media_type!r}")

        self.stream = stream
        self.name = name
        self.media_type = media_type

    def read(self) -> bytes:
        return self.stream.read()

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "DubbingStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DubbingStream(name={self.name!r}, media_type={self.media_type!r})"


def _is_empty(stream: BinaryIO) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None or not seekable():
        # Buffered pipes and sockets can be peeked without consuming data.
        peek = getattr(stream, "peek", None)
        if peek is None:
            raise ValueError("stream must be seekable or support peek()")
        return not peek(1)
    position = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return end - position <= 0


@dataclass
class DubbingRequest:
    """
    Media to dub and the dubbing options.

    Either ``files`` (paths or ``DubbingStream`` objects) or ``source_url`` must
    be given. Paths are opened at construction; their media type follows the
    file extension.
    """

    target_language: str
    files: List[DubbingStream] = field(default_factory=list)
    source_url: Optional[str] = None
    source_language: Optional[str] = None
    number_of_speakers: Optional[int] = None
    watermark: Optional[bool] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    highest_resolution: Optional[bool] = None
    drop_background_audio: Optional[bool] = None
    use_profanity_filter: Optional[bool] = None
    project_name: Optional[str] = None

    def __post_init__(self):
        if not self.target_language or not self.target_language.strip():
            raise ValueError("target_language is required")
        if not self.files and not self.source_url:
            raise ValueError("Either files or source_url must be provided")
        self.files = _open_files(self.files)

    def form_fields(self) -> List[tuple]:
        """Non-file multipart fields, in upload order."""
        values = [
            ("name", self.project_name),
            ("source_url", self.source_url),
            ("source_lang", self.source_language),
            ("target_lang", self.target_language),
            ("num_speakers", self.number_of_speakers),
            ("watermark", self.watermark),
            ("start_time", self.start_time),
            ("end_time", self.end_time),
            ("highest_resolution", self.highest_resolution),
            ("drop_background_audio", self.drop_background_audio),
            ("use_profanity_filter", self.use_profanity_filter),
        ]
        out = []
        for key, value in values:
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = str(value).lower()
            out.append((key, str(value)))
        return out

    def close(self) -> None:
        for dub in self.files:
            dub.close()

    def __enter__(self) -> "DubbingRequest":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _open_files(files: Iterable[Union[str, os.PathLike, DubbingStream]]) -> List[DubbingStream]:
    opened: List[DubbingStream] = []
    try:
        for item in files or []:
            if isinstance(item, DubbingStream):
                opened.append(item)
                continue
            path = Path(item)
            if not path.is_file():
                raise FileNotFoundError(f"File not found: {path}")
            opened.append(DubbingStream(open(path, "rb"), path.name, media_type_for(path)))
    except (OSError, ValueError, TypeError):
        for dub in opened:
            dub.close()
        raise
    return opened


@dataclass(frozen=True)
class DubbingResponse(JsonDto):
    dubbing_id: str = ""
    expected_duration_sec: float = 0.0

    @property
    def id(self) -> str:
        return self.dubbing_id


@dataclass(frozen=True)
class DubbingProjectMetadata(JsonDto):
    dubbing_id: str = ""
    name: Optional[str] = None
    status: Optional[str] = None
    target_languages: List[str] = field(default_factory=list)
    error: Optional[str] = None
    expected_duration_seconds: float = wire(local=True, default=0.0)
    time_completed: Optional[float] = wire(local=True, default=None)

    @property
    def id(self) -> str:
        return self.dubbing_id
