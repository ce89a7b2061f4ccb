"""
Streamed synthesis.

A ``TextToSpeechStream`` wraps an open streaming HTTP response and yields the
PCM audio as ``AudioChunk`` objects, in the order the server sends it. It can
be iterated once. Once the response is exhausted the full audio is written to
the cache as a WAV file and ``result`` holds the resulting ``VoiceClip``.

Streams opened with timestamps receive newline delimited JSON instead of raw
PCM. Every line holds base64 audio plus the alignment of the characters it
covers, and those timings travel with the chunk built from that line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Tuple
import json
import logging

import requests

from elevenlabs_rest.common.clips import PCM_SAMPLE_WIDTH, AudioChunk, VoiceClip, write_pcm_as_wav
from elevenlabs_rest.common.transcript import TimestampedTranscriptCharacter, parse_transcription
from elevenlabs_rest.voices.dto import Voice


logger = logging.getLogger("elevenlabs.tts")


DEFAULT_CHUNK_SIZE = 8192

Piece = Tuple[bytes, Tuple[TimestampedTranscriptCharacter, ...]]


class TextToSpeechStream:
    def __init__(
        self,
        response: requests.Response,
        clip_id: str,
        text: str,
        voice: Voice,
        sample_rate: int,
        cached_path: Path,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        with_timestamps: bool = False,
    ):
        self.response = response
        self.clip_id = clip_id
        self.text = text
        self.voice = voice
        self.sample_rate = sample_rate
        self.cached_path = Path(cached_path)
        self.chunk_size = chunk_size
        self.with_timestamps = with_timestamps
        self.result: Optional[VoiceClip] = None
        self._started = False
        self._closed = False

    def __iter__(self) -> Iterator[AudioChunk]:
        if self._started:
            raise RuntimeError("TextToSpeechStream can only be iterated once")
        self._started = True
        return self._chunks()

    def _chunks(self) -> Iterator[AudioChunk]:
        pcm = bytearray()
        characters: List[TimestampedTranscriptCharacter] = []
        pending: List[TimestampedTranscriptCharacter] = []
        remainder = b""
        index = 0
        try:
            for data, timings in self._pieces():
                if self._closed:
                    return
                pending.extend(timings)
                if not data:
                    continue
                data = remainder + data
                # Keep whole 16-bit samples; an odd trailing byte waits for the next chunk.
                cut = len(data) - (len(data) % PCM_SAMPLE_WIDTH)
                data, remainder = data[:cut], data[cut:]
                if not data:
                    continue
                pcm.extend(data)
                characters.extend(pending)
                index += 1
                yield AudioChunk(
                    index=index,
                    clip_id=self.clip_id,
                    data=bytes(data),
                    sample_rate=self.sample_rate,
                    timestamped_transcript_characters=tuple(pending),
                )
                pending = []

            if remainder:
                logger.warning("Dropping %d trailing byte(s) of clip %s", len(remainder), self.clip_id)
            characters.extend(pending)
            self.result = self._finish(bytes(pcm), tuple(characters))
        finally:
            self.response.close()

    def _pieces(self) -> Iterator[Piece]:
        if not self.with_timestamps:
            for data in self.response.iter_content(chunk_size=self.chunk_size):
                yield data, ()
            return

        buffer = b""
        for data in self.response.iter_content(chunk_size=self.chunk_size):
            buffer += data
            *lines, buffer = buffer.split(b"\n")
            for line in lines:
                piece = self._parse_line(line)
                if piece is not None:
                    yield piece
        piece = self._parse_line(buffer)
        if piece is not None:
            yield piece

    def _parse_line(self, line: bytes) -> Optional[Piece]:
        line = line.strip()
        if not line:
            return None
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning("Skipping malformed line in clip %s: %s", self.clip_id, e)
            return None
        audio, timings = parse_transcription(payload)
        return audio, tuple(timings)

    def _finish(self, pcm: bytes, characters: Tuple[TimestampedTranscriptCharacter, ...]) -> VoiceClip:
        if not self.cached_path.exists():
            write_pcm_as_wav(pcm, self.sample_rate, self.cached_path)
        logger.info("Streamed clip %s (%d bytes) -> %s", self.clip_id, len(pcm), self.cached_path)
        return VoiceClip(
            id=self.clip_id,
            text=self.text,
            cached_path=self.cached_path,
            sample_rate=self.sample_rate,
            voice=self.voice,
            timestamped_transcript_characters=characters,
        )

    def close(self) -> None:
        """Abort the request. Chunks already handed out stay valid."""
        self._closed = True
        self.response.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "TextToSpeechStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
