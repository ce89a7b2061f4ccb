"""
Text-to-speech: render text with a voice, either as one complete clip or as a
stream of PCM chunks.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import requests

from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.common.clips import VoiceClip, write_pcm_as_wav
from elevenlabs_rest.common.output_format import OutputFormat
from elevenlabs_rest.common.transcript import parse_transcription
from elevenlabs_rest.errors import ElevenLabsError
from elevenlabs_rest.models.dto import Model
from elevenlabs_rest.voices.dto import Voice, VoiceSettings

from .request import TextToSpeechRequest
from .stream import TextToSpeechStream


HISTORY_ITEM_ID = "history-item-id"
WITH_TIMESTAMPS = "/with-timestamps"


class TextToSpeechEndpoint(BaseEndpoint):
    root = "text-to-speech"
    log_name = "tts"

    def text_to_speech(
        self,
        text: str,
        voice: Voice,
        voice_settings: Optional[VoiceSettings] = None,
        model: Optional[Model] = None,
        output_format: OutputFormat = OutputFormat.MP3_44100_128,
        optimize_streaming_latency: Optional[int] = None,
        with_timestamps: bool = False,
    ) -> VoiceClip:
        request = TextToSpeechRequest(
            voice=voice,
            text=text,
            voice_settings=voice_settings,
            model=model,
            output_format=output_format,
            optimize_streaming_latency=optimize_streaming_latency,
            with_timestamps=with_timestamps,
        )
        return self.synthesize(request)

    def synthesize(self, request: TextToSpeechRequest) -> VoiceClip:
        """Synthesize the whole clip and store it in the cache."""
        extension = request.output_format.extension
        if extension is None:
            raise ValueError(f"Output format {request.output_format.value} can't be cached")

        request = self._with_voice_settings(request)
        route = f"/{request.voice.id}"
        if request.with_timestamps:
            route += WITH_TIMESTAMPS
        resp = self.post_json(self.get_url(route, request.query), request.to_dict(), "text_to_speech")
        clip_id = _clip_id(resp)

        characters = ()
        if request.with_timestamps:
            audio, timings = parse_transcription(resp.json())
            characters = tuple(timings)
        else:
            audio = resp.content

        cached_path = self.cache_directory("TextToSpeech", request.voice.id) / f"{clip_id}{extension}"
        if not cached_path.exists():
            if request.output_format.is_pcm:
                write_pcm_as_wav(audio, request.output_format.sample_rate, cached_path)
            else:
                cached_path.write_bytes(audio)
        self.logger.info("Synthesized clip %s -> %s", clip_id, cached_path)

        return VoiceClip(
            id=clip_id,
            text=request.text,
            cached_path=cached_path,
            sample_rate=request.output_format.sample_rate,
            voice=request.voice,
            timestamped_transcript_characters=characters,
        )

    def stream_text_to_speech(
        self,
        text: str,
        voice: Voice,
        voice_settings: Optional[VoiceSettings] = None,
        model: Optional[Model] = None,
        output_format: OutputFormat = OutputFormat.PCM_24000,
        optimize_streaming_latency: Optional[int] = None,
        with_timestamps: bool = False,
    ) -> TextToSpeechStream:
        request = TextToSpeechRequest(
            voice=voice,
            text=text,
            voice_settings=voice_settings,
            model=model,
            output_format=output_format,
            optimize_streaming_latency=optimize_streaming_latency,
            with_timestamps=with_timestamps,
        )
        return self.stream(request)

    def stream(self, request: TextToSpeechRequest) -> TextToSpeechStream:
        """
        Start a streamed synthesis.

        The output format must be PCM. Audio is read lazily while the returned
        stream is iterated; closing it aborts the request. With timestamps each
        chunk also carries the timing of the characters it speaks.
        """
        if not request.output_format.is_pcm:
            raise ValueError(f"Streaming requires a PCM output format, got {request.output_format.value}")

        request = self._with_voice_settings(request)
        route = f"/{request.voice.id}/stream"
        if request.with_timestamps:
            route += WITH_TIMESTAMPS
        resp = self.post_json(
            self.get_url(route, request.query), request.to_dict(), "stream_text_to_speech", stream=True
        )
        try:
            clip_id = _clip_id(resp)
        except ElevenLabsError:
            resp.close()
            raise

        cached_path = self.cache_directory("TextToSpeech", request.voice.id) / f"{clip_id}.wav"
        return TextToSpeechStream(
            resp,
            clip_id=clip_id,
            text=request.text,
            voice=request.voice,
            sample_rate=request.output_format.sample_rate,
            cached_path=cached_path,
            with_timestamps=request.with_timestamps,
        )

    def _with_voice_settings(self, request: TextToSpeechRequest) -> TextToSpeechRequest:
        if request.voice_settings is not None:
            return request
        return replace(request, voice_settings=self.client.voices.get_default_voice_settings())


def _clip_id(resp: requests.Response) -> str:
    clip_id = resp.headers.get(HISTORY_ITEM_ID)
    if not clip_id:
        raise ElevenLabsError("Failed to parse clip id!")
    return clip_id
