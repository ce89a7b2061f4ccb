"""
Voice generation: preview voices built from gender, accent and age, and their
promotion to permanent voices.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from elevenlabs_rest.cache_config import get_cache_directory
from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.common.clips import GeneratedClip
from elevenlabs_rest.errors import ElevenLabsError
from elevenlabs_rest.voices.dto import Voice

from .dto import CreateVoiceRequest, GeneratedVoiceOptions, GeneratedVoiceRequest


GENERATED_VOICE_ID = "generated_voice_id"


class VoiceGenerationEndpoint(BaseEndpoint):
    root = "voice-generation"

    def get_voice_generation_options(self) -> GeneratedVoiceOptions:
        data = self.get_json(self.get_url("/generate-voice/parameters"), "get_voice_generation_options")
        return GeneratedVoiceOptions.from_dict(data)

    def generate_voice(
        self,
        request: GeneratedVoiceRequest,
        save_directory: Optional[Union[str, Path]] = None,
    ) -> Tuple[str, GeneratedClip]:
        """
        Generate a preview voice and download its audio.

        Args:
            request: Voice description
            save_directory: Root to save under instead of the cache root

        Returns:
            (generated_voice_id, clip) where the clip is the mp3 preview.
        """
        resp = self.post_json(
            self.get_url("/generate-voice"), request.to_dict(), "generate_voice", stream=True
        )
        try:
            generated_voice_id = resp.headers.get(GENERATED_VOICE_ID)
            if not generated_voice_id:
                raise ElevenLabsError("Failed to parse generated voice id!")

            directory = get_cache_directory(
                "VoiceGeneration", cache_root=save_directory or self.client.cache_root
            )
            cached_path = directory / f"{generated_voice_id}.mp3"
            if cached_path.exists():
                cached_path.unlink()

            with open(cached_path, "wb") as f:
                for chunk in resp.iter_content(chunk_size=8192):
                    if chunk:
                        f.write(chunk)
        finally:
            resp.close()

        self.logger.info("Generated voice %s -> %s", generated_voice_id, cached_path)
        clip = GeneratedClip(id=generated_voice_id, text=request.text, cached_path=cached_path)
        return generated_voice_id, clip

    def create_voice(self, request: CreateVoiceRequest) -> Voice:
        resp = self.post_json(self.get_url("/create-voice"), request.to_dict(), "create_voice")
        voice = Voice.from_dict(resp.json())
        self.logger.info("Created voice %s (%s)", voice.name, voice.id)
        return voice
