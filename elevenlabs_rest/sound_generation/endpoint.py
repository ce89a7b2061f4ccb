from __future__ import annotations

import uuid

from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.common.clips import GeneratedClip

from .request import SoundGenerationRequest


class SoundGenerationEndpoint(BaseEndpoint):
    root = "sound-generation"

    def generate_sound(self, request: SoundGenerationRequest) -> GeneratedClip:
        """Generate a sound effect and store it as an mp3 in the cache."""
        resp = self.post_json(self.get_url(), request.to_dict(), "generate_sound")

        clip_id = str(uuid.uuid4())
        cached_path = self.cache_directory("SoundGeneration") / f"{clip_id}.mp3"
        cached_path.write_bytes(resp.content)
        self.logger.info("Generated sound %r -> %s", request.text, cached_path)

        return GeneratedClip(id=clip_id, text=request.text, cached_path=cached_path)
