"""
Voice management: list, inspect, add, edit and delete voices and their samples.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union
import json

from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.common.clips import VoiceClip

from .dto import Sample, Voice, VoiceSettings


VoiceRef = Union[Voice, str]


def _voice_id(voice: Optional[VoiceRef]) -> str:
    voice_id = voice.voice_id if isinstance(voice, Voice) else voice
    if not voice_id or not str(voice_id).strip():
        raise ValueError("voice_id is required")
    return str(voice_id)


def _extension_for_mime_type(mime_type: Optional[str]) -> str:
    mime_type = (mime_type or "").lower()
    if "mpeg" in mime_type or "mp3" in mime_type:
        return ".mp3"
    if "wav" in mime_type:
        return ".wav"
    return ".ogg"


class VoicesEndpoint(BaseEndpoint):
    root = "voices"

    def __init__(self, client, max_workers: int = 4):
        super().__init__(client)
        self.max_workers = max_workers

    def get_all_voices(self) -> List[Voice]:
        """List every voice on the account, with its settings attached."""
        data = self.get_json(self.get_url(), "get_all_voices")
        voices = [Voice.from_dict(v) for v in data.get("voices") or []]
        if not voices:
            return voices

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            settings = list(pool.map(lambda v: self.get_voice_settings(v.voice_id), voices))

        return [replace(voice, settings=s) for voice, s in zip(voices, settings)]

    def get_default_voice_settings(self) -> VoiceSettings:
        data = self.get_json(self.get_url("/settings/default"), "get_default_voice_settings")
        return VoiceSettings.from_dict(data)

    def get_voice_settings(self, voice: VoiceRef) -> VoiceSettings:
        voice_id = _voice_id(voice)
        data = self.get_json(self.get_url(f"/{voice_id}/settings"), "get_voice_settings")
        return VoiceSettings.from_dict(data)

    def get_voice(self, voice: VoiceRef, with_settings: bool = False) -> Voice:
        voice_id = _voice_id(voice)
        url = self.get_url(f"/{voice_id}", {"with_settings": str(with_settings).lower()})
        return Voice.from_dict(self.get_json(url, "get_voice"))

    def edit_voice_settings(self, voice: VoiceRef, voice_settings: VoiceSettings) -> bool:
        voice_id = _voice_id(voice)
        self.post_json(
            self.get_url(f"/{voice_id}/settings/edit"),
            voice_settings.to_dict(),
            "edit_voice_settings",
        )
        return True

    def add_voice(
        self,
        name: str,
        sample_paths: Optional[Iterable[Union[str, Path]]] = None,
        labels: Optional[Mapping[str, str]] = None,
    ) -> Voice:
        """Create a cloned voice from local sample files."""
        if not name or not name.strip():
            raise ValueError("name is required")

        data, files = self._voice_form(name, sample_paths, labels)
        resp = self.request("POST", self.get_url("/add"), "add_voice", data=data, files=files)
        voice_id = resp.json().get("voice_id")
        self.logger.info("Added voice %s (%s)", name, voice_id)
        return self.get_voice(voice_id)

    def edit_voice(
        self,
        voice: Voice,
        sample_paths: Optional[Iterable[Union[str, Path]]] = None,
        labels: Optional[Mapping[str, str]] = None,
    ) -> bool:
        if voice is None:
            raise ValueError("voice is required")
        voice_id = _voice_id(voice)

        data, files = self._voice_form(voice.name or "", sample_paths, labels)
        self.request("POST", self.get_url(f"/{voice_id}/edit"), "edit_voice", data=data, files=files)
        return True

    def delete_voice(self, voice: VoiceRef) -> bool:
        voice_id = _voice_id(voice)
        return self.delete(self.get_url(f"/{voice_id}"), "delete_voice")

    # ---------------------
    # Samples
    # ---------------------
    def download_voice_sample_audio(self, voice: Voice, sample: Sample) -> VoiceClip:
        """Download a voice sample into the cache, unless it is already there."""
        voice_id = _voice_id(voice)
        if sample is None or not sample.sample_id:
            raise ValueError("sample is required")

        directory = self.cache_directory(voice_id, "Samples")
        cached_path = directory / f"{sample.sample_id}{_extension_for_mime_type(sample.mime_type)}"

        if not cached_path.exists():
            resp = self.request(
                "GET",
                self.get_url(f"/{voice_id}/samples/{sample.sample_id}/audio"),
                "download_voice_sample_audio",
            )
            cached_path.write_bytes(resp.content)
            self.logger.info("Downloaded sample %s -> %s", sample.sample_id, cached_path)

        return VoiceClip(id=sample.sample_id, text="", cached_path=cached_path, voice=voice)

    def delete_voice_sample(self, voice: VoiceRef, sample: Union[Sample, str]) -> bool:
        voice_id = _voice_id(voice)
        sample_id = sample.sample_id if isinstance(sample, Sample) else sample
        if not sample_id or not sample_id.strip():
            raise ValueError("sample_id is required")
        return self.delete(self.get_url(f"/{voice_id}/samples/{sample_id}"), "delete_voice_sample")

    # ---------------------
    # Internals
    # ---------------------
    def _voice_form(
        self,
        name: str,
        sample_paths: Optional[Iterable[Union[str, Path]]],
        labels: Optional[Mapping[str, str]],
    ) -> Tuple[Dict[str, str], List[Tuple[str, Tuple[str, bytes]]]]:
        data: Dict[str, str] = {"name": name}
        if labels is not None:
            data["labels"] = json.dumps(dict(labels))

        files: List[Tuple[str, Tuple[str, bytes]]] = []
        for sample in sample_paths or []:
            if not sample or not str(sample).strip():
                continue
            path = Path(sample)
            if not path.is_file():
                self.logger.error("No sample clip found at %s!", path)
                continue
            try:
                files.append(("files", (path.name, path.read_bytes())))
            except OSError as exc:
                self.logger.error("Failed to read sample %s: %s", path, exc)
        return data, files
