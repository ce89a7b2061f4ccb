"""
Access to the account history: every synthesis call and its audio.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional, Union

from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.common.clips import VoiceClip
from elevenlabs_rest.errors import ElevenLabsError
from elevenlabs_rest.voices.dto import Voice

from .dto import HistoryInfo, HistoryItem


HistoryRef = Union[HistoryItem, str]


def _history_item_id(item: Optional[HistoryRef]) -> str:
    item_id = item.history_item_id if isinstance(item, HistoryItem) else item
    if not item_id or not str(item_id).strip():
        raise ValueError("history_item_id is required")
    return str(item_id)


def _extension_for_content_type(content_type: Optional[str]) -> str:
    content_type = (content_type or "").lower()
    if "wav" in content_type or "pcm" in content_type:
        return ".wav"
    return ".mp3"


class HistoryEndpoint(BaseEndpoint):
    root = "history"

    def __init__(self, client, max_workers: int = 4):
        super().__init__(client)
        self.max_workers = max_workers

    def get_history(
        self,
        page_size: Optional[int] = None,
        start_after_id: Optional[str] = None,
    ) -> HistoryInfo:
        url = self.get_url(
            query={"page_size": page_size, "start_after_history_item_id": start_after_id}
        )
        return HistoryInfo.from_dict(self.get_json(url, "get_history"))

    def get_history_item(self, history_item: HistoryRef) -> HistoryItem:
        item_id = _history_item_id(history_item)
        return HistoryItem.from_dict(self.get_json(self.get_url(f"/{item_id}"), "get_history_item"))

    def download_history_audio(self, history_item: HistoryItem) -> VoiceClip:
        """Download the audio of a history item into the cache, unless it is already there."""
        item_id = _history_item_id(history_item)
        if not history_item.voice_id:
            raise ValueError("history item has no voice_id")

        directory = self.cache_directory("History", history_item.voice_id)
        cached_path = directory / f"{item_id}{_extension_for_content_type(history_item.content_type)}"

        if not cached_path.exists():
            resp = self.request("GET", self.get_url(f"/{item_id}/audio"), "download_history_audio")
            cached_path.write_bytes(resp.content)
            self.logger.info("Downloaded history item %s -> %s", item_id, cached_path)

        voice = Voice.from_id(history_item.voice_id, history_item.voice_name)
        return VoiceClip(id=item_id, text=history_item.text, cached_path=cached_path, voice=voice)

    def delete_history_item(self, history_item: HistoryRef) -> bool:
        item_id = _history_item_id(history_item)
        return self.delete(self.get_url(f"/{item_id}"), "delete_history_item")

    def download_history_items(
        self,
        history_item_ids: Optional[Iterable[str]] = None,
        progress: Optional[Callable[[str], None]] = None,
    ) -> List[VoiceClip]:
        """
        Download several history items concurrently.

        Without ids, every item of the first history page is downloaded. An item
        that fails is logged and left out of the result.
        """
        if history_item_ids is None:
            history_item_ids = [item.history_item_id for item in self.get_history().history]
        ids = [i for i in history_item_ids if i and i.strip()]
        if not ids:
            return []

        def download(item_id: str) -> VoiceClip:
            return self.download_history_audio(self.get_history_item(item_id))

        clips: List[VoiceClip] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {pool.submit(download, item_id): item_id for item_id in ids}
            for future in as_completed(futures):
                item_id = futures[future]
                try:
                    clip = future.result()
                except (ElevenLabsError, OSError, ValueError) as exc:
                    self.logger.error("Failed to download history item %s: %s", item_id, exc)
                    continue
                clips.append(clip)
                if progress is not None:
                    progress(item_id)

        self.logger.info("Downloaded %d/%d history items", len(clips), len(ids))
        return clips
