"""
Dubbing: re-voice audio or video into another language.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional, Union
import threading
import time

from elevenlabs_rest.common.base_endpoint import BaseEndpoint
from elevenlabs_rest.errors import DubbingError, ElevenLabsError, OperationCancelledError

from .dto import DubbingFormat, DubbingProjectMetadata, DubbingRequest, DubbingResponse


DEFAULT_MAX_RETRIES = 60
MIN_ADJUSTED_INTERVAL = 0.5

DUBBED_EXTENSIONS = {
    "video/mp4": ".mp4",
    "audio/mpeg": ".mp3",
}

DubbingRef = Union[DubbingResponse, DubbingProjectMetadata, str]


def _dubbing_id(dubbing: Optional[DubbingRef]) -> str:
    dubbing_id = dubbing if isinstance(dubbing, str) or dubbing is None else dubbing.id
    if not dubbing_id or not dubbing_id.strip():
        raise ValueError("dubbing_id is required")
    return dubbing_id


def _check_cancelled(cancel: Optional[threading.Event], dubbing_id: str) -> None:
    if cancel is not None and cancel.is_set():
        raise OperationCancelledError(f"Dubbing for {dubbing_id} was cancelled")


class DubbingEndpoint(BaseEndpoint):
    root = "dubbing"

    def dub(
        self,
        request: DubbingRequest,
        max_retries: Optional[int] = None,
        polling_interval: Optional[float] = None,
        progress: Optional[Callable[[DubbingProjectMetadata], None]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> DubbingProjectMetadata:
        """
        Upload media for dubbing and wait until the project is done.

        Args:
            request: Media and options. Closed once uploaded.
            max_retries: Number of status polls before giving up (60 by default)
            polling_interval: Seconds between polls. When omitted, polling starts at
                the expected duration and halves each round.
            progress: Called with the project metadata on every poll
            cancel: Setting this event stops the wait between polls

        Returns:
            Metadata of the finished project, with ``time_completed`` set.

        Raises:
            DubbingError: The project ended in a failure status.
            TimeoutError: The project was still dubbing after ``max_retries`` polls.
            OperationCancelledError: ``cancel`` was set before the project finished.
        """
        if request is None:
            raise ValueError("request is required")

        # Plain fields go as (None, value) parts so the body is multipart even without files.
        try:
            parts = [("file", (dub.name, dub.read(), dub.media_type)) for dub in request.files]
            parts += [(key, (None, value)) for key, value in request.form_fields()]
        finally:
            request.close()

        resp = self.request("POST", self.get_url(), "dub", files=parts)
        response = DubbingResponse.from_dict(resp.json())
        self.logger.info(
            "Dubbing %s started, expected to take %ss", response.id, response.expected_duration_sec
        )

        return self._wait_for_completion(
            response,
            DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
            response.expected_duration_sec if polling_interval is None else polling_interval,
            polling_interval is None,
            progress,
            cancel,
        )

    def _wait_for_completion(
        self,
        response: DubbingResponse,
        max_retries: int,
        interval: float,
        adjust_interval: bool,
        progress: Optional[Callable[[DubbingProjectMetadata], None]],
        cancel: Optional[threading.Event],
    ) -> DubbingProjectMetadata:
        started = time.monotonic()
        for attempt in range(1, max_retries + 1):
            _check_cancelled(cancel, response.id)
            metadata = replace(
                self.get_dubbing_project_metadata(response.id),
                expected_duration_seconds=response.expected_duration_sec,
            )

            if metadata.status == "dubbed":
                metadata = replace(metadata, time_completed=time.monotonic() - started)
                if progress is not None:
                    progress(metadata)
                self.logger.info("Dubbing %s finished in %.1fs", response.id, metadata.time_completed)
                return metadata

            if progress is not None:
                progress(metadata)

            if metadata.status != "dubbing":
                self.logger.error("Dubbing %s failed: %s", response.id, metadata.error)
                raise DubbingError(response.id, metadata.error)

            if adjust_interval and interval > MIN_ADJUSTED_INTERVAL:
                interval = response.expected_duration_sec / (2 ** attempt)
            self.logger.debug(
                "Dubbing %s in progress... checking again in %.2fs", response.id, interval
            )
            if cancel is None:
                time.sleep(interval)
            elif cancel.wait(interval):
                _check_cancelled(cancel, response.id)

        raise TimeoutError(f"Dubbing for {response.id} timed out or exceeded expected duration.")

    def get_dubbing_project_metadata(self, dubbing: DubbingRef) -> DubbingProjectMetadata:
        dubbing_id = _dubbing_id(dubbing)
        data = self.get_json(self.get_url(f"/{dubbing_id}"), "get_dubbing_project_metadata")
        return DubbingProjectMetadata.from_dict(data)

    def get_transcript_for_dub(
        self,
        dubbing: DubbingRef,
        language_code: str,
        format_type: DubbingFormat = DubbingFormat.SRT,
    ) -> str:
        dubbing_id = _dubbing_id(dubbing)
        if not language_code or not language_code.strip():
            raise ValueError("language_code is required")
        url = self.get_url(
            f"/{dubbing_id}/transcript/{language_code}",
            {"format_type": DubbingFormat(format_type).value},
        )
        return self.request("GET", url, "get_transcript_for_dub").text

    def get_dubbed_file(self, dubbing: DubbingRef, language_code: str) -> Path:
        """Download the dubbed media for one language into the cache."""
        dubbing_id = _dubbing_id(dubbing)
        if not language_code or not language_code.strip():
            raise ValueError("language_code is required")

        resp = self.request("GET", self.get_url(f"/{dubbing_id}/audio/{language_code}"), "get_dubbed_file")
        mime_type = (resp.headers.get("Content-Type") or "").split(";")[0].strip()
        extension = DUBBED_EXTENSIONS.get(mime_type)
        if extension is None:
            raise ElevenLabsError(f"Unsupported mime type: {mime_type}")

        path = self.cache_directory("Dubbing") / f"{dubbing_id}_{language_code}{extension}"
        path.write_bytes(resp.content)
        self.logger.info("Downloaded dubbed file %s", path)
        return path

    def delete_dubbing_project(self, dubbing: DubbingRef) -> bool:
        dubbing_id = _dubbing_id(dubbing)
        return self.delete(self.get_url(f"/{dubbing_id}"), "delete_dubbing_project")
