"""
Shared request plumbing for every endpoint group.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional
from urllib.parse import urlencode
import logging

import requests

from elevenlabs_rest.cache_config import get_cache_directory
from elevenlabs_rest.errors import ElevenLabsHTTPError

if TYPE_CHECKING:
    from elevenlabs_rest.client import ElevenLabsClient


class BaseEndpoint:
    """Base class for an API route group (``/v1/<root>/...``)."""

    root: str = ""
    log_name: str = ""

    def __init__(self, client: "ElevenLabsClient"):
        self.client = client
        self.logger = logging.getLogger(f"elevenlabs.{self.log_name or self.root or 'endpoint'}")

    # ---------------------
    # URLs
    # ---------------------
    def get_url(self, suffix: str = "", query: Optional[Mapping[str, Any]] = None) -> str:
        url = f"{self.client.settings.base_request_url}{self.root}{suffix}"
        if query:
            params = {k: v for k, v in query.items() if v is not None}
            if params:
                url = f"{url}?{urlencode(params)}"
        return url

    def cache_directory(self, *parts: str) -> Path:
        return get_cache_directory(*parts, cache_root=self.client.cache_root)

    # ---------------------
    # Requests
    # ---------------------
    def request(
        self,
        method: str,
        url: str,
        operation: Optional[str] = None,
        **kwargs,
    ) -> requests.Response:
        kwargs.setdefault("timeout", self.client.settings.timeout)
        resp = self.client.session.request(method, url, **kwargs)
        self.validate(resp, method, url, operation)
        return resp

    def validate(
        self,
        resp: requests.Response,
        method: str,
        url: str,
        operation: Optional[str] = None,
    ) -> None:
        if not 200 <= resp.status_code < 300:
            body = resp.text
            self.logger.error("%s %s failed [%s]: %s", method, url, resp.status_code, body)
            raise ElevenLabsHTTPError(resp.status_code, method, url, body, operation)
        if self.client.debug:
            self.logger.debug("%s %s [%s] %s", method, url, resp.status_code, _preview(resp))

    def get_json(self, url: str, operation: Optional[str] = None, **kwargs) -> Any:
        return self.request("GET", url, operation, **kwargs).json()

    def post_json(
        self,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        **kwargs,
    ) -> requests.Response:
        return self.request("POST", url, operation, json=payload, **kwargs)

    def delete(self, url: str, operation: Optional[str] = None) -> bool:
        self.request("DELETE", url, operation)
        return True


def _preview(resp: requests.Response, limit: int = 2000) -> str:
    content_type = resp.headers.get("Content-Type") or ""
    if not content_type.startswith(("application/json", "text/")):
        return f"<{content_type or 'binary'} body>"
    text = resp.text
    return text if len(text) <= limit else text[:limit] + "..."
