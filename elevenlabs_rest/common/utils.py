"""Small helpers shared by the endpoint modules."""

from __future__ import annotations

from datetime import datetime, timezone
import hashlib
import re
import uuid


_INVALID_PATH_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]+')


def generate_guid(value: str) -> uuid.UUID:
    """Deterministic GUID derived from the MD5 digest of ``value``."""
    digest = hashlib.md5((value or "").encode("utf-8")).digest()
    return uuid.UUID(bytes=digest)


def unix_to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(int(timestamp or 0), tz=timezone.utc)


def safe_filename(prefix: str = "speech", suffix: str = ".mp3") -> str:
    return f"{prefix}_{uuid.uuid4().hex}{suffix}"


def sanitize_path_component(name: str, max_length: int = 64) -> str:
    """Make ``name`` usable as a single directory name."""
    cleaned = _INVALID_PATH_CHARS.sub("_", (name or "").strip()).strip(". ")
    if not cleaned:
        cleaned = "Unnamed"
    return cleaned[:max_length]
