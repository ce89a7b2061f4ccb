"""
Authentication and connection settings for the ElevenLabs API.

The API key is resolved in this order:
1. An explicit ``api_key`` argument.
2. A ``.elevenlabs`` config file found in a directory or one of its parents.
3. A ``.elevenlabs`` config file in the user's home directory.
4. The ``ELEVEN_LABS_API_KEY`` / ``ELEVENLABS_API_KEY`` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union
import json
import logging
import os


logger = logging.getLogger("elevenlabs.config")


CONFIG_FILE = ".elevenlabs"
ELEVENLABS_API_KEY = "ELEVENLABS_API_KEY"
ELEVEN_LABS_API_KEY = "ELEVEN_LABS_API_KEY"
ENV_PROXY_DOMAIN = "ELEVENLABS_PROXY_DOMAIN"
ENV_API_VERSION = "ELEVENLABS_API_VERSION"

ELEVENLABS_DOMAIN = "api.elevenlabs.io"
DEFAULT_API_VERSION = "v1"
HTTP = "http://"
HTTPS = "https://"


@dataclass
class ElevenLabsSettings:
    """
    Where requests are sent.

    Attributes:
        domain: API host, optionally prefixed with ``http://`` or ``https://``.
                Blank means the public ElevenLabs API. A proxy host can be used.
        api_version: Version path segment, ``v1`` by default.
        timeout: Per-request timeout in seconds.
    """

    domain: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 120.0
    protocol: str = field(init=False, default=HTTPS)

    def __post_init__(self):
        domain = (self.domain or "").strip()
        if not domain:
            domain = ELEVENLABS_DOMAIN

        if "." not in domain and ":" not in domain:
            raise ValueError(f'Invalid parameter "domain": {domain!r}')

        if domain.startswith(HTTP):
            self.protocol = HTTP
            domain = domain[len(HTTP):]
        elif domain.startswith(HTTPS):
            self.protocol = HTTPS
            domain = domain[len(HTTPS):]

        self.domain = domain.rstrip("/")
        if not (self.api_version or "").strip():
            self.api_version = DEFAULT_API_VERSION

    @property
    def base_request_url(self) -> str:
        return f"{self.protocol}{self.domain}/{self.api_version}/"


@dataclass(frozen=True)
class ElevenLabsAuth:
    api_key: str

    def __repr__(self) -> str:
        return "ElevenLabsAuth(api_key='***')"


def load_auth_from_env() -> Optional[ElevenLabsAuth]:
    api_key = os.getenv(ELEVEN_LABS_API_KEY)
    if not api_key or not api_key.strip():
        api_key = os.getenv(ELEVENLABS_API_KEY)
    if not api_key or not api_key.strip():
        return None
    return ElevenLabsAuth(api_key=api_key.strip())


def load_settings_from_env() -> ElevenLabsSettings:
    return ElevenLabsSettings(
        domain=os.getenv(ENV_PROXY_DOMAIN),
        api_version=os.getenv(ENV_API_VERSION, DEFAULT_API_VERSION),
    )


def _parse_config_file(path: Path) -> Dict[str, str]:
    """
    Read a config file either as JSON or as ``KEY=VALUE`` / ``KEY: VALUE`` lines.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return {
                "api_key": data.get("api_key") or data.get("apiKey"),
                "proxy_domain": data.get("proxy_domain") or data.get("proxyDomain"),
                "api_version": data.get("api_version") or data.get("apiVersion"),
            }
    except ValueError:
        # Not JSON, fall through to the line based format.
        pass

    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        sep = "=" if "=" in line else ":"
        if sep not in line:
            continue
        key, value = line.split(sep, 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key in (ELEVENLABS_API_KEY, ELEVEN_LABS_API_KEY):
            values["api_key"] = value
        elif key == ENV_PROXY_DOMAIN:
            values["proxy_domain"] = value
        elif key == ENV_API_VERSION:
            values["api_version"] = value
    return values


def find_config_file(
    directory: Optional[Union[str, Path]] = None,
    filename: str = CONFIG_FILE,
    search_up: bool = True,
) -> Optional[Path]:
    current = Path(directory).expanduser().resolve() if directory else Path.cwd()
    filename = filename or CONFIG_FILE
    while True:
        candidate = current / filename
        if candidate.is_file():
            return candidate
        if not search_up or current.parent == current:
            return None
        current = current.parent


def load_auth_from_directory(
    directory: Optional[Union[str, Path]] = None,
    filename: str = CONFIG_FILE,
    search_up: bool = True,
) -> Optional[ElevenLabsAuth]:
    path = find_config_file(directory, filename, search_up)
    if path is None:
        return None
    api_key = _parse_config_file(path).get("api_key")
    if not api_key:
        logger.warning("Config file %s has no API key", path)
        return None
    logger.debug("Loaded ElevenLabs API key from %s", path)
    return ElevenLabsAuth(api_key=api_key)


def load_settings_from_directory(
    directory: Optional[Union[str, Path]] = None,
    filename: str = CONFIG_FILE,
    search_up: bool = True,
) -> Optional[ElevenLabsSettings]:
    path = find_config_file(directory, filename, search_up)
    if path is None:
        return None
    values = _parse_config_file(path)
    if not values.get("proxy_domain") and not values.get("api_version"):
        return None
    return ElevenLabsSettings(
        domain=values.get("proxy_domain"),
        api_version=values.get("api_version") or DEFAULT_API_VERSION,
    )


def resolve_auth(
    api_key: Optional[str] = None,
    directory: Optional[Union[str, Path]] = None,
) -> Optional[ElevenLabsAuth]:
    if api_key and api_key.strip():
        return ElevenLabsAuth(api_key=api_key.strip())
    return (
        load_auth_from_directory(directory)
        or load_auth_from_directory(Path.home(), search_up=False)
        or load_auth_from_env()
    )


def resolve_settings(directory: Optional[Union[str, Path]] = None) -> ElevenLabsSettings:
    return load_settings_from_directory(directory) or load_settings_from_env()
