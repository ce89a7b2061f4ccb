"""
Local download cache layout.

Downloaded and synthesized audio is kept under a single cache root:

    <cache root>/ElevenLabs/TextToSpeech/<voice id>/<clip id>.mp3
    <cache root>/ElevenLabs/History/<voice id>/<history item id>.mp3
    <cache root>/ElevenLabs/<voice id>/Samples/<sample id>.mp3
    ...

The root is taken from the ELEVENLABS_CACHE_ROOT environment variable if set,
otherwise ``~/.cache/elevenlabs``.
"""

import os
from pathlib import Path
from typing import Optional, Union


ENV_CACHE_ROOT = "ELEVENLABS_CACHE_ROOT"
CACHE_NAMESPACE = "ElevenLabs"


def get_cache_root(cache_root: Optional[Union[str, Path]] = None) -> Path:
    """
    Returns the root directory of the download cache.

    Priority:
    1. Explicit ``cache_root`` argument.
    2. ELEVENLABS_CACHE_ROOT environment variable.
    3. ``~/.cache/elevenlabs``.
    """
    if cache_root:
        return Path(cache_root).expanduser().resolve()

    env_root = os.environ.get(ENV_CACHE_ROOT)
    if env_root:
        return Path(env_root).expanduser().resolve()

    return Path.home() / ".cache" / "elevenlabs"


def get_cache_directory(*parts: str, cache_root: Optional[Union[str, Path]] = None) -> Path:
    """
    Returns ``<cache root>/ElevenLabs/<parts...>``, creating it if needed.
    """
    directory = get_cache_root(cache_root) / CACHE_NAMESPACE
    for part in parts:
        directory = directory / part
    directory.mkdir(parents=True, exist_ok=True)
    return directory
