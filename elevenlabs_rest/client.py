"""
ElevenLabs API client.

One ``ElevenLabsClient`` owns the HTTP session and one object per endpoint
group. Endpoints receive the client explicitly; nothing is shared globally.

Usage:
    with ElevenLabsClient() as client:
        for voice in client.voices.get_all_voices():
            print(voice.name, voice.id)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union
import logging

import requests

from . import __version__
from .cache_config import get_cache_root
from .config import ElevenLabsSettings, resolve_auth, resolve_settings
from .dubbing.endpoint import DubbingEndpoint
from .errors import AuthenticationError
from .history.endpoint import HistoryEndpoint
from .models.endpoint import ModelsEndpoint
from .sound_generation.endpoint import SoundGenerationEndpoint
from .text_to_speech.endpoint import TextToSpeechEndpoint
from .user.endpoint import UserEndpoint
from .voice_generation.endpoint import VoiceGenerationEndpoint
from .voices.endpoint import VoicesEndpoint


logger = logging.getLogger("elevenlabs.client")


class ElevenLabsClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[ElevenLabsSettings] = None,
        config_directory: Optional[Union[str, Path]] = None,
        session: Optional[requests.Session] = None,
        debug: bool = False,
        cache_root: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            api_key: API key. Falls back to a ``.elevenlabs`` file, then the environment.
            settings: Domain / API version / timeout. Resolved like the key when omitted.
            config_directory: Directory the ``.elevenlabs`` search starts from (cwd by default)
            session: Preconfigured ``requests.Session`` to use
            debug: Log every response at DEBUG level
            cache_root: Root of the download cache (see ``cache_config``)

        Raises:
            AuthenticationError: No API key could be resolved.
        """
        auth = resolve_auth(api_key, config_directory)
        if auth is None:
            raise AuthenticationError(
                "No ElevenLabs API key found. Pass api_key, add a .elevenlabs file "
                "or set ELEVENLABS_API_KEY."
            )

        self.auth = auth
        self.settings = settings or resolve_settings(config_directory)
        self.debug = debug
        self.cache_root = get_cache_root(cache_root)

        self.session = session or requests.Session()
        # Content-Type is left to each request; multipart uploads set their own boundary.
        self.session.headers.update(
            {
                "xi-api-key": auth.api_key,
                "User-Agent": f"elevenlabs-rest-python/{__version__}",
            }
        )

        self.user = UserEndpoint(self)
        self.voices = VoicesEndpoint(self)
        self.models = ModelsEndpoint(self)
        self.history = HistoryEndpoint(self)
        self.text_to_speech = TextToSpeechEndpoint(self)
        self.sound_generation = SoundGenerationEndpoint(self)
        self.voice_generation = VoiceGenerationEndpoint(self)
        self.dubbing = DubbingEndpoint(self)

        logger.debug("ElevenLabs client ready: %s", self.settings.base_request_url)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ElevenLabsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ElevenLabsClient(base_url={self.settings.base_request_url!r})"
