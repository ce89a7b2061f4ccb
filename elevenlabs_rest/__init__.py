"""
ElevenLabs REST client.

Endpoint groups hang off ``ElevenLabsClient``:
- user: account and subscription
- voices: voice management and samples
- models: synthesis models
- history: past synthesis calls and their audio
- text_to_speech: complete and streamed synthesis
- sound_generation: sound effects from a prompt
- voice_generation: preview voices and voice creation
- dubbing: dubbing projects

Usage:
    from elevenlabs_rest import ElevenLabsClient
    from elevenlabs_rest.voices import RACHEL

    with ElevenLabsClient() as client:
        clip = client.text_to_speech.text_to_speech("Hello there!", RACHEL)
        audio = clip.load_audio()
"""

__version__ = "0.1.0"

from .client import ElevenLabsClient
from .common.clips import AudioChunk, GeneratedClip, VoiceClip
from .common.output_format import OutputFormat
from .common.transcript import TimestampedTranscriptCharacter
from .config import ElevenLabsAuth, ElevenLabsSettings
from .errors import (
    AuthenticationError,
    DubbingError,
    ElevenLabsError,
    ElevenLabsHTTPError,
    OperationCancelledError,
)
from .importer import copy_into_project

__all__ = [
    "ElevenLabsClient",
    "ElevenLabsSettings",
    "ElevenLabsAuth",
    "ElevenLabsError",
    "AuthenticationError",
    "ElevenLabsHTTPError",
    "DubbingError",
    "OperationCancelledError",
    "AudioChunk",
    "GeneratedClip",
    "VoiceClip",
    "OutputFormat",
    "TimestampedTranscriptCharacter",
    "copy_into_project",
]
