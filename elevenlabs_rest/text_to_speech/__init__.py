"""
Text-to-speech: complete and streamed synthesis.

Usage:
    from elevenlabs_rest import ElevenLabsClient
    from elevenlabs_rest.voices import RACHEL

    with ElevenLabsClient() as client:
        clip = client.text_to_speech.text_to_speech("Hello!", RACHEL)
        print(clip.cached_path)
"""

from .endpoint import TextToSpeechEndpoint
from .request import TextToSpeechRequest
from .stream import TextToSpeechStream

__all__ = ["TextToSpeechEndpoint", "TextToSpeechRequest", "TextToSpeechStream"]
