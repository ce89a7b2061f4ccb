"""Text-to-speech request body."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from elevenlabs_rest.common.output_format import OutputFormat
from elevenlabs_rest.models.dto import Model
from elevenlabs_rest.voices.dto import Voice, VoiceSettings


MAX_REQUEST_IDS = 3


@dataclass
class TextToSpeechRequest:
    """
    Parameters of one synthesis call.

    Attributes:
        voice: Voice to speak with. Must carry a voice id.
        text: Text to synthesize. Must not be blank.
        voice_settings: Overrides the voice's own settings.
        model: Synthesis model. ``Model.MONOLINGUAL_V1`` when omitted.
        output_format: Audio encoding requested from the server.
        optimize_streaming_latency: Latency optimization level (0-4), sent as a query parameter.
        previous_text / next_text: Surrounding text, used for continuity between calls.
        previous_request_ids / next_request_ids: Ids of neighbouring requests; at most three are kept.
        language_code: ISO 639-1 code enforcing a language on multilingual models.
        with_timestamps: Also return per character timing. The audio then arrives
            base64 encoded inside JSON, one object per line when streaming.
    """

    voice: Voice
    text: str
    voice_settings: Optional[VoiceSettings] = None
    model: Optional[Model] = None
    output_format: OutputFormat = OutputFormat.MP3_44100_128
    optimize_streaming_latency: Optional[int] = None
    previous_text: Optional[str] = None
    next_text: Optional[str] = None
    previous_request_ids: List[str] = field(default_factory=list)
    next_request_ids: List[str] = field(default_factory=list)
    language_code: Optional[str] = None
    with_timestamps: bool = False

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("text is required")
        if self.voice is None or not (self.voice.voice_id or "").strip():
            raise ValueError("voice is required")

        if self.model is None:
            self.model = Model.MONOLINGUAL_V1
        if self.voice_settings is None:
            self.voice_settings = self.voice.settings
        self.output_format = OutputFormat(self.output_format)

        self.previous_request_ids = list(self.previous_request_ids or [])[:MAX_REQUEST_IDS]
        self.next_request_ids = list(self.next_request_ids or [])[:MAX_REQUEST_IDS]

    @property
    def query(self) -> Dict[str, Any]:
        return {
            "output_format": self.output_format.value,
            "optimize_streaming_latency": self.optimize_streaming_latency,
        }

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"text": self.text, "model_id": self.model.id}
        if self.voice_settings is not None:
            payload["voice_settings"] = self.voice_settings.to_dict()
        if self.previous_text:
            payload["previous_text"] = self.previous_text
        if self.next_text:
            payload["next_text"] = self.next_text
        if self.previous_request_ids:
            payload["previous_request_ids"] = self.previous_request_ids
        if self.next_request_ids:
            payload["next_request_ids"] = self.next_request_ids
        if self.language_code:
            payload["language_code"] = self.language_code
        return payload
