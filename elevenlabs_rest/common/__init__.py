"""
Building blocks shared by the endpoint groups: DTO helpers, the endpoint base
class, output formats and cached audio clips.
"""

from .base_endpoint import BaseEndpoint
from .clips import AudioChunk, GeneratedClip, VoiceClip, pcm_to_segment, write_pcm_as_wav
from .dto import JsonDto, to_json_value, wire
from .output_format import OutputFormat
from .transcript import TimestampedTranscriptCharacter, parse_alignment, parse_transcription
from .utils import generate_guid, safe_filename, sanitize_path_component, unix_to_datetime

__all__ = [
    "BaseEndpoint",
    "AudioChunk",
    "GeneratedClip",
    "VoiceClip",
    "pcm_to_segment",
    "write_pcm_as_wav",
    "JsonDto",
    "to_json_value",
    "wire",
    "OutputFormat",
    "TimestampedTranscriptCharacter",
    "parse_alignment",
    "parse_transcription",
    "generate_guid",
    "safe_filename",
    "sanitize_path_component",
    "unix_to_datetime",
]
