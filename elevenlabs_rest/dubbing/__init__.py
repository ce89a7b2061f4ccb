"""
Dubbing: upload media, wait for the dub, fetch transcripts and dubbed files.
"""

from .dto import (
    DubbingFormat,
    DubbingProjectMetadata,
    DubbingRequest,
    DubbingResponse,
    DubbingStream,
    media_type_for,
)
from .endpoint import DubbingEndpoint

__all__ = [
    "DubbingEndpoint",
    "DubbingFormat",
    "DubbingProjectMetadata",
    "DubbingRequest",
    "DubbingResponse",
    "DubbingStream",
    "media_type_for",
]
