"""
Sound generation: sound effects from a text prompt.
"""

from .endpoint import SoundGenerationEndpoint
from .request import SoundGenerationRequest

__all__ = ["SoundGenerationEndpoint", "SoundGenerationRequest"]
