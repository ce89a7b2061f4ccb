"""
Models: synthesis model descriptors and the ``models`` endpoint.
"""

from .dto import Language, Model
from .endpoint import ModelsEndpoint

__all__ = [
    "Language",
    "Model",
    "ModelsEndpoint",
]
