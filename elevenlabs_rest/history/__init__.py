"""
History: past synthesis calls and their audio.
"""

from .dto import HistoryInfo, HistoryItem
from .endpoint import HistoryEndpoint

__all__ = ["HistoryInfo", "HistoryItem", "HistoryEndpoint"]
