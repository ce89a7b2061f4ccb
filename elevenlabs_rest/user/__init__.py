"""
User: account information and subscription quota.
"""

from .dto import AvailableModel, NextInvoice, SubscriptionInfo, SupportedLanguage, UserInfo
from .endpoint import UserEndpoint

__all__ = [
    "AvailableModel",
    "NextInvoice",
    "SubscriptionInfo",
    "SupportedLanguage",
    "UserInfo",
    "UserEndpoint",
]
