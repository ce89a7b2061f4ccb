from __future__ import annotations

from elevenlabs_rest.common.base_endpoint import BaseEndpoint

from .dto import SubscriptionInfo, UserInfo


class UserEndpoint(BaseEndpoint):
    root = "user"

    def get_user_info(self) -> UserInfo:
        return UserInfo.from_dict(self.get_json(self.get_url(), "get_user_info"))

    def get_subscription_info(self) -> SubscriptionInfo:
        data = self.get_json(self.get_url("/subscription"), "get_subscription_info")
        return SubscriptionInfo.from_dict(data)
