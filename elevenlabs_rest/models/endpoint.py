from __future__ import annotations

from typing import List

from elevenlabs_rest.common.base_endpoint import BaseEndpoint

from .dto import Model


class ModelsEndpoint(BaseEndpoint):
    root = "models"

    def get_models(self) -> List[Model]:
        """List the synthesis models available to the account."""
        data = self.get_json(self.get_url(), "get_models")
        return [Model.from_dict(m) for m in data or []]
