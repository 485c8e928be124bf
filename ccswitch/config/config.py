# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import BaseModel, Field

from ..constant import DEFAULT_LANG


class AppConfig(BaseModel):
    """Root config (config.json): the user's last selections."""

    lang: str = Field(default=DEFAULT_LANG, description="UI locale")
    provider: Optional[str] = Field(
        default=None,
        description="Selected provider id",
    )
    region: Optional[str] = Field(
        default=None,
        description="Selected region id of the provider",
    )
    model: Optional[str] = Field(
        default=None,
        description="Selected model id",
    )
    api_key: Optional[str] = Field(default=None, description="API key")

    def is_complete(self) -> bool:
        """Whether everything needed to apply a provider is set."""
        return bool(
            self.provider and self.region and self.model and self.api_key,
        )
