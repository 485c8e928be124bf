# -*- coding: utf-8 -*-
"""Work out which provider a settings.json currently points at."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..providers.models import ProviderDefinition
from ..providers.registry import detect_provider_by_base_url
from .merge import AUTH_TOKEN_KEY, BASE_URL_KEY, MODEL_KEY


class DetectedConfig(BaseModel):
    """Provider configuration found in settings.json (all optional)."""

    provider: Optional[ProviderDefinition] = None
    region_id: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return self.provider is not None


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def detect_config(settings: Dict[str, Any]) -> DetectedConfig:
    """Reverse-map *settings* to a provider and region.

    Needs both base URL and auth token; an unknown base URL leaves
    ``provider`` unset instead of failing.
    """
    env = settings.get("env")
    if not isinstance(env, dict):
        return DetectedConfig()

    base_url = _as_str(env.get(BASE_URL_KEY))
    api_key = _as_str(env.get(AUTH_TOKEN_KEY))
    if not base_url or not api_key:
        return DetectedConfig()

    provider = detect_provider_by_base_url(base_url)
    region_id: Optional[str] = None
    if provider is not None:
        for region in provider.regions:
            if region.base_url == base_url:
                region_id = region.id
                break

    return DetectedConfig(
        provider=provider,
        region_id=region_id,
        api_key=api_key,
        base_url=base_url,
        model=_as_str(env.get(MODEL_KEY)),
    )
