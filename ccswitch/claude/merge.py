# -*- coding: utf-8 -*-
"""Compute new settings.json documents for apply and unload.

Both functions are pure: they take the current document and return a new
one without touching the input or the file system.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Optional, Union

from ..exceptions import UnknownRegionError
from ..providers.models import ProviderDefinition

EnvValue = Union[str, int]

AUTH_TOKEN_KEY = "ANTHROPIC_AUTH_TOKEN"
BASE_URL_KEY = "ANTHROPIC_BASE_URL"
TIMEOUT_KEY = "API_TIMEOUT_MS"
DISABLE_TRAFFIC_KEY = "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC"
MODEL_KEY = "ANTHROPIC_MODEL"

DEFAULT_TIMEOUT_MS = "3000000"
DEFAULT_DISABLE_TRAFFIC = 1

# All env keys we manage. Anything else in ``env`` belongs to the user.
MANAGED_ENV_KEYS = frozenset(
    {
        AUTH_TOKEN_KEY,
        BASE_URL_KEY,
        TIMEOUT_KEY,
        DISABLE_TRAFFIC_KEY,
        MODEL_KEY,
        "ANTHROPIC_SMALL_FAST_MODEL",
        "ANTHROPIC_DEFAULT_SONNET_MODEL",
        "ANTHROPIC_DEFAULT_OPUS_MODEL",
        "ANTHROPIC_DEFAULT_HAIKU_MODEL",
        "CLAUDE_CODE_SUBAGENT_MODEL",
    },
)


def strip_managed_env(env: Any) -> Dict[str, EnvValue]:
    """Return a copy of *env* without any managed key."""
    if not isinstance(env, dict):
        return {}
    return {
        key: deepcopy(value)
        for key, value in env.items()
        if key not in MANAGED_ENV_KEYS
    }


def map_model_to_setting(provider: ProviderDefinition, model_id: str) -> str:
    """Value for the top-level ``model`` setting.

    Claude Code understands ``opus``/``sonnet``/``haiku`` for the official
    API; every other provider gets the raw model id.
    """
    for alias in provider.model_aliases:
        if alias in model_id:
            return alias
    return model_id


def apply_provider_config(
    provider: ProviderDefinition,
    region_id: str,
    model_id: str,
    api_key: str,
    settings: Dict[str, Any],
) -> Dict[str, Any]:
    """Return *settings* reconfigured for *provider*.

    Managed env keys are replaced wholesale; every other key is kept.
    """
    region = provider.get_region(region_id)
    if region is None:
        raise UnknownRegionError(provider.id, region_id)

    env: Dict[str, EnvValue] = strip_managed_env(settings.get("env"))
    env.update(
        {
            AUTH_TOKEN_KEY: api_key,
            BASE_URL_KEY: region.base_url,
            TIMEOUT_KEY: DEFAULT_TIMEOUT_MS,
            DISABLE_TRAFFIC_KEY: DEFAULT_DISABLE_TRAFFIC,
        },
    )
    env.update(provider.get_env_overrides(model_id))

    result = deepcopy(settings)
    result["env"] = env
    result["model"] = map_model_to_setting(provider, model_id)
    return result


def unload_provider_config(
    settings: Dict[str, Any],
) -> Optional[Dict[str, Any]]:
    """Return *settings* with every managed key and ``model`` removed.

    Returns ``None`` when there is nothing to remove (no ``env`` and no
    ``model``). An ``env`` left empty is dropped altogether.
    """
    if not settings.get("env") and not settings.get("model"):
        return None

    result: Dict[str, Any] = {}
    for key, value in settings.items():
        if key == "model":
            continue
        if key == "env":
            env = strip_managed_env(value)
            if env:
                result["env"] = env
            continue
        result[key] = deepcopy(value)
    return result
