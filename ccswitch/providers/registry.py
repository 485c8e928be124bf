# -*- coding: utf-8 -*-
"""Built-in provider definitions and registry."""

from __future__ import annotations

from typing import List, Optional

from .models import ModelInfo, ProviderDefinition, RegionInfo

# ---------------------------------------------------------------------------
# Model routing keys
# ---------------------------------------------------------------------------

ANTHROPIC_MODEL = "ANTHROPIC_MODEL"
ANTHROPIC_SMALL_FAST_MODEL = "ANTHROPIC_SMALL_FAST_MODEL"
ANTHROPIC_DEFAULT_SONNET_MODEL = "ANTHROPIC_DEFAULT_SONNET_MODEL"
ANTHROPIC_DEFAULT_OPUS_MODEL = "ANTHROPIC_DEFAULT_OPUS_MODEL"
ANTHROPIC_DEFAULT_HAIKU_MODEL = "ANTHROPIC_DEFAULT_HAIKU_MODEL"
CLAUDE_CODE_SUBAGENT_MODEL = "CLAUDE_CODE_SUBAGENT_MODEL"

# Trailing path segment some providers add to their Anthropic endpoint.
ANTHROPIC_PATH_SUFFIX = "/anthropic"

# ---------------------------------------------------------------------------
# Built-in model lists
# ---------------------------------------------------------------------------

CLAUDE_MODELS: List[ModelInfo] = [
    ModelInfo(
        id="claude-opus-4-5-20251120",
        name="Claude Opus 4.5",
        default=True,
    ),
    ModelInfo(id="claude-sonnet-4-20250514", name="Claude Sonnet 4"),
    ModelInfo(id="claude-haiku-3-5-20250620", name="Claude Haiku 3.5"),
    ModelInfo(id="claude-3-5-sonnet-20241022", name="Claude 3.5 Sonnet"),
    ModelInfo(id="claude-3-opus-20240229", name="Claude 3 Opus"),
    ModelInfo(id="claude-3-sonnet-20240229", name="Claude 3 Sonnet"),
    ModelInfo(id="claude-3-haiku-20240307", name="Claude 3 Haiku"),
]

ZHIPU_MODELS: List[ModelInfo] = [
    ModelInfo(id="glm-5", name="GLM-5", default=True),
]

MINIMAX_MODELS: List[ModelInfo] = [
    ModelInfo(id="MiniMax-M2.5", name="MiniMax-M2.5", default=True),
]

KIMI_MODELS: List[ModelInfo] = [
    ModelInfo(id="kimi-k2.5", name="Kimi K2.5 (Latest)", default=True),
    ModelInfo(
        id="kimi-k2-thinking-turbo",
        name="Kimi K2 Thinking Turbo",
        thinking=True,
    ),
    ModelInfo(
        id="kimi-k2-turbo-preview",
        name="Kimi K2 Turbo Preview (Fast)",
    ),
    ModelInfo(
        id="kimi-k2-0905-preview",
        name="Kimi K2 0905 Preview (256K)",
    ),
]

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_CLAUDE = ProviderDefinition(
    id="claude",
    name="Anthropic (Claude)",
    description="Official Anthropic Claude API",
    regions=[
        RegionInfo(
            id="global",
            name="Global",
            base_url="https://api.anthropic.com",
            api_key_url="https://console.anthropic.com/settings/keys",
            validate_url="https://api.anthropic.com/v1/models",
        ),
    ],
    models=CLAUDE_MODELS,
    env_model_keys=[ANTHROPIC_MODEL],
    model_aliases=["opus", "sonnet", "haiku"],
)

# GLM uses Claude Code's default model routing, no overrides needed.
PROVIDER_ZHIPU = ProviderDefinition(
    id="zhipu",
    name="Z.AI / GLM",
    description="Zhipu AI GLM Coding Plan",
    regions=[
        RegionInfo(
            id="global",
            name="Global",
            base_url="https://api.z.ai/api/anthropic",
            api_key_url="https://z.ai/manage-apikey/apikey-list",
            validate_url="https://api.z.ai/api/coding/paas/v4/models",
        ),
        RegionInfo(
            id="china",
            name="China",
            base_url="https://open.bigmodel.cn/api/anthropic",
            api_key_url="https://bigmodel.cn/usercenter/proj-mgmt/apikeys",
            validate_url="https://open.bigmodel.cn/api/coding/paas/v4/models",
        ),
    ],
    models=ZHIPU_MODELS,
)

PROVIDER_MINIMAX = ProviderDefinition(
    id="minimax",
    name="MiniMax",
    description="MiniMax M2.5 AI Model",
    regions=[
        RegionInfo(
            id="global",
            name="Global",
            base_url="https://api.minimax.io/anthropic",
            api_key_url=(
                "https://platform.minimax.io/user-center/"
                "basic-information/interface-key"
            ),
            validate_url="https://api.minimax.io/anthropic/v1/models",
        ),
        RegionInfo(
            id="china",
            name="China",
            base_url="https://api.minimaxi.com/anthropic",
            api_key_url=(
                "https://platform.minimaxi.com/user-center/"
                "basic-information/interface-key"
            ),
            validate_url="https://api.minimaxi.com/anthropic/v1/models",
        ),
    ],
    models=MINIMAX_MODELS,
    env_model_keys=[
        ANTHROPIC_MODEL,
        ANTHROPIC_SMALL_FAST_MODEL,
        ANTHROPIC_DEFAULT_SONNET_MODEL,
        ANTHROPIC_DEFAULT_OPUS_MODEL,
        ANTHROPIC_DEFAULT_HAIKU_MODEL,
    ],
)

PROVIDER_KIMI = ProviderDefinition(
    id="kimi",
    name="Kimi / Moonshot",
    description="Moonshot AI Kimi K2 Models",
    regions=[
        RegionInfo(
            id="global",
            name="Global",
            base_url="https://api.moonshot.ai/anthropic",
            api_key_url="https://platform.moonshot.ai/console/api-keys",
            validate_url="https://api.moonshot.ai/v1/models",
        ),
    ],
    models=KIMI_MODELS,
    env_model_keys=[
        ANTHROPIC_MODEL,
        ANTHROPIC_DEFAULT_SONNET_MODEL,
        ANTHROPIC_DEFAULT_OPUS_MODEL,
        ANTHROPIC_DEFAULT_HAIKU_MODEL,
        CLAUDE_CODE_SUBAGENT_MODEL,
    ],
)

# Registry: provider_id -> ProviderDefinition
PROVIDERS: dict[str, ProviderDefinition] = {
    PROVIDER_CLAUDE.id: PROVIDER_CLAUDE,
    PROVIDER_ZHIPU.id: PROVIDER_ZHIPU,
    PROVIDER_MINIMAX.id: PROVIDER_MINIMAX,
    PROVIDER_KIMI.id: PROVIDER_KIMI,
}


def get_provider(provider_id: str) -> Optional[ProviderDefinition]:
    """Return a provider definition by id, or None if not found."""
    return PROVIDERS.get(provider_id)


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions."""
    return list(PROVIDERS.values())


def _strip_path_suffix(base_url: str) -> str:
    if base_url.endswith(ANTHROPIC_PATH_SUFFIX):
        return base_url[: -len(ANTHROPIC_PATH_SUFFIX)]
    return base_url


def detect_provider_by_base_url(
    base_url: str,
) -> Optional[ProviderDefinition]:
    """Return the provider serving *base_url*, or None if unrecognised.

    Matches on the region URL without its ``/anthropic`` suffix so URLs
    with extra path segments are still attributed to their provider.
    """
    if not base_url:
        return None
    for provider in PROVIDERS.values():
        for region in provider.regions:
            if base_url.startswith(_strip_path_suffix(region.base_url)):
                return provider
    return None
