# -*- coding: utf-8 -*-
"""Provider management — models, registry and API key validation."""

from .models import (
    ModelInfo,
    ProviderDefinition,
    RegionInfo,
)
from .registry import (
    PROVIDERS,
    detect_provider_by_base_url,
    get_provider,
    list_providers,
)
from .validator import (
    ValidationResult,
    validate_api_key,
)

__all__ = [
    # models
    "ModelInfo",
    "ProviderDefinition",
    "RegionInfo",
    # registry
    "PROVIDERS",
    "detect_provider_by_base_url",
    "get_provider",
    "list_providers",
    # validator
    "ValidationResult",
    "validate_api_key",
]
