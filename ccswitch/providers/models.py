# -*- coding: utf-8 -*-
"""Pydantic data models for providers, regions and models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelInfo(BaseModel):
    """A single model offered by a provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Model identifier used in API calls")
    name: str = Field(..., description="Human-readable model name")
    thinking: bool = Field(
        default=False,
        description="Whether this is a reasoning (thinking) model",
    )
    default: bool = Field(
        default=False,
        description="Recommended model for the provider",
    )


class RegionInfo(BaseModel):
    """A regional endpoint of a provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Region identifier")
    name: str = Field(..., description="Human-readable region name")
    base_url: str = Field(
        ...,
        description="Anthropic-compatible base URL written to settings",
    )
    api_key_url: str = Field(
        default="",
        description="Console page where users create API keys",
    )
    validate_url: str = Field(
        default="",
        description="Endpoint probed to validate an API key",
    )


class ProviderDefinition(BaseModel):
    """Static definition of a built-in provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    description: str = Field(default="", description="Short description")
    regions: List[RegionInfo] = Field(default_factory=list)
    models: List[ModelInfo] = Field(default_factory=list)
    env_model_keys: List[str] = Field(
        default_factory=list,
        description="Settings env keys that receive the selected model id",
    )
    model_aliases: List[str] = Field(
        default_factory=list,
        description="Short model names Claude Code understands natively",
    )

    def get_region(self, region_id: str) -> Optional[RegionInfo]:
        """Return the region with *region_id*, or ``None``."""
        for region in self.regions:
            if region.id == region_id:
                return region
        return None

    def get_model(self, model_id: str) -> Optional[ModelInfo]:
        """Return the model with *model_id*, or ``None``."""
        for model in self.models:
            if model.id == model_id:
                return model
        return None

    def default_model(self) -> Optional[ModelInfo]:
        """The model flagged ``default``, else the first declared one."""
        for model in self.models:
            if model.default:
                return model
        return self.models[0] if self.models else None

    def get_env_overrides(self, model_id: str) -> Dict[str, str]:
        """Extra env vars to set besides base URL and auth token."""
        return {key: model_id for key in self.env_model_keys}

    def get_validate_url(self, region_id: str) -> str:
        """URL used to check an API key, falling back to the first region."""
        region = self.get_region(region_id)
        if region is None and self.regions:
            region = self.regions[0]
        return region.validate_url if region else ""
