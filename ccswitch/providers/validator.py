# -*- coding: utf-8 -*-
"""Check an API key against the provider's model listing endpoint."""

from __future__ import annotations

import logging
from typing import Literal, Optional

import httpx
from pydantic import BaseModel, Field

from ..constant import VALIDATE_TIMEOUT
from .models import ProviderDefinition

logger = logging.getLogger(__name__)

ValidationErrorKind = Literal[
    "invalid_api_key", "network_error", "unknown_error"
]


class ValidationResult(BaseModel):
    """Outcome of an API key check.

    ``network_error`` means the key could not be checked; callers may
    proceed. ``invalid_api_key`` means the provider rejected it.
    """

    valid: bool
    error: Optional[ValidationErrorKind] = None
    message: str = Field(default="")

    @property
    def is_network_error(self) -> bool:
        return self.error == "network_error"


def validate_api_key(
    api_key: str,
    provider: ProviderDefinition,
    region_id: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = VALIDATE_TIMEOUT,
) -> ValidationResult:
    """GET the provider's validation URL with *api_key* as bearer token."""
    url = provider.get_validate_url(region_id)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    own_client = client is None
    http = client if client is not None else httpx.Client(timeout=timeout)
    try:
        response = http.get(url, headers=headers, timeout=timeout)
    except httpx.TimeoutException as exc:
        logger.warning("API key validation timed out for %s: %s", url, exc)
        return ValidationResult(
            valid=False,
            error="network_error",
            message=f"Request timeout ({timeout:g}s)",
        )
    except httpx.HTTPError as exc:
        logger.warning("API key validation failed for %s: %s", url, exc)
        return ValidationResult(
            valid=False,
            error="network_error",
            message=str(exc) or "Network connection failed",
        )
    finally:
        if own_client:
            http.close()

    if response.status_code in (401, 403):
        return ValidationResult(
            valid=False,
            error="invalid_api_key",
            message="API Key is invalid or expired",
        )
    if response.is_success:
        return ValidationResult(valid=True)

    logger.debug(
        "Unexpected validation response from %s: %s",
        url,
        response.status_code,
    )
    return ValidationResult(
        valid=False,
        error="unknown_error",
        message=f"HTTP {response.status_code}: {response.reason_phrase}",
    )
