"""Environment driven configuration and client factory."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cpi_client.cloud.client import CpiClient
from cpi_client.core.errors import CpiConfigurationError
from cpi_client.core.models import DEFAULT_API_VERSION

if TYPE_CHECKING:
    from cpi_client.protocol.executor import CommandExecutor

DIRECTOR_ID_ENV = "CPI_DIRECTOR_ID"
API_VERSION_ENV = "CPI_API_VERSION"


class ClientSettings(BaseModel):
    """Settings required to construct a :class:`CpiClient`."""

    model_config = ConfigDict(frozen=True)

    director_id: str = Field(min_length=1)
    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)


def settings_from_environment(env: Mapping[str, str] | None = None) -> ClientSettings:
    """Resolve :class:`ClientSettings` from the provided environment mapping."""
    environment = os.environ if env is None else env
    director_id = environment.get(DIRECTOR_ID_ENV, "").strip()
    if not director_id:
        message = f"{DIRECTOR_ID_ENV} must be set to the director identity"
        raise CpiConfigurationError(message)

    raw_version = environment.get(API_VERSION_ENV, "").strip() or str(DEFAULT_API_VERSION)
    try:
        return ClientSettings.model_validate(
            {"director_id": director_id, "api_version": raw_version},
        )
    except ValidationError as error:
        message = f"{API_VERSION_ENV} must be a positive integer, got {raw_version!r}"
        raise CpiConfigurationError(message) from error


def make_client(
    executor: CommandExecutor,
    settings: ClientSettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> CpiClient:
    """Create a :class:`CpiClient`, reading settings from the environment when omitted."""
    resolved = settings or settings_from_environment()
    return CpiClient(
        executor,
        resolved.director_id,
        resolved.api_version,
        logger=logger,
    )


__all__ = [
    "API_VERSION_ENV",
    "DIRECTOR_ID_ENV",
    "ClientSettings",
    "make_client",
    "settings_from_environment",
]
