"""CPI API version negotiation between the client and the external CPI."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cpi_client.core.models import CpiInfo

MIN_API_VERSION = 1
MAX_SUPPORTED_API_VERSION = 2
"""Highest CPI API version this client understands."""


def clamp_api_version(value: Any) -> int:
    """Coerce a reported API version into ``[MIN_API_VERSION, MAX_SUPPORTED_API_VERSION]``.

    Non-numeric or missing values (including booleans and NaN) map to the
    minimum; fractional values are truncated.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return MIN_API_VERSION
    if isinstance(value, float) and math.isnan(value):
        return MIN_API_VERSION
    if value >= MAX_SUPPORTED_API_VERSION:
        return MAX_SUPPORTED_API_VERSION
    if value < MIN_API_VERSION:
        return MIN_API_VERSION
    return int(value)


def effective_api_version(local_version: int, remote_version: int) -> int:
    """Return the version both sides support."""
    return min(clamp_api_version(local_version), clamp_api_version(remote_version))


class VersionNegotiator:
    """Determine the effective CPI API version for richer response shapes."""

    def __init__(
        self,
        configured_version: int,
        info_provider: Callable[[], CpiInfo],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """Configure the negotiator with the local maximum and an info source."""
        self._configured_version = clamp_api_version(configured_version)
        self._info_provider = info_provider
        self._logger = logger or logging.getLogger(__name__)

    @property
    def configured_version(self) -> int:
        """Return the locally configured version, clamped to the supported range."""
        return self._configured_version

    @property
    def requires_remote_info(self) -> bool:
        """Return ``True`` when negotiation needs to query the CPI."""
        return self._configured_version >= MAX_SUPPORTED_API_VERSION

    def negotiate(self) -> int:
        """Return the effective version, querying ``info`` only when it can matter."""
        if not self.requires_remote_info:
            return self._configured_version

        info = self._info_provider()
        version = effective_api_version(self._configured_version, info.api_version)
        self._logger.debug(
            "Negotiated CPI API version",
            extra={
                "configured_version": self._configured_version,
                "remote_version": info.api_version,
                "effective_version": version,
            },
        )
        return version


__all__ = [
    "MAX_SUPPORTED_API_VERSION",
    "MIN_API_VERSION",
    "VersionNegotiator",
    "clamp_api_version",
    "effective_api_version",
]
