"""Tests for CPI API version negotiation."""

from __future__ import annotations

import pytest

from cpi_client.cloud.negotiation import (
    MAX_SUPPORTED_API_VERSION,
    VersionNegotiator,
    clamp_api_version,
    effective_api_version,
)
from cpi_client.core.models import CpiInfo


class _StubInfoProvider:
    """Return a fixed CpiInfo while counting calls."""

    def __init__(self, info: CpiInfo) -> None:
        """Store the info returned on every call."""
        self._info = info
        self.call_count = 0

    def __call__(self) -> CpiInfo:
        """Return the canned info."""
        self.call_count += 1
        return self._info


def test_max_supported_version_is_two() -> None:
    """The client understands CPI API versions 1 and 2."""
    assert MAX_SUPPORTED_API_VERSION == 2
    assert clamp_api_version(MAX_SUPPORTED_API_VERSION + 1) == MAX_SUPPORTED_API_VERSION


@pytest.mark.parametrize(
    ("local", "remote", "expected"),
    [(1, 1, 1), (1, 2, 1), (2, 1, 1), (2, 2, 2), (5, 2, 2)],
)
def test_effective_version_is_the_common_minimum(local: int, remote: int, expected: int) -> None:
    """Only versions supported on both sides take effect."""
    assert effective_api_version(local, remote) == expected


def test_version_one_client_skips_info() -> None:
    """The CPI is never queried when richer shapes cannot be used."""
    provider = _StubInfoProvider(CpiInfo(api_version=2))
    negotiator = VersionNegotiator(1, provider)

    assert negotiator.requires_remote_info is False
    assert negotiator.negotiate() == 1
    assert provider.call_count == 0


@pytest.mark.parametrize(("remote", "expected"), [(1, 1), (2, 2)])
def test_version_two_client_uses_remote_version(remote: int, expected: int) -> None:
    """A v2 client defers to the version the CPI reports."""
    provider = _StubInfoProvider(CpiInfo(api_version=remote))
    negotiator = VersionNegotiator(2, provider)

    assert negotiator.negotiate() == expected
    assert provider.call_count == 1


def test_configured_version_above_maximum_is_capped() -> None:
    """Locally configured versions beyond the client's support are capped."""
    negotiator = VersionNegotiator(7, _StubInfoProvider(CpiInfo(api_version=2)))

    assert negotiator.configured_version == MAX_SUPPORTED_API_VERSION
    assert negotiator.negotiate() == 2
