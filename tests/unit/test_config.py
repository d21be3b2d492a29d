"""Tests for the environment driven client configuration."""

from __future__ import annotations

import pytest

from cpi_client.cloud import CpiClient
from cpi_client.config import (
    API_VERSION_ENV,
    DIRECTOR_ID_ENV,
    ClientSettings,
    make_client,
    settings_from_environment,
)
from cpi_client.core.errors import CpiConfigurationError
from cpi_client.protocol import CmdOutput


class _StubExecutor:
    """Executor returning an empty successful outcome."""

    def execute(self, *_: object, **__: object) -> CmdOutput:
        """Return an empty outcome."""
        return CmdOutput()


def test_settings_default_to_api_version_one() -> None:
    """Only the director identity is mandatory."""
    settings = settings_from_environment({DIRECTOR_ID_ENV: "director-uuid"})

    assert settings == ClientSettings(director_id="director-uuid", api_version=1)


def test_settings_read_api_version() -> None:
    """The configured API version is parsed as an integer."""
    settings = settings_from_environment({DIRECTOR_ID_ENV: "director-uuid", API_VERSION_ENV: " 2 "})

    assert settings.api_version == 2


@pytest.mark.parametrize("raw_version", ["0", "-1", "two", "1.5"])
def test_settings_reject_invalid_api_version(raw_version: str) -> None:
    """Non-positive or non-integer versions are configuration errors."""
    env = {DIRECTOR_ID_ENV: "director-uuid", API_VERSION_ENV: raw_version}

    with pytest.raises(CpiConfigurationError, match=API_VERSION_ENV):
        settings_from_environment(env)


def test_settings_require_director_id() -> None:
    """A blank director identity is rejected."""
    with pytest.raises(CpiConfigurationError, match=DIRECTOR_ID_ENV):
        settings_from_environment({DIRECTOR_ID_ENV: "  "})


def test_make_client_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """The factory falls back to process environment variables."""
    monkeypatch.setenv(DIRECTOR_ID_ENV, "env-director")
    monkeypatch.setenv(API_VERSION_ENV, "2")

    client = make_client(_StubExecutor())

    assert isinstance(client, CpiClient)
    assert client.context.director_id == "env-director"
    assert client.context.stemcell_api_version == 2


def test_make_client_prefers_explicit_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit settings bypass the environment entirely."""
    monkeypatch.delenv(DIRECTOR_ID_ENV, raising=False)

    client = make_client(_StubExecutor(), ClientSettings(director_id="explicit"))

    assert client.context.director_id == "explicit"
    client.delete_vm("vm-1")
