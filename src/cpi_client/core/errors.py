"""Exception hierarchy for cpi_client."""

from __future__ import annotations

import json
from typing import Any


class CpiClientError(Exception):
    """Base class for all errors raised by cpi_client."""


class CpiValidationError(CpiClientError):
    """Raised when client inputs or configuration fail validation rules."""


class CpiConfigurationError(CpiValidationError):
    """Raised when the environment does not describe a usable client configuration."""


class TransportError(CpiClientError):
    """Raised when the external CPI command could not be run or its output parsed."""


class CloudError(CpiClientError):
    """Raised when the external CPI command reports a structured error."""

    def __init__(
        self,
        method: str,
        error_type: str,
        message: str,
        *,
        ok_to_retry: bool = False,
    ) -> None:
        """Capture the failing method together with the remote error details."""
        self.method = method
        self.type = error_type
        self.message = message
        self.ok_to_retry = ok_to_retry
        super().__init__(self._describe())

    def _describe(self) -> str:
        detail = json.dumps(
            {"type": self.type, "message": self.message, "ok_to_retry": self.ok_to_retry},
            separators=(",", ":"),
        )
        return f"CPI '{self.method}' method responded with error: CmdError{detail}"


class UnexpectedResultError(CpiClientError):
    """Raised when a successful CPI result does not have the expected shape."""

    def __init__(self, value: Any) -> None:
        """Store the offending value and render it into the message."""
        self.value = value
        super().__init__(f"unexpected external command result: '{value}'")


__all__ = [
    "CloudError",
    "CpiClientError",
    "CpiConfigurationError",
    "CpiValidationError",
    "TransportError",
    "UnexpectedResultError",
]
