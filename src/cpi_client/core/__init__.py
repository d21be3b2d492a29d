"""Core domain modules for cpi_client."""

from .errors import (
    CloudError,
    CpiClientError,
    CpiConfigurationError,
    CpiValidationError,
    TransportError,
    UnexpectedResultError,
)
from .models import (
    DEFAULT_API_VERSION,
    CloudProperties,
    CmdContext,
    CpiInfo,
    CpiMethod,
    DiskMetadata,
    Environment,
    JSONValue,
    MethodInvocation,
    Networks,
    VMMetadata,
)
from .safety import is_sensitive_key, redact_text, scrub_for_logging

__all__ = [
    "DEFAULT_API_VERSION",
    "CloudError",
    "CloudProperties",
    "CmdContext",
    "CpiClientError",
    "CpiConfigurationError",
    "CpiInfo",
    "CpiMethod",
    "CpiValidationError",
    "DiskMetadata",
    "Environment",
    "JSONValue",
    "MethodInvocation",
    "Networks",
    "TransportError",
    "UnexpectedResultError",
    "VMMetadata",
    "is_sensitive_key",
    "redact_text",
    "scrub_for_logging",
]
