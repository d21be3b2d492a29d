"""Client runtime for driving an external Cloud Provider Interface command."""

from .cloud import MAX_SUPPORTED_API_VERSION, CpiClient
from .config import ClientSettings, make_client, settings_from_environment
from .core.errors import (
    CloudError,
    CpiClientError,
    CpiConfigurationError,
    CpiValidationError,
    TransportError,
    UnexpectedResultError,
)
from .core.models import CmdContext, CpiInfo, CpiMethod
from .protocol import CallableCommandExecutor, CmdError, CmdOutput, CommandExecutor

__all__ = [
    "MAX_SUPPORTED_API_VERSION",
    "CallableCommandExecutor",
    "ClientSettings",
    "CloudError",
    "CmdContext",
    "CmdError",
    "CmdOutput",
    "CommandExecutor",
    "CpiClient",
    "CpiClientError",
    "CpiConfigurationError",
    "CpiInfo",
    "CpiMethod",
    "CpiValidationError",
    "TransportError",
    "UnexpectedResultError",
    "make_client",
    "settings_from_environment",
]
