"""Wire protocol helpers for talking to an external CPI command."""

from .envelope import (
    CmdError,
    CmdOutput,
    CpiRequest,
    RequestContext,
    StemcellContext,
    VMContext,
    build_request,
    decode_response,
    encode_request,
)
from .executor import CallableCommandExecutor, CommandExecutor, Transport
from .schema import (
    build_request_json_schema,
    build_response_json_schema,
    export_envelope_schemas,
)

__all__ = [
    "CallableCommandExecutor",
    "CmdError",
    "CmdOutput",
    "CommandExecutor",
    "CpiRequest",
    "RequestContext",
    "StemcellContext",
    "Transport",
    "VMContext",
    "build_request",
    "build_request_json_schema",
    "build_response_json_schema",
    "decode_response",
    "encode_request",
    "export_envelope_schemas",
]
