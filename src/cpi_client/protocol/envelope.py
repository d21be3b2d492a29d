"""Request and response envelopes exchanged with an external CPI command."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cpi_client.core.errors import TransportError
from cpi_client.core.models import CmdContext


class StemcellContext(BaseModel):
    """Stemcell details forwarded to the CPI inside the request context."""

    api_version: int = Field(ge=1)


class VMContext(BaseModel):
    """VM scoped context forwarded to the CPI."""

    stemcell: StemcellContext


class RequestContext(BaseModel):
    """Wire representation of :class:`~cpi_client.core.models.CmdContext`."""

    director_uuid: str
    vm: VMContext | None = None


def _empty_argument_list() -> list[Any]:
    """Return a new list for storing method arguments."""
    return []


class CpiRequest(BaseModel):
    """A single method call written to the external CPI command."""

    method: str
    arguments: list[Any] = Field(default_factory=_empty_argument_list)
    context: RequestContext
    api_version: int = Field(ge=1)


class CmdError(BaseModel):
    """Structured error reported by the external CPI command."""

    model_config = ConfigDict(frozen=True)

    type: str
    message: str
    ok_to_retry: bool = False


class CmdOutput(BaseModel):
    """Decoded outcome of one external CPI invocation.

    ``result`` carries the untyped payload; it is only meaningful when
    ``error`` is absent. ``log`` holds free-form diagnostics emitted by the
    CPI alongside the response.
    """

    result: Any = None
    error: CmdError | None = None
    log: str = ""


def build_request(context: CmdContext, method: str, arguments: Sequence[Any]) -> CpiRequest:
    """Return the request envelope for *method* invoked with *arguments*."""
    request_context = RequestContext(
        director_uuid=context.director_id,
        vm=VMContext(stemcell=StemcellContext(api_version=context.stemcell_api_version)),
    )
    return CpiRequest(
        method=method,
        arguments=list(arguments),
        context=request_context,
        api_version=context.stemcell_api_version,
    )


def encode_request(request: CpiRequest) -> str:
    """Serialize *request* to the JSON text expected on the CPI's stdin."""
    try:
        return request.model_dump_json()
    except ValueError as error:
        error_message = f"Marshalling external CPI command input for '{request.method}'"
        raise TransportError(error_message) from error


def decode_response(raw: str | bytes) -> CmdOutput:
    """Parse the JSON text produced by the CPI into a :class:`CmdOutput`."""
    if not raw or not raw.strip():
        error_message = "Unmarshalling external CPI command output: empty response"
        raise TransportError(error_message)
    try:
        return CmdOutput.model_validate_json(raw)
    except ValidationError as error:
        error_message = f"Unmarshalling external CPI command output: {error}"
        raise TransportError(error_message) from error


__all__ = [
    "CmdError",
    "CmdOutput",
    "CpiRequest",
    "RequestContext",
    "StemcellContext",
    "VMContext",
    "build_request",
    "decode_response",
    "encode_request",
]
