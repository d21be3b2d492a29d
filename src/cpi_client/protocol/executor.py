"""Command executor protocol and a text transport adapter."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from cpi_client.core.errors import TransportError
from cpi_client.core.models import CmdContext
from cpi_client.core.safety import redact_text

from .envelope import CmdOutput, build_request, decode_response, encode_request

Transport = Callable[[str], str | bytes]


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol implemented by collaborators that run the external CPI command.

    Implementations raise :class:`~cpi_client.core.errors.TransportError` when
    the command cannot be run or its output cannot be parsed at all.
    """

    def execute(self, context: CmdContext, method: str, arguments: Sequence[Any]) -> CmdOutput:
        """Invoke *method* with *arguments* and return the decoded outcome."""
        ...


class CallableCommandExecutor:
    """Executor that delegates the round trip to a text transport callable.

    The transport receives the JSON request envelope and returns the raw JSON
    response, e.g. by piping it through the CPI binary. Launch failures are
    expected as :class:`OSError` or :class:`subprocess.SubprocessError`.
    """

    def __init__(self, transport: Transport, *, logger: logging.Logger | None = None) -> None:
        """Store the transport used to exchange envelopes with the CPI."""
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, context: CmdContext, method: str, arguments: Sequence[Any]) -> CmdOutput:
        """Encode the request, run the transport and decode its response."""
        payload = encode_request(build_request(context, method, arguments))

        try:
            raw_output = self._transport(payload)
        except (OSError, subprocess.SubprocessError) as error:
            error_message = f"Executing external CPI command '{method}': {error}"
            raise TransportError(error_message) from error

        output = decode_response(raw_output)
        if output.log:
            self._logger.debug(
                "External CPI command log", extra={"method": method, "cpi_log": redact_text(output.log)},
            )
        return output


__all__ = ["CallableCommandExecutor", "CommandExecutor", "Transport"]
