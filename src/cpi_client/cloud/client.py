"""Typed client for the CPI lifecycle methods of an external command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cpi_client.core.errors import CloudError, CpiClientError, CpiValidationError
from cpi_client.core.models import CmdContext, CpiInfo, CpiMethod, MethodInvocation
from cpi_client.core.safety import scrub_for_logging

from .decoding import ResultShape, decode_cpi_info, decode_result
from .negotiation import MAX_SUPPORTED_API_VERSION, VersionNegotiator

if TYPE_CHECKING:
    from cpi_client.core.models import (
        CloudProperties,
        DiskMetadata,
        Environment,
        Networks,
        VMMetadata,
    )
    from cpi_client.protocol.executor import CommandExecutor

_INFO_PLACEHOLDER_ARGUMENT = " "


class CpiClient:
    """Issue CPI lifecycle calls and decode their results into typed values.

    Every operation is a single blocking round trip through the executor.
    Transport failures propagate unchanged, remote failures are raised as
    :class:`~cpi_client.core.errors.CloudError` and results of the wrong shape
    as :class:`~cpi_client.core.errors.UnexpectedResultError`.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        director_id: str,
        api_version: int,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """Bind the executor and the immutable invocation context."""
        if isinstance(api_version, bool) or not isinstance(api_version, int) or api_version < 1:
            error_message = f"api_version must be a positive integer, got {api_version!r}"
            raise CpiValidationError(error_message)

        self._executor = executor
        self._context = CmdContext(director_id=director_id, stemcell_api_version=api_version)
        self._logger = logger or logging.getLogger(__name__)
        self._negotiator = VersionNegotiator(api_version, self.info, logger=self._logger)

    @property
    def context(self) -> CmdContext:
        """Return the context sent with every invocation."""
        return self._context

    @property
    def logger(self) -> logging.Logger:
        """Return the logger instance used by the client."""
        return self._logger

    def __repr__(self) -> str:
        return (
            f"CpiClient(director_id={self._context.director_id!r}, "
            f"api_version={self._context.stemcell_api_version})"
        )

    def info(self) -> CpiInfo:
        """Return the CPI capabilities, degrading to defaults when unavailable."""
        try:
            result = self._run(MethodInvocation(CpiMethod.INFO, (_INFO_PLACEHOLDER_ARGUMENT,)))
        except CpiClientError as error:
            self._logger.warning("CPI info call failed; assuming defaults", exc_info=error)
            return CpiInfo()
        return decode_cpi_info(result)

    def create_stemcell(self, image_path: str, cloud_properties: CloudProperties) -> str:
        """Upload the stemcell image at *image_path* and return its cid."""
        result = self._run(
            MethodInvocation(CpiMethod.CREATE_STEMCELL, (image_path, cloud_properties)),
        )
        return decode_result(result, ResultShape.STRING)

    def delete_stemcell(self, stemcell_cid: str) -> None:
        """Delete the stemcell identified by *stemcell_cid*."""
        result = self._run(MethodInvocation(CpiMethod.DELETE_STEMCELL, (stemcell_cid,)))
        decode_result(result, ResultShape.OPAQUE)

    def has_vm(self, vm_cid: str) -> bool:
        """Return whether the VM identified by *vm_cid* exists."""
        result = self._run(MethodInvocation(CpiMethod.HAS_VM, (vm_cid,)))
        return decode_result(result, ResultShape.BOOLEAN)

    def create_vm(
        self,
        agent_id: str,
        stemcell_cid: str,
        cloud_properties: CloudProperties,
        networks: Networks,
        env: Environment,
    ) -> str:
        """Create a VM and return its cid.

        Disk cids are reserved by the protocol and always sent as an empty list.
        Under API version 2 the CPI answers ``[vm_cid, network_settings]``;
        only the cid is returned.
        """
        disk_cids: list[str] = []
        result = self._run(
            MethodInvocation(
                CpiMethod.CREATE_VM,
                (agent_id, stemcell_cid, cloud_properties, networks, disk_cids, env),
            ),
        )
        if self._negotiator.negotiate() >= MAX_SUPPORTED_API_VERSION:
            vm_cid, _ = decode_result(result, ResultShape.PAIR)
            return vm_cid
        return decode_result(result, ResultShape.STRING)

    def set_vm_metadata(self, vm_cid: str, metadata: VMMetadata) -> None:
        """Attach *metadata* to the VM identified by *vm_cid*."""
        result = self._run(MethodInvocation(CpiMethod.SET_VM_METADATA, (vm_cid, metadata)))
        decode_result(result, ResultShape.OPAQUE)

    def set_disk_metadata(self, disk_cid: str, metadata: DiskMetadata) -> None:
        """Attach *metadata* to the disk identified by *disk_cid*."""
        result = self._run(MethodInvocation(CpiMethod.SET_DISK_METADATA, (disk_cid, metadata)))
        decode_result(result, ResultShape.OPAQUE)

    def create_disk(self, size: int, cloud_properties: CloudProperties, instance_id: str) -> str:
        """Create a persistent disk of *size* MiB near *instance_id* and return its cid."""
        result = self._run(
            MethodInvocation(CpiMethod.CREATE_DISK, (size, cloud_properties, instance_id)),
        )
        return decode_result(result, ResultShape.STRING)

    def attach_disk(self, vm_cid: str, disk_cid: str) -> Any:
        """Attach a disk and return the disk hint under API version 2, else ``None``."""
        result = self._run(MethodInvocation(CpiMethod.ATTACH_DISK, (vm_cid, disk_cid)))
        if self._negotiator.negotiate() >= MAX_SUPPORTED_API_VERSION:
            return result
        return None

    def detach_disk(self, vm_cid: str, disk_cid: str) -> None:
        """Detach the disk *disk_cid* from the VM *vm_cid*."""
        result = self._run(MethodInvocation(CpiMethod.DETACH_DISK, (vm_cid, disk_cid)))
        decode_result(result, ResultShape.OPAQUE)

    def delete_vm(self, vm_cid: str) -> None:
        """Delete the VM identified by *vm_cid*."""
        result = self._run(MethodInvocation(CpiMethod.DELETE_VM, (vm_cid,)))
        decode_result(result, ResultShape.OPAQUE)

    def delete_disk(self, disk_cid: str) -> None:
        """Delete the disk identified by *disk_cid*."""
        result = self._run(MethodInvocation(CpiMethod.DELETE_DISK, (disk_cid,)))
        decode_result(result, ResultShape.OPAQUE)

    def _run(self, invocation: MethodInvocation) -> Any:
        """Execute *invocation* and return the raw result of a successful call."""
        method = invocation.method.value
        self._logger.debug(
            "Executing external CPI command",
            extra={"method": method, "arguments": scrub_for_logging(list(invocation.arguments))},
        )
        output = self._executor.execute(self._context, method, list(invocation.arguments))

        if output.error is not None:
            self._logger.debug(
                "External CPI command returned an error",
                extra={"method": method, "error_type": output.error.type},
            )
            raise CloudError(
                method,
                output.error.type,
                output.error.message,
                ok_to_retry=output.error.ok_to_retry,
            )
        return output.result


__all__ = ["CpiClient"]
