"""Pydantic models describing CPI invocations and capability info."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

type JSONScalar = str | int | float | bool | None
type JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

type CloudProperties = Mapping[str, Any]
type Networks = Mapping[str, Any]
type Environment = Mapping[str, Any]
type VMMetadata = Mapping[str, Any]
type DiskMetadata = Mapping[str, Any]

DEFAULT_API_VERSION = 1


class CpiMethod(StrEnum):
    """Lifecycle verbs understood by an external CPI command."""

    INFO = "info"
    CREATE_STEMCELL = "create_stemcell"
    DELETE_STEMCELL = "delete_stemcell"
    HAS_VM = "has_vm"
    CREATE_VM = "create_vm"
    SET_VM_METADATA = "set_vm_metadata"
    SET_DISK_METADATA = "set_disk_metadata"
    CREATE_DISK = "create_disk"
    ATTACH_DISK = "attach_disk"
    DETACH_DISK = "detach_disk"
    DELETE_VM = "delete_vm"
    DELETE_DISK = "delete_disk"


class CmdContext(BaseModel):
    """Immutable context attached to every CPI invocation."""

    model_config = ConfigDict(frozen=True)

    director_id: str
    stemcell_api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)


@dataclass(frozen=True)
class MethodInvocation:
    """A CPI method name paired with its ordered arguments."""

    method: CpiMethod
    arguments: tuple[Any, ...] = ()


def _empty_format_list() -> list[str]:
    """Return a new list for storing stemcell formats."""
    return []


class CpiInfo(BaseModel):
    """Capabilities reported by the CPI ``info`` method."""

    model_config = ConfigDict(frozen=True)

    stemcell_formats: list[str] = Field(default_factory=_empty_format_list)
    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)


__all__ = [
    "DEFAULT_API_VERSION",
    "CloudProperties",
    "CmdContext",
    "CpiInfo",
    "CpiMethod",
    "DiskMetadata",
    "Environment",
    "JSONScalar",
    "JSONValue",
    "MethodInvocation",
    "Networks",
    "VMMetadata",
]
