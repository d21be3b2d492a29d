"""Shape-checked decoders for untyped CPI results."""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

from cpi_client.core.errors import UnexpectedResultError
from cpi_client.core.models import CpiInfo

from .negotiation import clamp_api_version


class ResultShape(StrEnum):
    """Shapes a CPI method result may be required to have."""

    STRING = "string"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    PAIR = "pair"
    MAPPING = "mapping"
    OPAQUE = "opaque"


def decode_string(value: Any) -> str:
    """Return *value* when it is a string."""
    if not isinstance(value, str):
        raise UnexpectedResultError(value)
    return value


def decode_bool(value: Any) -> bool:
    """Return *value* when it is a boolean."""
    if not isinstance(value, bool):
        raise UnexpectedResultError(value)
    return value


def decode_string_list(value: Any) -> list[str]:
    """Return *value* as a list when it is a sequence made only of strings."""
    if not isinstance(value, (list, tuple)):
        raise UnexpectedResultError(value)
    items = typing.cast("list[Any] | tuple[Any, ...]", value)
    if not all(isinstance(item, str) for item in items):
        raise UnexpectedResultError(value)
    return [typing.cast("str", item) for item in items]


def decode_pair(value: Any) -> tuple[str, tuple[Any, ...]]:
    """Split a ``[id, *extra]`` result into the id string and the remaining items."""
    if not isinstance(value, (list, tuple)):
        raise UnexpectedResultError(value)
    items = typing.cast("list[Any] | tuple[Any, ...]", value)
    if len(items) < 2:
        raise UnexpectedResultError(value)
    first, *rest = items
    return str(first), tuple(rest)


def decode_mapping(value: Any) -> dict[str, Any]:
    """Return a copy of *value* when it is a mapping keyed by strings."""
    if not isinstance(value, Mapping):
        raise UnexpectedResultError(value)
    mapping = typing.cast("Mapping[Any, Any]", value)
    if not all(isinstance(key, str) for key in mapping):
        raise UnexpectedResultError(value)
    return dict(mapping)


def _decode_opaque(_value: Any) -> None:
    return None


_DECODERS: dict[ResultShape, Callable[[Any], Any]] = {
    ResultShape.STRING: decode_string,
    ResultShape.BOOLEAN: decode_bool,
    ResultShape.STRING_LIST: decode_string_list,
    ResultShape.PAIR: decode_pair,
    ResultShape.MAPPING: decode_mapping,
    ResultShape.OPAQUE: _decode_opaque,
}


def decode_result(value: Any, shape: ResultShape) -> Any:
    """Decode *value* according to *shape*, raising on a mismatch."""
    return _DECODERS[shape](value)


def decode_cpi_info(value: Any) -> CpiInfo:
    """Build :class:`CpiInfo` from an ``info`` result, never failing.

    Any malformed field yields the defaults (no formats, API version 1). Only a
    missing ``api_version`` is tolerated alongside valid formats, since older
    CPIs do not report one.
    """
    try:
        payload = decode_result(value, ResultShape.MAPPING)
        stemcell_formats = decode_result(payload.get("stemcell_formats"), ResultShape.STRING_LIST)
    except UnexpectedResultError:
        return CpiInfo()

    reported_version = payload.get("api_version")
    if reported_version is None:
        return CpiInfo(stemcell_formats=stemcell_formats)
    if isinstance(reported_version, bool) or not isinstance(reported_version, (int, float)):
        return CpiInfo()

    return CpiInfo(
        stemcell_formats=stemcell_formats,
        api_version=clamp_api_version(reported_version),
    )


__all__ = [
    "ResultShape",
    "decode_bool",
    "decode_cpi_info",
    "decode_mapping",
    "decode_pair",
    "decode_result",
    "decode_string",
    "decode_string_list",
]
