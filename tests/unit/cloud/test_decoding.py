"""Tests for cpi_client.cloud.decoding."""

from __future__ import annotations

from typing import Any

import pytest

from cpi_client.cloud.decoding import (
    ResultShape,
    decode_bool,
    decode_cpi_info,
    decode_mapping,
    decode_pair,
    decode_result,
    decode_string,
    decode_string_list,
)
from cpi_client.core.errors import UnexpectedResultError
from cpi_client.core.models import CpiInfo


def test_decode_string_accepts_only_strings() -> None:
    """Strings pass through while other scalars are rejected."""
    assert decode_string("vm-1") == "vm-1"

    with pytest.raises(UnexpectedResultError, match="unexpected external command result: '42'"):
        decode_string(42)


def test_decode_bool_rejects_truthy_values() -> None:
    """Only real booleans are accepted."""
    assert decode_bool(False) is False

    with pytest.raises(UnexpectedResultError):
        decode_bool(0)


def test_decode_string_list_requires_every_item_to_be_a_string() -> None:
    """Mixed sequences and bare strings are not string lists."""
    assert decode_string_list(("aws-raw", "aws-light")) == ["aws-raw", "aws-light"]
    assert decode_string_list([]) == []

    for value in (["aws-raw", 1], "aws-raw", {"aws-raw": True}):
        with pytest.raises(UnexpectedResultError):
            decode_string_list(value)


def test_decode_pair_returns_first_item_as_string() -> None:
    """The id is the first element; remaining items are kept aside."""
    vm_cid, extra = decode_pair(["vm-1", {"private": {"ip": "10.0.0.5"}}, "ignored"])

    assert vm_cid == "vm-1"
    assert extra == ({"private": {"ip": "10.0.0.5"}}, "ignored")
    assert decode_pair([123, None]) == ("123", (None,))


@pytest.mark.parametrize("value", [["vm-1"], [], "vm-1", None, {"vm": "1"}])
def test_decode_pair_rejects_short_or_non_sequence_values(value: Any) -> None:
    """Fewer than two elements, or a non-sequence, is a decode failure."""
    with pytest.raises(UnexpectedResultError) as excinfo:
        decode_pair(value)

    assert excinfo.value.value == value


def test_decode_mapping_requires_string_keys() -> None:
    """Mappings are copied; non-string keys are rejected."""
    source = {"api_version": 2}
    decoded = decode_mapping(source)

    assert decoded == source
    assert decoded is not source
    with pytest.raises(UnexpectedResultError):
        decode_mapping({1: "one"})


@pytest.mark.parametrize(
    ("shape", "value", "expected"),
    [
        (ResultShape.STRING, "disk-1", "disk-1"),
        (ResultShape.BOOLEAN, True, True),
        (ResultShape.STRING_LIST, ["a"], ["a"]),
        (ResultShape.PAIR, ["vm-1", "hash"], ("vm-1", ("hash",))),
        (ResultShape.MAPPING, {"k": "v"}, {"k": "v"}),
        (ResultShape.OPAQUE, {"anything": [1, 2]}, None),
    ],
)
def test_decode_result_dispatches_on_shape(shape: ResultShape, value: Any, expected: Any) -> None:
    """Every declared shape has a decoder."""
    assert decode_result(value, shape) == expected


class TestDecodeCpiInfo:
    """Tolerant decoding of ``info`` results."""

    def test_reads_formats_and_version(self) -> None:
        """A complete payload is decoded as reported."""
        info = decode_cpi_info({"stemcell_formats": ["openstack-raw"], "api_version": 2})

        assert info == CpiInfo(stemcell_formats=["openstack-raw"], api_version=2)

    def test_missing_api_version_keeps_formats(self) -> None:
        """Older CPIs omit api_version and are treated as version 1."""
        info = decode_cpi_info({"stemcell_formats": ["aws-raw", "aws-light"]})

        assert info == CpiInfo(stemcell_formats=["aws-raw", "aws-light"], api_version=1)

    @pytest.mark.parametrize(
        "value",
        [
            {"stemcell_formats": ["aws-raw", "aws-light"], "api_version": "57"},
            {"stemcell_formats": ["aws-raw"], "api_version": True},
            {"stemcell_formats": "aws-raw", "api_version": 2},
            {"stemcell_formats": ["aws-raw", 3], "api_version": 2},
            {"api_version": 2},
        ],
        ids=["string-version", "bool-version", "scalar-formats", "mixed-formats", "missing-formats"],
    )
    def test_malformed_field_discards_whole_payload(self, value: dict[str, Any]) -> None:
        """A single malformed field yields the defaults, not a partial result."""
        assert decode_cpi_info(value) == CpiInfo(stemcell_formats=[], api_version=1)

    @pytest.mark.parametrize(
        ("reported", "expected"),
        [
            (-3, 1),
            (0, 1),
            (0.99, 1),
            (1, 1),
            (1.7, 1),
            (2, 2),
            (2.5, 2),
            (42.0, 2),
            (float("inf"), 2),
            (float("-inf"), 1),
            (float("nan"), 1),
        ],
    )
    def test_api_version_is_clamped(self, reported: float, expected: int) -> None:
        """Numeric versions always land within the supported range."""
        info = decode_cpi_info({"stemcell_formats": ["aws-raw"], "api_version": reported})

        assert info.api_version == expected
        assert info.stemcell_formats == ["aws-raw"]

    @pytest.mark.parametrize("value", [None, "info", 7, ["aws-raw"]])
    def test_non_mapping_results_yield_defaults(self, value: Any) -> None:
        """Anything other than a map is treated as an empty info payload."""
        assert decode_cpi_info(value) == CpiInfo(stemcell_formats=[], api_version=1)
