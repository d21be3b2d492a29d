"""CPI client façade, result decoding and API version negotiation."""

from .client import CpiClient
from .decoding import (
    ResultShape,
    decode_bool,
    decode_cpi_info,
    decode_mapping,
    decode_pair,
    decode_result,
    decode_string,
    decode_string_list,
)
from .negotiation import (
    MAX_SUPPORTED_API_VERSION,
    MIN_API_VERSION,
    VersionNegotiator,
    clamp_api_version,
    effective_api_version,
)

__all__ = [
    "MAX_SUPPORTED_API_VERSION",
    "MIN_API_VERSION",
    "CpiClient",
    "ResultShape",
    "VersionNegotiator",
    "clamp_api_version",
    "decode_bool",
    "decode_cpi_info",
    "decode_mapping",
    "decode_pair",
    "decode_result",
    "decode_string",
    "decode_string_list",
    "effective_api_version",
]
