"""Utilities for redacting sensitive values before they reach the logs."""

from __future__ import annotations

import re
import typing
from collections.abc import Mapping, Sequence, Set as AbstractSet
from typing import Any

_REDACTION_PLACEHOLDER = "[redacted]"
_ELLIPSIS = "\u2026"

_SENSITIVE_KEY_PATTERN = re.compile(
    r"(?i)(password|passphrase|secret|token|private_key|access_key|credential|certificate)",
)
_TOKEN_PATTERN = re.compile(r"\b[A-Za-z0-9]{40,}\b")
_PEM_PATTERN = re.compile(
    r"-----BEGIN [A-Z ]+-----.*?-----END [A-Z ]+-----", re.DOTALL,
)


def redact_text(text: str, *, max_length: int = 512) -> str:
    """Redact key material and long tokens from *text* and enforce a length ceiling."""
    masked = _PEM_PATTERN.sub(_REDACTION_PLACEHOLDER, text)
    masked = _TOKEN_PATTERN.sub(_REDACTION_PLACEHOLDER, masked)

    if max_length > 0 and len(masked) > max_length:
        return masked[:max_length] + _ELLIPSIS
    return masked


def is_sensitive_key(key: object) -> bool:
    """Return ``True`` when *key* names a value that must never be logged."""
    return isinstance(key, str) and _SENSITIVE_KEY_PATTERN.search(key) is not None


def scrub_for_logging(value: Any, *, max_length: int = 512) -> Any:
    """Return a structure safe for logging by masking sensitive nested values."""
    if isinstance(value, str):
        processed: Any = redact_text(value, max_length=max_length)
    elif isinstance(value, bytes):
        processed = redact_text(value.decode("utf-8", errors="ignore"), max_length=max_length)
    elif isinstance(value, Mapping):
        processed_mapping: dict[Any, Any] = {}
        mapping_items = typing.cast("Mapping[Any, Any]", value)
        for key, item in mapping_items.items():
            if is_sensitive_key(key):
                processed_mapping[key] = _REDACTION_PLACEHOLDER
            else:
                processed_mapping[key] = scrub_for_logging(item, max_length=max_length)
        processed = processed_mapping
    elif isinstance(value, list):
        list_items = typing.cast("list[Any]", value)
        processed = [scrub_for_logging(item, max_length=max_length) for item in list_items]
    elif isinstance(value, tuple):
        tuple_items = typing.cast("tuple[Any, ...]", value)
        processed = tuple(
            scrub_for_logging(item, max_length=max_length) for item in tuple_items
        )
    elif isinstance(value, AbstractSet):
        set_items = typing.cast("AbstractSet[Any]", value)
        processed = {scrub_for_logging(item, max_length=max_length) for item in set_items}
    elif isinstance(value, Sequence):
        sequence_items = typing.cast("Sequence[Any]", value)
        processed = [
            scrub_for_logging(item, max_length=max_length) for item in sequence_items
        ]
    else:
        processed = value
    return processed


__all__ = ["is_sensitive_key", "redact_text", "scrub_for_logging"]
