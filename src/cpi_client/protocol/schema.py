"""Utilities for exporting JSON Schemas of the CPI wire envelopes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .envelope import CmdOutput, CpiRequest

SCHEMA_DRAFT_URL = "https://json-schema.org/draft/2020-12/schema"
REQUEST_SCHEMA_FILENAME = "cpi_request.json"
RESPONSE_SCHEMA_FILENAME = "cpi_response.json"


def build_request_json_schema() -> dict[str, Any]:
    """Return the JSON Schema representation for :class:`CpiRequest`."""
    schema = CpiRequest.model_json_schema()
    schema.setdefault("$schema", SCHEMA_DRAFT_URL)
    schema["title"] = "CpiRequest"

    Draft202012Validator.check_schema(schema)
    return schema


def build_response_json_schema() -> dict[str, Any]:
    """Return the JSON Schema representation for :class:`CmdOutput`."""
    schema = CmdOutput.model_json_schema()
    schema.setdefault("$schema", SCHEMA_DRAFT_URL)
    schema["title"] = "CpiResponse"

    result_property = schema.get("properties", {}).get("result")
    if result_property is not None:
        result_property.setdefault(
            "description",
            "Untyped method result; ignored when an error is present.",
        )

    Draft202012Validator.check_schema(schema)
    return schema


def export_envelope_schemas(directory: Path | str) -> dict[str, dict[str, Any]]:
    """Write the request and response schemas into *directory* and return them."""
    directory_path = Path(directory)
    directory_path.mkdir(parents=True, exist_ok=True)

    schemas = {
        REQUEST_SCHEMA_FILENAME: build_request_json_schema(),
        RESPONSE_SCHEMA_FILENAME: build_response_json_schema(),
    }
    for filename, schema in schemas.items():
        (directory_path / filename).write_text(
            json.dumps(schema, indent=2, sort_keys=True),
            encoding="utf-8",
        )
    return schemas


__all__ = [
    "REQUEST_SCHEMA_FILENAME",
    "RESPONSE_SCHEMA_FILENAME",
    "SCHEMA_DRAFT_URL",
    "build_request_json_schema",
    "build_response_json_schema",
    "export_envelope_schemas",
]
