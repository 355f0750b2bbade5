"""JSON schema for the public ``status``/``statusText`` shape."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator, ValidationError

from ..domain.models import HTTPStatus

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"
EXAMPLE_DIR = SCHEMA_DIR / "examples"

SchemaValidationError = ValidationError
"""Alias for jsonschema.ValidationError.
Keeps callers unaware of the implementation.
"""

PUBLIC_FIELDS_SCHEMA = "http_status_public_v0.1"
"""Registry name of the two-field shape every status contributes to a response."""

SCHEMA_FILES = {
    PUBLIC_FIELDS_SCHEMA: "http_status_public_v0.1.json",
}

EXAMPLE_FILES = {
    "http_status_public_example_min": "http_status_public_example_min.json",
}

_LOADED: dict[Path, Mapping[str, Any]] = {}
_VALIDATORS: dict[str, Draft7Validator] = {}


def _load_cached(path: Path) -> Mapping[str, Any]:
    if path not in _LOADED:
        with path.open("r", encoding="utf-8") as handle:
            _LOADED[path] = json.load(handle)
    return _LOADED[path]


def _schema_path(name: str) -> Path:
    return SCHEMA_DIR / SCHEMA_FILES[name]


def get_schema(name: str) -> Mapping[str, Any]:
    """Return a private copy of the JSON schema with the given registry name."""

    return copy.deepcopy(_load_cached(_schema_path(name)))


def get_example(name: str) -> Mapping[str, Any]:
    """Return a private copy of a representative example payload by name."""

    return copy.deepcopy(_load_cached(EXAMPLE_DIR / EXAMPLE_FILES[name]))


def _validator(name: str) -> Draft7Validator:
    if name not in _VALIDATORS:
        schema = _load_cached(_schema_path(name))
        Draft7Validator.check_schema(schema)
        _VALIDATORS[name] = Draft7Validator(schema)
    return _VALIDATORS[name]


def validate(name: str, instance: Any) -> None:
    """Validate an instance against a named schema."""

    _validator(name).validate(instance)


def validate_status(record: HTTPStatus[Any, Any]) -> None:
    """Check that a record's public fields match the response shape."""

    validate(PUBLIC_FIELDS_SCHEMA, record.as_response_fields())
