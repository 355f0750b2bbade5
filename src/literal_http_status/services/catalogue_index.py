"""Read-only enumeration of the named status constants."""

from __future__ import annotations

import logging
from typing import Any

from .. import statuses
from ..domain.models import HTTPStatus
from .shape_registry import SchemaValidationError, validate_status

_LOG = logging.getLogger(__name__)


def named_statuses() -> dict[str, HTTPStatus[Any, Any]]:
    """Return every catalogue constant keyed by name, in declaration order."""

    entries = {
        name: value
        for name, value in vars(statuses).items()
        if name.isupper() and isinstance(value, HTTPStatus)
    }
    _LOG.debug("Enumerated %d catalogue statuses", len(entries))
    return entries


def list_statuses() -> list[HTTPStatus[Any, Any]]:
    """Return the catalogue records without their names."""

    return list(named_statuses().values())


def find_duplicate_codes() -> dict[int, list[str]]:
    """Return codes claimed by more than one constant name."""

    claimed: dict[int, list[str]] = {}
    for name, record in named_statuses().items():
        claimed.setdefault(record.status, []).append(name)
    return {code: names for code, names in claimed.items() if len(names) > 1}


def check_catalogue_shapes() -> list[str]:
    """Return the names whose public fields violate the response shape."""

    failures: list[str] = []
    for name, record in named_statuses().items():
        try:
            validate_status(record)
        except SchemaValidationError as exc:
            _LOG.warning("Status %s failed shape validation: %s", name, exc.message)
            failures.append(name)
    return failures
