"""Development-time rendering of status records."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..domain.models import HTTPStatus
from .catalogue_index import list_statuses


class RenderFormat(Enum):
    """Output formats understood by the catalogue renderer."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class RenderConfig:
    """Options controlling how the catalogue is rendered."""

    output_format: RenderFormat = RenderFormat.TEXT
    sort_by_code: bool = False


DEFAULT_RENDER_CONFIG = RenderConfig()


def render_status(record: HTTPStatus[Any, Any]) -> str:
    """Return ``"<code> <phrase>"`` for a single record."""

    return f"{record.status} {record.status_text}"


def render_catalogue(config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    """Render every catalogue record using the given configuration."""

    records = list_statuses()
    if config.sort_by_code:
        records.sort(key=lambda record: record.status)

    if config.output_format is RenderFormat.JSON:
        return json.dumps(
            [record.as_response_fields() for record in records],
            ensure_ascii=False,
            indent=2,
        )
    return "\n".join(render_status(record) for record in records)
