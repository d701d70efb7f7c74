"""JSON rendering: compact and tab-indented variants of the same document."""

from __future__ import annotations

import json

from resultview.models.domain import RowSet
from resultview.models.types import RenderMeta


def render_json(rows: RowSet, meta: RenderMeta) -> str:
    return json.dumps(rows.to_json(), separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def render_json_pretty(rows: RowSet, meta: RenderMeta) -> str:
    return json.dumps(rows.to_json(), indent="\t", ensure_ascii=False, allow_nan=False)
