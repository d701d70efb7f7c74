"""Result rendering.

Turns a RowSet into an encoded payload plus its content type:
- csv          text/csv          (render/delimited.py)
- html         text/html         (render/markup.py)
- json         application/json  (render/structured.py)
- json-pretty  application/json  (render/structured.py)
"""

from __future__ import annotations

from collections.abc import Callable

from resultview.errors import UnknownFormatError
from resultview.models.domain import RowSet
from resultview.models.types import RenderedResult, RenderMeta
from resultview.render.delimited import render_csv
from resultview.render.formats import ALLOWED_FORMATS
from resultview.render.markup import render_html
from resultview.render.structured import render_json, render_json_pretty

_RENDERERS: dict[str, tuple[str, Callable[[RowSet, RenderMeta], str]]] = {
    "csv": ("text/csv", render_csv),
    "html": ("text/html", render_html),
    "json": ("application/json", render_json),
    "json-pretty": ("application/json", render_json_pretty),
}


def render(format: str, rows: RowSet, meta: RenderMeta | None = None) -> RenderedResult:
    """Render a row set in the requested format.

    Args:
        format: One of ALLOWED_FORMATS.
        rows: Row set to render.
        meta: Effective offset/limit/order and request parameters, shown
            by the html renderer.

    Returns:
        RenderedResult with payload and content type.

    Raises:
        UnknownFormatError: If the format is not supported.
    """
    if format not in _RENDERERS:
        raise UnknownFormatError(format)
    content_type, renderer = _RENDERERS[format]
    return RenderedResult(payload=renderer(rows, meta or RenderMeta()), content_type=content_type)


__all__ = ["ALLOWED_FORMATS", "render"]
