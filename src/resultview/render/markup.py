"""HTML table rendering.

Produces a standalone document with:
- links to view the same data in every other format
- a strip showing the effective offset, limit and order
- a ``table.data`` with one header cell per column

Cells carry a ``value-<kind>`` class derived from the CellValue tag so the
stylesheet can color numbers, strings and nulls differently.
"""

from __future__ import annotations

from html import escape
from urllib.parse import urlencode

from resultview.models.domain import CellValue, RowSet
from resultview.models.types import RenderMeta
from resultview.render.formats import ALLOWED_FORMATS

NO_DATA = "No data"

CSS = """
body { font: 14px/18px "Helvetica Neue", "Verdana", "Arial", sans-serif; color: #555; }

table.data { min-width: 100%; }
table.data th { border-bottom: 0.2em solid; color: #aaa; font-size: 0.8em; }
table.data td { padding: 0.1em 0.2em; }

table.data .value-number { color: #095; font-weight: bold; }
table.data .value-string { color: #950; font-weight: bold; }
table.data .value-boolean { color: #059; font-weight: bold; }
table.data .value-undefined,
table.data .value-object { color: #aaa; }

table.data tr:hover td { background: #ddd; }
table.data tr:nth-child(even) { background: #ccc; }
table.data tr:nth-child(odd) { background: #fff; }

.btn { padding: 0.3em 1em; background: #095; color: #555; font-weight: bold; border-radius: 0.5em; text-decoration: none; margin: 0.2em; display: inline-block; }
.btn:hover { background: #095; color: white; }
.btn-alt-format { text-transform: uppercase; }

.meta span { margin-right: 1em; cursor: help; }
"""

# (label, field, query parameter)
META_FIELDS = (
    ("Offset", "offset", "offset"),
    ("Limit", "limit", "limit"),
    ("Order", "order", "order"),
)


def _td(value: CellValue) -> str:
    text = "NULL" if value.is_null else escape(value.text())
    return f"<td class='{value.css_class}'>{text}</td>"


def _th(name: str) -> str:
    return f"<th>{escape(name)}</th>"


def _tr(cells: list[str]) -> str:
    return "<tr>" + "".join(cells) + "</tr>"


def _format_links(meta: RenderMeta) -> str:
    links = []
    for fmt in ALLOWED_FORMATS:
        if fmt == "html":
            continue
        query = urlencode([*meta.params, ("format", fmt)])
        links.append(
            f"<a title='View as {fmt}' href='?{escape(query)}' "
            f"class='btn btn-alt-format' target='_blank'>{fmt}</a>"
        )
    return "".join(links)


def _meta_strip(meta: RenderMeta) -> str:
    items = []
    for label, field, param in META_FIELDS:
        value = getattr(meta, field)
        if value is None:
            continue
        tooltip = f"Set with the '{param}' query parameter"
        items.append(f"<span title=\"{tooltip}\"><b>{label}:</b> {escape(str(value))}</span>")
    return "".join(items)


def _document(contents: str, meta: RenderMeta) -> str:
    return f"""<html>
  <head>
    <title>Query results</title>
    <style>{CSS}</style>
  </head>
  <body>
    <div class='other-formats'>
      <b>Or view as:</b>
      {_format_links(meta)}
    </div>
    <div class='meta'>{_meta_strip(meta)}</div>
    <div class='wrapper'>{contents}</div>
  </body>
</html>
"""


def render_html(rows: RowSet, meta: RenderMeta) -> str:
    """Render the row set as an HTML document.

    The table body starts at the second record; the first record only
    supplies the header.
    """
    if not rows.records:
        return NO_DATA

    header = "<thead>" + _tr([_th(column) for column in rows.columns]) + "</thead>"
    # TODO: confirm whether the first record belongs in the body too; every
    # other format includes it.
    body_rows = [_tr([_td(value) for value in rows.values(record)]) for record in rows.records[1:]]
    body = "<tbody>" + "".join(body_rows) + "</tbody>"
    table = "<table class='data'>" + header + body + "</table>"
    return _document(table, meta)
