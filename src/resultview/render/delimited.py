"""CSV rendering (RFC 4180 minimal quoting)."""

from __future__ import annotations

import csv
from io import StringIO

from resultview.models.domain import RowSet
from resultview.models.types import RenderMeta

LINE_TERMINATOR = "\r\n"


def _write_row(values: list[str]) -> str:
    buf = StringIO()
    writer = csv.writer(buf, lineterminator=LINE_TERMINATOR)
    writer.writerow(values)
    return buf.getvalue()[: -len(LINE_TERMINATOR)]


def render_csv(rows: RowSet, meta: RenderMeta) -> str:
    """Header row of column names followed by one line per record.

    An empty row set renders as an empty string, without a header.
    """
    if not rows.records:
        return ""
    lines = [_write_row(rows.columns)]
    for record in rows:
        lines.append(_write_row([value.text() for value in rows.values(record)]))
    return LINE_TERMINATOR.join(lines)
