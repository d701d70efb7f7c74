"""Domain models for resultview.

Pure Python dataclasses for the values that flow through a request:
- CellValue: tagged variant for one column value
- RowSet: the materialized result of one query execution
- QuerySpec: immutable per-endpoint configuration

These models are independent of the database driver; executors hand back
plain mappings and the RowSet is built from them once per request.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

from fastapi.encoders import jsonable_encoder


# ============================================================================
# Cell Values
# ============================================================================

CellKind = Literal["null", "boolean", "number", "string", "object"]

CSS_CLASSES: dict[str, str] = {
    "null": "value-undefined",
    "boolean": "value-boolean",
    "number": "value-number",
    "string": "value-string",
    "object": "value-object",
}


@dataclass(frozen=True)
class CellValue:
    """A single column value tagged with its kind."""

    kind: CellKind
    raw: Any = None

    @classmethod
    def of(cls, value: Any) -> CellValue:
        """Tag a native driver value.

        bool is checked before numbers since it is an int subclass.
        """
        if value is None:
            return cls("null")
        if isinstance(value, bool):
            return cls("boolean", value)
        if isinstance(value, (int, float, Decimal)):
            return cls("number", value)
        if isinstance(value, str):
            return cls("string", value)
        return cls("object", value)

    @property
    def is_null(self) -> bool:
        return self.kind == "null"

    @property
    def css_class(self) -> str:
        return CSS_CLASSES[self.kind]

    def text(self) -> str:
        """Plain text form used by the csv and html renderers."""
        if self.kind == "null":
            return ""
        if self.kind == "boolean":
            return "true" if self.raw else "false"
        return str(self.raw)

    def to_json(self) -> Any:
        """JSON-compatible form used by the json renderers.

        Non-finite numbers (NaN, infinities) become null.
        """
        if self.kind in ("null", "boolean", "string"):
            return self.raw
        if isinstance(self.raw, float) and not math.isfinite(self.raw):
            return None
        if isinstance(self.raw, Decimal) and not self.raw.is_finite():
            return None
        try:
            return jsonable_encoder(self.raw)
        except (TypeError, ValueError):
            return str(self.raw)


NULL = CellValue("null")

Record = dict[str, CellValue]


# ============================================================================
# Row Sets
# ============================================================================


@dataclass
class QueryRows:
    """Raw executor output: reported column names plus row mappings."""

    columns: list[str]
    rows: list[Mapping[str, Any]]


@dataclass
class RowSet:
    """Ordered records sharing the column set of the first record."""

    columns: list[str] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> RowSet:
        """Build a RowSet from driver row mappings.

        Args:
            rows: Row mappings, in result order.
            columns: Column names reported by the driver. Only used when
                there are no rows to take the keys from.

        Returns:
            RowSet with every value tagged.
        """
        records = [
            {str(key): CellValue.of(value) for key, value in row.items()} for row in rows
        ]
        if records:
            names = list(records[0].keys())
        else:
            names = [str(c) for c in columns or []]
        return cls(columns=names, records=records)

    @classmethod
    def from_result(cls, result: QueryRows | Sequence[Mapping[str, Any]]) -> RowSet:
        """Build a RowSet from whatever an executor returned."""
        if isinstance(result, QueryRows):
            return cls.from_rows(result.rows, result.columns)
        return cls.from_rows(list(result))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def values(self, record: Record) -> list[CellValue]:
        """Values of a record in column order; missing keys read as null."""
        return [record.get(column, NULL) for column in self.columns]

    def to_json(self) -> list[dict[str, Any]]:
        """The row set as a list of JSON-compatible objects."""
        return [
            {column: value.to_json() for column, value in zip(self.columns, self.values(record))}
            for record in self.records
        ]


# ============================================================================
# Endpoint Configuration
# ============================================================================

# request -> positional bind arguments
ArgsFunction = Callable[[Any], Sequence[Any]]


@dataclass(frozen=True)
class QuerySpec:
    """Immutable configuration of one query endpoint.

    Built once by the endpoint factory and shared by every request.
    """

    executor: Any
    query: str
    args: ArgsFunction
    format: str = "csv"
    limit: int | None = None
    offset: int | None = 0
    order: str | None = None
