"""Static executor for demo/testing.

Returns canned rows without touching a database and records every call,
so endpoint behavior can be checked without a SQL dialect that accepts
the generated pagination clauses.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from resultview.executors.base import ExecutorBase


class StaticExecutor(ExecutorBase):
    """Executor that always returns the same rows.

    Set ``error`` to make every call raise it instead.
    """

    def __init__(
        self,
        rows: Sequence[Mapping[str, Any]] | None = None,
        error: Exception | None = None,
    ):
        self.rows = [dict(row) for row in rows or []]
        self.error = error
        self.calls: list[tuple[str, list[Any]]] = []

    def execute(self, query: str, args: Sequence[Any]) -> list[dict[str, Any]]:
        self.calls.append((query, list(args)))
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]

    @property
    def last_call(self) -> tuple[str, list[Any]] | None:
        return self.calls[-1] if self.calls else None
