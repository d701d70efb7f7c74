"""Base executor interface.

An executor is the only part of resultview that talks to a database:
- narrow interface `execute(query, args) -> rows`
- rows are mappings of column name to native value, or a QueryRows
- forbidden: formatting, HTTP concerns

Any object with a callable ``execute`` is accepted by the endpoint factory;
subclassing ExecutorBase is a convenience, not a requirement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from resultview.models.domain import QueryRows


class ExecutorBase(ABC):
    """Abstract base class for query executors."""

    @abstractmethod
    def execute(
        self, query: str, args: Sequence[Any]
    ) -> QueryRows | Sequence[Mapping[str, Any]]:
        """Run a query with positional bind arguments.

        Args:
            query: Final query text.
            args: Positional bind arguments.

        Returns:
            The rows produced by the query.
        """
        pass
