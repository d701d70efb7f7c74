"""SQLAlchemy-backed executor.

Runs query text straight through the DBAPI driver so positional arguments
use the driver's own placeholder style (``?`` for sqlite, ``%s`` for
psycopg).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Engine

from resultview.executors.base import ExecutorBase
from resultview.models.domain import QueryRows

logger = logging.getLogger(__name__)


class SqlAlchemyExecutor(ExecutorBase):
    """Executes queries on connections checked out from an engine.

    The engine's pool makes one executor safe to share between the
    threads serving concurrent requests.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, query: str, args: Sequence[Any]) -> QueryRows:
        params = tuple(args) or None
        logger.debug(f"Executing query with {len(args)} bind argument(s): {query}")
        with self.engine.connect() as conn:
            result = conn.exec_driver_sql(query, params)
            columns = list(result.keys())
            rows = [dict(row) for row in result.mappings()]
        return QueryRows(columns=columns, rows=rows)
