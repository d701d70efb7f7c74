#!/usr/bin/env python3
"""Serve demo query endpoints over a seeded SQLite database.

Usage:
    python scripts/serve_demo.py

This script:
1. Seeds a demo database with a small `columns` table
2. Mounts three endpoints:
   /columns          every row as csv
   /columns/html     html table with a default limit and order
   /columns/filter   rows whose column_name matches ?column_name=
3. Serves them with uvicorn on http://127.0.0.1:3000

SQLite needs LIMIT before OFFSET, so the demo endpoints leave the default
offset unset; try ?limit=2 or ?order=table_name DESC.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import uvicorn  # noqa: E402
from sqlalchemy import text  # noqa: E402

from resultview.api.app import create_app  # noqa: E402
from resultview.config import Settings, configure_logging  # noqa: E402
from resultview.db.session import get_engine  # noqa: E402
from resultview.models.types import EndpointOptions  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
DEMO_PORT = 3000

DEMO_COLUMNS = [
    ("runs", "run_id", "varchar", False),
    ("runs", "status", "varchar", False),
    ("runs", "started_at", "timestamp", True),
    ("metrics", "run_id", "varchar", False),
    ("metrics", "value", "numeric", True),
    ("ratings", "notes", "text", True),
]


def seed_database(url: str) -> None:
    """Create and fill the demo table, replacing any previous contents."""
    engine = get_engine(url)
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE IF EXISTS columns"))
        conn.execute(
            text(
                "CREATE TABLE columns ("
                "table_name TEXT NOT NULL, column_name TEXT NOT NULL, "
                "data_type TEXT NOT NULL, is_nullable BOOLEAN NOT NULL)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO columns (table_name, column_name, data_type, is_nullable) "
                "VALUES (:table_name, :column_name, :data_type, :is_nullable)"
            ),
            [
                {
                    "table_name": table_name,
                    "column_name": column_name,
                    "data_type": data_type,
                    "is_nullable": is_nullable,
                }
                for table_name, column_name, data_type, is_nullable in DEMO_COLUMNS
            ],
        )
    print(f"Seeded {len(DEMO_COLUMNS)} rows into {url}")


def main() -> int:
    settings = Settings(database_url=f"sqlite:///{DEMO_DB_PATH}")
    configure_logging(settings.log_level)
    seed_database(settings.database_url)

    app = create_app(
        settings,
        endpoints=[
            EndpointOptions(
                path="/columns",
                query="SELECT * FROM columns",
                format="csv",
                offset=None,
            ),
            EndpointOptions(
                path="/columns/html",
                query="SELECT * FROM columns",
                format="html",
                limit=100,
                offset=None,
                order="table_name ASC, column_name DESC",
            ),
        ],
    )

    # Bind arguments taken from the request need a function, which
    # EndpointOptions cannot carry, so this one is mounted directly.
    from resultview.api.endpoint import mount_query
    from resultview.executors import SqlAlchemyExecutor

    mount_query(
        app,
        "/columns/filter",
        executor=SqlAlchemyExecutor(get_engine(settings.database_url)),
        query="SELECT * FROM columns WHERE column_name = ?",
        args=lambda request: [request.query_params.get("column_name")],
        format="html",
        offset=None,
    )

    uvicorn.run(app, host="127.0.0.1", port=DEMO_PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
