"""Shared pytest fixtures for resultview tests."""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from resultview.models.domain import RowSet

PEOPLE = [
    {"id": 1, "name": "Ada", "score": 9.5, "active": True, "note": None},
    {"id": 2, "name": "Grace, Admiral", "score": 8, "active": False, "note": 'said "hi"'},
    {"id": 3, "name": "Linus", "score": Decimal("7.25"), "active": True, "note": "line\nbreak"},
]


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine with a seeded people table."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(
            text("CREATE TABLE people (id INTEGER PRIMARY KEY, name TEXT, score REAL, note TEXT)")
        )
        conn.execute(
            text("INSERT INTO people (id, name, score, note) VALUES (:id, :name, :score, :note)"),
            [
                {"id": 1, "name": "Ada", "score": 9.5, "note": None},
                {"id": 2, "name": "Grace", "score": 8.0, "note": "admiral"},
                {"id": 3, "name": "Linus", "score": 7.25, "note": "kernel"},
            ],
        )
    return engine


@pytest.fixture
def people_rows():
    """Driver-style row mappings with mixed value kinds."""
    return [dict(row) for row in PEOPLE]


@pytest.fixture
def people(people_rows):
    """RowSet built from people_rows."""
    return RowSet.from_rows(people_rows)
