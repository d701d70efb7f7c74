"""Query executors.

Structure:
- executors/base.py      - ExecutorBase interface
- executors/database.py  - SqlAlchemyExecutor (engine-backed)
- executors/static.py    - StaticExecutor (canned rows for demos/tests)
"""

from resultview.executors.base import ExecutorBase
from resultview.executors.database import SqlAlchemyExecutor
from resultview.executors.static import StaticExecutor

__all__ = [
    "ExecutorBase",
    "SqlAlchemyExecutor",
    "StaticExecutor",
]
