"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI

from resultview.api.endpoint import mount_query
from resultview.config import Settings, load_settings
from resultview.db.session import get_engine
from resultview.executors import SqlAlchemyExecutor
from resultview.models.types import EndpointOptions


def create_app(
    settings: Settings | None = None,
    endpoints: Sequence[EndpointOptions] = (),
    executor: Any = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Runtime settings. Read from the environment when omitted.
        endpoints: Query endpoints to mount.
        executor: Executor shared by the endpoints. Defaults to a
            SqlAlchemyExecutor on settings.database_url.

    Returns:
        Configured FastAPI application.

    Raises:
        ConfigurationError: If an endpoint is misconfigured.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="resultview",
        description="SQL query results as csv, html and json",
        version="0.1.0",
    )

    if endpoints and executor is None:
        executor = SqlAlchemyExecutor(get_engine(settings.database_url))

    for options in endpoints:
        mount_query(
            app,
            options.path,
            executor=executor,
            query=options.query,
            args=options.args,
            format=options.format or settings.default_format,
            limit=options.limit,
            offset=options.offset,
            order=options.order,
        )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
