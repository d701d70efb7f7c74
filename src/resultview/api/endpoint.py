"""Query endpoint factory.

query_endpoint(...) validates its options once and returns an async
request handler bound to an immutable QuerySpec. Per request:
augment query -> execute -> build RowSet -> render -> respond.

GET <path>?format=&limit=&offset=&order= - query results in the chosen format
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from resultview.core.augment import augment_query, resolve_render_request
from resultview.errors import ConfigurationError
from resultview.models.domain import ArgsFunction, QueryRows, QuerySpec, RowSet
from resultview.models.types import RenderMeta
from resultview.render import ALLOWED_FORMATS, render

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "500: Internal server error"

Endpoint = Callable[[Request], Awaitable[Response]]


def _normalize_args(args: Sequence[Any] | ArgsFunction) -> ArgsFunction:
    """Turn a static argument list into a function of the request."""
    if callable(args):
        return args
    if isinstance(args, (list, tuple)):
        static_args = list(args)
        return lambda request: list(static_args)
    raise ConfigurationError("args are expected to be a list or a function.")


def _check_page_default(name: str, value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer or None, got {value!r}")


def build_query_spec(
    executor: Any,
    query: str,
    args: Sequence[Any] | ArgsFunction = (),
    format: str = "csv",
    limit: int | None = None,
    offset: int | None = 0,
    order: str | None = None,
) -> QuerySpec:
    """Validate endpoint options and freeze them into a QuerySpec.

    Raises:
        ConfigurationError: If any option is invalid.
    """
    if executor is None or not callable(getattr(executor, "execute", None)):
        raise ConfigurationError("Expected an executor with an 'execute' function")

    if not query or not isinstance(query, str):
        raise ConfigurationError("Query is not a string.")

    if format not in ALLOWED_FORMATS:
        raise ConfigurationError(
            f"format must be one of {', '.join(ALLOWED_FORMATS)}, got {format!r}"
        )

    _check_page_default("limit", limit)
    _check_page_default("offset", offset)

    if order is not None and not isinstance(order, str):
        raise ConfigurationError(f"order must be a string or None, got {order!r}")

    return QuerySpec(
        executor=executor,
        query=query,
        args=_normalize_args(args),
        format=format,
        limit=limit,
        offset=offset,
        order=order,
    )


async def _execute(executor: Any, query: str, args: list[Any]) -> Any:
    """Run the query, in the thread pool unless the executor is async."""
    if inspect.iscoroutinefunction(executor.execute):
        return await executor.execute(query, args)
    return await run_in_threadpool(executor.execute, query, args)


async def handle_query(spec: QuerySpec, request: Request) -> Response:
    """Serve one request against a query spec.

    Args:
        spec: Endpoint configuration.
        request: Incoming request.

    Returns:
        Rendered rows (200), or the generic error body (500) when
        anything fails, including an unknown format.
    """
    params = request.query_params
    render_request = resolve_render_request(params, spec)
    query = augment_query(spec.query, render_request)

    try:
        args = list(spec.args(request))
        result: QueryRows | Sequence[Any] = await _execute(spec.executor, query, args)
        rows = RowSet.from_result(result)
        meta = RenderMeta(
            limit=render_request.limit,
            offset=render_request.offset,
            order=render_request.order,
            params=[(key, value) for key, value in params.multi_items() if key != "format"],
        )
        rendered = render(render_request.format, rows, meta)
    except Exception as e:
        logger.error(f"Request failed: {e}", exc_info=True)
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)

    return Response(content=rendered.payload, media_type=rendered.content_type)


def query_endpoint(
    executor: Any,
    query: str,
    args: Sequence[Any] | ArgsFunction = (),
    format: str = "csv",
    limit: int | None = None,
    offset: int | None = 0,
    order: str | None = None,
) -> Endpoint:
    """Create a request handler that serves the results of a query.

    Args:
        executor: Object with an ``execute(query, args)`` method, sync or async.
        query: Base query text.
        args: Positional bind arguments, or a function of the request
            returning them (called once per request).
        format: Default output format (csv, html, json, json-pretty).
        limit: Default LIMIT, or None for no limit.
        offset: Default OFFSET, or None for no offset clause.
        order: Default ORDER BY clause.

    Returns:
        Async endpoint taking a Request.

    Raises:
        ConfigurationError: If the options are invalid.
    """
    spec = build_query_spec(
        executor,
        query,
        args=args,
        format=format,
        limit=limit,
        offset=offset,
        order=order,
    )

    async def endpoint(request: Request) -> Response:
        return await handle_query(spec, request)

    endpoint.spec = spec  # type: ignore[attr-defined]
    return endpoint


def mount_query(router: FastAPI | APIRouter, path: str, **options: Any) -> Endpoint:
    """Register a query endpoint as a GET route.

    Args:
        router: Application or router to add the route to.
        path: Route path.
        **options: Passed to query_endpoint().

    Returns:
        The registered endpoint.
    """
    endpoint = query_endpoint(**options)
    router.add_api_route(path, endpoint, methods=["GET"], include_in_schema=False)
    logger.info(f"Mounted query endpoint at {path}")
    return endpoint
