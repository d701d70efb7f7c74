"""Query augmentation for request-driven pagination and ordering.

The base query is extended by plain string concatenation:
- ORDER BY, OFFSET and LIMIT are appended in that fixed order
- the bind argument list is never touched

OFFSET, LIMIT and ORDER BY identifiers cannot be bound as placeholders
portably across SQL dialects, so they are spliced into the text. Values
coming from the request are sanitized first: page sizes must parse as
positive integers and the order clause is cut at the first semicolon.
The order clause is not otherwise validated; callers must accept it as a
trusted-enough input channel.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resultview.models.domain import QuerySpec
from resultview.models.types import RenderRequest


def augment_query(base_query: str, override: Mapping[str, Any] | RenderRequest) -> str:
    """Append ORDER BY, OFFSET and LIMIT clauses to a base query.

    Args:
        base_query: Query text as configured for the endpoint.
        override: Mapping (or RenderRequest) with optional ``order``,
            ``offset`` and ``limit`` values.

    Returns:
        Final query text.

    Example:
        >>> augment_query("SELECT * FROM t", {"offset": 5, "limit": 10, "order": "name ASC"})
        'SELECT * FROM t ORDER BY name ASC OFFSET 5 LIMIT 10'
    """
    if isinstance(override, RenderRequest):
        override = override.model_dump()

    order = override.get("order")
    offset = override.get("offset")
    limit = override.get("limit")

    parts = [base_query]
    if isinstance(order, str) and order:
        parts.append(f"ORDER BY {order}")
    if _is_integer(offset):
        parts.append(f"OFFSET {offset}")
    if _is_integer(limit):
        parts.append(f"LIMIT {limit}")
    return " ".join(parts)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_page_param(raw: str | None, default: int | None) -> int | None:
    """Parse a limit/offset query parameter.

    Values that do not parse as an integer, and values that parse to zero
    or less, fall back to the configured default.

    Args:
        raw: Raw query parameter value, or None when absent.
        default: Configured default for the endpoint.

    Returns:
        Effective value.
    """
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


def sanitize_order(raw: str | None, default: str | None) -> str | None:
    """Keep an order clause only up to its first semicolon.

    >>> sanitize_order("name; DROP TABLE t", None)
    'name'
    """
    if raw is None:
        return default
    order = raw.split(";", 1)[0].strip()
    return order or default


def resolve_render_request(params: Mapping[str, str], spec: QuerySpec) -> RenderRequest:
    """Merge request query parameters over the endpoint defaults.

    Args:
        params: Query parameters of the incoming request.
        spec: Endpoint configuration.

    Returns:
        RenderRequest for this request only.
    """
    return RenderRequest(
        format=params.get("format") or spec.format,
        limit=parse_page_param(params.get("limit"), spec.limit),
        offset=parse_page_param(params.get("offset"), spec.offset),
        order=sanitize_order(params.get("order"), spec.order),
    )
