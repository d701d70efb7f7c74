"""Pydantic models for resultview.

Request-scoped values derived from query parameters, and the options used
to mount endpoints from configuration.
"""

from typing import Any

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """Effective format and pagination for one request.

    Request overrides merged over the endpoint defaults.
    """

    format: str
    limit: int | None = None
    offset: int | None = None
    order: str | None = None


class RenderMeta(BaseModel):
    """What the renderers may show about how the rows were selected."""

    limit: int | None = None
    offset: int | None = None
    order: str | None = None
    params: list[tuple[str, str]] = Field(default_factory=list)  # other query parameters


class RenderedResult(BaseModel):
    """Encoded payload and its content type."""

    payload: str
    content_type: str


class EndpointOptions(BaseModel):
    """A query endpoint mounted by the application factory."""

    path: str
    query: str
    args: list[Any] = Field(default_factory=list)
    format: str | None = None  # settings.default_format when None
    limit: int | None = None
    offset: int | None = 0
    order: str | None = None
