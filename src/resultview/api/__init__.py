"""API module for resultview.

HTTP boundary:
- Reads query parameters, runs the configured query, writes the rendered rows
- Forbidden: SQL construction beyond pagination/order, formatting logic
"""

from resultview.api.endpoint import mount_query, query_endpoint

__all__ = ["mount_query", "query_endpoint"]
