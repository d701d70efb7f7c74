"""Error types for resultview.

Configuration errors are programmer mistakes: they are raised while an
endpoint is being set up (or when a renderer is asked for a format it does
not know) and are not meant to be recovered from. Query execution errors are
never wrapped here; they are handled at the request boundary.
"""


class ResultViewError(Exception):
    """Base class for resultview errors."""


class ConfigurationError(ResultViewError, ValueError):
    """Raised when an endpoint is configured with invalid options."""


class UnknownFormatError(ConfigurationError):
    """Raised when a result is requested in an unsupported output format."""

    def __init__(self, format: str):
        self.format = format
        super().__init__(f"Unknown format for result data: {format!r}")
