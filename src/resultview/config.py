"""Runtime settings.

Read from environment variables:
- RESULTVIEW_DATABASE_URL     SQLAlchemy URL (default sqlite:///data/resultview.db)
- RESULTVIEW_DEFAULT_FORMAT   output format when a request sets none (default csv)
- RESULTVIEW_LOG_LEVEL        logging level for the demo server (default INFO)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from resultview.db.session import DEFAULT_DATABASE_URL
from resultview.errors import ConfigurationError
from resultview.render.formats import ALLOWED_FORMATS


@dataclass(frozen=True)
class Settings:
    """Process-wide settings."""

    database_url: str = DEFAULT_DATABASE_URL
    default_format: str = "csv"
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ.

    Returns:
        Settings instance.

    Raises:
        ConfigurationError: If the default format or log level is unknown.
    """
    env = os.environ if environ is None else environ

    default_format = env.get("RESULTVIEW_DEFAULT_FORMAT", "csv")
    if default_format not in ALLOWED_FORMATS:
        raise ConfigurationError(
            f"RESULTVIEW_DEFAULT_FORMAT must be one of {', '.join(ALLOWED_FORMATS)}, "
            f"got {default_format!r}"
        )

    log_level = env.get("RESULTVIEW_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level: {log_level!r}")

    return Settings(
        database_url=env.get("RESULTVIEW_DATABASE_URL", DEFAULT_DATABASE_URL),
        default_format=default_format,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stderr handler on the root logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
