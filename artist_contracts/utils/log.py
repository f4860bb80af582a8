"""Logging setup shared by the CLI and the API server"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from artist_contracts.utils.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a Rich handler.

    Falls back to LOG_LEVEL from settings when no level is given. Log
    output goes to stderr so command output on stdout stays parseable.
    """
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
