"""Logging setup for the MCP server.

stdout carries the MCP stdio protocol, so log records always go to stderr.
"""

import logging
import os
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Checked in order; the first one set wins
LOG_LEVEL_ENV_VARS = ("PLANKA_LOG_LEVEL", "LOG_LEVEL")

QUIET_LOGGERS = ("httpx", "httpcore", "mcp")


def get_log_level() -> int:
    """Get log level from PLANKA_LOG_LEVEL or LOG_LEVEL.

    Defaults to WARNING if neither is set or the value is not a level name.
    """
    for env_var in LOG_LEVEL_ENV_VARS:
        level_name = os.getenv(env_var)
        if level_name:
            level = logging.getLevelName(level_name.upper())
            return level if isinstance(level, int) else logging.WARNING
    return logging.WARNING


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure root logging.

    Args:
        verbose: If True, log at DEBUG regardless of the environment
        stream: Where to write records (default: sys.stderr)
    """
    level = logging.DEBUG if verbose else get_log_level()

    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
