"""Logging setup.

All log output goes to stderr (and optionally a file): stdout carries
MCP protocol messages when running on stdio.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hubspot_mcp.config.schema import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the ``hubspot_mcp`` logger from config.

    Safe to call more than once; previously installed handlers are
    replaced rather than duplicated.
    """
    logger = logging.getLogger("hubspot_mcp")
    logger.setLevel(config.level.upper())
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.file:
        path = Path(config.file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
