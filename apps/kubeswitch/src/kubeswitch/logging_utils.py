"""Logging setup for kubeswitch."""

from __future__ import annotations

import logging
import sys

from .config import Settings
from .constants import LOG_FORMAT


def setup_logging(settings: Settings) -> None:
    """Set up logging configuration.

    Logging stays disabled unless a log file or debug mode is configured.
    """
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            str(settings.log_file), encoding="utf-8"
        )
    elif settings.debug:
        handler = logging.StreamHandler(sys.stderr)
    else:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
