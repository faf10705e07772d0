"""Package logger setup."""

from __future__ import annotations

import logging

from markdoc2doc.config import MARKDOC2DOC_LOG_LEVEL

_PACKAGE_LOGGER = "markdoc2doc"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, applying the configured package level once."""
    global _configured
    if not _configured:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(
            getattr(logging, MARKDOC2DOC_LOG_LEVEL, logging.WARNING)
        )
        _configured = True
    return logging.getLogger(name)
