"""Logging for the sharebnb package.

Modules call ``get_logger(__name__)``. The first call attaches one stdout
handler to the ``sharebnb`` logger, at ``settings.LOG_LEVEL``. The package
logger does not propagate, so uvicorn's root handlers do not print each line
twice. Outside ``DEBUG`` the ``sqlalchemy.engine`` logger is held at WARNING so
statements and their bound parameters, password hashes included, are never
logged.
"""

import logging
import sys

from sharebnb.config import settings

PACKAGE_LOGGER = "sharebnb"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_handler = None


def _configure() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, "%Y-%m-%d %H:%M:%S"))

    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(settings.LOG_LEVEL.upper())
    package.addHandler(handler)
    package.propagate = False

    sa_engine = logging.getLogger("sqlalchemy.engine")
    sa_engine.setLevel(logging.INFO if settings.DEBUG else logging.WARNING)
    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, configuring the package logger on first use."""
    global _handler
    if _handler is None:
        _handler = _configure()
    return logging.getLogger(name)
