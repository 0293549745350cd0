"""Logging setup shared by the engine, the store and the command line.

Every module asks for ``get_logger(__name__)``, so records land under the
``xword.*`` hierarchy (``xword.engine.puzzle``, ``xword.io.store``, ...).
Puzzle output is printed to stdout by the CLI while log records go to stderr,
which keeps saved grids and ``display`` output free of log noise.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install a single formatted handler on the root logger.

    Calling it again replaces the previous handler, so ``main`` can apply
    ``--log-level`` after imports have already set up the quiet default.
    Generation progress is logged at INFO and each placed black square group
    at DEBUG.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under ``xword``, falling back to WARNING-level output."""

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    return logging.getLogger(name or "xword")
