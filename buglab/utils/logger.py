"""Logging utilities tailored for maze search runs."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "buglab"
SEARCH_LOGGER_NAME = "buglab.engine.strategies"


def configure_logging(
    level: int = logging.INFO,
    *,
    search_level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Attach one formatted handler to the ``buglab`` logger namespace.

    A search run can evaluate millions of layouts, so per-state progress is
    logged at DEBUG by the strategies module. ``search_level`` sets that
    module on its own, letting callers follow the frontier without also
    turning on DEBUG everywhere else. Loggers outside the namespace are left
    alone.
    """

    handler = logging.StreamHandler(stream)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    base = logging.getLogger(ROOT_LOGGER_NAME)
    base.handlers.clear()
    base.addHandler(handler)
    base.setLevel(level)
    base.propagate = False

    search = logging.getLogger(SEARCH_LOGGER_NAME)
    search.setLevel(search_level if search_level is not None else logging.NOTSET)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``buglab`` namespace, configuring defaults if needed.

    Short names such as ``"cli"`` are prefixed, so ``get_logger("cli")`` is
    ``buglab.cli``.
    """

    base = logging.getLogger(ROOT_LOGGER_NAME)
    if not base.handlers:
        configure_logging()
    if not name or name == ROOT_LOGGER_NAME:
        return base
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
