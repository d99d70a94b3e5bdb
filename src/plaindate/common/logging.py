"""Logging setup for applications that want to see plaindate's diagnostics."""

from __future__ import annotations

import logging

LIBRARY_LOGGER = "plaindate"


def configure_logging(
    *,
    level: int = logging.INFO,
    library_level: int | None = None,
    force: bool = False,
) -> None:
    """Set up the root handler and, optionally, the verbosity of plaindate's own loggers.

    plaindate only emits DEBUG records (clamped ``Date.from_ymd`` input and rejected
    ISO8601 strings), so ``library_level=logging.DEBUG`` surfaces them without turning
    on DEBUG for the rest of the application.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if library_level is not None:
        logging.getLogger(LIBRARY_LOGGER).setLevel(library_level)
