from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "hundred_prisoners"


def get_logger(*, log_path: Optional[Path] = None) -> logging.Logger:
    """
    Configure and return the diagnostics logger.

    Logs to stderr and, when `log_path` is given, also appends to that file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers if called multiple times in-process.
    if getattr(logger, "_configured", False):
        return logger

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setLevel(logging.INFO)
    sh.setFormatter(fmt)

    logger.addHandler(sh)
    logger.propagate = False
    logger._configured = True  # type: ignore[attr-defined]
    return logger


def reset_logger() -> None:
    """Drop handlers installed by `get_logger` so it can be configured again."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger._configured = False  # type: ignore[attr-defined]
