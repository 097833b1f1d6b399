"""Logging utilities.

We use Python's standard `logging` module with a plain structured format.
The library itself only creates `text_metrics.*` loggers; handlers are
installed by applications (the CLI calls `setup_logging`).

- Console handler always (stderr, so scores on stdout stay clean)
- Optional file handler: `<log_dir>/<log_name>.log`
"""

from __future__ import annotations
import logging
import os
from typing import Optional, Union

FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.WARNING, log_dir: Optional[str] = None,
                  log_name: str = "text_metrics") -> logging.Logger:
    """
    Setup logging configuration for the `text_metrics` logger tree.

    Args:
        level: Level name or number for the package logger
        log_dir: Directory for a log file (no file logging if None)
        log_name: Log file stem
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {level}")

    root = logging.getLogger("text_metrics")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # File
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, f"{log_name}.log"), encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    return root
