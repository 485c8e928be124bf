# -*- coding: utf-8 -*-
"""Package-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
:func:`setup_logger` once per invocation so warnings reach stderr and
everything at DEBUG and above lands in ``debug.log`` under the working
directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

_PKG = "ccswitch"
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_level(level: Union[int, str, None]) -> int:
    """Turn ``"debug"``, ``"INFO"``, ``10`` ... into a logging level."""
    if level is None or level == "":
        return logging.WARNING
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logger(
    level: Union[int, str, None] = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure the ``ccswitch`` logger. Safe to call more than once.

    Repeated calls adjust the console level and point the file handler at
    *log_file* instead of stacking new handlers.
    """
    root = logging.getLogger(_PKG)
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

    # Rebuilt on every call so it binds to the current ``sys.stderr``.
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(parse_level(level))
    root.addHandler(console)

    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            if log_file is not None and Path(
                handler.baseFilename,
            ) == log_file.resolve():
                return root
            root.removeHandler(handler)
            handler.close()

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            root.addHandler(fh)
        except OSError:
            root.warning(
                "Could not open log file %s; file logging disabled.",
                log_file,
            )

    return root
