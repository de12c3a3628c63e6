# Adapted from geomap/logging_utils.py in boston_geomap:
#
# MIT License
#
# Copyright (c) 2025 Jonas Waldeck
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND.

from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

PICKER_LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
PICKER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Click-level detail stays out of the rotating file unless asked for
FILE_MIN_LEVEL = logging.INFO


def _replace_handlers(logger: logging.Logger) -> None:
    # Streamlit re-runs app.py on every interaction; handlers must not pile up
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(
    name: str,
    logs_dir: Path | None,
    level: str = "INFO",
    to_console: bool = True,
) -> logging.Logger:
    """
    Configure the logger tree under ``name`` (the engine logs as "domain.*").

    With ``logs_dir`` set, a daily rotating ``<name>.log`` keeps two weeks
    of history; the file never records below INFO even when the logger
    itself runs at DEBUG. ``logs_dir=None`` logs to the console only.
    """
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.propagate = False
    _replace_handlers(logger)

    fmt = logging.Formatter(fmt=PICKER_LOG_FORMAT, datefmt=PICKER_DATE_FORMAT)

    if logs_dir is not None:
        logs_dir.mkdir(parents=True, exist_ok=True)
        fh = TimedRotatingFileHandler(
            str(logs_dir / f"{name}.log"),
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        fh.setLevel(max(resolved, FILE_MIN_LEVEL))
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if to_console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger
