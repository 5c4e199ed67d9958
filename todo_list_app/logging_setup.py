# todo_list_app/logging_setup.py

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "todo_list_app"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Send todo_list_app logs to stderr.

    Streamlit re-executes the page script on every interaction, so this runs
    many times per session: existing handlers are replaced, never stacked.
    Only the package logger is touched; Streamlit's own loggers keep their config.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)

    # Streamlit configures the root logger too; avoid printing every line twice.
    logger.propagate = False
    return logger
