# todo_list_app/cli.py

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from todo_list_app.config import get_settings
from todo_list_app.logging_setup import setup_logging

logger = logging.getLogger(__name__)

APP_PATH = Path(__file__).with_name("app.py")


def build_command(extra_args: list[str] | None = None) -> list[str]:
    """`python -m streamlit run <app.py> [extra args]` for the current interpreter."""
    return [sys.executable, "-m", "streamlit", "run", str(APP_PATH), *(extra_args or [])]


def main(argv: list[str] | None = None) -> int:
    """Start the to-do page. Extra arguments are passed to `streamlit run` unchanged."""
    setup_logging(get_settings().log_level)
    args = list(sys.argv[1:] if argv is None else argv)
    command = build_command(args)
    logger.info("Starting Streamlit: %s", " ".join(command))
    completed = subprocess.run(command, check=False)
    return completed.returncode
