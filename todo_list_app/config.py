# todo_list_app/config.py

"""Settings for the to-do page: environment variables, then Streamlit secrets, then defaults.

Examples:
    export TODO_APP_TITLE="Groceries"
    export TODO_SHOW_SUMMARY=0

or in .streamlit/secrets.toml:
    app_title = "Groceries"
    show_summary = false
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import streamlit as st

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODO"

DEFAULT_APP_TITLE = "Simple To-Do List"
DEFAULT_PAGE_ICON = "📝"
LAYOUTS = ("centered", "wide")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _read_secrets() -> Mapping[str, Any]:
    """Top-level Streamlit secrets, or {} when there is no secrets.toml."""
    try:
        if not st.secrets.load_if_toml_exists():
            return {}
        return {key: st.secrets[key] for key in st.secrets}
    except Exception:
        logger.debug("No Streamlit secrets available.", exc_info=True)
        return {}


def _lookup(name: str, environ: Mapping[str, str], secrets: Mapping[str, Any]) -> Any | None:
    raw = environ.get(_k(name.upper()))
    if raw is not None and raw.strip() != "":
        return raw
    return secrets.get(name)


def _as_str(raw: Any | None, default: str) -> str:
    if raw is None:
        return default
    value = str(raw).strip()
    return value or default


def _as_bool(name: str, raw: Any | None, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    logger.warning("Invalid boolean for %s: %r, using %s", name, raw, default)
    return default


def _as_choice(name: str, raw: Any | None, choices: tuple[str, ...], default: str) -> str:
    if raw is None:
        return default
    value = str(raw).strip()
    for choice in choices:
        if value.lower() == choice.lower():
            return choice
    logger.warning("Invalid value for %s: %r (expected one of %s), using %s", name, raw, choices, default)
    return default


@dataclass(frozen=True, slots=True)
class Settings:
    app_title: str = DEFAULT_APP_TITLE
    page_icon: str = DEFAULT_PAGE_ICON
    layout: str = "centered"
    show_summary: bool = True
    log_level: str = "INFO"

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None,
        secrets: Mapping[str, Any] | None = None,
    ) -> "Settings":
        if environ is None:
            environ = os.environ
        if secrets is None:
            secrets = _read_secrets()

        def lookup(name: str) -> Any | None:
            return _lookup(name, environ, secrets)

        return Settings(
            app_title=_as_str(lookup("app_title"), DEFAULT_APP_TITLE),
            page_icon=_as_str(lookup("page_icon"), DEFAULT_PAGE_ICON),
            layout=_as_choice("layout", lookup("layout"), LAYOUTS, "centered"),
            show_summary=_as_bool("show_summary", lookup("show_summary"), True),
            log_level=_as_choice("log_level", lookup("log_level"), LOG_LEVELS, "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
