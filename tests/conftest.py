# tests/conftest.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from todo_list_app.logging_setup import PACKAGE_LOGGER
from todo_list_app.task_store import TaskStore

APP_FILE = Path(__file__).resolve().parents[1] / "todo_list_app" / "app.py"


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """
    setup_logging() turns propagation off for the package logger (the app script
    calls it on every run). Undo that so caplog sees records in every test.
    """
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def id_factory() -> Callable[[], str]:
    """Deterministic ids: task-1, task-2, ..."""
    counter = itertools.count(1)
    return lambda: f"task-{next(counter)}"


@pytest.fixture()
def store(id_factory: Callable[[], str]) -> TaskStore:
    return TaskStore(id_factory=id_factory)


@pytest.fixture()
def groceries(store: TaskStore) -> TaskStore:
    """Store holding "Buy milk" (task-1) and "Walk dog" (task-2), both open."""
    store.add_task("Buy milk")
    store.add_task("Walk dog")
    return store


@pytest.fixture()
def app() -> AppTest:
    at = AppTest.from_file(str(APP_FILE), default_timeout=10)
    at.run()
    return at
