# todo_list_app/view.py

"""
Streamlit rendering of a TaskStore.

Every render reads the store fresh; widgets only forward gestures to the store
through on_click/on_change callbacks. Streamlit reruns the page script after a
callback, so the next render always shows the current store content.
"""

from __future__ import annotations

import logging
import re

import streamlit as st

from todo_list_app.task_store import Task, TaskStore

logger = logging.getLogger(__name__)

STORE_KEY = "task_store"
DRAFT_KEY = "draft_input"
ADD_KEY = "add_task"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!~|<>$:])")


# --- Session binding ---
def get_task_store() -> TaskStore:
    """The session's TaskStore, created on first use (lives as long as the session)."""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = TaskStore()
        logger.info("Created task store for a new session.")
    return st.session_state[STORE_KEY]


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def task_markdown(task: Task) -> str:
    """Task text as Markdown, struck through when completed."""
    text = escape_markdown(task.text)
    return f"~~{text}~~" if task.completed else text


# --- Gesture callbacks ---
def _on_draft_change(store: TaskStore) -> None:
    store.set_draft(st.session_state.get(DRAFT_KEY, ""))


def _on_submit(store: TaskStore) -> None:
    store.set_draft(st.session_state.get(DRAFT_KEY, ""))
    if store.submit_draft() is not None:
        # widget state may be changed from a callback, before the widget is drawn again
        st.session_state[DRAFT_KEY] = store.draft


def _on_toggle(store: TaskStore, task_id: str) -> None:
    store.toggle_complete(task_id)


def _on_delete(store: TaskStore, task_id: str) -> None:
    store.delete_task(task_id)


# --- Widgets ---
def render_input(store: TaskStore) -> None:
    # Seed the input from the store once; afterwards the widget owns its value
    if DRAFT_KEY not in st.session_state:
        st.session_state[DRAFT_KEY] = store.draft

    # Input field | Add button
    col1, col2 = st.columns([0.8, 0.2], vertical_alignment="bottom")
    with col1:
        # Typing only updates the draft; nothing is added until "Add" is pressed
        st.text_input(
            "New Task",
            key=DRAFT_KEY,
            placeholder="What needs to be done?",
            on_change=_on_draft_change,
            args=(store,),
        )
    with col2:
        # Blank drafts are ignored by the store, so the button needs no guard
        st.button(
            "Add",
            key=ADD_KEY,
            on_click=_on_submit,
            args=(store,),
        )


def render_task_row(store: TaskStore, task: Task) -> None:
    # keys use the task id so a row keeps its widgets when rows above it are deleted
    done_key = f"done_{task.id}"
    st.session_state[done_key] = task.completed

    # Checkbox | Task text | Delete button
    col1, col2, col3 = st.columns([0.1, 0.75, 0.15], vertical_alignment="center")
    with col1:
        # Ticking the box toggles completion
        st.checkbox(
            task.text,
            key=done_key,
            on_change=_on_toggle,
            args=(store, task.id),
            label_visibility="collapsed",
        )
    with col2:
        # Struck through when completed
        st.markdown(task_markdown(task))
    with col3:
        st.button(
            "🗑️",
            key=f"delete_{task.id}",
            on_click=_on_delete,
            args=(store, task.id),
            help="Delete Task",
        )
    st.divider()


# --- Display Task List ---
def render_task_list(store: TaskStore) -> None:
    tasks = store.list_tasks()
    if not tasks:
        st.info("You have no tasks yet. Add some above! 🎉")
        return

    for task in tasks:
        render_task_row(store, task)


# --- Task Summary ---
def render_summary(store: TaskStore) -> None:
    counts = store.counts()
    st.sidebar.header("Task Summary")
    st.sidebar.metric("Total Tasks", counts.total)
    st.sidebar.metric("Completed Tasks ✅", counts.completed)
    st.sidebar.metric("Active Tasks ⏳", counts.active)
    if counts.total > 0:
        st.sidebar.progress(counts.completed / counts.total)


def render(store: TaskStore, *, title: str, show_summary: bool = True) -> None:
    st.title(title)
    render_input(store)
    render_task_list(store)
    if show_summary:
        render_summary(store)
