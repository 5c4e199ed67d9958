"""Single-screen to-do list built with Streamlit."""

from todo_list_app.task_store import Task, TaskCounts, TaskStore

__all__ = ["Task", "TaskCounts", "TaskStore"]
__version__ = "0.1.0"
