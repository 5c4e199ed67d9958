# todo_list_app/app.py

"""
Page script for `streamlit run`. Streamlit executes this file from the top on
every interaction; the task list itself survives reruns in st.session_state.

How to run:
    todo-list-app
or
    streamlit run todo_list_app/app.py
"""

import streamlit as st

from todo_list_app.config import get_settings
from todo_list_app.logging_setup import setup_logging
from todo_list_app.view import get_task_store, render


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    # --- App Layout ---
    st.set_page_config(page_title=settings.app_title, page_icon=settings.page_icon, layout=settings.layout)

    store = get_task_store()
    render(store, title=f"{settings.page_icon} {settings.app_title}", show_summary=settings.show_summary)


main()
