"""
Streamlit page for browsing Hacker News stories.

Run with ``streamlit run src/hacker_stories/main.py``. Each browser session
keeps its own ``StoriesService`` and event loop in ``st.session_state``.
"""

import asyncio

import streamlit as st
from loguru import logger

from hacker_stories.config import get_settings
from hacker_stories.services import StoriesService
from hacker_stories.ui import status_message, story_byline
from hacker_stories.utils.logging import setup_logging


def setup_page_config() -> None:
    """Configure Streamlit page settings."""
    st.set_page_config(
        page_title=get_settings().page_title,
        page_icon="📰",
        layout="centered"
    )


def initialize_session_state() -> None:
    """Create the per-session service and run the startup fetch once."""
    if 'loop' not in st.session_state:
        st.session_state.loop = asyncio.new_event_loop()

    if 'service' not in st.session_state:
        service = StoriesService.from_settings()
        st.session_state.service = service
        st.session_state.search_input = service.search_term
        st.session_state.loop.run_until_complete(service.start())


def handle_search_change() -> None:
    st.session_state.service.on_search_change(st.session_state.search_input)


def handle_submit() -> None:
    service: StoriesService = st.session_state.service
    st.session_state.loop.run_until_complete(service.on_commit_search())


def render_stories(service: StoriesService) -> None:
    """Render the status line and the list of visible stories."""
    view = service.view

    message = status_message(view)
    if view.is_error:
        st.error(message)
    elif message:
        st.info(message)

    if view.is_loading:
        return

    for story in view.visible_items:
        col1, col2 = st.columns([5, 1])
        with col1:
            if story.url:
                st.markdown(f"**[{story.title}]({story.url})**")
            else:
                st.markdown(f"**{story.title}**")
            st.caption(story_byline(story))
        with col2:
            st.button(
                "Dismiss",
                key=f"dismiss-{story.id}",
                on_click=service.on_remove,
                args=(story,)
            )


def main() -> None:
    """Main page function."""
    setup_page_config()
    initialize_session_state()

    service: StoriesService = st.session_state.service

    st.title(get_settings().page_title)

    col1, col2 = st.columns([5, 1])
    with col1:
        st.text_input("Search:", key="search_input", on_change=handle_search_change)
    with col2:
        st.button("Submit", on_click=handle_submit, disabled=not service.search_term)

    st.divider()
    render_stories(service)


if __name__ == "__main__":
    setup_logging()
    logger.info("Starting hacker stories page")
    main()
