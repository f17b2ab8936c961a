"""App start-up: import path, session defaults, page setup."""

import sys
from typing import Any

import streamlit as st

from app.constants import (
    SRC_DIR,
    SessionKeys,
    DEFAULT_PAGE_TITLE,
    DEFAULT_PAGE_LAYOUT,
)
from app.state import clear_render_result, has_state_key, set_state_value


def setup_python_path() -> None:
    """Put src/ on sys.path so slide_engine imports without being installed."""
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def init_session_state() -> None:
    """Load the base config once per session and reset the render slots."""
    from app.config_loader import load_base_config

    if not has_state_key(SessionKeys.BASE_CONFIG):
        set_state_value(SessionKeys.BASE_CONFIG, load_base_config())
    if not has_state_key(SessionKeys.RENDERED_SLIDES):
        clear_render_result()


def configure_page(base_config: dict[str, Any]) -> None:
    page_config = base_config.get('ui', {}).get('page', {})
    st.set_page_config(
        page_title=page_config.get('title', DEFAULT_PAGE_TITLE),
        layout=page_config.get('layout', DEFAULT_PAGE_LAYOUT)
    )


def render_header(base_config: dict[str, Any]) -> None:
    """Title, tagline and a warning when the sample document is missing."""
    from app.config_loader import sample_document_path

    st.title("🎞️ Slide Engine")
    st.markdown("Render slide documents into themed HTML decks, preview them and download the result.")

    sample = sample_document_path(base_config)
    if sample is None or not sample.exists():
        st.warning(f"Sample document not found ({sample}); upload a document instead.")
    st.divider()


def bootstrap_app() -> dict[str, Any]:
    """Prepare the session and page.

    Returns:
        The base configuration dictionary
    """
    setup_python_path()
    init_session_state()

    base_config = st.session_state[SessionKeys.BASE_CONFIG]
    configure_page(base_config)
    render_header(base_config)

    return base_config
