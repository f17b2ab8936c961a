"""Session state access for the app.

Render results live in three slots (HTML bundle, rendered slides, download
file name) that are always written together.
"""

from typing import Any

import streamlit as st

from app.constants import DEFAULT_LOG_LEVEL, DEFAULT_PREVIEW_LIMIT, SessionKeys


def get_state_value(key: str, default: Any = None) -> Any:
    return st.session_state.get(key, default)


def set_state_value(key: str, value: Any) -> None:
    st.session_state[key] = value


def has_state_key(key: str) -> bool:
    return key in st.session_state


# === Base config sections ===

def get_base_config() -> dict[str, Any]:
    return get_state_value(SessionKeys.BASE_CONFIG, {})


def get_ui_config() -> dict[str, Any]:
    return get_base_config().get('ui', {})


def get_settings_config() -> dict[str, Any]:
    return get_base_config().get('settings', {})


def get_log_level() -> str:
    return get_state_value(SessionKeys.LOG_LEVEL, DEFAULT_LOG_LEVEL)


# === Render result ===

def store_render_result(html_bytes: bytes, slides: list, output_filename: str) -> None:
    """Keep the latest render so download and preview survive reruns."""
    set_state_value(SessionKeys.HTML_BYTES, html_bytes)
    set_state_value(SessionKeys.RENDERED_SLIDES, slides)
    set_state_value(SessionKeys.OUTPUT_FILENAME, output_filename)


def clear_render_result() -> None:
    for key in (SessionKeys.HTML_BYTES, SessionKeys.RENDERED_SLIDES, SessionKeys.OUTPUT_FILENAME):
        set_state_value(key, None)


def get_html_bytes() -> bytes | None:
    return get_state_value(SessionKeys.HTML_BYTES)


def get_rendered_slides() -> list:
    """HTMLSlides of the last successful render (empty before the first)."""
    return get_state_value(SessionKeys.RENDERED_SLIDES) or []


def get_output_filename() -> str | None:
    return get_state_value(SessionKeys.OUTPUT_FILENAME)


def get_preview_limit() -> int:
    """Slides shown in the preview: the advanced-settings value, else ui.preview.max_slides."""
    configured = get_ui_config().get('preview', {}).get('max_slides', DEFAULT_PREVIEW_LIMIT)
    return int(get_state_value(SessionKeys.PREVIEW_LIMIT, configured))
