"""Template selection component."""

from typing import Any

import streamlit as st

from app.config_loader import themes_file_path
from app.constants import SessionKeys
from app.services.generation_service import get_template_choices
from app.state import get_settings_config


def render_template_source_section(base_config: dict[str, Any]) -> str:
    """Render the template picker.

    Args:
        base_config: Base configuration dictionary

    Returns:
        Selected template id
    """
    st.subheader("🎨 Template")

    choices = get_template_choices(themes_file_path(base_config))
    ids = [template_id for template_id, _ in choices]
    labels = dict(choices)

    configured = get_settings_config().get('template')
    default_index = ids.index(configured) if configured in ids else 0

    template_id = st.selectbox(
        "Select template:",
        options=ids,
        index=default_index,
        format_func=lambda template_id: f"{labels[template_id]} ({template_id})",
        key=SessionKeys.TEMPLATE_ID
    )

    st.divider()

    return template_id
