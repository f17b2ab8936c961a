"""Output configuration component."""

from typing import Any

import streamlit as st

from app.constants import DEFAULT_OUTPUT_FILENAME, SessionKeys
from app.state import get_ui_config, get_settings_config


def render_output_config_section(base_config: dict[str, Any]) -> tuple[str, str]:
    """Render the output configuration section.

    Args:
        base_config: Base configuration dictionary

    Returns:
        Tuple of (aspect_ratio, output_filename)
    """
    from slide_engine.aspect_ratio import ASPECT_RATIOS, DEFAULT_ASPECT_RATIO

    st.subheader("📤 Output Configuration")

    defaults = get_ui_config().get('defaults', {})
    ratios = list(ASPECT_RATIOS)
    configured = get_settings_config().get('aspect_ratio') or DEFAULT_ASPECT_RATIO

    col3, col4 = st.columns(2)

    with col3:
        aspect_ratio = st.selectbox(
            "Aspect ratio",
            options=ratios,
            index=ratios.index(configured) if configured in ratios else 0,
            format_func=lambda r: f"{r} ({ASPECT_RATIOS[r][0]}×{ASPECT_RATIOS[r][1]})",
            key=SessionKeys.ASPECT_RATIO
        )

    with col4:
        output_filename = st.text_input(
            "Output filename",
            value=defaults.get('output_filename', DEFAULT_OUTPUT_FILENAME),
            help="Name for the downloaded HTML file"
        )

        if not output_filename.endswith('.html'):
            output_filename = output_filename + '.html'
            st.caption("ℹ️ .html extension will be added automatically")

    st.divider()

    return aspect_ratio, output_filename
