"""Advanced settings: log level, preview size and the configured input files."""

from typing import Any

import streamlit as st

from app.config_loader import sample_document_path, themes_file_path
from app.constants import LOG_LEVELS, DEFAULT_LOG_LEVEL, DEFAULT_PREVIEW_LIMIT, SessionKeys
from app.state import get_settings_config, get_ui_config


def render_advanced_settings(base_config: dict[str, Any]) -> None:
    st.divider()

    with st.expander("🔧 Advanced Settings", expanded=False):
        col1, col2 = st.columns(2)

        with col1:
            configured_level = get_settings_config().get('logging', {}).get('level', DEFAULT_LOG_LEVEL)
            st.selectbox(
                "Log level",
                options=LOG_LEVELS,
                index=LOG_LEVELS.index(configured_level) if configured_level in LOG_LEVELS else 1,
                key=SessionKeys.LOG_LEVEL,
                help="Applied on the next render"
            )

        with col2:
            st.number_input(
                "Slides to preview",
                min_value=1,
                max_value=200,
                value=int(get_ui_config().get('preview', {}).get('max_slides', DEFAULT_PREVIEW_LIMIT)),
                key=SessionKeys.PREVIEW_LIMIT,
                help="Larger decks are still rendered in full; only the preview is cut"
            )

        st.markdown("##### Input files")
        sample = sample_document_path(base_config)
        themes = themes_file_path(base_config)
        st.text_input("Sample document", value=str(sample or ''), disabled=True)
        st.text_input(
            "Extra themes file",
            value=themes or 'built-in themes only',
            disabled=True,
            help="Set paths.themes in configs/config.yaml to add or replace themes"
        )
