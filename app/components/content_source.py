"""Document source selection component."""

from typing import Any

import streamlit as st

from app.constants import CONTENT_SOURCES, DOCUMENT_FILE_TYPES, SessionKeys
from app.config_loader import sample_document_path


def render_content_source_section(base_config: dict[str, Any]) -> tuple[str, Any]:
    """Render the document source selection section.

    Args:
        base_config: Base configuration dictionary

    Returns:
        Tuple of (content_source, uploaded_file)
    """
    st.subheader("📄 Slide Document")

    col1, col2 = st.columns(2)

    with col1:
        content_source = st.radio(
            "Select document source:",
            CONTENT_SOURCES,
            horizontal=True,
            key=SessionKeys.CONTENT_SOURCE
        )

    uploaded_file = None
    if content_source == "Upload document":
        with col2:
            uploaded_file = st.file_uploader(
                "Upload slide document",
                type=DOCUMENT_FILE_TYPES,
                help="JSON or YAML document with a top-level 'slides' list"
            )
            if uploaded_file:
                st.success(f"✓ Uploaded: {uploaded_file.name}")
    else:
        with col2:
            sample = sample_document_path(base_config)
            st.info(f"Using sample: `{sample.name if sample else 'not configured'}`")

    st.divider()

    return content_source, uploaded_file
