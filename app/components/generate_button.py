"""Render button and rendering logic component."""

from pathlib import Path
from typing import Any

import streamlit as st

from app.services.generation_service import (
    render_deck,
    write_uploaded_document,
    cleanup_temp_file,
)


def render_generate_section(
    content_source: str,
    uploaded_file: Any,
    template_id: str,
    aspect_ratio: str,
    output_filename: str,
) -> bool:
    """Render the generate button and handle rendering.

    Args:
        content_source: Selected document source
        uploaded_file: Uploaded document (if any)
        template_id: Selected template id
        aspect_ratio: Selected aspect ratio
        output_filename: Output filename

    Returns:
        True if rendering was successful, False otherwise
    """
    generate_clicked = st.button(
        "🚀 Render deck",
        type="primary",
        use_container_width=True
    )

    if not generate_clicked:
        return False

    if content_source == "Upload document" and uploaded_file is None:
        st.error("❌ Please upload a JSON or YAML document first.")
        return False

    temp_document_path: str | None = None

    try:
        if content_source == "Upload document" and uploaded_file:
            suffix = Path(uploaded_file.name).suffix.lower() or '.json'
            temp_document_path = write_uploaded_document(uploaded_file.read(), suffix)

        with st.spinner('🔄 Rendering slides...'):
            result = render_deck(
                template_id=template_id,
                aspect_ratio=aspect_ratio,
                output_filename=output_filename,
                uploaded_document_path=temp_document_path,
            )

        if result.success:
            st.success(f"✅ Rendered {len(result.slides)} slides")
            return True
        else:
            st.error(f"❌ {result.error_message}")
            if result.exception:
                st.exception(result.exception)
            return False

    finally:
        cleanup_temp_file(temp_document_path)
