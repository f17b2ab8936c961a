"""UI components for the Streamlit app."""

from app.components.content_source import render_content_source_section
from app.components.template_source import render_template_source_section
from app.components.output_config import render_output_config_section
from app.components.generate_button import render_generate_section
from app.components.download_section import render_preview_section, render_download_section
from app.components.advanced_settings import render_advanced_settings

__all__ = [
    'render_content_source_section',
    'render_template_source_section',
    'render_output_config_section',
    'render_generate_section',
    'render_preview_section',
    'render_download_section',
    'render_advanced_settings',
]
