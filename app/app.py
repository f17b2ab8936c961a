"""Streamlit UI for the slide engine.

Run with:
    streamlit run app/app.py
"""

import sys
from pathlib import Path

# Make the `app` package importable when launched via `streamlit run app/app.py`
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.bootstrap import bootstrap_app  # noqa: E402
from app.components import (  # noqa: E402
    render_content_source_section,
    render_template_source_section,
    render_output_config_section,
    render_generate_section,
    render_preview_section,
    render_download_section,
    render_advanced_settings,
)


def main():
    """Main Streamlit application."""
    base_config = bootstrap_app()

    content_source, uploaded_file = render_content_source_section(base_config)
    template_id = render_template_source_section(base_config)
    aspect_ratio, output_filename = render_output_config_section(base_config)

    render_generate_section(
        content_source=content_source,
        uploaded_file=uploaded_file,
        template_id=template_id,
        aspect_ratio=aspect_ratio,
        output_filename=output_filename,
    )

    render_download_section()
    render_preview_section()
    render_advanced_settings(base_config)


if __name__ == "__main__":
    main()
