"""Preview and download section component."""

import streamlit as st
import streamlit.components.v1 as components

from app.state import get_html_bytes, get_output_filename, get_preview_limit, get_rendered_slides

PREVIEW_MARGIN = 24


def render_preview_section() -> None:
    """Show each rendered slide in its own iframe."""
    from slide_engine.bundle import build_slide_preview

    slides = get_rendered_slides()
    if not slides:
        return

    limit = get_preview_limit()

    st.divider()
    st.subheader("👀 Preview")
    for idx, slide in enumerate(slides[:limit], start=1):
        st.caption(f"Slide {idx}")
        height = _canvas_height(slide.css)
        components.html(build_slide_preview(slide), height=height + PREVIEW_MARGIN, scrolling=True)

    if len(slides) > limit:
        st.info(f"Showing the first {limit} of {len(slides)} slides; download the deck to see all of them.")


def _canvas_height(css: str) -> int:
    for line in css.splitlines():
        line = line.strip()
        if line.startswith("--slide-height:"):
            return int(float(line.split(":", 1)[1].strip().rstrip(";").removesuffix("px")))
    return 675


def render_download_section() -> None:
    """Render the download section if a deck is available."""
    html_bytes = get_html_bytes()
    output_filename = get_output_filename()

    if html_bytes is not None:
        st.divider()
        st.subheader("📥 Download")
        st.download_button(
            label=f"📥 Download {output_filename}",
            data=html_bytes,
            file_name=output_filename,
            mime="text/html",
            use_container_width=True,
            key="download_button"
        )
