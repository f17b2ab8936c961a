"""Per-type slide renderers.

Each renderer is a pure function ``render_x(slide, ctx) -> HTMLSlide``.
"""

from .basic import (
    render_title,
    render_section,
    render_content,
    render_bullet,
    render_two_column,
    render_thank_you,
    render_quote,
)
from .data import (
    render_chart,
    render_table,
    render_stats,
)
from .layouts import (
    render_comparison,
    render_timeline,
    render_feature_grid,
    render_team_profile,
    render_process,
    render_roadmap,
    render_pricing,
    render_agenda,
)
from .media import (
    render_image,
    render_image_text,
    render_testimonial,
    render_gallery,
)
from .reports import (
    render_report_two_column,
    render_report_a4,
)

__all__ = [
    # Text slides
    "render_title",
    "render_section",
    "render_content",
    "render_bullet",
    "render_two_column",
    "render_thank_you",
    "render_quote",
    # Data slides
    "render_chart",
    "render_table",
    "render_stats",
    # Structured layouts
    "render_comparison",
    "render_timeline",
    "render_feature_grid",
    "render_team_profile",
    "render_process",
    "render_roadmap",
    "render_pricing",
    "render_agenda",
    # Media
    "render_image",
    "render_image_text",
    "render_testimonial",
    "render_gallery",
    # Reports
    "render_report_two_column",
    "render_report_a4",
]
