"""Slide type dispatch.

Maps each slide type tag to the renderer that draws it. The table is
checked against SLIDE_TYPES when the module is imported, so a renderer
missing for any tag is a start-up failure rather than a runtime surprise.
"""

import logging
from typing import Callable

from . import renderers
from .errors import UnsupportedSlideType
from .models import SLIDE_TYPES, HTMLSlide, Slide
from .theme_resolver import TemplateContext

logger = logging.getLogger(__name__)

Renderer = Callable[[Slide, TemplateContext], HTMLSlide]

RENDERERS: dict[str, Renderer] = {
    "title": renderers.render_title,
    "section": renderers.render_section,
    "content": renderers.render_content,
    "bullet": renderers.render_bullet,
    "twoColumn": renderers.render_two_column,
    "thankYou": renderers.render_thank_you,
    "chart": renderers.render_chart,
    "table": renderers.render_table,
    "stats": renderers.render_stats,
    "quote": renderers.render_quote,
    "comparison": renderers.render_comparison,
    "timeline": renderers.render_timeline,
    "featureGrid": renderers.render_feature_grid,
    "teamProfile": renderers.render_team_profile,
    "process": renderers.render_process,
    "roadmap": renderers.render_roadmap,
    "pricing": renderers.render_pricing,
    "imageText": renderers.render_image_text,
    "image": renderers.render_image,
    "agenda": renderers.render_agenda,
    "testimonial": renderers.render_testimonial,
    "gallery": renderers.render_gallery,
    "reportTwoColumn": renderers.render_report_two_column,
    "reportA4": renderers.render_report_a4,
}


def _check_coverage() -> None:
    missing = set(SLIDE_TYPES) - set(RENDERERS)
    extra = set(RENDERERS) - set(SLIDE_TYPES)
    if missing or extra:
        raise RuntimeError(
            f"Renderer table out of sync with slide types "
            f"(missing: {sorted(missing)}, extra: {sorted(extra)})"
        )


_check_coverage()


def is_supported(slide_type: str) -> bool:
    """Check whether a slide type tag has a renderer."""
    return slide_type in RENDERERS


def render(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Render one slide with the renderer registered for its type.

    Args:
        slide: Slide to render.
        ctx: Resolved template context (theme values and canvas size).

    Returns:
        Rendered HTMLSlide.

    Raises:
        UnsupportedSlideType: If no renderer exists for ``slide.type``.
    """
    renderer = RENDERERS.get(slide.type)
    if renderer is None:
        raise UnsupportedSlideType(slide.type)
    logger.debug(f"Rendering '{slide.type}' slide with {renderer.__name__}")
    return renderer(slide, ctx)
