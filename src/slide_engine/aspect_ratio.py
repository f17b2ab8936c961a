"""Canvas sizes for the supported aspect ratios."""

import logging
from dataclasses import replace

from .errors import UnsupportedAspectRatio
from .theme_resolver import SlideSize, TemplateContext

logger = logging.getLogger(__name__)

DEFAULT_ASPECT_RATIO = "16:9"

# ratio key -> (width, height) in px
ASPECT_RATIOS: dict[str, tuple[int, int]] = {
    "16:9": (1200, 675),
    "4:3": (1200, 900),
    "A4-portrait": (794, 1123),
}


def canvas_size(ratio: str) -> tuple[int, int]:
    """Return (width, height) for a ratio key.

    Raises:
        UnsupportedAspectRatio: If the ratio is not in ASPECT_RATIOS.
    """
    try:
        return ASPECT_RATIOS[ratio]
    except (KeyError, TypeError):
        raise UnsupportedAspectRatio(ratio, ASPECT_RATIOS) from None


def is_portrait(ratio: str) -> bool:
    width, height = canvas_size(ratio)
    return height > width


def with_aspect_ratio(context: TemplateContext, ratio: str) -> TemplateContext:
    """Return a copy of a context sized for another aspect ratio.

    Only ``slide_size`` changes. Applying the same ratio twice yields an
    equal context.
    """
    width, height = canvas_size(ratio)
    if (context.slide_size.width, context.slide_size.height) == (width, height):
        return context
    logger.debug(f"Resizing context canvas to {width}x{height} ({ratio})")
    return replace(context, slide_size=SlideSize(width=width, height=height))
