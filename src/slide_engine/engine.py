"""Template engine facade.

The engine owns a TemplateRegistry and turns slides into HTMLSlides:

    slide -> registry lookup -> aspect-ratio adapter -> dispatcher -> renderer

Pipeline for a whole document:
    1. Resolve the template once (unknown ids fail before any rendering)
    2. Resize its canvas to the document's aspect ratio
    3. Render each slide in order, wrapping failures with the slide position
"""

import logging
import time
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .aspect_ratio import DEFAULT_ASPECT_RATIO, canvas_size
from .errors import SlideRenderError
from .models import HTMLSlide, Slide, SlideDocument, document_from_dict, slide_from_dict
from .registry import TemplateRegistry
from .template import DEFAULT_TEMPLATE_ID, Template, default_template
from .themes import Theme, get_theme, load_themes

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Renders slides with registered templates.

    Args:
        themes: Themes to register, one template each. Defaults to none.
        registry: Registry to use; a fresh one is created when omitted.
        include_default: Also register the 'toss-default' template.
    """

    def __init__(
        self,
        themes: Optional[Iterable[Theme]] = None,
        registry: Optional[TemplateRegistry] = None,
        include_default: bool = True,
    ):
        self.registry = registry if registry is not None else TemplateRegistry()
        themes = list(themes or [])

        if include_default:
            palette = get_theme(themes, "toss") or get_theme(load_themes(), "toss")
            self.registry.register(default_template(palette))

        for theme in themes:
            self.registry.register(Template.from_theme(theme))

        logger.debug(f"Template engine ready with {self.registry.count()} templates")

    def _template_for(self, template_id: str, aspect_ratio: Optional[str]) -> Template:
        template = self.registry.require(template_id)
        ratio = aspect_ratio or DEFAULT_ASPECT_RATIO
        if ratio != DEFAULT_ASPECT_RATIO:
            # raises UnsupportedAspectRatio for unknown keys
            canvas_size(ratio)
            return template.with_aspect_ratio(ratio)
        return template

    def generate_slide(
        self,
        slide: Union[Slide, dict[str, Any]],
        template_id: str = DEFAULT_TEMPLATE_ID,
        aspect_ratio: Optional[str] = None,
    ) -> HTMLSlide:
        """Render a single slide.

        Args:
            slide: Slide or upstream slide mapping.
            template_id: Registered template id.
            aspect_ratio: Canvas ratio; 16:9 when omitted.

        Returns:
            HTMLSlide with the fragment and its CSS.

        Raises:
            TemplateNotFound: If template_id is not registered.
            UnsupportedSlideType: If the slide's type has no renderer.
            UnsupportedAspectRatio: If the ratio is unknown.
        """
        template = self._template_for(template_id, aspect_ratio)
        return template.render(slide_from_dict(slide))

    def generate_all(
        self,
        document: Union[SlideDocument, dict[str, Any]],
        template_id: str = DEFAULT_TEMPLATE_ID,
    ) -> list[HTMLSlide]:
        """Render every slide of a document in order.

        Raises:
            TemplateNotFound: If template_id is not registered (before rendering).
            SlideRenderError: If any slide fails; carries the 1-based index
                and the original exception as ``__cause__``.
        """
        document = document_from_dict(document)
        ratio = document.aspect_ratio or DEFAULT_ASPECT_RATIO
        template = self._template_for(template_id, ratio)

        start = time.perf_counter()
        results: list[HTMLSlide] = []
        for idx, slide in enumerate(document.slides, start=1):
            try:
                results.append(template.render(slide))
            except Exception as e:
                logger.error(f"Slide {idx} ({slide.type}) failed with template '{template_id}': {e}")
                raise SlideRenderError(idx, slide.type, e) from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Rendered {len(results)} slides with '{template_id}' "
            f"in {elapsed_ms:.1f}ms (aspect ratio {ratio})"
        )
        return results

    def get_registry(self) -> TemplateRegistry:
        return self.registry

    def available_templates(self) -> list[Template]:
        return self.registry.get_all()

    def free_templates(self) -> list[Template]:
        return self.registry.get_free()

    def premium_templates(self) -> list[Template]:
        return self.registry.get_premium()

    def has_template(self, template_id: str) -> bool:
        return self.registry.has(template_id)

    def log_info(self) -> None:
        self.registry.log_info()


def build_default_engine(extra_themes_path: Optional[Union[str, Path]] = None) -> TemplateEngine:
    """Engine with the built-in themes, plus themes from an extra file.

    Themes in the extra file replace built-ins with the same id.

    Raises:
        FileNotFoundError: If extra_themes_path does not exist.
        ThemeValidationError: If any theme is invalid.
    """
    themes = load_themes()
    if extra_themes_path:
        extra = load_themes(extra_themes_path)
        logger.info(f"Loaded {len(extra)} extra themes from {extra_themes_path}")
        extra_ids = {t.id for t in extra}
        themes = [t for t in themes if t.id not in extra_ids] + extra
    return TemplateEngine(themes)
