"""Templates: a resolved context bound to the renderer set.

A Template is what the registry stores. It is built either from a Theme
(through the theme resolver) or from the hand-tuned default context.
"""

from dataclasses import dataclass, replace
from typing import Optional

from . import dispatcher
from .aspect_ratio import with_aspect_ratio
from .models import HTMLSlide, Slide
from .theme_resolver import DEFAULT_TEMPLATE_CONTEXT, TemplateContext, resolve, to_css_variables
from .themes import Theme

DEFAULT_TEMPLATE_ID = "toss-default"


@dataclass(frozen=True)
class Template:
    """A registered template.

    Attributes:
        id: Registry key.
        name: Display name.
        context: Resolved values used by every renderer.
        template_id: Rendering-style alias inherited from the theme.
        description: One-line description.
        category: 'free' or 'premium'.
        price: Price of premium templates.
        tone: Theme tone.
        supports_aspect_ratio: Whether the canvas may be resized.
    """
    id: str
    name: str
    context: TemplateContext
    template_id: str = ""
    description: str = ""
    category: str = "free"
    price: int = 0
    tone: str = "professional"
    supports_aspect_ratio: bool = True

    @classmethod
    def from_theme(cls, theme: Theme) -> "Template":
        return cls(
            id=theme.id,
            name=theme.name,
            context=resolve(theme),
            template_id=theme.template_id or theme.id,
            description=theme.description,
            category=theme.category,
            price=theme.price,
            tone=theme.tone,
        )

    @property
    def is_premium(self) -> bool:
        return self.category == "premium"

    def with_aspect_ratio(self, ratio: str) -> "Template":
        """Copy of this template whose canvas matches ``ratio``."""
        if not self.supports_aspect_ratio:
            return self
        context = with_aspect_ratio(self.context, ratio)
        if context is self.context:
            return self
        return replace(self, context=context)

    def render(self, slide: Slide) -> HTMLSlide:
        return dispatcher.render(slide, self.context)


def default_template(theme: Optional[Theme] = None) -> Template:
    """The hand-tuned default template.

    Layout values come from DEFAULT_TEMPLATE_CONTEXT; the CSS variables come
    from ``theme`` (normally the toss theme) so renderers' ``var(...)``
    references resolve.
    """
    context = DEFAULT_TEMPLATE_CONTEXT
    if theme is not None:
        context = replace(context, variables=to_css_variables(theme))
    return Template(
        id=DEFAULT_TEMPLATE_ID,
        name="Toss Default",
        context=context,
        template_id=DEFAULT_TEMPLATE_ID,
        description="Clean default layout with the toss palette",
        tone="professional",
    )

