"""Theme resolution: design tokens -> pixel context and CSS custom properties.

Renderers never read a Theme directly. They consume a TemplateContext of
resolved pixel values, and every fragment ships the theme's CSS variable
block so inline styles can reference ``var(--token)``.

Semantic slot mapping (fixed):

    font sizes   title, section, thank_you, stats <- 4xl
                 heading <- 3xl, subtitle, quote <- 2xl
                 body <- lg, caption <- base, small <- sm
    spacing      padding <- 3xl, gap <- xl, gap_small <- lg,
                 list_gap <- md, chart_gap <- lg
    radius       small <- md, medium <- lg, large <- xl
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .themes import Theme

logger = logging.getLogger(__name__)

REM_BASE_PX = 16.0

_LENGTH_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?|-?\.\d+)\s*(rem|em|px)?\s*$")

# Fallback token values used when a theme omits a key
DEFAULT_FONT_SIZES = {
    "xs": "0.75rem", "sm": "0.875rem", "base": "1rem", "lg": "1.125rem",
    "xl": "1.25rem", "2xl": "1.5rem", "3xl": "1.875rem", "4xl": "2.25rem",
}
DEFAULT_SPACING = {
    "xs": "0.25rem", "sm": "0.5rem", "md": "1rem", "lg": "1.5rem",
    "xl": "2rem", "2xl": "3rem", "3xl": "4rem",
}
DEFAULT_RADIUS = {
    "none": "0", "sm": "0.25rem", "md": "0.5rem", "lg": "0.75rem",
    "xl": "1rem", "2xl": "1.5rem", "full": "9999px",
}
DEFAULT_COLORS = {
    "primary": "#3182f6",
    "secondary": "#333d4b",
    "text": "#191f28",
    "text_secondary": "#4e5968",
    "text_muted": "#8b95a1",
    "surface": "#f2f4f6",
    "surface_elevated": "#ffffff",
    "border": "#e5e8eb",
    "border_light": "#f8f9fa",
}
DEFAULT_FONT = "Arial, sans-serif"
DEFAULT_SERIF = "Georgia, serif"
DEFAULT_MONO = "monospace"

FONT_SLOTS = {
    "title": "4xl",
    "section": "4xl",
    "thank_you": "4xl",
    "stats": "4xl",
    "heading": "3xl",
    "subtitle": "2xl",
    "quote": "2xl",
    "body": "lg",
    "caption": "base",
    "small": "sm",
}
SPACING_SLOTS = {
    "padding": "3xl",
    "gap": "xl",
    "gap_small": "lg",
    "list_gap": "md",
    "chart_gap": "lg",
}
RADIUS_SLOTS = {"small": "md", "medium": "lg", "large": "xl"}

# context color field <- theme color key
COLOR_SLOTS = {
    "primary": "primary",
    "secondary": "secondary",
    "dark": "secondary",
    "text": "text",
    "text_secondary": "text_secondary",
    "gray": "text_muted",
    "bg": "surface",
    "white": "surface_elevated",
    "light_bg": "border_light",
    "border": "border",
}


@dataclass(frozen=True)
class ContextColors:
    primary: str = "#3182f6"
    secondary: str = "#333d4b"
    dark: str = "#333d4b"
    text: str = "#191f28"
    text_secondary: str = "#333d4b"
    gray: str = "#d1d6db"
    bg: str = "#f2f4f6"
    white: str = "#FFFFFF"
    light_bg: str = "#f8f9fa"
    border: str = "#e5e8eb"


@dataclass(frozen=True)
class FontSizes:
    title: float = 48
    subtitle: float = 24
    heading: float = 32
    body: float = 18
    quote: float = 24
    stats: float = 56
    section: float = 44
    thank_you: float = 56
    caption: float = 16
    small: float = 14


@dataclass(frozen=True)
class ContextFonts:
    main: str = DEFAULT_FONT
    serif: str = DEFAULT_SERIF
    mono: str = DEFAULT_MONO
    size: FontSizes = field(default_factory=FontSizes)


@dataclass(frozen=True)
class ContextSpacing:
    padding: float = 60
    accent_bar_width: float = 60
    accent_bar_height: float = 4
    gap: float = 40
    gap_small: float = 20
    list_gap: float = 20
    chart_gap: float = 25
    icon_size: float = 24
    timeline_node_size: float = 60


@dataclass(frozen=True)
class ContextRadius:
    small: float = 8
    medium: float = 12
    large: float = 16
    circle: str = "50%"


@dataclass(frozen=True)
class CardStyle:
    radius: float = 16
    shadow: str = "0 4px 12px rgba(0, 0, 0, 0.05)"
    padding: float = 40


@dataclass(frozen=True)
class SlideSize:
    width: int = 1200
    height: int = 675


@dataclass(frozen=True)
class TemplateContext:
    """Resolved layout constants consumed by every renderer.

    Derived deterministically from a Theme (or the built-in default). Two
    contexts that differ only in ``slide_size`` are the same theme at
    different aspect ratios.

    Attributes:
        colors: CSS color strings for semantic roles.
        fonts: Font stacks and semantic font sizes in px.
        spacing: Paddings and gaps in px.
        radius: Corner radii in px.
        card: Card radius, shadow and padding from the theme's card defaults.
        slide_size: Canvas dimensions in px.
        variables: The theme's ``:root`` CSS custom-property block.
    """
    colors: ContextColors = field(default_factory=ContextColors)
    fonts: ContextFonts = field(default_factory=ContextFonts)
    spacing: ContextSpacing = field(default_factory=ContextSpacing)
    radius: ContextRadius = field(default_factory=ContextRadius)
    card: CardStyle = field(default_factory=CardStyle)
    slide_size: SlideSize = field(default_factory=SlideSize)
    variables: str = ""


def rem_to_px(value: Any, default: float = 0.0) -> float:
    """Convert a CSS length token to pixels.

    Supports ``rem``/``em`` (16px base), ``px``, unitless numbers and ``"0"``.

    Args:
        value: Token value such as '1.5rem', '12px', 0 or '0'.
        default: Returned when the value cannot be parsed.

    Returns:
        Length in pixels, rounded to 2 decimals.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return round(float(value), 2)
    if not isinstance(value, str):
        return default

    match = _LENGTH_RE.match(value)
    if not match:
        return default

    number = float(match.group(1))
    unit = match.group(2) or "px"
    if unit in ("rem", "em"):
        number *= REM_BASE_PX
    return round(number, 2)


def _scale_px(scale: dict[str, Any], key: str, fallback: dict[str, str]) -> float:
    default = rem_to_px(fallback.get(key, "0"))
    if key not in scale:
        return default
    return rem_to_px(scale[key], default)


def _font_sizes(theme: Theme) -> FontSizes:
    scale = theme.scale("typography", "font_size")
    return FontSizes(**{
        slot: _scale_px(scale, token, DEFAULT_FONT_SIZES)
        for slot, token in FONT_SLOTS.items()
    })


def _colors(theme: Theme) -> ContextColors:
    values = {}
    for slot, token in COLOR_SLOTS.items():
        values[slot] = theme.colors.get(token) or DEFAULT_COLORS.get(token, getattr(ContextColors, slot))
    return ContextColors(**values)


def _card(theme: Theme) -> CardStyle:
    card = theme.components.get("card", {})
    radius_key = card.get("radius", "lg")
    shadow_key = card.get("shadow", "sm")
    padding_key = card.get("padding", "md")
    return CardStyle(
        radius=_scale_px(theme.radius, radius_key, DEFAULT_RADIUS),
        shadow=str(theme.shadows.get(shadow_key, "none")),
        padding=_scale_px(theme.spacing, padding_key, DEFAULT_SPACING),
    )


def resolve(theme: Theme) -> TemplateContext:
    """Resolve a theme into a pixel-valued TemplateContext.

    Pure function: the same theme always yields an equal context. Missing
    tokens fall back to the default scale values; there are no error cases.

    Args:
        theme: Theme to resolve.

    Returns:
        TemplateContext at the default 16:9 canvas size.
    """
    families = theme.scale("typography", "font_family")
    fonts = ContextFonts(
        main=families.get("primary") or DEFAULT_FONT,
        serif=families.get("secondary") or DEFAULT_SERIF,
        mono=families.get("monospace") or DEFAULT_MONO,
        size=_font_sizes(theme),
    )

    spacing = ContextSpacing(**{
        slot: _scale_px(theme.spacing, token, DEFAULT_SPACING)
        for slot, token in SPACING_SLOTS.items()
    })

    radius = ContextRadius(**{
        slot: _scale_px(theme.radius, token, DEFAULT_RADIUS)
        for slot, token in RADIUS_SLOTS.items()
    })

    return TemplateContext(
        colors=_colors(theme),
        fonts=fonts,
        spacing=spacing,
        radius=radius,
        card=_card(theme),
        slide_size=SlideSize(),
        variables=to_css_variables(theme),
    )


def css_name(*parts: str) -> str:
    """Build a custom property name: css_name('color', 'text_secondary') -> '--color-text-secondary'."""
    return "--" + "-".join(str(p).replace("_", "-") for p in parts if p)


def _scale_reference(prefix: str, key: Any) -> str:
    return f"var({css_name(prefix, str(key))})"


def to_css_variables(theme: Theme) -> str:
    """Emit a ``:root`` block covering every token of a theme.

    Includes all color, typography, spacing, radius and shadow tokens, the
    component defaults (as references to scale variables), and legacy aliases
    that older generated HTML still uses.

    Args:
        theme: Theme to serialize.

    Returns:
        CSS text of the form ``:root {\\n  --token: value;\\n ...}``.
    """
    declarations: list[tuple[str, Any]] = []

    for key, value in theme.colors.items():
        declarations.append((css_name("color", key), value))

    families = theme.scale("typography", "font_family")
    primary_font = families.get("primary") or DEFAULT_FONT
    declarations.append((css_name("font-family", "primary"), primary_font))
    declarations.append((css_name("font-family", "secondary"), families.get("secondary") or primary_font))
    declarations.append((css_name("font-family", "monospace"), families.get("monospace") or DEFAULT_MONO))

    typography_scales = (
        ("font_size", "font-size"),
        ("font_weight", "font-weight"),
        ("line_height", "line-height"),
        ("letter_spacing", "letter-spacing"),
    )
    for scale_name, prefix in typography_scales:
        for key, value in theme.scale("typography", scale_name).items():
            declarations.append((css_name(prefix, key), value))

    for group, prefix in (("spacing", "spacing"), ("radius", "radius"), ("shadows", "shadow")):
        for key, value in theme.scale(group).items():
            declarations.append((css_name(prefix, key), value))

    reference_prefix = {
        "radius": "radius",
        "shadow": "shadow",
        "font_size": "font-size",
        "padding": "spacing",
    }
    for component, defaults in theme.components.items():
        for field_name, value in defaults.items():
            prefix = reference_prefix.get(field_name)
            rendered = _scale_reference(prefix, value) if prefix else value
            declarations.append((css_name(component, field_name), rendered))

    colors = theme.colors
    declarations.extend([
        ("--color-text-primary", colors.get("text", DEFAULT_COLORS["text"])),
        ("--color-text-tertiary", colors.get("text_secondary", DEFAULT_COLORS["text_secondary"])),
        ("--color-background-light", colors.get("surface", DEFAULT_COLORS["surface"])),
        ("--color-background-card", colors.get("surface_elevated", DEFAULT_COLORS["surface_elevated"])),
        ("--font-family-base", primary_font),
    ])

    body = "\n".join(f"  {name}: {value};" for name, value in declarations)
    return f":root {{\n{body}\n}}"


DEFAULT_TEMPLATE_CONTEXT = TemplateContext()
