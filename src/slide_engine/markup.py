"""HTML building helpers shared by all renderers.

Every piece of user text goes through ``escape`` (directly or via ``tag``)
so renderers never interpolate raw strings into markup.
"""

import html
from typing import Any, Iterable, Mapping, Optional

from .models import HTMLSlide
from .theme_resolver import TemplateContext

VOID_TAGS = frozenset({"img", "br", "hr"})

_SAFE_URL_PREFIXES = ("http://", "https://", "data:image/", "/", "./", "../")
_UNSAFE_CSS_MARKERS = ("url(", "expression(", "@import", ";", "{", "}", "<", ">", "\\")


def escape(value: Any) -> str:
    """Escape text for HTML content and attribute values (& < > " ')."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def px(value: float) -> str:
    return f"{value:g}px"


def style(declarations: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
    """Build an inline style string.

    Keys may use underscores instead of hyphens. None values are dropped;
    numbers are written as-is, so callers pass px() for lengths.
    """
    merged = dict(declarations or {})
    merged.update(extra)
    parts = []
    for key, value in merged.items():
        if value is None or value == "":
            continue
        parts.append(f"{key.replace('_', '-')}: {value}")
    return "; ".join(parts) + (";" if parts else "")


def tag(name: str, content: str = "", styles: Optional[Mapping[str, Any]] = None,
        **attrs: Any) -> str:
    """Build an element. ``content`` is inserted as-is (already markup).

    Attribute names use ``class_`` for ``class`` and underscores for hyphens.
    Attribute values are escaped; None drops the attribute.
    """
    rendered = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        attr = key.rstrip("_").replace("_", "-")
        if value is True:
            rendered.append(attr)
        else:
            rendered.append(f'{attr}="{escape(value)}"')
    if styles:
        css = style(styles)
        if css:
            rendered.append(f'style="{escape(css)}"')
    opening = " ".join([name] + rendered)
    if name in VOID_TAGS:
        return f"<{opening} />"
    return f"<{opening}>{content}</{name}>"


def text(name: str, value: Any, styles: Optional[Mapping[str, Any]] = None, **attrs: Any) -> str:
    """Element whose content is escaped user text."""
    return tag(name, escape(value), styles, **attrs)


def join(parts: Iterable[str]) -> str:
    return "".join(p for p in parts if p)


def safe_url(value: Any) -> str | None:
    """Return the URL if it is an http(s), relative or data-image URL."""
    if not isinstance(value, str):
        return None
    url = value.strip()
    if not url:
        return None
    lowered = url.lower()
    if lowered.startswith(_SAFE_URL_PREFIXES):
        return url
    if ":" not in url.split("/", 1)[0]:
        # bare relative path such as "images/chart.png"
        return url
    return None


def css_url(value: Any) -> str | None:
    """``url(...)`` for use inside a style value, or None if unsafe."""
    url = safe_url(value)
    if url is None:
        return None
    for char, encoded in (("\\", "%5C"), ("'", "%27"), ('"', "%22"), ("(", "%28"), (")", "%29")):
        url = url.replace(char, encoded)
    return f"url('{url}')"


def as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def as_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return "\n".join(str(v) for v in value)
    return str(value)


def is_safe_css_value(value: Any) -> bool:
    """True for a plain scalar that cannot break out of a CSS declaration or load a resource."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return False
    if not isinstance(value, str):
        return True
    lowered = value.lower()
    return not any(marker in lowered for marker in _UNSAFE_CSS_MARKERS)


def style_option(slide_style: Mapping[str, Any], section: str, key: str, default: Any = None) -> Any:
    """Read a nested style override such as style['title']['fontSize'].

    Lists, mappings and values that would inject CSS fall back to ``default``.
    """
    value = as_dict(slide_style.get(section)).get(key)
    if value in (None, "") or not is_safe_css_value(value):
        return default
    return value


def font_size(slide_style: Mapping[str, Any], section: str, default: float) -> float:
    value = style_option(slide_style, section, "fontSize")
    try:
        size = float(value)
    except (TypeError, ValueError):
        return default
    return size if size > 0 else default


def slide_root(slide_type: str, content: str, ctx: TemplateContext,
               background: str = "var(--color-background)",
               styles: Optional[Mapping[str, Any]] = None, **attrs: Any) -> str:
    """Root block of every slide: fills the canvas and clips overflow.

    Extra keyword arguments become attributes of the root element.
    """
    base = {
        "background": background,
        "width": "100%",
        "height": "100%",
        "box-sizing": "border-box",
        "overflow": "hidden",
        "padding": px(ctx.spacing.padding),
        "display": "flex",
        "flex-direction": "column",
        "font-family": "var(--font-family-base)",
        "color": "var(--color-text-primary)",
    }
    base.update(styles or {})
    return tag(
        "div", content, base,
        class_="slide",
        data_slide_type=slide_type,
        data_width=ctx.slide_size.width,
        data_height=ctx.slide_size.height,
        **attrs,
    )


def slide_header(title: Any, ctx: TemplateContext,
                 slide_style: Optional[Mapping[str, Any]] = None) -> str:
    """Accent bar plus heading used at the top of content slides."""
    slide_style = slide_style or {}
    accent = tag("div", "", {
        "width": px(ctx.spacing.accent_bar_width),
        "height": px(ctx.spacing.accent_bar_height),
        "background-color": "var(--color-primary)",
        "margin-bottom": px(ctx.spacing.gap_small),
    }, class_="accent-bar")
    heading = text("h3", title, {
        "color": style_option(slide_style, "title", "color", "var(--color-text-primary)"),
        "font-size": px(font_size(slide_style, "title", ctx.fonts.size.heading)),
        "text-align": style_option(slide_style, "title", "align", "left"),
        "font-weight": "700",
        "margin": f"0 0 {px(ctx.spacing.gap_small)} 0",
        "line-height": "var(--line-height-tight)",
    })
    return tag("div", accent + heading, {"flex-shrink": "0"}, class_="slide-header")


def empty_state(message: str, ctx: TemplateContext) -> str:
    """Centered placeholder shown when a slide has nothing to display."""
    return text("div", message, {
        "flex": "1",
        "display": "flex",
        "align-items": "center",
        "justify-content": "center",
        "color": "var(--color-text-tertiary)",
        "font-size": px(ctx.fonts.size.body),
        "border": "2px dashed var(--color-border)",
        "border-radius": px(ctx.radius.medium),
        "min-height": "120px",
    }, class_="empty-state")


def overflow_notice(shown: int, total: int, noun: str, ctx: TemplateContext) -> str:
    """Visible banner telling the reader that items were left out."""
    if total <= shown:
        return ""
    message = f"Showing {shown} of {total} {noun}; {total - shown} more not displayed"
    return text("div", message, {
        "flex-shrink": "0",
        "margin-top": px(ctx.spacing.gap_small / 2),
        "padding": "6px 12px",
        "border-radius": px(ctx.radius.small),
        "background": "var(--color-highlight, var(--color-background-light))",
        "color": "var(--color-warning, var(--color-text-secondary))",
        "font-size": px(ctx.fonts.size.small),
        "font-weight": "600",
    }, class_="overflow-notice", role="note")


def image(src: Any, alt: Any = "", styles: Optional[Mapping[str, Any]] = None) -> str:
    """Image element, or an empty placeholder box when the URL is unusable."""
    url = safe_url(src)
    base = {"width": "100%", "height": "100%", "object-fit": "cover", "display": "block"}
    base.update(styles or {})
    if url is None:
        placeholder = dict(base)
        placeholder.pop("object-fit", None)
        placeholder.update({
            "background": "var(--color-background-light)",
            "border": "2px dashed var(--color-border)",
            "box-sizing": "border-box",
        })
        return tag("div", "", placeholder, class_="image-placeholder")
    return tag("img", src=url, alt=as_text(alt), styles=base)


def finalize(html_fragment: str, ctx: TemplateContext) -> HTMLSlide:
    """Pair a fragment with its CSS: theme variables plus the canvas size."""
    canvas = (
        ":root {\n"
        f"  --slide-width: {px(ctx.slide_size.width)};\n"
        f"  --slide-height: {px(ctx.slide_size.height)};\n"
        "}"
    )
    css = f"{ctx.variables}\n{canvas}" if ctx.variables else canvas
    return HTMLSlide(html=html_fragment, css=css)
