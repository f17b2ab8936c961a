"""Renderers for text-centric slides: title, section, content, bullets,
two columns, quote and closing slides."""

from typing import Any

from ..markup import (
    as_list, as_text, css_url, empty_state, escape, finalize, font_size, join,
    px, slide_header, slide_root, style_option, tag, text,
)
from ..models import HTMLSlide, Slide
from ..theme_resolver import TemplateContext

BULLET_ICONS = {"arrow": "→", "dot": "•", "check": "✓"}
BULLET_INDENT = 30
MAX_BULLET_LEVEL = 2


def render_title(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Opening slide: centered title and subtitle over the primary color or a background image."""
    props, style = slide.props, slide.style
    background = "var(--color-primary)"
    image_url = css_url(props.get("backgroundImage"))
    if image_url:
        background = (
            "linear-gradient(var(--color-overlay, rgba(0, 0, 0, 0.45)), "
            f"var(--color-overlay, rgba(0, 0, 0, 0.45))), {image_url} center / cover no-repeat"
        )

    title = text("h1", as_text(props.get("title")), {
        "color": style_option(style, "title", "color", "var(--color-background)"),
        "font-size": px(font_size(style, "title", ctx.fonts.size.title)),
        "font-weight": "700",
        "line-height": "var(--line-height-tight)",
        "margin": f"0 0 {px(ctx.spacing.gap_small)} 0",
    })
    subtitle = ""
    if props.get("subtitle"):
        subtitle = text("p", props["subtitle"], {
            "color": "var(--color-background)",
            "font-size": px(font_size(style, "subtitle", ctx.fonts.size.subtitle)),
            "opacity": "0.9",
            "margin": "0",
        })

    html = slide_root("title", title + subtitle, ctx, background, {
        "justify-content": "center",
        "align-items": "center",
        "text-align": style_option(style, "title", "align", "center"),
    })
    return finalize(html, ctx)


def render_section(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Section divider with an optional large number."""
    props, style = slide.props, slide.style
    number = ""
    if props.get("number") not in (None, ""):
        number = text("div", props["number"], {
            "color": "var(--color-primary)",
            "font-size": px(ctx.fonts.size.stats),
            "font-weight": "700",
            "opacity": "0.4",
            "margin-bottom": px(ctx.spacing.gap_small),
        }, class_="section-number")
    bar = tag("div", "", {
        "width": px(ctx.spacing.accent_bar_width * 2),
        "height": px(ctx.spacing.accent_bar_height * 2),
        "background-color": "var(--color-primary)",
        "margin-bottom": px(ctx.spacing.gap),
    })
    title = text("h2", as_text(props.get("title")), {
        "font-size": px(font_size(style, "title", ctx.fonts.size.section)),
        "font-weight": "700",
        "color": style_option(style, "title", "color", "var(--color-text-primary)"),
        "margin": "0",
    })
    html = slide_root("section", number + bar + title, ctx, "var(--color-background-light)", {
        "justify-content": "center",
    })
    return finalize(html, ctx)


def _paragraphs(body: Any) -> list[str]:
    if isinstance(body, (list, tuple)):
        return [str(p) for p in body if str(p).strip()]
    return [p.strip() for p in as_text(body).split("\n\n") if p.strip()]


def render_content(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Heading plus free-text paragraphs (blank lines separate paragraphs)."""
    props, style = slide.props, slide.style
    paragraphs = _paragraphs(props.get("body"))
    size = font_size(style, "body", ctx.fonts.size.body)
    if paragraphs:
        body = tag("div", join(
            text("p", p, {"margin": f"0 0 {px(ctx.spacing.list_gap)} 0", "white-space": "pre-line"})
            for p in paragraphs
        ), {
            "flex": "1",
            "font-size": px(size),
            "line-height": "var(--line-height-relaxed)",
            "color": "var(--color-text-secondary)",
        })
    else:
        body = empty_state("No content", ctx)
    html = slide_root("content", slide_header(props.get("title"), ctx, style) + body, ctx)
    return finalize(html, ctx)


def _bullet_items(raw: Any) -> list[tuple[str, int]]:
    items = []
    for entry in as_list(raw):
        if isinstance(entry, dict):
            try:
                level = int(entry.get("level", 0) or 0)
            except (TypeError, ValueError):
                level = 0
            items.append((as_text(entry.get("text")), min(max(level, 0), MAX_BULLET_LEVEL)))
        elif entry is not None:
            items.append((str(entry), 0))
    return items


def bullet_list(items: list[tuple[str, int]], ctx: TemplateContext, style: dict,
                base_size: float | None = None) -> str:
    """Bulleted list with level-based indent and size; empty string for no items."""
    if not items:
        return ""
    icon = BULLET_ICONS.get(style_option(style, "bullets", "iconType", "arrow"), BULLET_ICONS["arrow"])
    top = base_size or font_size(style, "bullets", ctx.fonts.size.body)
    rows = []
    for content, level in items:
        size = max(top - 2 * level, ctx.fonts.size.small)
        marker = text("span", icon, {
            "color": "var(--color-primary)",
            "font-weight": "700",
            "flex-shrink": "0",
            "width": px(ctx.spacing.icon_size),
        })
        rows.append(tag("li", marker + text("span", content), {
            "display": "flex",
            "gap": "10px",
            "margin-left": px(level * BULLET_INDENT),
            "font-size": px(size),
            "line-height": "var(--line-height-normal)",
            "color": "var(--color-text-primary)" if level == 0 else "var(--color-text-secondary)",
        }, data_level=level))
    return tag("ul", join(rows), {
        "list-style": "none",
        "margin": "0",
        "padding": "0",
        "display": "flex",
        "flex-direction": "column",
        "gap": px(ctx.spacing.list_gap),
    })


def render_bullet(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Heading plus a leveled bullet list."""
    props, style = slide.props, slide.style
    items = _bullet_items(props.get("bullets"))
    body = bullet_list(items, ctx, style) or empty_state("No bullet points", ctx)
    content = slide_header(props.get("title"), ctx, style) + tag("div", body, {
        "flex": "1", "display": "flex", "flex-direction": "column", "justify-content": "center",
    })
    return finalize(slide_root("bullet", content, ctx), ctx)


def parse_column(content: Any) -> tuple[str, list[str]]:
    """Split column text into (heading, bullets).

    The first non-bullet line is the heading; lines starting with '-' or '*'
    are bullets; other lines are kept as plain items.
    """
    if isinstance(content, (list, tuple)):
        return "", [str(item) for item in content if str(item).strip()]

    heading = ""
    items = []
    for line in as_text(content).splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped[0] in "-*•":
            items.append(stripped[1:].strip())
        elif not heading and not items:
            heading = stripped
        else:
            items.append(stripped)
    return heading, items


def _column(content: Any, section: str, ctx: TemplateContext, style: dict) -> str:
    heading, items = parse_column(content)
    size = font_size(style, section, ctx.fonts.size.body)
    parts = []
    if heading:
        parts.append(text("h4", heading, {
            "font-size": px(size + 4),
            "color": "var(--color-primary)",
            "margin": f"0 0 {px(ctx.spacing.gap_small)} 0",
        }))
    if items:
        parts.append(bullet_list([(item, 0) for item in items], ctx, style, base_size=size))
    if not parts:
        parts.append(empty_state("No content", ctx))
    return tag("div", join(parts), {
        "flex": "1",
        "min-width": "0",
        "padding": px(ctx.card.padding),
        "background": "var(--color-background-light)",
        "border-radius": px(ctx.card.radius),
        "display": "flex",
        "flex-direction": "column",
    }, class_="column")


def render_two_column(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Two side-by-side columns, each parsed by parse_column."""
    props, style = slide.props, slide.style
    columns = tag("div", join([
        _column(props.get("leftContent"), "leftColumn", ctx, style),
        _column(props.get("rightContent"), "rightColumn", ctx, style),
    ]), {"flex": "1", "display": "flex", "gap": px(ctx.spacing.gap), "min-height": "0"})
    content = slide_header(props.get("title"), ctx, style) + columns
    return finalize(slide_root("twoColumn", content, ctx), ctx)


def render_thank_you(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Closing slide with a message and optional contact line."""
    props, style = slide.props, slide.style
    message = as_text(props.get("message"), "Thank you")
    parts = [text("h1", message, {
        "color": "var(--color-background)",
        "font-size": px(font_size(style, "title", ctx.fonts.size.thank_you)),
        "font-weight": "700",
        "margin": f"0 0 {px(ctx.spacing.gap_small)} 0",
    })]
    if props.get("contact"):
        parts.append(text("div", props["contact"], {
            "color": "var(--color-background)",
            "font-size": px(ctx.fonts.size.body),
            "opacity": "0.9",
        }))
    html = slide_root("thankYou", join(parts), ctx, "var(--color-primary)", {
        "justify-content": "center",
        "align-items": "center",
        "text-align": "center",
    })
    return finalize(html, ctx)


def render_quote(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Centered quotation with an optional author."""
    props, style = slide.props, slide.style
    parts = []
    if props.get("showQuoteMark", True):
        parts.append(tag("div", escape("“"), {
            "color": "var(--color-primary)",
            "font-size": "72px",
            "font-family": ctx.fonts.serif,
            "opacity": "0.3",
            "line-height": "1",
        }, class_="quote-mark"))
    quote = as_text(props.get("quote"))
    if quote:
        parts.append(text("blockquote", quote, {
            "font-size": px(font_size(style, "quote", ctx.fonts.size.quote)),
            "font-family": ctx.fonts.serif,
            "font-style": "italic",
            "line-height": "1.6",
            "margin": f"{px(ctx.spacing.gap_small)} 0",
            "max-width": "80%",
        }))
    else:
        parts.append(empty_state("No quote", ctx))
    if props.get("author"):
        parts.append(text("cite", f"— {props['author']}", {
            "color": "var(--color-text-secondary)",
            "font-size": px(ctx.fonts.size.body),
            "font-style": "normal",
            "font-weight": "500",
        }))
    html = slide_root("quote", join(parts), ctx, "var(--color-background-light)", {
        "justify-content": "center",
        "align-items": "center",
        "text-align": "center",
    })
    return finalize(html, ctx)
