"""Renderers for image-led slides: image, image + text, testimonial, gallery."""

from .. import grid
from ..markup import (
    as_list, as_text, empty_state, finalize, image, join, overflow_notice, px,
    slide_header, slide_root, tag, text,
)
from ..models import HTMLSlide, Slide
from ..theme_resolver import TemplateContext
from .basic import bullet_list

IMAGE_ARRANGEMENTS = ("full", "sideBySide", "grid", "imageLeft")


def _frame(src, alt, ctx: TemplateContext, **styles) -> str:
    base = {
        "border-radius": px(ctx.radius.medium),
        "overflow": "hidden",
        "min-height": "0",
        "min-width": "0",
    }
    base.update(styles)
    return tag("div", image(src, alt), base, class_="image-frame")


def _caption(value, ctx: TemplateContext) -> str:
    if not value:
        return ""
    return text("p", value, {
        "margin": f"{px(ctx.spacing.gap_small / 2)} 0 0 0",
        "color": "var(--color-text-tertiary)",
        "font-size": px(ctx.fonts.size.caption),
        "text-align": "center",
        "flex-shrink": "0",
    }, class_="caption")


def _image_sources(props: dict) -> list:
    sources = []
    for entry in as_list(props.get("images")):
        if isinstance(entry, dict):
            sources.append(entry.get("url") or entry.get("src"))
        else:
            sources.append(entry)
    if not sources and props.get("image"):
        sources.append(props["image"])
    return [s for s in sources if s]


def render_image(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """One or more images arranged as full, sideBySide, grid or imageLeft."""
    props, style = slide.props, slide.style
    arrangement = props.get("arrangement") if props.get("arrangement") in IMAGE_ARRANGEMENTS else "full"
    sources = _image_sources(props)
    title = props.get("title")
    caption = _caption(props.get("caption"), ctx)

    if not sources:
        body = empty_state("No image", ctx)
    elif arrangement == "imageLeft":
        copy = text("p", as_text(props.get("text")), {
            "flex": "1", "margin": "0", "font-size": px(ctx.fonts.size.body),
            "line-height": "var(--line-height-relaxed)", "color": "var(--color-text-secondary)",
            "align-self": "center",
        })
        body = tag("div", _frame(sources[0], title, ctx, flex="1") + copy, {
            "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap), "min-height": "0",
        })
    elif arrangement in ("sideBySide", "grid"):
        shown = sources[:2] if arrangement == "sideBySide" else sources[:4]
        columns = 2 if len(shown) > 1 else 1
        rows = 2 if arrangement == "grid" and len(shown) > 2 else 1
        body = tag("div", join(_frame(src, title, ctx) for src in shown), {
            "flex": "1", "display": "grid", "gap": px(ctx.spacing.gap_small),
            "grid-template-columns": f"repeat({columns}, minmax(0, 1fr))",
            "grid-template-rows": f"repeat({rows}, minmax(0, 1fr))", "min-height": "0",
        }, class_="image-grid")
        body += overflow_notice(len(shown), len(sources), "images", ctx)
    else:
        body = _frame(sources[0], title, ctx, flex="1")

    header = slide_header(title, ctx, style) if title else ""
    html = slide_root("image", header + body + caption, ctx, data_arrangement=arrangement)
    return finalize(html, ctx)


def render_image_text(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Image beside a heading, body text and bullets."""
    props, style = slide.props, slide.style
    position = "row-reverse" if props.get("imagePosition") == "right" else "row"
    bullets = [(as_text(b.get("text")) if isinstance(b, dict) else as_text(b), 0)
               for b in as_list(props.get("bullets"))]
    listing = bullet_list(bullets, ctx, style) or empty_state("No bullet points", ctx)
    picture = _frame(props.get("image"), props.get("title"), ctx, flex="1")
    text_side = tag("div", listing, {
        "flex": "1", "display": "flex", "flex-direction": "column", "justify-content": "center",
        "min-width": "0",
    })
    body = tag("div", picture + text_side, {
        "flex": "1", "display": "flex", "flex-direction": position,
        "gap": px(ctx.spacing.gap), "min-height": "0",
    })
    return finalize(slide_root("imageText", slide_header(props.get("title"), ctx, style) + body, ctx), ctx)


def render_testimonial(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Customer quote with author, role and optional avatar."""
    props, style = slide.props, slide.style
    quote = as_text(props.get("quote"))
    parts = []
    if quote:
        parts.append(text("blockquote", f"“{quote}”", {
            "margin": "0 0 20px 0",
            "font-size": px(ctx.fonts.size.quote),
            "font-family": ctx.fonts.serif,
            "font-style": "italic",
            "line-height": "1.6",
        }))
    else:
        parts.append(empty_state("No testimonial", ctx))

    author_parts = []
    if props.get("image"):
        author_parts.append(tag("div", image(props["image"], props.get("author")), {
            "width": "56px", "height": "56px", "border-radius": ctx.radius.circle,
            "overflow": "hidden", "flex-shrink": "0",
        }))
    author_parts.append(tag("div", text("div", as_text(props.get("author")), {"font-weight": "700"})
                            + text("div", as_text(props.get("role")), {
                                "color": "var(--color-text-secondary)", "font-size": px(ctx.fonts.size.small),
                            })))
    parts.append(tag("div", join(author_parts), {
        "display": "flex", "align-items": "center", "gap": "14px", "justify-content": "center",
    }, class_="testimonial-author"))

    card = tag("div", join(parts), {
        "background": "var(--color-background-card)",
        "border-radius": px(ctx.card.radius),
        "box-shadow": ctx.card.shadow,
        "padding": px(ctx.spacing.gap),
        "max-width": "80%",
        "margin": "auto",
        "text-align": "center",
        "border-top": "4px solid var(--color-primary)",
    }, class_="testimonial-card")
    header = slide_header(props.get("title"), ctx, style) if props.get("title") else ""
    html = slide_root("testimonial", header + card, ctx, "var(--color-background-light)")
    return finalize(html, ctx)


def render_gallery(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Image gallery in an adaptive grid.

    An empty gallery shows placeholder tiles; more than the grid holds adds
    an overflow notice.
    """
    props, style = slide.props, slide.style
    entries = []
    for entry in as_list(props.get("images")):
        if isinstance(entry, dict):
            entries.append((entry.get("url"), entry.get("caption")))
        elif isinstance(entry, str):
            entries.append((entry, None))

    decision = grid.decide(len(entries), "gallery")
    shown = grid.visible(entries, decision)

    cells = []
    for url, caption in shown:
        figure = _frame(url, caption, ctx, flex="1")
        if caption:
            figure += text("figcaption", caption, {
                "font-size": px(ctx.fonts.size.small),
                "color": "var(--color-text-secondary)",
                "text-align": "center",
                "margin-top": "4px",
                "white-space": "nowrap",
                "overflow": "hidden",
                "text-overflow": "ellipsis",
            })
        cells.append(tag("figure", figure, {
            "margin": "0", "display": "flex", "flex-direction": "column", "min-height": "0", "min-width": "0",
        }, class_="gallery-item"))
    for _ in range(grid.placeholder_slots(len(entries), "gallery")):
        cells.append(tag("div", "", {
            "border": "2px dashed var(--color-border)",
            "border-radius": px(ctx.radius.medium),
            "background": "var(--color-background-light)",
        }, class_="gallery-placeholder"))

    body = tag("div", join(cells), {
        "flex": "1",
        "display": "grid",
        "grid-template-columns": f"repeat({decision.columns}, minmax(0, 1fr))",
        "grid-template-rows": f"repeat({decision.rows}, minmax(0, 1fr))",
        "gap": px(ctx.spacing.gap_small),
        "min-height": "0",
    }, class_="gallery-grid", data_rows=decision.rows, data_columns=decision.columns)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(entries), "images", ctx))
    return finalize(slide_root("gallery", content, ctx), ctx)
