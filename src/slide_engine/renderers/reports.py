"""Renderers for one-page report slides.

Reports are dense, document-like pages: a title block followed by a list
of sections, each with an optional subtitle, body text and bullets. The
two-column variant flows sections into two columns next to an optional
image; the A4 variant stacks them on a portrait page.
"""

from typing import Any

from ..markup import (
    as_dict, as_list, as_text, empty_state, finalize, font_size, image, join, px,
    slide_root, style_option, tag, text,
)
from ..models import HTMLSlide, Slide
from ..theme_resolver import TemplateContext

REPORT_BODY_SCALE = 0.8


def _sections(raw: Any) -> list[dict]:
    return [as_dict(entry) for entry in as_list(raw) if isinstance(entry, dict)]


def _section(section: dict, ctx: TemplateContext, body_size: float) -> str:
    parts = []
    if section.get("subtitle"):
        parts.append(text("h4", section["subtitle"], {
            "margin": "0 0 6px 0",
            "font-size": px(body_size + 4),
            "color": "var(--color-primary)",
            "font-weight": "700",
        }))
    for paragraph in as_text(section.get("body")).split("\n\n"):
        if paragraph.strip():
            parts.append(text("p", paragraph.strip(), {
                "margin": "0 0 6px 0",
                "font-size": px(body_size),
                "line-height": "var(--line-height-normal)",
                "color": "var(--color-text-secondary)",
                "white-space": "pre-line",
            }))
    bullets = [as_text(b) for b in as_list(section.get("bullets")) if as_text(b).strip()]
    if bullets:
        parts.append(tag("ul", join(
            text("li", b, {"margin-bottom": "2px"}) for b in bullets
        ), {
            "margin": "0",
            "padding-left": "18px",
            "font-size": px(body_size),
            "color": "var(--color-text-primary)",
        }))
    return tag("section", join(parts), {
        "break-inside": "avoid",
        "margin-bottom": px(ctx.spacing.gap_small),
    }, class_="report-section")


def _title_block(props: dict, style: dict, ctx: TemplateContext, size: float) -> str:
    parts = [text("h2", as_text(props.get("title")), {
        "margin": "0",
        "font-size": px(font_size(style, "title", size)),
        "color": style_option(style, "title", "color", "var(--color-text-primary)"),
        "text-align": style_option(style, "title", "align", "left"),
        "line-height": "var(--line-height-tight)",
    })]
    if props.get("subtitle"):
        parts.append(text("p", props["subtitle"], {
            "margin": "6px 0 0 0",
            "font-size": px(ctx.fonts.size.body),
            "color": "var(--color-text-secondary)",
        }))
    return tag("header", join(parts), {
        "flex-shrink": "0",
        "padding-bottom": px(ctx.spacing.gap_small / 2),
        "margin-bottom": px(ctx.spacing.gap_small),
        "border-bottom": "3px solid var(--color-primary)",
    }, class_="report-header")


def render_report_two_column(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Report page with a title block and sections split over two columns."""
    props, style = slide.props, slide.style
    body_size = font_size(style, "body", ctx.fonts.size.body * REPORT_BODY_SCALE)
    sections = _sections(props.get("sections"))

    if sections:
        columns = tag("div", join(_section(s, ctx, body_size) for s in sections), {
            "column-count": "2",
            "column-gap": px(ctx.spacing.gap),
            "flex": "1",
            "min-width": "0",
        }, class_="report-columns")
    else:
        columns = empty_state("No report sections", ctx)

    if props.get("image"):
        figure = tag("figure", image(props["image"], props.get("imageCaption"), {"height": "auto",
                                                                                 "max-height": "70%"})
                     + (text("figcaption", props["imageCaption"], {
                         "font-size": px(ctx.fonts.size.small),
                         "color": "var(--color-text-tertiary)",
                         "margin-top": "6px",
                     }) if props.get("imageCaption") else ""), {
            "margin": "0",
            "width": "32%",
            "flex-shrink": "0",
            "display": "flex",
            "flex-direction": "column",
            "border-radius": px(ctx.radius.medium),
            "overflow": "hidden",
        }, class_="report-figure")
        body = tag("div", columns + figure, {
            "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap), "min-height": "0",
        })
    else:
        body = columns

    content = _title_block(props, style, ctx, ctx.fonts.size.heading) + body
    html = slide_root("reportTwoColumn", content, ctx, styles={"padding": px(ctx.spacing.padding * 2 / 3)})
    return finalize(html, ctx)


def render_report_a4(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Single-column report page for the A4 portrait canvas."""
    props, style = slide.props, slide.style
    body_size = font_size(style, "body", ctx.fonts.size.body * REPORT_BODY_SCALE)
    sections = _sections(props.get("sections"))

    parts = [_title_block(props, style, ctx, ctx.fonts.size.heading)]
    if props.get("image"):
        parts.append(tag("div", image(props["image"], props.get("title")), {
            "flex-shrink": "0",
            "height": "28%",
            "border-radius": px(ctx.radius.medium),
            "overflow": "hidden",
            "margin-bottom": px(ctx.spacing.gap_small),
        }, class_="report-figure"))
    if sections:
        parts.append(tag("div", join(_section(s, ctx, body_size) for s in sections), {
            "flex": "1", "min-height": "0",
        }, class_="report-sections"))
    else:
        parts.append(empty_state("No report sections", ctx))

    html = slide_root("reportA4", join(parts), ctx, styles={"padding": px(ctx.spacing.padding * 2 / 3)})
    return finalize(html, ctx)
