"""Renderers for structured layouts: comparison, timeline, feature grid,
team roster, process, roadmap, pricing and agenda.

The cardinality-aware ones (team, agenda, feature grid, pricing, timeline)
take their grid from ``grid.decide`` and show an overflow notice when items
are cut.
"""

from typing import Any

from .. import grid
from ..markup import (
    as_list, as_text, empty_state, finalize, image, join, overflow_notice,
    px, slide_header, slide_root, tag, text,
)
from ..models import HTMLSlide, Slide
from ..theme_resolver import TemplateContext
from .basic import bullet_list, parse_column


def _records(value: Any) -> list[dict]:
    return [item for item in as_list(value) if isinstance(item, dict)]


def _grid(cells: list[str], decision: grid.GridDecision, ctx: TemplateContext, **styles: Any) -> str:
    base = {
        "flex": "1",
        "display": "grid",
        "grid-template-columns": f"repeat({decision.columns}, minmax(0, 1fr))",
        "grid-template-rows": f"repeat({decision.rows}, minmax(0, 1fr))",
        "gap": px(ctx.spacing.gap_small),
        "min-height": "0",
    }
    base.update(styles)
    return tag("div", join(cells), base, class_="grid",
               data_rows=decision.rows, data_columns=decision.columns)


def _card(content: str, ctx: TemplateContext, **styles: Any) -> str:
    base = {
        "background": "var(--color-background-card)",
        "border": "1px solid var(--color-border)",
        "border-radius": px(ctx.card.radius),
        "box-shadow": ctx.card.shadow,
        "padding": px(ctx.card.padding),
        "min-width": "0",
        "overflow": "hidden",
    }
    base.update(styles)
    return tag("div", content, base, class_="card")


def _side(label: Any, content: Any, image_url: Any, accent: str, ctx: TemplateContext, style: dict) -> str:
    parts = []
    if label:
        parts.append(text("h4", label, {
            "margin": f"0 0 {px(ctx.spacing.gap_small)} 0",
            "font-size": px(ctx.fonts.size.subtitle),
            "color": accent,
        }))
    if image_url:
        parts.append(tag("div", image(image_url, label), {
            "height": "40%", "margin-bottom": px(ctx.spacing.gap_small),
            "border-radius": px(ctx.radius.small), "overflow": "hidden",
        }))
    heading, items = parse_column(content)
    if heading:
        items = [heading] + items
    if items:
        parts.append(bullet_list([(item, 0) for item in items], ctx, style))
    if not parts:
        parts.append(empty_state("No content", ctx))
    return _card(join(parts), ctx, flex="1", border_top=f"4px solid {accent}")


def render_comparison(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Two labelled sides, each with bullets and an optional image."""
    props, style = slide.props, slide.style
    left = _side(props.get("leftLabel", "A"), props.get("leftContent"), props.get("leftImage"),
                 "var(--color-primary)", ctx, style)
    right = _side(props.get("rightLabel", "B"), props.get("rightContent"), props.get("rightImage"),
                  "var(--color-secondary)", ctx, style)
    versus = text("div", "VS", {
        "align-self": "center",
        "font-weight": "800",
        "color": "var(--color-text-tertiary)",
        "font-size": px(ctx.fonts.size.subtitle),
    }, class_="versus")
    body = tag("div", left + versus + right, {
        "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap_small), "min-height": "0",
    })
    return finalize(slide_root("comparison", slide_header(props.get("title"), ctx, style) + body, ctx), ctx)


def render_timeline(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Horizontal timeline of dated events, capped by the timeline grid."""
    props, style = slide.props, slide.style
    items = _records(props.get("items"))
    decision = grid.decide(len(items), "timeline")
    shown = grid.visible(items, decision)
    node = ctx.spacing.timeline_node_size

    if shown:
        steps = []
        for idx, item in enumerate(shown, start=1):
            marker = text("div", idx, {
                "width": px(node), "height": px(node),
                "border-radius": ctx.radius.circle,
                "background": "var(--color-primary)",
                "color": "var(--color-background)",
                "display": "flex", "align-items": "center", "justify-content": "center",
                "font-weight": "700", "font-size": px(ctx.fonts.size.body),
                "position": "relative", "z-index": "1",
            }, class_="timeline-node")
            caption = text("div", as_text(item.get("title")), {
                "font-weight": "700", "margin-top": px(ctx.spacing.gap_small),
                "font-size": px(ctx.fonts.size.body),
            }) + text("div", as_text(item.get("description")), {
                "color": "var(--color-text-secondary)",
                "font-size": px(ctx.fonts.size.small),
                "margin-top": "6px",
            })
            steps.append(tag("div", marker + caption, {
                "flex": "1", "min-width": "0", "display": "flex", "flex-direction": "column",
                "align-items": "center", "text-align": "center",
            }, class_="timeline-item"))
        connector = tag("div", "", {
            "position": "absolute", "left": "5%", "right": "5%",
            "top": px(node / 2 - 1), "height": "2px", "background": "var(--color-border)",
        }, class_="timeline-connector")
        body = tag("div", connector + join(steps), {
            "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap_small),
            "position": "relative", "align-items": "flex-start", "padding-top": px(ctx.spacing.gap),
        }, class_="timeline")
    else:
        body = empty_state("No timeline items", ctx)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(items), "items", ctx))
    return finalize(slide_root("timeline", content, ctx), ctx)


def _feature_icon(feature: dict, ctx: TemplateContext) -> str:
    icon = feature.get("icon")
    if not icon:
        return ""
    size = ctx.spacing.icon_size * 2
    if feature.get("iconType") == "image":
        return tag("div", image(icon, feature.get("title"), {"object-fit": "contain"}), {
            "width": px(size), "height": px(size), "margin-bottom": px(ctx.spacing.gap_small),
        })
    return text("div", icon, {"font-size": px(size * 0.8), "margin-bottom": px(ctx.spacing.gap_small)},
                class_="feature-icon")


def render_feature_grid(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Feature cards (icon, title, description) in an adaptive grid."""
    props, style = slide.props, slide.style
    features = _records(props.get("features"))
    decision = grid.decide(len(features), "feature")
    shown = grid.visible(features, decision)

    if shown:
        cells = [
            _card(
                _feature_icon(feature, ctx)
                + text("h4", as_text(feature.get("title")), {
                    "margin": "0 0 8px 0", "font-size": px(ctx.fonts.size.body + 2),
                })
                + text("p", as_text(feature.get("description")), {
                    "margin": "0", "color": "var(--color-text-secondary)",
                    "font-size": px(ctx.fonts.size.small), "line-height": "var(--line-height-normal)",
                }),
                ctx, text_align="center",
            )
            for feature in shown
        ]
        body = _grid(cells, decision, ctx, gap=px(ctx.spacing.gap_small))
    else:
        body = empty_state("No features", ctx)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(features), "features", ctx))
    return finalize(slide_root("featureGrid", content, ctx), ctx)


def _avatar(profile: dict, ctx: TemplateContext, size: float) -> str:
    frame = {
        "width": px(size), "height": px(size), "border-radius": ctx.radius.circle,
        "overflow": "hidden", "margin": f"0 auto {px(ctx.spacing.gap_small / 2)}",
        "flex-shrink": "0",
    }
    if profile.get("image"):
        return tag("div", image(profile["image"], profile.get("name")), frame)
    initial = as_text(profile.get("name")).strip()[:1].upper() or "?"
    frame.update({
        "background": "var(--color-primary)", "color": "var(--color-background)",
        "display": "flex", "align-items": "center", "justify-content": "center",
        "font-size": px(size * 0.4), "font-weight": "700",
    })
    return text("div", initial, frame, class_="avatar")


def render_team_profile(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Team member cards with avatar, role and bio."""
    props, style = slide.props, slide.style
    profiles = _records(props.get("profiles"))
    decision = grid.decide(len(profiles), "team")
    shown = grid.visible(profiles, decision)
    avatar_size = 96 if decision.rows == 1 else 64

    if shown:
        cells = [
            _card(
                _avatar(profile, ctx, avatar_size)
                + text("div", as_text(profile.get("name")), {"font-weight": "700", "font-size": px(ctx.fonts.size.body)})
                + text("div", as_text(profile.get("role")), {
                    "color": "var(--color-primary)", "font-size": px(ctx.fonts.size.small), "margin": "4px 0",
                })
                + text("p", as_text(profile.get("bio")), {
                    "margin": "0", "color": "var(--color-text-secondary)", "font-size": px(ctx.fonts.size.small),
                }),
                ctx, text_align="center", display="flex", flex_direction="column", justify_content="center",
            )
            for profile in shown
        ]
        body = _grid(cells, decision, ctx)
    else:
        body = empty_state("No team members", ctx)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(profiles), "team members", ctx))
    return finalize(slide_root("teamProfile", content, ctx), ctx)


def render_process(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Numbered steps joined by connectors."""
    props, style = slide.props, slide.style
    steps = _records(props.get("steps"))

    if steps:
        cells = []
        for idx, step in enumerate(steps, start=1):
            number = text("div", f"{idx:02d}", {
                "font-size": px(ctx.fonts.size.subtitle), "font-weight": "800",
                "color": "var(--color-primary)", "margin-bottom": "8px",
            }, class_="step-number")
            cells.append(_card(
                number
                + text("h4", as_text(step.get("title")), {"margin": "0 0 6px 0", "font-size": px(ctx.fonts.size.body)})
                + text("p", as_text(step.get("description")), {
                    "margin": "0", "font-size": px(ctx.fonts.size.small), "color": "var(--color-text-secondary)",
                }),
                ctx, flex="1",
            ))
            if idx < len(steps):
                cells.append(text("div", "→", {
                    "align-self": "center", "color": "var(--color-primary)",
                    "font-size": px(ctx.fonts.size.subtitle), "flex-shrink": "0",
                }, class_="step-arrow"))
        body = tag("div", join(cells), {
            "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap_small / 2),
            "align-items": "stretch", "min-height": "0",
        }, class_="process")
    else:
        body = empty_state("No process steps", ctx)

    return finalize(slide_root("process", slide_header(props.get("title"), ctx, style) + body, ctx), ctx)


def _status_colors(status: str) -> tuple[str, str]:
    lowered = status.lower()
    if "progress" in lowered:
        return "var(--color-primary)", "var(--color-background)"
    if "complete" in lowered or "done" in lowered:
        return "var(--color-success, var(--color-primary))", "var(--color-background)"
    return "var(--color-background-light)", "var(--color-text-secondary)"


def render_roadmap(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Roadmap items colored by status."""
    props, style = slide.props, slide.style
    items = _records(props.get("items"))

    if items:
        columns = []
        for item in items:
            status = as_text(item.get("status"))
            background, color = _status_colors(status)
            badge = text("span", status, {
                "display": "inline-block", "padding": "4px 10px", "border-radius": "999px",
                "background": background, "color": color,
                "font-size": px(ctx.fonts.size.small), "font-weight": "600",
            }, class_="status") if status else ""
            columns.append(_card(
                text("div", as_text(item.get("period")), {
                    "font-weight": "800", "color": "var(--color-primary)",
                    "font-size": px(ctx.fonts.size.body), "margin-bottom": "8px",
                })
                + badge
                + text("h4", as_text(item.get("title")), {"margin": "10px 0 6px 0", "font-size": px(ctx.fonts.size.body)})
                + text("p", as_text(item.get("description")), {
                    "margin": "0", "font-size": px(ctx.fonts.size.small), "color": "var(--color-text-secondary)",
                }),
                ctx, flex="1",
            ))
        body = tag("div", join(columns), {
            "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap_small), "min-height": "0",
        }, class_="roadmap")
    else:
        body = empty_state("No roadmap items", ctx)

    return finalize(slide_root("roadmap", slide_header(props.get("title"), ctx, style) + body, ctx), ctx)


def render_pricing(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Pricing tiers side by side; the highlighted tier is emphasised."""
    props, style = slide.props, slide.style
    tiers = _records(props.get("tiers"))
    decision = grid.decide(len(tiers), "pricing")
    shown = grid.visible(tiers, decision)

    if shown:
        cells = []
        for tier in shown:
            recommended = bool(tier.get("recommended"))
            features = [as_text(f) for f in as_list(tier.get("features"))]
            feature_list = tag("ul", join(
                tag("li", text("span", "✓", {"color": "var(--color-primary)", "margin-right": "8px"})
                    + text("span", feature), {"margin-bottom": "6px"})
                for feature in features
            ), {"list-style": "none", "padding": "0", "margin": f"{px(ctx.spacing.gap_small)} 0 0 0",
                "font-size": px(ctx.fonts.size.small), "text-align": "left"})
            price = text("span", as_text(tier.get("price")), {
                "font-size": px(ctx.fonts.size.heading), "font-weight": "800",
            })
            period = text("span", f" / {tier['period']}", {
                "color": "var(--color-text-secondary)", "font-size": px(ctx.fonts.size.small),
            }) if tier.get("period") else ""
            badge = text("div", "Recommended", {
                "color": "var(--color-primary)", "font-size": px(ctx.fonts.size.small),
                "font-weight": "700", "margin-bottom": "6px",
            }, class_="recommended") if recommended else ""
            cells.append(_card(
                badge
                + text("h4", as_text(tier.get("name")), {"margin": "0 0 8px 0", "font-size": px(ctx.fonts.size.body)})
                + tag("div", price + period)
                + text("p", as_text(tier.get("description")), {
                    "margin": "8px 0 0 0", "color": "var(--color-text-secondary)", "font-size": px(ctx.fonts.size.small),
                })
                + feature_list,
                ctx,
                text_align="center",
                border=f"{'2px solid var(--color-primary)' if recommended else '1px solid var(--color-border)'}",
                transform="scale(1.03)" if recommended else None,
            ))
        body = _grid(cells, decision, ctx, gap=px(ctx.spacing.gap_small), align_items="stretch")
    else:
        body = empty_state("No pricing tiers", ctx)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(tiers), "pricing tiers", ctx))
    return finalize(slide_root("pricing", content, ctx), ctx)


def render_agenda(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Numbered agenda items in one or two columns."""
    props, style = slide.props, slide.style
    items = _records(props.get("items"))
    decision = grid.decide(len(items), "agenda")
    shown = grid.visible(items, decision)

    if shown:
        cells = []
        for idx, item in enumerate(shown, start=1):
            number = text("div", f"{idx:02d}", {
                "font-size": px(ctx.fonts.size.subtitle), "font-weight": "800",
                "color": "var(--color-primary)", "min-width": px(ctx.spacing.icon_size * 2),
            }, class_="agenda-number")
            detail = text("div", as_text(item.get("title")), {
                "font-weight": "700", "font-size": px(ctx.fonts.size.body),
            })
            if item.get("description"):
                detail += text("div", item["description"], {
                    "color": "var(--color-text-secondary)", "font-size": px(ctx.fonts.size.small),
                })
            cells.append(tag("div", number + tag("div", detail, {"min-width": "0"}), {
                "display": "flex", "gap": px(ctx.spacing.gap_small), "align-items": "center",
                "border-bottom": "1px solid var(--color-border)", "padding-bottom": "8px",
            }, class_="agenda-item"))
        body = _grid(cells, decision, ctx, grid_auto_flow="column")
    else:
        body = empty_state("No agenda items", ctx)

    content = (slide_header(props.get("title"), ctx, style) + body
               + overflow_notice(len(shown), len(items), "agenda items", ctx))
    return finalize(slide_root("agenda", content, ctx), ctx)

