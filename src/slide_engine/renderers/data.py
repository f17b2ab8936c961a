"""Renderers for data slides: charts, tables and stat cards."""

import logging

from .. import charts
from ..charts import MAX_PIE_SERIES, PlotBox, format_value
from ..markup import (
    as_list, as_text, empty_state, finalize, font_size, is_safe_css_value, join,
    overflow_notice, px,
    slide_header, slide_root, tag, text,
)
from ..models import ChartSeries, HTMLSlide, Slide
from ..theme_resolver import TemplateContext

logger = logging.getLogger(__name__)

LEGEND_HEIGHT = 32
SVG_FONT = "var(--font-family-base)"


def _legend(series_list: list[ChartSeries], ctx: TemplateContext, overrides) -> str:
    entries = []
    for idx, series in enumerate(series_list):
        swatch = tag("span", "", {
            "display": "inline-block",
            "width": "12px",
            "height": "12px",
            "border-radius": "3px",
            "background": charts.series_color(idx, overrides),
        })
        entries.append(tag("span", swatch + text("span", series.name), {
            "display": "inline-flex",
            "align-items": "center",
            "gap": "6px",
        }, class_="legend-item"))
    return tag("div", join(entries), {
        "display": "flex",
        "flex-wrap": "wrap",
        "gap": px(ctx.spacing.gap_small),
        "font-size": px(ctx.fonts.size.small),
        "color": "var(--color-text-secondary)",
        "margin-bottom": px(ctx.spacing.gap_small / 2),
        "flex-shrink": "0",
    }, class_="chart-legend")


def _plot_size(ctx: TemplateContext) -> tuple[float, float]:
    """Approximate drawable size below the header and legend."""
    header = ctx.spacing.accent_bar_height + ctx.fonts.size.heading * 1.25 + ctx.spacing.gap_small * 2
    width = ctx.slide_size.width - 2 * ctx.spacing.padding
    height = ctx.slide_size.height - 2 * ctx.spacing.padding - header - LEGEND_HEIGHT
    return max(width, 200), max(height, 160)


def _bar_chart(series_list, ctx, overrides) -> str:
    groups = charts.bar_groups(series_list, overrides)
    rows = []
    for group in groups:
        bars = []
        for bar in group.bars:
            track = tag("div", tag("div", "", {
                "height": "100%",
                "width": f"{bar.width:g}%",
                "background-color": bar.color,
                "border-radius": "4px",
            }, class_="bar", data_series=bar.series, data_width=f"{bar.width:g}"), {
                "flex": "1",
                "height": "18px",
                "background-color": ctx.colors.bg,
                "border-radius": "4px",
                "overflow": "hidden",
            })
            value = text("span", format_value(bar.value), {
                "width": "56px",
                "text-align": "right",
                "font-weight": "700",
                "color": bar.color,
                "font-size": px(ctx.fonts.size.small),
            })
            bars.append(tag("div", track + value, {"display": "flex", "align-items": "center", "gap": "10px"}))
        label = text("div", group.label, {
            "font-size": px(ctx.fonts.size.caption),
            "font-weight": "500",
            "margin-bottom": "6px",
        })
        rows.append(tag("div", label + join(bars), {
            "display": "flex", "flex-direction": "column", "gap": "4px",
        }, class_="bar-group", data_label=group.label))
    return tag("div", join(rows), {
        "flex": "1",
        "display": "flex",
        "flex-direction": "column",
        "justify-content": "center",
        "gap": px(ctx.spacing.chart_gap),
        "min-height": "0",
    }, class_="bar-chart")


def _line_chart(series_list, ctx, overrides, filled: bool) -> str:
    lo, hi = charts.value_range(series_list)
    width, height = _plot_size(ctx)
    box = PlotBox(width=width, height=height, padding=40)

    elements = [
        tag("line", x1=box.padding, y1=box.baseline, x2=box.padding + box.inner_width, y2=box.baseline,
            stroke="var(--color-border)", stroke_width=1),
        tag("line", x1=box.padding, y1=box.padding, x2=box.padding, y2=box.baseline,
            stroke="var(--color-border)", stroke_width=1),
        text("text", format_value(hi), x=box.padding - 8, y=box.padding + 4, text_anchor="end",
             font_size=12, fill="var(--color-text-secondary)", font_family=SVG_FONT),
        text("text", format_value(lo), x=box.padding - 8, y=box.baseline + 4, text_anchor="end",
             font_size=12, fill="var(--color-text-secondary)", font_family=SVG_FONT),
    ]

    first = series_list[0]
    count = len(first.labels)
    axis_points = charts.line_points([0.0] * count, 0, 1, box)
    for label, (x, _) in zip(first.labels, axis_points):
        elements.append(text("text", label, x=x, y=box.baseline + 20, text_anchor="middle",
                             font_size=12, fill="var(--color-text-secondary)", font_family=SVG_FONT))

    for idx, series in enumerate(series_list):
        color = charts.series_color(idx, overrides)
        points = charts.line_points(series.values, lo, hi, box, count=count)
        if not points:
            continue
        if filled:
            elements.append(tag("path", d=charts.area_path(points, box.baseline), fill=color,
                                fill_opacity="0.2", stroke="none", class_="area"))
        elements.append(tag("path", d=charts.line_path(points), fill="none", stroke=color,
                            stroke_width=3, stroke_linejoin="round", class_="line",
                            data_series=series.name))
        for x, y in points:
            elements.append(tag("circle", cx=x, cy=y, r=5, fill=color, stroke="var(--color-background)",
                                stroke_width=2))

    svg = tag("svg", join(elements), {"width": "100%", "height": "100%"},
              viewBox=f"0 0 {width:g} {height:g}", preserveAspectRatio="xMidYMid meet",
              xmlns="http://www.w3.org/2000/svg", role="img")
    return tag("div", svg, {"flex": "1", "min-height": "0"}, class_=f"{'area' if filled else 'line'}-chart")


def _pie_chart(series_list, ctx, overrides) -> str:
    shown = series_list[:MAX_PIE_SERIES]
    if len(series_list) > MAX_PIE_SERIES:
        logger.warning(
            f"Pie chart supports at most {MAX_PIE_SERIES} series; "
            f"{len(series_list)} supplied, rendering the first {MAX_PIE_SERIES}"
        )

    width, height = _plot_size(ctx)
    cell_width = (width - ctx.spacing.gap * (len(shown) - 1)) / len(shown)
    size = min(cell_width, height - 30)
    radius = max(size / 2 - charts.PIE_LABEL_OFFSET - 20, 20)
    center = size / 2

    pies = []
    for series in shown:
        slices = charts.pie_slices(series, center, center, radius, overrides)
        if slices:
            elements = []
            for piece in slices:
                elements.append(tag("path", d=piece.path, fill=piece.color,
                                    stroke="var(--color-background)", stroke_width=2,
                                    class_="slice", data_angle=f"{piece.angle:.6f}"))
                elements.append(text("text", f"{piece.percentage:g}%", x=piece.label_x, y=piece.label_y,
                                     text_anchor="middle", dominant_baseline="middle", font_size=13,
                                     font_weight="600", fill="var(--color-text-primary)",
                                     font_family=SVG_FONT, class_="slice-label"))
            chart = tag("svg", join(elements), {"width": "100%", "height": "100%"},
                        viewBox=f"0 0 {size:g} {size:g}", xmlns="http://www.w3.org/2000/svg", role="img")
            legend = join(
                tag("span", tag("span", "", {
                    "display": "inline-block", "width": "10px", "height": "10px",
                    "border-radius": "2px", "background": piece.color,
                }) + text("span", piece.label), {"display": "inline-flex", "align-items": "center", "gap": "4px"})
                for piece in slices
            )
            body = chart + tag("div", legend, {
                "display": "flex", "flex-wrap": "wrap", "justify-content": "center",
                "gap": "8px", "font-size": px(ctx.fonts.size.small),
            })
        else:
            body = empty_state("No data", ctx)
        title = text("div", series.name, {
            "font-weight": "600",
            "font-size": px(ctx.fonts.size.caption),
            "text-align": "center",
        })
        pies.append(tag("div", title + tag("div", body, {"flex": "1", "min-height": "0"}), {
            "flex": "1",
            "min-width": "0",
            "display": "flex",
            "flex-direction": "column",
            "gap": "8px",
        }, class_="pie", data_series=series.name))

    content = tag("div", join(pies), {
        "flex": "1", "display": "flex", "gap": px(ctx.spacing.gap), "min-height": "0",
    }, class_="pie-chart")
    return content + overflow_notice(len(shown), len(series_list), "series", ctx)


def render_chart(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Bar, line, area or pie chart from props.data.

    Unknown chart types render as bars. Slides without a single numeric value
    show the "No chart data" placeholder instead of an empty plot.
    """
    props, style = slide.props, slide.style
    chart_type = props.get("chartType") or "bar"
    if chart_type not in charts.CHART_TYPES:
        logger.debug(f"Unknown chart type '{chart_type}', rendering as bar chart")
        chart_type = "bar"

    overrides = [c for c in as_list(style.get("chartColors")) if isinstance(c, str) and is_safe_css_value(c)]
    series_list = charts.normalize_series(props.get("data"))
    header = slide_header(props.get("title"), ctx, style)

    if not charts.has_numeric_data(series_list):
        body = empty_state("No chart data", ctx)
    else:
        series_list = [s for s in series_list if s.labels]
        show_legend = style.get("showLegend", True) and chart_type != "pie"
        legend = _legend(series_list, ctx, overrides) if show_legend else ""
        if chart_type == "pie":
            plot = _pie_chart(series_list, ctx, overrides)
        elif chart_type in ("line", "area"):
            plot = _line_chart(series_list, ctx, overrides, filled=chart_type == "area")
        else:
            plot = _bar_chart(series_list, ctx, overrides)
        body = legend + plot

    html = slide_root("chart", header + body, ctx, data_chart_type=chart_type)
    return finalize(html, ctx)


def render_table(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Header row plus striped body rows; short rows are padded with empty cells."""
    props, style = slide.props, slide.style
    headers = [as_text(h) for h in as_list(props.get("headers"))]
    rows = [as_list(row) for row in as_list(props.get("rows"))]
    widths = as_list(props.get("columnWidths"))
    column_count = max([len(headers)] + [len(r) for r in rows]) if (headers or rows) else 0

    header_cells = []
    for idx, header in enumerate(headers):
        width = widths[idx] if idx < len(widths) else None
        header_cells.append(text("th", header, {
            "padding": "12px 15px",
            "text-align": "left",
            "font-weight": "700",
            "width": f"{width}%" if isinstance(width, (int, float)) and not isinstance(width, bool) else None,
        }))

    body_rows = []
    for r_idx, row in enumerate(rows):
        cells = [as_text(cell) for cell in row] + [""] * (column_count - len(row))
        body_rows.append(tag("tr", join(text("td", cell, {"padding": "12px 15px"}) for cell in cells) or "", {
            "border-bottom": "1px solid var(--color-border)",
            "background-color": "var(--color-background-light)" if r_idx % 2 == 1 else None,
            "color": "var(--color-text-secondary)",
        }))

    table = tag("table",
                tag("thead", tag("tr", join(header_cells)), {"background-color": ctx.colors.bg})
                + tag("tbody", join(body_rows)), {
                    "width": "100%",
                    "border-collapse": "collapse",
                    "font-size": px(font_size(style, "body", ctx.fonts.size.caption)),
                    "table-layout": "fixed" if widths else None,
                })

    parts = [tag("div", table, {"flex-shrink": "0"})]
    if not body_rows:
        parts.append(empty_state("No table rows", ctx))
    content = slide_header(props.get("title"), ctx, style) + tag("div", join(parts), {
        "flex": "1", "display": "flex", "flex-direction": "column", "justify-content": "center",
        "gap": px(ctx.spacing.gap_small), "min-height": "0",
    })
    return finalize(slide_root("table", content, ctx), ctx)


def render_stats(slide: Slide, ctx: TemplateContext) -> HTMLSlide:
    """Stat cards in a two- or three-column grid, with an optional citation."""
    props, style = slide.props, slide.style
    stats = [s for s in as_list(props.get("stats")) if isinstance(s, dict)]
    cards = []
    for stat in stats:
        value = text("div", as_text(stat.get("value")), {
            "color": "var(--color-primary)",
            "font-size": px(ctx.fonts.size.stats),
            "font-weight": "700",
            "margin-bottom": "10px",
        })
        label = text("div", as_text(stat.get("label")), {"font-size": px(ctx.fonts.size.body)})
        cards.append(tag("div", value + label, {
            "background": "var(--color-background-light)",
            "padding": px(ctx.card.padding),
            "border-radius": px(ctx.card.radius),
            "border-left": "5px solid var(--color-primary)",
            "box-shadow": ctx.card.shadow,
            "text-align": "center",
        }, class_="stat-card"))

    columns = 2 if len(stats) != 3 else 3
    if cards:
        body = tag("div", join(cards), {
            "flex": "1",
            "display": "grid",
            "grid-template-columns": f"repeat({min(columns, max(len(stats), 1))}, 1fr)",
            "gap": px(ctx.spacing.gap),
            "align-content": "center",
        }, class_="stats-grid")
    else:
        body = empty_state("No statistics", ctx)

    citation = ""
    if props.get("citation"):
        citation = tag("div", text("p", props["citation"], {
            "color": "var(--color-text-tertiary)",
            "font-size": px(ctx.fonts.size.caption),
            "font-style": "italic",
            "margin": "0",
        }), {
            "margin-top": px(ctx.spacing.gap_small),
            "padding-top": px(ctx.spacing.gap_small / 2),
            "border-top": "1px solid var(--color-border)",
            "text-align": "right",
            "flex-shrink": "0",
        }, class_="citation")

    content = slide_header(props.get("title"), ctx, style) + body + citation
    return finalize(slide_root("stats", content, ctx), ctx)
