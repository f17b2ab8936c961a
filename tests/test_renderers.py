from __future__ import annotations

import pytest

from slide_engine.aspect_ratio import ASPECT_RATIOS, with_aspect_ratio
from slide_engine.dispatcher import render
from slide_engine.models import SLIDE_TYPES, Slide
from slide_engine.theme_resolver import DEFAULT_TEMPLATE_CONTEXT

LIST_EMPTY_STATES = {
    "content": "No content",
    "bullet": "No bullet points",
    "chart": "No chart data",
    "table": "No table rows",
    "stats": "No statistics",
    "quote": "No quote",
    "timeline": "No timeline items",
    "featureGrid": "No features",
    "teamProfile": "No team members",
    "process": "No process steps",
    "roadmap": "No roadmap items",
    "pricing": "No pricing tiers",
    "imageText": "No bullet points",
    "image": "No image",
    "agenda": "No agenda items",
    "testimonial": "No testimonial",
    "reportTwoColumn": "No report sections",
    "reportA4": "No report sections",
}


def _render(slide_type, props=None, style=None, ctx=DEFAULT_TEMPLATE_CONTEXT):
    return render(Slide(slide_type, props or {}, style or {}), ctx)


@pytest.mark.parametrize("slide_type", SLIDE_TYPES)
def test_every_type_renders_with_empty_props(slide_type, parse) -> None:
    out = _render(slide_type)

    root = parse(out.html)
    assert root.tag == "div"
    assert root.get("class") == "slide"
    assert root.get("data-slide-type") == slide_type
    assert "--slide-width: 1200px;" in out.css


@pytest.mark.parametrize("slide_type, message", sorted(LIST_EMPTY_STATES.items()))
def test_empty_inputs_show_empty_state(slide_type, message, parse) -> None:
    root = parse(_render(slide_type).html)

    states = root.xpath(".//div[@class='empty-state']")
    assert states, f"{slide_type} rendered no empty state"
    assert states[0].text_content() == message


@pytest.mark.parametrize("ratio", list(ASPECT_RATIOS))
def test_canvas_size_follows_aspect_ratio(ratio, parse) -> None:
    ctx = with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, ratio)
    width, height = ASPECT_RATIOS[ratio]

    for slide_type in SLIDE_TYPES:
        out = _render(slide_type, ctx=ctx)
        root = parse(out.html)
        assert root.get("data-width") == str(width)
        assert root.get("data-height") == str(height)
        assert f"--slide-height: {height}px;" in out.css


def test_title_slide(parse) -> None:
    out = _render("title", {"title": "Quarterly Review", "subtitle": "Q3 2024"})
    root = parse(out.html)

    assert root.xpath("string(.//h1)") == "Quarterly Review"
    assert root.xpath("string(.//p)") == "Q3 2024"
    assert "font-size: 48px" in out.html


def test_title_font_size_override(parse) -> None:
    out = _render("title", {"title": "Big"}, {"title": {"fontSize": 72, "color": "red"}})
    h1 = parse(out.html).xpath(".//h1")[0]

    assert "font-size: 72px" in h1.get("style")
    assert "color: red" in h1.get("style")


def test_unsafe_background_image_is_ignored() -> None:
    out = _render("title", {"title": "x", "backgroundImage": "javascript:alert(1)"})
    assert "javascript" not in out.html


def test_section_number_is_optional(parse) -> None:
    root = parse(_render("section", {"title": "Intro", "number": 2}).html)
    assert root.xpath("string(.//div[@class='section-number'])") == "2"
    assert not parse(_render("section", {"title": "Intro"}).html).xpath(".//div[@class='section-number']")


def test_content_splits_paragraphs(parse) -> None:
    root = parse(_render("content", {"title": "T", "body": "First.\n\nSecond."}).html)
    assert [p.text_content() for p in root.xpath(".//p")] == ["First.", "Second."]


def test_bullet_levels_are_clamped(parse) -> None:
    root = parse(_render("bullet", {"bullets": [
        {"text": "top", "level": 0},
        {"text": "deep", "level": 7},
        {"text": "bad", "level": "x"},
        "plain",
    ]}).html)

    assert [li.get("data-level") for li in root.xpath(".//li")] == ["0", "2", "0", "0"]


def test_bullet_icon_type(parse) -> None:
    out = _render("bullet", {"bullets": ["a"]}, {"bullets": {"iconType": "check"}})
    assert "✓" in parse(out.html).xpath("string(.//li)")


@pytest.mark.parametrize("slide_type, props", [
    ("bullet", {"bullets": ["a"]}),
    ("twoColumn", {"leftContent": ["a"], "rightContent": ["b"]}),
    ("imageText", {"bullets": ["a"]}),
    ("comparison", {"leftContent": ["a"], "rightContent": ["b"]}),
])
@pytest.mark.parametrize("icon_type", [["check"], {"name": "check"}, True])
def test_malformed_icon_type_falls_back_to_arrow(slide_type, props, icon_type, parse) -> None:
    out = _render(slide_type, props, {"bullets": {"iconType": icon_type}})

    markers = [li.xpath("string(./span[1])") for li in parse(out.html).xpath(".//li")]
    assert markers
    assert set(markers) == {"→"}


@pytest.mark.parametrize("color", ["url(https://tracker.example/p.gif)", "red; background: url(x)", ["red"]])
def test_unsafe_title_color_is_ignored(color, parse) -> None:
    out = _render("title", {"title": "Hi"}, {"title": {"color": color}})

    h1 = parse(out.html).xpath(".//h1")[0]
    assert "color: var(--color-background)" in h1.get("style")
    assert "url(" not in out.html


def test_unsafe_chart_colors_are_dropped(parse) -> None:
    out = _render("chart", {"chartType": "bar", "data": [
        {"name": "A", "labels": ["x"], "values": [10]},
    ]}, {"chartColors": ["url(https://tracker.example/p.gif)", "#ff0000"]})

    assert "url(" not in out.html
    bar = parse(out.html).xpath(".//div[@class='bar']")[0]
    assert "background-color: #ff0000" in bar.get("style")


def test_two_column_parses_heading_and_bullets(parse) -> None:
    root = parse(_render("twoColumn", {
        "leftContent": "Pros\n- fast\n- cheap",
        "rightContent": "",
    }).html)

    columns = root.xpath(".//div[@class='column']")
    assert len(columns) == 2
    assert columns[0].xpath("string(.//h4)") == "Pros"
    assert len(columns[0].xpath(".//li")) == 2
    assert columns[1].xpath("string(.//div[@class='empty-state'])") == "No content"


def test_thank_you_defaults_message(parse) -> None:
    assert parse(_render("thankYou").html).xpath("string(.//h1)") == "Thank you"


def test_bar_chart_two_series(parse) -> None:
    root = parse(_render("chart", {"chartType": "bar", "data": [
        {"name": "2023", "labels": ["Q1", "Q2"], "values": [50, 200]},
        {"name": "2024", "labels": ["Q1", "Q2"], "values": [100, 400]},
    ]}).html)

    assert root.get("data-chart-type") == "bar"
    widths = [bar.get("data-width") for bar in root.xpath(".//div[@class='bar']")]
    assert widths == ["12.5", "25", "50", "100"]
    assert len(root.xpath(".//span[@class='legend-item']")) == 2


def test_unknown_chart_type_renders_as_bar(parse) -> None:
    root = parse(_render("chart", {"chartType": "radar", "data": [
        {"labels": ["a"], "values": [1]},
    ]}).html)
    assert root.get("data-chart-type") == "bar"


@pytest.mark.parametrize("chart_type", ["line", "area"])
def test_shorter_series_plot_under_the_shared_labels(chart_type, parse) -> None:
    root = parse(_render("chart", {"chartType": chart_type, "data": [
        {"name": "A", "labels": ["Q1", "Q2", "Q3", "Q4", "Q5"], "values": [1, 2, 3, 4, 5]},
        {"name": "B", "labels": ["Q1", "Q2", "Q3"], "values": [5, 4, 3]},
    ]}).html)

    xs = [point.get("cx") for point in root.xpath(".//*[@r='5']")]
    assert len(xs) == 8
    assert xs[5:] == xs[:3]


def test_non_numeric_chart_data_shows_empty_state(parse) -> None:
    root = parse(_render("chart", {"data": [{"labels": ["a", "b"], "values": ["x", None]}]}).html)
    assert root.xpath("string(.//div[@class='empty-state'])") == "No chart data"


@pytest.mark.parametrize("chart_type", ["line", "area"])
def test_line_and_area_charts_draw_paths(chart_type, parse) -> None:
    root = parse(_render("chart", {"chartType": chart_type, "data": [
        {"name": "Users", "labels": ["Jan", "Feb", "Mar"], "values": [10, 30, 20]},
    ]}).html)

    assert root.xpath(".//path[@class='line']")
    assert bool(root.xpath(".//path[@class='area']")) == (chart_type == "area")


def test_pie_chart_caps_series_and_reports_overflow(parse) -> None:
    data = [
        {"name": f"S{i}", "labels": ["a", "b"], "values": [1, 3]}
        for i in range(4)
    ]
    root = parse(_render("chart", {"chartType": "pie", "data": data}).html)

    assert len(root.xpath(".//div[@class='pie']")) == 3
    notice = root.xpath("string(.//div[@class='overflow-notice'])")
    assert "3" in notice and "4" in notice
    labels = root.xpath(".//*[@class='slice-label']")
    assert [label.text for label in labels[:2]] == ["25%", "75%"]


def test_table_pads_short_rows(parse) -> None:
    root = parse(_render("table", {
        "headers": ["Name", "Role", "Team"],
        "rows": [["Ada", "Eng"], ["Grace", "Ops", "Infra"]],
    }).html)

    assert [th.text_content() for th in root.xpath(".//th")] == ["Name", "Role", "Team"]
    rows = root.xpath(".//tbody/tr")
    assert len(rows) == 2
    assert [len(r.xpath("./td")) for r in rows] == [3, 3]


def test_empty_table_keeps_headers(parse) -> None:
    root = parse(_render("table", {"headers": ["A", "B"]}).html)
    assert len(root.xpath(".//th")) == 2
    assert root.xpath("string(.//div[@class='empty-state'])") == "No table rows"


def test_stats_citation(parse) -> None:
    root = parse(_render("stats", {
        "stats": [{"value": "98%", "label": "Uptime"}, {"value": "12", "label": "Regions"}],
        "citation": "Internal dashboard",
    }).html)

    assert len(root.xpath(".//div[@class='stat-card']")) == 2
    assert root.xpath("string(.//div[@class='citation'])") == "Internal dashboard"


def test_quote_mark_can_be_hidden(parse) -> None:
    shown = parse(_render("quote", {"quote": "Hi"}).html)
    hidden = parse(_render("quote", {"quote": "Hi", "showQuoteMark": False}).html)

    assert shown.xpath(".//div[@class='quote-mark']")
    assert not hidden.xpath(".//div[@class='quote-mark']")


def test_team_overflow_notice(parse) -> None:
    profiles = [{"name": f"Person {i}", "role": "Eng"} for i in range(8)]
    root = parse(_render("teamProfile", {"profiles": profiles}).html)

    assert len(root.xpath(".//div[@class='card']")) == 6
    grid_el = root.xpath(".//div[@class='grid']")[0]
    assert (grid_el.get("data-rows"), grid_el.get("data-columns")) == ("2", "3")
    assert "Showing 6 of 8 team members" in root.xpath("string(.//div[@class='overflow-notice'])")


def test_team_avatar_initial(parse) -> None:
    root = parse(_render("teamProfile", {"profiles": [{"name": "ada"}]}).html)
    assert root.xpath("string(.//div[@class='avatar'])") == "A"


def test_agenda_uses_two_columns_above_four(parse) -> None:
    items = [{"title": f"Item {i}"} for i in range(6)]
    root = parse(_render("agenda", {"items": items}).html)

    grid_el = root.xpath(".//div[@class='grid']")[0]
    assert grid_el.get("data-columns") == "2"
    assert len(root.xpath(".//div[@class='agenda-item']")) == 6
    assert not root.xpath(".//div[@class='overflow-notice']")


def test_pricing_marks_recommended_tier(parse) -> None:
    root = parse(_render("pricing", {"tiers": [
        {"name": "Free", "price": "$0"},
        {"name": "Pro", "price": "$20", "period": "month", "recommended": True, "features": ["a", "b"]},
    ]}).html)

    assert root.xpath("string(.//div[@class='recommended'])") == "Recommended"
    assert len(root.xpath(".//div[@class='card']")) == 2


def test_process_arrows_between_steps(parse) -> None:
    root = parse(_render("process", {"steps": [{"title": "a"}, {"title": "b"}, {"title": "c"}]}).html)
    assert len(root.xpath(".//div[@class='step-arrow']")) == 2


def test_roadmap_status_badge(parse) -> None:
    root = parse(_render("roadmap", {"items": [{"period": "Q1", "title": "Beta", "status": "In progress"}]}).html)
    assert root.xpath("string(.//span[@class='status'])") == "In progress"


def test_image_grid_caps_at_four(parse) -> None:
    images = [f"https://img.test/{i}.png" for i in range(6)]
    root = parse(_render("image", {"images": images, "arrangement": "grid"}).html)

    assert root.get("data-arrangement") == "grid"
    assert len(root.xpath(".//img")) == 4
    assert "Showing 4 of 6 images" in root.xpath("string(.//div[@class='overflow-notice'])")


def test_invalid_arrangement_falls_back_to_full(parse) -> None:
    root = parse(_render("image", {"image": "https://img.test/a.png", "arrangement": "mosaic",
                                   "caption": "Cap"}).html)

    assert root.get("data-arrangement") == "full"
    assert root.xpath("string(.//p[@class='caption'])") == "Cap"


def test_image_text_position() -> None:
    right = _render("imageText", {"image": "a.png", "imagePosition": "right", "bullets": ["x"]})
    left = _render("imageText", {"image": "a.png", "bullets": ["x"]})

    assert "flex-direction: row-reverse" in right.html
    assert "flex-direction: row-reverse" not in left.html


def test_testimonial(parse) -> None:
    root = parse(_render("testimonial", {"quote": "Great", "author": "Sam", "role": "CTO"}).html)

    assert root.xpath("string(.//blockquote)") == "“Great”"
    assert "Sam" in root.xpath("string(.//div[@class='testimonial-author'])")


def test_empty_gallery_renders_placeholders(parse) -> None:
    root = parse(_render("gallery").html)

    assert len(root.xpath(".//div[@class='gallery-placeholder']")) == 4
    grid_el = root.xpath(".//div[@class='gallery-grid']")[0]
    assert (grid_el.get("data-rows"), grid_el.get("data-columns")) == ("2", "2")


def test_gallery_overflow(parse) -> None:
    images = [{"url": f"https://img.test/{i}.png", "caption": f"#{i}"} for i in range(14)]
    root = parse(_render("gallery", {"images": images}).html)

    assert len(root.xpath(".//figure[@class='gallery-item']")) == 12
    assert "Showing 12 of 14 images" in root.xpath("string(.//div[@class='overflow-notice'])")


def test_report_two_column(parse) -> None:
    root = parse(_render("reportTwoColumn", {
        "title": "Annual Report",
        "sections": [{"subtitle": "Summary", "body": "Revenue grew."}, {"subtitle": "Outlook", "bullets": ["Hire", "Ship"]}],
    }).html)

    assert root.xpath("string(.//header[@class='report-header'])").startswith("Annual Report")
    assert len(root.xpath(".//section[@class='report-section']")) == 2
    assert [h.text_content() for h in root.xpath(".//section/h4")] == ["Summary", "Outlook"]
    assert len(root.xpath(".//section//li")) == 2


def test_report_a4_at_portrait_ratio(parse) -> None:
    ctx = with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, "A4-portrait")
    root = parse(_render("reportA4", {"title": "Brief", "sections": [{"subtitle": "One"}]}, ctx=ctx).html)

    assert root.get("data-width") == "794"
    assert root.xpath(".//div[@class='report-sections']")
