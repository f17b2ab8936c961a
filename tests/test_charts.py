from __future__ import annotations

import math

import pytest

from slide_engine import charts
from slide_engine.models import ChartSeries


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, 5.0),
        (2.5, 2.5),
        ("1,200", 1200.0),
        (" 45% ", 45.0),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        (float("nan"), None),
        (float("inf"), None),
    ],
)
def test_coerce_number(raw, expected) -> None:
    assert charts.coerce_number(raw) == expected


def test_normalize_series_truncates_and_names() -> None:
    series = charts.normalize_series([
        {"labels": ["a", "b", "c"], "values": [1, "x"]},
        "garbage",
        {"name": "Second", "labels": ["a"], "values": [3, 4]},
    ])

    assert len(series) == 2
    assert series[0].name == "Series 1"
    assert series[0].labels == ("a", "b")
    assert series[0].values == (1.0, None)
    assert series[1].name == "Second"
    assert series[1].values == (3.0,)


def test_normalize_series_rejects_non_lists() -> None:
    assert charts.normalize_series(None) == []
    assert charts.normalize_series({"labels": []}) == []


def test_two_series_bar_widths_share_one_scale() -> None:
    series = charts.normalize_series([
        {"name": "2023", "labels": ["Q1", "Q2"], "values": [50, 200]},
        {"name": "2024", "labels": ["Q1", "Q2"], "values": [100, 400]},
    ])

    groups = charts.bar_groups(series)

    assert [g.label for g in groups] == ["Q1", "Q2"]
    assert [b.width for b in groups[0].bars] == [12.5, 25.0]
    assert [b.width for b in groups[1].bars] == [50.0, 100.0]
    assert groups[0].bars[0].color == charts.PALETTE[0]
    assert groups[0].bars[1].color == charts.PALETTE[1]


def test_percentage_data_is_used_as_is() -> None:
    assert charts.bar_width(42, 10, 90) == 42
    assert charts.bar_width(None, 0, 90) == 0


def test_bar_width_is_clamped() -> None:
    assert charts.bar_width(-50, -50, 200) == 0
    assert charts.bar_width(300, 0, 300) == 100
    assert charts.bar_width(5, 0, 0) == 0


def test_series_color_cycles_and_honours_overrides() -> None:
    assert charts.series_color(5) == charts.PALETTE[0]
    assert charts.series_color(1, ["#111", "#222"]) == "#222"
    assert charts.series_color(2, ["#111", "#222"]) == "#111"
    assert charts.series_color(0, ["", None]) == charts.PALETTE[0]


def test_pie_angles_and_percentages_sum_to_full_circle() -> None:
    series = ChartSeries("Share", ("a", "b", "c", "d"), (1.0, 2.0, 3.0, None))

    slices = charts.pie_slices(series, 100, 100, 50)

    assert len(slices) == 3
    assert math.isclose(sum(s.angle for s in slices), 360.0)
    assert math.isclose(sum(s.percentage for s in slices), 100.0, abs_tol=0.2)
    assert slices[0].path.startswith("M 100 100 L 100.0 50.0")


def test_pie_skips_non_positive_values() -> None:
    series = ChartSeries("S", ("a", "b"), (0.0, -4.0))
    assert charts.pie_slices(series, 0, 0, 10) == []


def test_single_slice_pie_draws_full_circle() -> None:
    slices = charts.pie_slices(ChartSeries("S", ("only",), (7.0,)), 50, 50, 20)

    assert len(slices) == 1
    assert slices[0].percentage == 100
    assert slices[0].path.count(" A ") == 2


def test_line_points_span_the_plot_box() -> None:
    box = charts.PlotBox(width=400, height=200, padding=40)
    points = charts.line_points([0.0, None, 10.0], 0, 10, box)

    assert points == [(40.0, 160.0), (360.0, 40.0)]
    assert charts.line_path(points) == "M 40.0 160.0 L 360.0 40.0"
    assert charts.area_path(points, box.baseline) == (
        "M 40.0 160 L 40.0 160.0 L 360.0 40.0 L 360.0 160 Z"
    )


def test_single_point_is_centered() -> None:
    box = charts.PlotBox(width=400, height=200, padding=40)
    assert charts.line_points([5.0], 5, 5, box)[0][0] == 200.0


def test_line_points_share_positions_across_series() -> None:
    box = charts.PlotBox(width=400, height=200, padding=40)
    axis = charts.line_points([0.0] * 5, 0, 1, box)
    short = charts.line_points([1.0, 2.0, 3.0], 0, 10, box, count=5)

    assert [x for x, _ in short] == [x for x, _ in axis[:3]]
    assert [x for x, _ in axis] == [40.0, 120.0, 200.0, 280.0, 360.0]


def test_line_points_drop_values_past_count() -> None:
    box = charts.PlotBox(width=400, height=200, padding=40)
    points = charts.line_points([1.0, 2.0, 3.0, 4.0], 0, 10, box, count=2)

    assert [x for x, _ in points] == [40.0, 360.0]


def test_value_range_and_format_value() -> None:
    series = [ChartSeries("a", ("x", "y"), (3.0, None)), ChartSeries("b", ("x",), (-1.5,))]

    assert charts.value_range(series) == (-1.5, 3.0)
    assert charts.value_range([]) is None
    assert charts.format_value(3.0) == "3"
    assert charts.format_value(2.5) == "2.5"
    assert charts.format_value(None) == "-"
