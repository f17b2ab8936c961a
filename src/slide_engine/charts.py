"""Chart geometry for bar, line, area and pie charts.

All functions are pure: they take normalized series and return numbers,
coordinates and SVG path strings. Markup assembly lives in the chart
renderer.

Shared preprocessing:
- values are coerced to float; non-numeric entries become None and are
  excluded from min/max
- labels and values are truncated to the shorter length per series
- min/max are taken across all series
- series colors cycle through a fixed 5-color palette
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .models import ChartSeries

logger = logging.getLogger(__name__)

CHART_TYPES = ("bar", "line", "pie", "area")
MAX_PIE_SERIES = 3

PALETTE = (
    "var(--color-primary)",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
)

# Pie labels sit this far outside the slice radius
PIE_LABEL_OFFSET = 45


@dataclass(frozen=True)
class Bar:
    series: str
    value: float | None
    width: float
    color: str


@dataclass(frozen=True)
class BarGroup:
    label: str
    bars: tuple[Bar, ...]


@dataclass(frozen=True)
class PlotBox:
    """Drawable area inside an SVG viewBox."""
    width: float
    height: float
    padding: float = 40

    @property
    def inner_width(self) -> float:
        return max(self.width - 2 * self.padding, 1)

    @property
    def inner_height(self) -> float:
        return max(self.height - 2 * self.padding, 1)

    @property
    def baseline(self) -> float:
        return self.padding + self.inner_height


@dataclass(frozen=True)
class PieSlice:
    label: str
    value: float
    angle: float
    percentage: float
    path: str
    label_x: float
    label_y: float
    color: str


def coerce_number(value: Any) -> float | None:
    """Coerce a chart value to float.

    Accepts ints, floats and numeric strings (thousands separators and a
    trailing '%' are ignored). Booleans, NaN, infinities and anything else
    yield None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "").rstrip("%").strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def normalize_series(data: Any) -> list[ChartSeries]:
    """Turn raw chart data into ChartSeries, skipping unusable entries."""
    if not isinstance(data, (list, tuple)):
        return []

    series_list = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.debug(f"Skipping chart series {idx + 1}: not a mapping")
            continue
        labels = entry.get("labels") or []
        values = entry.get("values") or []
        if not isinstance(labels, (list, tuple)):
            labels = []
        if not isinstance(values, (list, tuple)):
            values = []
        length = min(len(labels), len(values))
        if len(labels) != len(values):
            logger.debug(
                f"Chart series {idx + 1}: {len(labels)} labels vs {len(values)} values, "
                f"truncating to {length}"
            )
        name = entry.get("name")
        series_list.append(ChartSeries(
            name=str(name) if name not in (None, "") else f"Series {idx + 1}",
            labels=tuple(str(label) for label in labels[:length]),
            values=tuple(coerce_number(v) for v in values[:length]),
        ))
    return series_list


def has_numeric_data(series_list: Sequence[ChartSeries]) -> bool:
    return any(series.numeric_values for series in series_list)


def value_range(series_list: Sequence[ChartSeries]) -> Optional[tuple[float, float]]:
    """(min, max) over every numeric value of every series, or None."""
    values = [v for series in series_list for v in series.numeric_values]
    if not values:
        return None
    return min(values), max(values)


def series_color(index: int, overrides: Optional[Sequence[str]] = None) -> str:
    """Color for the series at index, cycling the palette."""
    palette = [c for c in (overrides or []) if isinstance(c, str) and c.strip()] or PALETTE
    return palette[index % len(palette)]


def is_percentage_data(lo: float, hi: float) -> bool:
    """Heuristic: values already expressed on a 0-100 scale."""
    return hi <= 100 and lo >= 0 and hi > 1


def bar_width(value: float | None, lo: float, hi: float) -> float:
    """Bar length as a percentage of the track, clamped to [0, 100]."""
    if value is None:
        return 0.0
    if is_percentage_data(lo, hi):
        width = value
    elif hi == 0:
        width = 0.0
    else:
        width = value / hi * 100
    width = min(max(width, 0.0), 100.0)
    return round(width, 1)


def bar_groups(series_list: Sequence[ChartSeries],
               overrides: Optional[Sequence[str]] = None) -> list[BarGroup]:
    """Group bars by the first series' labels, one bar per series."""
    bounds = value_range(series_list)
    if not series_list or bounds is None:
        return []
    lo, hi = bounds

    groups = []
    for i, label in enumerate(series_list[0].labels):
        bars = []
        for s_idx, series in enumerate(series_list):
            if i >= len(series.values):
                continue
            value = series.values[i]
            bars.append(Bar(
                series=series.name,
                value=value,
                width=bar_width(value, lo, hi),
                color=series_color(s_idx, overrides),
            ))
        groups.append(BarGroup(label=label, bars=tuple(bars)))
    return groups


def line_points(values: Sequence[float | None], lo: float, hi: float,
                box: PlotBox, count: Optional[int] = None) -> list[tuple[float, float]]:
    """Map values to SVG coordinates inside a plot box.

    x is spread evenly across the box; y is scaled between lo and hi. A
    single value is centered horizontally. Non-numeric entries are skipped.

    Args:
        values: One series' values.
        lo: Smallest value across all plotted series.
        hi: Largest value across all plotted series.
        box: Plot area.
        count: Number of x positions shared by every series (the axis
            labels). Values past it have no category and are dropped.
            Defaults to len(values).
    """
    n = len(values) if count is None else count
    span = (hi - lo) or 1
    points = []
    for i, value in enumerate(values):
        if i >= n:
            break
        if value is None:
            continue
        if n > 1:
            x = box.padding + i / (n - 1) * box.inner_width
        else:
            x = box.padding + box.inner_width / 2
        y = box.padding + box.inner_height - (value - lo) / span * box.inner_height
        points.append((round(x, 2), round(y, 2)))
    return points


def line_path(points: Sequence[tuple[float, float]]) -> str:
    if not points:
        return ""
    head, *rest = points
    return " ".join([f"M {head[0]} {head[1]}"] + [f"L {x} {y}" for x, y in rest])


def area_path(points: Sequence[tuple[float, float]], baseline: float) -> str:
    """Line path closed down to the baseline."""
    if not points:
        return ""
    first_x = points[0][0]
    last_x = points[-1][0]
    segments = [f"M {first_x} {baseline}"]
    segments.extend(f"L {x} {y}" for x, y in points)
    segments.append(f"L {last_x} {baseline} Z")
    return " ".join(segments)


def _polar(cx: float, cy: float, radius: float, degrees: float) -> tuple[float, float]:
    radians = math.radians(degrees)
    return round(cx + radius * math.cos(radians), 2), round(cy + radius * math.sin(radians), 2)


def pie_slices(series: ChartSeries, cx: float, cy: float, radius: float,
               overrides: Optional[Sequence[str]] = None) -> list[PieSlice]:
    """Slices of one pie, starting at 12 o'clock and going clockwise.

    Only positive values take part. Angles sum to 360 and percentages to
    100 (before rounding) whenever at least one value is positive.
    """
    entries = [
        (label, value)
        for label, value in zip(series.labels, series.values)
        if value is not None and value > 0
    ]
    total = sum(value for _, value in entries)
    if total <= 0:
        return []

    slices = []
    start = -90.0
    for idx, (label, value) in enumerate(entries):
        fraction = value / total
        angle = fraction * 360
        end = start + angle
        x1, y1 = _polar(cx, cy, radius, start)
        x2, y2 = _polar(cx, cy, radius, end)

        if angle >= 359.999:
            # start and end points coincide, so draw two half arcs
            bottom_x, bottom_y = _polar(cx, cy, radius, start + 180)
            path = (
                f"M {x1} {y1} A {radius} {radius} 0 1 1 {bottom_x} {bottom_y} "
                f"A {radius} {radius} 0 1 1 {x1} {y1} Z"
            )
        else:
            large_arc = 1 if angle > 180 else 0
            path = f"M {cx} {cy} L {x1} {y1} A {radius} {radius} 0 {large_arc} 1 {x2} {y2} Z"

        label_x, label_y = _polar(cx, cy, radius + PIE_LABEL_OFFSET, start + angle / 2)
        slices.append(PieSlice(
            label=label,
            value=value,
            angle=angle,
            percentage=round(fraction * 100, 1),
            path=path,
            label_x=label_x,
            label_y=label_y,
            color=series_color(idx, overrides),
        ))
        start = end
    return slices


def format_value(value: float | None) -> str:
    """Render a number without a trailing '.0' for integral values."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
