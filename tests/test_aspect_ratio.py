from __future__ import annotations

import pytest

from slide_engine.aspect_ratio import ASPECT_RATIOS, canvas_size, is_portrait, with_aspect_ratio
from slide_engine.errors import UnsupportedAspectRatio
from slide_engine.theme_resolver import DEFAULT_TEMPLATE_CONTEXT


@pytest.mark.parametrize(
    "ratio, size",
    [("16:9", (1200, 675)), ("4:3", (1200, 900)), ("A4-portrait", (794, 1123))],
)
def test_canvas_sizes(ratio, size) -> None:
    assert canvas_size(ratio) == size
    ctx = with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, ratio)
    assert (ctx.slide_size.width, ctx.slide_size.height) == size


def test_only_slide_size_changes() -> None:
    ctx = with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, "4:3")

    assert ctx.colors == DEFAULT_TEMPLATE_CONTEXT.colors
    assert ctx.fonts == DEFAULT_TEMPLATE_CONTEXT.fonts
    assert ctx.spacing == DEFAULT_TEMPLATE_CONTEXT.spacing
    assert ctx != DEFAULT_TEMPLATE_CONTEXT


def test_applying_same_ratio_twice_is_idempotent() -> None:
    once = with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, "A4-portrait")
    twice = with_aspect_ratio(once, "A4-portrait")

    assert once == twice
    assert with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, "16:9") is DEFAULT_TEMPLATE_CONTEXT


def test_unknown_ratio_is_rejected() -> None:
    with pytest.raises(UnsupportedAspectRatio) as excinfo:
        with_aspect_ratio(DEFAULT_TEMPLATE_CONTEXT, "21:9")

    assert "'21:9'" in str(excinfo.value)
    for ratio in ASPECT_RATIOS:
        assert ratio in str(excinfo.value)


def test_unhashable_ratio_is_rejected() -> None:
    with pytest.raises(UnsupportedAspectRatio):
        canvas_size(["16:9"])


def test_is_portrait() -> None:
    assert is_portrait("A4-portrait")
    assert not is_portrait("16:9")
