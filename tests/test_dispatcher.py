from __future__ import annotations

import pytest

from slide_engine import dispatcher
from slide_engine.errors import UnsupportedSlideType
from slide_engine.models import SLIDE_TYPES, Slide
from slide_engine.theme_resolver import DEFAULT_TEMPLATE_CONTEXT


def test_every_slide_type_has_a_renderer() -> None:
    assert set(dispatcher.RENDERERS) == set(SLIDE_TYPES)
    assert len(SLIDE_TYPES) == 24
    assert all(dispatcher.is_supported(t) for t in SLIDE_TYPES)


def test_unknown_type_is_rejected() -> None:
    assert not dispatcher.is_supported("hologram")

    with pytest.raises(UnsupportedSlideType, match="Unsupported slide type: 'hologram'") as excinfo:
        dispatcher.render(Slide("hologram"), DEFAULT_TEMPLATE_CONTEXT)
    assert excinfo.value.slide_type == "hologram"


def test_type_tags_are_case_sensitive() -> None:
    with pytest.raises(UnsupportedSlideType):
        dispatcher.render(Slide("Title"), DEFAULT_TEMPLATE_CONTEXT)


def test_render_is_deterministic() -> None:
    slide = Slide("stats", {"title": "KPIs", "stats": [{"value": "1", "label": "x"}]})

    first = dispatcher.render(slide, DEFAULT_TEMPLATE_CONTEXT)
    second = dispatcher.render(slide, DEFAULT_TEMPLATE_CONTEXT)

    assert first == second


def test_coverage_check_reports_missing_renderers(monkeypatch) -> None:
    table = dict(dispatcher.RENDERERS)
    del table["gallery"]
    monkeypatch.setattr(dispatcher, "RENDERERS", table)

    with pytest.raises(RuntimeError, match="missing: \\['gallery'\\]"):
        dispatcher._check_coverage()


@pytest.mark.parametrize("slide_type", SLIDE_TYPES)
def test_renderers_are_documented(slide_type) -> None:
    doc = dispatcher.RENDERERS[slide_type].__doc__
    assert doc and doc.strip().splitlines()[0].endswith(".")
