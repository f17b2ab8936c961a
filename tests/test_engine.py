from __future__ import annotations

import pytest

from slide_engine.engine import TemplateEngine, build_default_engine
from slide_engine.errors import (
    SlideRenderError,
    TemplateNotFound,
    UnsupportedAspectRatio,
    UnsupportedSlideType,
)
from slide_engine.models import Slide, SlideDocument
from slide_engine.template import DEFAULT_TEMPLATE_ID


def test_builtin_templates_are_registered(engine) -> None:
    ids = engine.get_registry().ids()

    assert DEFAULT_TEMPLATE_ID in ids
    for theme_id in ("toss", "twitter", "vercel", "supabase", "claude", "cyberpunk", "mono"):
        assert theme_id in ids
    assert len(engine.available_templates()) == 8
    assert len(engine.free_templates()) == 8
    assert engine.premium_templates() == []


def test_default_template_uses_toss_variables(engine) -> None:
    out = engine.generate_slide({"type": "title", "props": {"title": "Hi"}})

    assert "--color-primary: hsl(217 91% 60%);" in out.css
    assert "--slide-width: 1200px;" in out.css


def test_generate_slide_with_named_template_and_ratio(engine, parse) -> None:
    out = engine.generate_slide(Slide("bullet", {"bullets": ["a"]}), "cyberpunk", "4:3")

    root = parse(out.html)
    assert root.get("data-height") == "900"
    assert "--slide-height: 900px;" in out.css


def test_ratio_change_does_not_leak_into_registry(engine) -> None:
    engine.generate_slide(Slide("title"), "toss", "A4-portrait")
    assert engine.get_registry().get("toss").context.slide_size.width == 1200


def test_unknown_template(engine) -> None:
    with pytest.raises(TemplateNotFound) as excinfo:
        engine.generate_slide(Slide("title"), "neon")
    assert "Available templates:" in str(excinfo.value)
    assert "toss-default" in str(excinfo.value)


def test_unknown_ratio(engine) -> None:
    with pytest.raises(UnsupportedAspectRatio):
        engine.generate_slide(Slide("title"), "toss", "1:1")


def test_unknown_type_from_single_slide(engine) -> None:
    with pytest.raises(UnsupportedSlideType):
        engine.generate_slide({"type": "hologram"})


def test_generate_all_renders_in_order(engine, parse) -> None:
    document = {
        "aspectRatio": "A4-portrait",
        "slides": [
            {"type": "title", "props": {"title": "One"}},
            {"type": "section", "props": {"title": "Two"}},
            {"type": "thankYou"},
        ],
    }

    slides = engine.generate_all(document, "supabase")

    assert [parse(s.html).get("data-slide-type") for s in slides] == ["title", "section", "thankYou"]
    assert all(parse(s.html).get("data-width") == "794" for s in slides)


def test_generate_all_empty_document(engine) -> None:
    assert engine.generate_all(SlideDocument()) == []


def test_generate_all_fails_fast_on_unknown_template(engine) -> None:
    with pytest.raises(TemplateNotFound):
        engine.generate_all({"slides": [{"type": "hologram"}]}, "neon")


def test_generate_all_wraps_slide_failures(engine) -> None:
    document = SlideDocument(slides=[Slide("title"), Slide("title"), Slide("hologram")])

    with pytest.raises(SlideRenderError) as excinfo:
        engine.generate_all(document)

    error = excinfo.value
    assert error.index == 3
    assert error.slide_type == "hologram"
    assert isinstance(error.__cause__, UnsupportedSlideType)
    assert "Slide 3 (hologram)" in str(error)


def test_engine_without_default_template(themes) -> None:
    engine = TemplateEngine(themes, include_default=False)
    assert not engine.has_template(DEFAULT_TEMPLATE_ID)
    assert engine.has_template("mono")


def test_build_default_engine_with_extra_themes(tmp_path) -> None:
    extra = tmp_path / "extra.yaml"
    extra.write_text(
        "themes:\n"
        "  - id: toss\n"
        "    name: Toss Override\n"
        "  - id: gold\n"
        "    name: Gold\n"
        "    category: premium\n"
        "    price: 19\n",
        encoding="utf-8",
    )

    engine = build_default_engine(extra)

    assert engine.get_registry().get("toss").name == "Toss Override"
    assert [t.id for t in engine.premium_templates()] == ["gold"]
    assert engine.get_registry().count() == 9
