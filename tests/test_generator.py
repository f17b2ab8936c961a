from __future__ import annotations

import logging
from pathlib import Path

import pytest
from lxml import html as lxml_html

from slide_engine.config import Config
from slide_engine.errors import DocumentError, SlideRenderError, TemplateNotFound
from slide_engine.generator import DeckGenerator
from slide_engine.models import Slide, SlideDocument

DECK = """\
title: Launch Plan
slides:
  - type: title
    props: {title: Launch}
  - type: bullet
    props:
      title: Goals
      bullets:
        - {text: Ship, level: 0}
  - type: thankYou
"""


def _config(tmp_path: Path, settings: str = "", deck: str = DECK) -> Config:
    (tmp_path / "deck.yaml").write_text(deck, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "paths:\n"
        "  project_root: .\n"
        "  document: deck.yaml\n"
        "  output: out/deck.html\n"
        "settings:\n"
        "  template: toss\n" + settings,
        encoding="utf-8",
    )
    return Config(str(config_path))


def test_generate_writes_bundle(tmp_path) -> None:
    result = DeckGenerator(_config(tmp_path)).generate()

    assert result.output_path == tmp_path.resolve() / "out" / "deck.html"
    assert len(result.slides) == 3
    written = result.output_path.read_text(encoding="utf-8")
    assert written == result.html

    tree = lxml_html.document_fromstring(written)
    assert tree.xpath("string(//title)") == "Launch Plan"
    assert len(tree.xpath("//div[@class='slide-wrapper']")) == 3


def test_template_override(tmp_path) -> None:
    result = DeckGenerator(_config(tmp_path)).generate(template_override="cyberpunk")
    assert "--color-primary: hsl(320 100% 50%);" in result.slides[0].css

    with pytest.raises(TemplateNotFound):
        DeckGenerator(_config(tmp_path)).generate(template_override="neon")


def test_configured_aspect_ratio_wins_over_document(tmp_path) -> None:
    config = _config(tmp_path, "  aspect_ratio: A4-portrait\n")

    result = DeckGenerator(config).generate()

    assert result.document.aspect_ratio == "A4-portrait"
    assert 'data-width="794"' in result.slides[0].html
    assert "size: A4 portrait;" in result.html


def test_refuses_to_overwrite_when_disabled(tmp_path) -> None:
    config = _config(tmp_path, "  output: {overwrite: false}\n")
    output = tmp_path / "out" / "deck.html"
    output.parent.mkdir()
    output.write_text("keep me", encoding="utf-8")

    with pytest.raises(FileExistsError, match="already exists"):
        DeckGenerator(config).generate()
    assert output.read_text(encoding="utf-8") == "keep me"


def test_missing_document(tmp_path) -> None:
    config = _config(tmp_path)
    (tmp_path / "deck.yaml").unlink()

    with pytest.raises(FileNotFoundError, match="Required files not found"):
        DeckGenerator(config).generate()


def test_slide_failure_carries_position(tmp_path) -> None:
    deck = "slides:\n  - type: title\n  - type: hologram\n"

    with pytest.raises(SlideRenderError) as excinfo:
        DeckGenerator(_config(tmp_path, deck=deck)).generate()
    assert excinfo.value.index == 2


def test_render_one_page_document(tmp_path) -> None:
    document = SlideDocument(
        slides=[Slide("title"), Slide("reportTwoColumn", {"title": "Report"})],
        page_format="one-page",
    )

    result = DeckGenerator(_config(tmp_path)).render(document)

    assert [s.type for s in result.document.slides] == ["reportTwoColumn"]
    assert len(result.slides) == 1
    assert result.output_path is None


def test_render_one_page_without_report(tmp_path) -> None:
    document = SlideDocument(slides=[Slide("title")], page_format="one-page")

    with pytest.raises(DocumentError):
        DeckGenerator(_config(tmp_path)).render(document)


def test_engine_is_built_once(tmp_path) -> None:
    generator = DeckGenerator(_config(tmp_path))
    assert generator.engine is generator.engine


def test_engine_logs_registered_templates(tmp_path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="slide_engine")
    DeckGenerator(_config(tmp_path)).generate()

    assert "Registered templates: 8" in caplog.text
    assert "    - toss: Toss" in caplog.text
