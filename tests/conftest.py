from __future__ import annotations

import pytest
from lxml import html as lxml_html

from slide_engine.engine import TemplateEngine
from slide_engine.themes import load_themes


@pytest.fixture(scope="session")
def themes():
    return load_themes()


@pytest.fixture
def engine(themes):
    return TemplateEngine(themes)


@pytest.fixture
def parse():
    """Parse a rendered fragment into its root element."""
    def _parse(fragment: str):
        return lxml_html.fragment_fromstring(fragment)
    return _parse
