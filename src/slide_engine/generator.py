"""Deck generation orchestration.

This module provides the primary interface for turning a slide document on
disk into a single HTML file, using the configuration for paths and
defaults.

Pipeline flow:
    1. Load config and build the engine (built-in plus configured themes)
    2. Load the slide document (JSON/YAML) and apply one-page selection
    3. Render every slide with the configured template and aspect ratio
    4. Bundle the slides into one HTML document and save it
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .bundle import build_full_html
from .config import Config
from .engine import TemplateEngine, build_default_engine
from .models import HTMLSlide, SlideDocument, load_document, select_one_page

logger = logging.getLogger(__name__)


@dataclass
class DeckResult:
    """Outcome of rendering a document.

    Attributes:
        document: The document as rendered (after one-page selection).
        slides: Rendered slides in order.
        html: Bundled HTML document.
        output_path: Where the bundle was written, if it was saved.
    """
    document: SlideDocument
    slides: list[HTMLSlide]
    html: str
    output_path: Optional[Path] = None


class DeckGenerator:
    """Orchestrates rendering a slide document into an HTML deck."""

    def __init__(self, config: Config):
        """Initialize the generator with configuration.

        Args:
            config: Configuration object with paths and settings.
        """
        self.config = config
        self._engine: Optional[TemplateEngine] = None

    @property
    def engine(self) -> TemplateEngine:
        """Lazy-build the engine with built-in and configured themes."""
        if self._engine is None:
            self._engine = build_default_engine(self.config.themes_path)
            self._engine.log_info()
        return self._engine

    def render(self, document: SlideDocument, template_id: Optional[str] = None) -> DeckResult:
        """Render a document in memory.

        Args:
            document: Parsed slide document.
            template_id: Template to use; defaults to the configured one.

        Returns:
            DeckResult without an output path.
        """
        document = select_one_page(document)
        if self.config.aspect_ratio:
            document = replace(document, aspect_ratio=self.config.aspect_ratio)

        template_id = template_id or self.config.template_id
        logger.info(
            f"Rendering {len(document.slides)} slides "
            f"(template '{template_id}', aspect ratio {document.aspect_ratio})"
        )
        slides = self.engine.generate_all(document, template_id)
        html = build_full_html(slides, document.title, document.aspect_ratio)
        return DeckResult(document=document, slides=slides, html=html)

    def generate(self, template_override: Optional[str] = None) -> DeckResult:
        """Render the configured document and save the HTML bundle.

        Args:
            template_override: Optional template id overriding the config.

        Returns:
            DeckResult with output_path set.

        Raises:
            FileNotFoundError: If the document or themes file is missing.
            FileExistsError: If the output exists and overwrite is disabled.
        """
        self.config.validate_paths()

        document_path = self.config.document_path
        logger.info(f"Loading slide document: {document_path}")
        document = load_document(document_path)

        output_path = self.config.output_path
        if output_path.exists() and not self.config.overwrite:
            raise FileExistsError(
                f"Output file already exists: {output_path} "
                f"(set settings.output.overwrite to true to replace it)"
            )

        result = self.render(document, template_override)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Saving deck to {output_path}...")
        output_path.write_text(result.html, encoding="utf-8")
        logger.info("✓ Deck saved successfully!")
        logger.info(f"  Total slides rendered: {len(result.slides)}")

        result.output_path = output_path
        return result
