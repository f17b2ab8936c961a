"""Data model for slide documents and rendered output.

A slide document is the JSON structure produced upstream by the content
generator:

    {
      "title": "Quarterly review",
      "aspectRatio": "16:9",
      "pageFormat": "slides",
      "slides": [
        {"type": "title", "props": {"title": "Q3"}, "style": {}},
        ...
      ]
    }

Only the discriminant ``type`` is trusted. Every other field may be missing
or malformed and is defaulted by the renderers.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import DocumentError

logger = logging.getLogger(__name__)

# Every slide variant the engine renders, in dispatch order
SLIDE_TYPES: tuple[str, ...] = (
    "title",
    "section",
    "content",
    "bullet",
    "twoColumn",
    "thankYou",
    "chart",
    "table",
    "stats",
    "quote",
    "comparison",
    "timeline",
    "featureGrid",
    "teamProfile",
    "process",
    "roadmap",
    "pricing",
    "imageText",
    "image",
    "agenda",
    "testimonial",
    "gallery",
    "reportTwoColumn",
    "reportA4",
)

# Variants allowed when the document is a single printable page
REPORT_TYPES: tuple[str, ...] = ("reportTwoColumn", "reportA4")

PAGE_FORMATS: tuple[str, ...] = ("slides", "one-page")
DEFAULT_ASPECT_RATIO = "16:9"


@dataclass(frozen=True)
class Slide:
    """One slide of a document.

    Attributes:
        type: Discriminant tag, one of SLIDE_TYPES for renderable slides.
        props: Content payload specific to the variant.
        style: Optional per-instance style overrides.
        id: Optional stable identifier supplied by the editor.
    """
    type: str
    props: dict[str, Any] = field(default_factory=dict)
    style: dict[str, Any] = field(default_factory=dict)
    id: str | None = None


@dataclass(frozen=True)
class HTMLSlide:
    """Rendered slide: an HTML fragment and the CSS block it references."""
    html: str
    css: str


@dataclass(frozen=True)
class ChartSeries:
    """A named data series for chart slides.

    Values are already coerced: non-numeric entries are None. Labels and
    values always have the same length.
    """
    name: str
    labels: tuple[str, ...]
    values: tuple[float | None, ...]

    @property
    def numeric_values(self) -> list[float]:
        return [v for v in self.values if v is not None]


@dataclass(frozen=True)
class SlideDocument:
    """A full document of slides plus canvas settings.

    Attributes:
        slides: Slides in presentation order.
        title: Optional document title, used for exported bundles.
        aspect_ratio: Canvas ratio key ('16:9', '4:3', 'A4-portrait').
        page_format: 'slides' or 'one-page'.
    """
    slides: list[Slide] = field(default_factory=list)
    title: str | None = None
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    page_format: str = "slides"


def _as_dict(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


def slide_from_dict(data: Any, position: int | None = None) -> Slide:
    """Build a Slide from an upstream JSON mapping.

    Args:
        data: Mapping with at least a string ``type``.
        position: 1-based position, used only in error messages.

    Returns:
        Slide with props and style defaulted to empty dicts.

    Raises:
        DocumentError: If data is not a mapping or has no string type.
    """
    where = f"Slide {position}" if position is not None else "Slide"
    if isinstance(data, Slide):
        return data
    if not isinstance(data, dict):
        raise DocumentError(f"{where} must be a mapping, got {type(data).__name__}")

    slide_type = data.get("type")
    if not isinstance(slide_type, str) or not slide_type.strip():
        raise DocumentError(f"{where} has no 'type' discriminant")

    slide_id = data.get("id")
    return Slide(
        type=slide_type,
        props=_as_dict(data.get("props")),
        style=_as_dict(data.get("style")),
        id=str(slide_id) if slide_id is not None else None,
    )


def document_from_dict(data: Any) -> SlideDocument:
    """Build a SlideDocument from the upstream JSON structure.

    Accepts both camelCase (``aspectRatio``) and snake_case keys.

    Raises:
        DocumentError: If the document is not a mapping or slides is not a list.
    """
    if isinstance(data, SlideDocument):
        return data
    if not isinstance(data, dict):
        raise DocumentError(f"Document must be a mapping, got {type(data).__name__}")

    raw_slides = data.get("slides", [])
    if not isinstance(raw_slides, list):
        raise DocumentError("Document 'slides' must be a list")

    slides = [slide_from_dict(item, idx + 1) for idx, item in enumerate(raw_slides)]

    aspect_ratio = data.get("aspectRatio") or data.get("aspect_ratio") or DEFAULT_ASPECT_RATIO
    page_format = data.get("pageFormat") or data.get("page_format") or "slides"
    if page_format not in PAGE_FORMATS:
        logger.warning(f"Unknown page format '{page_format}', using 'slides'")
        page_format = "slides"

    title = data.get("title")
    return SlideDocument(
        slides=slides,
        title=str(title) if title is not None else None,
        aspect_ratio=str(aspect_ratio),
        page_format=page_format,
    )


def load_document(path: Union[str, Path]) -> SlideDocument:
    """Load a slide document from a JSON or YAML file.

    Args:
        path: Path to the document. ``.json`` files are parsed as JSON,
            anything else as YAML.

    Returns:
        Parsed SlideDocument.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentError: If the content is not a usable document.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise DocumentError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise DocumentError(f"Invalid YAML in {path}: {e}") from e

    document = document_from_dict(data)
    logger.info(f"Loaded {len(document.slides)} slides from {path}")
    return document


def select_one_page(document: SlideDocument) -> SlideDocument:
    """Reduce a one-page document to its first report slide.

    Documents in 'slides' format are returned unchanged.

    Raises:
        DocumentError: If a one-page document contains no report slide.
    """
    if document.page_format != "one-page":
        return document

    for slide in document.slides:
        if slide.type in REPORT_TYPES:
            if len(document.slides) > 1:
                logger.info(
                    f"One-page format: keeping '{slide.type}' slide, "
                    f"dropping {len(document.slides) - 1} other slide(s)"
                )
            return replace(document, slides=[slide])

    found = [s.type for s in document.slides]
    raise DocumentError(
        f"One-page documents need a {' or '.join(REPORT_TYPES)} slide; found: {found}"
    )
