"""Slide rendering engine: themed HTML slides from typed slide documents."""

from .errors import (
    SlideEngineError,
    TemplateNotFound,
    UnsupportedSlideType,
    UnsupportedAspectRatio,
    InvalidTemplateId,
    DocumentError,
    SlideRenderError,
    ThemeValidationError,
)
from .models import (
    SLIDE_TYPES,
    Slide,
    HTMLSlide,
    ChartSeries,
    SlideDocument,
    slide_from_dict,
    document_from_dict,
    load_document,
    select_one_page,
)
from .themes import (
    Theme,
    load_themes,
    get_theme,
    validate_theme,
)
from .theme_resolver import (
    TemplateContext,
    DEFAULT_TEMPLATE_CONTEXT,
    resolve,
    to_css_variables,
)
from .aspect_ratio import (
    ASPECT_RATIOS,
    with_aspect_ratio,
)
from .template import (
    DEFAULT_TEMPLATE_ID,
    Template,
    default_template,
)
from .registry import TemplateRegistry
from .engine import (
    TemplateEngine,
    build_default_engine,
)
from .bundle import (
    build_full_html,
    sanitize_filename,
)

__all__ = [
    # Errors
    "SlideEngineError",
    "TemplateNotFound",
    "UnsupportedSlideType",
    "UnsupportedAspectRatio",
    "InvalidTemplateId",
    "DocumentError",
    "SlideRenderError",
    "ThemeValidationError",
    # Documents
    "SLIDE_TYPES",
    "Slide",
    "HTMLSlide",
    "ChartSeries",
    "SlideDocument",
    "slide_from_dict",
    "document_from_dict",
    "load_document",
    "select_one_page",
    # Themes
    "Theme",
    "load_themes",
    "get_theme",
    "validate_theme",
    "TemplateContext",
    "DEFAULT_TEMPLATE_CONTEXT",
    "resolve",
    "to_css_variables",
    "ASPECT_RATIOS",
    "with_aspect_ratio",
    # Templates and engine
    "DEFAULT_TEMPLATE_ID",
    "Template",
    "default_template",
    "TemplateRegistry",
    "TemplateEngine",
    "build_default_engine",
    # Export
    "build_full_html",
    "sanitize_filename",
]
