"""Exception types raised by the slide engine.

Contract violations by the caller (unknown template, unknown slide type,
unknown aspect ratio) are fatal and propagate. Malformed optional content
inside a known slide is never an error: renderers degrade instead.
"""

from typing import Iterable


class SlideEngineError(Exception):
    """Base class for all slide engine errors."""


class TemplateNotFound(SlideEngineError, KeyError):
    """Raised when a template id is not registered."""

    def __init__(self, template_id: str, available: Iterable[str] = ()):
        self.template_id = template_id
        self.available = sorted(available)
        message = f"Template '{template_id}' not found"
        if self.available:
            message += f". Available templates: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnsupportedSlideType(SlideEngineError, ValueError):
    """Raised when no renderer handles a slide's type tag."""

    def __init__(self, slide_type):
        self.slide_type = slide_type
        super().__init__(f"Unsupported slide type: {slide_type!r}")


class UnsupportedAspectRatio(SlideEngineError, ValueError):
    """Raised for an aspect ratio outside the ratio table."""

    def __init__(self, ratio, available: Iterable[str] = ()):
        self.ratio = ratio
        message = f"Unsupported aspect ratio: {ratio!r}"
        available = list(available)
        if available:
            message += f". Supported ratios: {', '.join(available)}"
        super().__init__(message)


class InvalidTemplateId(SlideEngineError, ValueError):
    """Raised when registering a template without a usable id."""


class DocumentError(SlideEngineError, ValueError):
    """Raised when a slide document cannot be interpreted at all."""


class SlideRenderError(SlideEngineError):
    """Wraps a failure while rendering one slide of a batch.

    Attributes:
        index: 1-based position of the failing slide in the document.
        slide_type: Type tag of the failing slide.
    """

    def __init__(self, index: int, slide_type, cause: BaseException):
        self.index = index
        self.slide_type = slide_type
        super().__init__(f"Slide {index} ({slide_type}) render failed: {cause}")


class ThemeValidationError(SlideEngineError, ValueError):
    """Raised when a theme fails validation.

    All problems are collected so a theme author sees every issue at once.
    """

    def __init__(self, theme_id: str, issues: list[str]):
        self.theme_id = theme_id
        self.issues = list(issues)
        lines = [f"Theme '{theme_id}' is invalid:"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))
