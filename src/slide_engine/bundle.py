"""Export rendered slides as standalone HTML documents."""

import logging
import re
from typing import Optional, Sequence

from .aspect_ratio import DEFAULT_ASPECT_RATIO, canvas_size, is_portrait
from .markup import escape
from .models import HTMLSlide

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "presentation"
MAX_FILENAME_LENGTH = 100

_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")

_PAGE_CSS = """\
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
  background: #f5f5f5;
  overflow-x: hidden;
}

.container {
  max-width: %(width)dpx;
  margin: 0 auto;
  padding: 40px 20px;
}

h1.deck-title {
  text-align: center;
  margin-bottom: 40px;
  font-size: 32px;
  color: #333;
}

.slide-wrapper {
  width: %(width)dpx;
  height: %(height)dpx;
  margin: 0 auto 40px;
  background: white;
  border-radius: 8px;
  box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
  overflow: hidden;
  page-break-inside: avoid;
}

@page {
  size: %(page_size)s;
  margin: 0;
}

@media print {
  body {
    background: white;
  }

  .container {
    padding: 0;
  }

  h1.deck-title {
    display: none;
  }

  .slide-wrapper {
    page-break-after: always;
    page-break-inside: avoid;
    margin: 0;
    border-radius: 0;
    box-shadow: none;
  }

  .slide-wrapper:last-child {
    page-break-after: auto;
  }
}
"""

_NAVIGATION_JS = """\
let currentSlide = 0;
const slides = document.querySelectorAll('.slide-wrapper');
document.addEventListener('keydown', (e) => {
  if (e.key === 'ArrowDown' || e.key === 'ArrowRight') {
    if (currentSlide < slides.length - 1) {
      currentSlide++;
      slides[currentSlide].scrollIntoView({ behavior: 'smooth', block: 'center' });
    }
  } else if (e.key === 'ArrowUp' || e.key === 'ArrowLeft') {
    if (currentSlide > 0) {
      currentSlide--;
      slides[currentSlide].scrollIntoView({ behavior: 'smooth', block: 'center' });
    }
  }
});
"""


def sanitize_filename(name: Optional[str]) -> str:
    """Make a document title safe to use as a file name stem.

    Removes characters Windows rejects, turns whitespace runs into
    underscores and truncates to 100 characters.
    """
    cleaned = _UNSAFE_FILENAME_CHARS.sub("", name or "").strip()
    cleaned = _WHITESPACE.sub("_", cleaned)[:MAX_FILENAME_LENGTH]
    return cleaned or DEFAULT_FILENAME


def build_full_html(
    slides: Sequence[HTMLSlide],
    title: Optional[str] = None,
    aspect_ratio: str = DEFAULT_ASPECT_RATIO,
) -> str:
    """Combine rendered slides into one printable HTML document.

    The first slide's CSS is used as the global stylesheet; all slides of a
    batch share the same theme variables.

    Args:
        slides: Rendered slides in order.
        title: Document title (escaped). Defaults to 'Presentation'.
        aspect_ratio: Canvas ratio used to size each slide wrapper.

    Returns:
        Complete HTML document text.

    Raises:
        UnsupportedAspectRatio: If aspect_ratio is unknown.
    """
    width, height = canvas_size(aspect_ratio)
    page_size = "A4 portrait" if is_portrait(aspect_ratio) else f"{width}px {height}px"
    safe_title = escape(title or "Presentation")

    global_css = slides[0].css if slides and slides[0].css else ""
    slide_blocks = "\n".join(
        f'    <div class="slide-wrapper" id="slide-{idx}">\n      {slide.html}\n    </div>'
        for idx, slide in enumerate(slides, start=1)
    )
    page_css = _PAGE_CSS % {"width": width, "height": height, "page_size": page_size}

    logger.debug(f"Bundling {len(slides)} slides ({aspect_ratio}) into one document")
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <title>{safe_title}</title>",
    ]
    if global_css:
        parts.append(f"  <style>\n{global_css}\n  </style>")
    parts.extend([
        f"  <style>\n{page_css}  </style>",
        "</head>",
        "<body>",
        '  <div class="container">',
        f'    <h1 class="deck-title">{safe_title}</h1>',
        slide_blocks,
        "  </div>",
        f"  <script>\n{_NAVIGATION_JS}  </script>",
        "</body>",
        "</html>",
    ])
    return "\n".join(parts) + "\n"


def build_slide_preview(slide: HTMLSlide) -> str:
    """Minimal standalone document for previewing a single slide (e.g. in an iframe)."""
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"UTF-8\">\n"
        f"<style>\n{slide.css}\nhtml, body {{ margin: 0; padding: 0; "
        "width: var(--slide-width); height: var(--slide-height); }\n</style>\n"
        f"</head>\n<body>\n{slide.html}\n</body>\n</html>\n"
    )
