"""Constants and configuration paths for the Streamlit app."""

from pathlib import Path

# === Directory Paths ===
APP_DIR = Path(__file__).parent
PROJECT_ROOT = APP_DIR.parent
CONFIG_DIR = PROJECT_ROOT / "configs"
SRC_DIR = PROJECT_ROOT / "src"

# File types for the document uploader (without dots)
DOCUMENT_FILE_TYPES: list[str] = ['json', 'yaml', 'yml']

# === Session State Keys ===
class SessionKeys:
    """Session state key constants to avoid magic strings."""
    BASE_CONFIG = 'base_config'
    HTML_BYTES = 'html_bytes'
    RENDERED_SLIDES = 'rendered_slides'
    OUTPUT_FILENAME = 'output_filename'
    LOG_LEVEL = 'log_level'
    CONTENT_SOURCE = 'content_source'
    TEMPLATE_ID = 'template_id'
    ASPECT_RATIO = 'aspect_ratio'
    PREVIEW_LIMIT = 'preview_limit'


# === UI Configuration Defaults ===
DEFAULT_PAGE_TITLE = 'Slide Engine'
DEFAULT_PAGE_LAYOUT = 'wide'
DEFAULT_OUTPUT_FILENAME = 'presentation.html'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_PREVIEW_LIMIT = 30
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
CONTENT_SOURCES = ["Sample deck", "Upload document"]
