"""Deck rendering service."""

import copy
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import streamlit as st

from app.constants import CONFIG_DIR
from app.state import get_base_config, get_log_level, store_render_result


@dataclass
class GenerationResult:
    """Result of a deck rendering attempt."""
    success: bool
    html_bytes: bytes | None = None
    slides: list = field(default_factory=list)
    error_message: str | None = None
    exception: Exception | None = None


@st.cache_resource
def get_template_choices(themes_path: str | None = None) -> list[tuple[str, str]]:
    """(id, label) pairs for every registered template."""
    from slide_engine.engine import build_default_engine

    engine = build_default_engine(themes_path)
    choices = []
    for template in engine.available_templates():
        label = template.name
        if template.is_premium:
            label += f" (premium, {template.price})"
        choices.append((template.id, label))
    return choices


def _build_merged_config(
    document_path: str | None,
    template_id: str,
    aspect_ratio: str,
) -> dict[str, Any]:
    """Build the configuration for one rendering run.

    Args:
        document_path: Path to an uploaded document (None keeps the default)
        template_id: Selected template id
        aspect_ratio: Selected aspect ratio

    Returns:
        Merged configuration dictionary
    """
    merged_config = copy.deepcopy(get_base_config())
    merged_config.setdefault('paths', {})
    merged_config.setdefault('settings', {})

    if document_path:
        merged_config['paths']['document'] = document_path

    merged_config['settings']['template'] = template_id
    merged_config['settings']['aspect_ratio'] = aspect_ratio
    merged_config['settings'].setdefault('logging', {})['level'] = get_log_level()
    return merged_config


def render_deck(
    template_id: str,
    aspect_ratio: str,
    output_filename: str,
    uploaded_document_path: str | None = None,
) -> GenerationResult:
    """Render a document into a bundled HTML deck.

    Args:
        template_id: Template id to render with
        aspect_ratio: Canvas aspect ratio
        output_filename: Download file name
        uploaded_document_path: Path to an uploaded document (if any)

    Returns:
        GenerationResult with success status and data
    """
    # Import here to avoid import issues before path setup
    from slide_engine.config import Config
    from slide_engine.generator import DeckGenerator
    from slide_engine.models import load_document

    try:
        merged_config = _build_merged_config(uploaded_document_path, template_id, aspect_ratio)

        cfg = Config.from_dict(merged_config, CONFIG_DIR)
        cfg.validate_paths()
        generator = DeckGenerator(cfg)
        result = generator.render(load_document(cfg.document_path))

        html_bytes = result.html.encode('utf-8')
        store_render_result(html_bytes, result.slides, output_filename)

        return GenerationResult(
            success=True,
            html_bytes=html_bytes,
            slides=result.slides,
        )

    except FileNotFoundError as e:
        return GenerationResult(
            success=False,
            error_message=f"File not found: {e}",
            exception=e,
        )
    except Exception as e:
        return GenerationResult(
            success=False,
            error_message=f"Rendering failed: {e}",
            exception=e,
        )


def write_uploaded_document(content: bytes, suffix: str) -> str:
    """Persist an uploaded document so load_document can pick its parser by suffix.

    Returns:
        Path of the temporary copy (caller removes it with cleanup_temp_file)
    """
    with tempfile.NamedTemporaryFile(mode='wb', suffix=suffix, delete=False) as handle:
        handle.write(content)
    return handle.name


def cleanup_temp_file(path: str | None) -> None:
    if path:
        Path(path).unlink(missing_ok=True)
