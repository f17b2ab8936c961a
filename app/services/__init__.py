"""Service modules for business logic."""

from app.services.generation_service import (
    GenerationResult,
    get_template_choices,
    render_deck,
)

__all__ = [
    'GenerationResult',
    'get_template_choices',
    'render_deck',
]
