"""Design themes: token bundles that templates are built from.

Themes are plain data. The built-in set lives in ``data/themes.yaml``; callers
may load additional theme files with the same structure and pass the result
to the engine.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import yaml

from .errors import ThemeValidationError

logger = logging.getLogger(__name__)

BUILTIN_THEMES_PATH = Path(__file__).parent / "data" / "themes.yaml"

THEME_TONES = ("professional", "modern", "playful", "minimal", "bold")
TEMPLATE_CATEGORIES = ("free", "premium")

# component -> field -> (token group, scale name) that the field must name a key of
COMPONENT_REFERENCES: dict[str, dict[str, tuple[str, str]]] = {
    "button": {
        "radius": ("radius", ""),
        "shadow": ("shadows", ""),
        "font_size": ("typography", "font_size"),
    },
    "card": {
        "radius": ("radius", ""),
        "shadow": ("shadows", ""),
        "padding": ("spacing", ""),
    },
    "input": {
        "radius": ("radius", ""),
        "font_size": ("typography", "font_size"),
    },
}


@dataclass(frozen=True)
class Theme:
    """An immutable design-token bundle.

    Attributes:
        id: Registry key for the template built from this theme.
        template_id: Rendering-style alias; may differ from id.
        name: Display name.
        description: One-line description for template listings.
        tone: Overall tone, one of THEME_TONES.
        colors: Color palette keyed by semantic name.
        typography: font_family, font_size, font_weight, line_height and
            letter_spacing scales.
        spacing: Spacing scale (xs..3xl).
        radius: Radius scale (none..full).
        shadows: Shadow scale (none..inner).
        components: button/card/input defaults naming scale keys.
        category: 'free' or 'premium'.
        price: Price for premium templates, 0 for free ones.
    """
    id: str
    name: str
    template_id: str = ""
    description: str = ""
    tone: str = "professional"
    colors: dict[str, str] = field(default_factory=dict)
    typography: dict[str, dict[str, Any]] = field(default_factory=dict)
    spacing: dict[str, str] = field(default_factory=dict)
    radius: dict[str, str] = field(default_factory=dict)
    shadows: dict[str, str] = field(default_factory=dict)
    components: dict[str, dict[str, str]] = field(default_factory=dict)
    category: str = "free"
    price: int = 0

    def scale(self, group: str, name: str = "") -> dict[str, Any]:
        """Return a token scale, e.g. scale('typography', 'font_size')."""
        tokens = getattr(self, group, {}) or {}
        if name:
            tokens = tokens.get(name, {}) or {}
        return tokens


def _mapping(value: Any) -> dict:
    return dict(value) if isinstance(value, dict) else {}


def theme_from_dict(data: dict[str, Any]) -> Theme:
    """Build a Theme from a parsed YAML/JSON mapping.

    Keys are normalized to strings so numeric-looking YAML keys still work.
    """
    def str_keys(mapping: Any) -> dict:
        return {str(k): v for k, v in _mapping(mapping).items()}

    typography = {str(k): str_keys(v) for k, v in _mapping(data.get("typography")).items()}
    components = {str(k): str_keys(v) for k, v in _mapping(data.get("components")).items()}
    theme_id = str(data.get("id", "")).strip()

    return Theme(
        id=theme_id,
        name=str(data.get("name") or theme_id),
        template_id=str(data.get("template_id") or theme_id),
        description=str(data.get("description", "")),
        tone=str(data.get("tone", "professional")),
        colors=str_keys(data.get("colors")),
        typography=typography,
        spacing=str_keys(data.get("spacing")),
        radius=str_keys(data.get("radius")),
        shadows=str_keys(data.get("shadows")),
        components=components,
        category=str(data.get("category", "free")),
        price=int(data.get("price", 0) or 0),
    )


def find_theme_issues(theme: Theme) -> list[str]:
    """Collect every validation problem of a theme.

    Returns:
        List of human-readable issues; empty when the theme is valid.
    """
    issues: list[str] = []

    if not theme.id:
        issues.append("id must be a non-empty string")
    if theme.category not in TEMPLATE_CATEGORIES:
        issues.append(
            f"category '{theme.category}' must be one of: {', '.join(TEMPLATE_CATEGORIES)}"
        )

    for component, fields in COMPONENT_REFERENCES.items():
        defaults = theme.components.get(component, {})
        for field_name, (group, name) in fields.items():
            if field_name not in defaults:
                continue
            ref = str(defaults[field_name])
            scale = theme.scale(group, name)
            if ref not in scale:
                scale_label = f"{group}.{name}" if name else group
                issues.append(
                    f"components.{component}.{field_name} references '{ref}', "
                    f"which is not a key of {scale_label}"
                )

    return issues


def validate_theme(theme: Theme) -> None:
    """Validate a theme.

    Raises:
        ThemeValidationError: If any component default does not resolve or
            the theme has no id. The error lists every issue found.
    """
    issues = find_theme_issues(theme)
    if issues:
        raise ThemeValidationError(theme.id or "<unnamed>", issues)


def load_themes(path: Optional[Union[str, Path]] = None) -> list[Theme]:
    """Load and validate themes from a YAML file.

    Args:
        path: Theme file with a top-level ``themes`` list. Defaults to the
            built-in theme file shipped with the package.

    Returns:
        Themes in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ThemeValidationError: If any theme is invalid.
    """
    theme_path = Path(path) if path else BUILTIN_THEMES_PATH
    if not theme_path.exists():
        raise FileNotFoundError(f"Theme file not found: {theme_path}")

    with open(theme_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    themes = []
    for entry in data.get("themes", []) or []:
        theme = theme_from_dict(_mapping(entry))
        validate_theme(theme)
        themes.append(theme)

    logger.debug(f"Loaded {len(themes)} themes from {theme_path}")
    return themes


def get_theme(themes: Iterable[Theme], theme_id: str) -> Theme | None:
    """Find a theme by id, or None."""
    for theme in themes:
        if theme.id == theme_id:
            return theme
    return None
