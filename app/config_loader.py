"""Base configuration loading and project-relative path lookup for the app."""

from pathlib import Path
from typing import Any, Optional

from app.constants import CONFIG_DIR, PROJECT_ROOT

CONFIG_FILENAME = "config.yaml"


def load_base_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Load configs/config.yaml with the engine's YAML loader.

    Raises:
        FileNotFoundError: If the config file doesn't exist
    """
    from slide_engine.config import load_yaml_file

    return load_yaml_file(config_path or CONFIG_DIR / CONFIG_FILENAME)


def resolve_project_path(value: Optional[str]) -> Optional[Path]:
    """Resolve a configured path against the project root; None when unset."""
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def sample_document_path(base_config: dict[str, Any]) -> Optional[Path]:
    return resolve_project_path(base_config.get('paths', {}).get('document'))


def themes_file_path(base_config: dict[str, Any]) -> Optional[str]:
    """Extra themes file as a string (hashable for st.cache_resource), or None."""
    path = resolve_project_path(base_config.get('paths', {}).get('themes'))
    return str(path) if path else None
