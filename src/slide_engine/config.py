"""Configuration for the slide engine CLI and app.

Settings come from one YAML file, optionally layered with a local overrides
file. Paths in the ``paths`` section are resolved against ``project_root``,
which is itself relative to the config file's directory.
"""

import copy
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from .template import DEFAULT_TEMPLATE_ID

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Read a YAML mapping; an empty file yields an empty dict."""
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge overlay into a copy of base. Nested mappings merge, other values replace."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


class Config:
    """Deck rendering configuration.

    Layout of the main file:

        paths:
          project_root: ..
          document: content/sample_deck.yaml
          output: output/deck.html
          themes: themes/custom.yaml     # optional extra themes
          overrides: configs/local.yaml  # optional, merged over this file
        settings:
          template: toss
          aspect_ratio: "16:9"
          output:
            overwrite: true
          logging:
            level: INFO
    """

    def __init__(self, config_path: str = 'configs/config.yaml'):
        """Load the config file (and its overrides file, when one is configured).

        Args:
            config_path: Main YAML file.

        Raises:
            FileNotFoundError: If the main file is missing.
        """
        self.config_path = Path(config_path)
        self._init_from(load_yaml_file(self.config_path), self.config_path.parent)

    @classmethod
    def from_dict(cls, main_config: Dict[str, Any], config_dir: Path) -> "Config":
        """Build a Config from an already loaded mapping (used by the Streamlit app).

        The mapping is deep-copied, so later overrides never leak back into
        the caller's dict.

        Args:
            main_config: Parsed main configuration.
            config_dir: Directory that ``paths.project_root`` is relative to.
        """
        config = cls.__new__(cls)
        config.config_path = Path(config_dir) / "config.yaml"  # not read from disk
        config._init_from(main_config, Path(config_dir))
        return config

    def _init_from(self, main_config: Dict[str, Any], config_dir: Path) -> None:
        root = (main_config.get('paths') or {}).get('project_root')
        self.project_root = (config_dir / root).resolve() if root else Path.cwd()

        self._config = self._load_configuration(main_config)
        self._paths = self._config.get('paths') or {}
        self._setup_logging()

    def resolve_path(self, value: str) -> Path:
        """Absolute path for a config value; relative values hang off project_root."""
        if not value:
            return Path()
        path = Path(value)
        return path.resolve() if path.is_absolute() else self.project_root / path

    def _load_configuration(self, main_config: Dict[str, Any]) -> Dict[str, Any]:
        merged = copy.deepcopy(main_config)
        overrides_value = (merged.get('paths') or {}).get('overrides')
        if overrides_value:
            overrides_path = self.resolve_path(overrides_value)
            if overrides_path.exists():
                merged = merge_dicts(merged, load_yaml_file(overrides_path))
                logging.debug(f"Applied config overrides from: {overrides_path}")
            else:
                logging.debug(f"Config overrides file not present, skipping: {overrides_path}")

        logging.debug(f"Loaded slide engine config from: {self.config_path}")
        return merged

    def _setup_logging(self):
        """Configure root logging from settings.logging.level."""
        level_name = str(self.get('settings.logging.level', 'INFO')).upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.INFO),
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a value by dotted path, e.g. get('settings.output.overwrite').

        Returns ``default`` as soon as any segment is missing.
        """
        node = self._config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def get_path(self, key: str) -> Path:
        """Resolved path for a key of the ``paths`` section.

        Raises:
            ValueError: If the key is not configured.
        """
        value = self._paths.get(key)
        if value is None:
            raise ValueError(f"Path '{key}' not found in configuration")
        return self.resolve_path(value)

    def validate_paths(self):
        """Check that the slide document (and extra themes file, if any) exist.

        Raises:
            FileNotFoundError: Listing every missing input.
        """
        problems = []
        try:
            document = self.document_path
            if not document.exists():
                problems.append(f"document: {document}")
        except ValueError:
            problems.append("document: not configured")

        themes = self.themes_path
        if themes is not None and not themes.exists():
            problems.append(f"themes: {themes}")

        if problems:
            raise FileNotFoundError(
                "Required files not found:\n" + "\n".join(f"  - {p}" for p in problems)
            )

    @property
    def document_path(self) -> Path:
        """Slide document (JSON or YAML)."""
        return self.get_path('document')

    @property
    def output_path(self) -> Path:
        """Where the bundled HTML deck is written."""
        return self.get_path('output')

    @property
    def themes_path(self) -> Optional[Path]:
        """Extra themes file, or None when not configured."""
        if not self._paths.get('themes'):
            return None
        return self.get_path('themes')

    @property
    def template_id(self) -> str:
        return str(self.get('settings.template', DEFAULT_TEMPLATE_ID))

    @property
    def aspect_ratio(self) -> Optional[str]:
        """Forced aspect ratio, or None to keep each document's own."""
        value = self.get('settings.aspect_ratio')
        return str(value) if value else None

    @property
    def overwrite(self) -> bool:
        return bool(self.get('settings.output.overwrite', True))

    def override(self, key_path: str, value: Any) -> None:
        """Set a value by dotted path (used for CLI flags), creating sections as needed."""
        *parents, leaf = key_path.split('.')
        node = self._config
        for key in parents:
            if not isinstance(node.get(key), dict):
                node[key] = {}
            node = node[key]
        node[leaf] = value
        self._paths = self._config.get('paths') or {}
