from __future__ import annotations

from pathlib import Path

import pytest

from slide_engine.config import Config, load_yaml_file, merge_dicts


def _write_config(config_dir: Path, body: str) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_merge_dicts_is_recursive_and_non_mutating() -> None:
    base = {"settings": {"template": "toss", "logging": {"level": "INFO"}}, "keep": 1}
    overlay = {"settings": {"logging": {"level": "DEBUG"}}, "extra": True}

    merged = merge_dicts(base, overlay)

    assert merged == {
        "settings": {"template": "toss", "logging": {"level": "DEBUG"}},
        "keep": 1,
        "extra": True,
    }
    assert base["settings"]["logging"]["level"] == "INFO"


def test_load_yaml_file(tmp_path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    assert load_yaml_file(empty) == {}
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        load_yaml_file(tmp_path / "missing.yaml")


def test_paths_resolve_against_project_root(tmp_path) -> None:
    config_path = _write_config(tmp_path / "configs", (
        "paths:\n"
        "  project_root: ..\n"
        "  document: content/deck.yaml\n"
        "  output: out/deck.html\n"
    ))

    config = Config(str(config_path))

    assert config.project_root == tmp_path.resolve()
    assert config.document_path == tmp_path.resolve() / "content" / "deck.yaml"
    assert config.output_path == tmp_path.resolve() / "out" / "deck.html"
    assert config.themes_path is None


def test_settings_defaults(tmp_path) -> None:
    config = Config(str(_write_config(tmp_path, "paths: {}\n")))

    assert config.template_id == "toss-default"
    assert config.aspect_ratio is None
    assert config.overwrite is True
    assert config.get("settings.logging.level", "INFO") == "INFO"


def test_get_path_unknown_key(tmp_path) -> None:
    config = Config(str(_write_config(tmp_path, "paths: {}\n")))

    with pytest.raises(ValueError, match="Path 'document' not found"):
        config.get_path("document")


def test_overrides_file_is_merged(tmp_path) -> None:
    (tmp_path / "local.yaml").write_text(
        "settings:\n"
        "  template: cyberpunk\n"
        "  aspect_ratio: '4:3'\n",
        encoding="utf-8",
    )
    config = Config(str(_write_config(tmp_path, (
        "paths:\n"
        "  project_root: .\n"
        "  overrides: local.yaml\n"
        "settings:\n"
        "  template: toss\n"
        "  output: {overwrite: false}\n"
    ))))

    assert config.template_id == "cyberpunk"
    assert config.aspect_ratio == "4:3"
    assert config.overwrite is False


def test_missing_overrides_file_is_ignored(tmp_path) -> None:
    config = Config(str(_write_config(tmp_path, (
        "paths:\n"
        "  overrides: nowhere.yaml\n"
        "settings:\n"
        "  template: mono\n"
    ))))
    assert config.template_id == "mono"


def test_validate_paths_lists_every_missing_file(tmp_path) -> None:
    config = Config(str(_write_config(tmp_path, (
        "paths:\n"
        "  project_root: .\n"
        "  document: nope.yaml\n"
        "  themes: themes.yaml\n"
    ))))

    with pytest.raises(FileNotFoundError) as excinfo:
        config.validate_paths()

    message = str(excinfo.value)
    assert "document:" in message
    assert "themes:" in message


def test_override_creates_nested_keys(tmp_path) -> None:
    config = Config(str(_write_config(tmp_path, "paths:\n  project_root: .\n")))

    config.override("settings.output.overwrite", False)
    config.override("paths.output", "deck.html")

    assert config.overwrite is False
    assert config.output_path == tmp_path.resolve() / "deck.html"


def test_from_dict_does_not_share_state(tmp_path) -> None:
    data = {"paths": {"project_root": "."}, "settings": {"template": "toss"}}

    config = Config.from_dict(data, tmp_path)
    config.override("settings.template", "claude")

    assert config.template_id == "claude"
    assert data["settings"]["template"] == "toss"
    assert config.project_root == tmp_path.resolve()
