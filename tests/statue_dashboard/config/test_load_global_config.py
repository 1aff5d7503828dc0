from __future__ import annotations

import json
from pathlib import Path

import pytest

from statue_dashboard.config.loader import load_global_config
from statue_dashboard.config.model import GlobalConfig
from statue_dashboard.core.exceptions import ConfigError


def _write_global(root: Path, payload) -> None:
    (root / "global.json").write_text(
        payload if isinstance(payload, str) else json.dumps(payload),
        encoding="utf-8",
    )


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_global_config(tmp_path)
    assert cfg == GlobalConfig()
    assert cfg.export_prefix == "statue_rebuild_data"


def test_values_override_defaults(tmp_path: Path):
    _write_global(tmp_path, {"ui_title": "  Liberty  ", "export_prefix": "liberty"})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Liberty"
    assert cfg.export_prefix == "liberty"
    assert cfg.subtitle == GlobalConfig().subtitle


def test_unknown_keys_are_ignored(tmp_path: Path, caplog):
    _write_global(tmp_path, {"ui_title": "X", "theme": "dark"})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "X"
    assert "theme" in caplog.text


def test_invalid_json_raises_config_error(tmp_path: Path):
    _write_global(tmp_path, "{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_non_object_raises_config_error(tmp_path: Path):
    _write_global(tmp_path, ["a", "b"])
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize("value", [3, "", None])
def test_bad_value_raises_config_error(tmp_path: Path, value):
    _write_global(tmp_path, {"ui_title": value})
    with pytest.raises(ConfigError, match="ui_title"):
        load_global_config(tmp_path)


def test_repository_config_is_valid():
    root = Path(__file__).resolve().parents[3] / "config"
    cfg = load_global_config(root)
    assert cfg.dataset_name == "Statue of Liberty"
