from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from callout.core.config import (
    ConfigError,
    _deep_merge,
    default_config_path,
    expand_path,
    load_config,
    resolve_confirm_below,
    resolve_output_format,
    save_config,
)


def test_deep_merge_nested_dicts() -> None:
    base = {"a": {"b": 1, "c": 2}, "x": 3}
    override = {"a": {"b": 9}, "y": 4}
    merged = _deep_merge(base, override)
    assert merged == {"a": {"b": 9, "c": 2}, "x": 3, "y": 4}
    assert base["a"]["b"] == 1


def test_expand_path_expands_home_and_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CALLOUT_TMP_PATH", str(tmp_path))
    expanded = expand_path("$CALLOUT_TMP_PATH/config.toml")
    assert expanded == (tmp_path / "config.toml").resolve()


def test_default_config_path_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    monkeypatch.setenv("CALLOUT_CONFIG_FILE", str(path))
    assert default_config_path() == path.resolve()


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg["parser"]["confirm_below"] == 0.75
    assert cfg["exercises"] == {"known": [], "aliases": {}}
    assert cfg["defaults"]["output_format"] == "pretty"


def test_load_config_from_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"parser": {"confirm_below": 0.9}, "exercises": {"aliases": {"dl": "Deadlift"}}}))
    cfg = load_config(path)
    assert cfg["parser"]["confirm_below"] == 0.9
    assert cfg["exercises"]["aliases"] == {"dl": "Deadlift"}
    assert cfg["exercises"]["known"] == []


def test_load_config_from_toml(write_temp_toml) -> None:
    path = write_temp_toml(
        "config.toml",
        """
[exercises]
known = ["Zercher Squat"]

[exercises.aliases]
"db bench" = "Dumbbell Bench Press"

[defaults]
output_format = "json"
""",
    )
    cfg = load_config(path)
    assert cfg["exercises"]["known"] == ["Zercher Squat"]
    assert cfg["exercises"]["aliases"]["db bench"] == "Dumbbell Bench Press"
    assert cfg["defaults"]["output_format"] == "json"


def test_load_config_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[parser\nconfirm_below = 3")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_non_table_root(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_bad_alias_table(write_temp_json) -> None:
    path = write_temp_json("config.json", {"exercises": {"aliases": ["dl"]}})
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_bad_known_list(write_temp_json) -> None:
    path = write_temp_json("config.json", {"exercises": {"known": "Deadlift"}})
    with pytest.raises(ConfigError):
        load_config(path)


def test_save_config_json(tmp_path: Path) -> None:
    payload: Dict[str, Any] = {"parser": {"confirm_below": 0.6}}
    path = save_config(payload, tmp_path / "config.json")
    assert path.exists()
    assert json.loads(path.read_text())["parser"]["confirm_below"] == 0.6


def test_save_config_toml_and_reload(tmp_path: Path) -> None:
    payload: Dict[str, Any] = {
        "parser": {"confirm_below": 0.8},
        "exercises": {
            "known": ["Zercher Squat", "Sled Push"],
            "aliases": {"db bench": "Dumbbell Bench Press", "dl": 'The "Deadlift"'},
        },
    }
    path = save_config(payload, tmp_path / "nested" / "config.toml")
    assert path.exists()
    cfg = load_config(path)
    assert cfg["parser"]["confirm_below"] == 0.8
    assert cfg["exercises"]["known"] == ["Zercher Squat", "Sled Push"]
    assert cfg["exercises"]["aliases"] == {"db bench": "Dumbbell Bench Press", "dl": 'The "Deadlift"'}


def test_resolve_confirm_below_prefers_explicit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALLOUT_CONFIRM_BELOW", "0.2")
    assert resolve_confirm_below({"parser": {"confirm_below": 0.9}}, explicit=0.5) == 0.5


def test_resolve_confirm_below_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALLOUT_CONFIRM_BELOW", "0.2")
    assert resolve_confirm_below({"parser": {"confirm_below": 0.9}}) == 0.2


def test_resolve_confirm_below_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CALLOUT_CONFIRM_BELOW", raising=False)
    assert resolve_confirm_below({"parser": {"confirm_below": 0.9}}) == 0.9
    assert resolve_confirm_below({}) == 0.75


@pytest.mark.parametrize("value", [1.5, -0.1, "high"])
def test_resolve_confirm_below_rejects_invalid(monkeypatch: pytest.MonkeyPatch, value: Any) -> None:
    monkeypatch.delenv("CALLOUT_CONFIRM_BELOW", raising=False)
    with pytest.raises(ConfigError):
        resolve_confirm_below({"parser": {"confirm_below": value}})


def test_resolve_output_format() -> None:
    assert resolve_output_format({}) == "pretty"
    assert resolve_output_format({"defaults": {"output_format": "markdown"}}) == "markdown"
    assert resolve_output_format({"defaults": {"output_format": "markdown"}}, explicit="json") == "json"
    with pytest.raises(ConfigError):
        resolve_output_format({}, explicit="csv")


@pytest.mark.parametrize("section", ["parser", "exercises", "defaults"])
def test_load_config_rejects_non_table_sections(write_temp_toml, section: str) -> None:
    path = write_temp_toml("config.toml", f'{section} = "bench"')
    with pytest.raises(ConfigError, match=section):
        load_config(path)


def test_save_config_escapes_control_characters(tmp_path: Path) -> None:
    aliases = {"dl": "Dead\nlift", "tab\tkey": "Row\r\x01\x7f", "quote": 'C:\\"x"'}
    path = save_config({"exercises": {"known": [], "aliases": aliases}}, tmp_path / "config.toml")
    assert load_config(path)["exercises"]["aliases"] == aliases
