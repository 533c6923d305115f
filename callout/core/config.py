"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from callout.core.constants import DEFAULT_CONFIRM_BELOW

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")
OUTPUT_FORMATS = ("pretty", "json", "markdown")


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("CALLOUT_CONFIG_FILE", "~/.config/callout/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "parser": {
            "confirm_below": DEFAULT_CONFIRM_BELOW,
        },
        "exercises": {
            "known": [],
            "aliases": {},
        },
        "defaults": {
            "output_format": "pretty",
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        loaded = _read_config(cfg_path)
        cfg = _deep_merge(cfg, loaded)

    for section in ("parser", "exercises", "defaults"):
        if not isinstance(cfg.get(section), dict):
            raise ConfigError(f"[{section}] in {cfg_path} must be a table")

    aliases = cfg["exercises"].get("aliases")
    if not isinstance(aliases, dict):
        raise ConfigError(f"[exercises.aliases] in {cfg_path} must be a table of alias = \"Exercise\"")
    known = cfg["exercises"].get("known")
    if not isinstance(known, list):
        raise ConfigError(f"exercises.known in {cfg_path} must be a list of exercise names")

    return cfg


_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _toml_escape(value: str) -> str:
    """Escape a basic TOML string; other control characters become ``\\uXXXX``."""
    parts = []
    for char in value:
        if char in _TOML_ESCAPES:
            parts.append(_TOML_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\u{ord(char):04X}")
        else:
            parts.append(char)
    return "".join(parts)


def _toml_key(key: str) -> str:
    if _BARE_KEY.match(key):
        return key
    return _toml_literal(key)


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return f'"{_toml_escape(value)}"'
    if isinstance(value, list):
        items = ", ".join(_toml_literal(item) for item in value if item is not None)
        return f"[{items}]"
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{_toml_key(key)} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = _toml_key(key) if prefix is None else f"{prefix}.{_toml_key(key)}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n")
    return cfg_path


def resolve_confirm_below(config: Dict[str, Any], explicit: Optional[float] = None) -> float:
    """Resolve the auto-apply confidence threshold, CLI override first."""
    raw: Any = explicit
    if raw is None:
        raw = os.getenv("CALLOUT_CONFIRM_BELOW") or config.get("parser", {}).get(
            "confirm_below",
            DEFAULT_CONFIRM_BELOW,
        )
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"confirm_below must be a number, got {raw!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"confirm_below must be between 0 and 1, got {value}")
    return value


def resolve_output_format(config: Dict[str, Any], explicit: Optional[str] = None) -> str:
    """Resolve the parse output format, CLI override first."""
    value = explicit or config.get("defaults", {}).get("output_format") or "pretty"
    if value not in OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {'|'.join(OUTPUT_FORMATS)}, got {value!r}")
    return value
