"""Helpers for loading transcript batches from files or stdin."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

_STRUCTURED_SUFFIXES = {".json", ".yaml", ".yml"}


def _coerce_transcripts(raw_data: Any, source: str) -> List[str]:
    if isinstance(raw_data, dict):
        raw_data = raw_data.get("transcripts")
    if not isinstance(raw_data, list):
        raise ValueError(f"{source} must contain a list of transcripts or a 'transcripts' list")
    return [str(item) for item in raw_data if item is not None]


def _split_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_transcripts(
    file_path: Optional[Path],
    read_stdin: bool,
    stdin_text: str = "",
) -> List[str]:
    """Load transcripts from a text/JSON/YAML file or stdin text.

    Plain text holds one transcript per line. JSON and YAML hold either a
    list of strings or an object with a ``transcripts`` list.
    """
    if file_path:
        text = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            return _coerce_transcripts(json.loads(text), str(file_path))
        if suffix in _STRUCTURED_SUFFIXES:
            return _coerce_transcripts(yaml.safe_load(text), str(file_path))
        return _split_lines(text)

    if read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        if text[0] in "[{":
            try:
                return _coerce_transcripts(json.loads(text), "stdin")
            except json.JSONDecodeError:
                pass
        return _split_lines(text)

    return []
