from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import pytest
from typer.testing import CliRunner

from callout.core.grammar import GrammarParser
from callout.core.lexicon import ExerciseLexicon


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def lexicon() -> ExerciseLexicon:
    return ExerciseLexicon()


@pytest.fixture()
def parser(lexicon: ExerciseLexicon) -> GrammarParser:
    return GrammarParser(lexicon=lexicon)


@pytest.fixture()
def sample_transcripts() -> List[str]:
    return [
        "Bench 225 for 5 hard",
        "same again",
        "plus 5",
        "failed at 4",
        "asdf qwer",
    ]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.toml"
