"""Per-invocation state shared by the callout commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console

from callout.core.lexicon import ExerciseLexicon


@dataclass
class CLIState:
    """Output mode, loaded config and the lexicon built from it."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    lexicon: Optional[ExerciseLexicon] = None
