"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any

import typer

from callout.core.grammar import GrammarParser
from callout.core.lexicon import ExerciseLexicon
from callout.core.state import CLIState


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def build_lexicon(state: CLIState) -> ExerciseLexicon:
    """Build the exercise lexicon from built-ins plus configured aliases.

    The lexicon is built once per invocation and kept on the state.
    """
    if state.lexicon is not None:
        return state.lexicon
    try:
        state.lexicon = ExerciseLexicon.from_config(state.config)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid alias in {state.config_path}: {exc}") from exc
    return state.lexicon


def build_parser(state: CLIState) -> GrammarParser:
    return GrammarParser(lexicon=build_lexicon(state))


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)
