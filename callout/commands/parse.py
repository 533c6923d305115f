"""Transcript parse/tokens commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from callout.commands.common import build_parser, get_state, print_json_payload
from callout.core.config import ConfigError, resolve_confirm_below, resolve_output_format
from callout.core.models import Command, Unknown
from callout.core.state import CLIState
from callout.core.tokenizer import tokenize
from callout.exporters.json_export import commands_payload, write_json
from callout.exporters.markdown import commands_to_markdown, write_markdown
from callout.utils.formatting import confidence_action, format_confidence
from callout.utils.parsing import load_transcripts


def _print_tokens(state: CLIState, transcript: str) -> None:
    rendered = " ".join(str(token) for token in tokenize(transcript))
    if state.plain_output:
        typer.echo(f"tokens\t{rendered}")
        return
    state.console.print(f"[dim]tokens:[/dim] {escape(rendered) or '(none)'}", highlight=False)


def _print_table(state: CLIState, commands: List[Command], confirm_below: float) -> None:
    table = Table(title=f"Parsed {len(commands)} transcript(s)")
    table.add_column("Input")
    table.add_column("Command")
    table.add_column("Confidence", justify="right")
    table.add_column("Action")

    for command in commands:
        action = confidence_action(command.confidence, confirm_below)
        style = "green" if action == "auto" else "yellow"
        table.add_row(
            escape(command.raw_input),
            escape(str(command)),
            format_confidence(command.confidence),
            f"[{style}]{action}[/{style}]",
        )
    state.console.print(table)

    for command in commands:
        if isinstance(command, Unknown) and command.possible_interpretations:
            options = "; ".join(command.possible_interpretations)
            state.console.print(f'Suggestions for "{escape(command.raw_input)}": {escape(options)}', highlight=False)


def parse_command(
    ctx: typer.Context,
    transcripts: Optional[List[str]] = typer.Argument(None, help="Transcript(s) to parse"),
    file: Optional[Path] = typer.Option(None, help="Text/JSON/YAML file with transcripts"),
    stdin: bool = typer.Option(False, "--stdin", help="Read transcripts from stdin"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: pretty|json|markdown"),
    output_file: Optional[Path] = typer.Option(None, "--output", help="Write result to file"),
    confirm_below: Optional[float] = typer.Option(
        None,
        help="Confidence below which commands need confirmation (default from config)",
    ),
) -> None:
    """Parse gym shorthand transcripts into commands."""
    state = get_state(ctx)

    try:
        threshold = resolve_confirm_below(state.config, explicit=confirm_below)
        fmt = resolve_output_format(state.config, explicit=output_format)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        loaded = load_transcripts(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except (ValueError, OSError) as exc:
        raise typer.BadParameter(f"Could not load transcripts: {exc}") from exc

    inputs = list(transcripts or []) + loaded
    if not inputs:
        raise typer.BadParameter("Provide transcript arguments, --file, or --stdin")

    parser = build_parser(state)
    commands = [parser.parse(text) for text in inputs]

    if state.json_output or fmt == "json":
        payload = commands_payload(commands, lexicon=parser.lexicon, confirm_below=threshold)
        if output_file:
            write_json(output_file, payload)
        print_json_payload(state, payload)
        return

    if fmt == "markdown":
        markdown = commands_to_markdown(commands, confirm_below=threshold, lexicon=parser.lexicon)
        if output_file:
            write_markdown(output_file, markdown)
        state.console.print(markdown, markup=False, highlight=False, soft_wrap=True)
        return

    if state.plain_output:
        for command in commands:
            action = confidence_action(command.confidence, threshold)
            typer.echo(f"{command.kind}\t{command.confidence:.2f}\t{action}\t{command}")
            if state.verbose:
                _print_tokens(state, command.raw_input)
        return

    if state.verbose:
        for command in commands:
            state.console.print(f"[bold]{escape(command.raw_input)}[/bold]", highlight=False)
            _print_tokens(state, command.raw_input)
    _print_table(state, commands, threshold)

    if output_file:
        payload = commands_payload(commands, lexicon=parser.lexicon, confirm_below=threshold)
        write_json(output_file, payload)
        state.console.print(f"Saved to: {output_file}")


def tokens_command(
    ctx: typer.Context,
    transcript: str = typer.Argument(..., help="Transcript to tokenize"),
) -> None:
    """Show the token stream for a transcript."""
    state = get_state(ctx)
    tokens = [str(token) for token in tokenize(transcript)]

    if state.json_output:
        print_json_payload(state, {"input": transcript, "tokens": tokens})
        return

    if state.plain_output:
        typer.echo("\t".join(tokens))
        return

    rendered = " ".join(tokens) if tokens else "(no tokens)"
    state.console.print(rendered, markup=False, highlight=False, soft_wrap=True)
