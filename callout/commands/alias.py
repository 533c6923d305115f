"""Exercise alias commands."""

from __future__ import annotations

from typing import Any, Dict

import typer
from rich.table import Table

from callout.commands.common import build_lexicon, get_state, print_json_payload
from callout.core.config import save_config
from callout.core.constants import DEFAULT_ALIASES
from callout.core.lexicon import normalize_name
from callout.core.state import CLIState

app = typer.Typer(help="Manage exercise aliases")


def _configured_aliases(state: CLIState) -> Dict[str, Any]:
    exercises = state.config.setdefault("exercises", {})
    aliases = exercises.setdefault("aliases", {})
    return aliases


@app.command("list")
def list_command(
    ctx: typer.Context,
    custom: bool = typer.Option(False, "--custom", help="Only show aliases from the config file"),
) -> None:
    """List exercise aliases and their canonical names."""
    state = get_state(ctx)
    lexicon = build_lexicon(state)
    configured = {normalize_name(str(alias)) for alias in _configured_aliases(state)}

    rows = []
    for alias, canonical in sorted(lexicon.aliases.items()):
        source = "config" if alias in configured else "built-in"
        if custom and source != "config":
            continue
        rows.append({"alias": alias, "exercise": canonical, "source": source})

    if state.json_output:
        print_json_payload(state, {"aliases": rows})
        return

    if state.plain_output:
        for row in rows:
            typer.echo(f"{row['alias']}\t{row['exercise']}\t{row['source']}")
        return

    table = Table(title=f"{len(rows)} alias(es)")
    table.add_column("Alias")
    table.add_column("Exercise")
    table.add_column("Source")
    for row in rows:
        table.add_row(row["alias"], row["exercise"], row["source"])
    state.console.print(table)


@app.command("add")
def add_command(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Spoken shorthand, e.g. 'dl'"),
    exercise: str = typer.Argument(..., help="Canonical exercise name, e.g. 'Deadlift'"),
) -> None:
    """Teach an alias and save it to the config file."""
    state = get_state(ctx)
    lexicon = build_lexicon(state)
    try:
        lexicon.teach_alias(alias, exercise)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    key = normalize_name(alias)
    _configured_aliases(state)[key] = exercise.strip()
    path = save_config(state.config, state.config_path)

    payload = {"status": "saved", "alias": key, "exercise": exercise.strip(), "config": str(path)}
    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("status\tsaved")
        typer.echo(f"alias\t{key}")
        typer.echo(f"exercise\t{exercise.strip()}")
        return

    state.console.print(f"Saved alias '{key}' -> {exercise.strip()} ({path})")


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Alias to remove from the config file"),
) -> None:
    """Forget an alias stored in the config file."""
    state = get_state(ctx)
    key = normalize_name(alias)
    configured = _configured_aliases(state)

    matching = [name for name in configured if normalize_name(str(name)) == key]
    for name in matching:
        del configured[name]

    if matching:
        save_config(state.config, state.config_path)
        message = f"Removed alias '{key}'"
        if key in DEFAULT_ALIASES:
            message += " (built-in alias still applies)"
    else:
        message = f"Alias '{key}' is not in the config file"

    if state.json_output:
        print_json_payload(state, {"status": "removed" if matching else "missing", "alias": key})
        return

    if state.plain_output:
        typer.echo(f"status\t{'removed' if matching else 'missing'}")
        typer.echo(f"alias\t{key}")
        return

    state.console.print(message)
