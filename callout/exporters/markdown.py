"""Markdown report of parsed transcripts."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence

from callout.core.lexicon import ExerciseLexicon
from callout.core.models import Command, ExerciseChange, LogSet, Unknown
from callout.utils.formatting import confidence_action, format_confidence

KIND_LABELS = {
    "log_set": "Set",
    "same_again": "Same again",
    "weight_delta": "Weight change",
    "rep_change": "Rep change",
    "exercise_change": "Exercise change",
    "modifier": "Modifier",
    "unknown": "Unknown",
}


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ").strip()


def _describe(command: Command, lexicon: Optional[ExerciseLexicon]) -> str:
    description = str(command)
    exercise = command.exercise if isinstance(command, (LogSet, ExerciseChange)) else None
    if lexicon is not None and exercise:
        canonical = lexicon.canonical_name(exercise)
        if canonical:
            description = f"{description} ({canonical})"
    return description


def commands_to_markdown(
    commands: Sequence[Command],
    confirm_below: float,
    lexicon: Optional[ExerciseLexicon] = None,
    title: str = "Parsed Transcripts",
) -> str:
    """Render a batch of parsed commands as a markdown table."""
    counts = Counter(command.kind for command in commands)
    needs_confirm = sum(1 for command in commands if command.confidence < confirm_below)

    lines: List[str] = [f"# {title}", "", f"_{len(commands)} transcripts, {needs_confirm} need confirmation_", ""]
    for kind, count in sorted(counts.items()):
        lines.append(f"- **{KIND_LABELS.get(kind, kind)}:** {count}")
    lines.append("")

    lines.append("| # | Input | Command | Confidence | Action |")
    lines.append("|---|-------|---------|------------|--------|")
    for idx, command in enumerate(commands, 1):
        lines.append(
            f"| {idx} | {_cell(command.raw_input)} | {_cell(_describe(command, lexicon))} "
            f"| {format_confidence(command.confidence)} | {confidence_action(command.confidence, confirm_below)} |"
        )

    unknown = [command for command in commands if isinstance(command, Unknown) and command.possible_interpretations]
    if unknown:
        lines.extend(["", "## Suggestions", ""])
        for command in unknown:
            options = "; ".join(command.possible_interpretations)
            lines.append(f"- \"{_cell(command.raw_input)}\": {options}")

    lines.append("")
    return "\n".join(lines)


def write_markdown(path: Path, markdown: str) -> Path:
    """Write a markdown report and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown)
    return path
