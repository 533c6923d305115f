from __future__ import annotations

from pathlib import Path
from typing import List

from callout.core.grammar import GrammarParser
from callout.core.lexicon import ExerciseLexicon
from callout.exporters.markdown import commands_to_markdown, write_markdown


def test_markdown_contains_summary_and_table(
    parser: GrammarParser, lexicon: ExerciseLexicon, sample_transcripts: List[str]
) -> None:
    commands = [parser.parse(text) for text in sample_transcripts]
    output = commands_to_markdown(commands, confirm_below=0.75, lexicon=lexicon)

    assert output.startswith("# Parsed Transcripts\n")
    assert "_5 transcripts, 1 need confirmation_" in output
    assert "- **Set:** 1" in output
    assert "- **Unknown:** 1" in output
    assert "| # | Input | Command | Confidence | Action |" in output
    assert "| 1 | Bench 225 for 5 hard | bench 225 for 5 reps hard (Bench Press) | 100% | auto |" in output
    assert '| 5 | asdf qwer | unknown: "asdf qwer" | 0% | confirm |' in output
    assert "## Suggestions" not in output


def test_markdown_lists_suggestions(parser: GrammarParser) -> None:
    output = commands_to_markdown([parser.parse("bench 225")], confirm_below=0.75, title="Session")
    assert output.startswith("# Session\n")
    assert "## Suggestions" in output
    assert '- "bench 225": plus 225; 225 reps; log a set of bench' in output


def test_markdown_escapes_pipes(parser: GrammarParser) -> None:
    output = commands_to_markdown([parser.parse("same | again")], confirm_below=0.75)
    assert "same \\| again" in output


def test_write_markdown(tmp_path: Path) -> None:
    path = write_markdown(tmp_path / "reports" / "session.md", "# Parsed Transcripts\n")
    assert path.read_text() == "# Parsed Transcripts\n"
