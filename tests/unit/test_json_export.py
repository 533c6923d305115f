from __future__ import annotations

import json
from pathlib import Path
from typing import List

from callout.core.grammar import GrammarParser
from callout.core.lexicon import ExerciseLexicon
from callout.exporters.json_export import command_to_dict, commands_payload, write_json


def test_log_set_dict(parser: GrammarParser, lexicon: ExerciseLexicon) -> None:
    payload = command_to_dict(parser.parse("bench 225 lbs for 5 failed at 4 rpe 9"), lexicon=lexicon)
    assert payload == {
        "kind": "log_set",
        "input": "bench 225 lbs for 5 failed at 4 rpe 9",
        "confidence": 1.0,
        "description": "bench 225 lbs for 5 reps failed at rep 4 RPE 9",
        "exercise": "bench",
        "weight": {"value": 225.0, "unit": "lbs"},
        "reps": 5,
        "modifiers": [{"type": "failed", "at_rep": 4}, {"type": "rpe", "value": 9.0}],
        "canonical_exercise": "Bench Press",
    }


def test_canonical_exercise_requires_lexicon(parser: GrammarParser) -> None:
    payload = command_to_dict(parser.parse("bench 225 for 5"))
    assert "canonical_exercise" not in payload


def test_variant_fields(parser: GrammarParser) -> None:
    delta = command_to_dict(parser.parse("minus 10 kg"))
    assert delta["direction"] == "subtract"
    assert delta["delta"] == {"value": 10.0, "unit": "kg"}

    pain = command_to_dict(parser.parse("knee pain"))
    assert pain["modifier"] == {"type": "pain", "body_part": "knee"}

    reps = command_to_dict(parser.parse("8 reps"))
    assert reps["reps"] == 8
    assert reps["confidence"] == 0.9

    unknown = command_to_dict(parser.parse("bench 225"))
    assert unknown["confidence"] == 0.0
    assert unknown["possible_interpretations"] == ["plus 225", "225 reps", "log a set of bench"]


def test_exercise_change_gets_canonical_name(parser: GrammarParser, lexicon: ExerciseLexicon) -> None:
    payload = command_to_dict(parser.parse("db row"), lexicon=lexicon)
    assert payload["kind"] == "exercise_change"
    assert payload["canonical_exercise"] == "Dumbbell Row"


def test_commands_payload_summary_and_actions(parser: GrammarParser, sample_transcripts: List[str]) -> None:
    commands = [parser.parse(text) for text in sample_transcripts]
    payload = commands_payload(commands, confirm_below=0.75)

    assert payload["summary"] == {
        "total": 5,
        "by_kind": {"log_set": 1, "same_again": 1, "weight_delta": 1, "modifier": 1, "unknown": 1},
    }
    assert [item["action"] for item in payload["commands"]] == ["auto", "auto", "auto", "auto", "confirm"]


def test_commands_payload_without_threshold(parser: GrammarParser) -> None:
    payload = commands_payload([parser.parse("same")])
    assert "action" not in payload["commands"][0]


def test_write_json(tmp_path: Path) -> None:
    path = write_json(tmp_path / "out" / "parsed.json", {"summary": {"total": 0}})
    assert json.loads(path.read_text()) == {"summary": {"total": 0}}
