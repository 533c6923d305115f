"""JSON export helpers."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from callout.core.lexicon import ExerciseLexicon
from callout.core.models import (
    Command,
    ExerciseChange,
    FailedModifier,
    LogSet,
    ModifierCommand,
    PainModifier,
    RepChange,
    RpeModifier,
    SetModifier,
    Unknown,
    Weight,
    WeightDelta,
)
from callout.utils.formatting import confidence_action


def weight_to_dict(weight: Weight) -> Dict[str, Any]:
    return {"value": weight.value, "unit": weight.unit.value if weight.unit else None}


def modifier_to_dict(modifier: SetModifier) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"type": modifier.type}
    if isinstance(modifier, FailedModifier):
        payload["at_rep"] = modifier.at_rep
    elif isinstance(modifier, RpeModifier):
        payload["value"] = modifier.rpe.value
    elif isinstance(modifier, PainModifier):
        payload["body_part"] = modifier.body_part.value
    return payload


def command_to_dict(command: Command, lexicon: Optional[ExerciseLexicon] = None) -> Dict[str, Any]:
    """Serialize a parsed command into a JSON-friendly dict."""
    payload: Dict[str, Any] = {
        "kind": command.kind,
        "input": command.raw_input,
        "confidence": round(command.confidence, 4),
        "description": str(command),
    }

    if isinstance(command, LogSet):
        payload["exercise"] = command.exercise
        payload["weight"] = weight_to_dict(command.weight)
        payload["reps"] = command.reps.count
        payload["modifiers"] = [modifier_to_dict(modifier) for modifier in command.modifiers]
    elif isinstance(command, WeightDelta):
        payload["direction"] = command.direction.value
        payload["delta"] = weight_to_dict(command.delta)
    elif isinstance(command, RepChange):
        payload["reps"] = command.reps.count
    elif isinstance(command, ExerciseChange):
        payload["exercise"] = command.exercise
    elif isinstance(command, ModifierCommand):
        payload["modifier"] = modifier_to_dict(command.modifier)
    elif isinstance(command, Unknown):
        payload["possible_interpretations"] = list(command.possible_interpretations)

    exercise = payload.get("exercise")
    if lexicon is not None and exercise:
        canonical = lexicon.canonical_name(exercise)
        if canonical:
            payload["canonical_exercise"] = canonical

    return payload


def commands_payload(
    commands: Sequence[Command],
    lexicon: Optional[ExerciseLexicon] = None,
    confirm_below: Optional[float] = None,
) -> Dict[str, Any]:
    """Build the batch payload printed by ``callout parse --json``."""
    results = []
    for command in commands:
        item = command_to_dict(command, lexicon=lexicon)
        if confirm_below is not None:
            item["action"] = confidence_action(command.confidence, confirm_below)
        results.append(item)

    by_kind = Counter(command.kind for command in commands)

    return {
        "summary": {"total": len(commands), "by_kind": dict(by_kind)},
        "commands": results,
    }


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path
