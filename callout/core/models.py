"""Command model returned by the grammar parser.

Every command variant is a frozen dataclass carrying ``confidence`` and
``raw_input``. ``Command`` is the union of all variants; consumers branch
on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from callout.utils.formatting import format_number


class WeightUnit(str, Enum):
    """Weight units recognized in gym shorthand."""

    KILOGRAMS = "kg"
    POUNDS = "lbs"
    PLATES = "plates"


class BodyPart(str, Enum):
    """Body parts a pain note can refer to."""

    SHOULDER = "shoulder"
    BACK = "back"
    KNEE = "knee"
    ELBOW = "elbow"
    WRIST = "wrist"
    HIP = "hip"
    NECK = "neck"
    CHEST = "chest"
    LOWER_BACK = "lower back"


class Direction(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"


@dataclass(frozen=True)
class Weight:
    """A weight value with an optional unit."""

    value: float
    unit: Optional[WeightUnit] = None

    def __str__(self) -> str:
        if self.unit is not None:
            return f"{format_number(self.value)} {self.unit.value}"
        return format_number(self.value)


@dataclass(frozen=True)
class Reps:
    count: int

    def __str__(self) -> str:
        return f"{self.count} rep{'' if self.count == 1 else 's'}"


@dataclass(frozen=True)
class RPE:
    """Rate of perceived exertion, clamped to the 1-10 scale."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", min(10.0, max(1.0, float(self.value))))

    def __str__(self) -> str:
        return f"RPE {format_number(self.value)}"


# Set modifiers


@dataclass(frozen=True)
class FailedModifier:
    at_rep: Optional[int] = None
    type: ClassVar[str] = "failed"

    def __str__(self) -> str:
        if self.at_rep is not None:
            return f"failed at rep {self.at_rep}"
        return "failed"


@dataclass(frozen=True)
class EasyModifier:
    type: ClassVar[str] = "easy"

    def __str__(self) -> str:
        return "easy"


@dataclass(frozen=True)
class HardModifier:
    type: ClassVar[str] = "hard"

    def __str__(self) -> str:
        return "hard"


@dataclass(frozen=True)
class RpeModifier:
    rpe: RPE
    type: ClassVar[str] = "rpe"

    def __str__(self) -> str:
        return str(self.rpe)


@dataclass(frozen=True)
class WarmupModifier:
    type: ClassVar[str] = "warmup"

    def __str__(self) -> str:
        return "warmup"


@dataclass(frozen=True)
class PainModifier:
    body_part: BodyPart
    type: ClassVar[str] = "pain"

    def __str__(self) -> str:
        return f"{self.body_part.value} pain"


SetModifier = Union[
    FailedModifier,
    EasyModifier,
    HardModifier,
    RpeModifier,
    WarmupModifier,
    PainModifier,
]


# Commands


@dataclass(frozen=True)
class LogSet:
    """A complete set: optional exercise, weight, reps and modifiers."""

    exercise: Optional[str]
    weight: Weight
    reps: Reps
    modifiers: Tuple[SetModifier, ...] = ()
    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "log_set"

    def __str__(self) -> str:
        parts = []
        if self.exercise is not None:
            parts.append(self.exercise)
        parts.extend([str(self.weight), "for", str(self.reps)])
        parts.extend(str(modifier) for modifier in self.modifiers)
        return " ".join(parts)


@dataclass(frozen=True)
class SameAgain:
    """Repeat the previous set."""

    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "same_again"

    def __str__(self) -> str:
        return "same again"


@dataclass(frozen=True)
class WeightDelta:
    """Adjust the weight relative to the previous set."""

    direction: Direction
    delta: Weight
    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "weight_delta"

    def __str__(self) -> str:
        verb = "plus" if self.direction is Direction.ADD else "minus"
        return f"{verb} {self.delta}"


@dataclass(frozen=True)
class RepChange:
    reps: Reps
    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "rep_change"

    def __str__(self) -> str:
        return str(self.reps)


@dataclass(frozen=True)
class ExerciseChange:
    exercise: str
    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "exercise_change"

    def __str__(self) -> str:
        return f"switch to {self.exercise}"


@dataclass(frozen=True)
class ModifierCommand:
    """A modifier spoken on its own, applied to the last set."""

    modifier: SetModifier
    confidence: float = 1.0
    raw_input: str = ""
    kind: ClassVar[str] = "modifier"

    def __str__(self) -> str:
        return str(self.modifier)


@dataclass(frozen=True)
class Unknown:
    """Input no rule understood, with best-effort suggestions."""

    raw_input: str = ""
    possible_interpretations: Tuple[str, ...] = ()
    confidence: float = field(default=0.0, init=False)
    kind: ClassVar[str] = "unknown"

    def __str__(self) -> str:
        return f'unknown: "{self.raw_input}"'


Command = Union[
    LogSet,
    SameAgain,
    WeightDelta,
    RepChange,
    ExerciseChange,
    ModifierCommand,
    Unknown,
]
