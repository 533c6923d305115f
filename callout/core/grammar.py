"""Grammar parser for gym shorthand transcripts.

Rules are tried in a fixed order and the first match wins::

    SameAgain := "same" "again"?
    Delta     := ("plus" | "add" | "minus" | "drop") Number Unit?
    SetLog    := Exercise? Number Unit? "for" Number "reps"? Modifier*
    Modifier  := see ``callout.core.modifiers``
    Reps      := Number ("reps" | "rep")
    Exercise  := Word+

Anything else becomes ``Unknown`` with suggestions. ``parse`` never raises.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from callout.core import constants
from callout.core.lexicon import ExerciseLexicon, LexiconSnapshot
from callout.core.models import (
    Command,
    Direction,
    ExerciseChange,
    LogSet,
    ModifierCommand,
    RepChange,
    Reps,
    SameAgain,
    SetModifier,
    Unknown,
    Weight,
    WeightDelta,
)
from callout.core.modifiers import match_modifier
from callout.core.normalize import resolve_unit
from callout.core.tokenizer import (
    Keyword,
    KeywordToken,
    NumberToken,
    Token,
    WordToken,
    is_keyword,
    token_text,
    tokenize,
)
from callout.utils.formatting import format_integer

Rule = Callable[[Sequence[Token], str, LexiconSnapshot], Optional[Command]]

_DELTA_DIRECTIONS = {
    Keyword.PLUS: Direction.ADD,
    Keyword.ADD: Direction.ADD,
    Keyword.MINUS: Direction.SUBTRACT,
    Keyword.DROP: Direction.SUBTRACT,
}


def _parse_same_again(tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot) -> Optional[Command]:
    if not is_keyword(tokens[0], Keyword.SAME):
        return None

    if len(tokens) == 1:
        confidence = constants.SAME_AGAIN_BARE
    elif len(tokens) == 2 and is_keyword(tokens[1], Keyword.AGAIN):
        confidence = constants.SAME_AGAIN_EXACT
    else:
        confidence = constants.SAME_AGAIN_TRAILING
    return SameAgain(confidence=confidence, raw_input=raw_input)


def _parse_delta(tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot) -> Optional[Command]:
    head = tokens[0]
    if len(tokens) < 2 or not isinstance(head, KeywordToken):
        return None
    direction = _DELTA_DIRECTIONS.get(head.keyword)
    if direction is None:
        return None

    amount = tokens[1]
    if not isinstance(amount, NumberToken):
        return None

    unit = None
    if len(tokens) >= 3 and isinstance(tokens[2], WordToken):
        unit = resolve_unit(tokens[2].text)

    confidence = constants.DELTA_WITH_UNIT if unit is not None else constants.DELTA_WITHOUT_UNIT
    return WeightDelta(
        direction=direction,
        delta=Weight(value=amount.value, unit=unit),
        confidence=confidence,
        raw_input=raw_input,
    )


def _find_keyword(tokens: Sequence[Token], keyword: Keyword) -> Optional[int]:
    for index, token in enumerate(tokens):
        if is_keyword(token, keyword):
            return index
    return None


def _find_weight(tokens: Sequence[Token], for_index: int) -> Optional[Tuple[int, NumberToken]]:
    """Scan back from "for" to the nearest number."""
    for index in range(for_index - 1, -1, -1):
        token = tokens[index]
        if isinstance(token, NumberToken):
            return index, token
    return None


def _parse_set_log(tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot) -> Optional[Command]:
    for_index = _find_keyword(tokens, Keyword.FOR)
    if for_index is None or for_index == 0 or for_index == len(tokens) - 1:
        return None

    found = _find_weight(tokens, for_index)
    if found is None:
        return None
    weight_index, weight_token = found

    # Only the word right after the number can be a unit; anything else
    # between the weight and "for" is dropped.
    unit = None
    if weight_index < for_index - 1:
        unit_token = tokens[weight_index + 1]
        if isinstance(unit_token, WordToken):
            unit = resolve_unit(unit_token.text)

    rep_token = tokens[for_index + 1]
    if not isinstance(rep_token, NumberToken):
        return None

    confidence = 1.0
    exercise_words: List[str] = []
    for token in tokens[:weight_index]:
        if isinstance(token, NumberToken):
            confidence -= constants.SET_LOG_PENALTY
        exercise_words.append(token_text(token))

    exercise = " ".join(exercise_words) if exercise_words else None
    if exercise is not None and lexicon.is_known(exercise):
        confidence = min(1.0, confidence + constants.SET_LOG_KNOWN_BOOST)

    index = for_index + 2
    if index < len(tokens) and is_keyword(tokens[index], Keyword.REPS, Keyword.REP):
        index += 1

    modifiers: List[SetModifier] = []
    while index < len(tokens):
        matched = match_modifier(tokens, index)
        if matched is None:
            confidence -= constants.SET_LOG_PENALTY
            index += 1
            continue
        modifier, consumed = matched
        modifiers.append(modifier)
        index += consumed

    return LogSet(
        exercise=exercise,
        weight=Weight(value=weight_token.value, unit=unit),
        reps=Reps(int(rep_token.value)),
        modifiers=tuple(modifiers),
        confidence=max(constants.SET_LOG_FLOOR, confidence),
        raw_input=raw_input,
    )


def _parse_standalone_modifier(
    tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot
) -> Optional[Command]:
    matched = match_modifier(tokens, 0)
    if matched is None:
        return None

    modifier, consumed = matched
    confidence = constants.MODIFIER_FULL if consumed >= len(tokens) else constants.MODIFIER_PARTIAL
    return ModifierCommand(modifier=modifier, confidence=confidence, raw_input=raw_input)


def _parse_standalone_reps(tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot) -> Optional[Command]:
    # A bare number is ambiguous (weight? delta?), so "reps" is required.
    count = tokens[0]
    if len(tokens) != 2 or not isinstance(count, NumberToken):
        return None
    if not is_keyword(tokens[1], Keyword.REPS, Keyword.REP):
        return None
    return RepChange(
        reps=Reps(int(count.value)),
        confidence=constants.REP_CHANGE,
        raw_input=raw_input,
    )


def _parse_exercise_change(tokens: Sequence[Token], raw_input: str, lexicon: LexiconSnapshot) -> Optional[Command]:
    if any(isinstance(token, NumberToken) for token in tokens):
        return None

    exercise = " ".join(token_text(token) for token in tokens)
    confidence = constants.EXERCISE_KNOWN if lexicon.is_known(exercise) else constants.EXERCISE_UNKNOWN
    if confidence < constants.EXERCISE_MIN:
        return None
    return ExerciseChange(exercise=exercise, confidence=confidence, raw_input=raw_input)


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("same_again", _parse_same_again),
    ("delta", _parse_delta),
    ("set_log", _parse_set_log),
    ("modifier", _parse_standalone_modifier),
    ("reps", _parse_standalone_reps),
    ("exercise_change", _parse_exercise_change),
)


def suggest_interpretations(tokens: Sequence[Token], lexicon: LexiconSnapshot) -> List[str]:
    """Best-effort readings of an utterance no rule matched."""
    suggestions: List[str] = []

    numbers = [token.value for token in tokens if isinstance(token, NumberToken)]
    if len(numbers) >= 2:
        suggestions.append(f"{format_integer(numbers[0])} for {format_integer(numbers[1])}")
    elif len(numbers) == 1:
        suggestions.append(f"plus {format_integer(numbers[0])}")
        suggestions.append(f"{format_integer(numbers[0])} reps")

    for token in tokens:
        if isinstance(token, WordToken) and lexicon.is_known(token.text):
            suggestions.append(f"log a set of {token.text}")

    return suggestions


class GrammarParser:
    """Parse transcripts into commands using an exercise lexicon."""

    def __init__(self, lexicon: Optional[ExerciseLexicon] = None) -> None:
        self.lexicon = lexicon or ExerciseLexicon()

    def parse(self, text: str) -> Command:
        """Parse one transcript. Always returns exactly one command."""
        tokens = tokenize(text)
        if not tokens:
            return Unknown(raw_input=text)

        snapshot = self.lexicon.snapshot()
        for _, rule in RULES:
            command = rule(tokens, text, snapshot)
            if command is not None:
                return command

        return Unknown(
            raw_input=text,
            possible_interpretations=tuple(suggest_interpretations(tokens, snapshot)),
        )

    def parse_as_set(self, text: str) -> Optional[LogSet]:
        command = self.parse(text)
        return command if isinstance(command, LogSet) else None

    def parse_as_delta(self, text: str) -> Optional[WeightDelta]:
        command = self.parse(text)
        return command if isinstance(command, WeightDelta) else None

    def is_same_again(self, text: str) -> bool:
        return isinstance(self.parse(text), SameAgain)


_default_parser: Optional[GrammarParser] = None


def default_parser() -> GrammarParser:
    """Return a shared parser built on the built-in lexicon."""
    global _default_parser
    if _default_parser is None:
        _default_parser = GrammarParser()
    return _default_parser


def parse(text: str) -> Command:
    """Parse a transcript with the default parser."""
    return default_parser().parse(text)
