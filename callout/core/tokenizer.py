"""Tokenizer turning a raw transcript into Numbers, Keywords and Words."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from callout.core.constants import SPOKEN_NUMBERS, STRIPPED_CHARACTERS

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?$")


class Keyword(str, Enum):
    """Reserved words of the gym shorthand grammar."""

    FOR = "for"
    AT = "at"
    SAME = "same"
    AGAIN = "again"
    PLUS = "plus"
    ADD = "add"
    MINUS = "minus"
    DROP = "drop"
    FAILED = "failed"
    FAILURE = "failure"
    EASY = "easy"
    HARD = "hard"
    RPE = "rpe"
    WARMUP = "warmup"
    WARM = "warm"
    UP = "up"
    PAIN = "pain"
    REPS = "reps"
    REP = "rep"


_KEYWORDS = {keyword.value: keyword for keyword in Keyword}


@dataclass(frozen=True)
class NumberToken:
    value: float

    def __str__(self) -> str:
        if self.value.is_integer():
            return f"num({int(self.value)})"
        return f"num({self.value})"


@dataclass(frozen=True)
class WordToken:
    text: str

    def __str__(self) -> str:
        return f"word({self.text})"


@dataclass(frozen=True)
class KeywordToken:
    keyword: Keyword

    @property
    def text(self) -> str:
        return self.keyword.value

    def __str__(self) -> str:
        return f"kw({self.keyword.value})"


Token = Union[NumberToken, WordToken, KeywordToken]


def normalize_transcript(text: str) -> str:
    """Lowercase and drop punctuation the grammar does not use."""
    normalized = text.lower().replace(",", " ")
    for char in STRIPPED_CHARACTERS:
        normalized = normalized.replace(char, "")
    return normalized


def parse_number(word: str) -> Optional[float]:
    """Parse a numeric literal or a spoken number from zero to twenty."""
    if _NUMBER_PATTERN.match(word):
        value = float(word)
        if math.isfinite(value):
            return value
    return SPOKEN_NUMBERS.get(word)


def _classify(word: str) -> Token:
    number = parse_number(word)
    if number is not None:
        return NumberToken(number)
    keyword = _KEYWORDS.get(word)
    if keyword is not None:
        return KeywordToken(keyword)
    return WordToken(word)


def tokenize(text: str) -> List[Token]:
    """Split a transcript into tokens, preserving order."""
    return [_classify(word) for word in normalize_transcript(text).split()]


def is_keyword(token: Token, *keywords: Keyword) -> bool:
    return isinstance(token, KeywordToken) and token.keyword in keywords


def token_text(token: Token) -> str:
    """Return the literal text a token contributes to a phrase."""
    if isinstance(token, NumberToken):
        return str(int(token.value))
    return token.text
