"""Modifier sub-grammar shared by the set-log and standalone modifier rules.

    Modifier := "failed" ("at" Number)? | "failure" ("at" Number)?
              | "easy" | "hard" | "rpe" Number
              | "warmup" | "warm" "up" | BodyPart "pain"
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from callout.core.models import (
    RPE,
    EasyModifier,
    FailedModifier,
    HardModifier,
    PainModifier,
    RpeModifier,
    SetModifier,
    WarmupModifier,
)
from callout.core.normalize import resolve_body_part
from callout.core.tokenizer import Keyword, KeywordToken, NumberToken, Token, WordToken, is_keyword


def _at(tokens: Sequence[Token], index: int) -> Optional[Token]:
    return tokens[index] if 0 <= index < len(tokens) else None


def match_modifier(tokens: Sequence[Token], index: int) -> Optional[Tuple[SetModifier, int]]:
    """Match one modifier at ``index``; return it with the tokens consumed."""
    token = _at(tokens, index)

    if isinstance(token, KeywordToken):
        keyword = token.keyword
        if keyword in (Keyword.FAILED, Keyword.FAILURE):
            connector = _at(tokens, index + 1)
            rep = _at(tokens, index + 2)
            if connector is not None and is_keyword(connector, Keyword.AT) and isinstance(rep, NumberToken):
                return FailedModifier(at_rep=int(rep.value)), 3
            return FailedModifier(), 1

        if keyword is Keyword.EASY:
            return EasyModifier(), 1
        if keyword is Keyword.HARD:
            return HardModifier(), 1

        if keyword is Keyword.RPE:
            value = _at(tokens, index + 1)
            if isinstance(value, NumberToken):
                return RpeModifier(RPE(value.value)), 2
            return None

        if keyword is Keyword.WARMUP:
            return WarmupModifier(), 1
        if keyword is Keyword.WARM:
            follower = _at(tokens, index + 1)
            if follower is not None and is_keyword(follower, Keyword.UP):
                return WarmupModifier(), 2
            return None

        return None

    if isinstance(token, WordToken):
        body_part = resolve_body_part(token.text)
        follower = _at(tokens, index + 1)
        if body_part is not None and follower is not None and is_keyword(follower, Keyword.PAIN):
            return PainModifier(body_part), 2

    return None
