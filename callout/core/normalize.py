"""Unit and body-part resolution."""

from __future__ import annotations

from typing import Optional

from callout.core.constants import BODY_PART_VARIANTS, UNIT_VARIANTS
from callout.core.models import BodyPart, WeightUnit


def resolve_unit(text: str) -> Optional[WeightUnit]:
    """Map a spoken unit variant (``kilos``, ``lb``, ``plates``...) to a unit."""
    symbol = UNIT_VARIANTS.get(text.strip().lower())
    if symbol is None:
        return None
    return WeightUnit(symbol)


def resolve_body_part(text: str) -> Optional[BodyPart]:
    """Map a body-part word, including plurals, to a ``BodyPart``."""
    lowered = text.strip().lower()
    try:
        return BodyPart(lowered)
    except ValueError:
        pass
    variant = BODY_PART_VARIANTS.get(lowered)
    return BodyPart(variant) if variant else None
