"""Conversions between upstream score values and signed relative-to-par integers."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

EVEN_PAR = "E"

_SIGNED_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_score(value: Any) -> int:
    """Return the signed score encoded by ``value``.

    Accepts JSON numbers, signed strings (``"+3"``, ``"-5"``) and the even-par
    marker. Absent or unparseable input reads as 0, the same as even par.
    """

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0
    text = value.strip()
    if not text or text.upper() == EVEN_PAR:
        return 0
    if not _SIGNED_INT_PATTERN.match(text):
        return 0
    return int(text)


def format_score(score: int) -> str:
    if score == 0:
        return EVEN_PAR
    return f"+{score}" if score > 0 else str(score)


def format_to_par(score: Optional[int]) -> str:
    """Scorecard variant of :func:`format_score` that renders missing totals as "-"."""

    if score is None:
        return "-"
    return format_score(score)


__all__ = ["EVEN_PAR", "format_score", "format_to_par", "parse_score"]
