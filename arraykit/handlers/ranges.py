# =============================================================================
# arraykit/handlers/ranges.py - Range Construction
# =============================================================================
# Builds inclusive numeric or alphabetic ranges.
#
# Fractional ranges are walked on integers: bounds and step are scaled by
# 10**d (d = most decimal digits among them), then every produced value is
# divided back. Stepping 0.1 ten times from 0 therefore lands on 1.0 exactly.
# =============================================================================

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from arraykit.helpers import (
    decimal_places,
    is_numeric_like,
    parse_numeric_like,
    to_decimal,
)
from arraykit.registry import register_handler
from arraykit.types import HandlerExample, ParamDef

logger = logging.getLogger(__name__)

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")


def _normalize_step(step: Any) -> int | float:
    """Positive step or 1."""
    parsed = parse_numeric_like(step)
    if parsed is None or parsed <= 0:
        return 1
    return parsed


def _walk(
    begin: int | float,
    end: int | float,
    step: int | float,
    convert: Callable[[Any], Any] | None,
) -> list[Any]:
    values = []
    current = begin
    while current <= end:
        values.append(convert(current) if convert else current)
        current += step
    return values


def _same_case_letters(start: str, stop: str) -> bool:
    return bool(
        (_LOWER_RE.fullmatch(start) and _LOWER_RE.fullmatch(stop))
        or (_UPPER_RE.fullmatch(start) and _UPPER_RE.fullmatch(stop))
    )


@register_handler(
    "range",
    category="sequence",
    description="Build a list running from start to stop (inclusive) by step; "
                "bounds may be numbers, numeric text, or same-case letters",
    default=[],
    params=[
        ParamDef(name="start", type="number | str", description="First value of the range"),
        ParamDef(name="stop", type="number | str", description="Last value of the range (inclusive)"),
        ParamDef(
            name="step",
            type="number",
            required=False,
            default=1,
            description="Distance between values; non-positive or non-numeric steps become 1",
        ),
    ],
    examples=[
        HandlerExample(args=(1, 5), expected=[1, 2, 3, 4, 5], description="Ascending integers"),
        HandlerExample(args=(5, 1), expected=[5, 4, 3, 2, 1], description="Descending integers"),
        HandlerExample(args=(1, 2, 0.5), expected=[1, 1.5, 2], description="Fractional step"),
        HandlerExample(
            args=(0, 1, 0.1),
            expected=[0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1],
            description="No floating-point drift",
        ),
        HandlerExample(args=("a", "e"), expected=["a", "b", "c", "d", "e"], description="Letters"),
        HandlerExample(args=("E", "A", 2), expected=["E", "C", "A"], description="Letters, reversed"),
        HandlerExample(args=("a", "Z"), expected=[], description="Mixed case is rejected"),
    ],
)
def make_range(start: Any, stop: Any, step: Any = 1) -> list[Any]:
    """
    Build an inclusive range from start to stop.

    The direction comes from comparing the bounds, never from the step sign:
    the range is generated ascending and reversed when start > stop.
    Malformed bounds give an empty list.

    Examples:
        make_range(1, 5)         # [1, 2, 3, 4, 5]
        make_range(1, 2, 0.5)    # [1.0, 1.5, 2.0]
        make_range("c", "a")     # ["c", "b", "a"]
    """
    step = _normalize_step(step)
    convert: Callable[[Any], Any] | None = None

    if is_numeric_like(start) and is_numeric_like(stop):
        digits = max(decimal_places(start), decimal_places(stop), decimal_places(step))
        scale = 10 ** digits

        # Exact scaling; float multiplication would reintroduce drift
        begin, end, increment = (
            int(to_decimal(value) * scale) for value in (start, stop, step)
        )
        if digits > 0:
            convert = lambda number: number / scale  # noqa: E731
    else:
        start, stop = str(start), str(stop)
        if not _same_case_letters(start, stop):
            logger.debug(f"range: unsupported bounds {start!r}..{stop!r}, returning []")
            return []

        begin, end, increment = ord(start), ord(stop), step
        convert = lambda code: chr(int(code))  # noqa: E731

    if begin > end:
        return _walk(end, begin, increment, convert)[::-1]
    if begin < end:
        return _walk(begin, end, increment, convert)
    return [convert(begin) if convert else begin]
