# =============================================================================
# arraykit/handlers/aggregate.py - Numeric Aggregation
# =============================================================================
# Folds a collection to a scalar:
# - sum: implicit numeric coercion of every element (bad text poisons to nan)
# - product: numeric-like elements only, 0 when there are none
# - max / min: original element with the best (optionally projected) value
# =============================================================================

from __future__ import annotations

import logging
import math
import operator
from typing import Any, Callable

from arraykit.config import settings
from arraykit.helpers import (
    bind_callback,
    is_collection,
    is_number,
    is_sequence,
    iter_items,
    parse_numeric_like,
    to_number,
)
from arraykit.registry import register_handler
from arraykit.types import MISSING, AggregationResult, HandlerExample, ParamDef

logger = logging.getLogger(__name__)


# =============================================================================
# sum
# =============================================================================

@register_handler(
    "sum",
    category="aggregate",
    description="Add up every value of a sequence or mapping, coercing each to a number",
    default=math.nan,
    params=[
        ParamDef(name="collection", type="list | tuple | Mapping", description="Values to add"),
    ],
    examples=[
        HandlerExample(args=([1, 2, 3],), expected=6, description="Plain numbers"),
        HandlerExample(args=({"a": 1, "b": 2},), expected=3, description="Mapping values"),
        HandlerExample(args=([1, "2", " 3 "],), expected=6, description="Numeric text is coerced"),
    ],
)
def sum_collection(collection: Any) -> int | float:
    """
    Sum every value of a collection.

    Each value goes through to_number(), so non-numeric text contributes nan
    and poisons the total. Non-collections give nan.
    """
    if not is_collection(collection):
        logger.debug(f"sum: {type(collection).__name__} is not a collection, returning nan")
        return math.nan

    total: int | float = 0
    for _, value in iter_items(collection):
        total += to_number(value)
    return total


# =============================================================================
# product
# =============================================================================

@register_handler(
    "product",
    category="aggregate",
    description="Multiply the numeric-like elements of a sequence, skipping the rest",
    validator=lambda array, *args, **kwargs: is_sequence(array),
    default=None,
    params=[
        ParamDef(name="array", type="list | tuple", description="Values to multiply"),
    ],
    examples=[
        HandlerExample(args=([2, 3, 4],), expected=24, description="Plain numbers"),
        HandlerExample(args=([2, "x", "3"],), expected=6, description="Non-numeric elements are skipped"),
        HandlerExample(args=(["x", None],), expected=0, description="No numeric elements"),
    ],
)
def product(array: Any) -> int | float:
    """Multiply numeric-like elements; 0 when none were found."""
    result: int | float = 1
    count = 0

    for _, value in iter_items(array):
        number = parse_numeric_like(value)
        if number is not None:
            count += 1
            result *= number

    return 0 if count == 0 else result


# =============================================================================
# max / min
# =============================================================================

def _improves(candidate: Any, current: Any, compare: Callable[[Any, Any], Any]) -> bool:
    try:
        return bool(compare(candidate, current))
    except TypeError:
        # Mixed types compare as numbers, e.g. "5" against 3
        return bool(compare(to_number(candidate), to_number(current)))


def _use_builtin(target: Any) -> bool:
    """Sequences of plain numbers below the configured size go to max()/min()."""
    if not settings.fast_path_enabled or not is_sequence(target):
        return False
    if not 0 < len(target) < settings.MAX_MIN_FAST_PATH_LIMIT:
        return False
    return all(is_number(value) and not math.isnan(value) for value in target)


def _extreme(
    initial: float,
    compare: Callable[[Any, Any], Any],
    builtin: Callable[..., Any],
    target: Any,
    callback: Any,
    context: Any,
) -> Any:
    best = AggregationResult(value=initial, computed=initial)

    if not is_collection(target):
        logger.debug(f"{builtin.__name__}: {type(target).__name__} is not a collection")
        return best.value

    has_callback = callable(callback)
    if not has_callback and _use_builtin(target):
        return builtin(target)

    func = bind_callback(callback, context) if has_callback else None
    for key, value in iter_items(target):
        computed = func(value, key, target) if func else value
        # Strict comparison: ties keep the first element seen
        if _improves(computed, best.computed, compare):
            best = AggregationResult(value=value, computed=computed)

    return best.value


_EXTREME_PARAMS = [
    ParamDef(name="target", type="list | tuple | Mapping", description="Values to compare"),
    ParamDef(
        name="callback",
        type="Callable",
        required=False,
        default=None,
        description="Projection called as callback(value, index_or_key, target)",
    ),
    ParamDef(
        name="context",
        type="Any",
        required=False,
        default=MISSING,
        description="Bound as the callback's first argument when given",
    ),
]


@register_handler(
    "max",
    category="aggregate",
    description="Return the element with the greatest value (or greatest callback projection)",
    default=-math.inf,
    params=_EXTREME_PARAMS,
    examples=[
        HandlerExample(args=([3, 1, 4, 1, 5],), expected=5, description="Plain numbers"),
        HandlerExample(
            args=([3, 1, 4], lambda value, index, target: -value),
            expected=1,
            description="Greatest projection, original element returned",
        ),
        HandlerExample(args=({"a": 3, "b": 7},), expected=7, description="Mapping values"),
        HandlerExample(args=(42,), expected=-math.inf, description="Not a collection"),
    ],
)
def max_element(target: Any, callback: Any = None, context: Any = MISSING) -> Any:
    """
    Return the element of target whose value (or projection) is greatest.

    Returns -inf when target is not a collection or is empty.
    """
    return _extreme(-math.inf, operator.gt, max, target, callback, context)


@register_handler(
    "min",
    category="aggregate",
    description="Return the element with the smallest value (or smallest callback projection)",
    default=math.inf,
    params=_EXTREME_PARAMS,
    examples=[
        HandlerExample(args=([3, 1, 4, 1, 5],), expected=1, description="Plain numbers"),
        HandlerExample(
            args=(["ccc", "a", "bb"], lambda value, index, target: len(value)),
            expected="a",
            description="Shortest text",
        ),
        HandlerExample(args=("abc",), expected=math.inf, description="Not a collection"),
    ],
)
def min_element(target: Any, callback: Any = None, context: Any = MISSING) -> Any:
    """
    Return the element of target whose value (or projection) is smallest.

    Returns inf when target is not a collection or is empty.
    """
    return _extreme(math.inf, operator.lt, min, target, callback, context)
