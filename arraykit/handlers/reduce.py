# =============================================================================
# arraykit/handlers/reduce.py - Left / Right Folds
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from arraykit.exceptions import EmptyReductionError
from arraykit.helpers import is_sequence
from arraykit.registry import register_handler
from arraykit.types import MISSING, HandlerExample, ParamDef, ReduceState

logger = logging.getLogger(__name__)


@register_handler(
    "reduce",
    category="reduce",
    description="Fold a sequence to a single value, left to right or right to left",
    validator=lambda array, *args, **kwargs: is_sequence(array),
    default=None,
    params=[
        ParamDef(name="array", type="list | tuple", description="Sequence to fold"),
        ParamDef(
            name="callback",
            type="Callable",
            description="Called as callback(accumulator, value, index, array)",
        ),
        ParamDef(
            name="initial",
            type="Any",
            required=False,
            default=MISSING,
            description="Seed for the accumulator; without it the first visited element is the seed",
        ),
        ParamDef(
            name="from_right",
            type="bool",
            required=False,
            default=False,
            description="Fold from the last element to the first",
        ),
    ],
    examples=[
        HandlerExample(args=([1, 2, 3, 4], lambda acc, value, index, array: acc + value), expected=10),
        HandlerExample(
            args=([1, 2, 3, 4], lambda acc, value, index, array: acc + value, 10),
            expected=20,
            description="With a seed",
        ),
        HandlerExample(
            args=([], lambda acc, value, index, array: acc + value, 0),
            expected=0,
            description="Empty sequence with a seed",
        ),
        HandlerExample(
            args=(["a", "b", "c"], lambda acc, value, index, array: acc + value),
            kwargs={"from_right": True},
            expected="cba",
            description="Right to left",
        ),
    ],
)
def reduce_sequence(
    array: Any,
    callback: Any,
    initial: Any = MISSING,
    from_right: bool = False,
) -> Any:
    """
    Fold array with callback(accumulator, value, index, array).

    Seed presence is decided by MISSING, so reduce_sequence(xs, f, None)
    seeds with None while reduce_sequence(xs, f) seeds with the first
    visited element (the last one when from_right) and skips it.

    Returns None when array is not a sequence or callback is not callable.

    Raises:
        EmptyReductionError: array is empty and no seed was given
    """
    if not is_sequence(array):
        logger.debug(f"reduce: {type(array).__name__} is not a sequence, returning None")
        return None
    if not callable(callback):
        logger.debug("reduce: callback is not callable, returning None")
        return None

    indices = range(len(array) - 1, -1, -1) if from_right else range(len(array))
    positions = iter(indices)

    if initial is MISSING:
        first = next(positions, None)
        if first is None:
            raise EmptyReductionError(from_right=from_right)
        state = ReduceState(accumulator=array[first], index=first)
    else:
        state = ReduceState(accumulator=initial, index=-1)

    for index in positions:
        state.accumulator = callback(state.accumulator, array[index], index, array)
        state.index = index

    return state.accumulator
