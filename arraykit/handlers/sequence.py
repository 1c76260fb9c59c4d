# =============================================================================
# arraykit/handlers/sequence.py - Sequence Operations
# =============================================================================
# Operations that produce or inspect a list:
# - in_array: position of an element
# - unique: drop repeated values (numeric text counts as its number)
# - flatten: depth-first concatenation of nested sequences
# - shuffle: inside-out Fisher-Yates permutation in one pass
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from arraykit.helpers import (
    is_collection,
    is_sequence,
    is_text,
    iter_items,
    make_rng,
    parse_numeric_like,
    random_index,
    strict_equal,
)
from arraykit.registry import register_handler
from arraykit.types import HandlerExample, ParamDef

logger = logging.getLogger(__name__)


# =============================================================================
# in_array
# =============================================================================

@register_handler(
    "in_array",
    category="sequence",
    description="Index of the first element strictly equal to the given one, or -1",
    validator=lambda element, array, *args, **kwargs: is_sequence(array),
    default=-1,
    params=[
        ParamDef(name="element", type="Any", description="Value to look for"),
        ParamDef(name="array", type="list | tuple", description="Sequence to search"),
        ParamDef(
            name="from_index",
            type="int",
            required=False,
            default=0,
            description="Start position; negative values count from the end",
        ),
    ],
    examples=[
        HandlerExample(args=(3, [1, 2, 3]), expected=2, description="Found"),
        HandlerExample(args=("3", [1, 2, 3]), expected=-1, description="Text never equals a number"),
        HandlerExample(args=(1, [1, 2, 1], 1), expected=2, description="Search from an offset"),
        HandlerExample(args=(1, [1, 2, 1], -1), expected=2, description="Negative offset"),
    ],
)
def in_array(element: Any, array: Any, from_index: int = 0) -> int:
    """
    Return the position of element in array, or -1.

    Equality follows strict_equal(): True does not match 1 and nested
    containers only match themselves.
    """
    if not is_sequence(array):
        return -1

    length = len(array)
    if from_index < 0:
        from_index = max(0, length + from_index)

    for index in range(from_index, length):
        if strict_equal(array[index], element):
            return index
    return -1


# =============================================================================
# unique
# =============================================================================

@register_handler(
    "unique",
    category="sequence",
    description="Remove repeated values; numeric text is converted to its number",
    validator=lambda array, *args, **kwargs: is_sequence(array),
    default=None,
    params=[
        ParamDef(name="array", type="list | tuple", description="Values to deduplicate"),
        ParamDef(
            name="keep_last",
            type="bool",
            required=False,
            default=False,
            description="Keep the last occurrence of each value instead of the first",
        ),
    ],
    examples=[
        HandlerExample(args=([1, "1", 2, 2, "3"],), expected=[1, 2, 3], description="Numeric text collapses"),
        HandlerExample(args=(["1", "1.0"],), expected=[1], description="Same number, different text"),
        HandlerExample(
            args=([1, 2, 1, 3],),
            kwargs={"keep_last": True},
            expected=[2, 1, 3],
            description="Last occurrence wins",
        ),
    ],
)
def unique(array: Any, keep_last: bool = False) -> list[Any]:
    """
    Return the values of array without repeats, in order.

    With keep_last, each value sits at the position of its last occurrence.
    The input is never modified.
    """
    if not is_sequence(array):
        return []

    result: list[Any] = []
    for value in (reversed(array) if keep_last else array):
        number = parse_numeric_like(value) if is_text(value) else None
        if number is not None:
            value = number

        if in_array(value, result) == -1:
            result.append(value)

    if keep_last:
        result.reverse()
    return result


# =============================================================================
# flatten
# =============================================================================

@register_handler(
    "flatten",
    category="sequence",
    description="Flatten nested sequences into one list, depth first",
    default=[],
    params=[
        ParamDef(name="array", type="list | tuple", description="Possibly nested sequence"),
    ],
    examples=[
        HandlerExample(args=([1, [2, [3, 4], 5]],), expected=[1, 2, 3, 4, 5], description="Nested lists"),
        HandlerExample(args=([1, (2, 3), []],), expected=[1, 2, 3], description="Tuples and empty lists"),
        HandlerExample(args=("abc",), expected="abc", description="Non-sequences are returned unchanged"),
    ],
)
def flatten(array: Any) -> Any:
    """
    Concatenate all non-sequence leaves of a nested sequence.

    A non-sequence argument is returned as is.
    """
    if not is_sequence(array):
        return array

    flat: list[Any] = []
    for element in array:
        if is_sequence(element):
            flat.extend(flatten(element))
        else:
            flat.append(element)
    return flat


# =============================================================================
# shuffle
# =============================================================================

@register_handler(
    "shuffle",
    category="sequence",
    description="Return a randomly permuted list of a collection's values",
    validator=lambda target, *args, **kwargs: is_collection(target) or is_text(target),
    default=None,
    params=[
        ParamDef(name="target", type="list | tuple | Mapping | str", description="Values to shuffle"),
        ParamDef(
            name="seed",
            type="int",
            required=False,
            default=None,
            description="Seed for a reproducible shuffle; the ambient generator is used otherwise",
        ),
    ],
    examples=[
        HandlerExample(args=([],), expected=[], description="Nothing to shuffle"),
        HandlerExample(args=({"only": 1},), expected=[1], description="Single mapping value"),
    ],
)
def shuffle(target: Any, seed: int | None = None) -> list[Any]:
    """
    Shuffle the values of target into a new list.

    Inside-out Fisher-Yates: the i-th value visited draws r in [0, i], the
    value at r moves to i and the new value takes r. Every permutation is
    equally likely.
    """
    rng = make_rng(seed)
    shuffled: list[Any] = []

    for index, (_, value) in enumerate(iter_items(target)):
        slot = random_index(index, rng)
        shuffled.append(None)
        shuffled[index] = shuffled[slot]
        shuffled[slot] = value

    return shuffled
