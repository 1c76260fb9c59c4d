# =============================================================================
# arraykit/helpers.py - Host Capabilities
# =============================================================================
# Type classification, traversal, numeric coercion and randomness used by
# every handler. Coercion is explicit: handlers call parse_numeric_like() or
# to_number() at the exact points where text is allowed to act as a number.
# =============================================================================

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Iterator, Mapping
from decimal import Decimal
from functools import partial
from typing import Any, Callable

import numpy as np

from arraykit.config import settings
from arraykit.types import MISSING, ValueKind


# Complete decimal numeral, optionally signed, with optional exponent
_NUMERAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")

# Ambient random source for shuffle; reseed via ARRAYKIT_RANDOM_SEED
_ambient_rng = np.random.default_rng(settings.RANDOM_SEED)


# =============================================================================
# Classification
# =============================================================================

def is_sequence(value: Any) -> bool:
    """Lists and tuples; text is never a sequence here."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_collection(value: Any) -> bool:
    """Sequence or mapping."""
    return is_sequence(value) or is_mapping(value)


def is_number(value: Any) -> bool:
    """Real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def classify(value: Any) -> ValueKind:
    """
    Classify a value into one of the kinds handlers dispatch on.

    Text is checked before sequences so that a str is never treated as a
    sequence of characters by accident.
    """
    if is_text(value):
        return ValueKind.TEXT
    if is_mapping(value):
        return ValueKind.MAPPING
    if is_sequence(value):
        return ValueKind.SEQUENCE
    if is_number(value):
        return ValueKind.NUMERIC
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OTHER


# =============================================================================
# Traversal
# =============================================================================

def iter_items(collection: Any) -> Iterator[tuple[Any, Any]]:
    """
    Yield (key, value) pairs of a collection in traversal order.

    Sequences and text yield (index, element); mappings yield their items in
    insertion order. Anything else yields nothing.
    """
    if is_sequence(collection) or is_text(collection):
        yield from enumerate(collection)
    elif is_mapping(collection):
        yield from collection.items()


def bind_callback(callback: Callable[..., Any], context: Any = MISSING) -> Callable[..., Any]:
    """
    Bind an explicit context as the callback's first argument.

    Without a context (or with None) the callback is returned untouched.
    """
    if context is MISSING or context is None:
        return callback
    return partial(callback, context)


# =============================================================================
# Numeric coercion
# =============================================================================

def is_numeric_like(value: Any) -> bool:
    """
    Check if a value is a finite number or text holding a complete numeral.

    Examples:
        is_numeric_like(3)        # True
        is_numeric_like(" 2.5 ")  # True
        is_numeric_like("1e3")    # True
        is_numeric_like("3px")    # False
        is_numeric_like(True)     # False
    """
    if is_number(value):
        return math.isfinite(value)
    if is_text(value):
        text = value.strip()
        return bool(_NUMERAL_RE.fullmatch(text)) and math.isfinite(float(text))
    return False


def parse_numeric_like(value: Any) -> int | float | None:
    """
    Parse a numeric-like value.

    Numbers are returned unchanged. Numeric text becomes an int when it has
    no fraction or exponent, a float otherwise. Everything else gives None.
    """
    if not is_numeric_like(value):
        return None
    if is_number(value):
        return value

    text = value.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return float(text)


def to_number(value: Any) -> int | float:
    """
    Coerce any value to a number the way implicit arithmetic would.

    bool -> 0/1, None -> 0, blank text -> 0, numeric text -> its number,
    numbers unchanged, anything else -> nan.
    """
    if isinstance(value, bool):
        return int(value)
    if value is None:
        return 0
    if is_number(value):
        return value
    if is_text(value):
        if not value.strip():
            return 0
        parsed = parse_numeric_like(value)
        return math.nan if parsed is None else parsed
    return math.nan


def to_decimal(value: Any) -> Decimal:
    """Exact decimal form of a numeric-like value as it is written."""
    if is_text(value):
        return Decimal(value.strip())
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    # repr gives the shortest text that round-trips, e.g. 0.1 -> "0.1"
    return Decimal(repr(float(value)))


def decimal_places(value: Any) -> int:
    """
    Count the decimal digits of a numeric-like value.

    Examples:
        decimal_places("1.50")  # 2
        decimal_places(0.1)     # 1
        decimal_places(2.0)     # 0
        decimal_places(1e-07)   # 7
    """
    if not is_numeric_like(value):
        return 0
    if is_number(value) and float(value).is_integer():
        return 0

    exponent = to_decimal(value).as_tuple().exponent
    return max(0, -exponent)


# =============================================================================
# Equality
# =============================================================================

def strict_equal(a: Any, b: Any) -> bool:
    """
    Identity-style equality used for membership tests.

    Numbers compare by value (1 == 1.0, nan never equal), bools only equal
    bools, text equals text, and containers or other objects compare by
    identity.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return bool(a == b)
    if is_text(a) and is_text(b):
        return a == b
    return a is b


# =============================================================================
# Randomness
# =============================================================================

def make_rng(seed: int | None = None) -> np.random.Generator:
    """Build a dedicated generator, or return the ambient one without a seed."""
    if seed is None:
        return _ambient_rng
    return np.random.default_rng(seed)


def random_index(max_inclusive: int, rng: np.random.Generator | None = None) -> int:
    """Uniform random integer in [0, max_inclusive]."""
    if max_inclusive <= 0:
        return 0
    generator = rng if rng is not None else _ambient_rng
    return int(generator.integers(0, max_inclusive + 1))
