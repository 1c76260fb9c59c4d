# =============================================================================
# arraykit/types.py - Core Types
# =============================================================================
# Defines the types shared by the helpers, the handlers and the registry.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


# =============================================================================
# Enums
# =============================================================================

class ValueKind(str, Enum):
    """Classification of a value as seen by the handlers."""
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    TEXT = "text"
    NUMERIC = "numeric"
    CALLABLE = "callable"
    OTHER = "other"


# =============================================================================
# Absent-argument marker
# =============================================================================

class _Missing:
    """
    Marker for an optional argument that was not supplied.

    Distinct from None so that passing None explicitly (e.g. as a reduce
    seed) behaves differently from omitting the argument.
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self


MISSING = _Missing()


# =============================================================================
# Transient records
# =============================================================================

@dataclass
class AggregationResult:
    """Best element seen so far by max/min, with its comparison value."""
    value: Any
    computed: Any


@dataclass
class ReduceState:
    """Accumulator and position carried through a fold."""
    accumulator: Any
    index: int


# =============================================================================
# Handler metadata
# =============================================================================

@dataclass
class HandlerExample:
    """
    A worked example for a handler.

    Examples double as documentation and as test cases: every registered
    example is executed by the test suite.
    """
    args: tuple[Any, ...]
    expected: Any
    description: str = ""
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass
class ParamDef:
    """
    Definition of a handler parameter.

    Used for documentation.
    """
    name: str
    type: type | str
    required: bool = True
    default: Any = None
    description: str = ""


@dataclass
class HandlerInfo:
    """
    Metadata about a registered handler.

    `validator` receives the raw call arguments; when it returns False the
    engine skips the handler and returns a copy of `default` instead.
    """
    name: str
    category: str
    description: str
    func: Callable[..., Any]
    validator: Callable[..., bool] | None = None
    default: Any = None
    params: list[ParamDef] = field(default_factory=list)
    examples: list[HandlerExample] = field(default_factory=list)
