# =============================================================================
# arraykit/handlers/transform.py - Kind-Preserving filter / map
# =============================================================================
# One traversal engine shared by filter and map. Each container kind has a
# view that knows how to traverse it, how to keep or put a callback result,
# and how to assemble the final container:
#
#   list/tuple -> same sequence type
#   mapping    -> dict with a subset (filter) or all (map) of the keys
#   str        -> str, results joined back together
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable

from arraykit.helpers import bind_callback, classify, is_collection, is_text
from arraykit.registry import register_handler
from arraykit.types import MISSING, HandlerExample, ParamDef, ValueKind

logger = logging.getLogger(__name__)


# =============================================================================
# Views
# =============================================================================

class CollectionView:
    """Traversal and reassembly of one container kind."""

    def __init__(self, target: Any):
        self.target = target

    def items(self) -> Iterator[tuple[Any, Any]]:
        raise NotImplementedError

    def new_result(self) -> Any:
        return []

    def keep(self, result: Any, key: Any, value: Any) -> None:
        """Store an element that passed a filter."""
        result.append(value)

    def put(self, result: Any, key: Any, value: Any) -> None:
        """Store a mapped value at the element's position."""
        result.append(value)

    def finish(self, result: Any) -> Any:
        return result


class SequenceView(CollectionView):

    def items(self) -> Iterator[tuple[Any, Any]]:
        return enumerate(self.target)

    def finish(self, result: list[Any]) -> list[Any] | tuple[Any, ...]:
        if isinstance(self.target, tuple):
            return tuple(result)
        return result


class TextView(CollectionView):
    """Characters in, str out. Callbacks see the whole string as container."""

    def items(self) -> Iterator[tuple[Any, Any]]:
        return enumerate(self.target)

    def finish(self, result: list[Any]) -> str:
        return "".join("" if part is None else str(part) for part in result)


class MappingView(CollectionView):

    def items(self) -> Iterator[tuple[Any, Any]]:
        return iter(self.target.items())

    def new_result(self) -> dict[Any, Any]:
        return {}

    def keep(self, result: dict[Any, Any], key: Any, value: Any) -> None:
        result[key] = value

    def put(self, result: dict[Any, Any], key: Any, value: Any) -> None:
        result[key] = value


_VIEWS: dict[ValueKind, type[CollectionView]] = {
    ValueKind.SEQUENCE: SequenceView,
    ValueKind.TEXT: TextView,
    ValueKind.MAPPING: MappingView,
}


def view_for(target: Any) -> CollectionView | None:
    """Get the view for a target, or None for unsupported kinds."""
    view_cls = _VIEWS.get(classify(target))
    return view_cls(target) if view_cls is not None else None


# =============================================================================
# Engine
# =============================================================================

def _transform(
    target: Any,
    callback: Any,
    context: Any,
    store: Callable[[CollectionView, Any, Any, Any, Any], None],
) -> Any:
    if not callable(callback):
        logger.debug("transform: callback is not callable, returning None")
        return None

    view = view_for(target)
    if view is None:
        logger.debug(f"transform: unsupported target type {type(target).__name__}")
        return None

    func = bind_callback(callback, context)
    result = view.new_result()
    for key, value in view.items():
        store(view, result, key, value, func(value, key, target))

    return view.finish(result)


def _keep_truthy(view: CollectionView, result: Any, key: Any, value: Any, outcome: Any) -> None:
    if outcome:
        view.keep(result, key, value)


def _put_outcome(view: CollectionView, result: Any, key: Any, value: Any, outcome: Any) -> None:
    view.put(result, key, outcome)


def _is_transformable(target: Any, *args: Any, **kwargs: Any) -> bool:
    return is_collection(target) or is_text(target)


_TRANSFORM_PARAMS = [
    ParamDef(name="target", type="list | tuple | Mapping | str", description="Collection to traverse"),
    ParamDef(
        name="callback",
        type="Callable",
        description="Called as callback(value, index_or_key, target)",
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
    "filter",
    category="transform",
    description="Keep the elements for which the callback is truthy; "
                "the result has the same container kind as the target",
    validator=_is_transformable,
    default=None,
    params=_TRANSFORM_PARAMS,
    examples=[
        HandlerExample(
            args=([1, 2, 3, 4], lambda value, index, target: value % 2 == 0),
            expected=[2, 4],
            description="Even numbers",
        ),
        HandlerExample(
            args=({"a": 1, "b": 2, "c": 3}, lambda value, key, target: value > 1),
            expected={"b": 2, "c": 3},
            description="Mapping keeps its keys",
        ),
        HandlerExample(
            args=("a1b2c3", lambda char, index, text: char.isalpha()),
            expected="abc",
            description="Text stays text",
        ),
    ],
)
def filter_collection(target: Any, callback: Any, context: Any = MISSING) -> Any:
    """
    Keep the elements of target for which callback returns a truthy value.

    Returns None when callback is not callable or target is not a
    sequence, mapping or str.
    """
    return _transform(target, callback, context, _keep_truthy)


@register_handler(
    "map",
    category="transform",
    description="Replace every element with the callback's result; "
                "the result has the same container kind and keys as the target",
    validator=_is_transformable,
    default=None,
    params=_TRANSFORM_PARAMS,
    examples=[
        HandlerExample(
            args=([1, 2, 3], lambda value, index, target: value * 10),
            expected=[10, 20, 30],
            description="Scale every element",
        ),
        HandlerExample(
            args=({"a": 1, "b": 2}, lambda value, key, target: f"{key}={value}"),
            expected={"a": "a=1", "b": "b=2"},
            description="Mapping values",
        ),
        HandlerExample(
            args=("abc", lambda char, index, text: char.upper()),
            expected="ABC",
            description="Text stays text",
        ),
    ],
)
def map_collection(target: Any, callback: Any, context: Any = MISSING) -> Any:
    """
    Replace every element of target with callback(value, key, target).

    Returns None when callback is not callable or target is not a
    sequence, mapping or str.
    """
    return _transform(target, callback, context, _put_outcome)
