# =============================================================================
# arraykit - Collection Algorithms
# =============================================================================
# Generic sequence/collection handlers: ranges, kind-preserving filter/map,
# numeric aggregation, deduplication, flattening, shuffling and folds.
#
# Every handler is a plain function, and is also registered by name with a
# validator and a fallback value for dispatch through the Engine.
#
# Usage:
#   import arraykit
#
#   arraykit.make_range(1, 2, 0.5)          # [1.0, 1.5, 2.0]
#   arraykit.call("unique", [1, "1", 2])    # [1, 2]
#
#   engine = arraykit.Engine()
#   result = engine.execute([[3, [1]], [3]], [{"op": "flatten"}, {"op": "unique"}])
#   result.value                            # [3, 1]
# =============================================================================

from arraykit.registry import (
    register_handler,
    unregister_handler,
    get_handler,
    list_handlers,
    get_handler_info,
    get_all_handlers_info,
    get_all_examples,
    export_handlers_documentation,
    HANDLER_REGISTRY,
)
from arraykit.engine import Engine, ExecutionResult, StepResult, call
from arraykit.exceptions import (
    ArrayKitError,
    EmptyReductionError,
    HandlerAlreadyRegisteredError,
    UnknownHandlerError,
)
from arraykit.types import (
    MISSING,
    AggregationResult,
    HandlerExample,
    HandlerInfo,
    ParamDef,
    ReduceState,
    ValueKind,
)

# Import handlers to register them
# This must come after registry imports
from arraykit import handlers  # noqa: F401, E402
from arraykit.handlers.aggregate import max_element, min_element, product, sum_collection
from arraykit.handlers.ranges import make_range
from arraykit.handlers.reduce import reduce_sequence
from arraykit.handlers.sequence import flatten, in_array, shuffle, unique
from arraykit.handlers.transform import filter_collection, map_collection

__version__ = "1.0.0"

__all__ = [
    # Registry
    "register_handler",
    "unregister_handler",
    "get_handler",
    "list_handlers",
    "get_handler_info",
    "get_all_handlers_info",
    "get_all_examples",
    "export_handlers_documentation",
    "HANDLER_REGISTRY",
    # Engine
    "Engine",
    "ExecutionResult",
    "StepResult",
    "call",
    # Errors
    "ArrayKitError",
    "EmptyReductionError",
    "HandlerAlreadyRegisteredError",
    "UnknownHandlerError",
    # Types
    "MISSING",
    "AggregationResult",
    "HandlerExample",
    "HandlerInfo",
    "ParamDef",
    "ReduceState",
    "ValueKind",
    # Handlers
    "make_range",
    "filter_collection",
    "map_collection",
    "sum_collection",
    "product",
    "max_element",
    "min_element",
    "in_array",
    "unique",
    "flatten",
    "shuffle",
    "reduce_sequence",
]
