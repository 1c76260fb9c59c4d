# =============================================================================
# arraykit/engine.py - Handler Dispatch and Plan Execution
# =============================================================================
# Calls registered handlers by name, applying each handler's validator and
# fallback value, and runs plans (sequences of handler calls) where every
# step's output becomes the next step's first argument.
# =============================================================================

from __future__ import annotations

import copy
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from arraykit.exceptions import UnknownHandlerError
from arraykit.registry import get_handler_info

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Result of executing a single step in a plan."""
    step_index: int
    operation: str
    success: bool
    value: Any = None
    error: str | None = None
    duration_ms: float = 0.0


@dataclass
class ExecutionResult:
    """
    Result of executing an entire plan.

    Contains the final value and detailed results for each step.
    """
    success: bool
    value: Any = None
    steps: list[StepResult] = field(default_factory=list)
    error: str | None = None
    error_step: int | None = None
    total_duration_ms: float = 0.0

    @property
    def failed_steps(self) -> list[StepResult]:
        return [step for step in self.steps if not step.success]


class Engine:
    """
    Dispatcher for registered handlers.

    A plan is a list of operations; the running value is passed as the
    first argument of each one:
        [
            {"op": "flatten"},
            {"op": "unique", "kwargs": {"keep_last": True}},
            {"op": "reduce", "args": [lambda acc, v, i, a: acc + v, 0]},
        ]

    Usage:
        engine = Engine()
        engine.call("range", 1, 5)          # [1, 2, 3, 4, 5]

        result = engine.execute([[1, 2], [2, 3]], plan)
        if result.success:
            print(result.value)
        else:
            print(f"Failed at step {result.error_step}: {result.error}")
    """

    def __init__(self, stop_on_error: bool = True):
        """
        Initialize the engine.

        Args:
            stop_on_error: If True, stop plan execution on the first error.
                          If False, skip failed steps and keep the last good value.
        """
        self.stop_on_error = stop_on_error

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call a handler by name.

        When the handler's validator rejects the arguments, a copy of the
        handler's fallback value is returned without running it. Exceptions
        raised by the handler (including those from user callbacks) propagate.

        Raises:
            UnknownHandlerError: No handler is registered under name
        """
        info = get_handler_info(name)
        if info is None:
            raise UnknownHandlerError(name)

        if info.validator is not None and not info.validator(*args, **kwargs):
            logger.debug(f"{name}: arguments rejected by validator, returning fallback {info.default!r}")
            return copy.deepcopy(info.default)

        return info.func(*args, **kwargs)

    def execute(self, value: Any, plan: list[dict[str, Any]]) -> ExecutionResult:
        """
        Execute a plan on a value.

        Args:
            value: Input passed as the first argument of the first step
            plan: List of operations, each with an "op" key and optional
                  "args" (extra positional arguments) and "kwargs"

        Returns:
            ExecutionResult with success/failure, final value, and step details
        """
        start_time = time.time()
        current = value
        steps: list[StepResult] = []

        for i, step in enumerate(plan):
            step_start = time.time()
            op_name = step.get("op")

            if not op_name:
                outcome = StepResult(step_index=i, operation="", success=False, error=f"Step {i}: Missing 'op' key")
            else:
                try:
                    result = self.call(
                        op_name,
                        current,
                        *step.get("args", ()),
                        **step.get("kwargs", {}),
                    )
                    outcome = StepResult(step_index=i, operation=op_name, success=True, value=result)
                except Exception as e:
                    outcome = StepResult(
                        step_index=i,
                        operation=op_name,
                        success=False,
                        error=f"Step {i}: {e}",
                    )

            outcome.duration_ms = (time.time() - step_start) * 1000
            steps.append(outcome)

            if outcome.success:
                logger.debug(f"Step {i} ({op_name}) -> {outcome.value!r}")
                current = outcome.value
                continue

            logger.warning(outcome.error)
            if self.stop_on_error:
                return ExecutionResult(
                    success=False,
                    value=current,
                    steps=steps,
                    error=outcome.error,
                    error_step=i,
                    total_duration_ms=(time.time() - start_time) * 1000,
                )

        return ExecutionResult(
            success=True,
            value=current,
            steps=steps,
            total_duration_ms=(time.time() - start_time) * 1000,
        )

    def validate_plan(self, plan: list[dict[str, Any]]) -> tuple[bool, list[str]]:
        """
        Validate a plan without executing it.

        Checks that every step names a registered handler and that its
        arguments are well formed.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for i, step in enumerate(plan):
            op_name = step.get("op")

            if not op_name:
                errors.append(f"Step {i}: Missing 'op' key")
                continue

            if get_handler_info(op_name) is None:
                errors.append(f"Step {i}: Unknown handler '{op_name}'")
                continue

            if not isinstance(step.get("args", ()), (list, tuple)):
                errors.append(f"Step {i}: 'args' must be a list")
            if not isinstance(step.get("kwargs", {}), dict):
                errors.append(f"Step {i}: 'kwargs' must be a dict")

        return len(errors) == 0, errors


# Shared engine behind arraykit.call()
default_engine = Engine()


def call(name: str, *args: Any, **kwargs: Any) -> Any:
    """Call a handler by name on the default engine."""
    return default_engine.call(name, *args, **kwargs)
