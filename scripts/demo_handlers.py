#!/usr/bin/env python3
"""
Run every registered handler example and a small plan through the Engine.

Usage:
    python scripts/demo_handlers.py          # run examples and the demo plan
    python scripts/demo_handlers.py --docs   # print handler documentation
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from arraykit import Engine, export_handlers_documentation, get_all_examples
from arraykit.config import configure_logging


def run_examples(engine: Engine) -> int:
    """Run every registered example, returning the number of failures."""
    failures = 0

    for example in get_all_examples():
        name = example["handler_name"]
        actual = engine.call(name, *example["args"], **example["kwargs"])
        ok = actual == example["expected"]
        if not ok:
            failures += 1

        status = "PASS" if ok else "FAIL"
        print(f"  {status}: {name} - {example['description'] or 'example'} -> {actual!r}")

    return failures


def run_plan(engine: Engine) -> bool:
    """Flatten, dedupe and total some nested, partly textual numbers."""
    data = [[1, "2"], [3, ["2", 4.0]], "5"]
    plan = [
        {"op": "flatten"},
        {"op": "unique"},
        {"op": "reduce", "args": [lambda acc, value, index, array: acc + value, 0]},
    ]

    result = engine.execute(data, plan)
    for step in result.steps:
        print(f"  step {step.step_index} {step.operation}: {step.value!r} ({step.duration_ms:.2f} ms)")

    if not result.success:
        print(f"  Failed at step {result.error_step}: {result.error}")
    return result.success


def main():
    configure_logging()

    if "--docs" in sys.argv:
        print(export_handlers_documentation())
        return

    engine = Engine()

    print("=" * 60)
    print("HANDLER EXAMPLES")
    print("=" * 60)
    failures = run_examples(engine)

    print("\n" + "=" * 60)
    print("DEMO PLAN")
    print("=" * 60)
    plan_ok = run_plan(engine)

    if failures or not plan_ok:
        print(f"\n{failures} example(s) failed" + ("" if plan_ok else ", demo plan failed"))
        sys.exit(1)

    print("\nAll handlers working!")


if __name__ == "__main__":
    main()
