# =============================================================================
# arraykit/registry.py - Handler Registry
# =============================================================================
# Centralized registry for all collection handlers.
# Provides registration, lookup, listing, and documentation export.
# =============================================================================

from __future__ import annotations

from typing import Any, Callable

from arraykit.exceptions import HandlerAlreadyRegisteredError
from arraykit.types import HandlerExample, HandlerInfo, ParamDef


# Global registry: name -> HandlerInfo
HANDLER_REGISTRY: dict[str, HandlerInfo] = {}


def register_handler(
    name: str,
    category: str,
    description: str,
    *,
    validator: Callable[..., bool] | None = None,
    default: Any = None,
    params: list[ParamDef] | None = None,
    examples: list[HandlerExample] | None = None,
):
    """
    Decorator to register a handler function.

    Usage:
        @register_handler(
            "unique",
            category="sequence",
            description="Remove repeated values",
            validator=lambda array, *args, **kwargs: is_sequence(array),
        )
        def unique(array, keep_last=False):
            ...

    The function itself is returned unchanged so it stays directly callable;
    the validator and default only apply when called through the Engine.
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in HANDLER_REGISTRY:
            raise HandlerAlreadyRegisteredError(name)

        HANDLER_REGISTRY[name] = HandlerInfo(
            name=name,
            category=category,
            description=description,
            func=func,
            validator=validator,
            default=default,
            params=params or [],
            examples=examples or [],
        )
        return func
    return decorator


def unregister_handler(name: str) -> HandlerInfo | None:
    """Remove a handler from the registry, returning its info if present."""
    return HANDLER_REGISTRY.pop(name, None)


def get_handler(name: str) -> Callable[..., Any] | None:
    """Get a handler function by name."""
    info = HANDLER_REGISTRY.get(name)
    return info.func if info is not None else None


def list_handlers(category: str | None = None) -> list[str]:
    """
    List all registered handler names.

    Args:
        category: If provided, filter by category (e.g., "aggregate")

    Returns:
        List of handler names
    """
    if category is None:
        return list(HANDLER_REGISTRY.keys())

    return [
        name for name, info in HANDLER_REGISTRY.items()
        if info.category == category
    ]


def get_handler_info(name: str) -> HandlerInfo | None:
    """Get metadata about a handler."""
    return HANDLER_REGISTRY.get(name)


def get_all_handlers_info() -> dict[str, HandlerInfo]:
    """Get info for all registered handlers."""
    return dict(HANDLER_REGISTRY)


def get_examples_for_handler(name: str) -> list[dict]:
    """
    Get worked examples for a specific handler.

    Returns list of dicts with args, kwargs, expected, description.
    """
    info = get_handler_info(name)
    if info is None:
        return []

    return [
        {
            "args": ex.args,
            "kwargs": ex.kwargs,
            "expected": ex.expected,
            "description": ex.description,
        }
        for ex in info.examples
    ]


def get_all_examples() -> list[dict]:
    """
    Get all worked examples from all handlers.

    Returns:
        List of dicts with handler_name, category, args, kwargs, expected
    """
    all_examples = []

    for name, info in HANDLER_REGISTRY.items():
        for ex in info.examples:
            all_examples.append({
                "handler_name": name,
                "category": info.category,
                "args": ex.args,
                "kwargs": ex.kwargs,
                "expected": ex.expected,
                "description": ex.description,
            })

    return all_examples


def _format_arg(value: Any) -> str:
    if callable(value):
        return getattr(value, "__name__", repr(value))
    return repr(value)


def export_handlers_documentation() -> str:
    """Export documentation for all handlers in markdown format."""
    lines = ["# arraykit handlers\n"]

    # Group by category
    categories: dict[str, list[str]] = {}
    for name, info in HANDLER_REGISTRY.items():
        categories.setdefault(info.category, []).append(name)

    for category, names in sorted(categories.items()):
        lines.append(f"\n## {category.upper()}\n")

        for name in sorted(names):
            info = HANDLER_REGISTRY[name]

            lines.append(f"\n### `{name}`\n")
            lines.append(f"{info.description}\n")
            lines.append(f"Fallback value: `{info.default!r}`\n")

            if info.params:
                lines.append("\n**Parameters:**\n")
                for p in info.params:
                    req = "(required)" if p.required else f"(default: {p.default!r})"
                    lines.append(f"- `{p.name}`: {p.type} {req} - {p.description}")

            if info.examples:
                lines.append("\n**Examples:**\n")
                for ex in info.examples[:3]:
                    args = ", ".join(_format_arg(a) for a in ex.args)
                    lines.append(f"- `{name}({args})` -> `{ex.expected!r}`")

    return "\n".join(lines)
