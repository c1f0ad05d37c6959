"""Formatting utilities for presenting registry contents."""

import functools
from typing import Any, Callable, Hashable


def format_event(event: Hashable) -> str:
    """Format an event identifier for display.

    Strings are quoted so that ``'1'`` and ``1`` stay distinguishable:
    - 'ready' -> "'ready'"
    - object() -> '<object object at 0x...>'

    Args:
        event: Event identifier

    Returns:
        Formatted string representation
    """
    return repr(event)


def format_callback(callback: Callable[..., Any]) -> str:
    """Format a listener callback for display.

    Uses the qualified name where one exists:
    - module-level function -> 'handler'
    - bound method -> 'Widget.refresh'
    - functools.partial(handler, 1) -> 'partial(handler)'

    Args:
        callback: Callable to describe

    Returns:
        Human-readable name
    """
    if isinstance(callback, functools.partial):
        return f"partial({format_callback(callback.func)})"
    name = getattr(callback, '__qualname__', None) or getattr(callback, '__name__', None)
    if name:
        return name
    return type(callback).__name__
