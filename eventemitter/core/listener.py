"""Listener record stored in the emitter registry."""

import types
from dataclasses import dataclass
from typing import Any, Callable

from ..config import InvalidListenerError


@dataclass(frozen=True, eq=False)
class Listener:
    """A registered callback.

    Records compare by identity, so two registrations of the same callback
    stay distinct entries in the registry.
    """
    callback: Callable[..., Any]
    context: Any
    once: bool = False

    def __post_init__(self):
        if not callable(self.callback):
            raise InvalidListenerError(
                f"Listener callback must be callable, got {type(self.callback).__name__}"
            )

    def matches(self, callback: Callable[..., Any], context: Any = None, once: bool = False) -> bool:
        """Check whether this record satisfies the given removal filters.

        The context filter applies only when a context is given, and the
        once filter only when set.
        """
        if self.callback != callback:
            return False
        if once and not self.once:
            return False
        if context is not None and self.context is not context:
            return False
        return True

    def invoke(self, owner: Any, args: tuple, kwargs: dict) -> Any:
        """Call the callback with its context as receiver.

        Plain functions registered with a context other than ``owner`` are
        bound to that context and receive it as their first argument. Bound
        methods, partials, callable objects and builtins have no receiver
        slot and are called unchanged.
        """
        fn = self.callback
        if self.context is not owner and isinstance(fn, types.FunctionType):
            fn = types.MethodType(fn, self.context)
        return fn(*args, **kwargs)
