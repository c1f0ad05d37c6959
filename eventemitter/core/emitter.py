"""Synchronous event emitter.

Callbacks are registered against event identifiers and invoked in
registration order when the event is emitted. Any hashable value can be an
event identifier; sentinel objects work as symbol-like keys.

Example:
    >>> emitter = EventEmitter()
    >>> emitter.on('progress', lambda percent: print(f"Progress: {percent}%"))
    EventEmitter(events=1, listeners=1)
    >>> emitter.emit('progress', 50)
    Progress: 50%
    True
"""

import logging
import threading
from contextlib import nullcontext
from typing import Any, Callable, Hashable, Optional

from ..config import EmitterConfig
from ..utils.formatters import format_callback, format_event
from .listener import Listener

logger = logging.getLogger(__name__)


class EventEmitter:
    """In-process publish/subscribe registry.

    Each event maps to a non-empty list of ``Listener`` records kept in
    registration order. An event without listeners has no entry at all.

    Dispatch works on a snapshot taken when ``emit`` starts: listeners added
    by a callback wait for the next emit, and listeners removed by a callback
    are skipped for the rest of the current one. One-shot listeners are
    removed right before they are invoked, so a callback that re-emits its
    own event never sees itself again.

    Callback exceptions are not caught; they propagate out of ``emit`` and
    abort the remaining listeners.
    """

    def __init__(self, max_listeners: int = 0, thread_safe: bool = False):
        """Initialize an empty registry.

        Args:
            max_listeners: Per-event listener count above which a warning is
                logged (0 disables the check)
            thread_safe: Guard every operation with a reentrant lock
        """
        self._events: dict[Hashable, list[Listener]] = {}
        self._max_listeners = 0
        self._warned: set = set()
        self._lock = threading.RLock() if thread_safe else nullcontext()
        self.set_max_listeners(max_listeners)

    @classmethod
    def from_config(cls, config: EmitterConfig) -> 'EventEmitter':
        """Create an emitter from an ``EmitterConfig``."""
        return cls(max_listeners=config.max_listeners, thread_safe=config.thread_safe)

    @property
    def prefixed(self) -> bool:
        """Whether event names are rewritten with a prefix. Never, dict keys can't collide."""
        return False

    # --- REGISTRATION ---

    def on(self, event: Hashable, callback: Callable[..., Any], context: Any = None) -> 'EventEmitter':
        """Subscribe to an event.

        Args:
            event: Event identifier to listen for
            callback: Callable invoked with the arguments passed to ``emit``
            context: Receiver for the callback (defaults to this emitter).
                A plain function registered with another context is called
                with it as first argument. Other callables (bound methods,
                ``functools.partial``, callable objects, builtins) are
                called unchanged; the context then only narrows ``off``.

        Returns:
            Self for method chaining

        Raises:
            InvalidListenerError: If callback is not callable
        """
        return self._add(event, callback, context, once=False)

    add_listener = on

    def once(self, event: Hashable, callback: Callable[..., Any], context: Any = None) -> 'EventEmitter':
        """Subscribe to the next emission of an event only.

        The listener is removed before it is invoked. ``context`` is
        handled as in ``on``.
        """
        return self._add(event, callback, context, once=True)

    def _add(self, event: Hashable, callback: Callable[..., Any], context: Any, once: bool) -> 'EventEmitter':
        listener = Listener(callback, self if context is None else context, once)

        with self._lock:
            records = self._events.get(event)
            if records is None:
                records = self._events[event] = []
            records.append(listener)
            count = len(records)

            if self._max_listeners and count > self._max_listeners and event not in self._warned:
                self._warned.add(event)
                logger.warning(
                    "Possible listener leak: %d listeners added for event %s (max %d).",
                    count, format_event(event), self._max_listeners
                )

        logger.debug(
            "Added %slistener %s for event %s",
            "one-shot " if once else "", format_callback(callback), format_event(event)
        )
        return self

    # --- REMOVAL ---

    def off(
        self,
        event: Hashable,
        callback: Optional[Callable[..., Any]] = None,
        context: Any = None,
        once: bool = False,
    ) -> 'EventEmitter':
        """Unsubscribe from an event.

        Without a callback every listener for the event is removed. With a
        callback only records whose callback matches are removed, further
        narrowed to a given context and to one-shot records when ``once`` is
        set. Unknown events are ignored.

        Returns:
            Self for method chaining
        """
        with self._lock:
            self._remove(event, callback, context, once)
        return self

    remove_listener = off

    def _remove(self, event: Hashable, callback: Optional[Callable[..., Any]], context: Any, once: bool) -> None:
        records = self._events.get(event)
        if records is None:
            return

        kept = []
        if callback is not None:
            kept = [r for r in records if not r.matches(callback, context, once)]

        if kept:
            self._events[event] = kept
        else:
            self._drop(event)

        logger.debug(
            "Removed %d listener(s) for event %s",
            len(records) - len(kept), format_event(event)
        )

    def _discard(self, event: Hashable, listener: Listener) -> None:
        """Remove a single record, leaving identical registrations in place."""
        kept = [r for r in self._events.get(event, ()) if r is not listener]
        if kept:
            self._events[event] = kept
        elif event in self._events:
            self._drop(event)

    def _drop(self, event: Hashable) -> None:
        del self._events[event]
        self._warned.discard(event)

    def remove_all_listeners(self, event: Optional[Hashable] = None) -> 'EventEmitter':
        """Remove every listener of one event, or of all events when omitted."""
        with self._lock:
            if event is not None:
                if event in self._events:
                    self._drop(event)
                logger.debug("Removed all listeners for event %s", format_event(event))
            else:
                self._events = {}
                self._warned = set()
                logger.debug("Removed all listeners")
        return self

    # --- DISPATCH ---

    def emit(self, event: Hashable, /, *args: Any, **kwargs: Any) -> bool:
        """Invoke every listener registered for an event.

        Args:
            event: Event identifier to emit
            *args: Positional arguments forwarded to each callback
            **kwargs: Keyword arguments forwarded to each callback

        Returns:
            True if the event had listeners, False otherwise
        """
        with self._lock:
            records = self._events.get(event)
            if not records:
                return False

            snapshot = tuple(records)
            logger.debug("Emitting %s to %d listener(s)", format_event(event), len(snapshot))

            live = records
            live_ids = {id(r) for r in live}

            for listener in snapshot:
                # removals always replace the list, appends only add records
                # outside the snapshot
                current = self._events.get(event)
                if current is not live:
                    live = current
                    live_ids = {id(r) for r in live} if live else set()

                # removed by an earlier callback of this dispatch
                if id(listener) not in live_ids:
                    continue

                if listener.once:
                    self._discard(event, listener)

                listener.invoke(self, args, kwargs)

        return True

    # --- QUERY ---

    def listeners(self, event: Hashable, exists: bool = False) -> list[Callable[..., Any]] | bool:
        """Return the callbacks registered for an event.

        Args:
            event: Event identifier to look up
            exists: Only report whether the event has any listener

        Returns:
            A bool in ``exists`` mode, otherwise a new list of callbacks in
            registration order
        """
        with self._lock:
            records = self._events.get(event)
            if exists:
                return bool(records)
            if not records:
                return []
            return [r.callback for r in records]

    def listener_count(self, event: Hashable) -> int:
        """Number of listeners registered for an event."""
        with self._lock:
            return len(self._events.get(event, ()))

    def event_names(self) -> list[Hashable]:
        """Events that currently have listeners, in first-registration order."""
        with self._lock:
            return list(self._events)

    def set_max_listeners(self, n: int) -> 'EventEmitter':
        """Set the per-event listener count that triggers a leak warning.

        Exceeding the limit only logs; registration still succeeds. 0 means
        unlimited.
        """
        if n < 0:
            raise ValueError(f"max_listeners must be >= 0, got {n}")
        self._max_listeners = n
        return self

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def __repr__(self) -> str:
        total = sum(len(records) for records in self._events.values())
        return f"{type(self).__name__}(events={len(self._events)}, listeners={total})"
