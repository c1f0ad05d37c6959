"""Core registry and dispatch engine."""

from .listener import Listener
from .emitter import EventEmitter

__all__ = [
    'Listener',
    'EventEmitter',
]
