"""In-process publish/subscribe event emitter."""

from .config import (
    AppConfig,
    EmitterConfig,
    LoggingConfig,
    EventEmitterError,
    ConfigError,
    InvalidListenerError,
)
from .core import EventEmitter, Listener

__version__ = "1.0.0"

__all__ = [
    'EventEmitter',
    'Listener',
    'AppConfig',
    'EmitterConfig',
    'LoggingConfig',
    'EventEmitterError',
    'ConfigError',
    'InvalidListenerError',
]
