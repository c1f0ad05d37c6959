"""Configuration package for the event emitter."""

from .models import (
    AppConfig,
    EmitterConfig,
    LoggingConfig,
    EventEmitterError,
    ConfigError,
    InvalidListenerError,
    safe_load_dataclass,
)

__all__ = [
    'AppConfig',
    'EmitterConfig',
    'LoggingConfig',
    'EventEmitterError',
    'ConfigError',
    'InvalidListenerError',
    'safe_load_dataclass',
]
