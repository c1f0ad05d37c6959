"""Utility functions for the event emitter."""

from .formatters import format_event, format_callback
from .logging_setup import setup_logging, setup_logging_from_config

__all__ = [
    'format_event',
    'format_callback',
    'setup_logging',
    'setup_logging_from_config',
]
