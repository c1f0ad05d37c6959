"""Configuration models and exceptions for the event emitter."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "EVENTEMITTER_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


# --- CUSTOM EXCEPTIONS ---

class EventEmitterError(Exception):
    """Base exception for event emitter errors."""


class ConfigError(EventEmitterError):
    """Configuration loading error."""


class InvalidListenerError(EventEmitterError, TypeError):
    """Raised when a listener callback is missing or not callable."""


# --- CONFIGURATION DATACLASSES ---

@dataclass
class EmitterConfig:
    """Configuration for emitter instances.

    ``max_listeners`` of 0 means no limit.
    """
    max_listeners: int = 0
    thread_safe: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"
    log_file: Optional[str] = None


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: dict, section_name: str):
    """Safely load a dataclass from a dictionary.

    Ignores unknown keys and logs warnings for them.

    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data
        section_name: Name of config section (for logging)

    Returns:
        Instance of dclass_type with filtered data
    """
    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in (data or {}).items():
        if k in valid_keys:
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    return dclass_type(**filtered_data)


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean flag from an environment string."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value '{value}' for {name}.")


def parse_int(value: str, name: str) -> int:
    """Parse a non-negative integer from an environment string."""
    try:
        result = int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid integer value '{value}' for {name}.") from e
    if result < 0:
        raise ConfigError(f"{name} must be >= 0, got {result}.")
    return result


@dataclass
class AppConfig:
    """Main configuration container."""
    emitter: EmitterConfig
    logging: LoggingConfig

    @classmethod
    def load(cls, config_path: Path | str) -> 'AppConfig':
        """Load configuration from a YAML file.

        Args:
            config_path: Path to config.yaml file

        Returns:
            AppConfig instance with loaded configuration

        Raises:
            ConfigError: If file not found or YAML parsing fails
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file '{path}' must contain a mapping.")

        emitter = safe_load_dataclass(EmitterConfig, data.get('emitter', {}), 'emitter')
        if not isinstance(emitter.max_listeners, int) or emitter.max_listeners < 0:
            raise ConfigError(
                f"emitter.max_listeners must be a non-negative integer, "
                f"got {emitter.max_listeners!r}."
            )

        return cls(
            emitter=emitter,
            logging=safe_load_dataclass(LoggingConfig, data.get('logging', {}), 'logging')
        )

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, dotenv_path: Optional[Path] = None) -> 'AppConfig':
        """Build configuration from environment variables.

        A ``.env`` file is loaded first (without overriding variables that
        are already set). Recognized variables, shown with the default
        prefix: ``EVENTEMITTER_MAX_LISTENERS``, ``EVENTEMITTER_THREAD_SAFE``,
        ``EVENTEMITTER_LOG_LEVEL`` and ``EVENTEMITTER_LOG_FILE``.

        Raises:
            ConfigError: If a variable holds an unparsable value
        """
        load_dotenv(dotenv_path)

        emitter = EmitterConfig()
        log_config = LoggingConfig()

        max_listeners = os.getenv(f"{prefix}MAX_LISTENERS")
        if max_listeners is not None:
            emitter.max_listeners = parse_int(max_listeners, f"{prefix}MAX_LISTENERS")

        thread_safe = os.getenv(f"{prefix}THREAD_SAFE")
        if thread_safe is not None:
            emitter.thread_safe = parse_bool(thread_safe, f"{prefix}THREAD_SAFE")

        log_level = os.getenv(f"{prefix}LOG_LEVEL")
        if log_level:
            log_config.level = log_level

        log_file = os.getenv(f"{prefix}LOG_FILE")
        if log_file:
            log_config.log_file = log_file

        return cls(emitter=emitter, logging=log_config)
