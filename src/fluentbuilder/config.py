"""
Module-level configuration for the fluent builder.

Holds the settings ``FluentBuilder.build()`` consults when reporting an
instantiation failure. The active config is read at build time, so changes
apply to every builder, including ones created earlier.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BuilderConfig:
    """Reporting options for instantiation failures.

    Attributes:
        failure_log_level: Level of the "failed to instantiate" log record
        include_failure_cause: Append the underlying exception to the failure
            message and attach its traceback to a debug record
    """
    failure_log_level: int = logging.INFO
    include_failure_cause: bool = True


_DEFAULT_CONFIG = BuilderConfig()
_builder_config: Optional[BuilderConfig] = None


def set_builder_config(config: BuilderConfig) -> None:
    """Set the active builder config.

    Args:
        config: The config instance to use for subsequent builds
    """
    if not isinstance(config, BuilderConfig):
        raise TypeError(f"Expected BuilderConfig, got {type(config).__name__}")
    global _builder_config
    _builder_config = config


def get_builder_config() -> BuilderConfig:
    """Get the active builder config, falling back to the defaults."""
    return _builder_config if _builder_config is not None else _DEFAULT_CONFIG


def reset_builder_config() -> None:
    """Restore the default config."""
    global _builder_config
    _builder_config = None
