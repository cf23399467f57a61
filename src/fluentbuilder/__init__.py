"""
Fluent builder for populating objects through deferred mutation steps.

Quick Start:
    >>> from fluentbuilder import FluentBuilder
    >>>
    >>> point = (
    ...     FluentBuilder.of(Point)
    ...     .append(Point.set_x, lambda: 3)
    ...     .append("y", lambda: 4)
    ...     .build()
    ... )

Behaviour:
    - Steps are recorded at append time and evaluated only by build()
    - Each append returns a new builder; earlier builders stay usable
    - Conditional steps take a guard (obj, value) -> bool
    - build() returns None when the target cannot be instantiated

Modules:
    - builder: FluentBuilder, MutationStep and the setter() helper
    - config: Reporting options for instantiation failures
"""

from fluentbuilder.builder import FluentBuilder, MutationStep, setter

from fluentbuilder.config import (
    BuilderConfig,
    set_builder_config,
    get_builder_config,
    reset_builder_config,
)

__all__ = [
    # Builder
    'FluentBuilder',
    'MutationStep',
    'setter',
    # Configuration
    'BuilderConfig',
    'set_builder_config',
    'get_builder_config',
    'reset_builder_config',
]

__version__ = '1.0.0'
__description__ = 'Immutable fluent builder applying deferred mutation steps'
