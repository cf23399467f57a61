"""
Deferred mutation chain builder.

A ``FluentBuilder`` records "set this field to that value" steps against a
target type and applies them only when ``build()`` is called::

    point = (
        FluentBuilder.of(Point)
        .append(Point.set_x, lambda: 3)
        .append("y", lambda: 4)
        .append("label", lambda: "origin", lambda p, v: p.x == 0)
        .build()
    )

Every ``append`` returns a new builder that links back to the one it was
called on, so builders are immutable and a common prefix can be shared by
several chains. Steps run in the order they were appended.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar, Union

from fluentbuilder.config import get_builder_config

logger = logging.getLogger(__name__)

T = TypeVar('T')

Supplier = Callable[[], Any]
Mutator = Callable[[Any, Any], None]
Guard = Callable[[Any, Any], bool]


def setter(name: str) -> Mutator:
    """Return a mutator that assigns ``value`` to attribute ``name``."""
    if not isinstance(name, str) or not name:
        raise TypeError(f"Attribute name must be a non-empty string, got {name!r}")

    def _set(obj: Any, value: Any) -> None:
        setattr(obj, name, value)

    _set.__name__ = f"set_{name}"
    _set.__qualname__ = f"setter.<{name}>"
    return _set


def _constant(value: Any) -> Supplier:
    return lambda: value


def _describe(target: Callable) -> str:
    return getattr(target, '__qualname__', None) or repr(target)


@dataclass(frozen=True)
class MutationStep:
    """One deferred unit of work applied during ``build()``.

    A conditional step calls ``supplier`` once for the guard and, if the guard
    holds, once more for the mutator. The two values are independent.
    """
    supplier: Supplier
    mutator: Mutator
    guard: Optional[Guard] = None

    @property
    def is_conditional(self) -> bool:
        return self.guard is not None

    def apply(self, obj: T) -> T:
        """Apply this step to ``obj`` and return it."""
        if self.guard is None:
            self.mutator(obj, self.supplier())
        elif self.guard(obj, self.supplier()):
            self.mutator(obj, self.supplier())
        return obj


class FluentBuilder(Generic[T]):
    """
    Immutable builder for any type with a zero-argument constructor.

    A root builder is bound to a target (a class or any zero-argument
    factory) and holds no steps. Each ``append`` produces a child node
    holding the new step plus a reference to its predecessor; nothing is
    evaluated until ``build()``.

    ``build()`` instantiates the target once and threads it through every
    step from the oldest to the newest. If the target cannot be instantiated
    the failure is logged and ``None`` is returned. Exceptions raised by
    suppliers, guards or mutators propagate to the caller.
    """

    def __init__(
        self,
        target: Callable[[], T],
        head: Optional['FluentBuilder[T]'] = None,
        step: Optional[MutationStep] = None,
    ):
        if not callable(target):
            raise TypeError(f"Builder target must be a class or zero-argument callable, got {target!r}")
        if (head is None) != (step is None):
            raise ValueError("A chained builder needs both a head and a step")
        self._target = target
        self._head = head
        self._step = step

    @classmethod
    def of(cls, target: Callable[[], T]) -> 'FluentBuilder[T]':
        """Create a root builder with no pending steps."""
        return cls(target)

    @classmethod
    def from_factory(cls, factory: Callable[[], T]) -> 'FluentBuilder[T]':
        """Create a root builder that instantiates through ``factory()``.

        Equivalent to ``of``; spelled separately for targets whose class
        constructor needs arguments.
        """
        return cls(factory)

    @property
    def target(self) -> Callable[[], T]:
        return self._target

    @property
    def head(self) -> Optional['FluentBuilder[T]']:
        """The builder this one was appended to (``None`` for a root)."""
        return self._head

    @property
    def steps(self) -> Tuple[MutationStep, ...]:
        """Pending steps in execution order."""
        return tuple(self._iter_steps())

    def _iter_steps(self) -> Iterator[MutationStep]:
        collected = []
        node = self
        while node._step is not None:
            collected.append(node._step)
            node = node._head
        return reversed(collected)

    def __len__(self) -> int:
        count = 0
        node = self
        while node._head is not None:
            count += 1
            node = node._head
        return count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_describe(self._target)}, steps={len(self)})"

    def append(
        self,
        mutator: Union[Mutator, str],
        supplier: Supplier,
        guard: Optional[Guard] = None,
    ) -> 'FluentBuilder[T]':
        """
        Return a new builder with one more step.

        Args:
            mutator: ``(obj, value) -> None`` callback, or an attribute name
            supplier: Zero-argument callable producing the value
            guard: Optional ``(obj, value) -> bool``; the mutator runs only if
                it returns true. The supplier is called again for the value
                handed to the mutator.

        Returns:
            A builder holding all prior steps plus this one. ``self`` is
            left unchanged.
        """
        if isinstance(mutator, str):
            mutator = setter(mutator)
        if not callable(mutator):
            raise TypeError(f"mutator must be callable or an attribute name, got {mutator!r}")
        if not callable(supplier):
            raise TypeError(f"supplier must be callable, got {supplier!r}")
        if guard is not None and not callable(guard):
            raise TypeError(f"guard must be callable, got {guard!r}")
        return type(self)(self._target, head=self, step=MutationStep(supplier, mutator, guard))

    # Alias
    map = append

    def with_(self, **fields: Any) -> 'FluentBuilder[T]':
        """Append one constant assignment per keyword, in keyword order."""
        builder = self
        for name, value in fields.items():
            builder = builder.append(setter(name), _constant(value))
        return builder

    def build(self) -> Optional[T]:
        """
        Instantiate the target and apply every step in append order.

        Returns:
            The mutated object, or ``None`` if the target could not be
            instantiated (no step is evaluated in that case).
        """
        name = _describe(self._target)
        logger.debug(f"Starting build operation for {name}")
        try:
            obj = self._target()
        except Exception as e:
            config = get_builder_config()
            message = f"Failed to instantiate {name}. Make sure it has a zero-argument constructor."
            if config.include_failure_cause:
                message += f" Cause: {type(e).__name__}: {e}"
                logger.debug(f"Instantiation of {name} raised", exc_info=True)
            logger.log(config.failure_log_level, message)
            logger.debug("Object can not be created, returning None")
            return None

        for step in self._iter_steps():
            obj = step.apply(obj)
        logger.debug(f"Built {name} with {len(self)} steps")
        return obj
