"""Functor type: Present[T] | EmptyType, a maybe-container with validator hooks."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

from iris_functor._config import get_config
from iris_functor._logging import get_logger, log_event
from iris_functor.errors import MissingValidatorError, NoSuchElementError, NullPayloadError

__all__ = ['Empty', 'EmptyType', 'Functor', 'Present', 'ValidatorSlot', 'empty', 'is_functor', 'maybe', 'of']

_log = get_logger(__name__)


class ValidatorSlot:
    """Mutable holder for a Present's validator.

    This is the only mutable state of a container. All slots compare equal
    and hash alike, so the validator never affects container equality.
    """

    __slots__ = ('predicate',)

    def __init__(self, predicate: Callable[[Any], bool] | None = None) -> None:
        self.predicate = predicate

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ValidatorSlot)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f'ValidatorSlot({self.predicate!r})'


class Present[T](msgspec.Struct, frozen=True, gc=True):
    """Present variant of Functor holding exactly one value of type T.

    A Present may also carry a validator, a predicate consulted only by the
    conditional hooks ``is_true``, ``is_false`` and ``infer``. ``validator()``
    sets it in place and returns the same container. The value itself never
    changes after construction.

    Examples:
        >>> of(5).map(lambda x: x * 2).get()
        10
        >>> seen = []
        >>> _ = of(5).validator(lambda n: n > 3).is_true(seen.append)
        >>> seen
        [5]
    """

    value: T
    validation: ValidatorSlot = msgspec.field(default_factory=ValidatorSlot)

    @property
    def guard(self) -> Callable[[T], bool] | None:
        """The current validator, or None."""
        return self.validation.predicate

    def __copy__(self) -> Present[T]:
        return Present(self.value, ValidatorSlot(self.guard))

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return False since this is Present."""
        return False

    def map[U](self, f: Callable[[T], U | None]) -> Present[U] | EmptyType:
        """Apply ``f`` to the value and rewrap the result with ``maybe``.

        A ``None`` result collapses to Empty.
        """
        return maybe(f(self.value))

    def flat_map[U](self, f: Callable[[T], Present[U] | EmptyType]) -> Present[U] | EmptyType:
        """Return the container produced by ``f``, without rewrapping it."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | EmptyType:
        """Return self if the predicate holds for the value, else Empty."""
        if predicate(self.value):
            return self
        return Empty

    def validator(self, predicate: Callable[[T], bool]) -> Present[T]:
        """Set ``predicate`` as the validator for the conditional hooks and return self."""
        self.validation.predicate = predicate
        return self

    def is_true(self, consumer: Callable[[T], object]) -> Present[T]:
        """Call ``consumer`` with the value if the validator accepts it.

        Raises:
            MissingValidatorError: If no validator has been set.
        """
        if self.guard is None:
            raise MissingValidatorError('is_true')
        if self.guard(self.value):
            consumer(self.value)
        return self

    def is_false(self, consumer: Callable[[T], object]) -> Present[T]:
        """Call ``consumer`` with the value if the validator rejects it.

        Raises:
            MissingValidatorError: If no validator has been set.
        """
        if self.guard is None:
            raise MissingValidatorError('is_false')
        if not self.guard(self.value):
            consumer(self.value)
        return self

    def if_present(self, consumer: Callable[[T], object]) -> None:
        consumer(self.value)

    def if_empty(self, consumer: Callable[[None], object]) -> None:  # noqa: ARG002
        pass

    def get(self) -> T:
        """Return the value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the value, ignoring the message."""
        return self.value

    def or_else_raise(self, factory: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the value; the exception factory is never called."""
        return self.value

    def or_else(self, other: T) -> T:  # noqa: ARG002
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        return self.value

    def or_(self, supplier: Callable[[], Present[T] | EmptyType]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged; the supplier is never called."""
        return self

    def stream(self) -> Iterator[T]:
        """Return a fresh iterator yielding the value once."""
        yield self.value

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def infer[R](
        self,
        true_handler: Callable[[], R | None] | None,
        false_handler: Callable[[], R | None] | None,
    ) -> Present[R] | EmptyType:
        """Run one of two handlers depending on the validator's verdict.

        The chosen handler's result is rewrapped with ``maybe``, so a handler
        returning None (or a handler that is itself None) yields Empty.

        Without a validator this returns Empty rather than raising, unless
        the library was initialized with ``strict_infer=True``.

        Raises:
            MissingValidatorError: If no validator is set and strict_infer is on.
        """
        if self.guard is None:
            if get_config().strict_infer:
                raise MissingValidatorError('infer')
            log_event(_log, 'infer_without_validator', value_type=type(self.value).__name__)
            return Empty
        handler = true_handler if self.guard(self.value) else false_handler
        if handler is None:
            return Empty
        return maybe(handler())

    def zip[U](self, other: Present[U] | EmptyType) -> Present[tuple[T, U]] | EmptyType:
        """Pair this value with ``other``'s if both are present."""
        if isinstance(other, Present):
            return Present((self.value, other.value))
        return Empty

    def flatten[U](self: Present[Present[U] | EmptyType]) -> Present[U] | EmptyType:
        """Collapse a nested Functor one level.

        Raises:
            TypeError: If the value is not itself a Functor.
        """
        if not is_functor(self.value):
            msg = f'Cannot flatten Present holding {type(self.value).__name__}'
            raise TypeError(msg)
        return self.value

    def fold[U](self, if_empty: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``."""
        return f(self.value)

    def to_list(self) -> list[T]:
        return [self.value]

    def __or__[U](self, f: Callable[[T], Any]) -> Present[U] | EmptyType:
        """Pipe operator: ``Present(x) | f`` maps f, keeping Functor results as-is."""
        result = f(self.value)
        if is_functor(result):
            return result
        return maybe(result)


class EmptyType(msgspec.Struct, frozen=True, gc=False):
    """Empty variant of Functor representing the absence of a value.

    Empty holds no state at all, so it cannot carry a validator: the
    conditional hooks short-circuit before any validator would be consulted.
    Use the ``Empty`` constant (or ``empty()``) instead of instantiating
    directly. Every EmptyType instance compares equal to every other.

    Examples:
        >>> Empty.is_empty()
        True
        >>> Empty.or_else(0)
        0
    """

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return True since this is Empty."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> EmptyType:
        """Return Empty since there's no value to map."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> EmptyType:
        """Return Empty since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> EmptyType:
        """Return self unchanged."""
        return self

    def validator(self, _predicate: Callable[[Any], bool]) -> EmptyType:
        """Return self; an empty container has no value to validate."""
        return self

    def is_true(self, _consumer: Callable[[Any], object]) -> EmptyType:
        """No-op on Empty, even without a validator."""
        return self

    def is_false(self, _consumer: Callable[[Any], object]) -> EmptyType:
        """No-op on Empty, even without a validator."""
        return self

    def if_present(self, _consumer: Callable[[Any], object]) -> None:
        pass

    def if_empty(self, consumer: Callable[[None], object]) -> None:
        """Call ``consumer`` with None, the absent payload."""
        consumer(None)

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            NoSuchElementError: Always, with ``msg``.
        """
        raise NoSuchElementError(msg)

    def or_else_raise(self, factory: Callable[[], BaseException] | None = None) -> NoReturn:
        """Raise the exception built by ``factory``, or NoSuchElementError.

        The exception returned by ``factory`` is raised as-is.
        """
        if factory is None:
            raise NoSuchElementError
        raise factory()

    def or_else[T](self, other: T) -> T:
        return other

    def or_else_get[T](self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_[T](self, supplier: Callable[[], Present[T] | EmptyType]) -> Present[T] | EmptyType:
        """Return the container produced by ``supplier``."""
        return supplier()

    def stream(self) -> Iterator[Any]:
        """Return a fresh, already exhausted iterator."""
        return iter(())

    def __iter__(self) -> Iterator[Any]:
        return self.stream()

    def infer(
        self,
        _true_handler: Callable[[], Any] | None,
        _false_handler: Callable[[], Any] | None,
    ) -> EmptyType:
        """Return Empty; there is no value for a validator to judge."""
        return self

    def zip(self, _other: Present[Any] | EmptyType) -> EmptyType:
        return self

    def flatten(self) -> EmptyType:
        return self

    def fold[U](self, if_empty: U, _f: Callable[[Any], U]) -> U:
        return if_empty

    def to_list(self) -> list[Any]:
        return []

    def __or__(self, _f: Callable[[Any], Any]) -> EmptyType:
        """Pipe operator returns Empty unchanged."""
        return self


Empty: EmptyType = EmptyType()
"""Singleton instance representing the absence of a value."""


type Functor[T] = Present[T] | EmptyType


def is_functor(obj: object) -> TypeIs[Present[Any] | EmptyType]:
    """Return True if ``obj`` is a Present or EmptyType instance."""
    return isinstance(obj, Present | EmptyType)


def of[T](value: T | None) -> Present[T]:
    """Wrap a value that must not be None.

    Raises:
        NullPayloadError: If ``value`` is None.
    """
    if value is None:
        raise NullPayloadError
    return Present(value)


def maybe[T](value: T | None) -> Present[T] | EmptyType:
    """Wrap ``value``, mapping None to Empty."""
    if value is None:
        return Empty
    return Present(value)


def empty() -> EmptyType:
    """Return the canonical empty container."""
    return Empty
