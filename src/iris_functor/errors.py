"""Error types raised when a Functor is forced into an invalid state."""

from __future__ import annotations

__all__ = [
    'FunctorError',
    'MissingValidatorError',
    'NoSuchElementError',
    'NullPayloadError',
]


class FunctorError(Exception):
    """Base class for all iris-functor errors."""


class NullPayloadError(FunctorError, ValueError):
    """A None payload was passed where a value was required."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Payload must not be None')


class MissingValidatorError(FunctorError):
    """A validator-gated operation ran on a container without a validator."""

    def __init__(self, operation: str | None = None) -> None:
        self.operation = operation
        msg = 'no validator set'
        if operation:
            msg = f'{operation}: {msg}'
        super().__init__(msg)


class NoSuchElementError(FunctorError, LookupError):
    """A value was forced out of an empty container."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'No value present')
