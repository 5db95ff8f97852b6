"""@lift decorator for turning None-returning functions into Functor-returning ones."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from iris_functor._logging import get_logger, log_event
from iris_functor.functor import Empty, EmptyType, Present, is_functor, maybe

__all__ = ['lift']

_log = get_logger(__name__)


@overload
def lift[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Present[T] | EmptyType]: ...


@overload
def lift(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Present[Any] | EmptyType]]: ...


def lift[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that wraps a function's return value with ``maybe``.

    The wrapped function returns Present(value) for a non-None result and
    Empty for None. A result that already is a Functor passes through.

    Can be used with or without arguments:
        @lift
        def lookup(key): ...

        @lift(exceptions=(KeyError,))
        def fetch(key): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types that should produce Empty instead of
            propagating. By default nothing is caught.

    Returns:
        A wrapped function that returns Functor[T] instead of T | None.

    Example:
        ```python
        @lift(exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Present(value=5.0, validation=ValidatorSlot(None))
        divide(10, 0)
        # EmptyType()
        ```
    """
    catch = exceptions if exceptions is not None else ()

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Present[Any] | EmptyType:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            name = getattr(wrapped, '__name__', repr(wrapped))
            log_event(_log, 'lift_caught_exception', function=name, error=repr(e))
            return Empty
        if is_functor(result):
            return result
        return maybe(result)

    if func is not None:
        return wrapper(func)
    return wrapper
