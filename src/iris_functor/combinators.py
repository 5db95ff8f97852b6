"""Combinators over collections of Functor values."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from iris_functor.functor import Empty, EmptyType, Present

__all__ = ['first_present', 'present_values', 'sequence', 'traverse']


def sequence[T](items: Iterable[Present[T] | EmptyType]) -> Present[list[T]] | EmptyType:
    """Turn an iterable of Functors into a Functor of a list.

    Returns Present([...]) with every value if all items are present, else
    Empty. Consumption stops at the first empty item.

    Example:
        ```python
        sequence([of(1), of(2)])
        # Present(value=[1, 2], validation=ValidatorSlot(None))
        sequence([of(1), Empty])
        # EmptyType()
        ```
    """
    values: list[T] = []
    for item in items:
        if isinstance(item, EmptyType):
            return Empty
        values.append(item.value)
    return Present(values)


def traverse[T, U](
    values: Iterable[T],
    f: Callable[[T], Present[U] | EmptyType],
) -> Present[list[U]] | EmptyType:
    """Map ``f`` over ``values`` and sequence the results.

    ``f`` is not called for values after the first one that maps to Empty.
    """
    return sequence(f(value) for value in values)


def first_present[T](items: Iterable[Present[T] | EmptyType]) -> Present[T] | EmptyType:
    """Return the first present item, or Empty if there is none."""
    for item in items:
        if isinstance(item, Present):
            return item
    return Empty


def present_values[T](items: Iterable[Present[T] | EmptyType]) -> list[T]:
    """Collect the values of the present items, skipping empties."""
    return [item.value for item in items if isinstance(item, Present)]
