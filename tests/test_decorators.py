"""Tests for the @lift decorator."""

import pytest
from hypothesis import given
from strategies import nullable_payloads

from iris_functor import Empty, lift, maybe, of


class TestLiftBare:
    """Tests for @lift without arguments."""

    def test_wraps_value(self):
        @lift
        def double(x: int) -> int:
            return x * 2

        assert double(5) == of(10)

    def test_none_becomes_empty(self):
        @lift
        def find(items: dict, key: str):
            return items.get(key)

        assert find({'a': 1}, 'a') == of(1)
        assert find({'a': 1}, 'b') is Empty

    def test_functor_result_passes_through(self):
        inner = of(1).validator(lambda n: True)

        @lift
        def already():
            return inner

        assert already() is inner

    def test_exceptions_propagate_by_default(self):
        @lift
        def fail():
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            fail()

    def test_preserves_metadata(self):
        @lift
        def documented():
            """Docstring kept."""

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring kept.'

    def test_kwargs_forwarded(self):
        @lift
        def greet(name: str, *, greeting: str = 'hello') -> str:
            return f'{greeting} {name}'

        assert greet('iris', greeting='hi') == of('hi iris')

    @given(nullable_payloads)
    def test_agrees_with_maybe(self, value):
        """A lifted identity behaves exactly like maybe()."""
        assert lift(lambda: value)() == maybe(value)


class TestLiftWithExceptions:
    """Tests for @lift(exceptions=...)."""

    def test_caught_exception_becomes_empty(self):
        @lift(exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == of(5.0)
        assert divide(10, 0) is Empty

    def test_uncaught_exception_propagates(self):
        @lift(exceptions=(KeyError,))
        def fail():
            raise ValueError('not caught')

        with pytest.raises(ValueError, match='not caught'):
            fail()

    def test_empty_parentheses(self):
        @lift()
        def value():
            return 3

        assert value() == of(3)


class TestLiftOnMethods:
    """@lift works on instance methods."""

    def test_method(self):
        class Registry:
            def __init__(self):
                self.items = {'a': 1}

            @lift
            def find(self, key):
                return self.items.get(key)

        registry = Registry()
        assert registry.find('a') == of(1)
        assert registry.find('z') is Empty
