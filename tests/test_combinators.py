"""Tests for collection combinators."""

from hypothesis import given
from hypothesis import strategies as st
from strategies import functors

from iris_functor import Empty, first_present, maybe, of, present_values, sequence, traverse


class TestSequence:
    """Tests for sequence()."""

    def test_all_present(self):
        assert sequence([of(1), of(2), of(3)]) == of([1, 2, 3])

    def test_any_empty(self):
        assert sequence([of(1), Empty, of(3)]) is Empty

    def test_empty_input(self):
        assert sequence([]) == of([])

    def test_stops_at_first_empty(self):
        consumed = []

        def items():
            for item in (of(1), Empty, of(3)):
                consumed.append(item)
                yield item

        assert sequence(items()) is Empty
        assert consumed == [of(1), Empty]

    @given(st.lists(functors))
    def test_present_iff_all_present(self, items):
        result = sequence(items)
        assert result.is_present() == all(item.is_present() for item in items)


class TestTraverse:
    """Tests for traverse()."""

    def test_all_map_to_present(self):
        assert traverse([1, 2], lambda x: of(x * 10)) == of([10, 20])

    def test_short_circuits(self):
        calls = []

        def check(x):
            calls.append(x)
            return maybe(x if x > 0 else None)

        assert traverse([1, -1, 2], check) is Empty
        assert calls == [1, -1]


class TestFirstPresent:
    """Tests for first_present()."""

    def test_returns_first(self):
        assert first_present([Empty, of(2), of(3)]) == of(2)

    def test_all_empty(self):
        assert first_present([Empty, Empty]) is Empty

    def test_no_items(self):
        assert first_present([]) is Empty


class TestPresentValues:
    """Tests for present_values()."""

    def test_skips_empty(self):
        assert present_values([of(1), Empty, of(3)]) == [1, 3]

    def test_no_present(self):
        assert present_values([Empty]) == []
