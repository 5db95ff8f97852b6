"""Benchmarks for the Functor type.

Run with: pytest benchmarks/bench_functor.py --benchmark-only -v
"""

from iris_functor import Empty, Present, maybe, of


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestFunctorCreation:
    """Benchmark Functor creation."""

    def test_of(self, benchmark):
        benchmark(of, 42)

    def test_maybe_none(self, benchmark):
        benchmark(maybe, None)

    def test_validator(self, benchmark):
        functor = of(5)
        benchmark(functor.validator, lambda n: n > 3)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestFunctorChaining:
    """Benchmark chained Functor operations."""

    def test_present_chain_3(self, benchmark):
        """Benchmark 3-step chain on Present."""

        def chain():
            return of(5).map(lambda x: x + 1).map(lambda x: x * 2).flat_map(lambda x: of(x - 1))

        benchmark(chain)

    def test_empty_chain_3(self, benchmark):
        """Benchmark 3-step chain on Empty (should short-circuit)."""

        def chain():
            return Empty.map(lambda x: x + 1).map(lambda x: x * 2).flat_map(lambda x: of(x - 1))

        benchmark(chain)

    def test_validator_hooks(self, benchmark):
        """Benchmark validator + is_true + is_false."""
        sink = []

        def chain():
            return of(5).validator(lambda n: n > 3).is_true(sink.append).is_false(sink.append)

        benchmark(chain)

    def test_infer(self, benchmark):
        functor = of(5).validator(lambda n: n > 3)
        benchmark(functor.infer, lambda: 'big', lambda: 'small')


# =============================================================================
# Extraction benchmarks
# =============================================================================


class TestFunctorExtraction:
    """Benchmark terminal operations."""

    def test_present_or_else(self, benchmark):
        benchmark(of(5).or_else, 0)

    def test_empty_or_else(self, benchmark):
        benchmark(Empty.or_else, 0)

    def test_match_present(self, benchmark):
        functor = of(42)

        def match_it():
            match functor:
                case Present(v):
                    return v
                case _:
                    return None

        benchmark(match_it)

    def test_create_1000(self, benchmark):
        benchmark(lambda: [of(i) for i in range(1000)])
