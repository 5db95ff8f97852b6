"""Shared setup for the Functor benchmarks in bench_functor.py."""


def pytest_configure(config):
    """Register the ``benchmark`` marker used when selecting Functor benchmarks with -m."""
    config.addinivalue_line('markers', 'benchmark: Functor micro benchmark (run with --benchmark-only)')
