"""Benchmarks for Option combinators.

Run with: pytest benchmarks/bench_option.py --benchmark-only -v
"""

from myoption import Nothing, Some, from_iterable
from myoption.codec import decode_json, encode_json


# =============================================================================
# Eager vs lazy defaults
# =============================================================================


class TestDefaults:
    """Compare eager and lazy fallbacks on both variants."""

    def test_some_unwrap_or(self, benchmark):
        benchmark(Some(5).unwrap_or, 0)

    def test_some_unwrap_or_else(self, benchmark):
        benchmark(Some(5).unwrap_or_else, lambda: 0)

    def test_nothing_unwrap_or(self, benchmark):
        benchmark(Nothing.unwrap_or, 0)

    def test_nothing_unwrap_or_else(self, benchmark):
        benchmark(Nothing.unwrap_or_else, lambda: 0)


# =============================================================================
# Chains
# =============================================================================


def _square(x):
    return Some(x * x)


class TestChains:
    """Benchmark bind / choice chains."""

    def test_and_then_square_twice(self, benchmark):
        benchmark(lambda: Some(2).and_then(_square).and_then(_square))

    def test_nothing_short_circuit(self, benchmark):
        benchmark(lambda: Nothing.and_then(_square).filter(bool).map(str))

    def test_xor(self, benchmark):
        some = Some(1)
        benchmark(some.xor, Nothing)

    def test_or_else(self, benchmark):
        benchmark(Nothing.or_else, lambda: Some(1))


# =============================================================================
# Iteration and encoding
# =============================================================================


class TestIteration:
    def test_filter_1000(self, benchmark):
        benchmark(lambda: list(from_iterable(range(1000)).filter(lambda x: x % 3 == 0)))


class TestCodec:
    def test_encode_some(self, benchmark):
        benchmark(encode_json, Some(42))

    def test_decode_some(self, benchmark):
        data = encode_json(Some(42))
        benchmark(decode_json, data, int)
