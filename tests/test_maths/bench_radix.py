import pytest
from pytest_benchmark.fixture import BenchmarkFixture

from utilax.maths.radix import big_int_from_digits, count_all_ascending, from_digits, to_digits
from tests.conftest import RADIX_CASES, benchmark_wrapper


@pytest.mark.benchmark(group="maths_radix")
@pytest.mark.parametrize("radix", RADIX_CASES)
def test_to_digits_benchmark(benchmark: BenchmarkFixture, radix: int) -> None:
    """Benchmark digit extraction of a large machine-width value."""
    value = 2**63 - 1
    digits = benchmark_wrapper(benchmark, to_digits, value, radix, jit=False)
    assert from_digits(digits, radix) == value


@pytest.mark.benchmark(group="maths_radix")
@pytest.mark.parametrize("radix", RADIX_CASES)
def test_big_int_from_digits_benchmark(benchmark: BenchmarkFixture, radix: int) -> None:
    """Benchmark arbitrary-precision decoding of a long digit array."""
    value = 7**500
    digits = to_digits(value, radix)
    result = benchmark_wrapper(benchmark, big_int_from_digits, digits, radix, jit=False)
    assert result == value


@pytest.mark.benchmark(group="maths_radix")
@pytest.mark.parametrize("radix,places", [(2, 12), (10, 4), (256, 2)])
def test_count_all_ascending_benchmark(
    benchmark: BenchmarkFixture,
    radix: int,
    places: int,
) -> None:
    """Benchmark full enumeration of a fixed-width counter."""

    def _enumerate() -> int:
        total = 0
        for digits in count_all_ascending(radix, places):
            total += int(digits[-1])
        return total

    total = benchmark_wrapper(benchmark, _enumerate, jit=False)
    assert total == radix ** (places - 1) * sum(range(radix))
