import jax
import pytest
from typing import Callable
from pytest_benchmark.fixture import BenchmarkFixture

_test_key = jax.random.key(42)

RADIX_CASES: list = [
    pytest.param(2, id="binary"),
    pytest.param(3, id="ternary"),
    pytest.param(10, id="decimal"),
    pytest.param(16, id="hex"),
    pytest.param(6537, id="radix-6537"),
    pytest.param(65535, id="radix-max"),
]


@pytest.fixture
def key() -> jax.Array:
    """Deterministic PRNG key shared by randomness tests."""
    return _test_key


def benchmark_wrapper(
    benchmark: BenchmarkFixture,
    func: Callable,
    *args,
    jit: bool = True,
    **kwargs,
):
    """Benchmark ``func`` after a warm-up call, blocking on device results."""
    f = jax.jit(func) if jit else func

    # Warm-up: includes tracing/compile (if jit=True) and one execution
    warmed = jax.block_until_ready(f(*args, **kwargs))

    def run() -> None:
        jax.block_until_ready(f(*args, **kwargs))

    benchmark(run)
    return warmed
