"""Small arithmetic helpers.

Most functions here only use Python operators, so they accept ints of any size,
floats, and numpy/jax arrays alike.
"""

import operator
from collections.abc import Iterator
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np


def lerp(start: Any, end: Any, amount: Any) -> Any:
    """
    Linearly interpolate between ``start`` and ``end``. The result is not clamped.

    An ``amount`` of 0 gives ``start`` and an ``amount`` of 1 gives ``end``.
    """
    return amount * (end - start) + start


def lerp_int(start: int, end: int, amount: float) -> int:
    """Integer version of :func:`lerp`. Only the offset from ``start`` is rounded."""
    return start + round(amount * (end - start))


def inverse_lerp(start: Any, end: Any, value: Any) -> Any:
    """
    Inverse of :func:`lerp`: if ``r = lerp(a, b, x)`` then ``x = inverse_lerp(a, b, r)``.
    """
    return (value - start) / (end - start)


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Clamp ``value`` into ``[low, high]``."""
    if isinstance(value, (jax.Array, np.ndarray)):
        return jnp.clip(value, low, high)
    return max(low, min(value, high))


def pos_mod(value: Any, modulo: int | float) -> Any:
    """
    Non-negative ``value mod modulo``.

    Unlike a truncating remainder, the result is always in ``[0, modulo)``:
    ``pos_mod(-1, 6) == 5`` and ``pos_mod(-5, 3) == 1``.
    """
    if modulo == 0:
        raise ValueError("x mod 0 is undefined")
    if modulo < 0:
        raise ValueError(f"Negative modulo is not supported. Got {modulo}")
    # Python and jnp both floor the remainder towards the divisor's sign.
    result = value % modulo
    # Float rounding maps tiny negative values onto modulo itself
    if isinstance(result, jax.Array):
        return jnp.where(result == modulo, jnp.zeros_like(result), result)
    if isinstance(result, np.ndarray):
        return np.where(result == modulo, np.zeros_like(result), result)
    return result - modulo if result == modulo else result


def wrap(value: Any, low: Any, high: Any) -> Any:
    """
    Wrap ``value`` into ``[low, high)``.

    Values below the range re-enter it from the end and values above it re-enter
    from the start, so ``wrap(x, 0, m) == pos_mod(x, m)``. Swapped bounds are
    reordered, and an empty range returns ``low``.
    """
    if low == high:
        return low
    if low > high:
        low, high = high, low
    return pos_mod(value - low, high - low) + low


def tab_shift(tab_column: int, tab_size: int = 4) -> int:
    """Column of the character following a tab at 0-based ``tab_column``."""
    if tab_column < 0:
        raise ValueError(f"tab_column cannot be negative. Got {tab_column}")
    if tab_size < 1:
        raise ValueError(f"tab_size must be positive. Got {tab_size}")
    return (tab_column // tab_size + 1) * tab_size


def get_factors(n: int) -> Iterator[int]:
    """
    Yield the prime factors of ``n`` in ascending order.

    ``-1``, ``0`` and ``1`` yield themselves. Other negative numbers yield ``-1``
    followed by the factors of ``abs(n)``.
    """
    n = operator.index(n)
    if -1 <= n <= 1:
        yield n
        return

    if n < 0:
        yield -1
        n = -n

    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            yield factor
            n //= factor
        factor += 1 if factor == 2 else 2

    if n > 1:
        yield n
