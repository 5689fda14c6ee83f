"""Conversion of integers to and from digit arrays in arbitrary bases.

Digits are stored as ``uint16`` numpy arrays, most-significant digit first,
so any radix in ``[2, 65535]`` is supported.
"""

import operator
from collections.abc import Iterator, Sequence

import numpy as np
import numpy.typing as npt

DIGIT_DTYPE = np.uint16
MAX_RADIX: int = int(np.iinfo(DIGIT_DTYPE).max)

Digits = npt.NDArray[np.uint16]


def _check_radix(radix: int) -> int:
    radix = operator.index(radix)
    if radix < 2:
        raise ValueError(f"radix must be at least 2. Got {radix}")
    if radix > MAX_RADIX:
        raise ValueError(f"radix must be at most {MAX_RADIX}. Got {radix}")
    return radix


def to_digits(value: int | np.integer, radix: int, pad_to_places: int = -1) -> Digits:
    """Convert a value into its digits in base ``radix``.

    Args:
        value: The value to convert. If negative, its absolute value is used.
        radix: The base of the returned digits, between 2 and ``MAX_RADIX``.
        pad_to_places: Minimum number of digits. The result is left-padded with
            zeros to this length, but is never truncated if it is longer.

    Returns:
        A ``uint16`` array of digits, units place last.
    """
    radix = _check_radix(radix)

    # int() first so that e.g. abs(np.int64.min) cannot wrap around
    remaining = abs(int(operator.index(value)))

    digits_from_units: list[int] = []
    while True:
        remaining, digit = divmod(remaining, radix)
        digits_from_units.append(digit)
        if remaining == 0:
            break

    missing = pad_to_places - len(digits_from_units)
    if missing > 0:
        digits_from_units.extend([0] * missing)

    return np.asarray(digits_from_units[::-1], dtype=DIGIT_DTYPE)


def _accumulate(digits: Sequence[int] | npt.NDArray[np.integer], radix: int) -> int:
    result = 0
    multiplier = 1
    for digit in reversed(list(digits)):
        result += int(digit) * multiplier
        multiplier *= radix
    return result


def from_digits(
    digits: Sequence[int] | npt.NDArray[np.integer],
    radix: int,
    dtype: npt.DTypeLike = np.int64,
) -> np.integer:
    """Convert digits in base ``radix`` (units place last) into a fixed-width integer.

    Digits are taken literally as ``digit * radix**position`` and are not checked
    against ``radix``.

    Raises:
        ValueError: If ``radix`` is out of range or ``dtype`` is not an integer dtype.
        OverflowError: If the value does not fit into ``dtype``.
    """
    radix = _check_radix(radix)
    int_dtype = np.dtype(dtype)
    if int_dtype.kind not in "iu":
        raise ValueError(f"dtype must be an integer dtype. Got {int_dtype}")

    result = _accumulate(digits, radix)

    bounds = np.iinfo(int_dtype)
    if not bounds.min <= result <= bounds.max:
        raise OverflowError(f"Value {result} does not fit into {int_dtype}.")
    return int_dtype.type(result)


def big_int_from_digits(digits: Sequence[int] | npt.NDArray[np.integer], radix: int) -> int:
    """Arbitrary-precision version of :func:`from_digits`. Never overflows."""
    radix = _check_radix(radix)
    return _accumulate(digits, radix)


def count_all_ascending(radix: int, places: int) -> Iterator[Digits]:
    """
    Enumerate every digit array of length ``places`` in base ``radix``
    in ascending order, from all zeros to all ``radix - 1``.

    The last digit is incremented first. Each yielded array is a fresh copy.

    Raises:
        ValueError: If ``places`` is smaller than 1 or ``radix`` is out of range.
    """
    places = operator.index(places)
    if places < 1:
        raise ValueError(f"There must be at least one place in the counter. Got {places}")
    radix = _check_radix(radix)
    return _count(radix, places)


def _count(radix: int, places: int) -> Iterator[Digits]:
    counter = np.zeros(places, dtype=DIGIT_DTYPE)
    top = radix - 1

    while True:
        yield counter.copy()

        carry = True
        for i in range(places - 1, -1, -1):
            if counter[i] == top:
                counter[i] = 0
                continue
            counter[i] += 1
            carry = False
            break

        # Carried out of the most significant place
        if carry:
            return


def digital_root(value: int | np.integer, radix: int = 10) -> int:
    """
    Digital root of ``value``: its digits summed repeatedly in base ``radix``
    until a single digit remains.

    Raises:
        ValueError: If ``value`` is negative or ``radix`` is smaller than 2.
    """
    value = int(operator.index(value))
    radix = int(operator.index(radix))
    if value < 0:
        raise ValueError(f"Digital root of a negative value is undefined. Got {value}")
    if radix < 2:
        raise ValueError(f"radix must be at least 2. Got {radix}")

    if value == 0:
        return 0
    return 1 + (value - 1) % (radix - 1)
