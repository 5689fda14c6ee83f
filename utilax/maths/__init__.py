"""
Arithmetic, radix and angle math.

## Public API
### Radix:
- to_digits: Convert an integer into an array of digits in an arbitrary base.
- from_digits: Convert digits back into a fixed-width integer (raises on overflow).
- big_int_from_digits: Convert digits back into an arbitrary-precision integer.
- count_all_ascending: Enumerate all fixed-width digit arrays in ascending order.
- digital_root: Repeated digit sum of a number in a given base.

### Arithmetic:
- lerp, lerp_int, inverse_lerp: Linear interpolation and its inverse.
- clamp: Clamp a value into a range.
- pos_mod: Non-negative modulo.
- wrap: Wrap a value into a half-open range.
- tab_shift: Column after a tab character.
- get_factors: Prime factorization.

### Angles:
- deg_to_rad, rad_to_deg: Unit conversion.
- angle_difference, angle_difference_deg: Shortest signed angular distance.
"""

from .radix import (
    DIGIT_DTYPE,
    MAX_RADIX,
    to_digits,
    from_digits,
    big_int_from_digits,
    count_all_ascending,
    digital_root,
)
from .more_math import (
    lerp,
    lerp_int,
    inverse_lerp,
    clamp,
    pos_mod,
    wrap,
    tab_shift,
    get_factors,
)
from .angles import deg_to_rad, rad_to_deg, angle_difference, angle_difference_deg

__all__ = [
    "DIGIT_DTYPE",
    "MAX_RADIX",
    "to_digits",
    "from_digits",
    "big_int_from_digits",
    "count_all_ascending",
    "digital_root",
    "lerp",
    "lerp_int",
    "inverse_lerp",
    "clamp",
    "pos_mod",
    "wrap",
    "tab_shift",
    "get_factors",
    "deg_to_rad",
    "rad_to_deg",
    "angle_difference",
    "angle_difference_deg",
]
