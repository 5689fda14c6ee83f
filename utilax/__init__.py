"""Utilax: General-purpose utilities on a Jax/NumPy stack.

## Features

### Maths
- Radix conversion (integers <-> digit arrays in bases 2..65535)
- Ascending fixed-width counters in arbitrary bases
- Digital roots, prime factorization
- Lerp, inverse lerp, clamp, non-negative modulo, wrapping
- Angle conversion and shortest angular distance

### Colours and Easing
- ARGB colours, alpha blending, colour interpolation
- Easing curves (power, sine, expo, circ, elastic, back, bounce)

### Randomness
- Key-driven picking, weighted picking, selection and reservoir sampling
- Fisher-Yates shuffling with index remapping

### Collections and Reflection
- Bidirectional map, pair, lazy value
- Generic-aware subclass checks, override detection, checked enum conversion
"""

__version__ = "0.1.0"
__license__ = "MIT"
