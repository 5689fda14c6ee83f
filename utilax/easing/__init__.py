"""
Easing curves for tweening.

## Public API
- EasingCurve: Type of a single-argument easing curve.
- CURVES, get_curve: Name-based lookup of the single-argument curves.
- linear
- power_in, power_out, power_in_out (+ quad, cubic, quart, quint shortcuts)
- sine_in, sine_out, sine_in_out
- expo_in, expo_out, expo_in_out
- circ_in, circ_out, circ_in_out
- elastic_in, elastic_out, elastic_in_out
- back_in, back_out, back_in_out
- bounce_in, bounce_out, bounce_in_out
"""

from .curves import (
    EasingCurve,
    CURVES,
    get_curve,
    linear,
    power_in,
    power_out,
    power_in_out,
    quad_in,
    quad_out,
    quad_in_out,
    cubic_in,
    cubic_out,
    cubic_in_out,
    quart_in,
    quart_out,
    quart_in_out,
    quint_in,
    quint_out,
    quint_in_out,
    sine_in,
    sine_out,
    sine_in_out,
    expo_in,
    expo_out,
    expo_in_out,
    circ_in,
    circ_out,
    circ_in_out,
    elastic_in,
    elastic_out,
    elastic_in_out,
    back_in,
    back_out,
    back_in_out,
    bounce_in,
    bounce_out,
    bounce_in_out,
)

__all__ = [
    "EasingCurve",
    "CURVES",
    "get_curve",
    "linear",
    "power_in",
    "power_out",
    "power_in_out",
    "quad_in",
    "quad_out",
    "quad_in_out",
    "cubic_in",
    "cubic_out",
    "cubic_in_out",
    "quart_in",
    "quart_out",
    "quart_in_out",
    "quint_in",
    "quint_out",
    "quint_in_out",
    "sine_in",
    "sine_out",
    "sine_in_out",
    "expo_in",
    "expo_out",
    "expo_in_out",
    "circ_in",
    "circ_out",
    "circ_in_out",
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
    "back_in",
    "back_out",
    "back_in_out",
    "bounce_in",
    "bounce_out",
    "bounce_in_out",
]
