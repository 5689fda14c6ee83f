"""Easing (tweening) curves.

Every curve maps normalized time ``t`` in ``[0, 1]`` to normalized progress and
works elementwise on arrays, so curves can be jitted and vmapped freely.
"""

from typing import Callable

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

EasingCurve = Callable[[ArrayLike], jax.Array]

BACK_CONSTANT: float = 1.70158
ELASTIC_PERIOD: float = 0.3


def _in_out(curve_in: EasingCurve, t: ArrayLike) -> jax.Array:
    t = jnp.asarray(t, dtype=jnp.float32)
    return jnp.where(t < 0.5, curve_in(t * 2) / 2, 1 - curve_in((1 - t) * 2) / 2)


def linear(t: ArrayLike) -> jax.Array:
    return jnp.asarray(t, dtype=jnp.float32)


# Power


def power_in(t: ArrayLike, power: float) -> jax.Array:
    return jnp.power(jnp.asarray(t, dtype=jnp.float32), power)


def power_out(t: ArrayLike, power: float) -> jax.Array:
    return 1 - power_in(1 - jnp.asarray(t, dtype=jnp.float32), power)


def power_in_out(t: ArrayLike, power: float) -> jax.Array:
    return _in_out(lambda x: power_in(x, power), t)


def quad_in(t: ArrayLike) -> jax.Array:
    return power_in(t, 2)


def quad_out(t: ArrayLike) -> jax.Array:
    return power_out(t, 2)


def quad_in_out(t: ArrayLike) -> jax.Array:
    return power_in_out(t, 2)


def cubic_in(t: ArrayLike) -> jax.Array:
    return power_in(t, 3)


def cubic_out(t: ArrayLike) -> jax.Array:
    return power_out(t, 3)


def cubic_in_out(t: ArrayLike) -> jax.Array:
    return power_in_out(t, 3)


def quart_in(t: ArrayLike) -> jax.Array:
    return power_in(t, 4)


def quart_out(t: ArrayLike) -> jax.Array:
    return power_out(t, 4)


def quart_in_out(t: ArrayLike) -> jax.Array:
    return power_in_out(t, 4)


def quint_in(t: ArrayLike) -> jax.Array:
    return power_in(t, 5)


def quint_out(t: ArrayLike) -> jax.Array:
    return power_out(t, 5)


def quint_in_out(t: ArrayLike) -> jax.Array:
    return power_in_out(t, 5)


# Sine


def sine_in(t: ArrayLike) -> jax.Array:
    return 1 - jnp.cos(jnp.asarray(t, dtype=jnp.float32) * jnp.pi / 2)


def sine_out(t: ArrayLike) -> jax.Array:
    return jnp.sin(jnp.asarray(t, dtype=jnp.float32) * jnp.pi / 2)


def sine_in_out(t: ArrayLike) -> jax.Array:
    return (jnp.cos(jnp.asarray(t, dtype=jnp.float32) * jnp.pi) - 1) / -2


# Expo


def expo_in(t: ArrayLike) -> jax.Array:
    """Approximate exponential ease, ``2**(10 (t - 1))``. Starts at ``2**-10``, not 0."""
    return jnp.power(2.0, 10 * (jnp.asarray(t, dtype=jnp.float32) - 1))


def expo_out(t: ArrayLike) -> jax.Array:
    return 1 - expo_in(1 - jnp.asarray(t, dtype=jnp.float32))


def expo_in_out(t: ArrayLike) -> jax.Array:
    return _in_out(expo_in, t)


# Circ


def circ_in(t: ArrayLike) -> jax.Array:
    t = jnp.asarray(t, dtype=jnp.float32)
    return 1 - jnp.sqrt(jnp.clip(1 - t * t, 0.0, None))


def circ_out(t: ArrayLike) -> jax.Array:
    return 1 - circ_in(1 - jnp.asarray(t, dtype=jnp.float32))


def circ_in_out(t: ArrayLike) -> jax.Array:
    return _in_out(circ_in, t)


# Elastic


def elastic_out(t: ArrayLike) -> jax.Array:
    t = jnp.asarray(t, dtype=jnp.float32)
    p = ELASTIC_PERIOD
    return jnp.power(2.0, -10 * t) * jnp.sin((t - p / 4) * (2 * jnp.pi) / p) + 1


def elastic_in(t: ArrayLike) -> jax.Array:
    return 1 - elastic_out(1 - jnp.asarray(t, dtype=jnp.float32))


def elastic_in_out(t: ArrayLike) -> jax.Array:
    return _in_out(elastic_in, t)


# Back


def back_in(t: ArrayLike, back_multiplier: float = 1.0) -> jax.Array:
    t = jnp.asarray(t, dtype=jnp.float32)
    s = BACK_CONSTANT * back_multiplier
    return t * t * ((s + 1) * t - s)


def back_out(t: ArrayLike, back_multiplier: float = 1.0) -> jax.Array:
    return 1 - back_in(1 - jnp.asarray(t, dtype=jnp.float32), back_multiplier)


def back_in_out(t: ArrayLike, back_multiplier: float = 1.0) -> jax.Array:
    return _in_out(lambda x: back_in(x, back_multiplier), t)


# Bounce


def bounce_out(t: ArrayLike) -> jax.Array:
    t = jnp.asarray(t, dtype=jnp.float32)
    div = 2.75
    mult = 7.5625

    def arc(offset: float, floor: float) -> jax.Array:
        shifted = t - offset / div
        return mult * shifted * shifted + floor

    return jnp.select(
        [t < 1 / div, t < 2 / div, t < 2.5 / div],
        [arc(0.0, 0.0), arc(1.5, 0.75), arc(2.25, 0.9375)],
        default=arc(2.625, 0.984375),
    )


def bounce_in(t: ArrayLike) -> jax.Array:
    return 1 - bounce_out(1 - jnp.asarray(t, dtype=jnp.float32))


def bounce_in_out(t: ArrayLike) -> jax.Array:
    return _in_out(bounce_in, t)


CURVES: dict[str, EasingCurve] = {
    "linear": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "quart_in": quart_in,
    "quart_out": quart_out,
    "quart_in_out": quart_in_out,
    "quint_in": quint_in,
    "quint_out": quint_out,
    "quint_in_out": quint_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "expo_in": expo_in,
    "expo_out": expo_out,
    "expo_in_out": expo_in_out,
    "circ_in": circ_in,
    "circ_out": circ_out,
    "circ_in_out": circ_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
}


def get_curve(name: str) -> EasingCurve:
    """Look up a single-argument easing curve by name."""
    try:
        return CURVES[name]
    except KeyError:
        raise KeyError(f"Unknown easing curve {name!r}. Known curves: {sorted(CURVES)}") from None
