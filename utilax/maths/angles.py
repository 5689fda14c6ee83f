import jax
import jax.numpy as jnp
from jax.typing import ArrayLike


def deg_to_rad(angle_degrees: ArrayLike) -> jax.Array:
    """Convert an angle in degrees to radians."""
    return jnp.asarray(angle_degrees) / 180.0 * jnp.pi


def rad_to_deg(angle_radians: ArrayLike) -> jax.Array:
    """Convert an angle in radians to degrees."""
    return jnp.asarray(angle_radians) / jnp.pi * 180.0


def angle_difference(source_radians: ArrayLike, destination_radians: ArrayLike) -> jax.Array:
    """
    Shortest signed distance from ``source_radians`` to ``destination_radians``,
    taking wrap-around of the circle into account.

    Returns:
        The distance in radians, in ``[-pi, pi)``.
    """
    delta = jnp.asarray(destination_radians) - jnp.asarray(source_radians)
    return jnp.mod(delta + jnp.pi, 2.0 * jnp.pi) - jnp.pi


def angle_difference_deg(source_degrees: ArrayLike, destination_degrees: ArrayLike) -> jax.Array:
    """Degree version of :func:`angle_difference`, in ``[-180, 180)``."""
    delta = jnp.asarray(destination_degrees) - jnp.asarray(source_degrees)
    return jnp.mod(delta + 180.0, 360.0) - 180.0
