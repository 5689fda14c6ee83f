import jax
import jax.numpy as jnp
from jax.typing import ArrayLike


def _to_channels(color: ArrayLike) -> jax.Array:
    arr = jnp.asarray(color, dtype=jnp.float32)
    if arr.shape[-1:] != (4,):
        raise ValueError(f"Colors must have shape (..., 4) in ARGB order. Got {arr.shape}.")
    return arr


def _to_bytes(channels: jax.Array) -> jax.Array:
    return jnp.clip(jnp.round(channels), 0, 255).astype(jnp.uint8)


def alpha_blend(old: ArrayLike, new: ArrayLike) -> jax.Array:
    r"""
    Blend ``new`` over ``old`` with alpha/one-minus-alpha ("over") compositing.

    Shapes
    -------
    old : (..., 4)       # ARGB, 0..255, colour already on the canvas
    new : (..., 4)       # ARGB, 0..255, colour drawn on top

    Returns
    --------
    (..., 4) uint8 ARGB
    """
    old_c = _to_channels(old)
    new_c = _to_channels(new)

    old_a = old_c[..., :1] / 255.0
    new_a = new_c[..., :1] / 255.0
    reverse_new_a = jnp.clip(1.0 - new_a, 0.0, 1.0)

    alpha = new_a + old_a * reverse_new_a
    rgb = new_a * new_c[..., 1:] + old_c[..., 1:] * old_a * reverse_new_a

    return _to_bytes(jnp.concatenate([alpha * 255.0, rgb], axis=-1))


def lerp_color(start: ArrayLike, end: ArrayLike, amount: ArrayLike) -> jax.Array:
    """
    Linearly interpolate between two ARGB colours channel by channel.

    Unlike a plain lerp, ``amount`` is clamped to ``[0, 1]``.
    """
    start_c = _to_channels(start)
    end_c = _to_channels(end)
    t = jnp.clip(jnp.asarray(amount, dtype=jnp.float32), 0.0, 1.0)[..., None]
    return _to_bytes(t * (end_c - start_c) + start_c)
