import operator
from dataclasses import dataclass, replace
from typing import override

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from utilax.colors.color_math import alpha_blend, lerp_color


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel ARGB colour."""

    a: int
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("a", "r", "g", "b"):
            # Rejects floats and stores numpy integers as plain ints
            channel = operator.index(getattr(self, name))
            object.__setattr__(self, name, channel)
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel {name} must be between 0 and 255. Got {channel}")

    @classmethod
    def from_argb(cls, argb: int) -> "Color":
        """Unpack a ``0xAARRGGBB`` integer."""
        if not 0 <= argb <= 0xFFFFFFFF:
            raise ValueError(f"Packed ARGB value must fit into 32 bits. Got {argb:#x}")
        return cls((argb >> 24) & 0xFF, (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)

    @classmethod
    def from_array(cls, arr: ArrayLike) -> "Color":
        arr = jnp.asarray(arr)
        if arr.shape != (4,):
            raise ValueError(f"Expected an ARGB array of shape (4,). Got {arr.shape}.")
        a, r, g, b = (int(c) for c in arr.tolist())
        return cls(a, r, g, b)

    def to_argb(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_array(self) -> jax.Array:
        return jnp.array([self.a, self.r, self.g, self.b], dtype=jnp.uint8)

    def with_alpha(self, alpha: int) -> "Color":
        return replace(self, a=alpha)

    def transparent(self) -> "Color":
        return self.with_alpha(0)

    def blend_over(self, below: "Color") -> "Color":
        """Draw this colour on top of ``below``."""
        return Color.from_array(alpha_blend(below.to_array(), self.to_array()))

    def lerp(self, end: "Color", amount: float) -> "Color":
        return Color.from_array(lerp_color(self.to_array(), end.to_array(), amount))

    @override
    def __str__(self) -> str:
        return f"#{self.to_argb():08X}"
