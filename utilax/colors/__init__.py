"""
Colour types and colour math.

## Public API
- Color: An immutable ARGB colour.
- alpha_blend: Composite ARGB colour arrays over each other.
- lerp_color: Clamped linear interpolation between ARGB colour arrays.
"""

from .color_math import alpha_blend, lerp_color
from .color_types import Color

__all__ = [
    "Color",
    "alpha_blend",
    "lerp_color",
]
