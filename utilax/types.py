"""Top level types for Utilax.

Public API:
- Digit arrays: Digits
- Colours: Color
- Easing: EasingCurve
- Randomness: ShuffleIndexMap
- Collections: BiMap, Pair, Lazy
- Reflection: EnumConverter
"""

from utilax.maths.radix import Digits
from utilax.colors.color_types import Color
from utilax.easing.curves import EasingCurve
from utilax.randomness.shuffle_index_map import ShuffleIndexMap
from utilax.collections import BiMap, Pair, Lazy
from utilax.reflection.enum_converter import EnumConverter

__all__ = [
    # Digit arrays
    "Digits",
    # Colours
    "Color",
    # Easing
    "EasingCurve",
    # Randomness
    "ShuffleIndexMap",
    # Collections
    "BiMap",
    "Pair",
    "Lazy",
    # Reflection
    "EnumConverter",
]
