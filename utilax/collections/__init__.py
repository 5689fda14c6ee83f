"""
Small collection types.

## Public API
- BiMap: Bidirectional one-to-one map with forward and reverse views.
- MapView: Read-only view of one direction of a BiMap.
- Pair: Immutable two-field record.
- Lazy: Lazily initialised value.
"""

from .bimap import BiMap, MapView
from .pair import Pair
from .lazy import Lazy

__all__ = [
    "BiMap",
    "MapView",
    "Pair",
    "Lazy",
]
