"""
Randomness helpers. Every function takes an explicit jax PRNG key.

## Public API
- next_uint31: Non-negative random 31-bit integer.
- chance: Random boolean with a given probability.
- pick_random: Uniform pick from a sequence.
- pick_weighted: Weighted pick from a sequence.
- pick_multiple_different: Order-preserving sampling without replacement.
- reservoir_sample: Sampling from an iterable of unknown length.
- shuffle: In-place Fisher-Yates shuffle.
- shuffle_remap: In-place shuffle that also returns the index mapping.
- ShuffleIndexMap: Mapping of old indexes to new indexes.
"""

from .shuffle_index_map import ShuffleIndexMap
from .sampling import (
    next_uint31,
    chance,
    pick_random,
    pick_weighted,
    pick_multiple_different,
    reservoir_sample,
    shuffle,
    shuffle_remap,
)

__all__ = [
    "ShuffleIndexMap",
    "next_uint31",
    "chance",
    "pick_random",
    "pick_weighted",
    "pick_multiple_different",
    "reservoir_sample",
    "shuffle",
    "shuffle_remap",
]
