"""Random picking, sampling and shuffling driven by explicit jax PRNG keys."""

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

import jax
import jax.numpy as jnp
import numpy as np
from jax.typing import ArrayLike

from utilax.randomness.shuffle_index_map import ShuffleIndexMap

T = TypeVar("T")
TMutable = TypeVar("TMutable", bound=MutableSequence)


def next_uint31(key: jax.Array) -> int:
    """Uniform integer in ``[0, 2**31 - 1]``, both ends inclusive."""
    bits = jax.random.bits(key, dtype=jnp.uint32)
    return int(bits) & 0x7FFF_FFFF


def chance(key: jax.Array, probability: float) -> bool:
    """Return ``True`` with the given probability (0 to 1, both inclusive)."""
    return bool(jax.random.uniform(key) < probability)


def pick_random(key: jax.Array, items: Sequence[T]) -> T:
    """Pick a uniformly random item from a non-empty sequence."""
    if len(items) == 0:
        raise ValueError("Cannot pick items from an empty sequence.")
    index = jax.random.randint(key, (), 0, len(items))
    return items[int(index)]


def pick_weighted(key: jax.Array, items: Sequence[T], weights: ArrayLike) -> T:
    """Pick an item with probability proportional to its weight."""
    w = np.asarray(weights, dtype=np.float64)
    if w.shape != (len(items),):
        raise ValueError(f"Expected {len(items)} weights, got shape {w.shape}.")
    if np.any(w < 0):
        raise ValueError("Weights must be non-negative.")
    total = w.sum()
    if total <= 0:
        raise ValueError("Weights must not sum to zero.")
    index = jax.random.choice(key, len(items), p=jnp.asarray(w / total))
    return items[int(index)]


def pick_multiple_different(key: jax.Array, items: Sequence[T], count: int) -> list[T]:
    """
    Pick ``count`` different items without replacement, keeping their original order.

    Uses selection sampling (Knuth's Algorithm S): every item is visited once and
    kept with probability ``left_to_pick / items_left``.
    """
    if count < 0:
        raise ValueError(f"Cannot pick a negative number of items. Got {count}")
    if count > len(items):
        raise ValueError(f"Cannot pick {count} items from a sequence of {len(items)}.")
    if count == 0:
        return []
    if count == 1:
        return [pick_random(key, items)]

    draws = np.asarray(jax.random.uniform(key, (len(items),)))

    picked: list[T] = []
    items_left = len(items)
    for item, draw in zip(items, draws):
        left_to_pick = count - len(picked)
        if draw * items_left < left_to_pick:
            picked.append(item)
            if len(picked) == count:
                break
        items_left -= 1
    return picked


def reservoir_sample(key: jax.Array, items: Iterable[T], count: int) -> list[T]:
    """
    Uniformly sample ``count`` items from an iterable of unknown length (Algorithm R).

    If the iterable yields fewer than ``count`` items, all of them are returned.
    Order of the result is not meaningful.
    """
    if count < 0:
        raise ValueError(f"Cannot sample a negative number of items. Got {count}")

    reservoir: list[T] = []
    for seen, item in enumerate(items):
        if seen < count:
            reservoir.append(item)
            continue
        j = int(jax.random.randint(jax.random.fold_in(key, seen), (), 0, seen + 1))
        if j < count:
            reservoir[j] = item
    return reservoir


def shuffle(key: jax.Array, values: TMutable) -> TMutable:
    """
    Shuffle ``values`` in place and return it.

    Durstenfeld's version of the Fisher-Yates shuffle. All swap targets are drawn
    in one call: for ``i`` from ``n - 1`` down to 1, ``j_i`` is uniform in ``[0, i]``.
    """
    n = len(values)
    if n < 2:
        return values

    upper = jnp.arange(n, 1, -1)  # exclusive bounds i + 1
    swap_targets = np.asarray(jax.random.randint(key, (n - 1,), 0, upper))

    for i, j in zip(range(n - 1, 0, -1), swap_targets.tolist()):
        values[i], values[j] = values[j], values[i]
    return values


def shuffle_remap(key: jax.Array, values: MutableSequence) -> ShuffleIndexMap:
    """
    Shuffle ``values`` in place and return the mapping of old indexes to new ones.
    """
    old_to_new = ShuffleIndexMap.random(key, len(values))
    old_to_new.apply_to(values)
    return old_to_new
