from collections.abc import Iterator, MutableSequence
from typing import Any, override

import jax
import numpy as np
import numpy.typing as npt


class ShuffleIndexMap:
    """
    Mapping from old indexes to new indexes, used to track where items end up
    after a shuffle.

    Wraps a permutation array ``old_to_new`` where ``old_to_new[i]`` is the new
    position of the item that was at position ``i``.
    """

    def __init__(self, old_to_new: npt.ArrayLike) -> None:
        arr = np.asarray(old_to_new, dtype=np.int64)
        if arr.ndim != 1:
            raise ValueError(f"Index map must be 1D. Got {arr.ndim}D.")
        if not np.array_equal(np.sort(arr), np.arange(arr.shape[0])):
            raise ValueError("Index map must be a permutation of 0..n-1.")
        self._old_to_new = arr

    @classmethod
    def identity(cls, size: int) -> "ShuffleIndexMap":
        """Map of ``size`` indexes where every index is mapped to itself."""
        if size < 0:
            raise ValueError(f"Size of a shuffle map cannot be negative. Got {size}")
        return cls(np.arange(size))

    @classmethod
    def random(cls, key: jax.Array, size: int) -> "ShuffleIndexMap":
        """Uniformly random map of ``size`` indexes."""
        if size < 0:
            raise ValueError(f"Size of a shuffle map cannot be negative. Got {size}")
        return cls(np.asarray(jax.random.permutation(key, size)))

    def __len__(self) -> int:
        return self._old_to_new.shape[0]

    def __getitem__(self, old_index: int) -> int:
        """New position of the item that was at ``old_index``."""
        return int(self._old_to_new[old_index])

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(old_index, new_index)`` pairs."""
        for old_index, new_index in enumerate(self._old_to_new.tolist()):
            yield old_index, new_index

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShuffleIndexMap):
            return NotImplemented
        return bool(np.array_equal(self._old_to_new, other._old_to_new))

    @override
    def __hash__(self) -> int:
        return hash(self._old_to_new.tobytes())

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._old_to_new.tolist()})"

    def apply_to(self, values: MutableSequence[Any]) -> MutableSequence[Any]:
        """Move every ``values[old]`` to ``values[new]``, in place."""
        if len(values) != len(self):
            raise ValueError(
                f"Cannot apply an index map of size {len(self)} to {len(values)} values."
            )
        old_values = list(values)
        for old_index, new_index in self:
            values[new_index] = old_values[old_index]
        return values

    def inverse(self) -> "ShuffleIndexMap":
        """Map from new indexes back to old ones."""
        return ShuffleIndexMap(np.argsort(self._old_to_new))

    def to_array(self) -> npt.NDArray[np.int64]:
        """Copy of the underlying ``old_to_new`` array."""
        return self._old_to_new.copy()
