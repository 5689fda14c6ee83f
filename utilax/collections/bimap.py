from collections.abc import Hashable, Iterator, Mapping
from typing import Generic, TypeVar, override

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class MapView(Mapping[K, V]):
    """Read-only view of one direction of a :class:`BiMap`."""

    def __init__(self, data: dict[K, V]) -> None:
        self._data = data

    @override
    def __getitem__(self, key: K) -> V:
        return self._data[key]

    @override
    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"


class BiMap(Generic[K, V]):
    """
    A collection of one-to-one pairs (a bidirectional dictionary).

    Use :attr:`forward` to look up by the first item of a pair and
    :attr:`reverse` to look up by the second.
    """

    def __init__(self, pairs: Mapping[K, V] | None = None) -> None:
        self._forward: dict[K, V] = {}
        self._reverse: dict[V, K] = {}
        self.forward: MapView[K, V] = MapView(self._forward)
        self.reverse: MapView[V, K] = MapView(self._reverse)
        if pairs is not None:
            for first, second in pairs.items():
                self.add(first, second)

    def add(self, first: K, second: V) -> None:
        """Add a pair. Fails without modifying the map if either item is already present."""
        if first in self._forward:
            raise ValueError(f"{first!r} is already mapped to {self._forward[first]!r}.")
        if second in self._reverse:
            raise ValueError(f"{second!r} is already mapped from {self._reverse[second]!r}.")
        self._forward[first] = second
        self._reverse[second] = first

    def pop_forward(self, first: K) -> V:
        """Remove the pair whose first item is ``first`` and return its second item."""
        second = self._forward.pop(first)
        del self._reverse[second]
        return second

    def pop_reverse(self, second: V) -> K:
        """Remove the pair whose second item is ``second`` and return its first item."""
        first = self._reverse.pop(second)
        del self._forward[first]
        return first

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Yield ``(first, second)`` pairs in insertion order."""
        return iter(self._forward.items())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        first, second = pair
        return first in self._forward and self._forward[first] == second

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._forward!r})"
