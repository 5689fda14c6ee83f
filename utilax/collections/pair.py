from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar, override

T1 = TypeVar("T1")
T2 = TypeVar("T2")


@dataclass(frozen=True)
class Pair(Generic[T1, T2]):
    """
    A pair of values. Unlike a key/value entry, there is no implied relation
    between the two items.
    """

    first: T1
    second: T2

    @classmethod
    def from_tuple(cls, item: tuple[T1, T2]) -> "Pair[T1, T2]":
        """Build a pair from a 2-tuple, e.g. a ``dict.items()`` entry."""
        if len(item) != 2:
            raise ValueError(f"Expected a 2-tuple. Got {len(item)} items.")
        first, second = item
        return cls(first, second)

    def swapped(self) -> "Pair[T2, T1]":
        return Pair(self.second, self.first)

    def __iter__(self) -> Iterator[T1 | T2]:
        yield self.first
        yield self.second

    @override
    def __str__(self) -> str:
        return f"Pair[{self.first}, {self.second}]"
