from typing import Callable, Generic, TypeVar, final, override

T = TypeVar("T")


@final
class Lazy(Generic[T]):
    """A value that is computed by ``factory`` the first time it is needed."""

    def __init__(self, factory: Callable[[], T]) -> None:
        if not callable(factory):
            raise ValueError(f"factory must be callable. Got {type(factory).__name__}")
        self._factory: Callable[[], T] | None = factory
        self._value: T | None = None

    @classmethod
    def of(cls, value: T) -> "Lazy[T]":
        """Already-initialised instance holding ``value``."""
        lazy = cls(lambda: value)
        lazy._value = value
        lazy._factory = None
        return lazy

    @property
    def is_value_created(self) -> bool:
        return self._factory is None

    @property
    def value(self) -> T:
        """The value, computing it on first access."""
        if self._factory is not None:
            self._value = self._factory()
            self._factory = None
        return self._value  # type: ignore[return-value]

    @override
    def __repr__(self) -> str:
        if self.is_value_created:
            return f"{self.__class__.__name__}({self._value!r})"
        return f"{self.__class__.__name__}(<not created>)"
