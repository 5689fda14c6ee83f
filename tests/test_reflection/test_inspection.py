from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Generic, Protocol, TypeVar

import pytest

from utilax.reflection import cast_all, is_override, is_subclass_or_self

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


class Base: ...


class FromBase(Base): ...


class FromFromBase(FromBase): ...


class Unrelated: ...


class GenericFromBase(Base, Generic[T]): ...


class IntGenericFromBase(GenericFromBase[int]): ...


class FromGenericFromBase(GenericFromBase[T]): ...


class MultiGenericFromBase(Base, Generic[T1, T2]): ...


class IntFirstMultiGenericFromBase(MultiGenericFromBase[int, T2]): ...


class IntSecondMultiGenericFromBase(MultiGenericFromBase[T1, int]): ...


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class Drawable(Protocol):
    def draw(self) -> None: ...


@pytest.mark.parametrize(
    "derived, base, expected",
    [
        (Base, Base, True),
        (FromBase, Base, True),
        (FromFromBase, Base, True),
        (Unrelated, Base, False),
        (Base, FromBase, False),
        (FromBase, FromBase, True),
        (FromFromBase, FromBase, True),
        (Unrelated, FromBase, False),
        (Base, FromFromBase, False),
        (FromBase, FromFromBase, False),
        (Unrelated, FromFromBase, False),
        (Base, Unrelated, False),
        (FromBase, Unrelated, False),
        (FromFromBase, Unrelated, False),
    ],
)
def test_is_subclass_or_self_plain(derived: type, base: type, expected: bool) -> None:
    assert is_subclass_or_self(derived, base) is expected


@pytest.mark.parametrize(
    "derived, base, expected",
    [
        (GenericFromBase, Base, True),
        (GenericFromBase[int], Base, True),
        (GenericFromBase[str], Base, True),
        (GenericFromBase, GenericFromBase, True),
        (GenericFromBase[int], GenericFromBase, True),
        (GenericFromBase[str], GenericFromBase, True),
        (IntGenericFromBase, GenericFromBase, True),
        (IntGenericFromBase, GenericFromBase[int], True),
        (FromGenericFromBase, Base, True),
        (FromGenericFromBase[str], Base, True),
        (FromGenericFromBase, GenericFromBase, True),
        (FromGenericFromBase[str], GenericFromBase, True),
        (FromGenericFromBase[str], GenericFromBase[str], True),
        (Base, GenericFromBase, False),
        (Base, GenericFromBase[int], False),
        (Base, GenericFromBase[str], False),
        (GenericFromBase, GenericFromBase[int], False),
        (GenericFromBase, GenericFromBase[str], False),
        (GenericFromBase, IntGenericFromBase, False),
        (GenericFromBase[int], IntGenericFromBase, False),
        (GenericFromBase, FromGenericFromBase, False),
        (GenericFromBase, FromGenericFromBase[str], False),
        (GenericFromBase[str], FromGenericFromBase[str], False),
        (GenericFromBase[int], GenericFromBase[str], False),
        (FromGenericFromBase[int], GenericFromBase[str], False),
        (IntGenericFromBase, GenericFromBase[str], False),
    ],
)
def test_is_subclass_or_self_single_generic(derived: Any, base: Any, expected: bool) -> None:
    assert is_subclass_or_self(derived, base) is expected


@pytest.mark.parametrize(
    "derived, base, expected",
    [
        (MultiGenericFromBase, Base, True),
        (MultiGenericFromBase[int, int], Base, True),
        (MultiGenericFromBase, MultiGenericFromBase, True),
        (IntFirstMultiGenericFromBase[str], MultiGenericFromBase[int, str], True),
        (IntSecondMultiGenericFromBase[str], MultiGenericFromBase[str, int], True),
        (IntFirstMultiGenericFromBase[str], MultiGenericFromBase, True),
        (IntSecondMultiGenericFromBase[str], MultiGenericFromBase, True),
        (IntFirstMultiGenericFromBase[str], MultiGenericFromBase[str, int], False),
        (IntSecondMultiGenericFromBase[str], MultiGenericFromBase[int, str], False),
    ],
)
def test_is_subclass_or_self_multi_generic(derived: Any, base: Any, expected: bool) -> None:
    assert is_subclass_or_self(derived, base) is expected


@pytest.mark.parametrize(
    "derived, base, expected",
    [
        (Level, Level, True),
        (Level, int, True),
        (Level, IntEnum, True),
        (int, Level, False),
        (Level, str, False),
        (bool, int, True),
    ],
)
def test_is_subclass_or_self_enums_and_builtins(derived: Any, base: Any, expected: bool) -> None:
    assert is_subclass_or_self(derived, base) is expected


@pytest.mark.parametrize(
    "derived",
    [Base, FromBase, object, int, Level, list, list[int], dict, dict[int, str], GenericFromBase[int]],
)
def test_everything_is_object(derived: Any) -> None:
    assert is_subclass_or_self(derived, object)


def test_is_subclass_or_self_none_derived() -> None:
    assert is_subclass_or_self(None, Base) is False


@pytest.mark.parametrize("base", [42, "Base", Drawable])
def test_is_subclass_or_self_rejects_bad_base(base: Any) -> None:
    with pytest.raises(TypeError):
        is_subclass_or_self(Base, base)


class AbstractSource(ABC):
    @abstractmethod
    def abstract_method(self) -> None: ...

    def virtual_method(self) -> None: ...

    @property
    def virtual_property(self) -> int:
        return 0


class Destination(AbstractSource):
    def abstract_method(self) -> None: ...

    def virtual_method(self) -> None: ...

    @property
    def virtual_property(self) -> int:
        return 1

    def non_virtual_method(self) -> None: ...

    def __repr__(self) -> str:
        return "Destination()"


class DestinationSubclass(Destination):
    def virtual_method(self) -> None: ...


@pytest.mark.parametrize(
    "owner, name, expected",
    [
        (AbstractSource, "abstract_method", False),
        (AbstractSource, "virtual_method", False),
        (AbstractSource, "virtual_property", False),
        (Destination, "abstract_method", True),
        (Destination, "virtual_method", True),
        (Destination, "virtual_property", True),
        (Destination, "non_virtual_method", False),
        (Destination, "__repr__", True),
        (DestinationSubclass, "virtual_method", True),
        (DestinationSubclass, "non_virtual_method", False),
        (DestinationSubclass, "abstract_method", True),
        (Base, "__init__", False),
    ],
)
def test_is_override(owner: type, name: str, expected: bool) -> None:
    assert is_override(owner, name) is expected


def test_is_override_missing_attribute() -> None:
    with pytest.raises(AttributeError, match="no_such_method"):
        is_override(Destination, "no_such_method")


def test_cast_all_valid() -> None:
    items = [FromFromBase() for _ in range(10)]
    assert list(cast_all(items, Base)) == items
    assert list(cast_all(cast_all(items, object), FromFromBase)) == items


def test_cast_all_is_lazy_and_fails_on_bad_item() -> None:
    casted = cast_all([FromFromBase(), Base()], FromFromBase)
    assert isinstance(next(casted), FromFromBase)
    with pytest.raises(TypeError, match="Item 1"):
        next(casted)
