"""Type hierarchy inspection that understands ``typing`` generics."""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar, get_args, get_origin

T = TypeVar("T")


def _origin(tp: Any) -> Any:
    return get_origin(tp) or tp


def _ancestry(tp: Any) -> Iterator[Any]:
    """
    Yield ``tp`` followed by all of its bases, parametrized where possible.

    Type variables of generic bases are substituted with the arguments of ``tp``,
    so ``Child[str]`` with ``class Child(Base[T])`` yields ``Base[str]``.
    """
    yield tp

    origin = _origin(tp)
    if not isinstance(origin, type):
        return

    params = getattr(origin, "__parameters__", ())
    substitution = dict(zip(params, get_args(tp)))

    # __orig_bases__ is inherited through getattr, so read the class's own dict.
    bases = origin.__dict__.get("__orig_bases__", origin.__bases__)
    for base in bases:
        # Generic[T] / Protocol[T] markers cannot be re-subscripted
        if _origin(base) in (Generic, Protocol):
            continue
        base_params = getattr(base, "__parameters__", ())
        if substitution and base_params:
            base = base[tuple(substitution.get(p, p) for p in base_params)]
        yield from _ancestry(base)


def is_subclass_or_self(derived: Any, base: Any) -> bool:
    """
    Return ``True`` if ``derived`` is ``base`` or one of its subclasses.

    Generic classes are supported on both sides: a bare generic ``base`` matches
    any parametrization of it, while a parametrized ``base`` such as ``Box[int]``
    only matches classes whose ancestry resolves to exactly ``Box[int]``.
    Enums with a mixin type (``IntEnum``) are subclasses of that type.

    Raises:
        TypeError: If ``base`` is not a class or is a ``Protocol``.
    """
    base_origin = _origin(base)
    if not isinstance(base_origin, type):
        raise TypeError(f"base must be a class or a parametrized generic. Got {base!r}")
    if getattr(base_origin, "_is_protocol", False):
        raise TypeError(f"base cannot be a Protocol. Got {base!r}")

    if derived is None:
        return False

    base_is_bare = base is base_origin
    for ancestor in _ancestry(derived):
        if ancestor == base:
            return True
        if base_is_bare and _origin(ancestor) is base:
            return True
    return False


def is_override(owner: type, name: str) -> bool:
    """
    Return ``True`` if the attribute ``name`` as resolved on ``owner`` overrides
    a definition in one of the classes further up the MRO.

    Raises:
        AttributeError: If no class in the MRO of ``owner`` defines ``name``.
    """
    mro = owner.__mro__
    for depth, cls in enumerate(mro):
        if name in cls.__dict__:
            return any(name in parent.__dict__ for parent in mro[depth + 1 :])
    raise AttributeError(f"{owner.__name__} has no attribute {name!r}")


def cast_all(items: Iterable[Any], target_type: type[T]) -> Iterator[T]:
    """
    Yield ``items`` unchanged, checking that each is an instance of ``target_type``.

    Raises:
        TypeError: On the first item that is not a ``target_type``.
    """
    for index, item in enumerate(items):
        if not isinstance(item, target_type):
            raise TypeError(
                f"Item {index} of type {type(item).__name__} is not a {target_type.__name__}."
            )
        yield item
