"""
Reflection helpers.

## Public API
- is_subclass_or_self: Subclass check that understands typing generics.
- is_override: Whether a class attribute overrides a base class definition.
- cast_all: Type-checked pass-through of an iterable.
- EnumConverter: Checked enum <-> fixed-width integer conversion.
"""

from .inspection import is_subclass_or_self, is_override, cast_all
from .enum_converter import EnumConverter

__all__ = [
    "is_subclass_or_self",
    "is_override",
    "cast_all",
    "EnumConverter",
]
