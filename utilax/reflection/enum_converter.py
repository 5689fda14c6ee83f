import operator
from enum import Enum
from typing import Generic, TypeVar

import numpy as np
import numpy.typing as npt

TEnum = TypeVar("TEnum", bound=Enum)


class EnumConverter(Generic[TEnum]):
    """
    Checked conversion between an integer-valued enum and a fixed-width integer.

    Conversions never silently wrap: values that do not fit into ``dtype`` raise
    ``OverflowError`` and integers that are not defined members raise ``ValueError``.
    """

    def __init__(self, enum_type: type[TEnum], dtype: npt.DTypeLike = np.int32) -> None:
        int_dtype = np.dtype(dtype)
        if int_dtype.kind not in "iu":
            raise ValueError(f"dtype must be an integer dtype. Got {int_dtype}")
        for member in enum_type:
            if not isinstance(member.value, (int, np.integer)):
                raise ValueError(
                    f"{enum_type.__name__}.{member.name} has non-integer value {member.value!r}."
                )
        self.enum_type = enum_type
        self.dtype = int_dtype
        self._bounds = np.iinfo(int_dtype)

    def _check_fits(self, value: int) -> None:
        if not self._bounds.min <= value <= self._bounds.max:
            raise OverflowError(f"Value {value} does not fit into {self.dtype}.")

    def to_int(self, member: TEnum) -> np.integer:
        """Convert an enum member to its backing integer."""
        if not isinstance(member, self.enum_type):
            raise TypeError(f"Expected a {self.enum_type.__name__}. Got {type(member).__name__}")
        value = int(member.value)
        self._check_fits(value)
        return self.dtype.type(value)

    def to_enum(self, value: int | np.integer) -> TEnum:
        """Convert an integer to the enum member it defines.

        Raises:
            TypeError: If ``value`` is not an integer, e.g. a float.
        """
        value = operator.index(value)
        self._check_fits(value)
        try:
            return self.enum_type(value)
        except ValueError:
            raise ValueError(
                f"{value} is not a defined value of {self.enum_type.__name__}."
            ) from None
