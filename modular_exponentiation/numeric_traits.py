"""
Numeric traits for fixed-width integer types.

Resolves the identities (zero, one, two) and the maximum representable value of
an operand type. numpy's sized integer scalars are supported out of the box;
other classes take part by implementing the BoundedInteger protocol.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Type

import numpy as np

from .interfaces import BoundedInteger, T


class IntegerWidth(str, Enum):
    """Enumeration of the numpy integer widths exposed by name.

    The value is the numpy dtype name, so members round-trip through JSON and
    environment variables unchanged.
    """
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def numpy_type(self) -> Type[np.integer]:
        """The numpy scalar type for this width."""
        return np.dtype(self.value).type

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.numpy_type).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.numpy_type).max)

    def convert(self, value: int) -> np.integer:
        """Convert a Python int into this width.

        Raises:
            ValueError: If the value does not fit the width.
        """
        if not self.min_value <= value <= self.max_value:
            raise ValueError(
                f"{value} is outside the {self.value} range "
                f"[{self.min_value}, {self.max_value}]"
            )
        return self.numpy_type(value)


@dataclass(frozen=True)
class NumericTraits(Generic[T]):
    """Identity values and upper bound of one operand type.

    Attributes:
        zero: Additive identity.
        one: Multiplicative identity.
        two: ``one + one``, used to test the lowest exponent bit.
        max_value: Largest value the type can represent.
    """
    zero: T
    one: T
    two: T
    max_value: T


_NUMPY_TRAITS_CACHE: Dict[type, NumericTraits] = {}


def _numpy_traits(integer_type: Type[np.integer]) -> NumericTraits:
    traits = _NUMPY_TRAITS_CACHE.get(integer_type)
    if traits is None:
        one = integer_type(1)
        traits = NumericTraits(
            zero=integer_type(0),
            one=one,
            two=one + one,
            max_value=integer_type(np.iinfo(integer_type).max),
        )
        _NUMPY_TRAITS_CACHE[integer_type] = traits
    return traits


def traits_for(integer_type: Type[Any]) -> NumericTraits:
    """Return the numeric traits of an operand type.

    Args:
        integer_type: A numpy integer scalar type, or a class implementing
            the BoundedInteger protocol.

    Returns:
        NumericTraits: Identities and maximum value, all of ``integer_type``.

    Raises:
        TypeError: If the type has no fixed width (this includes Python's
            ``int`` and ``bool``) or does not expose its bounds.

    Examples:
        >>> int(traits_for(np.uint8).max_value)
        255
    """
    if isinstance(integer_type, type) and issubclass(integer_type, np.integer):
        return _numpy_traits(integer_type)
    if isinstance(integer_type, type) and issubclass(integer_type, (bool, int)):
        raise TypeError(
            f"{integer_type.__name__} has no fixed width; use a sized integer "
            f"type such as numpy.int64"
        )
    if isinstance(integer_type, BoundedInteger):
        one = integer_type.one()
        return NumericTraits(
            zero=integer_type.zero(),
            one=one,
            two=one + one,
            max_value=integer_type.max_value(),
        )
    raise TypeError(
        f"{getattr(integer_type, '__name__', integer_type)!s} does not provide "
        f"zero(), one() and max_value()"
    )


__all__ = [
    "IntegerWidth",
    "NumericTraits",
    "traits_for",
]
