"""
Modular Exponentiation Interfaces

This module defines the structural contract an integer type must satisfy to take
part in modular exponentiation, and the abstract interface for exponentiators.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, TypeVar, runtime_checkable


class SupportsModularArithmetic(Protocol):
    """Protocol for the arithmetic a fixed-width integer type must provide.

    Operands are combined only with values of their own type, so every operation
    takes and returns the implementing type.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __mod__(self, other: Any) -> Any: ...

    def __floordiv__(self, other: Any) -> Any: ...

    def __rshift__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> Any: ...

    def __le__(self, other: Any) -> Any: ...

    def __gt__(self, other: Any) -> Any: ...


@runtime_checkable
class BoundedInteger(Protocol):
    """Protocol for integer classes that publish their own identities and bound.

    Any class exposing these three classmethods can be used as an operand type
    without being registered anywhere.
    """

    @classmethod
    def zero(cls) -> Any: ...

    @classmethod
    def one(cls) -> Any: ...

    @classmethod
    def max_value(cls) -> Any: ...


T = TypeVar("T", bound=SupportsModularArithmetic)


class IModularExponentiator(ABC):
    """
    Abstract interface for modular exponentiation.

    Implementations compute ``base ** exponent % modulus`` on a fixed-width
    integer type without forming the unreduced power.
    """

    @abstractmethod
    def compute(self, base: T, exponent: T, modulus: T) -> T:
        """
        Compute ``base ** exponent mod modulus``.

        Args:
            base: The value to raise.
            exponent: The power. Negative exponents are treated as zero.
            modulus: The modulus. All three operands share one integer type.

        Returns:
            The reduced power, of the same type as the operands.

        Raises:
            PreconditionViolation: If the operand type cannot hold (modulus - 1)^2.
            TypeError: If the operands are of different or unsupported types.
        """
        pass


__all__ = [
    "SupportsModularArithmetic",
    "BoundedInteger",
    "IModularExponentiator",
    "T",
]
