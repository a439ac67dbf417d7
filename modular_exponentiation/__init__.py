"""
Modular Exponentiation Package

This package computes ``base ** exponent mod modulus`` on fixed-width integer
types using right-to-left binary exponentiation, refusing moduli whose
intermediate products the chosen type cannot represent.

Main exports:
    - mod_exp: Functional entry point
    - ModularExponentiator: IModularExponentiator implementation
    - PreconditionViolation: Raised when the integer type is too narrow
    - IntegerWidth, NumericTraits, traits_for: Operand type support

Example usage:
    import numpy as np
    from modular_exponentiation import mod_exp

    mod_exp(np.int64(4), np.int64(13), np.int64(497))  # 445

The HTTP service lives in ``modular_exponentiation.server`` and is not imported here.
"""

from .exceptions import PreconditionViolation
from .interfaces import BoundedInteger, IModularExponentiator, SupportsModularArithmetic
from .numeric_traits import IntegerWidth, NumericTraits, traits_for
from .exponentiator import ModularExponentiator, check_overflow_guard, mod_exp

__all__ = [
    "PreconditionViolation",
    "BoundedInteger",
    "IModularExponentiator",
    "SupportsModularArithmetic",
    "IntegerWidth",
    "NumericTraits",
    "traits_for",
    "ModularExponentiator",
    "check_overflow_guard",
    "mod_exp",
]

__version__ = "1.0.0"
