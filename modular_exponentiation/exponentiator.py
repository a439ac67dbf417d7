"""
Modular Exponentiator Implementation

Right-to-left binary exponentiation (square-and-multiply) over a fixed-width
integer type. The number of multiplications is bounded by the bit-length of the
exponent, and every intermediate value is reduced modulo ``modulus``.
"""

import logging
from typing import Any, Optional

from .exceptions import PreconditionViolation
from .interfaces import IModularExponentiator, T
from .numeric_traits import NumericTraits, traits_for

logger = logging.getLogger(__name__)


def _operand_type(base: Any, exponent: Any, modulus: Any) -> type:
    operand_type = type(modulus)
    if type(base) is not operand_type or type(exponent) is not operand_type:
        raise TypeError(
            "base, exponent and modulus must share one integer type, got "
            f"{type(base).__name__}, {type(exponent).__name__} and "
            f"{operand_type.__name__}"
        )
    return operand_type


def check_overflow_guard(modulus: T, traits: NumericTraits) -> None:
    """Verify that (modulus - 1)^2 is representable by the operand type.

    The product is never formed: the test is ``(modulus - 1) < max // (modulus - 1)``.
    For ``modulus <= 1`` every reduced value is zero and there is nothing to check.

    Raises:
        PreconditionViolation: If the type is too narrow for this modulus.
    """
    if not modulus > traits.one:
        return
    largest_residue = modulus - traits.one
    if not largest_residue < traits.max_value // largest_residue:
        logger.warning(
            "Overflow guard rejected modulus %s for %s (max %s)",
            modulus, type(modulus).__name__, traits.max_value,
        )
        raise PreconditionViolation(modulus, traits.max_value)


def mod_exp(base: T, exponent: T, modulus: T) -> T:
    """Compute ``base ** exponent mod modulus`` without forming the full power.

    Args:
        base: The value to raise.
        exponent: The power. A negative exponent is treated as zero.
        modulus: The modulus.

    Returns:
        The result, of the same type as the operands. For a zero or negative
        exponent this is ``1 % modulus``.

    Raises:
        PreconditionViolation: If the operand type cannot hold (modulus - 1)^2.
        TypeError: If the operands differ in type or the type has no fixed width.

    Examples:
        >>> import numpy as np
        >>> int(mod_exp(np.int64(5), np.int64(3), np.int64(13)))
        8
    """
    traits = traits_for(_operand_type(base, exponent, modulus))
    check_overflow_guard(modulus, traits)
    logger.debug("mod_exp with modulus %s on %s", modulus, type(modulus).__name__)

    one = traits.one
    base = base % modulus
    result = one % modulus
    while exponent > traits.zero:
        if exponent % traits.two == one:
            result = (result * base) % modulus
        exponent = exponent >> one
        base = (base * base) % modulus
    return result


class ModularExponentiator(IModularExponentiator):
    """Modular exponentiator using the Singleton pattern.

    The computation is stateless, so one shared instance serves every caller
    and every thread.
    """

    _instance: Optional['ModularExponentiator'] = None

    def __new__(cls) -> 'ModularExponentiator':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def compute(self, base: T, exponent: T, modulus: T) -> T:
        return mod_exp(base, exponent, modulus)


__all__ = [
    "check_overflow_guard",
    "mod_exp",
    "ModularExponentiator",
]
