"""Exceptions raised by the modular exponentiation package."""


class PreconditionViolation(ValueError):
    """Raised when an integer type is too narrow for the requested modulus.

    The largest product the algorithm forms is ``(modulus - 1) * (modulus - 1)``.
    If the operand type cannot represent it, the computation is refused instead
    of returning a wrapped result.

    Attributes:
        modulus: The modulus that failed the overflow guard.
        max_value: Maximum representable value of the operand type.
    """

    def __init__(self, modulus, max_value):
        self.modulus = modulus
        self.max_value = max_value
        super().__init__(
            f"Integer type {type(modulus).__name__} (max {max_value}) cannot hold "
            f"(modulus - 1)^2 for modulus {modulus}"
        )
