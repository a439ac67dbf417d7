from pydantic import BaseModel, Field, model_validator

from .config import get_config
from .numeric_traits import IntegerWidth


class ModExpRequest(BaseModel):
    """Request model for computing base ** exponent mod modulus.

    Attributes:
        base (int): The value to raise.
        exponent (int): The power; negative values behave like zero.
        modulus (int): The modulus.
        width (IntegerWidth): Integer width all three operands are converted to.
    """
    base: int = Field(..., description="The value to raise")
    exponent: int = Field(..., description="The power; negative values behave like zero")
    modulus: int = Field(..., description="The modulus")
    width: IntegerWidth = Field(
        default_factory=lambda: get_config().default_width,
        description="Fixed-width integer type used for the computation"
    )

    @model_validator(mode='after')
    def check_operands_fit_width(self) -> 'ModExpRequest':
        for name in ('base', 'exponent', 'modulus'):
            value = getattr(self, name)
            if not self.width.min_value <= value <= self.width.max_value:
                raise ValueError(
                    f"{name}={value} does not fit {self.width.value} "
                    f"[{self.width.min_value}, {self.width.max_value}]"
                )
        return self


class ModExpResponse(BaseModel):
    """Response model for a modular exponentiation.

    Attributes:
        result (int): base ** exponent mod modulus.
        width (IntegerWidth): Integer width the result was computed in.
    """
    result: int = Field(..., description="base ** exponent mod modulus")
    width: IntegerWidth = Field(..., description="Integer width of the computation")


class WidthInfo(BaseModel):
    name: IntegerWidth
    min_value: int
    max_value: int
