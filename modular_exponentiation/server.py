import logging
from contextlib import asynccontextmanager
from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException

from logging_config import setup_logging

from .config import get_config
from .exceptions import PreconditionViolation
from .exponentiator import ModularExponentiator
from .models import ModExpRequest, ModExpResponse, WidthInfo
from .numeric_traits import IntegerWidth

config = get_config()
# Handlers go on the package logger so the exponentiator's own records reach them too
setup_logging("modular_exponentiation", log_dir=config.log_dir, level=config.log_level)
logger = logging.getLogger(__name__)

exponentiator = ModularExponentiator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Modular Exponentiation service started (default width {config.default_width.value})")
    yield
    logger.info("Modular Exponentiation service stopped")


app = FastAPI(
    title="Modular Exponentiation",
    description="API for computing base ** exponent mod modulus on fixed-width integers",
    lifespan=lifespan
)


@app.post("/calculate", response_model=ModExpResponse)
async def mod_exp_endpoint(request: ModExpRequest) -> ModExpResponse:
    """Эндпоинт для вычисления base ** exponent mod modulus.

    Операнды приводятся к выбранной ширине целого типа до вычисления.

    Args:
        request: Запрос с base, exponent, modulus и шириной типа.

    Returns:
        ModExpResponse: Ответ с результатом вычисления.

    Raises:
        HTTPException: 400, если тип слишком узок для модуля; 500 при прочих ошибках.
    """
    width = request.width
    try:
        result = exponentiator.compute(
            width.convert(request.base),
            width.convert(request.exponent),
            width.convert(request.modulus),
        )
        return ModExpResponse(result=int(result), width=width)
    except PreconditionViolation as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Modular exponentiation failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/widths", response_model=List[WidthInfo])
async def list_widths() -> List[WidthInfo]:
    return [
        WidthInfo(name=width, min_value=width.min_value, max_value=width.max_value)
        for width in IntegerWidth
    ]


@app.get("/health")
async def health() -> dict:
    return {"status": "healthy"}


def run() -> None:
    """Run the FastAPI server."""
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
