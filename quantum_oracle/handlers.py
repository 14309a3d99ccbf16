"""
Request handlers for the quantum oracle routes.

Handlers take the raw request body and return an Outcome instead of
raising, so every failure reaches the HTTP layer through to_response().
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Type

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from .engine import QuantumOracleEngine
from .errors import ApiError, ErrorKind
from .schemas import OptimizeRequest, PredictRequest

logger = logging.getLogger("quantum_oracle")


@dataclass(frozen=True)
class Outcome:
    data: Optional[BaseModel] = None
    error: Optional[ApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse(model: Type[BaseModel], body: bytes):
    try:
        return model.model_validate_json(body), None
    except ValidationError as e:
        return None, ApiError.from_validation(e)


def _run(operation: str, call: Callable[[], BaseModel]) -> Outcome:
    try:
        return Outcome(data=call())
    except Exception as e:
        logger.exception(f"{operation} failed")
        return Outcome(error=ApiError(ErrorKind.INTERNAL, str(e) or type(e).__name__))


def handle_predict(body: bytes, engine: QuantumOracleEngine) -> Outcome:
    request, error = _parse(PredictRequest, body)
    if error:
        logger.warning(f"Rejected predict request: {error.message}")
        return Outcome(error=error)

    return _run("Prediction", lambda: engine.generate_prediction(request.data))


def handle_optimize(body: bytes, engine: QuantumOracleEngine) -> Outcome:
    request, error = _parse(OptimizeRequest, body)
    if error:
        logger.warning(f"Rejected optimize request: {error.message}")
        return Outcome(error=error)

    outcome = _run(
        "Optimization",
        lambda: engine.optimize_launch(
            request.initial_price,
            request.liquidity_target,
            request.volatility,
        ),
    )
    if outcome.ok:
        logger.info(
            f"Optimization: price={request.initial_price} -> {outcome.data.optimized_price:.4f}"
        )
    return outcome


def success_envelope(data: BaseModel) -> dict:
    return {"success": True, "data": data.model_dump(by_alias=True)}


def error_envelope(error: ApiError) -> dict:
    return {"success": False, "error": error.message}


def to_response(outcome: Outcome) -> JSONResponse:
    """Translate an Outcome into the HTTP status and JSON envelope"""
    if outcome.ok:
        return JSONResponse(status_code=200, content=success_envelope(outcome.data))
    return JSONResponse(status_code=outcome.error.status_code, content=error_envelope(outcome.error))
