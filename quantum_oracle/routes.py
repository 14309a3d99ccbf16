from fastapi import APIRouter, Depends, Request

from .config import get_settings
from .engine import QuantumOracleEngine
from .handlers import handle_optimize, handle_predict, success_envelope, to_response
from .status import health_report, status_snapshot

router = APIRouter()


def get_engine(request: Request) -> QuantumOracleEngine:
    """Engine stored on the application state at startup"""
    return request.app.state.engine


@router.get("/health")
def health():
    """Health check endpoint"""
    return health_report(get_settings().SERVICE_NAME)


@router.get("/status")
def status():
    """Simulated quantum backend status"""
    return success_envelope(status_snapshot())


@router.post("/predict")
async def predict(request: Request, engine: QuantumOracleEngine = Depends(get_engine)):
    """
    Generate a simulated prediction for the submitted `data` string.
    """
    body = await request.body()
    return to_response(handle_predict(body, engine))


@router.post("/optimize")
async def optimize(request: Request, engine: QuantumOracleEngine = Depends(get_engine)):
    """
    Optimize token launch parameters.

    Expects numeric `initial_price`, `liquidity_target` and `volatility`.
    """
    body = await request.body()
    return to_response(handle_optimize(body, engine))
