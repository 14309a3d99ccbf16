from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class PredictRequest(BaseModel):
    data: StrictStr


class OptimizeRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    # strict floats accept JSON ints but reject strings and booleans
    initial_price: StrictFloat
    liquidity_target: StrictFloat
    volatility: StrictFloat


class PredictionResult(BaseModel):
    result: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    qubit_count: int = Field(..., serialization_alias="qubits")
    execution_time_ms: int = Field(..., serialization_alias="executionTimeMs")


class OptimizationResult(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    optimized_price: float
    optimized_liquidity: float
    optimized_volatility: float
    confidence: float
    advantage: bool = Field(..., serialization_alias="quantum_advantage")


class StatusSnapshot(BaseModel):
    qubits_available: int
    queue_length: int
    uptime_text: str = Field(..., serialization_alias="uptime")
    active_jobs: int
