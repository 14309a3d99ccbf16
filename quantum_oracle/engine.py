import math

from .randomness import RandomSource
from .schemas import PredictionResult, OptimizationResult

QUBIT_COUNT = 256
OPTIMIZATION_CONFIDENCE = 0.92


class QuantumOracleEngine:
    """
    Simulated quantum oracle.

    Values are drawn from the injected random source; no real
    optimization is performed.
    """

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def generate_prediction(self, input_text: str) -> PredictionResult:
        # input_text is accepted but its content does not affect the result
        label = self.rng.integers(0, 1000)
        return PredictionResult(
            result=f"quantum_prediction_{label}",
            confidence=self.rng.uniform(0.85, 0.99),
            qubit_count=QUBIT_COUNT,
            execution_time_ms=self.rng.integers(100, 600),
        )

    def optimize_launch(self, initial_price: float, liquidity_target: float, volatility: float) -> OptimizationResult:
        """
        Perturb launch parameters:
        price by +/-15%, liquidity by +0-50%, volatility scaled to 70-100%.
        """
        optimized_price = initial_price * (1.0 + self.rng.uniform(-0.15, 0.15))
        optimized_liquidity = liquidity_target * (1.0 + self.rng.uniform(0.0, 0.5))
        optimized_volatility = volatility * (0.7 + self.rng.uniform(0.0, 0.3))

        return OptimizationResult(
            optimized_price=float(optimized_price),
            optimized_liquidity=float(optimized_liquidity),
            optimized_volatility=float(optimized_volatility),
            confidence=OPTIMIZATION_CONFIDENCE,
            advantage=True,
        )

    def estimate_execution_time(self, complexity: int) -> int:
        # math.log raises ValueError for complexity <= 0
        return math.floor(math.log(complexity) * 50)
