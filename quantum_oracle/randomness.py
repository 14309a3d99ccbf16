import threading
from typing import Optional

import numpy as np


class RandomSource:
    """Thread-safe uniform random provider shared by concurrent requests"""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def uniform(self, low: float, high: float) -> float:
        """Draw a float in [low, high)"""
        with self._lock:
            return float(self._rng.uniform(low, high))

    def integers(self, low: int, high: int) -> int:
        """Draw an int in [low, high)"""
        with self._lock:
            return int(self._rng.integers(low, high))
