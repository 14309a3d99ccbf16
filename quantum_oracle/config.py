"""
Runtime configuration for the Quantum Oracle API
"""
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Settings:
    def __init__(self):
        self.SERVICE_NAME: str = os.getenv("QUANTUM_SERVICE_NAME", "Quantum Oracle API")
        self.API_PREFIX: str = os.getenv("QUANTUM_API_PREFIX", "/api/quantum")
        self.HOST: str = os.getenv("QUANTUM_HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("QUANTUM_PORT", "8080"))
        self.LOG_LEVEL: str = os.getenv("QUANTUM_LOG_LEVEL", "INFO").upper()
        self.RANDOM_SEED: Optional[int] = _optional_int(os.getenv("QUANTUM_RANDOM_SEED"))
        self.CORS_ORIGINS: List[str] = [
            o.strip() for o in os.getenv("QUANTUM_CORS_ORIGINS", "*").split(",") if o.strip()
        ]


# Settings are read once per process
@lru_cache()
def get_settings() -> Settings:
    return Settings()
