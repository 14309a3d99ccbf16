"""
Quantum Oracle API
Simulated prediction and launch optimization for token launches
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from . import __version__
from .config import get_settings
from .engine import QuantumOracleEngine
from .randomness import RandomSource
from .routes import router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger("quantum_oracle")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info(f"{settings.SERVICE_NAME} Starting")
    logger.info(f"Routes mounted at {settings.API_PREFIX}")
    if settings.RANDOM_SEED is not None:
        logger.info(f"Random source seeded with {settings.RANDOM_SEED}")
    logger.info("=" * 50)

    yield

    logger.info(f"{settings.SERVICE_NAME} Shutting Down")


# Initialize app
app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Simulated quantum prediction and token launch optimization",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize engine
app.state.engine = QuantumOracleEngine(RandomSource(settings.RANDOM_SEED))


# ============== Middleware ==============

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing"""
    start = time.time()

    response = await call_next(request)

    duration = (time.time() - start) * 1000
    logger.info(f"{request.method} {request.url.path} | {response.status_code} | {duration:.1f}ms")

    return response


# ============== Routes ==============

app.include_router(router, prefix=settings.API_PREFIX, tags=["Quantum Oracle"])


def run():
    """Console entrypoint: serve the app with uvicorn"""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
