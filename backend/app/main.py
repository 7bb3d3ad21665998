"""HSN Code Validator — FastAPI Application.

Validates Harmonized System Nomenclature codes against a reference
catalog and returns a per-code verdict for every submitted token.

Startup strategy:
- The catalog is read once, synchronously, before the server accepts requests
- A catalog that cannot be loaded aborts startup; there is no partial mode
- Reloads build a fresh engine and swap it in (POST /api/v1/hsn/catalog/reload)
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import hsn
from app.config import settings
from app.core.validation import HSNValidationEngine

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # HSNValidationError propagates: the service must not start without a usable engine
    engine = HSNValidationEngine.from_settings()
    hsn.set_engine(engine)
    logger.info(f"Serving {len(engine.catalog)} HSN codes")
    yield
    hsn.set_engine(None)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Validates HSN product codes for format, catalog presence, and "
        "hierarchical consistency, returning a structured verdict per code."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hsn.router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "operational",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
