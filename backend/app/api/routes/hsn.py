"""HSN validation routes — batch validation and catalog lookups."""

import logging

from fastapi import APIRouter, HTTPException, Query

from app.config import settings
from app.core.validation import HSNValidationEngine, HSNValidationError, Verdict
from app.schemas.hsn import BatchValidationResponse, CatalogStats, ValidateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hsn", tags=["HSN Validation"])

# Active engine; replaced as a whole on reload
_engine: HSNValidationEngine | None = None


def set_engine(engine: HSNValidationEngine | None):
    global _engine
    _engine = engine


def get_engine() -> HSNValidationEngine:
    if _engine is None:
        raise HTTPException(status_code=503, detail="HSN catalog not loaded")
    return _engine


def _run_batch(codes: str, delimiter: str | None) -> BatchValidationResponse:
    engine = get_engine()

    n_tokens = len(engine.batch.tokenize(codes, delimiter))
    if n_tokens > settings.HSN_MAX_BATCH_CODES:
        raise HTTPException(
            status_code=413,
            detail=f"{n_tokens} codes submitted; limit is {settings.HSN_MAX_BATCH_CODES}",
        )

    return BatchValidationResponse.from_verdicts(engine.process(codes, delimiter))


@router.post(
    "/validate",
    response_model=BatchValidationResponse,
    response_model_exclude_none=True,
)
async def validate_codes(req: ValidateRequest):
    """Validate a delimited batch of HSN codes.

    Returns one result per submitted token, in order — including empty
    tokens and duplicates.
    """
    return _run_batch(req.codes, req.delimiter)


@router.get(
    "/validate",
    response_model=BatchValidationResponse,
    response_model_exclude_none=True,
)
async def validate_codes_query(
    codes: str = Query(...),
    delimiter: str | None = Query(default=None, min_length=1),
):
    """Query-string form of POST /hsn/validate."""
    return _run_batch(codes, delimiter)


@router.get("/codes/{code}", response_model=Verdict, response_model_exclude_none=True)
async def validate_single_code(code: str):
    """Validate one code."""
    return get_engine().validate(code)


@router.get("/catalog", response_model=CatalogStats)
async def catalog_stats():
    return get_engine().stats()


@router.get("/catalog/{code}")
async def lookup_code(code: str):
    """Exact catalog lookup, without format or hierarchy checks."""
    description = get_engine().lookup(code)
    if description is None:
        raise HTTPException(status_code=404, detail=f"HSN code '{code.strip()}' not in catalog")
    return {"code": code.strip(), "description": description}


@router.post("/catalog/reload", response_model=CatalogStats)
async def reload_catalog():
    """Rebuild the engine from current settings and swap it in.

    On failure the engine already serving requests stays in place.
    """
    try:
        engine = HSNValidationEngine.from_settings()
    except HSNValidationError as e:
        logger.error(f"Catalog reload failed, keeping current engine: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    set_engine(engine)
    logger.info(f"Catalog reloaded: {len(engine.catalog)} codes")
    return engine.stats()
