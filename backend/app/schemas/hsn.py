"""Pydantic schemas for the HSN validation API."""

from typing import Optional

from pydantic import BaseModel, Field

from app.core.validation import Verdict


# ── Request schemas ──────────────────────────────────────────────

class ValidateRequest(BaseModel):
    codes: str = Field(..., description="Delimited HSN codes, e.g. '0101, 01012100'")
    delimiter: Optional[str] = Field(default=None, min_length=1)


# ── Response schemas ─────────────────────────────────────────────

class BatchValidationResponse(BaseModel):
    total: int
    valid_count: int
    invalid_count: int
    results: list[Verdict]

    @classmethod
    def from_verdicts(cls, verdicts: list[Verdict]) -> "BatchValidationResponse":
        valid = sum(1 for v in verdicts if v.valid)
        return cls(
            total=len(verdicts),
            valid_count=valid,
            invalid_count=len(verdicts) - valid,
            results=verdicts,
        )


class CatalogStats(BaseModel):
    source: str
    code_count: int
    skipped_rows: int
    delimiter: str
    hierarchy_check: bool
    hierarchy_scope: str
