"""Per-code validation outcome."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class RejectReason(str, Enum):
    FORMAT = "format"
    NOT_FOUND = "not-found"
    HIERARCHY = "hierarchy"


class Verdict(BaseModel):
    """Result of validating one normalized code.

    `description` is present only on valid verdicts; `reason` and `detail`
    only on invalid ones.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    code: str
    description: Optional[str] = None
    reason: Optional[RejectReason] = None
    detail: Optional[str] = None

    @model_validator(mode="after")
    def _exclusive_payload(self) -> "Verdict":
        if self.valid:
            if self.description is None or self.reason is not None or self.detail is not None:
                raise ValueError("valid verdict carries a description and no reason")
        elif self.reason is None or self.description is not None:
            raise ValueError("invalid verdict carries a reason and no description")
        return self

    @classmethod
    def accepted(cls, code: str, description: str) -> "Verdict":
        return cls(valid=True, code=code, description=description)

    @classmethod
    def rejected(cls, code: str, reason: RejectReason, detail: str | None = None) -> "Verdict":
        return cls(valid=False, code=code, reason=reason, detail=detail)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with absent fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)
