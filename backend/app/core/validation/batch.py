"""Batch processor — raw delimited input to ordered verdicts.

Every token yields exactly one verdict, in input order. Empty tokens
(",,", a trailing comma) are format failures rather than being dropped,
and duplicates are validated independently.
"""

import logging

from .validator import HSNValidator
from .verdict import Verdict

logger = logging.getLogger(__name__)


def normalize(token: str) -> str:
    """Strip surrounding whitespace. Idempotent; digits are untouched."""
    return token.strip()


class BatchProcessor:
    def __init__(self, validator: HSNValidator, delimiter: str = ","):
        if not delimiter:
            raise ValueError("Batch delimiter must be a non-empty string")
        self.validator = validator
        self.delimiter = delimiter

    def tokenize(self, raw_input: str, delimiter: str | None = None) -> list[str]:
        if delimiter is None:
            delimiter = self.delimiter
        elif not delimiter:
            raise ValueError("Batch delimiter must be a non-empty string")
        return raw_input.split(delimiter)

    def process(self, raw_input: str, delimiter: str | None = None) -> list[Verdict]:
        """Validate every token of `raw_input`.

        `delimiter` overrides the configured one for this call only.
        """
        tokens = self.tokenize(raw_input, delimiter)
        verdicts = [self.validator.validate(normalize(token)) for token in tokens]

        logger.debug(
            f"Processed batch: {len(tokens)} tokens, "
            f"{sum(v.valid for v in verdicts)} valid"
        )
        return verdicts
