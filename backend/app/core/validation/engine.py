"""HSN validation engine — catalog, rules, and batch processor in one unit.

Callers hold a reference to an engine and replace it wholesale to pick
up a new catalog; an engine never changes after construction.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from app.config import Settings, settings
from .batch import BatchProcessor, normalize
from .catalog import EngineConfigError, HSNCatalog
from .rules import HierarchyRule, HierarchyScope
from .validator import HSNValidator
from .verdict import Verdict

logger = logging.getLogger(__name__)


class HSNValidationEngine:
    """Validate delimited batches of HSN codes against a fixed catalog."""

    def __init__(
        self,
        catalog_source: Mapping[str, str] | Iterable[tuple[str, str]],
        *,
        source_name: str = "<memory>",
        skipped_rows: int = 0,
        delimiter: str = ",",
        hierarchy_check: bool = False,
        hierarchy_scope: HierarchyScope | str = HierarchyScope.TARIFF_ITEM,
    ):
        self.catalog = HSNCatalog(catalog_source, source=source_name, skipped_rows=skipped_rows)
        try:
            self.hierarchy_rule = HierarchyRule(
                self.catalog, enabled=hierarchy_check, scope=hierarchy_scope
            )
            self.validator = HSNValidator(self.catalog, self.hierarchy_rule)
            self.batch = BatchProcessor(self.validator, delimiter)
        except ValueError as e:
            raise EngineConfigError(str(e)) from e

        hierarchy = f"on ({self.hierarchy_rule.scope.value})" if hierarchy_check else "off"
        logger.info(
            f"HSN engine ready: {len(self.catalog)} codes from {source_name}, "
            f"hierarchy check {hierarchy}"
        )

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "HSNValidationEngine":
        """Build an engine from the configured CSV, or the bundled sample."""
        from app.data.catalog_loader import read_catalog_csv
        from app.data.hsn_catalog import SAMPLE_CATALOG

        cfg = cfg or settings

        if cfg.HSN_CATALOG_PATH:
            result = read_catalog_csv(
                cfg.HSN_CATALOG_PATH,
                code_column=cfg.HSN_CATALOG_CODE_COLUMN,
                description_column=cfg.HSN_CATALOG_DESCRIPTION_COLUMN,
                encoding=cfg.HSN_CATALOG_ENCODING,
            )
            source_name, rows, skipped = cfg.HSN_CATALOG_PATH, result.rows, result.skipped
        else:
            source_name, rows, skipped = "bundled sample", SAMPLE_CATALOG, 0

        return cls(
            rows,
            source_name=source_name,
            skipped_rows=skipped,
            delimiter=cfg.HSN_CODE_DELIMITER,
            hierarchy_check=cfg.HSN_HIERARCHY_CHECK,
            hierarchy_scope=cfg.HSN_HIERARCHY_SCOPE,
        )

    def process(self, raw_input: str, delimiter: str | None = None) -> list[Verdict]:
        return self.batch.process(raw_input, delimiter)

    def validate(self, code: str) -> Verdict:
        """Validate a single candidate code (trimmed first)."""
        return self.validator.validate(normalize(code))

    def lookup(self, code: str) -> str | None:
        return self.catalog.lookup(normalize(code))

    def stats(self) -> dict[str, Any]:
        return {
            "source": self.catalog.source,
            "code_count": len(self.catalog),
            "skipped_rows": self.catalog.skipped_rows,
            "delimiter": self.batch.delimiter,
            "hierarchy_check": self.hierarchy_rule.enabled,
            "hierarchy_scope": self.hierarchy_rule.scope.value,
        }
