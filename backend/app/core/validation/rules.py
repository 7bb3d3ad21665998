"""Validation rules: format, catalog existence, and hierarchy.

HSN codes nest in 2-4-6-8 digit levels:
chapter (2) → heading (4) → subheading (6) → tariff item (8).
"""

from enum import Enum

from .catalog import HSNCatalog

HSN_MIN_LENGTH = 2
HSN_MAX_LENGTH = 8
HIERARCHY_LEVELS = (2, 4, 6)
TARIFF_ITEM_LENGTH = 8

# str.isdigit() accepts non-ASCII digits such as "٣" or "३"
_ASCII_DIGITS = frozenset("0123456789")


# ── Format rule ──────────────────────────────────────────────────

def format_problem(code: str) -> str | None:
    """Describe why a code is not a syntactic HSN code, or None if it is."""
    if not code:
        return "empty code"
    if any(ch not in _ASCII_DIGITS for ch in code):
        return "non-digit characters"
    if not HSN_MIN_LENGTH <= len(code) <= HSN_MAX_LENGTH:
        return f"length {len(code)} outside {HSN_MIN_LENGTH}-{HSN_MAX_LENGTH}"
    return None


def is_valid_format(code: str) -> bool:
    return format_problem(code) is None


# ── Existence rule ───────────────────────────────────────────────

def exists_in_catalog(catalog: HSNCatalog, code: str) -> bool:
    return catalog.lookup(code) is not None


# ── Hierarchy rule ───────────────────────────────────────────────

class HierarchyScope(str, Enum):
    TARIFF_ITEM = "tariff_item"   # only 8-digit codes need their ancestors
    ALL_LEVELS = "all_levels"     # every code needs each shorter level


class HierarchyRule:
    """Check that a code's coarser classification levels are catalogued.

    Many real catalogs list tariff items without their headings, so the
    rule is off unless explicitly enabled. When off it accepts everything.
    """

    def __init__(
        self,
        catalog: HSNCatalog,
        enabled: bool = False,
        scope: HierarchyScope | str = HierarchyScope.TARIFF_ITEM,
    ):
        self.catalog = catalog
        self.enabled = enabled
        self.scope = HierarchyScope(scope)

    def ancestors(self, code: str) -> list[str]:
        """Prefixes of `code` that must exist for it to be consistent."""
        if self.scope is HierarchyScope.TARIFF_ITEM:
            if len(code) != TARIFF_ITEM_LENGTH:
                return []
            return [code[:n] for n in HIERARCHY_LEVELS]
        return [code[:n] for n in HIERARCHY_LEVELS if n < len(code)]

    def missing_ancestors(self, code: str) -> list[str]:
        if not self.enabled:
            return []
        return [p for p in self.ancestors(code) if not exists_in_catalog(self.catalog, p)]

    def is_hierarchy_valid(self, code: str) -> bool:
        return not self.missing_ancestors(code)
