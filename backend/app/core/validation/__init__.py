from .catalog import CatalogLoadError, EngineConfigError, HSNCatalog, HSNValidationError
from .verdict import RejectReason, Verdict
from .rules import HierarchyRule, HierarchyScope, exists_in_catalog, is_valid_format
from .validator import HSNValidator
from .batch import BatchProcessor, normalize
from .engine import HSNValidationEngine

__all__ = [
    "CatalogLoadError",
    "EngineConfigError",
    "HSNCatalog",
    "HSNValidationError",
    "RejectReason",
    "Verdict",
    "HierarchyRule",
    "HierarchyScope",
    "exists_in_catalog",
    "is_valid_format",
    "HSNValidator",
    "BatchProcessor",
    "normalize",
    "HSNValidationEngine",
]
