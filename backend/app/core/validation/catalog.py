"""HSN reference catalog — the read-only code → description table.

Built once from any iterable of (code, description) pairs and never
mutated afterwards, so every request can read it without locking.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)


class HSNValidationError(Exception):
    """Base class for errors raised by the HSN validation service."""


class CatalogLoadError(HSNValidationError):
    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(f"Catalog load failed ({source}): {message}" if source else message)


class EngineConfigError(HSNValidationError):
    """Invalid validation settings (delimiter, hierarchy scope)."""


class HSNCatalog:
    """Immutable mapping of HSN code to catalog description.

    Keys are stored exactly as the source provides them. A malformed key
    is kept, it just never matches a well-formed query.
    """

    def __init__(
        self,
        entries: Mapping[str, str] | Iterable[tuple[str, str]],
        source: str = "<memory>",
        skipped_rows: int = 0,
    ):
        self.source = source
        self.skipped_rows = skipped_rows

        pairs = entries.items() if isinstance(entries, Mapping) else entries
        try:
            table = {code: description for code, description in pairs}
        except (OSError, ValueError, TypeError) as e:
            raise CatalogLoadError(f"unreadable source ({e})", source) from e

        if not table:
            raise CatalogLoadError("source yielded no entries", source)

        bad = [code for code, description in table.items() if not isinstance(description, str)]
        if bad:
            raise CatalogLoadError(
                f"non-text description for {len(bad)} code(s), e.g. {bad[0]!r}", source
            )

        self._entries = MappingProxyType(table)

    def lookup(self, code: str) -> str | None:
        """Return the description for a code, or None if absent."""
        return self._entries.get(code)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"HSNCatalog(source={self.source!r}, codes={len(self)})"
