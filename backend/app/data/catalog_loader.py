"""Read an HSN catalog from a delimited text export.

Expected layout is a header row followed by one code per row, e.g. the
CSV export of the CBIC HSN master:

    HSN Code,Description
    0101,"Live horses, asses, mules and hinnies"
"""

import csv
import logging
from pathlib import Path
from typing import NamedTuple

from app.core.validation.catalog import CatalogLoadError

logger = logging.getLogger(__name__)


class CatalogLoadResult(NamedTuple):
    rows: dict[str, str]
    skipped: int


def read_catalog_csv(
    path: str | Path,
    code_column: str = "HSN Code",
    description_column: str = "Description",
    encoding: str = "utf-8-sig",
) -> CatalogLoadResult:
    """Read (code, description) rows from a CSV file.

    Cells are trimmed. Rows with an empty code or description are skipped
    and counted. Later duplicates overwrite earlier ones.
    """
    path = Path(path)
    rows: dict[str, str] = {}
    skipped = 0

    try:
        with path.open(newline="", encoding=encoding) as fh:
            reader = csv.DictReader(fh)
            if not reader.fieldnames:
                raise CatalogLoadError("file has no header row", str(path))
            reader.fieldnames = [name.strip() for name in reader.fieldnames]

            missing = [c for c in (code_column, description_column) if c not in reader.fieldnames]
            if missing:
                raise CatalogLoadError(f"missing column(s): {', '.join(missing)}", str(path))

            for line_no, row in enumerate(reader, start=2):
                code = (row.get(code_column) or "").strip()
                description = (row.get(description_column) or "").strip()
                if not code or not description:
                    skipped += 1
                    continue
                if code in rows:
                    logger.debug(f"{path}:{line_no}: duplicate code {code} overrides earlier row")
                rows[code] = description
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CatalogLoadError(f"cannot read file ({e})", str(path)) from e

    if skipped:
        logger.warning(f"Skipped {skipped} malformed rows in {path}")
    logger.info(f"Read {len(rows)} HSN codes from {path}")

    return CatalogLoadResult(rows, skipped)
