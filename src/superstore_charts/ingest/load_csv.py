"""Load the transactions CSV into row mappings.

Every value is kept as a string (no NA inference, no dtype guessing) so the
aggregation pipeline sees exactly what the file contains and applies its own
date and decimal coercion.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from superstore_charts.models import REQUIRED_COLUMNS

log = logging.getLogger(__name__)


def load_frame(path: Path, region_column: str = "Region") -> pd.DataFrame:
    """Read the CSV at `path` into a string-typed pandas DataFrame.

    Args:
        path: CSV file with at least the region, `Category`, `Order Date`,
            `Profit` and `Sales` columns. Extra columns are kept but unused.
        region_column: Name of the region column (`State` in the original
            Superstore export).

    Raises:
        FileNotFoundError: if `path` does not exist.
        ValueError: if required columns are missing.
    """
    if not path.exists():
        raise FileNotFoundError(f"Transactions CSV not found: {path}")

    pdf = pd.read_csv(path, dtype=str, keep_default_na=False, encoding_errors="replace")
    pdf.columns = [str(c).strip() for c in pdf.columns]

    missing = [c for c in (region_column, *REQUIRED_COLUMNS) if c not in pdf.columns]
    if missing:
        raise ValueError(f"{path} is missing required column(s): {', '.join(missing)}")

    return pdf


def load_records(path: Path, region_column: str = "Region") -> list[dict[str, str]]:
    """Return the rows of the CSV at `path` as a list of dicts (source order)."""
    pdf = load_frame(path, region_column)
    records = pdf.to_dict(orient="records")
    log.info("Loaded %d records from %s", len(records), path)
    return records
