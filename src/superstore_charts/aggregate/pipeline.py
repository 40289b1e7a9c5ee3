"""Region-average aggregation pipeline.

Functions in this module turn the loaded transactions table into the series a
chart draws: group records by order year or category, pick one group, and
average a metric (profit or sales) per region inside it.

Expectations:
- Input: a sequence of row mappings with string values, keyed by the CSV
  column names (`Region`, `Category`, `Order Date`, `Profit`, `Sales`).
- Output: plain dicts/lists for the grouping step and a `DerivedSeries`
  model for the full derivation.

Every function is stateless; records are read, never mutated.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Sequence

import pandas as pd

from superstore_charts.errors import InvalidMetricError, ParseError, UnknownKeyError
from superstore_charts.models import (
    CATEGORY,
    ORDER_DATE,
    REGION,
    DeriveRequest,
    DerivedSeries,
    Dimension,
    GroupKey,
    Metric,
    RegionAverage,
)

log = logging.getLogger(__name__)

# Group keys are four-digit years
MIN_YEAR = 1000
MAX_YEAR = 9999

Record = Mapping[str, Any]
GroupedTable = dict[GroupKey, list[Record]]


# =========================================================
# COERCION
# =========================================================

def _order_years(records: Sequence[Record]) -> list[int | None]:
    """Return the calendar year of each record's `Order Date` (None if unparseable).

    Only ISO 8601 (`2014-01-05`, optionally with time and offset) and US
    `M/D/YYYY` spellings are accepted; both may appear in one file. Offsets
    are normalized to UTC so mixed timezones parse together.
    """
    raw = pd.Series([rec.get(ORDER_DATE) for rec in records], dtype="object")
    iso = pd.to_datetime(raw, errors="coerce", format="ISO8601", utc=True)
    us = pd.to_datetime(raw, errors="coerce", format="%m/%d/%Y", utc=True)
    parsed = iso.fillna(us)
    return [
        int(ts.year) if not pd.isna(ts) and MIN_YEAR <= ts.year <= MAX_YEAR else None
        for ts in parsed
    ]


def parse_metric(value: Any, field: str = "metric", row: int | None = None) -> Decimal:
    """Parse a metric field as a finite decimal number.

    Raises:
        InvalidMetricError: if the value is missing, non-numeric, NaN or infinite.
    """
    if value is None:
        raise InvalidMetricError(field, value, row)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidMetricError(field, value, row) from None
    if not number.is_finite():
        raise InvalidMetricError(field, value, row)
    return number


# =========================================================
# GROUPING
# =========================================================

def group_by(
    records: Sequence[Record],
    dimension: Dimension,
    *,
    strict: bool = False,
    warnings: list[str] | None = None,
) -> tuple[GroupedTable, list[GroupKey]]:
    """Partition records by order year or category.

    Args:
        records: Full record sequence.
        dimension: `Dimension.YEAR` or `Dimension.CATEGORY`.
        strict: Raise `ParseError` on the first unparseable date instead of
            dropping the record.
        warnings: Optional list that receives a summary of dropped records.

    Returns:
        `(table, keys)` where `table` maps each group key to its records in
        source order and `keys` lists the distinct keys in first-seen order.
    """
    dimension = Dimension(dimension)
    table: GroupedTable = {}

    if dimension is Dimension.YEAR:
        dropped = 0
        for row, (rec, year) in enumerate(zip(records, _order_years(records))):
            if year is None:
                err = ParseError(rec.get(ORDER_DATE), row)
                if strict:
                    raise err
                log.debug("Skipping record: %s", err)
                dropped += 1
                continue
            table.setdefault(year, []).append(rec)

        if dropped:
            msg = f"Dropped {dropped} record(s) with unparseable order dates from year grouping"
            log.warning(msg)
            if warnings is not None:
                warnings.append(msg)
    else:
        for rec in records:
            table.setdefault(rec[CATEGORY], []).append(rec)

    return table, list(table)


# =========================================================
# AVERAGING
# =========================================================

def average_metric(
    group_slice: Sequence[Record],
    metric: Metric,
    *,
    region_column: str = REGION,
    strict: bool = False,
    warnings: list[str] | None = None,
) -> list[RegionAverage]:
    """Average `metric` per region within one group slice.

    Each region's average is its summed metric divided by its record count
    in the slice. Non-numeric values count as a zero contribution (the record
    still counts towards the divisor) unless `strict` is set.

    Returns:
        One `RegionAverage` per region, in first-seen region order.
    """
    metric = Metric(metric)
    field = metric.column
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    coerced = 0

    for row, rec in enumerate(group_slice):
        region = rec[region_column]
        try:
            amount = parse_metric(rec.get(field), field, row)
        except InvalidMetricError as err:
            if strict:
                raise
            log.debug("Treating as zero: %s", err)
            coerced += 1
            amount = Decimal(0)
        totals[region] = totals.get(region, Decimal(0)) + amount
        counts[region] = counts.get(region, 0) + 1

    if coerced:
        msg = f"Treated {coerced} non-numeric {field} value(s) as 0"
        log.warning(msg)
        if warnings is not None:
            warnings.append(msg)

    return [
        RegionAverage(region=region, value=float(total / counts[region]))
        for region, total in totals.items()
    ]


# =========================================================
# DERIVATION
# =========================================================

def normalize_key(dimension: Dimension, key: GroupKey) -> GroupKey:
    """Coerce a dropdown value to the key type used by `dimension`."""
    dimension = Dimension(dimension)
    if dimension is Dimension.YEAR and isinstance(key, str) and key.strip().isdigit():
        return int(key.strip())
    if dimension is Dimension.CATEGORY:
        return str(key)
    return key


def derive(
    records: Sequence[Record],
    dimension: Dimension,
    selected_key: GroupKey,
    metric: Metric,
    *,
    region_column: str = REGION,
    strict: bool = False,
) -> DerivedSeries:
    """Group `records`, select one slice and average `metric` per region.

    Args:
        records: Full record sequence.
        dimension: Grouping dimension.
        selected_key: Group key picked by the viewer. Year keys may be given
            as strings (e.g. "2014").
        metric: Metric to average.
        region_column: Column holding the region identifier.
        strict: Propagate `ParseError`, `InvalidMetricError` and
            `UnknownKeyError` instead of degrading the output.

    Returns:
        `DerivedSeries` whose `available_keys` always covers the whole
        dataset. An unknown key yields empty `points` plus a warning.
    """
    dimension = Dimension(dimension)
    warnings: list[str] = []
    table, keys = group_by(records, dimension, strict=strict, warnings=warnings)

    key = normalize_key(dimension, selected_key)
    if key not in table:
        err = UnknownKeyError(key, keys)
        if strict:
            raise err
        log.warning("%s", err)
        warnings.append(str(err))
        return DerivedSeries(available_keys=keys, points=[], warnings=warnings)

    points = average_metric(
        table[key],
        metric,
        region_column=region_column,
        strict=strict,
        warnings=warnings,
    )
    return DerivedSeries(available_keys=keys, points=points, warnings=warnings)


def derive_request(
    records: Sequence[Record],
    request: DeriveRequest,
    *,
    region_column: str = REGION,
    strict: bool = False,
) -> DerivedSeries:
    """Run `derive` for a serialized `DeriveRequest`."""
    return derive(
        records,
        request.dimension,
        request.selected_key,
        request.metric,
        region_column=region_column,
        strict=strict,
    )
