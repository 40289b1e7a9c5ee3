"""Pydantic models for derivation requests and derived chart series.

These models define what the UI layer sends to the aggregation pipeline and
what the pipeline hands back to the rendering surface.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

# Source column names in the transactions CSV
REGION = "Region"
CATEGORY = "Category"
ORDER_DATE = "Order Date"
PROFIT = "Profit"
SALES = "Sales"

REQUIRED_COLUMNS = (CATEGORY, ORDER_DATE, PROFIT, SALES)

GroupKey = Union[int, str]


class Dimension(str, Enum):
    """Attribute used to partition records before per-region averaging."""
    YEAR = "year"
    CATEGORY = "category"


class Metric(str, Enum):
    """Numeric field being averaged."""
    PROFIT = "profit"
    SALES = "sales"

    @property
    def column(self) -> str:
        return PROFIT if self is Metric.PROFIT else SALES


class DeriveRequest(BaseModel):
    """Serializable description of one chart derivation.

    Attributes:
        dimension: Grouping dimension (year or category).
        selected_key: Group key chosen in the dropdown.
        metric: Metric to average per region.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    dimension: Dimension
    selected_key: GroupKey
    metric: Metric


class RegionAverage(BaseModel):
    """Averaged metric for one region within one selected group slice."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    region: str = Field(..., alias="Region")
    value: float


class DerivedSeries(BaseModel):
    """Output consumed by the rendering surface.

    Attributes:
        available_keys: Every group key in the full dataset for the chosen
            dimension, in first-seen order (the dropdown options).
        points: One `RegionAverage` per region in the selected slice, in
            first-seen region order. Empty when the slice is empty.
        warnings: Notes about dropped or coerced records and unknown keys.
    """
    model_config = ConfigDict(extra="forbid")
    available_keys: list[GroupKey] = Field(default_factory=list)
    points: list[RegionAverage] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
