"""Aggregation helpers.

This package contains the pipeline that converts the loaded transactions
table into per-region averages for one selected group (order year or product
category), ready to hand to a chart.
"""

from superstore_charts.aggregate.pipeline import (
    average_metric,
    derive,
    derive_request,
    group_by,
    normalize_key,
)

__all__ = ["average_metric", "derive", "derive_request", "group_by", "normalize_key"]
