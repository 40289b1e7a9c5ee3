"""UI-side chart state and the selection -> derive step.

The rendering surface owns one `ChartContext` per chart and passes it to
`select` whenever the viewer picks a new group key. Nothing here is global:
the records, the preset and the current selection all live on the context.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from superstore_charts.aggregate.pipeline import derive_request, group_by, normalize_key
from superstore_charts.charts import ChartSpec
from superstore_charts.models import REGION, DeriveRequest, DerivedSeries, GroupKey

log = logging.getLogger(__name__)


@dataclass
class ChartContext:
    """Per-chart state held by the UI layer.

    Attributes:
        records: Loaded transactions (shared, never mutated).
        spec: Chart preset being rendered.
        region_column: Column used as the region axis.
        selected_key: Currently selected group key; None before the first render.
    """
    records: Sequence[Mapping[str, Any]]
    spec: ChartSpec
    region_column: str = REGION
    selected_key: GroupKey | None = None

    def request(self, key: GroupKey) -> DeriveRequest:
        return DeriveRequest(
            dimension=self.spec.dimension,
            selected_key=key,
            metric=self.spec.metric,
        )


def initial_key(ctx: ChartContext) -> GroupKey | None:
    """Return the key to show first: the preset default if present, else the first key."""
    _, keys = group_by(ctx.records, ctx.spec.dimension)
    if ctx.spec.default_key in keys:
        return ctx.spec.default_key
    if keys:
        log.info(
            "Default key %r not in data for chart %s; using %r",
            ctx.spec.default_key,
            ctx.spec.name,
            keys[0],
        )
        return keys[0]
    return None


def select(ctx: ChartContext, key: GroupKey | None = None) -> DerivedSeries:
    """Derive the series for `key` (or the initial key) and record the selection.

    Args:
        ctx: Chart context owned by the caller.
        key: Newly selected group key; None renders the initial selection.

    Returns:
        The `DerivedSeries` to hand to the chart builder. Always well-formed,
        possibly with empty points.
    """
    if key is None:
        key = ctx.selected_key if ctx.selected_key is not None else initial_key(ctx)
    if key is None:
        ctx.selected_key = None
        return DerivedSeries()

    key = normalize_key(ctx.spec.dimension, key)
    series = derive_request(ctx.records, ctx.request(key), region_column=ctx.region_column)
    ctx.selected_key = key
    return series


def rebind(ctx: ChartContext, records: Sequence[Mapping[str, Any]], region_column: str) -> None:
    """Point `ctx` at freshly loaded `records`.

    A selection that no longer exists in the new records is cleared so the
    next `select` falls back to the initial key.
    """
    if ctx.records is records and ctx.region_column == region_column:
        return
    ctx.records = records
    ctx.region_column = region_column
    if ctx.selected_key is not None:
        _, keys = group_by(records, ctx.spec.dimension)
        if ctx.selected_key not in keys:
            log.info("Selection %r not in reloaded data for chart %s", ctx.selected_key, ctx.spec.name)
            ctx.selected_key = None
