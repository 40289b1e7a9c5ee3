from __future__ import annotations

from superstore_charts.charts import get_preset
from superstore_charts.dashboard import ChartContext, initial_key, rebind, select


def test_select_uses_preset_default(records: list[dict[str, str]]) -> None:
    ctx = ChartContext(records=records, spec=get_preset("radial"))
    series = select(ctx)
    assert ctx.selected_key == "Furniture"
    assert [p.region for p in series.points] == ["TX", "CA"]


def test_select_falls_back_to_first_key(records: list[dict[str, str]]) -> None:
    rows = [r for r in records if r["Category"] != "Furniture"]
    ctx = ChartContext(records=rows, spec=get_preset("line"))
    assert initial_key(ctx) == "Technology"


def test_select_new_key_updates_context(records: list[dict[str, str]]) -> None:
    ctx = ChartContext(records=records, spec=get_preset("bar"))
    select(ctx)
    assert ctx.selected_key == 2014
    series = select(ctx, "2015")
    assert ctx.selected_key == 2015
    assert ctx.selected_key in series.available_keys
    assert [(p.region, p.value) for p in series.points] == [("TX", 10.0)]


def test_select_on_empty_records() -> None:
    ctx = ChartContext(records=[], spec=get_preset("bar"))
    series = select(ctx)
    assert series.points == []
    assert series.available_keys == []
    assert ctx.selected_key is None


def test_contexts_do_not_share_state(records: list[dict[str, str]]) -> None:
    a = ChartContext(records=records, spec=get_preset("line"))
    b = ChartContext(records=records, spec=get_preset("radial"))
    select(a, "Technology")
    select(b)
    assert a.selected_key == "Technology"
    assert b.selected_key == "Furniture"


def test_rebind_switches_to_reloaded_records(records: list[dict[str, str]]) -> None:
    ctx = ChartContext(records=records, spec=get_preset("radial"))
    select(ctx)
    reloaded = [
        {"Region": "WA", "Category": "Furniture", "Order Date": "2016-02-02", "Profit": "8", "Sales": "9"},
    ]
    rebind(ctx, reloaded, "Region")
    series = select(ctx)
    assert ctx.records is reloaded
    assert [(p.region, p.value) for p in series.points] == [("WA", 8.0)]


def test_rebind_clears_selection_missing_from_reloaded_records(records: list[dict[str, str]]) -> None:
    ctx = ChartContext(records=records, spec=get_preset("bar"))
    select(ctx, 2015)
    reloaded = [r for r in records if r["Order Date"].startswith("2014")]
    rebind(ctx, reloaded, "Region")
    assert ctx.selected_key is None
    select(ctx)
    assert ctx.selected_key == 2014
