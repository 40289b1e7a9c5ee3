from __future__ import annotations

import pytest

from superstore_charts.charts import PRESETS, build_chart, get_preset, series_frame
from superstore_charts.models import DerivedSeries, Dimension, Metric, RegionAverage


def _series() -> DerivedSeries:
    return DerivedSeries(
        available_keys=["Furniture"],
        points=[RegionAverage(region="TX", value=15), RegionAverage(region="CA", value=-5)],
    )


def test_presets_match_dashboard_charts() -> None:
    assert get_preset("line").metric is Metric.SALES
    assert get_preset("bar").dimension is Dimension.YEAR
    assert get_preset("bar").default_key == 2014
    assert get_preset("radial").default_key == "Furniture"


def test_get_preset_unknown() -> None:
    with pytest.raises(KeyError):
        get_preset("pie")


def test_series_frame_keeps_point_order() -> None:
    df = series_frame(_series())
    assert list(df.columns) == ["Region", "value"]
    assert df["Region"].tolist() == ["TX", "CA"]


def test_series_frame_empty_has_columns() -> None:
    df = series_frame(DerivedSeries())
    assert df.empty
    assert list(df.columns) == ["Region", "value"]


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_build_chart_produces_valid_spec(name: str) -> None:
    spec = get_preset(name)
    d = build_chart(spec, _series()).to_dict()
    assert d["title"] == spec.title
    if spec.mark == "bar":
        assert len(d["layer"]) == 2
    else:
        assert d["mark"]["type"] == spec.mark


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_build_chart_accepts_empty_series(name: str) -> None:
    build_chart(get_preset(name), DerivedSeries()).to_dict()
