"""Chart presets and Altair chart builders.

Each `ChartSpec` describes one chart of the dashboard: which grouping and
metric it derives, which group it shows first, and how it is drawn. The
builders only encode an already derived `DerivedSeries`; they never group or
average anything themselves.
"""
from __future__ import annotations

from dataclasses import dataclass

import altair as alt
import pandas as pd

from superstore_charts.models import DerivedSeries, Dimension, GroupKey, Metric

INNER_RADIUS = 70
CHART_HEIGHT = 420


@dataclass(frozen=True)
class ChartSpec:
    """Static description of one chart.

    Attributes:
        name: Preset identifier (`line`, `bar`, `radial`).
        mark: Drawing style: `area`, `bar` or `arc`.
        dimension: Grouping offered in the dropdown.
        metric: Metric averaged per region.
        default_key: Group selected on first render.
        x_label: Axis/legend title for regions.
        y_label: Axis title for the averaged metric.
    """
    name: str
    mark: str
    dimension: Dimension
    metric: Metric
    default_key: GroupKey
    x_label: str
    y_label: str

    @property
    def title(self) -> str:
        metric = "Sales" if self.metric is Metric.SALES else "Profit"
        group = "Year" if self.dimension is Dimension.YEAR else "Category"
        return f"Average {metric} per Region by {group}"


PRESETS: dict[str, ChartSpec] = {
    "line": ChartSpec(
        name="line",
        mark="area",
        dimension=Dimension.CATEGORY,
        metric=Metric.SALES,
        default_key="Furniture",
        x_label="Regions",
        y_label="Average Sales ($)",
    ),
    "bar": ChartSpec(
        name="bar",
        mark="bar",
        dimension=Dimension.YEAR,
        metric=Metric.PROFIT,
        default_key=2014,
        x_label="Regions",
        y_label="Average Profit ($)",
    ),
    "radial": ChartSpec(
        name="radial",
        mark="arc",
        dimension=Dimension.CATEGORY,
        metric=Metric.PROFIT,
        default_key="Furniture",
        x_label="Regions",
        y_label="Average Profit ($)",
    ),
}


def get_preset(name: str) -> ChartSpec:
    """Return the preset called `name`.

    Raises:
        KeyError: if no such preset exists.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown chart preset {name!r}; choose from {sorted(PRESETS)}") from None


def series_frame(series: DerivedSeries) -> pd.DataFrame:
    """Return the series points as a DataFrame with `Region` and `value` columns."""
    rows = [p.model_dump(by_alias=True) for p in series.points]
    return pd.DataFrame(rows, columns=["Region", "value"])


def build_chart(spec: ChartSpec, series: DerivedSeries) -> alt.Chart | alt.LayerChart:
    """Encode `series` with the mark described by `spec`.

    Regions keep their derived (first-seen) order on the axis. An empty
    series produces an empty chart.
    """
    df = series_frame(series)
    tooltip = [
        alt.Tooltip("Region:N", title=spec.x_label),
        alt.Tooltip("value:Q", title=spec.y_label, format=",.2f"),
    ]
    base = alt.Chart(df).properties(title=spec.title, height=CHART_HEIGHT)

    if spec.mark == "area":
        return base.mark_area(line=True, interpolate="cardinal", opacity=0.4).encode(
            x=alt.X("Region:N", sort=None, title=spec.x_label),
            y=alt.Y("value:Q", title=spec.y_label),
            tooltip=tooltip,
        )

    if spec.mark == "bar":
        x = alt.X("Region:N", sort=None, title=spec.x_label, axis=alt.Axis(labelAngle=-45))
        y = alt.Y("value:Q", title=spec.y_label)
        bars = alt.Chart(df).mark_bar(color="purple").encode(x=x, y=y, tooltip=tooltip)
        labels = alt.Chart(df).mark_text(dy=-6).encode(
            x=x,
            y=y,
            text=alt.Text("value:Q", format=".0f"),
        )
        return alt.layer(bars, labels).properties(title=spec.title, height=CHART_HEIGHT)

    if spec.mark == "arc":
        # Equal angular slice per region; the radius carries the value.
        return (
            base.transform_calculate(slice="1")
            .mark_arc(innerRadius=INNER_RADIUS, stroke="#fff")
            .encode(
                theta=alt.Theta("slice:Q", stack=True),
                radius=alt.Radius(
                    "value:Q",
                    scale=alt.Scale(type="linear", zero=False, rangeMin=INNER_RADIUS),
                ),
                color=alt.Color("Region:N", sort=None, title=spec.x_label, legend=alt.Legend(columns=2)),
                tooltip=tooltip,
            )
        )

    raise ValueError(f"Unsupported mark {spec.mark!r}")
