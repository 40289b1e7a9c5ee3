from __future__ import annotations

from pathlib import Path

import pandas as pd
import streamlit as st

from superstore_charts.charts import PRESETS, build_chart, series_frame
from superstore_charts.config import get_settings
from superstore_charts.dashboard import ChartContext, rebind, select
from superstore_charts.ingest.load_csv import load_records
from superstore_charts.logging_config import configure_logging

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Superstore Regional Averages", layout="wide")
st.title("📊 Superstore Regional Averages")

settings = get_settings()
configure_logging(settings.log_path, settings.log_level)


# =====================================================
# Helpers
# =====================================================
@st.cache_data(show_spinner="Loading transactions...")
def cached_records(path: str, region_column: str) -> list[dict[str, str]]:
    """Load the transactions CSV once per (path, region column)."""
    return load_records(Path(path), region_column)


def chart_context(name: str, records: list[dict[str, str]]) -> ChartContext:
    """Return this session's context for chart `name`, bound to this run's records."""
    key = f"ctx_{name}"
    if key not in st.session_state:
        st.session_state[key] = ChartContext(
            records=records,
            spec=PRESETS[name],
            region_column=settings.region_column,
        )
    ctx = st.session_state[key]
    rebind(ctx, records, settings.region_column)
    return ctx


def center_dataframe(df: pd.DataFrame):
    """Center-align column headers and values for display."""
    return (
        df.style
        .set_properties(**{"text-align": "center"})
        .set_table_styles(
            [{"selector": "th", "props": [("text-align", "center")]}]
        )
        .format({"value": "{:,.2f}"})
    )


# =====================================================
# Data
# =====================================================
try:
    records = cached_records(str(settings.data_path), settings.region_column)
except (FileNotFoundError, ValueError) as exc:
    st.error(
        f"{exc}. Set `SUPERSTORE_CSV` (and `REGION_COLUMN` if the file uses "
        "`State`) in `.env`."
    )
    st.stop()

st.caption(f"{len(records):,} transactions from `{settings.data_path}`")
st.divider()

# =====================================================
# One section per chart preset
# =====================================================
for name, spec in PRESETS.items():
    st.header(spec.title)
    ctx = chart_context(name, records)

    series = select(ctx)
    if series.available_keys:
        chosen = st.selectbox(
            "Year" if spec.dimension.value == "year" else "Category",
            series.available_keys,
            index=series.available_keys.index(ctx.selected_key)
            if ctx.selected_key in series.available_keys
            else 0,
            key=f"select_{name}",
        )
        if chosen != ctx.selected_key:
            series = select(ctx, chosen)

    for note in series.warnings:
        st.warning(note)

    if not series.points:
        st.info("No data for this selection.")
    else:
        st.altair_chart(build_chart(spec, series), width="stretch")
        with st.expander("Data"):
            st.dataframe(center_dataframe(series_frame(series)), width="stretch")

    st.divider()

# =====================================================
# Footer
# =====================================================
st.caption("Superstore transactions • pandas • Altair • Streamlit")
