"""superstore_charts package.

Contains modules for loading a Superstore-style transactions CSV, deriving
per-region average profit or sales for one slice of a grouping (order year or
product category), and rendering the derived series as Altair charts in a
Streamlit dashboard.

Architecture:
- CSV -> row mappings (string values) -> aggregation pipeline -> DerivedSeries
- Pydantic models describe requests and derived output
- The UI layer owns a ChartContext; nothing in the pipeline holds state
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
