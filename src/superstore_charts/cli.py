"""Command-line interface for inspecting derived chart series.

Provides subcommands: `keys`, `derive`, and `charts`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from superstore_charts.aggregate.pipeline import derive_request, group_by
from superstore_charts.charts import PRESETS
from superstore_charts.config import get_settings
from superstore_charts.errors import SuperstoreChartsError
from superstore_charts.ingest.load_csv import load_records
from superstore_charts.logging_config import configure_logging
from superstore_charts.models import DeriveRequest, Dimension, Metric

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _load(args: argparse.Namespace) -> tuple[list[dict[str, str]], str]:
    """Load records from `--csv` (or the configured path) and return them with the region column."""
    s = get_settings()
    path = Path(args.csv) if args.csv else s.data_path
    region_column = args.region_column or s.region_column
    return load_records(path, region_column), region_column


# --------------------------------------------------
# KEYS
# --------------------------------------------------
def cmd_keys(args: argparse.Namespace) -> int:
    """Print the available group keys for `--dimension`, one per line."""
    records, _ = _load(args)
    _, keys = group_by(records, Dimension(args.dimension))
    for key in keys:
        print(key)
    return 0


# --------------------------------------------------
# DERIVE
# --------------------------------------------------
def cmd_derive(args: argparse.Namespace) -> int:
    """Print the DerivedSeries for one request as JSON."""
    records, region_column = _load(args)
    request = DeriveRequest(
        dimension=Dimension(args.dimension),
        selected_key=args.key,
        metric=Metric(args.metric),
    )
    log.info("Deriving %s", request.model_dump_json())

    try:
        series = derive_request(records, request, region_column=region_column, strict=args.strict)
    except SuperstoreChartsError as e:
        log.error("Derivation failed: %s", e)
        return 1

    print(series.model_dump_json(by_alias=True, indent=2))
    return 0


# --------------------------------------------------
# CHARTS
# --------------------------------------------------
def cmd_charts(_: argparse.Namespace) -> int:
    """List the chart presets the dashboard renders."""
    for spec in PRESETS.values():
        print(
            f"{spec.name}\t{spec.mark}\t{spec.dimension.value}\t"
            f"{spec.metric.value}\tdefault={spec.default_key}"
        )
    return 0


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `keys`, `derive`, and `charts`.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="superstore-charts")
    p.add_argument("--csv", default=None, help="Transactions CSV (defaults to SUPERSTORE_CSV)")
    p.add_argument("--region-column", default=None, help="Region column (defaults to REGION_COLUMN)")
    sub = p.add_subparsers(dest="cmd", required=True)

    dimensions = [d.value for d in Dimension]
    metrics = [m.value for m in Metric]

    p_keys = sub.add_parser("keys")
    p_keys.add_argument("--dimension", choices=dimensions, default=Dimension.YEAR.value)

    p_derive = sub.add_parser("derive")
    p_derive.add_argument("--dimension", choices=dimensions, required=True)
    p_derive.add_argument("--key", required=True)
    p_derive.add_argument("--metric", choices=metrics, default=Metric.PROFIT.value)
    p_derive.add_argument("--strict", action="store_true")

    sub.add_parser("charts")

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    if args.cmd == "keys":
        return cmd_keys(args)
    if args.cmd == "derive":
        return cmd_derive(args)
    if args.cmd == "charts":
        return cmd_charts(args)
    raise SystemExit(2)


if __name__ == "__main__":
    raise SystemExit(main())
