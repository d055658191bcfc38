#!/usr/bin/env python3
"""
CSV Explorer CLI — summaries, chart data, Excel export, and the API server.

USAGE:
  python -m csv_explorer.cli summary data.csv                       # Shape, missingness, numeric stats
  python -m csv_explorer.cli summary data.csv --filter north --column region --sort score --desc
  python -m csv_explorer.cli summary data.csv --limit 20            # Show first 20 rows of the view
  python -m csv_explorer.cli summary data.csv --filter north --all-rows  # Stats over every row

  python -m csv_explorer.cli charts data.csv                        # Default chart columns
  python -m csv_explorer.cli charts data.csv --histogram amount --category region

  python -m csv_explorer.cli export data.csv --output view.xlsx     # Excel workbook of the view

  python -m csv_explorer.cli serve                                  # Start API server
  python -m csv_explorer.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from csv_explorer.config import CATEGORY_TOP_N, EXPORT_FILENAME, HISTOGRAM_BINS
from csv_explorer.analytics.charts import category_counts, column_histogram, scatter_points
from csv_explorer.analytics.summary import missingness_report, numeric_summary
from csv_explorer.data.loader import CSVExplorerError
from csv_explorer.data.schemas import DESCENDING, ASCENDING, ChartSelection, FilterSpec, SortSpec
from csv_explorer.data.store import TableStore


def _load(args) -> TableStore:
    """Load the CSV named on the command line and apply --filter/--sort."""
    store = TableStore()
    try:
        store.load_file(Path(args.file))
    except CSVExplorerError:
        print(f"  {store.status.message}", file=sys.stderr)
        sys.exit(1)

    for column in (getattr(args, "column", None), getattr(args, "sort", None)):
        if column and not store.has_column(column):
            print(f"  Unknown column: '{column}'", file=sys.stderr)
            sys.exit(2)

    if getattr(args, "filter", None):
        store.set_filter(FilterSpec(column=args.column, value=args.filter))
    if getattr(args, "sort", None):
        store.set_sort(SortSpec(args.sort, DESCENDING if args.desc else ASCENDING))
    return store


def _print_table(headers: list[str], rows: list[list], width: int = 16) -> None:
    print("  " + "".join(f"{h[:width - 1]:<{width}}" for h in headers))
    print("  " + "-" * (width * len(headers)))
    for row in rows:
        print("  " + "".join(f"{('' if v is None else str(v))[:width - 1]:<{width}}" for v in row))


def cmd_summary(args):
    """Print shape, missingness, numeric statistics and the head of the view."""
    store = _load(args)
    overview = store.overview()
    rows = store.summary_rows("all" if args.all_rows else "filtered")
    classification = store.table.classification

    print("\n" + "=" * 70)
    print("  CSV EXPLORER — SUMMARY")
    print("=" * 70)
    print(f"  {store.status.message}")
    print(f"  Rows: {overview['rows']:,}  |  Columns: {overview['columns']}  |  Missing values: {overview['missing']:,}")
    print(f"  Numeric: {', '.join(classification.numeric) or '(none)'}")
    print(f"  Categorical: {', '.join(classification.categorical) or '(none)'}")

    print("\n  MISSING VALUES BY COLUMN\n")
    _print_table(["Column", "Missing"], [[r["column"], r["missing"]] for r in missingness_report(rows, store.columns)])

    print("\n  NUMERIC SUMMARY\n")
    summaries = [s.formatted() for s in numeric_summary(rows, classification.numeric)]
    if summaries:
        _print_table(["Column", "Min", "Max", "Mean", "Median"],
                     [[s["column"], s["min"], s["max"], s["mean"], s["median"]] for s in summaries])
    else:
        print("  No numeric columns detected.")

    view = store.view_rows()
    print(f"\n  ROWS ({len(view):,} of {store.row_count():,})\n")
    if store.columns:
        head = view.head(args.limit)
        _print_table(store.columns, head.values.tolist())
    print()


def cmd_charts(args):
    """Print histogram, category and scatter data for the filtered rows."""
    store = _load(args)
    picks = ChartSelection(args.histogram, args.category, args.x, args.y).synced(store.table.classification)
    rows = store.filtered_rows()

    print("\n" + "=" * 70)
    print("  CSV EXPLORER — CHART DATA")
    print("=" * 70)

    if picks.histogram:
        print(f"\n  HISTOGRAM: {picks.histogram}\n")
        _print_table(["Range", "Count"], [[b.label, b.count] for b in column_histogram(rows, picks.histogram, args.bins)])
    if picks.category:
        print(f"\n  TOP {picks.category} VALUES\n")
        counts = category_counts(rows[picks.category].tolist(), args.top)
        _print_table(["Value", "Count"], [[c["label"], c["count"]] for c in counts])
    if picks.scatter_x and picks.scatter_y:
        points = scatter_points(rows, picks.scatter_x, picks.scatter_y)
        print(f"\n  SCATTER: {picks.scatter_x} vs {picks.scatter_y} ({len(points)} points)\n")
        _print_table([picks.scatter_x, picks.scatter_y], [[p["x"], p["y"]] for p in points[:args.limit]])
    print()


def cmd_export(args):
    """Write the current view and summary to an Excel workbook."""
    from csv_explorer.reports.explorer_report import generate_excel

    store = _load(args)
    path = generate_excel(store, args.output)
    print(f"  Saved {len(store.view_rows()):,} rows to {path}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting CSV Explorer API on port {args.port}...")
    uvicorn.run("csv_explorer.main:app", host="0.0.0.0", port=args.port, reload=args.reload)


def _add_view_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="CSV file")
    p.add_argument("--filter", help="Keep rows containing this text (case-insensitive)")
    p.add_argument("--column", help="Only search this column when filtering")
    p.add_argument("--sort", help="Sort by this column")
    p.add_argument("--desc", action="store_true", help="Sort descending")
    p.add_argument("--limit", type=int, default=10, help="Rows/points to print (default 10)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSV Explorer — quick EDA for CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Print summary statistics")
    _add_view_args(summary_parser)
    summary_parser.add_argument("--all-rows", action="store_true", help="Summarize every row, ignoring --filter")
    summary_parser.set_defaults(func=cmd_summary)

    charts_parser = subparsers.add_parser("charts", help="Print chart data")
    _add_view_args(charts_parser)
    charts_parser.add_argument("--histogram", help="Numeric column for the histogram")
    charts_parser.add_argument("--category", help="Categorical column for value counts")
    charts_parser.add_argument("--x", help="Numeric scatter X column")
    charts_parser.add_argument("--y", help="Numeric scatter Y column")
    charts_parser.add_argument("--bins", type=int, default=HISTOGRAM_BINS, help="Histogram bins")
    charts_parser.add_argument("--top", type=int, default=CATEGORY_TOP_N, help="Category values to show")
    charts_parser.set_defaults(func=cmd_charts)

    export_parser = subparsers.add_parser("export", help="Export the view to Excel")
    _add_view_args(export_parser)
    export_parser.add_argument("--output", default=EXPORT_FILENAME, help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
