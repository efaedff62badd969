#!/usr/bin/env python3
"""
Fundboard CLI — process sheet exports, print live totals, export ledgers, serve the API.

USAGE:
  fundboard parse donations.csv --kind donations            # Summarize a local CSV export
  fundboard parse expenses.csv --kind expenses
  fundboard parse donations.csv --kind donations --target 750000

  fundboard summary                                         # Live totals for both sheets
  fundboard summary --kind expenses

  fundboard export                                          # JSON + Excel ledgers to ~/Fundboard/exports
  fundboard export --output ./dist

  fundboard serve                                           # Start API server
  fundboard serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime
from pathlib import Path

from fundboard.config import EXPORTS_FOLDER
from fundboard.data.pipeline import KINDS, get_kind, process_csv
from fundboard.data.store import SheetStore
from fundboard.errors import NoDataError, SheetFetchError
from fundboard.logging_setup import configure_logging


def _write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def _kinds(args):
    return [get_kind(args.kind)] if getattr(args, "kind", None) else list(KINDS.values())


def _print_totals(name: str, summary) -> None:
    if name == "donations":
        print(f"  Donations: LKR {summary.total_amount:,}  |  {summary.total_donors} donors  |  "
              f"{summary.percentage:.1f}% of LKR {summary.target_amount:,}")
    else:
        print(f"  Expenses:  LKR {summary.total_amount:,}  |  {summary.total_expenses} expenses  |  "
              f"{len(summary.categories)} categories")
        for category, amount in sorted(summary.categories.items(), key=lambda kv: kv[1], reverse=True):
            print(f"    {category[:40]:<42}LKR {amount:>12,}")


def cmd_parse(args):
    """Summarize a local CSV export and print the JSON payload."""
    csv_text = Path(args.csv).read_text(encoding="utf-8-sig")
    summary = process_csv(csv_text, get_kind(args.kind), args.target)
    print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))


def cmd_summary(args):
    """Fetch the live sheets and print totals."""
    store = SheetStore()
    print("\n" + "=" * 70)
    print("  FUNDBOARD — LIVE SUMMARY")
    print("=" * 70)
    for kind in _kinds(args):
        _print_totals(kind.name, store.load(kind))
    print()


def cmd_export(args):
    """Fetch both sheets and write JSON payloads plus Excel ledgers."""
    from fundboard.excel.reports import donations_workbook, expenses_workbook

    out = Path(args.output)
    store = SheetStore()
    print("\n" + "=" * 70)
    print("  FUNDBOARD — LEDGER EXPORT")
    print("=" * 70)
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")

    print("  [1/2] Donations...")
    donations = store.donations()
    _write_json(out / "donations.json", donations.to_dict())
    donations_workbook(donations, out / "Donations.xlsx")

    print("  [2/2] Expenses...")
    expenses = store.expenses()
    _write_json(out / "expenses.json", expenses.to_dict())
    expenses_workbook(expenses, out / "Expenses.xlsx")

    print(f"\n  Output: {out.resolve()}")
    print("=" * 70 + "\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Fundboard API on port {args.port}...")
    uvicorn.run("fundboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Fundboard — fundraising transparency dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Override FUNDBOARD_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # parse subcommand
    parse_parser = subparsers.add_parser("parse", help="Summarize a local CSV export")
    parse_parser.add_argument("csv", help="Path to the CSV file")
    parse_parser.add_argument("--kind", choices=list(KINDS), required=True, help="Which sheet the file came from")
    parse_parser.add_argument("--target", type=int, default=None, help="Donation target (default from config)")
    parse_parser.set_defaults(func=cmd_parse)

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print live totals")
    summary_parser.add_argument("--kind", choices=list(KINDS), help="Only this sheet")
    summary_parser.set_defaults(func=cmd_summary)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Write JSON + Excel ledgers")
    export_parser.add_argument("--output", default=str(EXPORTS_FOLDER), help=f"Output directory (default: {EXPORTS_FOLDER})")
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    try:
        args.func(args)
    except (NoDataError, SheetFetchError) as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
