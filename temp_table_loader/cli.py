"""
Build a Databricks temp table one day at a time.

Usage:
  temp-table-loader --start 2016-08-17 --end 2016-08-20 --create
  temp-table-loader --start 2016-08-17 --end 2016-08-20 \
    --template-file sql/insert_day.sql --dry-run

Environment variables (see config.py):
  DATABRICKS_HOST, DATABRICKS_HTTP_PATH, DATABRICKS_TOKEN,
  DATABRICKS_CATALOG, DATABRICKS_SCHEMA,
  SOURCE_TABLE, TEMP_TABLE, DATE_COLUMN, USE_MOCK_DATA
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from temp_table_loader.config import get_config
from temp_table_loader.data.connection import get_sql_client
from temp_table_loader.data.dates import parse_date
from temp_table_loader.data.mock_client import MockSqlClient
from temp_table_loader.data.queries import QueryTemplate
from temp_table_loader.data.service import build_temp_table, summarize_temp_table
from temp_table_loader.exceptions import LoaderError


def _iso_date(value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="temp-table-loader", description="Build a temp table one day at a time.")
    ap.add_argument("--start", required=True, type=_iso_date, help="first day, YYYY-MM-DD")
    ap.add_argument("--end", required=True, type=_iso_date, help="last day (inclusive), YYYY-MM-DD")
    tpl = ap.add_mutually_exclusive_group()
    tpl.add_argument("--template", help="SQL with exactly one {date} placeholder")
    tpl.add_argument("--template-file", help="file holding the SQL template")
    ap.add_argument("--create", action="store_true", help="create the empty temp table first")
    ap.add_argument("--summary", action="store_true", help="print per-day row counts afterwards")
    ap.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="print statements instead of executing them (default: USE_MOCK_DATA)",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = get_config()
    dry_run = cfg.default_dry_run if args.dry_run is None else args.dry_run

    print("=" * 60)
    print("Temp Table Loader")
    print("=" * 60)
    print(f"Range: {args.start.isoformat()} -> {args.end.isoformat()}")
    print(f"Target: {cfg.table(cfg.temp_table)}")
    print(f"Mode: {'dry run' if dry_run else 'Databricks SQL'}")
    print()

    try:
        template = None
        if args.template:
            template = QueryTemplate(args.template)
        elif args.template_file:
            template = QueryTemplate.from_file(args.template_file)

        client = get_sql_client(cfg, dry_run=dry_run)
        report = build_temp_table(client, cfg, args.start, args.end, template=template, create=args.create)

        if args.summary:
            print()
            if isinstance(client, MockSqlClient):
                print("Summary: skipped (dry run, nothing was loaded)")
            else:
                print(summarize_temp_table(client, cfg).to_string(index=False))
    except (LoaderError, ValueError, OSError) as e:
        print(f"ERROR: {e}")
        if e.__cause__ is not None:
            print(f"  Caused by: {type(e.__cause__).__name__}: {e.__cause__}")
        return 1

    if isinstance(client, MockSqlClient):
        print()
        print("Statements (dry run):")
        for stmt in client.statements:
            print(stmt.strip())
            print()

    print(f"Done: {len(report.dates)} day(s) loaded")
    return 0
