#!/usr/bin/env python3
"""
Build a Databricks temp table one day at a time.

Usage:
    python scripts/build_temp_table.py --start 2016-08-17 --end 2016-08-20 --create

Same as the `temp-table-loader` console script; see temp_table_loader/cli.py.
"""

import sys
from pathlib import Path

# Allow running from a source checkout without installing
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from temp_table_loader.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
