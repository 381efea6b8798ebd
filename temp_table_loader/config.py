from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class LoaderConfig:
    # Databricks SQL warehouse
    databricks_host: str
    databricks_http_path: str
    databricks_catalog: str
    databricks_schema: str

    # PAT for local runs. Not needed inside Databricks Apps or for dry runs.
    databricks_token: Optional[str]

    # Tables
    source_table: Optional[str]
    temp_table: str
    date_column: str

    # Defaults
    default_dry_run: bool

    @property
    def fq_schema(self) -> str:
        # Unity Catalog fully qualified schema name
        return f"`{self.databricks_catalog}`.`{self.databricks_schema}`"

    def table(self, base_name: str) -> str:
        return f"{self.fq_schema}.`{base_name}`"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> LoaderConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` from the working directory (or a parent) if present
    - Works with Databricks Apps env var injection
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)

    return LoaderConfig(
        databricks_host=_getenv("DATABRICKS_HOST") or "",
        databricks_http_path=_getenv("DATABRICKS_HTTP_PATH") or "",
        databricks_catalog=_getenv("DATABRICKS_CATALOG", "main") or "main",
        databricks_schema=_getenv("DATABRICKS_SCHEMA", "default") or "default",
        databricks_token=_getenv("DATABRICKS_TOKEN"),
        source_table=_getenv("SOURCE_TABLE"),
        temp_table=_getenv("TEMP_TABLE", "tmp_daily_load") or "tmp_daily_load",
        date_column=_getenv("DATE_COLUMN", "event_date") or "event_date",
        default_dry_run=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
    )
