from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Any, Optional, Union

import pandas as pd
from databricks import sql
from databricks.sql.exc import Error as DatabricksSqlError

from temp_table_loader.config import LoaderConfig
from temp_table_loader.data.mock_client import MockSqlClient
from temp_table_loader.exceptions import DatabricksAuthError, StatementError

# Seconds between status checks for statements still running after the initial wait
POLL_SECONDS = 5


def _is_databricks_apps() -> bool:
    """Check if running in Databricks Apps environment."""
    return bool(os.getenv("DATABRICKS_APP_NAME"))


@dataclass(frozen=True)
class SqlClient:
    """
    Databricks SQL client. Every call opens its own session and closes it on return.
    Supports both PAT auth (local runs) and Databricks Apps OAuth.
    """

    cfg: LoaderConfig

    @property
    def server_hostname(self) -> str:
        return self.cfg.databricks_host.replace("https://", "").replace("http://", "").rstrip("/")

    @property
    def warehouse_id(self) -> str:
        http_path = self.cfg.databricks_http_path
        return http_path.split("/")[-1] if "/" in http_path else http_path

    def execute(self, statement: str, params: Optional[dict[str, Any]] = None) -> None:
        """Run one statement for its side effect (INSERT, CREATE, ...)."""
        if _is_databricks_apps():
            self._run_with_sdk(statement)
            return

        connect_args = self._connect_args()
        try:
            with sql.connect(**connect_args) as conn:
                with conn.cursor() as cur:
                    cur.execute(statement, params or {})
        except DatabricksSqlError as e:
            raise StatementError(f"SQL execution failed: {e}") from e

    def query(self, statement: str, params: Optional[dict[str, Any]] = None) -> pd.DataFrame:
        """Returns a pandas.DataFrame from Databricks SQL."""
        if _is_databricks_apps():
            return self._run_with_sdk(statement)

        connect_args = self._connect_args()
        try:
            with sql.connect(**connect_args) as conn:
                with conn.cursor() as cur:
                    cur.execute(statement, params or {})
                    rows = cur.fetchall()
                    cols = [d[0] for d in (cur.description or [])]
                    return pd.DataFrame(rows, columns=cols)
        except DatabricksSqlError as e:
            raise StatementError(f"SQL execution failed: {e}") from e

    def _connect_args(self) -> dict[str, Any]:
        if not self.cfg.databricks_token:
            raise DatabricksAuthError(
                "Missing DATABRICKS_TOKEN for Databricks SQL authentication. "
                "Set DATABRICKS_TOKEN (PAT) for local runs, or run in Databricks Apps for automatic auth."
            )
        if not self.server_hostname or not self.cfg.databricks_http_path:
            raise DatabricksAuthError("DATABRICKS_HOST and DATABRICKS_HTTP_PATH are required")

        return {
            "server_hostname": self.server_hostname,
            "http_path": self.cfg.databricks_http_path,
            "access_token": self.cfg.databricks_token,
        }

    def _run_with_sdk(self, statement: str) -> pd.DataFrame:
        from databricks.sdk import WorkspaceClient
        from databricks.sdk.service.sql import ExecuteStatementRequestOnWaitTimeout, StatementState

        # Uses Apps OAuth picked up from the environment
        w = WorkspaceClient()
        response = w.statement_execution.execute_statement(
            warehouse_id=self.warehouse_id,
            statement=statement,
            wait_timeout="50s",
            on_wait_timeout=ExecuteStatementRequestOnWaitTimeout.CONTINUE,
        )

        # Keeps running on the warehouse past wait_timeout; wait for the real outcome
        while response.status and response.status.state in (StatementState.PENDING, StatementState.RUNNING):
            time.sleep(POLL_SECONDS)
            response = w.statement_execution.get_statement(response.statement_id)

        if response.status and response.status.state == StatementState.SUCCEEDED:
            if response.result and response.result.data_array:
                cols = [c.name for c in response.manifest.schema.columns] if response.manifest else []
                return pd.DataFrame(response.result.data_array, columns=cols)
            return pd.DataFrame()

        state = response.status.state.value if response.status and response.status.state else "UNKNOWN"
        error_msg = response.status.error.message if response.status and response.status.error else "Unknown error"
        raise StatementError(f"SQL execution failed ({state}): {error_msg}")


def get_sql_client(cfg: LoaderConfig, dry_run: bool = False) -> Union[SqlClient, MockSqlClient]:
    if dry_run:
        return MockSqlClient()
    return SqlClient(cfg=cfg)
