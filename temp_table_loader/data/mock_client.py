from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import pandas as pd


@dataclass
class MockSqlClient:
    """
    Stand-in for SqlClient in dry runs and tests.
    Records every statement instead of sending it to a warehouse.
    """

    statements: List[str] = field(default_factory=list)

    def execute(self, statement: str, params: Optional[dict[str, Any]] = None) -> None:
        self.statements.append(statement)

    def query(self, statement: str, params: Optional[dict[str, Any]] = None) -> pd.DataFrame:
        self.statements.append(statement)
        return pd.DataFrame()
