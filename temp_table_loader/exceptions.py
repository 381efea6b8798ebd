from __future__ import annotations

import datetime as dt
from typing import List, Optional


class LoaderError(RuntimeError):
    pass


class DatabricksAuthError(LoaderError):
    pass


class StatementError(LoaderError):
    pass


class TemplateError(LoaderError, ValueError):
    pass


class DateLoadError(LoaderError):
    """Raised when the statement for one day fails. Earlier days stay applied."""

    def __init__(self, day: dt.date, completed: Optional[List[dt.date]] = None):
        self.day = day
        self.completed = list(completed or [])
        super().__init__(f"Load failed on {day.isoformat()} after {len(self.completed)} completed day(s)")
