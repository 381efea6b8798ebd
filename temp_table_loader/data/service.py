from __future__ import annotations

import datetime as dt
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

import pandas as pd

from temp_table_loader.config import LoaderConfig
from temp_table_loader.data import queries
from temp_table_loader.data.dates import DateLike, date_range, format_date
from temp_table_loader.data.queries import QueryTemplate
from temp_table_loader.exceptions import DateLoadError

Echo = Callable[[str], None]
Clock = Callable[[], float]


class StatementClient(Protocol):
    def execute(self, statement: str, params: Optional[dict[str, Any]] = None) -> None: ...

    def query(self, statement: str, params: Optional[dict[str, Any]] = None) -> pd.DataFrame: ...


@dataclass(frozen=True)
class LoadReport:
    timings: pd.DataFrame  # columns: date, elapsed_seconds
    total_seconds: float

    @property
    def dates(self) -> List[str]:
        return list(self.timings["date"])


def run_date_range(
    client: StatementClient,
    template: QueryTemplate,
    start: DateLike,
    end: DateLike,
    echo: Echo = print,
    clock: Clock = time.perf_counter,
) -> LoadReport:
    """
    Runs the template once per day, oldest first, one statement at a time.

    No retry and no rollback: the first failing day stops the run with a
    DateLoadError; days before it have already been applied.
    """
    days = date_range(start, end)

    rows: List[dict] = []
    completed: List[dt.date] = []
    run_start = clock()
    for day in days:
        statement = template.render(day)
        t0 = clock()
        try:
            client.execute(statement)
        except Exception as e:
            raise DateLoadError(day, completed) from e
        elapsed = clock() - t0

        completed.append(day)
        rows.append({"date": format_date(day), "elapsed_seconds": elapsed})
        echo(f"Inserted: {format_date(day)}  Time Elapsed: {elapsed:.2f}s")

    total = clock() - run_start
    echo(f"Total Time Elapsed: {total:.2f}s")

    return LoadReport(
        timings=pd.DataFrame(rows, columns=["date", "elapsed_seconds"]),
        total_seconds=total,
    )


def build_temp_table(
    client: StatementClient,
    cfg: LoaderConfig,
    start: DateLike,
    end: DateLike,
    template: Optional[QueryTemplate] = None,
    create: bool = False,
    echo: Echo = print,
    clock: Clock = time.perf_counter,
) -> LoadReport:
    # Resolve the template and range before touching the warehouse so bad input fails fast
    tpl = template or queries.q_insert_for_date(cfg)
    date_range(start, end)
    if create:
        echo(f"Creating: {cfg.table(cfg.temp_table)}")
        client.execute(queries.q_create_temp_table(cfg))
    return run_date_range(client, tpl, start, end, echo=echo, clock=clock)


def summarize_temp_table(client: StatementClient, cfg: LoaderConfig) -> pd.DataFrame:
    return client.query(queries.q_count_rows(cfg))
