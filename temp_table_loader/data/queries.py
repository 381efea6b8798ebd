from __future__ import annotations

import datetime as dt
import string
from pathlib import Path
from typing import Union

from temp_table_loader.config import LoaderConfig
from temp_table_loader.data.dates import DateLike, format_date, parse_date
from temp_table_loader.exceptions import TemplateError

DATE_PLACEHOLDER = "date"


class QueryTemplate:
    """
    SQL text with exactly one `{date}` placeholder.
    Literal braces are written `{{` and `}}`.
    """

    def __init__(self, text: str):
        self.text = text
        self._validate()

    def _validate(self) -> None:
        try:
            fields = [name for _, name, _, _ in string.Formatter().parse(self.text) if name is not None]
        except ValueError as e:
            raise TemplateError(f"Malformed query template: {e}") from e

        if fields.count(DATE_PLACEHOLDER) != 1:
            raise TemplateError(
                f"Query template must contain exactly one {{{DATE_PLACEHOLDER}}} placeholder, "
                f"found {fields.count(DATE_PLACEHOLDER)}"
            )
        others = sorted({f for f in fields if f != DATE_PLACEHOLDER})
        if others:
            raise TemplateError(f"Unsupported placeholder(s) in query template: {', '.join(repr(f) for f in others)}")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "QueryTemplate":
        return cls(Path(path).read_text(encoding="utf-8"))

    def render(self, day: DateLike) -> str:
        d: dt.date = parse_date(day)
        return self.text.format(**{DATE_PLACEHOLDER: format_date(d)})

    def __repr__(self) -> str:
        return f"QueryTemplate({self.text!r})"


def _source(cfg: LoaderConfig) -> str:
    if not cfg.source_table:
        raise TemplateError("SOURCE_TABLE is not set; pass --template/--template-file or set SOURCE_TABLE")
    return cfg.table(cfg.source_table)


def q_create_temp_table(cfg: LoaderConfig) -> str:
    # Empty copy of the source schema
    return f"""
    CREATE OR REPLACE TABLE {cfg.table(cfg.temp_table)} AS
    SELECT *
    FROM {_source(cfg)}
    WHERE 1 = 0
    """


def q_insert_for_date(cfg: LoaderConfig) -> QueryTemplate:
    return QueryTemplate(
        f"""
    INSERT INTO {cfg.table(cfg.temp_table)}
    SELECT *
    FROM {_source(cfg)}
    WHERE `{cfg.date_column}` = '{{date}}'
    """
    )


def q_count_rows(cfg: LoaderConfig) -> str:
    return f"""
    SELECT
      `{cfg.date_column}`,
      count(*) AS row_count
    FROM {cfg.table(cfg.temp_table)}
    GROUP BY 1
    ORDER BY 1
    """
