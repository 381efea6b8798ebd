"""Pytest configuration and fixtures."""

import pytest

from temp_table_loader.config import LoaderConfig
from temp_table_loader.data.mock_client import MockSqlClient

ENV_VARS = [
    "DATABRICKS_HOST",
    "DATABRICKS_HTTP_PATH",
    "DATABRICKS_TOKEN",
    "DATABRICKS_CATALOG",
    "DATABRICKS_SCHEMA",
    "DATABRICKS_APP_NAME",
    "SOURCE_TABLE",
    "TEMP_TABLE",
    "DATE_COLUMN",
    "USE_MOCK_DATA",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cfg():
    return LoaderConfig(
        databricks_host="https://adb-123.azuredatabricks.net",
        databricks_http_path="/sql/1.0/warehouses/abc123",
        databricks_catalog="main",
        databricks_schema="analytics",
        databricks_token="dapi-test",
        source_table="events",
        temp_table="tmp_daily_load",
        date_column="event_date",
        default_dry_run=False,
    )


@pytest.fixture
def mock_client():
    return MockSqlClient()


class FakeClock:
    """Advances by `step` seconds on every call."""

    def __init__(self, step=1.5):
        self.now = 0.0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def clock():
    return FakeClock()
