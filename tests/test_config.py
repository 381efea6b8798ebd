"""Tests for environment configuration."""

from temp_table_loader.config import get_config


def test_defaults():
    cfg = get_config()

    assert cfg.databricks_host == ""
    assert cfg.databricks_token is None
    assert cfg.source_table is None
    assert cfg.temp_table == "tmp_daily_load"
    assert cfg.date_column == "event_date"
    assert cfg.default_dry_run is False
    assert cfg.fq_schema == "`main`.`default`"


def test_reads_env(monkeypatch):
    monkeypatch.setenv("DATABRICKS_CATALOG", "welch")
    monkeypatch.setenv("DATABRICKS_SCHEMA", "staging")
    monkeypatch.setenv("TEMP_TABLE", "tmp_orders")
    monkeypatch.setenv("USE_MOCK_DATA", "TRUE")

    cfg = get_config()

    assert cfg.table(cfg.temp_table) == "`welch`.`staging`.`tmp_orders`"
    assert cfg.default_dry_run is True


def test_blank_values_are_unset(monkeypatch):
    monkeypatch.setenv("DATABRICKS_TOKEN", "   ")
    monkeypatch.setenv("TEMP_TABLE", "")

    cfg = get_config()

    assert cfg.databricks_token is None
    assert cfg.temp_table == "tmp_daily_load"


def test_dotenv_file(tmp_path):
    # conftest chdirs into tmp_path
    (tmp_path / ".env").write_text("SOURCE_TABLE=events\n", encoding="utf-8")

    assert get_config().source_table == "events"
