"""Tests for date range enumeration."""

import datetime as dt

import pytest

from temp_table_loader.data.dates import date_range, format_date, parse_date


class TestDateRange:
    def test_inclusive_range_in_order(self):
        days = date_range("2016-08-17", "2016-08-20")
        assert [format_date(d) for d in days] == ["2016-08-17", "2016-08-18", "2016-08-19", "2016-08-20"]

    def test_single_day(self):
        assert date_range("2016-08-17", "2016-08-17") == [dt.date(2016, 8, 17)]

    def test_crosses_month_and_leap_day(self):
        days = date_range(dt.date(2016, 2, 28), dt.date(2016, 3, 1))
        assert [format_date(d) for d in days] == ["2016-02-28", "2016-02-29", "2016-03-01"]

    def test_end_before_start_raises(self):
        with pytest.raises(ValueError, match="before start"):
            date_range("2016-08-20", "2016-08-17")


class TestParseDate:
    def test_datetime_is_truncated(self):
        assert parse_date(dt.datetime(2016, 8, 17, 23, 59)) == dt.date(2016, 8, 17)

    def test_strips_whitespace(self):
        assert parse_date(" 2016-08-17 ") == dt.date(2016, 8, 17)

    @pytest.mark.parametrize("value", ["08/17/2016", "2016-13-01", "", 20160817])
    def test_rejects_non_iso(self, value):
        with pytest.raises(ValueError):
            parse_date(value)
