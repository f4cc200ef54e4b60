"""
Tests for app/api/reports/helpers.py: coercion, calendar months, money.
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from app.api.reports.helpers import (
    YearMonth,
    format_brl,
    money,
    parse_date,
    parse_timestamp,
    to_count,
    to_decimal,
)


class TestToDecimal:
    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", True, False, [], {}, "NaN", "inf", float("nan")])
    def test_non_numeric_becomes_zero(self, raw):
        assert to_decimal(raw) == Decimal("0")

    def test_numeric_values(self):
        assert to_decimal(7) == Decimal("7")
        assert to_decimal("12.5") == Decimal("12.5")
        assert to_decimal(" 300 ") == Decimal("300")
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(Decimal("42.10")) == Decimal("42.10")

    def test_negative_values_pass_through(self):
        assert to_decimal("-5") == Decimal("-5")

    @pytest.mark.parametrize("raw", ["1e1000000", "-1e1000000", "1e27", Decimal("9e999999999")])
    def test_out_of_range_magnitude_becomes_zero(self, raw):
        assert to_decimal(raw) == Decimal("0")

    def test_largest_accepted_amount(self):
        assert to_decimal("999999999999999.99") == Decimal("999999999999999.99")


class TestToCount:
    def test_truncates_fractions(self):
        assert to_count("3") == 3
        assert to_count(2.9) == 2
        assert to_count("-1.5") == -1

    def test_missing_is_zero(self):
        assert to_count(None) == 0
        assert to_count("twelve") == 0

    def test_huge_count_is_zero(self):
        assert to_count("9e999999999") == 0


class TestMoney:
    def test_rounds_half_up_to_cents(self):
        assert money(Decimal("266.665")) == Decimal("266.67")
        assert money("10") == Decimal("10.00")
        assert money(None) == Decimal("0.00")

    def test_format_brl(self):
        assert format_brl(Decimal("1234.5")) == "R$ 1.234,50"
        assert format_brl(1234567.891) == "R$ 1.234.567,89"
        assert format_brl(0) == "R$ 0,00"
        assert format_brl(None) == "R$ 0,00"


class TestYearMonth:
    def test_create_rejects_bad_month(self):
        with pytest.raises(ValueError):
            YearMonth.create(2025, 13)
        with pytest.raises(ValueError):
            YearMonth.create(2025, 0)

    def test_shift_rolls_over_years(self):
        assert YearMonth(2024, 12).shift(1) == YearMonth(2025, 1)
        assert YearMonth(2025, 1).shift(-1) == YearMonth(2024, 12)
        assert YearMonth(2025, 3).shift(-12) == YearMonth(2024, 3)
        assert YearMonth(2025, 11).shift(14) == YearMonth(2027, 1)

    def test_months_since(self):
        assert YearMonth(2025, 6).months_since(YearMonth(2025, 2)) == 4
        assert YearMonth(2025, 1).months_since(YearMonth(2024, 11)) == 2
        assert YearMonth(2025, 1).months_since(YearMonth(2025, 3)) == -2

    def test_contains_and_labels(self):
        period = YearMonth(2025, 3)
        assert period.contains(date(2025, 3, 31))
        assert period.contains(datetime(2025, 3, 1, 0, 0))
        assert not period.contains(date(2024, 3, 1))
        assert not period.contains(None)
        assert period.label == "2025-03"
        assert period.month_name == "Março"


class TestParseTimestamp:
    def test_iso_with_z_suffix(self):
        parsed = parse_timestamp("2025-01-10T12:00:00.000Z")
        assert parsed == datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)

    def test_aware_value_moves_into_report_timezone(self):
        parsed = parse_timestamp("2025-02-01T02:00:00Z", ZoneInfo("America/Sao_Paulo"))
        assert (parsed.year, parsed.month, parsed.day) == (2025, 1, 31)

    def test_date_only_string_keeps_calendar_day(self):
        parsed = parse_timestamp("2025-06-01", ZoneInfo("America/Sao_Paulo"))
        assert parsed == datetime(2025, 6, 1)

    def test_epoch_milliseconds(self):
        parsed = parse_timestamp(1735689600000)
        assert parsed == datetime(2025, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", [None, "", "not-a-date", "2025-13-40", True, {"seconds": 1}, float("inf")])
    def test_unreadable_values_return_none(self, raw):
        assert parse_timestamp(raw) is None

    def test_parse_date(self):
        assert parse_date(date(2025, 6, 1)) == date(2025, 6, 1)
        assert parse_date("2025-06-01T23:59:00") == date(2025, 6, 1)
        assert parse_date("garbage") is None
