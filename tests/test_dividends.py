from datetime import date

from smart_portfolio.portfolio.dividends import (
    calculate_dividend_totals,
    calculate_income_by_stock,
    calculate_monthly_income,
    new_dividend_record,
    recent_dividends,
)
from smart_portfolio.portfolio.models import DividendRecord


def make_records() -> list[DividendRecord]:
    return [
        DividendRecord(id="r1", date=date(2024, 12, 10), stock_name="A", amount=1000),
        DividendRecord(id="r2", date=date(2025, 1, 15), stock_name="A", amount=2000),
        DividendRecord(id="r3", date=date(2025, 1, 20), stock_name="B", amount=500),
        DividendRecord(id="r4", date=date(2025, 3, 1), stock_name="B", amount=1500),
    ]


def test_dividend_totals() -> None:
    totals = calculate_dividend_totals(make_records(), today=date(2025, 6, 1))
    assert totals == {"total_all_time": 5000.0, "total_this_year": 4000.0}


def test_monthly_income_is_sorted_by_month() -> None:
    assert calculate_monthly_income(make_records()) == {"2024-12": 1000.0, "2025-01": 2500.0, "2025-03": 1500.0}


def test_income_by_stock() -> None:
    assert calculate_income_by_stock(make_records()) == {"A": 3000.0, "B": 2000.0}


def test_recent_dividends_newest_first() -> None:
    assert [r.id for r in recent_dividends(make_records(), limit=2)] == ["r4", "r3"]


def test_empty_history() -> None:
    assert calculate_dividend_totals([], today=date(2025, 1, 1)) == {"total_all_time": 0.0, "total_this_year": 0.0}
    assert calculate_monthly_income([]) == {}
    assert calculate_income_by_stock([]) == {}
    assert recent_dividends([]) == []


def test_new_dividend_record_assigns_unique_ids() -> None:
    first = new_dividend_record(date(2025, 1, 1), "A", 100)
    second = new_dividend_record(date(2025, 1, 1), "A", 100)
    assert first.id != second.id
    assert first.amount == 100.0


def test_dates_outside_timestamp_range() -> None:
    records = [
        DividendRecord(id="old", date=date(1600, 1, 1), stock_name="A", amount=5),
        DividendRecord(id="far", date=date(3000, 1, 1), stock_name="A", amount=1),
    ]
    assert calculate_dividend_totals(records, today=date(3000, 6, 1)) == {"total_all_time": 6.0, "total_this_year": 1.0}
    assert calculate_monthly_income(records) == {"1600-01": 5.0, "3000-01": 1.0}
