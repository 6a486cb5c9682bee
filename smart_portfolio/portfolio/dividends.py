"""Dividend history records and income analytics."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import date

import pandas as pd

from smart_portfolio.portfolio.models import DividendRecord

DIVIDEND_COLUMNS = ["id", "date", "stock_name", "amount"]


def new_dividend_record(day: date, stock_name: str, amount: float) -> DividendRecord:
    return DividendRecord(id=uuid.uuid4().hex, date=day, stock_name=stock_name, amount=float(amount))


def dividend_frame(records: Sequence[DividendRecord]) -> pd.DataFrame:
    frame = pd.DataFrame(
        [
            {"id": r.id, "date": r.date, "stock_name": r.stock_name, "amount": float(r.amount)}
            for r in records
        ],
        columns=DIVIDEND_COLUMNS,
    )
    # Plain dates: nanosecond timestamps only span 1677-2262.
    frame["year"] = frame["date"].map(lambda d: d.year)
    frame["month"] = frame["date"].map(lambda d: f"{d.year:04d}-{d.month:02d}")
    frame["amount"] = frame["amount"].astype(float)
    return frame


def calculate_dividend_totals(records: Sequence[DividendRecord], today: date) -> dict[str, float]:
    frame = dividend_frame(records)
    this_year = frame[frame["year"] == today.year]
    return {
        "total_all_time": float(frame["amount"].sum()),
        "total_this_year": float(this_year["amount"].sum()),
    }


def calculate_monthly_income(records: Sequence[DividendRecord]) -> dict[str, float]:
    frame = dividend_frame(records)
    if frame.empty:
        return {}
    totals = frame.groupby("month")["amount"].sum().sort_index()
    return {str(month): float(value) for month, value in totals.items()}


def calculate_income_by_stock(records: Sequence[DividendRecord]) -> dict[str, float]:
    frame = dividend_frame(records)
    if frame.empty:
        return {}
    totals = frame.groupby("stock_name")["amount"].sum().sort_values(ascending=False)
    return {str(name): float(value) for name, value in totals.items()}


def recent_dividends(records: Sequence[DividendRecord], limit: int = 5) -> list[DividendRecord]:
    # Stable sort keeps insertion order for records paid on the same day.
    return sorted(records, key=lambda r: r.date, reverse=True)[: max(0, limit)]


def dividend_payload(record: DividendRecord) -> dict[str, str | float]:
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "stock_name": record.stock_name,
        "amount": record.amount,
    }
