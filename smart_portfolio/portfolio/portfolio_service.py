"""Portfolio state container and workflow orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict
from datetime import date
from threading import Lock
from typing import Any

from smart_portfolio.lib.formatters import format_response, line_money, line_percent
from smart_portfolio.portfolio.analytics_core import PortfolioSummary, aggregate, summary_payload
from smart_portfolio.portfolio.backup_codec import decode, encode
from smart_portfolio.portfolio.data_loader import parse_broker_csv
from smart_portfolio.portfolio.dividends import (
    calculate_dividend_totals,
    calculate_income_by_stock,
    calculate_monthly_income,
    dividend_payload,
    new_dividend_record,
    recent_dividends,
)
from smart_portfolio.portfolio.models import DividendRecord, Holding, PortfolioTarget, ValidationIssue
from smart_portfolio.portfolio.rebalance import advice_payload, advise, build_recommendation
from smart_portfolio.portfolio.recalculation import recalculate
from smart_portfolio.portfolio.validation import validate_dividend_input, validate_holding_edit

LOGGER = logging.getLogger(__name__)


def _json_validation_error(issues: list[ValidationIssue]) -> dict[str, Any]:
    return {"ok": False, "error": {"type": "validation_error", "errors": [asdict(issue) for issue in issues]}}


def _json_error(error_type: str, message: str) -> dict[str, Any]:
    return {"ok": False, "error": {"type": error_type, "message": message}}


def holding_payload(holding: Holding) -> dict[str, Any]:
    payload = asdict(holding)
    payload["asset_class"] = holding.asset_class.value
    return payload


class PortfolioService:
    """Owns the holdings and dividend collections.

    Every change builds a new tuple and swaps it in under the lock, so readers
    always see a whole snapshot and edits are applied one at a time.
    """

    def __init__(
        self,
        target: PortfolioTarget,
        holdings: Iterable[Holding] = (),
        dividends: Iterable[DividendRecord] = (),
    ) -> None:
        self.target = target
        self._holdings: tuple[Holding, ...] = tuple(holdings)
        self._dividends: tuple[DividendRecord, ...] = tuple(dividends)
        self._lock = Lock()

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return self._holdings

    @property
    def dividends(self) -> tuple[DividendRecord, ...]:
        return self._dividends

    def _summary(self) -> PortfolioSummary:
        return aggregate(self._holdings, self.target.total_assets_goal)

    def holdings_payload(self) -> dict[str, Any]:
        holdings = self._holdings
        return {"ok": True, "count": len(holdings), "holdings": [holding_payload(h) for h in holdings]}

    def summary(self) -> dict[str, Any]:
        return {"ok": True, "summary": summary_payload(self._summary(), self.target.total_assets_goal)}

    def rebalance(self) -> dict[str, Any]:
        summary = self._summary()
        advice = advise(
            summary.stock_value,
            summary.bond_value,
            self.target.invested_goal,
            self.target.stock_ratio,
            self.target.bond_ratio,
        )
        available_cash = summary.cash_value - self.target.cash_reserve_goal
        recommendation = build_recommendation(advice, available_cash)
        report = format_response(
            "Rebalancing Strategy",
            [
                line_money("Invested goal", self.target.invested_goal),
                line_percent("Target stock ratio", self.target.stock_ratio * 100.0),
                line_percent("Target bond ratio", self.target.bond_ratio * 100.0),
                line_money(f"Stocks ({advice.stock_action})", abs(advice.stock_gap)),
                line_money(f"Bonds ({advice.bond_action})", abs(advice.bond_gap)),
                line_money("Available cash", available_cash),
                recommendation,
            ],
        )
        return {
            "ok": True,
            "advice": advice_payload(advice),
            "available_cash": available_cash,
            "recommendation": recommendation,
            "report": report,
        }

    def update_holding(self, name: str, field: str, value: float) -> dict[str, Any]:
        issues = validate_holding_edit(field, value)
        if issues:
            return _json_validation_error(issues)
        with self._lock:
            holdings = list(self._holdings)
            index = next((i for i, h in enumerate(holdings) if h.name == name), None)
            if index is None:
                return _json_error("not_found", f"No holding named {name!r}.")
            holdings[index] = recalculate(holdings[index], field, value)
            self._holdings = tuple(holdings)
            updated = holdings[index]
        LOGGER.info("holding updated: name=%s field=%s value=%s", name, field, value)
        return {"ok": True, "holding": holding_payload(updated)}

    def add_dividend(self, day: str, stock_name: str, amount: float) -> dict[str, Any]:
        issues = validate_dividend_input(day, stock_name, amount)
        if issues:
            return _json_validation_error(issues)
        paid_on = date.fromisoformat(day.strip())
        record = new_dividend_record(paid_on, stock_name.strip(), amount)
        with self._lock:
            self._dividends = self._dividends + (record,)
        LOGGER.info("dividend recorded: stock=%s date=%s amount=%s", record.stock_name, paid_on, amount)
        return {"ok": True, "dividend": dividend_payload(record)}

    def dividend_report(self, today: date | None = None) -> dict[str, Any]:
        records = self._dividends
        reference_day = today or date.today()
        return {
            "ok": True,
            "totals": calculate_dividend_totals(records, reference_day),
            "monthly_income": calculate_monthly_income(records),
            "income_by_stock": calculate_income_by_stock(records),
            "recent": [dividend_payload(r) for r in recent_dividends(records)],
        }

    def export_backup(self) -> str:
        with self._lock:
            holdings, dividends = self._holdings, self._dividends
        return encode(holdings, dividends)

    def import_backup(self, text: str) -> dict[str, Any]:
        contents = decode(text)
        if contents.is_empty:
            LOGGER.warning("backup import produced no holdings and no dividends")
            return _json_error("import_error", "Backup contained no holdings and no dividend records.")
        with self._lock:
            self._holdings = tuple(contents.holdings)
            self._dividends = tuple(contents.dividends)
        return {"ok": True, "holdings": len(contents.holdings), "dividends": len(contents.dividends)}

    def import_broker_csv(self, text: str) -> dict[str, Any]:
        holdings = parse_broker_csv(text)
        if not holdings:
            LOGGER.warning("broker import produced no holdings")
            return _json_error("import_error", "Broker export contained no readable holdings.")
        with self._lock:
            self._holdings = tuple(holdings)
        LOGGER.info("broker export imported: holdings=%s", len(holdings))
        return {"ok": True, "holdings": len(holdings)}

    def current_snapshot(self) -> dict[str, Any]:
        return {
            "uri": "portfolio://current",
            "summary": summary_payload(self._summary(), self.target.total_assets_goal),
            "holdings": [holding_payload(h) for h in self._holdings],
            "dividend_count": len(self._dividends),
        }
