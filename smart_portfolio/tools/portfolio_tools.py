"""Portfolio-domain MCP tools."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mcp.server.fastmcp import FastMCP

from smart_portfolio.portfolio.data_loader import load_broker_csv
from smart_portfolio.tools.common import read_text_argument, write_text_file

if TYPE_CHECKING:
    from smart_portfolio.tools.registry import ToolServices


def register_portfolio_tools(mcp: FastMCP, services: ToolServices) -> None:
    @mcp.tool(description="List holdings with cost, current value, profit/loss and return rate.")
    def get_holdings() -> str:
        return json.dumps(services.portfolio.holdings_payload(), ensure_ascii=False)

    @mcp.tool(description="Return stock/bond/cash totals, total profit/loss and total return rate.")
    def get_portfolio_summary() -> str:
        return json.dumps(services.portfolio.summary(), ensure_ascii=False)

    @mcp.tool(
        description=(
            "Edit one field of a holding and re-derive the dependent fields. "
            "field is one of shares, avg_cost_price, cost, current_market_price, current_value."
        )
    )
    def update_holding(name: str, field: str, value: float) -> str:
        payload = services.portfolio.update_holding(name, field, value)
        return json.dumps(payload, ensure_ascii=False)

    @mcp.tool(description="Compare stock/bond values with target ratios and recommend buys or sells.")
    def get_rebalance_advice() -> str:
        return json.dumps(services.portfolio.rebalance(), ensure_ascii=False)

    @mcp.tool(description="Record a dividend payment (date as YYYY-MM-DD).")
    def add_dividend(date: str, stock_name: str, amount: float) -> str:
        payload = services.portfolio.add_dividend(date, stock_name, amount)
        return json.dumps(payload, ensure_ascii=False)

    @mcp.tool(description="Return dividend totals, monthly income, income per holding and recent records.")
    def get_dividend_report() -> str:
        return json.dumps(services.portfolio.dividend_report(), ensure_ascii=False)

    @mcp.tool(description="Export holdings and dividends as a backup document, optionally writing it to file_path.")
    def export_backup(file_path: str = "") -> str:
        document = services.portfolio.export_backup()
        if file_path:
            written = write_text_file(file_path, document)
            return json.dumps({"ok": True, "file_path": written}, ensure_ascii=False)
        return document

    @mcp.tool(description="Replace holdings and dividends from a backup document given as text or file_path.")
    def import_backup(text: str = "", file_path: str = "") -> str:
        document = read_text_argument(text, file_path)
        return json.dumps(services.portfolio.import_backup(document), ensure_ascii=False)

    @mcp.tool(description="Replace holdings from the broker's holdings CSV export given as text or file_path.")
    def import_broker_csv(text: str = "", file_path: str = "") -> str:
        document = load_broker_csv(file_path) if file_path else read_text_argument(text, "")
        return json.dumps(services.portfolio.import_broker_csv(document), ensure_ascii=False)
