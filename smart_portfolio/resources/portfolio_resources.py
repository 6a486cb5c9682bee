"""Portfolio resource definitions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mcp.server.fastmcp import FastMCP

if TYPE_CHECKING:
    from smart_portfolio.tools.registry import ToolServices

CURRENT_PORTFOLIO_URI = "portfolio://current"
PORTFOLIO_BACKUP_URI = "portfolio://backup"


def register_portfolio_resources(mcp: FastMCP, services: "ToolServices") -> None:
    @mcp.resource(
        CURRENT_PORTFOLIO_URI,
        name="current-portfolio",
        title="Current Portfolio Snapshot",
        description="Summary metrics and holdings of the portfolio currently held in memory.",
        mime_type="application/json",
    )
    def current_portfolio_resource() -> str:
        return json.dumps(services.portfolio.current_snapshot(), ensure_ascii=False)

    @mcp.resource(
        PORTFOLIO_BACKUP_URI,
        name="portfolio-backup",
        title="Portfolio Backup Document",
        description="Holdings and dividend history in the SmartPortfolio backup text format.",
        mime_type="text/plain",
    )
    def portfolio_backup_resource() -> str:
        return services.portfolio.export_backup()
