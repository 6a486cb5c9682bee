"""Domain tool registry entrypoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP

from smart_portfolio.config.settings import Settings
from smart_portfolio.portfolio.data_loader import DEFAULT_BROKER_CSV, load_broker_csv, parse_broker_csv
from smart_portfolio.portfolio.portfolio_service import PortfolioService
from smart_portfolio.tools.portfolio_tools import register_portfolio_tools

LOGGER = logging.getLogger(__name__)


@dataclass
class ToolServices:
    portfolio: PortfolioService


def build_tool_services(settings: Settings) -> ToolServices:
    if settings.bootstrap_csv_path:
        raw_csv = load_broker_csv(settings.bootstrap_csv_path)
        source = settings.bootstrap_csv_path
    else:
        raw_csv = DEFAULT_BROKER_CSV
        source = "bundled sample"
    holdings = parse_broker_csv(raw_csv)
    LOGGER.info("bootstrap holdings loaded: source=%s holdings=%s", source, len(holdings))
    return ToolServices(portfolio=PortfolioService(settings.portfolio_target(), holdings=holdings))


def register_all_tools(mcp: FastMCP, services: ToolServices) -> None:
    register_portfolio_tools(mcp, services)
