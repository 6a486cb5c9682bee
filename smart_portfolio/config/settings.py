"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from smart_portfolio.portfolio.models import PortfolioTarget


@dataclass(frozen=True)
class Settings:
    """Runtime settings for local/stdio and HTTP-hosted modes."""

    app_name: str = "smart-portfolio"
    app_version: str = "1.0.0"
    transport_mode: str = "auto"
    http_transport: str = "sse"
    host: str = "0.0.0.0"
    port: int = 8000
    mcp_path: str = "/mcp"
    health_path: str = "/health"
    log_level: str = "INFO"
    bootstrap_csv_path: str | None = None
    total_assets_goal: float = 8_000_000.0
    invested_goal: float = 7_000_000.0
    cash_reserve_goal: float = 1_000_000.0
    stock_ratio: float = 0.6
    bond_ratio: float = 0.4

    def portfolio_target(self) -> PortfolioTarget:
        return PortfolioTarget(
            total_assets_goal=self.total_assets_goal,
            invested_goal=self.invested_goal,
            cash_reserve_goal=self.cash_reserve_goal,
            stock_ratio=self.stock_ratio,
            bond_ratio=self.bond_ratio,
        )


def _as_int(value: str | None, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _as_float(value: str | None, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Load runtime settings from environment variables."""
    load_dotenv()

    return Settings(
        app_name=os.getenv("APP_NAME", "smart-portfolio"),
        transport_mode=os.getenv("TRANSPORT_MODE", "auto").strip().lower(),
        http_transport=os.getenv("HTTP_TRANSPORT", "sse").strip().lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_as_int(os.getenv("PORT"), 8000),
        mcp_path=os.getenv("MCP_PATH", "/mcp"),
        health_path=os.getenv("HEALTH_PATH", "/health"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        bootstrap_csv_path=os.getenv("BOOTSTRAP_CSV_PATH") or None,
        total_assets_goal=_as_float(os.getenv("TOTAL_ASSETS_GOAL"), 8_000_000.0),
        invested_goal=_as_float(os.getenv("INVESTED_GOAL"), 7_000_000.0),
        cash_reserve_goal=_as_float(os.getenv("CASH_RESERVE_GOAL"), 1_000_000.0),
        stock_ratio=_as_float(os.getenv("STOCK_RATIO"), 0.6),
        bond_ratio=_as_float(os.getenv("BOND_RATIO"), 0.4),
    )
