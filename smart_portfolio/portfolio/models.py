"""Typed portfolio models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AssetClass(str, Enum):
    """Allocation bucket of a holding. Cash is always a derived remainder."""

    STOCK = "Stock"
    BOND = "Bond"


class EditableField(str, Enum):
    SHARES = "shares"
    AVG_COST_PRICE = "avg_cost_price"
    COST = "cost"
    CURRENT_MARKET_PRICE = "current_market_price"
    CURRENT_VALUE = "current_value"


@dataclass(frozen=True)
class Holding:
    name: str
    asset_class: AssetClass
    shares: float
    avg_cost_price: float
    current_market_price: float
    current_value: float = 0.0
    cost: float = 0.0
    total_profit_loss: float = 0.0
    return_rate: float = 0.0


@dataclass(frozen=True)
class DividendRecord:
    id: str
    date: date
    stock_name: str
    amount: float


@dataclass(frozen=True)
class PortfolioTarget:
    total_assets_goal: float
    invested_goal: float
    cash_reserve_goal: float
    stock_ratio: float
    bond_ratio: float


@dataclass
class ValidationIssue:
    field: str
    message: str
    row: int | None = None
    code: str = "invalid_value"
