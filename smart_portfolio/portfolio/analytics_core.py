"""Core portfolio aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from smart_portfolio.portfolio.models import AssetClass, Holding


@dataclass(frozen=True)
class PortfolioSummary:
    stock_value: float
    bond_value: float
    cash_value: float
    total_profit_loss: float
    total_current_value: float
    total_cost: float

    @property
    def invested_value(self) -> float:
        return self.stock_value + self.bond_value

    @property
    def stock_ratio_percent(self) -> float:
        invested = self.invested_value
        if invested <= 0:
            return 0.0
        return (self.stock_value / invested) * 100.0

    @property
    def bond_ratio_percent(self) -> float:
        invested = self.invested_value
        if invested <= 0:
            return 0.0
        return (self.bond_value / invested) * 100.0

    @property
    def total_return_rate(self) -> float:
        if self.total_cost <= 0:
            return 0.0
        return (self.total_profit_loss / self.total_cost) * 100.0


def aggregate(holdings: Iterable[Holding], total_assets_goal: float) -> PortfolioSummary:
    """Fold holdings into per-class totals.

    Cash is not tracked: it is whatever remains of the fixed total-assets figure
    after the current value of every holding, so editing a holding's value moves
    the implied cash by the same amount.
    """
    stock_value = 0.0
    bond_value = 0.0
    total_profit_loss = 0.0
    total_current_value = 0.0
    total_cost = 0.0

    for holding in holdings:
        if holding.asset_class == AssetClass.STOCK:
            stock_value += holding.current_value
        elif holding.asset_class == AssetClass.BOND:
            bond_value += holding.current_value
        total_profit_loss += holding.total_profit_loss
        total_current_value += holding.current_value
        total_cost += holding.cost

    return PortfolioSummary(
        stock_value=stock_value,
        bond_value=bond_value,
        cash_value=total_assets_goal - total_current_value,
        total_profit_loss=total_profit_loss,
        total_current_value=total_current_value,
        total_cost=total_cost,
    )


def summary_payload(summary: PortfolioSummary, total_assets_goal: float) -> dict[str, float]:
    return {
        "total_assets": float(total_assets_goal),
        "stock_value": summary.stock_value,
        "bond_value": summary.bond_value,
        "cash_value": summary.cash_value,
        "invested_value": summary.invested_value,
        "total_current_value": summary.total_current_value,
        "total_cost": summary.total_cost,
        "total_profit_loss": summary.total_profit_loss,
        "total_return_rate": summary.total_return_rate,
        "stock_ratio_percent": summary.stock_ratio_percent,
        "bond_ratio_percent": summary.bond_ratio_percent,
    }
