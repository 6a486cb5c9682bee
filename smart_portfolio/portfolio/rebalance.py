"""Stock/bond rebalancing advice against fixed target ratios."""

from __future__ import annotations

from dataclasses import dataclass

from smart_portfolio.portfolio.models import AssetClass


@dataclass(frozen=True)
class RebalanceAdvice:
    stock_value: float
    bond_value: float
    stock_goal: float
    bond_goal: float
    stock_gap: float
    bond_gap: float

    @property
    def stock_action(self) -> str:
        return _action(self.stock_gap)

    @property
    def bond_action(self) -> str:
        return _action(self.bond_gap)

    @property
    def priority(self) -> AssetClass:
        """Class with the larger gap, i.e. the one to top up first."""
        return AssetClass.STOCK if self.stock_gap > self.bond_gap else AssetClass.BOND

    @property
    def remaining_to_invest(self) -> float:
        return self.stock_gap + self.bond_gap


def _action(gap: float) -> str:
    # Selling is informational only; it never feeds back into cash.
    return "buy" if gap > 0 else "sell"


def advise(
    stock_value: float,
    bond_value: float,
    target_invested: float,
    stock_ratio: float,
    bond_ratio: float,
) -> RebalanceAdvice:
    stock_goal = target_invested * stock_ratio
    bond_goal = target_invested * bond_ratio
    return RebalanceAdvice(
        stock_value=stock_value,
        bond_value=bond_value,
        stock_goal=stock_goal,
        bond_goal=bond_goal,
        stock_gap=stock_goal - stock_value,
        bond_gap=bond_goal - bond_value,
    )


def _fmt_amount(value: float) -> str:
    return f"${abs(round(value)):,}"


def build_recommendation(advice: RebalanceAdvice, available_cash: float) -> str:
    target_label = "stock ETF" if advice.priority == AssetClass.STOCK else "bond ETF"
    remaining = advice.remaining_to_invest
    if round(remaining) >= 0:
        remaining_note = f"{_fmt_amount(remaining)} is still needed to reach the invested goal."
    else:
        remaining_note = f"The invested goal is exceeded by {_fmt_amount(remaining)}."
    if available_cash >= 0:
        cash_note = f"currently {_fmt_amount(available_cash)} above the reserve"
    else:
        cash_note = f"currently {_fmt_amount(available_cash)} below the reserve"
    return (
        f"Use idle cash ({cash_note}) to top up the {target_label} position first. "
        f"{remaining_note}"
    )


def advice_payload(advice: RebalanceAdvice) -> dict[str, float | str]:
    return {
        "stock_value": advice.stock_value,
        "bond_value": advice.bond_value,
        "stock_goal": advice.stock_goal,
        "bond_goal": advice.bond_goal,
        "stock_gap": advice.stock_gap,
        "bond_gap": advice.bond_gap,
        "stock_action": advice.stock_action,
        "bond_action": advice.bond_action,
        "priority": advice.priority.value,
        "remaining_to_invest": advice.remaining_to_invest,
    }
