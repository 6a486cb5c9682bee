"""Keeps the price, value and cost fields of a holding consistent after an edit."""

from __future__ import annotations

import math
from dataclasses import replace

from smart_portfolio.portfolio.fees import buy_cost_factor, sell_value_factor
from smart_portfolio.portfolio.models import AssetClass, EditableField, Holding


def round_money(value: float) -> float:
    """Round to the nearest whole currency unit, halves rounded up."""
    return float(math.floor(value + 0.5))


def _value_of(shares: float, price: float, asset_class: AssetClass) -> float:
    return round_money(shares * price * sell_value_factor(asset_class))


def _cost_of(shares: float, avg_cost_price: float) -> float:
    return round_money(shares * avg_cost_price * buy_cost_factor())


def _with_totals(holding: Holding) -> Holding:
    profit_loss = holding.current_value - holding.cost
    return_rate = (profit_loss / holding.cost) * 100.0 if holding.cost != 0 else 0.0
    return replace(holding, total_profit_loss=profit_loss, return_rate=return_rate)


def recalculate(holding: Holding, edited_field: EditableField | str, new_value: float) -> Holding:
    """Apply one edit and re-derive the dependent fields.

    Only the edited field, the other member of its price/amount pair and the
    two summary fields change. Input is not validated: negative numbers flow
    through the formulas unchanged, and a zero share count yields zero for the
    back-solved prices instead of dividing by zero.
    """
    edited = EditableField(edited_field)
    value = float(new_value)

    if edited == EditableField.SHARES:
        updated = replace(
            holding,
            shares=value,
            current_value=_value_of(value, holding.current_market_price, holding.asset_class),
            cost=_cost_of(value, holding.avg_cost_price),
        )
    elif edited == EditableField.AVG_COST_PRICE:
        updated = replace(holding, avg_cost_price=value, cost=_cost_of(holding.shares, value))
    elif edited == EditableField.COST:
        avg_cost_price = value / (holding.shares * buy_cost_factor()) if holding.shares > 0 else 0.0
        updated = replace(holding, cost=value, avg_cost_price=avg_cost_price)
    elif edited == EditableField.CURRENT_MARKET_PRICE:
        updated = replace(
            holding,
            current_market_price=value,
            current_value=_value_of(holding.shares, value, holding.asset_class),
        )
    else:
        factor = sell_value_factor(holding.asset_class)
        market_price = value / (holding.shares * factor) if holding.shares > 0 else 0.0
        updated = replace(holding, current_value=value, current_market_price=market_price)

    return _with_totals(updated)


def derive_from_shares(
    name: str,
    asset_class: AssetClass,
    shares: float,
    avg_cost_price: float,
    current_market_price: float,
) -> Holding:
    """Build a consistent holding from its persisted fields, as if `shares` had just been set."""
    seed = Holding(
        name=name,
        asset_class=asset_class,
        shares=shares,
        avg_cost_price=avg_cost_price,
        current_market_price=current_market_price,
    )
    return recalculate(seed, EditableField.SHARES, shares)
