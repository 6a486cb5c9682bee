"""Taiwan brokerage fee and transaction tax schedule."""

from __future__ import annotations

from smart_portfolio.portfolio.models import AssetClass

FEE_RATE = 0.001425
BROKER_DISCOUNT = 0.28
STOCK_TAX_RATE = 0.001


def discounted_fee_rate() -> float:
    return FEE_RATE * BROKER_DISCOUNT


def transaction_tax(asset_class: AssetClass) -> float:
    # Bond ETFs are exempt from the securities transaction tax.
    if asset_class == AssetClass.BOND:
        return 0.0
    return STOCK_TAX_RATE


def buy_cost_factor() -> float:
    """Multiplier applied to the raw acquisition amount to include the buy-side fee."""
    return 1.0 + discounted_fee_rate()


def sell_value_factor(asset_class: AssetClass) -> float:
    """Multiplier netting the sell-side fee and, for stocks, the transaction tax."""
    return 1.0 - discounted_fee_rate() - transaction_tax(asset_class)
