"""SmartPortfolio: Taiwan ETF portfolio tracking, rebalancing and backup."""

__version__ = "1.0.0"
