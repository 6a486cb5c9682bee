"""Portfolio analysis domain package."""

from smart_portfolio.portfolio.models import AssetClass, DividendRecord, EditableField, Holding, PortfolioTarget
from smart_portfolio.portfolio.portfolio_service import PortfolioService

__all__ = ["AssetClass", "DividendRecord", "EditableField", "Holding", "PortfolioService", "PortfolioTarget"]
