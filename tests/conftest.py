import pytest

from smart_portfolio.portfolio.data_loader import DEFAULT_BROKER_CSV, parse_broker_csv
from smart_portfolio.portfolio.models import PortfolioTarget
from smart_portfolio.portfolio.portfolio_service import PortfolioService


@pytest.fixture
def target() -> PortfolioTarget:
    return PortfolioTarget(
        total_assets_goal=8_000_000,
        invested_goal=7_000_000,
        cash_reserve_goal=1_000_000,
        stock_ratio=0.6,
        bond_ratio=0.4,
    )


@pytest.fixture
def service(target: PortfolioTarget) -> PortfolioService:
    return PortfolioService(target, holdings=parse_broker_csv(DEFAULT_BROKER_CSV))
