import pytest

from smart_portfolio.portfolio.data_loader import (
    DEFAULT_BROKER_CSV,
    clean_number,
    clean_percentage,
    load_broker_csv,
    parse_broker_csv,
)
from smart_portfolio.portfolio.models import AssetClass

HEADER = DEFAULT_BROKER_CSV.splitlines()[0]


def test_parse_default_export() -> None:
    holdings = parse_broker_csv(DEFAULT_BROKER_CSV)
    assert len(holdings) == 6
    first = holdings[0]
    assert first.name == "元大台灣50"
    assert first.asset_class == AssetClass.STOCK
    assert first.shares == 22000
    assert first.avg_cost_price == 62.35
    assert first.current_market_price == 63.65
    assert first.current_value == 1398355
    assert first.cost == 1372238
    assert first.total_profit_loss == 26117
    assert first.return_rate == pytest.approx(1.90)
    bond = holdings[2]
    assert bond.asset_class == AssetClass.BOND
    assert bond.total_profit_loss == -16495
    assert bond.return_rate == pytest.approx(-1.33)


def test_unknown_names_default_to_stock_and_short_rows_are_skipped() -> None:
    text = "\n".join(
        [
            HEADER,
            'Mystery ETF,"1,000","10",現股,10,10.5,"10,485","10,004","481",4.81%,台幣',
            "too,short,row",
            'Broken,"abc","10",現股,10,10.5,"10,485","10,004","481",4.81%,台幣',
        ]
    )
    holdings = parse_broker_csv(text)
    assert [h.name for h in holdings] == ["Mystery ETF"]
    assert holdings[0].asset_class == AssetClass.STOCK
    assert holdings[0].shares == 1000


def test_custom_category_map() -> None:
    holdings = parse_broker_csv(DEFAULT_BROKER_CSV, category_map={})
    assert all(h.asset_class == AssetClass.STOCK for h in holdings)


def test_clean_helpers() -> None:
    assert clean_number('"1,398,355"') == 1398355
    assert clean_percentage("-0.66%") == -0.66


def test_load_broker_csv_reads_text_file(tmp_path) -> None:
    path = tmp_path / "export.csv"
    path.write_text(DEFAULT_BROKER_CSV, encoding="utf-8")
    assert load_broker_csv(str(path)) == DEFAULT_BROKER_CSV


def test_load_broker_csv_rejects_other_extensions(tmp_path) -> None:
    with pytest.raises(ValueError, match="text file"):
        load_broker_csv(str(tmp_path / "export.xlsx"))


def test_load_broker_csv_missing_file(tmp_path) -> None:
    with pytest.raises(ValueError, match="File not found"):
        load_broker_csv(str(tmp_path / "missing.csv"))
