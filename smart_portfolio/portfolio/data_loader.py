"""Portfolio file loading helpers for the broker's holdings export."""

from __future__ import annotations

import logging
import os

from smart_portfolio.lib.tokenizer import split_row
from smart_portfolio.portfolio.models import AssetClass, Holding

LOGGER = logging.getLogger(__name__)

MIN_BROKER_COLUMNS = 10

# Broker export columns: name, shares, profitLoss, tradeType, avgPrice, marketPrice,
# currentValue, cost, profitLoss2, returnRatePercent, currency.
DEFAULT_BROKER_CSV = """股票名稱,股數,總損益,交易別,成交均價,市價,現值,付出成本,預估損益,報酬率,幣別
元大台灣50,"22,000","26,117",現股,62.35,63.65,"1,398,355","1,372,238","26,117",1.90%,台幣
元大高股息,"20,000","11,980",現股,35.96,36.62,"731,382","719,402","11,980",1.67%,台幣
元大美債20年,"45,000","-16,495",現股,27.62,27.28,"1,227,116","1,243,611","-16,495",-1.33%,台幣
元大投資級公司債,"30,000","-2,038",現股,33.74,33.7,"1,010,600","1,012,638","-2,038",-0.20%,台幣
群益台灣精選高息,"40,000","29,971",現股,21.62,22.41,"895,152","865,181","29,971",3.46%,台幣
群益ESG投等債20+,"45,000","-4,488",現股,15.17,15.08,"678,330","682,818","-4,488",-0.66%,台幣"""

ETF_CATEGORY_MAP: dict[str, AssetClass] = {
    "元大台灣50": AssetClass.STOCK,
    "元大高股息": AssetClass.STOCK,
    "元大美債20年": AssetClass.BOND,
    "元大投資級公司債": AssetClass.BOND,
    "群益台灣精選高息": AssetClass.STOCK,
    "群益ESG投等債20+": AssetClass.BOND,
}


def clean_number(value: str) -> float:
    return float(value.replace(",", "").replace('"', "").strip())


def clean_percentage(value: str) -> float:
    return float(value.replace("%", "").strip())


def parse_broker_csv(
    text: str,
    category_map: dict[str, AssetClass] | None = None,
) -> list[Holding]:
    """Read the broker export as-is; figures are trusted, not recomputed."""
    categories = ETF_CATEGORY_MAP if category_map is None else category_map
    holdings: list[Holding] = []
    lines = text.strip().splitlines()

    for line_no, line in enumerate(lines[1:], start=2):
        tokens = [token.strip() for token in split_row(line)]
        if len(tokens) < MIN_BROKER_COLUMNS:
            LOGGER.debug("short broker row skipped: line=%s columns=%s", line_no, len(tokens))
            continue
        name = tokens[0]
        try:
            holding = Holding(
                name=name,
                asset_class=categories.get(name, AssetClass.STOCK),
                shares=clean_number(tokens[1]),
                total_profit_loss=clean_number(tokens[2]),
                avg_cost_price=clean_number(tokens[4]),
                current_market_price=clean_number(tokens[5]),
                current_value=clean_number(tokens[6]),
                cost=clean_number(tokens[7]),
                return_rate=clean_percentage(tokens[9]),
            )
        except ValueError as error:
            LOGGER.warning("malformed broker row skipped: line=%s error=%s", line_no, error)
            continue
        holdings.append(holding)

    return holdings


def load_broker_csv(file_path: str) -> str:
    absolute_path = file_path if os.path.isabs(file_path) else os.path.abspath(file_path)
    ext = os.path.splitext(absolute_path)[1].lower()
    if ext not in {".csv", ".txt"}:
        raise ValueError("Broker export must be a text file (.csv or .txt).")
    if not os.path.isfile(absolute_path):
        raise ValueError(f"File not found: {absolute_path}")
    with open(absolute_path, encoding="utf-8-sig") as handle:
        return handle.read()
