"""Two-section text backup of holdings and dividend history.

Layout::

    SmartPortfolio_Backup_v1
    [HOLDINGS]
    name,shares,avgPrice,currentPrice,type
    "<name>",<shares>,<avgPrice>,<currentPrice>,<Stock|Bond>

    [DIVIDENDS]
    id,date,stockName,amount
    "<id>",<YYYY-MM-DD>,"<stockName>",<amount>

Only the inputs of a holding are stored. Cost, current value, profit/loss and
return rate are re-derived on load as if the share count had just been set,
so a hand-edited file always reloads consistently. A holding whose cost or
value was last set by a direct override therefore reloads with the
forward-computed figures instead; the first decode is the one that may
differ, later save/load cycles are stable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from smart_portfolio.lib.tokenizer import QUOTE, split_row
from smart_portfolio.portfolio.models import AssetClass, DividendRecord, Holding
from smart_portfolio.portfolio.recalculation import derive_from_shares

LOGGER = logging.getLogger(__name__)

VERSION_LINE = "SmartPortfolio_Backup_v1"
HOLDINGS_MARKER = "[HOLDINGS]"
DIVIDENDS_MARKER = "[DIVIDENDS]"
HOLDINGS_HEADER = "name,shares,avgPrice,currentPrice,type"
DIVIDENDS_HEADER = "id,date,stockName,amount"
HOLDINGS_COLUMNS = 5
DIVIDENDS_COLUMNS = 4

_SECTIONS = {HOLDINGS_MARKER: "holdings", DIVIDENDS_MARKER: "dividends"}
_SKIPPED_PREFIXES = (VERSION_LINE, HOLDINGS_HEADER, DIVIDENDS_HEADER)


@dataclass
class BackupContents:
    holdings: list[Holding] = field(default_factory=list)
    dividends: list[DividendRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.holdings and not self.dividends


def _quote(text: str) -> str:
    return f"{QUOTE}{text}{QUOTE}"


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float; integral values drop the `.0`."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def encode(holdings: Iterable[Holding], dividends: Iterable[DividendRecord]) -> str:
    lines = [VERSION_LINE, HOLDINGS_MARKER, HOLDINGS_HEADER]
    for holding in holdings:
        lines.append(
            ",".join(
                [
                    _quote(holding.name),
                    format_number(holding.shares),
                    format_number(holding.avg_cost_price),
                    format_number(holding.current_market_price),
                    holding.asset_class.value,
                ]
            )
        )
    lines.extend(["", DIVIDENDS_MARKER, DIVIDENDS_HEADER])
    for record in dividends:
        lines.append(
            ",".join(
                [
                    _quote(record.id),
                    record.date.isoformat(),
                    _quote(record.stock_name),
                    format_number(record.amount),
                ]
            )
        )
    return "\n".join(lines) + "\n"


def _parse_holding(tokens: list[str]) -> Holding:
    name, shares, avg_price, current_price, tag = tokens[:HOLDINGS_COLUMNS]
    return derive_from_shares(
        name=name,
        asset_class=AssetClass(tag.strip()),
        shares=float(shares),
        avg_cost_price=float(avg_price),
        current_market_price=float(current_price),
    )


def _parse_dividend(tokens: list[str]) -> DividendRecord:
    record_id, day, stock_name, amount = tokens[:DIVIDENDS_COLUMNS]
    return DividendRecord(
        id=record_id,
        date=date.fromisoformat(day.strip()),
        stock_name=stock_name,
        amount=float(amount),
    )


def decode(text: str) -> BackupContents:
    """Parse a backup document, skipping rows that cannot be read."""
    contents = BackupContents()
    section: str | None = None

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_SKIPPED_PREFIXES):
            continue
        if line.startswith("[") and line.endswith("]"):
            if line in _SECTIONS:
                section = _SECTIONS[line]
            else:
                LOGGER.warning("unknown backup section ignored: line=%s marker=%s", line_no, line)
            continue
        if section is None:
            LOGGER.debug("row outside any section dropped: line=%s", line_no)
            continue

        tokens = split_row(line)
        try:
            if section == "holdings":
                if len(tokens) < HOLDINGS_COLUMNS:
                    LOGGER.warning("short holdings row skipped: line=%s columns=%s", line_no, len(tokens))
                    continue
                contents.holdings.append(_parse_holding(tokens))
            else:
                if len(tokens) < DIVIDENDS_COLUMNS:
                    LOGGER.warning("short dividends row skipped: line=%s columns=%s", line_no, len(tokens))
                    continue
                contents.dividends.append(_parse_dividend(tokens))
        except ValueError as error:
            LOGGER.warning("malformed %s row skipped: line=%s error=%s", section, line_no, error)

    LOGGER.info(
        "backup decoded: holdings=%s dividends=%s",
        len(contents.holdings),
        len(contents.dividends),
    )
    return contents
