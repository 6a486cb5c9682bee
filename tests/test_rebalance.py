import pytest

from smart_portfolio.portfolio.models import AssetClass
from smart_portfolio.portfolio.rebalance import advice_payload, advise, build_recommendation


def test_advise_gaps_and_priority() -> None:
    advice = advise(4_000_000, 3_000_000, 7_000_000, 0.6, 0.4)
    assert advice.stock_gap == pytest.approx(200_000)
    assert advice.bond_gap == pytest.approx(-200_000)
    assert advice.stock_action == "buy"
    assert advice.bond_action == "sell"
    assert advice.priority == AssetClass.STOCK
    assert advice.remaining_to_invest == pytest.approx(0)


def test_advise_prefers_bond_when_bond_gap_is_larger() -> None:
    advice = advise(4_200_000, 2_000_000, 7_000_000, 0.6, 0.4)
    assert advice.priority == AssetClass.BOND
    assert advice.remaining_to_invest == pytest.approx(800_000)


def test_advise_accepts_negative_ratios() -> None:
    advice = advise(100, 100, 1000, -0.5, 1.5)
    assert advice.stock_gap == pytest.approx(-600)
    assert advice.bond_gap == pytest.approx(1400)


def test_recommendation_mentions_priority_and_remaining_amount() -> None:
    advice = advise(3_000_000, 2_900_000, 7_000_000, 0.6, 0.4)
    text = build_recommendation(advice, 100_000)
    assert "stock ETF" in text
    assert "$1,100,000 is still needed" in text
    assert "$100,000 above the reserve" in text


def test_advice_payload_is_json_ready() -> None:
    payload = advice_payload(advise(0, 0, 1000, 0.6, 0.4))
    assert payload["priority"] == "Stock"
    assert payload["stock_action"] == "buy"


def test_recommendation_when_goal_is_met_exactly() -> None:
    advice = advise(4_200_000, 2_800_000, 7_000_000, 0.6, 0.4)
    text = build_recommendation(advice, 0)
    assert "$0 is still needed to reach the invested goal." in text
    assert "exceeded" not in text


def test_recommendation_when_goal_is_exceeded() -> None:
    advice = advise(5_000_000, 3_000_000, 7_000_000, 0.6, 0.4)
    assert "The invested goal is exceeded by $1,000,000." in build_recommendation(advice, 0)
