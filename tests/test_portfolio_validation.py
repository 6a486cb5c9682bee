from smart_portfolio.portfolio.validation import validate_dividend_input, validate_holding_edit


def test_holding_edit_rejects_unknown_field() -> None:
    issues = validate_holding_edit("return_rate", 1.0)
    assert [issue.code for issue in issues] == ["invalid_field"]


def test_holding_edit_rejects_negative_and_non_finite_values() -> None:
    assert validate_holding_edit("shares", -1)[0].code == "negative_value"
    assert validate_holding_edit("cost", float("nan"))[0].code == "invalid_value"
    assert validate_holding_edit("cost", "100")[0].code == "invalid_value"


def test_holding_edit_accepts_valid_value() -> None:
    assert not validate_holding_edit("current_market_price", 63.65)


def test_dividend_input_validation() -> None:
    codes = {issue.code for issue in validate_dividend_input("2025-02-30", " ", -5)}
    assert codes == {"invalid_date", "missing_stock_name", "negative_amount"}
    assert not validate_dividend_input("2025-02-28", "元大高股息", 1200)
