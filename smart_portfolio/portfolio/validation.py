"""Input validation for user edits and new dividend records.

The calculation engine accepts any number; these checks run at the tool layer
before a value reaches it.
"""

from __future__ import annotations

import math
from datetime import date

from smart_portfolio.portfolio.models import EditableField, ValidationIssue

VALID_FIELDS = {item.value for item in EditableField}


def _number_issue(field: str, value: object, code_prefix: str) -> ValidationIssue | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(float(value)):
        return ValidationIssue(
            field=field,
            code=f"invalid_{code_prefix}",
            message=f"{field} must be a finite number.",
        )
    if float(value) < 0:
        return ValidationIssue(
            field=field,
            code=f"negative_{code_prefix}",
            message=f"{field} must not be negative.",
        )
    return None


def validate_holding_edit(field: str, value: object) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if field not in VALID_FIELDS:
        issues.append(
            ValidationIssue(
                field="field",
                code="invalid_field",
                message=f"field must be one of {sorted(VALID_FIELDS)}.",
            )
        )
        return issues
    issue = _number_issue(field, value, "value")
    if issue:
        issues.append(issue)
    return issues


def parse_iso_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None


def validate_dividend_input(day: str, stock_name: str, amount: object) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if parse_iso_date(day) is None:
        issues.append(ValidationIssue(field="date", code="invalid_date", message="date must be YYYY-MM-DD."))
    if not stock_name or not stock_name.strip():
        issues.append(ValidationIssue(field="stock_name", code="missing_stock_name", message="stock_name is required."))
    issue = _number_issue("amount", amount, "amount")
    if issue:
        issues.append(issue)
    return issues
