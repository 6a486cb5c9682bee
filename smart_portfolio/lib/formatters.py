"""Response formatting helpers."""

from __future__ import annotations

FINANCIAL_DISCLAIMER = "Informational use only. This is not financial advice."


def _fmt_money(value: float | None) -> str:
    if value is None:
        return "n/a"
    return f"{round(value):,}"


def _fmt_percent(value: float | None) -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}%"


def format_response(
    title: str,
    lines: list[str],
    warning: str | None = None,
    include_disclaimer: bool = True,
) -> str:
    chunks: list[str] = [title]
    if warning:
        chunks.append(f"Warning: {warning}")
    chunks.extend(lines)
    if include_disclaimer:
        chunks.extend(["---", FINANCIAL_DISCLAIMER])
    return "\n".join(chunks)


def line_money(label: str, value: float | None) -> str:
    return f"{label}: NT${_fmt_money(value)}"


def line_percent(label: str, value: float | None) -> str:
    return f"{label}: {_fmt_percent(value)}"
