"""Portfolio prompt definitions."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP


def _build_rebalance_review_prompt(horizon: str) -> str:
    horizon_text = horizon.strip()
    if not horizon_text:
        raise ValueError("Missing required argument: horizon.")
    return (
        "You are reviewing a Taiwan ETF portfolio split between stock and bond funds plus cash.\n"
        f"Investment horizon: {horizon_text}.\n"
        "Use the get_portfolio_summary and get_rebalance_advice tools, then provide:\n"
        "1) Current stock/bond/cash split versus the targets\n"
        "2) Which asset class to top up first and by how much\n"
        "3) Whether idle cash above the reserve covers the gap\n"
        "4) Dividend income so far this year (get_dividend_report)."
    )


def register_portfolio_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(
        name="rebalance_review",
        title="Rebalance Review Prompt",
        description="Generate a structured rebalancing review prompt for the current portfolio.",
    )
    def rebalance_review(horizon: str) -> str:
        return _build_rebalance_review_prompt(horizon)
