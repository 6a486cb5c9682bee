import asyncio
from types import SimpleNamespace

import pytest
from mcp.server.fastmcp import FastMCP

from smart_portfolio.config.settings import Settings
from smart_portfolio.tools.common import read_text_argument, write_text_file
from smart_portfolio.tools.portfolio_tools import register_portfolio_tools
from smart_portfolio.tools.registry import build_tool_services

EXPECTED_TOOLS = {
    "get_holdings",
    "get_portfolio_summary",
    "update_holding",
    "get_rebalance_advice",
    "add_dividend",
    "get_dividend_report",
    "export_backup",
    "import_backup",
    "import_broker_csv",
}


def test_register_portfolio_tools(service) -> None:
    mcp = FastMCP(name="test-portfolio-tools")
    register_portfolio_tools(mcp, SimpleNamespace(portfolio=service))
    tools = asyncio.run(mcp.list_tools())
    assert EXPECTED_TOOLS <= {tool.name for tool in tools}


def test_build_tool_services_uses_bundled_export() -> None:
    services = build_tool_services(Settings())
    assert len(services.portfolio.holdings) == 6
    assert services.portfolio.target.invested_goal == 7_000_000


def test_build_tool_services_reads_configured_export(tmp_path) -> None:
    path = tmp_path / "export.csv"
    path.write_text("header\nA,1,0,現股,10,11,11,10,1,10%,台幣\n", encoding="utf-8")
    services = build_tool_services(Settings(bootstrap_csv_path=str(path)))
    assert [h.name for h in services.portfolio.holdings] == ["A"]


def test_text_file_helpers(tmp_path) -> None:
    path = write_text_file(str(tmp_path / "backup.txt"), "content\n")
    assert read_text_argument("", path) == "content\n"
    assert read_text_argument("inline", path) == "inline"
    with pytest.raises(ValueError, match="Provide either"):
        read_text_argument("", "")
    with pytest.raises(ValueError, match="File not found"):
        read_text_argument("", str(tmp_path / "missing.txt"))


def test_write_text_file_into_missing_directory(tmp_path) -> None:
    with pytest.raises(ValueError, match="Cannot write"):
        write_text_file(str(tmp_path / "no-such-dir" / "backup.txt"), "content\n")


def test_build_tool_services_with_missing_bootstrap_file(tmp_path) -> None:
    with pytest.raises(ValueError, match="File not found"):
        build_tool_services(Settings(bootstrap_csv_path=str(tmp_path / "missing.csv")))
