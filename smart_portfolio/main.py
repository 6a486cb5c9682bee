"""Application entrypoint for the SmartPortfolio MCP server."""

from __future__ import annotations

import asyncio
import logging
import os

from mcp.server.fastmcp import FastMCP
from starlette.responses import JSONResponse, Response

from smart_portfolio.config.settings import get_settings
from smart_portfolio.prompts.portfolio_prompts import register_portfolio_prompts
from smart_portfolio.resources.portfolio_resources import register_portfolio_resources
from smart_portfolio.tools.registry import build_tool_services, register_all_tools

LOGGER = logging.getLogger(__name__)


def resolve_transport_mode(configured_mode: str) -> str:
    if configured_mode in {"stdio", "http"}:
        return configured_mode
    if os.getenv("PORT"):
        return "http"
    return "stdio"


def resolve_http_transport(configured_transport: str) -> str:
    if configured_transport in {"sse", "streamable"}:
        return configured_transport
    return "sse"


def configure_logging(level: str) -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    mcp = FastMCP(
        name=settings.app_name,
        host=settings.host,
        port=settings.port,
        streamable_http_path=settings.mcp_path,
    )
    services = build_tool_services(settings)
    register_all_tools(mcp, services)
    register_portfolio_prompts(mcp)
    register_portfolio_resources(mcp, services)
    resolved_mode = resolve_transport_mode(settings.transport_mode)
    resolved_http_transport = resolve_http_transport(settings.http_transport)

    @mcp.custom_route(settings.health_path, methods=["GET"])
    async def health_check(_: object) -> Response:
        tools = await mcp.list_tools()
        resources = await mcp.list_resources()
        return JSONResponse(
            {
                "status": "ok",
                "service": settings.app_name,
                "version": settings.app_version,
                "mode": resolved_mode,
                "tool_count": len(tools),
                "resource_count": len(resources),
                "holding_count": len(services.portfolio.holdings),
            }
        )

    LOGGER.info("starting server: mode=%s http_transport=%s", resolved_mode, resolved_http_transport)
    if resolved_mode == "stdio":
        await mcp.run_stdio_async()
    elif resolved_http_transport == "streamable":
        await mcp.run_streamable_http_async()
    else:
        await mcp.run_sse_async()


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
