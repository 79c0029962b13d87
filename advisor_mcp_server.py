#!/usr/bin/env python3
"""
MCP Server wrapper for the Strategy Advisor.

Builds one AdvisorAgent from the environment and exposes it as tools.
"""
from fastmcp import FastMCP

from strategy_advisor.agents.advisor import AdvisorAgent
from strategy_advisor.config import AdvisorConfig
from strategy_advisor.content.client import SanityClient
from strategy_advisor.content.fallback import StaticContentStore
from strategy_advisor.content.utils import is_sanity_configured
from strategy_advisor.logging import setup_logging
from strategy_advisor.mcp_server import (
    analyze_need_tool,
    available_providers_tool,
    current_provider_tool,
    switch_provider_tool,
)


def build_server(advisor: AdvisorAgent) -> FastMCP:
    """Register the advisor tools on a new MCP server."""
    mcp = FastMCP("strategy-advisor")

    @mcp.tool()
    def analyze(
        text: str,
        industry: str = None,
        budget: str = None,
        timeline: str = None,
    ) -> dict:
        """Analyze a business need. Returns message, recommendations, roadmap, next steps."""
        return analyze_need_tool(advisor, text, industry=industry, budget=budget, timeline=timeline)

    @mcp.tool()
    def current_provider() -> dict:
        """Get the active provider's name, cost tier and availability."""
        return current_provider_tool(advisor)

    @mcp.tool()
    def providers() -> list:
        """List every provider the advisor can use."""
        return available_providers_tool()

    @mcp.tool()
    def switch_provider(provider_type: str) -> dict:
        """Switch provider: 'openai', 'openrouter', 'anthropic' or 'mock'."""
        return switch_provider_tool(advisor, provider_type)

    return mcp


def main():
    settings = AdvisorConfig.from_env()
    setup_logging(debug=settings.debug, enabled=settings.enable_logging)

    if is_sanity_configured(settings):
        store = SanityClient.from_config(settings)
    else:
        store = StaticContentStore()

    advisor = AdvisorAgent(content_store=store, settings=settings)
    advisor.initialize()
    build_server(advisor).run()


if __name__ == "__main__":
    main()
