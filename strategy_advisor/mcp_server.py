"""MCP tools for the advisor."""

from typing import Optional

from strategy_advisor.agents.advisor import AdvisorAgent
from strategy_advisor.agents.factory import ProviderFactory
from strategy_advisor.errors import AdvisorError, APOLOGY_MESSAGE


def analyze_need_tool(
    advisor: AdvisorAgent,
    text: str,
    industry: Optional[str] = None,
    budget: Optional[str] = None,
    timeline: Optional[str] = None,
) -> dict:
    """
    Analyze a business need and recommend services.

    Args:
        text: What the visitor wants to achieve
        industry: Optional industry
        budget: Optional budget range
        timeline: Optional timeline

    Returns:
        The advisor response, or {"error", "message"} if the provider failed
    """
    context = {"user_industry": industry, "user_budget": budget, "user_timeline": timeline}
    try:
        response = advisor.analyze_need(text, context)
    except AdvisorError as e:
        return {
            "error": f"{type(e).__name__}: {e}",
            "message": APOLOGY_MESSAGE,
            "provider": advisor.provider.name,
        }
    return response.to_dict()


def current_provider_tool(advisor: AdvisorAgent) -> dict:
    """Name, cost tier and availability of the active provider."""
    return advisor.get_current_provider()


def available_providers_tool() -> list[dict]:
    """Every provider the advisor can switch to."""
    return ProviderFactory.list_available()


def switch_provider_tool(advisor: AdvisorAgent, provider_type: str) -> dict:
    """
    Switch the active provider.

    Unknown types fall back to the rule-based provider. The new provider
    starts with default settings.
    """
    advisor.switch_provider(provider_type)
    return advisor.get_current_provider()
