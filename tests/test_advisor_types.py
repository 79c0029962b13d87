# tests/test_advisor_types.py
"""Tests for advisor data types."""

import pytest


@pytest.mark.parametrize("value,expected", [
    ("openai", "OPENAI"),
    ("OpenRouter", "OPENROUTER"),
    ("  anthropic ", "ANTHROPIC"),
    ("mock", "MOCK"),
])
def test_provider_type_from_string(value, expected):
    from strategy_advisor.agents.advisor_types import ProviderType

    assert ProviderType.from_string(value) is ProviderType[expected]


@pytest.mark.parametrize("value", ["gemini", "", None, 3])
def test_provider_type_from_string_unknown(value):
    from strategy_advisor.agents.advisor_types import ProviderType

    assert ProviderType.from_string(value) is None


def test_provider_type_from_string_passes_members_through():
    from strategy_advisor.agents.advisor_types import ProviderType

    assert ProviderType.from_string(ProviderType.OPENAI) is ProviderType.OPENAI


def test_recommendation_to_dict_omits_missing_optionals():
    from strategy_advisor.agents.advisor_types import ServiceRecommendation

    rec = ServiceRecommendation(service_id="s1", title="Web", description="Site", relevance=0.9)

    assert rec.to_dict() == {
        "serviceId": "s1",
        "title": "Web",
        "description": "Site",
        "relevance": 0.9,
    }


def test_response_to_dict_uses_camel_case():
    from strategy_advisor.agents.advisor_types import AdvisorResponse, ServiceRecommendation

    response = AdvisorResponse(
        message="Hello",
        recommendations=[ServiceRecommendation(
            service_id="s1", title="Web", description="Site", relevance=0.9,
            roadmap=["• Build"], timeline="8-12 weeks",
        )],
        next_steps=["Call us"],
        confidence=0.9,
        roadmap=["📋 Plan"],
        provider="Mock AI (Demo)",
        cost="Free",
    )

    data = response.to_dict()

    assert data["nextSteps"] == ["Call us"]
    assert data["recommendations"][0]["serviceId"] == "s1"
    assert data["recommendations"][0]["roadmap"] == ["• Build"]
    assert data["recommendations"][0]["timeline"] == "8-12 weeks"
    assert data["provider"] == "Mock AI (Demo)"
    assert data["cost"] == "Free"


def test_analysis_context_defaults():
    from strategy_advisor.agents.advisor_types import AnalysisContext

    context = AnalysisContext()

    assert context.services == []
    assert context.user_industry is None
    assert context.user_budget is None
    assert context.user_timeline is None


def test_backend_config_defaults_to_mock():
    from strategy_advisor.agents.advisor_types import BackendConfig

    config = BackendConfig()

    assert config.type == "mock"
    assert config.api_key is None
    assert config.temperature is None
