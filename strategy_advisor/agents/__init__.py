"""Agents for the strategy advisor."""

from strategy_advisor.agents.advisor_types import (
    AdvisorResponse,
    AnalysisContext,
    BackendConfig,
    CatalogEntry,
    ProviderType,
    ServiceRecommendation,
)
from strategy_advisor.agents.factory import ProviderFactory

__all__ = [
    "AdvisorResponse",
    "AnalysisContext",
    "BackendConfig",
    "CatalogEntry",
    "ProviderFactory",
    "ProviderType",
    "ServiceRecommendation",
]
