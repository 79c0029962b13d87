"""Advisor Agent - the single entry point the site calls."""

import logging
import time
from typing import Optional

from strategy_advisor.agents.advisor_types import (
    AdvisorResponse,
    AnalysisContext,
    BackendConfig,
    CatalogEntry,
)
from strategy_advisor.agents.factory import ProviderFactory
from strategy_advisor.agents.providers.base import AdvisorProvider
from strategy_advisor.config import AdvisorConfig
from strategy_advisor.content.client import ContentStore
from strategy_advisor.content.queries import get_services
from strategy_advisor.errors import AdvisorError
from strategy_advisor.logging import AdvisorLogger

logger = logging.getLogger(__name__)


class AdvisorAgent:
    """
    Owns the active provider and the cached service catalog.

    Flow:
    1. Load the catalog from the content store once (best effort)
    2. Merge it with whatever context the caller supplies
    3. Forward to the active provider; its errors reach the caller

    Built explicitly by the application and passed to whatever needs it.
    Calls are expected to be serialized; switch_provider() replaces the
    provider reference wholesale, so a call racing a switch may run on
    either provider.
    """

    def __init__(
        self,
        content_store: Optional[ContentStore] = None,
        config: Optional[BackendConfig] = None,
        settings: Optional[AdvisorConfig] = None,
        provider: Optional[AdvisorProvider] = None,
    ):
        self.content_store = content_store
        self.settings = settings or AdvisorConfig.from_env()
        self.events = AdvisorLogger()
        self.services: list[CatalogEntry] = []
        self._initialized = False

        if provider is None:
            provider = ProviderFactory.create_provider(
                config or ProviderFactory.resolve_default_config(),
                self.settings,
            )
        self.provider = provider

    def initialize(self) -> None:
        """Load the service catalog. Never raises; failures leave it empty."""
        self._initialized = True

        if self.content_store is None:
            logger.info("No content store configured, starting with an empty catalog")
            self.services = []
            return

        try:
            self.services = [s.to_catalog_entry() for s in get_services(self.content_store)]
        except Exception as e:
            logger.error(f"Failed to load services: {e}")
            self.events.catalog_failed(str(e))
            self.services = []
            return

        self.events.catalog_loaded(len(self.services))

    def analyze_need(self, user_input: str, context: Optional[dict] = None) -> AdvisorResponse:
        """
        Analyze a visitor's need with the active provider.

        Args:
            user_input: Free text typed by the visitor
            context: Optional overrides for AnalysisContext fields
                (user_industry, user_budget, user_timeline, services)

        Returns:
            AdvisorResponse from the active provider

        Raises:
            ConfigurationError: Active provider has no credential
            BackendError: Remote call failed
        """
        if not self._initialized:
            self.initialize()

        overrides = dict(context or {})
        services = overrides.pop("services", self.services)
        analysis_context = AnalysisContext(services=list(services), **overrides)

        provider = self.provider
        self.events.analysis_started(provider.name, len(user_input))
        start = time.monotonic()

        try:
            response = provider.analyze(user_input, analysis_context)
        except AdvisorError as e:
            self.events.analysis_failed(provider.name, type(e).__name__, str(e))
            raise

        self.events.analysis_complete(
            provider.name,
            duration_seconds=time.monotonic() - start,
            confidence=response.confidence,
            recommendation_count=len(response.recommendations),
        )
        return response

    def switch_provider(self, provider_type: str) -> None:
        """
        Replace the active provider with a default-configured one.

        Credentials and model settings of the previous provider are not
        carried over.
        """
        previous = self.provider
        self.provider = ProviderFactory.create_provider(
            BackendConfig(type=provider_type),
            self.settings,
        )
        previous.close()
        self.events.provider_switched(previous.name, self.provider.name)

    def get_current_provider(self) -> dict:
        return {
            "name": self.provider.name,
            "cost": self.provider.get_cost(),
            "isAvailable": self.provider.is_available(),
        }

    def get_available_providers(self) -> list[dict]:
        return ProviderFactory.list_available()
