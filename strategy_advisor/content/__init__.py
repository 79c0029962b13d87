"""Content store access for the site and the advisor catalog."""

from strategy_advisor.content.client import ContentStore, SanityClient
from strategy_advisor.content.fallback import StaticContentStore, fetch_all_data
from strategy_advisor.content.queries import get_services

__all__ = ["ContentStore", "SanityClient", "StaticContentStore", "fetch_all_data", "get_services"]
