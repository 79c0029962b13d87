"""Typed content queries."""

import logging
from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from strategy_advisor.content.client import ContentStore
from strategy_advisor.content.models import (
    AboutPage,
    ContactPage,
    Document,
    HomePage,
    Service,
    SiteSettings,
)

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = ["homePage", "service", "aboutPage", "contactPage", "siteSettings"]

T = TypeVar("T", bound=Document)


def _first(store: ContentStore, doc_type: str, model: Type[T]) -> Optional[T]:
    for doc in store.fetch_by_type(doc_type):
        try:
            return model.model_validate(doc)
        except ValidationError as e:
            logger.warning(f"Skipping malformed {doc_type} document: {e}")
    return None


def get_services(store: ContentStore) -> list[Service]:
    """All services, skipping documents that don't validate."""
    services = []
    for doc in store.fetch_by_type("service"):
        try:
            services.append(Service.model_validate(doc))
        except ValidationError as e:
            logger.warning(f"Skipping malformed service document: {e}")
    return services


def get_home_page(store: ContentStore) -> Optional[HomePage]:
    return _first(store, "homePage", HomePage)


def get_about_page(store: ContentStore) -> Optional[AboutPage]:
    return _first(store, "aboutPage", AboutPage)


def get_contact_page(store: ContentStore) -> Optional[ContactPage]:
    return _first(store, "contactPage", ContactPage)


def get_site_settings(store: ContentStore) -> Optional[SiteSettings]:
    return _first(store, "siteSettings", SiteSettings)
