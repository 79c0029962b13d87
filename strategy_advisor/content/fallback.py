"""Built-in site content used when the CMS is unavailable."""

import copy
import logging
from typing import Callable, Optional, TypeVar

from strategy_advisor.content.client import ContentStore
from strategy_advisor.content import queries
from strategy_advisor.errors import ContentStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FALLBACK_DOCUMENTS = {
    "homePage": [
        {
            "_id": "fallback-home",
            "title": "Strategic Digital Solutions",
            "subtitle": "Modern Web Development",
            "description": (
                "We help businesses plan, design and build digital products, "
                "from the first strategy session to launch and growth."
            ),
            "ctaText": "Talk to our advisor",
            "ctaLink": "/contact",
        }
    ],
    "service": [
        {
            "_id": "service-1",
            "title": "Web Development",
            "description": "Modern web applications built with React, TypeScript, and best practices.",
            "icon": "💻",
            "slug": {"current": "web-development"},
        },
        {
            "_id": "service-2",
            "title": "UI/UX Design",
            "description": "Beautiful and intuitive user interfaces designed for optimal user experience.",
            "icon": "🎨",
            "slug": {"current": "ui-ux-design"},
        },
        {
            "_id": "service-3",
            "title": "Mobile Development",
            "description": "Cross-platform mobile applications using React Native and modern frameworks.",
            "icon": "📱",
            "slug": {"current": "mobile-development"},
        },
        {
            "_id": "service-4",
            "title": "Consulting",
            "description": "Expert guidance on technology choices, architecture, and development strategies.",
            "icon": "🤝",
            "slug": {"current": "consulting"},
        },
    ],
    "aboutPage": [
        {
            "_id": "fallback-about",
            "title": "About Us",
            "content": [
                {
                    "_type": "block",
                    "children": [{
                        "text": (
                            "We are a passionate team of developers and designers dedicated "
                            "to creating exceptional digital experiences."
                        )
                    }],
                },
                {
                    "_type": "block",
                    "children": [{
                        "text": (
                            "Our approach combines cutting-edge technology with timeless "
                            "design principles."
                        )
                    }],
                },
            ],
        }
    ],
    "contactPage": [
        {
            "_id": "fallback-contact",
            "title": "Contact Us",
            "content": [
                {
                    "_type": "block",
                    "children": [{
                        "text": (
                            "Get in touch with us to discuss your project or ask any "
                            "questions. We're here to help bring your ideas to life."
                        )
                    }],
                }
            ],
            "email": "hello@example.com",
            "phone": "+1 (555) 123-4567",
            "address": "123 Main Street, City, State 12345",
        }
    ],
    "siteSettings": [],
}


class StaticContentStore:
    """In-memory content store serving the built-in documents."""

    def __init__(self, documents: Optional[dict] = None):
        self.documents = documents if documents is not None else FALLBACK_DOCUMENTS

    def fetch_by_type(self, doc_type: str) -> list[dict]:
        # Callers get copies so the built-in content can't be mutated
        return copy.deepcopy(self.documents.get(doc_type, []))


def fetch_or_default(fetch: Callable[[], T], default: T) -> T:
    """Run a content query, returning default if the store fails."""
    try:
        return fetch()
    except ContentStoreError as e:
        logger.error(f"Error fetching data from content store: {e}")
        return default


def fetch_all_data(store: Optional[ContentStore] = None) -> dict:
    """
    Load every page the site renders.

    Each document falls back to the built-in content independently, so a
    single failing query doesn't blank the whole site.
    """
    static = StaticContentStore()
    if store is None:
        store = static

    return {
        "home_page": fetch_or_default(
            lambda: queries.get_home_page(store), queries.get_home_page(static)),
        "services": fetch_or_default(
            lambda: queries.get_services(store), queries.get_services(static)),
        "about_page": fetch_or_default(
            lambda: queries.get_about_page(store), queries.get_about_page(static)),
        "contact_page": fetch_or_default(
            lambda: queries.get_contact_page(store), queries.get_contact_page(static)),
        "site_settings": fetch_or_default(lambda: queries.get_site_settings(store), None),
    }
