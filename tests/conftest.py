"""Shared test helpers."""

import pytest

from strategy_advisor.agents.advisor_types import CatalogEntry


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    """Keep the developer's provider settings out of the tests."""
    for name in ("ADVISOR_PROVIDER", "SANITY_PROJECT_ID", "ADVISOR_MOCK_DELAY_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENABLE_LOGGING", "false")


@pytest.fixture
def catalog():
    return [
        CatalogEntry(id="s1", title="Mobile App Development", description="Native and cross-platform apps"),
        CatalogEntry(id="s2", title="Web Development", description="Fast, accessible websites"),
        CatalogEntry(id="s3", title="Digital Marketing", description="Campaigns that convert"),
        CatalogEntry(id="s4", title="API Development", description="Robust APIs and integrations"),
    ]


class FakeContentStore:
    """Content store serving a fixed set of documents."""

    def __init__(self, documents=None, should_fail=False):
        self.documents = documents or {}
        self.should_fail = should_fail
        self.call_count = 0

    def fetch_by_type(self, doc_type):
        self.call_count += 1
        if self.should_fail:
            raise RuntimeError("content store down")
        return list(self.documents.get(doc_type, []))


SERVICE_DOCUMENTS = [
    {"_id": "s1", "title": "Mobile App Development", "description": "Native and cross-platform apps"},
    {"_id": "s2", "title": "Web Development", "description": "Fast, accessible websites"},
]
