# tests/test_content_utils.py
"""Tests for content helpers."""

import pytest


@pytest.mark.parametrize("project_id,dataset,expected", [
    ("abc123", "production", True),
    (None, "production", False),
    ("your-project-id", "production", False),
    ("abc123", "", False),
])
def test_is_sanity_configured(project_id, dataset, expected):
    from strategy_advisor.config import AdvisorConfig
    from strategy_advisor.content.utils import is_sanity_configured

    config = AdvisorConfig(sanity_project_id=project_id, sanity_dataset=dataset)

    assert is_sanity_configured(config) is expected


def test_is_sanity_configured_reads_env(monkeypatch):
    from strategy_advisor.content.utils import is_sanity_configured

    assert is_sanity_configured() is False
    monkeypatch.setenv("SANITY_PROJECT_ID", "abc123")
    assert is_sanity_configured() is True


def test_format_block_content():
    from strategy_advisor.content.utils import format_block_content

    blocks = [
        {"_type": "block", "children": [{"text": "Hello "}, {"text": "world"}]},
        {"_type": "image", "asset": {}},
        {"_type": "block", "children": [{"text": "Second"}]},
    ]

    assert format_block_content(blocks) == "Hello world\n\nSecond"


@pytest.mark.parametrize("blocks", [None, [], "text", {"_type": "block"}])
def test_format_block_content_empty(blocks):
    from strategy_advisor.content.utils import format_block_content

    assert format_block_content(blocks) == ""
