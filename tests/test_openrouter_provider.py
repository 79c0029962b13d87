# tests/test_openrouter_provider.py
"""Tests for OpenRouter provider."""

import json

import httpx
import pytest


def _provider(handler, **config):
    from strategy_advisor.agents.advisor_types import BackendConfig
    from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return OpenRouterProvider(
        BackendConfig(type="openrouter", **config),
        site_url="https://example.com",
        site_title="Example Co",
        http_client=client,
    )


def _no_call(request):
    raise AssertionError("no request expected")


@pytest.mark.parametrize("model,cost", [
    ("deepseek/deepseek-r1-0528:free", "Free"),
    ("deepseek/deepseek-chat", "$"),
    ("openai/gpt-4o", "$$"),
    ("mistralai/mistral-large", "$"),
])
def test_openrouter_cost_follows_model(model, cost):
    provider = _provider(_no_call, api_key="k", model=model)

    assert provider.get_cost() == cost
    assert provider.name == f"OpenRouter ({model})"


def test_openrouter_default_model_is_free():
    provider = _provider(_no_call, api_key="k")

    assert provider.model == "deepseek/deepseek-r1-0528:free"
    assert provider.get_cost() == "Free"


def test_openrouter_posts_chat_completion(catalog):
    from strategy_advisor.agents.advisor_types import AnalysisContext

    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        content = json.dumps({"message": "Launch a mobile app.", "confidence": 0.9})
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    provider = _provider(handler, api_key="or-key", model="openai/gpt-4o", temperature=0.3)
    result = provider.analyze("I need an app", AnalysisContext(services=catalog))

    assert seen["url"] == "https://openrouter.ai/api/v1/chat/completions"
    assert seen["headers"]["authorization"] == "Bearer or-key"
    assert seen["headers"]["http-referer"] == "https://example.com"
    assert seen["headers"]["x-title"] == "Example Co"
    assert seen["body"]["model"] == "openai/gpt-4o"
    assert seen["body"]["temperature"] == 0.3
    assert seen["body"]["max_tokens"] == 1500
    assert seen["body"]["stream"] is False

    assert result.message == "Launch a mobile app."
    assert result.confidence == 0.9
    assert result.provider == "OpenRouter (openai/gpt-4o)"
    assert result.cost == "$$"


def test_openrouter_error_status_carries_server_message():
    from strategy_advisor.agents.advisor_types import AnalysisContext
    from strategy_advisor.errors import BackendError

    def handler(request):
        return httpx.Response(401, json={"error": {"message": "No auth credentials found"}})

    provider = _provider(handler, api_key="bad")

    with pytest.raises(BackendError) as exc_info:
        provider.analyze("hi", AnalysisContext())

    assert exc_info.value.status_code == 401
    assert "No auth credentials found" in str(exc_info.value)


def test_openrouter_error_status_without_body_uses_reason():
    from strategy_advisor.agents.advisor_types import AnalysisContext
    from strategy_advisor.errors import BackendError

    def handler(request):
        return httpx.Response(503, text="upstream down")

    provider = _provider(handler, api_key="k")

    with pytest.raises(BackendError, match="503 - Service Unavailable"):
        provider.analyze("hi", AnalysisContext())


def test_openrouter_transport_failure_becomes_backend_error():
    from strategy_advisor.agents.advisor_types import AnalysisContext
    from strategy_advisor.errors import BackendError

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = _provider(handler, api_key="k")

    with pytest.raises(BackendError) as exc_info:
        provider.analyze("hi", AnalysisContext())

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)


def test_openrouter_non_json_success_is_backend_error():
    from strategy_advisor.agents.advisor_types import AnalysisContext
    from strategy_advisor.errors import BackendError

    def handler(request):
        return httpx.Response(200, text="<html>gateway</html>")

    provider = _provider(handler, api_key="k")

    with pytest.raises(BackendError, match="non-JSON"):
        provider.analyze("hi", AnalysisContext())


def test_openrouter_reply_without_choices_degrades():
    from strategy_advisor.agents.advisor_types import AnalysisContext

    def handler(request):
        return httpx.Response(200, json={"choices": []})

    provider = _provider(handler, api_key="k")
    result = provider.analyze("hi", AnalysisContext())

    assert result.message == ""
    assert result.next_steps == ["Schedule a consultation call"]


def test_openrouter_close_releases_own_client():
    from strategy_advisor.agents.advisor_types import BackendConfig
    from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider

    provider = OpenRouterProvider(BackendConfig(type="openrouter", api_key="k"))
    http = provider._get_http()

    provider.close()
    provider.close()

    assert http.is_closed
    assert provider._http is None


def test_openrouter_close_leaves_injected_client_open():
    provider = _provider(_no_call, api_key="k")
    http = provider._http

    provider.close()

    assert not http.is_closed


def test_openrouter_list_models():
    from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider

    def handler(request):
        assert request.url.path == "/api/v1/models"
        assert request.headers["authorization"] == "Bearer k"
        return httpx.Response(200, json={"data": [
            {"id": "openai/gpt-4o", "name": "GPT-4o", "pricing": {"prompt": "0.000005"}},
            {"id": "deepseek/deepseek-r1:free", "pricing": {"prompt": "0"}},
            {"name": "missing id"},
        ]})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    models = OpenRouterProvider.list_models("k", http_client=client)

    assert models == [
        {"id": "openai/gpt-4o", "name": "GPT-4o", "cost": "$"},
        {"id": "deepseek/deepseek-r1:free", "name": "deepseek/deepseek-r1:free", "cost": "$"},
    ]
    assert not client.is_closed


def test_openrouter_list_models_failure_returns_empty():
    from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider

    def handler(request):
        return httpx.Response(500)

    client = httpx.Client(transport=httpx.MockTransport(handler))

    assert OpenRouterProvider.list_models("k", http_client=client) == []
