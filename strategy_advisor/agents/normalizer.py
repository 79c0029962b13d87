"""Turn a free-text model reply into an AdvisorResponse.

The reply is expected to carry a JSON object somewhere in its text. Every
field is validated on its own; anything missing or malformed is replaced
by a default, so normalize_reply() never raises. The worst case is the
whole reply used as a plain message.
"""

import json
import logging
import math
from typing import Any, Optional

from strategy_advisor.agents.advisor_types import AdvisorResponse, ServiceRecommendation
from strategy_advisor.agents.roadmap import default_roadmap
from strategy_advisor.logging import AdvisorLogger

logger = logging.getLogger(__name__)
events = AdvisorLogger()

MAX_RECOMMENDATIONS = 4
DEFAULT_CONFIDENCE = 0.7
FALLBACK_NEXT_STEPS = ["Schedule a consultation call"]


def _is_number(value: Any) -> bool:
    # bool is an int subclass; "true" is not a confidence score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(float(value), low), high)


def _string_list(value: list) -> list[str]:
    return [item if isinstance(item, str) else str(item) for item in value if item is not None]


def extract_json(text: str) -> Optional[str]:
    """Return the span from the first '{' to the last '}', or None."""
    start = text.find("{")
    end = text.rfind("}") + 1
    if start == -1 or end <= start:
        return None
    return text[start:end]


def _coerce_recommendation(item: Any) -> Optional[ServiceRecommendation]:
    if not isinstance(item, dict):
        return None

    relevance = item.get("relevance")
    roadmap = item.get("roadmap")
    timeline = item.get("timeline")
    service_id = item.get("serviceId")

    return ServiceRecommendation(
        service_id="" if service_id is None else str(service_id),
        title=str(item.get("title") or ""),
        description=str(item.get("description") or ""),
        relevance=_clamp(relevance) if _is_number(relevance) else 0.0,
        roadmap=_string_list(roadmap) if isinstance(roadmap, list) else None,
        timeline=timeline if isinstance(timeline, str) else None,
    )


def fallback_response(raw_text: str, provider: str, cost: str) -> AdvisorResponse:
    """Response used when no structured data could be recovered."""
    return AdvisorResponse(
        message=raw_text,
        recommendations=[],
        next_steps=list(FALLBACK_NEXT_STEPS),
        confidence=DEFAULT_CONFIDENCE,
        roadmap=default_roadmap(),
        provider=provider,
        cost=cost,
    )


def normalize_reply(raw_text: str, provider: str, cost: str) -> AdvisorResponse:
    """
    Build an AdvisorResponse from a model reply.

    Args:
        raw_text: The reply text exactly as returned by the remote model
        provider: Name of the calling provider (always wins over the reply)
        cost: Cost tier of the calling provider (always wins over the reply)

    Returns:
        A fully populated AdvisorResponse
    """
    raw_text = raw_text if isinstance(raw_text, str) else ""

    candidate = extract_json(raw_text)
    if candidate is None:
        events.response_degraded(provider, "no JSON object in reply")
        return fallback_response(raw_text, provider, cost)

    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse reply from {provider} as JSON: {e}")
        events.response_degraded(provider, "invalid JSON")
        return fallback_response(raw_text, provider, cost)

    if not isinstance(parsed, dict):
        events.response_degraded(provider, "JSON is not an object")
        return fallback_response(raw_text, provider, cost)

    message = parsed.get("message")
    recommendations = parsed.get("recommendations")
    next_steps = parsed.get("nextSteps")
    confidence = parsed.get("confidence")
    roadmap = parsed.get("roadmap")

    if isinstance(recommendations, list):
        coerced = (_coerce_recommendation(r) for r in recommendations[:MAX_RECOMMENDATIONS])
        recommendations = [r for r in coerced if r is not None]
    else:
        recommendations = []

    return AdvisorResponse(
        message=message if isinstance(message, str) and message else raw_text,
        recommendations=recommendations,
        next_steps=_string_list(next_steps) if isinstance(next_steps, list) else list(FALLBACK_NEXT_STEPS),
        confidence=_clamp(confidence) if _is_number(confidence) else DEFAULT_CONFIDENCE,
        roadmap=_string_list(roadmap) if isinstance(roadmap, list) else default_roadmap(),
        provider=provider,
        cost=cost,
    )
