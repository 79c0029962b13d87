"""Data types for the advisor agent."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProviderType(Enum):
    """Provider tags the factory knows how to build."""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    ANTHROPIC = "anthropic"
    MOCK = "mock"

    @classmethod
    def from_string(cls, value) -> Optional["ProviderType"]:
        """Convert string to ProviderType, returning None when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return None


@dataclass
class CatalogEntry:
    """A service offering the advisor can recommend."""

    id: str
    title: str
    description: str = ""


@dataclass
class ServiceRecommendation:
    """A single recommended service."""

    service_id: str
    title: str
    description: str
    relevance: float
    roadmap: Optional[list[str]] = None
    timeline: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "serviceId": self.service_id,
            "title": self.title,
            "description": self.description,
            "relevance": self.relevance,
        }
        if self.roadmap is not None:
            data["roadmap"] = self.roadmap
        if self.timeline is not None:
            data["timeline"] = self.timeline
        return data


@dataclass
class AdvisorResponse:
    """Canonical result every provider returns."""

    message: str
    recommendations: list[ServiceRecommendation] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)
    confidence: float = 0.0
    roadmap: list[str] = field(default_factory=list)
    provider: str = ""
    cost: str = ""

    def to_dict(self) -> dict:
        """Convert to the camelCase shape the site renders."""
        return {
            "message": self.message,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "nextSteps": self.next_steps,
            "confidence": self.confidence,
            "roadmap": self.roadmap,
            "provider": self.provider,
            "cost": self.cost,
        }


@dataclass
class AnalysisContext:
    """Business context sent along with the user's input."""

    services: list[CatalogEntry] = field(default_factory=list)
    user_industry: Optional[str] = None
    user_budget: Optional[str] = None
    user_timeline: Optional[str] = None


@dataclass
class BackendConfig:
    """Settings used to build a provider."""

    type: str = ProviderType.MOCK.value
    api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
