# strategy_advisor/agents/providers/rule_based.py
"""Offline keyword-matching provider used as the default and the fallback."""

import time
from typing import Optional

from strategy_advisor.agents.advisor_types import (
    AdvisorResponse,
    AnalysisContext,
    BackendConfig,
    ServiceRecommendation,
)
from strategy_advisor.agents.providers.base import AdvisorProvider
from strategy_advisor.agents.roadmap import build_roadmap

# Category label -> service title fragments. Iteration order is the order
# recommendations come out in.
STRATEGIC_CATEGORIES = {
    "mobile strategy": ["Mobile App Development", "Cross-platform Solutions"],
    "web presence": ["Website Development", "E-commerce Solutions"],
    "ecommerce growth": ["E-commerce Development", "Digital Marketing"],
    "api & integration": ["API Development", "System Integration"],
    "digital transformation": ["Digital Strategy", "Technology Consulting"],
    "business strategy": ["Business Consulting", "Strategic Planning"],
    "design & ux": ["UI/UX Design", "Brand Design"],
    "marketing": ["Digital Marketing", "SEO Optimization"],
    "analytics": ["Data Analytics", "Business Intelligence"],
    "automation": ["Process Automation", "Workflow Optimization"],
}

# Shorter forms of a category's own title fragments that also select it.
# Each trigger must be a substring of one of the category's fragments.
CATEGORY_TRIGGERS = {
    "mobile strategy": ["mobile app"],
    "web presence": ["website"],
    "ecommerce growth": ["e-commerce"],
    "api & integration": ["integration"],
}

SERVICE_ROADMAPS = {
    "mobile strategy": [
        "User research and persona development",
        "Platform strategy (iOS/Android/Cross-platform)",
        "UX/UI design and prototyping",
        "Development and testing",
        "App store optimization and launch",
    ],
    "web presence": [
        "Brand analysis and positioning",
        "Information architecture planning",
        "Design and development",
        "Content strategy and SEO",
        "Launch and ongoing optimization",
    ],
    "ecommerce growth": [
        "Market analysis and competitive research",
        "Platform selection and architecture",
        "Design and user experience optimization",
        "Payment and security integration",
        "Launch and growth marketing",
    ],
    "api & integration": [
        "System analysis and requirements gathering",
        "API design and architecture planning",
        "Development and testing",
        "Documentation and training",
        "Deployment and monitoring",
    ],
}

GENERIC_SERVICE_ROADMAP = [
    "Strategic planning and analysis",
    "Solution design and architecture",
    "Implementation and development",
    "Testing and quality assurance",
    "Launch and ongoing support",
]

TIMELINES = {
    "mobile strategy": "12-16 weeks",
    "web presence": "8-12 weeks",
    "ecommerce growth": "16-20 weeks",
    "api & integration": "10-14 weeks",
    "digital transformation": "20-24 weeks",
    "business strategy": "4-8 weeks",
}
DEFAULT_TIMELINE = "8-12 weeks"

NEXT_STEPS_WITH_RECOMMENDATIONS = [
    "Schedule a strategic consultation call",
    "Request a detailed project roadmap",
    "View our strategic case studies",
    "Download our digital transformation guide",
]

NEXT_STEPS_WITHOUT_RECOMMENDATIONS = [
    "Schedule a business strategy session",
    "Request a technology assessment",
    "Download our strategic planning toolkit",
    "Join our digital transformation webinar",
]

MAX_RECOMMENDATIONS = 4
GENERAL_RECOMMENDATION_COUNT = 3


class RuleBasedProvider(AdvisorProvider):
    """Deterministic provider: keyword matching against a fixed taxonomy."""

    def __init__(self, config: Optional[BackendConfig] = None, delay: float = 0.0):
        self.config = config or BackendConfig()
        self.delay = delay

    @property
    def name(self) -> str:
        return "Mock AI (Demo)"

    def is_available(self) -> bool:
        return True

    def get_cost(self) -> str:
        return "Free"

    def analyze(self, user_input: str, context: AnalysisContext) -> AdvisorResponse:
        """Match the input against the category table and build a canned response."""
        if self.delay > 0:
            time.sleep(self.delay)

        text = user_input.lower()
        matched = self._match_services(text, context)

        if not matched:
            matched = [
                ServiceRecommendation(
                    service_id=service.id,
                    title=service.title,
                    description="Could be valuable for your business transformation",
                    relevance=0.7,
                    roadmap=list(GENERIC_SERVICE_ROADMAP),
                    timeline=DEFAULT_TIMELINE,
                )
                for service in context.services[:GENERAL_RECOMMENDATION_COUNT]
            ]

        roadmap = self._generate_roadmap(text)
        has_recommendations = len(matched) > 0

        return AdvisorResponse(
            message=self._compose_message(user_input, matched, roadmap),
            recommendations=matched[:MAX_RECOMMENDATIONS],
            next_steps=list(
                NEXT_STEPS_WITH_RECOMMENDATIONS if has_recommendations
                else NEXT_STEPS_WITHOUT_RECOMMENDATIONS
            ),
            confidence=0.9 if has_recommendations else 0.6,
            roadmap=roadmap,
            provider=self.name,
            cost=self.get_cost(),
        )

    def _match_services(self, text: str, context: AnalysisContext) -> list[ServiceRecommendation]:
        matched = []
        for category, fragments in STRATEGIC_CATEGORIES.items():
            lowered = [fragment.lower() for fragment in fragments]
            triggers = lowered + CATEGORY_TRIGGERS.get(category, [])
            if category not in text and not any(trigger in text for trigger in triggers):
                continue

            for service in context.services:
                title = service.title.lower()
                if any(fragment in title for fragment in lowered):
                    matched.append(ServiceRecommendation(
                        service_id=service.id,
                        title=service.title,
                        description=f"Perfect for your {category} needs",
                        relevance=0.9,
                        roadmap=list(SERVICE_ROADMAPS.get(category, GENERIC_SERVICE_ROADMAP)),
                        timeline=TIMELINES.get(category, DEFAULT_TIMELINE),
                    ))
        return matched

    def _generate_roadmap(self, text: str) -> list[str]:
        return build_roadmap(
            include_design=any(word in text for word in ("design", "ui", "ux")),
            include_development=any(word in text for word in ("app", "website", "api")),
        )

    def _compose_message(
        self,
        user_input: str,
        recommendations: list[ServiceRecommendation],
        roadmap: list[str],
    ) -> str:
        if not recommendations:
            return (
                f'Based on your description of "{user_input}", I recommend starting with a '
                "comprehensive business strategy session. This will help us identify the most "
                "impactful digital transformation opportunities for your organization.\n\n"
                "Our strategic approach focuses on:\n"
                "• Understanding your current business challenges\n"
                "• Identifying technology gaps and opportunities\n"
                "• Creating a phased implementation roadmap\n"
                "• Measuring success and ROI\n\n"
                "Let's schedule a strategic consultation to dive deeper into your specific "
                "needs and create a customized roadmap."
            )

        services = "\n".join(f"• {r.title} - {r.description}" for r in recommendations)
        roadmap_text = "\n".join(roadmap)
        return (
            f'Excellent! Based on your needs around "{user_input}", I\'ve identified several '
            "strategic opportunities for your business transformation.\n\n"
            f"🎯 **Strategic Services:**\n{services}\n\n"
            f"{roadmap_text}\n\n"
            "💡 **Strategic Benefits:**\n"
            "• Aligned with your business objectives\n"
            "• Scalable and future-proof solutions\n"
            "• Measurable success metrics\n"
            "• Ongoing optimization and support\n\n"
            "🚀 **Next Steps:**\n"
            "Let's schedule a strategic consultation to create your customized roadmap "
            "and discuss implementation strategies."
        )
