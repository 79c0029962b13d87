"""Guided advisor flow: a fixed sequence of questions, then one analysis."""

from dataclasses import dataclass, field
from typing import Optional

from strategy_advisor.agents.advisor_types import AdvisorResponse

STEPS = ["welcome", "needs", "industry", "budget", "timeline", "results"]

INDUSTRIES = [
    "Restaurant & Hospitality",
    "E-commerce & Retail",
    "Healthcare & Wellness",
    "Professional Services",
    "Technology & SaaS",
    "Education & Training",
    "Real Estate",
    "Manufacturing",
    "Other",
]

BUDGET_RANGES = [
    "Under $5,000",
    "$5,000 - $15,000",
    "$15,000 - $50,000",
    "$50,000 - $100,000",
    "$100,000+",
    "Not sure yet",
]

TIMELINE_OPTIONS = [
    "ASAP (1-2 weeks)",
    "1-2 months",
    "3-6 months",
    "6+ months",
    "Not sure yet",
]


@dataclass
class AdvisorFlow:
    """Answers captured so far and the step the visitor is on."""

    current_step: str = "welcome"
    needs: str = ""
    industry: str = ""
    budget: str = ""
    timeline: str = ""
    results: Optional[AdvisorResponse] = field(default=None, repr=False)

    def next_step(self) -> str:
        index = STEPS.index(self.current_step)
        if index < len(STEPS) - 1:
            self.current_step = STEPS[index + 1]
        return self.current_step

    def prev_step(self) -> str:
        index = STEPS.index(self.current_step)
        if index > 0:
            self.current_step = STEPS[index - 1]
        return self.current_step

    @property
    def progress(self) -> float:
        """Percent of the flow completed, counting the current step."""
        return (STEPS.index(self.current_step) + 1) / len(STEPS) * 100

    def description(self) -> str:
        """The single line of text sent to the advisor."""
        return (
            f"Industry: {self.industry}. Budget: {self.budget}. "
            f"Timeline: {self.timeline}. Needs: {self.needs}"
        )

    def submit(self, advisor) -> AdvisorResponse:
        """Run the analysis and move to the results step. Advisor errors propagate."""
        self.results = advisor.analyze_need(self.description())
        self.current_step = "results"
        return self.results

    def reset(self) -> None:
        self.current_step = "welcome"
        self.needs = ""
        self.industry = ""
        self.budget = ""
        self.timeline = ""
        self.results = None
