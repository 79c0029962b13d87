"""Phased roadmap blocks shared by the rule-based provider and the normalizer.

A roadmap is a flat list of lines: section headers start with an emoji
marker, bullets start with "• ", and "" is a blank separator line. The
renderer relies on this layout, so lines are never stripped.
"""

DISCOVERY = [
    "📋 **Phase 1: Discovery & Strategy**",
    "• Comprehensive needs assessment and business analysis",
    "• Strategic planning and technology recommendations",
    "• Project scope definition and success metrics",
]

DESIGN = [
    "🎨 **Phase 2: Design & Architecture**",
    "• User experience research and wireframing",
    "• Visual design and brand integration",
    "• Technical architecture planning",
]

DEVELOPMENT = [
    "⚙️ **Phase 3: Development & Implementation**",
    "• Agile development with regular check-ins",
    "• Quality assurance and testing",
    "• Performance optimization and security",
]

LAUNCH = [
    "🚀 **Phase 4: Launch & Growth**",
    "• Deployment and go-live support",
    "• Training and documentation",
    "• Ongoing optimization and growth strategies",
]


def build_roadmap(include_design: bool = True, include_development: bool = True) -> list[str]:
    """Assemble the phase blocks, separated by blank lines."""
    roadmap = list(DISCOVERY)
    if include_design:
        roadmap.append("")
        roadmap.extend(DESIGN)
    if include_development:
        roadmap.append("")
        roadmap.extend(DEVELOPMENT)
    roadmap.append("")
    roadmap.extend(LAUNCH)
    return roadmap


def default_roadmap() -> list[str]:
    """Full four-phase roadmap used when a reply carries none."""
    return build_roadmap(include_design=True, include_development=True)
