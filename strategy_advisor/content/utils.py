"""Content helpers."""

from typing import Any, Optional

from strategy_advisor.config import AdvisorConfig

PLACEHOLDER_PROJECT_ID = "your-project-id"


def is_sanity_configured(config: Optional[AdvisorConfig] = None) -> bool:
    """True when a real Sanity project and dataset are configured."""
    config = config or AdvisorConfig.from_env()
    project_id = config.sanity_project_id
    return bool(project_id and config.sanity_dataset and project_id != PLACEHOLDER_PROJECT_ID)


def format_block_content(blocks: Any) -> str:
    """Flatten portable-text blocks into plain text, one block per line."""
    if not blocks or not isinstance(blocks, list):
        return ""

    lines = []
    for block in blocks:
        if isinstance(block, dict) and block.get("_type") == "block" and block.get("children"):
            lines.append("".join(
                child.get("text", "") for child in block["children"] if isinstance(child, dict)
            ))
        else:
            lines.append("")
    return "\n".join(lines).strip()
