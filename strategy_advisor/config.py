"""Configuration for the advisor and its content store."""

import os
from dataclasses import dataclass
from typing import Optional


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on missing or bad values."""
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AdvisorConfig:
    """Configuration for the advisor."""

    # Content store (Sanity)
    sanity_project_id: Optional[str] = None
    sanity_dataset: str = "production"
    sanity_api_version: str = "2024-01-01"
    sanity_token: Optional[str] = None
    sanity_use_cdn: bool = False

    # Remote calls
    request_timeout: float = 60.0  # seconds

    # Rule-based provider latency emulation
    mock_delay: float = 0.0  # seconds

    # OpenRouter attribution headers
    site_url: str = "http://localhost:5173"
    site_title: str = "Strategic Business Advisor"

    # Logging
    debug: bool = False
    enable_logging: bool = True

    @classmethod
    def from_env(cls) -> "AdvisorConfig":
        """Create configuration from environment variables."""
        return cls(
            sanity_project_id=os.environ.get("SANITY_PROJECT_ID") or None,
            sanity_dataset=os.environ.get("SANITY_DATASET", "production"),
            sanity_api_version=os.environ.get("SANITY_API_VERSION", "2024-01-01"),
            sanity_token=os.environ.get("SANITY_TOKEN") or None,
            sanity_use_cdn=_env_bool("SANITY_USE_CDN", False),
            request_timeout=_env_float("ADVISOR_REQUEST_TIMEOUT_SECONDS", 60.0),
            mock_delay=_env_float("ADVISOR_MOCK_DELAY_SECONDS", 0.0),
            site_url=os.environ.get("ADVISOR_SITE_URL", "http://localhost:5173"),
            site_title=os.environ.get("ADVISOR_SITE_TITLE", "Strategic Business Advisor"),
            debug=_env_bool("DEBUG", False),
            enable_logging=_env_bool("ENABLE_LOGGING", True),
        )
