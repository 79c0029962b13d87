"""Structured logging for the advisor."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional


def setup_logging(
    name: Optional[str] = None,
    debug: bool = False,
    enabled: bool = True,
) -> logging.Logger:
    """
    Configure a logger with a stderr handler.

    Args:
        name: Logger name (default: the package logger)
        debug: Log at DEBUG instead of INFO
        enabled: When False, silence everything below CRITICAL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or "strategy_advisor")

    if not enabled:
        logger.setLevel(logging.CRITICAL)
        return logger

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    return logger


class AdvisorLogger:
    """Structured JSON logger for advisor events."""

    def __init__(self, name: str = "strategy_advisor.events"):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def catalog_loaded(self, service_count: int):
        """Log a successful catalog load."""
        self._log(logging.INFO, "catalog_loaded", service_count=service_count)

    def catalog_failed(self, message: str):
        """Log a catalog load failure (the catalog degrades to empty)."""
        self._log(logging.ERROR, "catalog_failed", message=message)

    def analysis_started(self, provider: str, input_length: int):
        """Log the start of an analysis call."""
        self._log(
            logging.INFO,
            "analysis_started",
            provider=provider,
            input_length=input_length
        )

    def analysis_complete(
        self,
        provider: str,
        duration_seconds: float,
        confidence: float,
        recommendation_count: int,
    ):
        """Log analysis completion."""
        self._log(
            logging.INFO,
            "analysis_complete",
            provider=provider,
            duration_seconds=round(duration_seconds, 2),
            confidence=confidence,
            recommendation_count=recommendation_count
        )

    def analysis_failed(self, provider: str, error_type: str, message: str):
        """Log a failed analysis call."""
        self._log(
            logging.ERROR,
            "analysis_failed",
            provider=provider,
            error_type=error_type,
            message=message
        )

    def provider_switched(self, from_provider: str, to_provider: str):
        """Log a provider switch."""
        self._log(
            logging.INFO,
            "provider_switched",
            from_provider=from_provider,
            to_provider=to_provider
        )

    def response_degraded(self, provider: str, reason: str):
        """Log a reply that could not be parsed and fell back to plain text."""
        self._log(
            logging.WARNING,
            "response_degraded",
            provider=provider,
            reason=reason
        )
