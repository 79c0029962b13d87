"""Strategy Advisor - pluggable business advisor for the marketing site."""

__version__ = "0.3.0"
