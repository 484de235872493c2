"""Configuration management for the finance monitor.

This module centralizes all configuration values including the backend
location, request timeouts and display defaults, with environment
variable overrides.
"""

from __future__ import annotations

import os

# Backend location.  The REST routes live under ``<base>/api``.
API_URL = os.getenv("FINMON_API_URL", "http://localhost:3001").rstrip("/")
API_TIMEOUT = float(os.getenv("FINMON_API_TIMEOUT", "30"))

# Logging
LOG_LEVEL = os.getenv("FINMON_LOG_LEVEL", "INFO")

# Seconds a cached dashboard load stays valid
CACHE_TTL = int(os.getenv("FINMON_CACHE_TTL", "15"))

# Number of months offered by the month pickers
MONTH_OPTIONS = int(os.getenv("FINMON_MONTH_OPTIONS", "12"))

# Periods offered by the monthly trends chart ("all" sends no limit)
TREND_PERIODS = ["3", "6", "12", "all"]
DEFAULT_TREND_PERIOD = "6"


def get_api_base_url() -> str:
    """Get the REST API root (backend URL plus the ``/api`` prefix)."""
    return f"{API_URL}/api"


def get_api_timeout() -> float:
    """Get the per-request timeout in seconds."""
    return API_TIMEOUT
