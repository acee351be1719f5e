"""
ga_extractor/config.py

Environment-driven settings for the Google Analytics extractor.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from ga_extractor.env import load_env_files

DEFAULT_MANAGEMENT_BASE_URL = "https://www.googleapis.com/analytics/v3"
DEFAULT_REPORTING_BASE_URL = "https://analyticsreporting.googleapis.com/v4"

# Reporting API v4 rejects pageSize above 100,000; the extractor asks for 1,000.
REPORT_PAGE_SIZE = 1000
MAX_REPORT_PAGE_SIZE = 100_000

# "Requests per 100 seconds per user" defaults to 100 in the API console.
THROTTLE_REQUEST_THRESHOLD = 100


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class GoogleAnalyticsHTTPSettings:
    """
    Transport settings for the Management and Reporting APIs.
    """

    access_token: str | None = None
    management_base_url: str = DEFAULT_MANAGEMENT_BASE_URL
    reporting_base_url: str = DEFAULT_REPORTING_BASE_URL
    application_name: str = "ga-extractor"
    timeout_seconds: float = 15.0
    max_retries: int = 5
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0
    catalog_page_size: int = 1000


@dataclass(frozen=True)
class ExtractionSettings:
    """
    Per-run behavior of the extraction engine.
    """

    report_page_size: int = REPORT_PAGE_SIZE
    include_empty_rows: bool = True
    throttle_threshold: int = THROTTLE_REQUEST_THRESHOLD
    throttle_delay_seconds: float = 1.0
    throttle_jitter_seconds: float = 0.5
    follow_next_page: bool = False


@lru_cache(maxsize=1)
def get_google_analytics_http_settings() -> GoogleAnalyticsHTTPSettings:
    """
    Return cached transport settings from environment variables.
    """

    return GoogleAnalyticsHTTPSettings(
        access_token=_get_optional_str_env("GA_ACCESS_TOKEN"),
        management_base_url=_get_str_env("GA_MANAGEMENT_BASE_URL", DEFAULT_MANAGEMENT_BASE_URL).rstrip("/"),
        reporting_base_url=_get_str_env("GA_REPORTING_BASE_URL", DEFAULT_REPORTING_BASE_URL).rstrip("/"),
        application_name=_get_str_env("GA_APPLICATION_NAME", "ga-extractor"),
        timeout_seconds=max(1.0, _get_float_env("GA_HTTP_TIMEOUT_SECONDS", 15.0)),
        max_retries=max(0, _get_int_env("GA_HTTP_MAX_RETRIES", 5)),
        backoff_initial_seconds=max(0.1, _get_float_env("GA_HTTP_BACKOFF_INITIAL_SECONDS", 0.5)),
        backoff_multiplier=max(1.0, _get_float_env("GA_HTTP_BACKOFF_MULTIPLIER", 2.0)),
        catalog_page_size=min(1000, max(1, _get_int_env("GA_CATALOG_PAGE_SIZE", 1000))),
    )


@lru_cache(maxsize=1)
def get_extraction_settings() -> ExtractionSettings:
    """
    Return cached extraction engine settings from environment variables.
    """

    return ExtractionSettings(
        report_page_size=min(
            MAX_REPORT_PAGE_SIZE,
            max(1, _get_int_env("GA_REPORT_PAGE_SIZE", REPORT_PAGE_SIZE)),
        ),
        include_empty_rows=_get_bool_env("GA_INCLUDE_EMPTY_ROWS", True),
        throttle_threshold=max(0, _get_int_env("GA_THROTTLE_THRESHOLD", THROTTLE_REQUEST_THRESHOLD)),
        throttle_delay_seconds=max(0.0, _get_float_env("GA_THROTTLE_DELAY_SECONDS", 1.0)),
        throttle_jitter_seconds=max(0.0, _get_float_env("GA_THROTTLE_JITTER_SECONDS", 0.5)),
        follow_next_page=_get_bool_env("GA_FOLLOW_NEXT_PAGE", False),
    )
