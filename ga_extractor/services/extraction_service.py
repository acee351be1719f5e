"""
ga_extractor/services/extraction_service.py

Entry point used by pipelines to run one report extraction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from datetime import date
from functools import lru_cache
from typing import Any

from ga_extractor.config import (
    ExtractionSettings,
    get_extraction_settings,
    get_google_analytics_http_settings,
)
from ga_extractor.connectors import GoogleAnalyticsClient
from ga_extractor.domain.extraction import OutputRow
from ga_extractor.reporting.base import AnalyticsService
from ga_extractor.reporting.engine import ExtractionEngine
from ga_extractor.reporting.throttle import Delay
from ga_extractor.schemas.extraction_options import ExtractionOptions, parse_extraction_options


class ExtractionService:
    """
    Turns pipeline options into a lazy stream of report rows.
    """

    def __init__(
        self,
        *,
        service: AnalyticsService,
        settings: ExtractionSettings | None = None,
        delay: Delay | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._engine = ExtractionEngine(
            service=service,
            settings=settings or get_extraction_settings(),
            delay=delay,
            clock=clock,
        )

    def extract(self, options: ExtractionOptions | Mapping[str, Any]) -> Iterator[OutputRow]:
        """
        Validate options and return the row iterator.

        Raises ``ExtractionValidationError`` before any network call when the
        options are invalid.
        """

        if not isinstance(options, ExtractionOptions):
            options = parse_extraction_options(options)
        return self._engine.extract(options.to_parameters())


@lru_cache(maxsize=1)
def get_extraction_service() -> ExtractionService:
    """
    Build and cache the extraction service wired to the HTTP client.
    """

    client = GoogleAnalyticsClient(http_settings=get_google_analytics_http_settings())
    return ExtractionService(service=client, settings=get_extraction_settings())
