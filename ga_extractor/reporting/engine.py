"""
Report extraction engine.

Validates parameters, builds the per-run request template, walks the
account catalog and lazily yields one flattened row per report row.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import date
from typing import Any

from ga_extractor.config import ExtractionSettings
from ga_extractor.domain.extraction import CatalogEntry, ExtractionParameters, OutputRow
from ga_extractor.logging_utils import log_event
from ga_extractor.reporting.base import AnalyticsService
from ga_extractor.reporting.catalog import CatalogWalker
from ga_extractor.reporting.request_builder import ReportRequestTemplate
from ga_extractor.reporting.row_mapper import iter_report_rows, map_row, read_column_headers
from ga_extractor.reporting.throttle import Delay, RequestThrottle, SleepDelay
from ga_extractor.validators.extraction_validator import ExtractionParametersValidator

logger = logging.getLogger(__name__)

PROPERTY_FIELD = "property"
SUMMARY_FIELD = "summary"


class ExtractionEngine:
    """
    Single-threaded, pull-based extraction over every selected view.

    Each call to :meth:`extract` owns a fresh throttle and request template,
    so independent runs never share mutable state. Nothing is fetched for a
    view until the consumer has drained the rows of the previous one.
    """

    def __init__(
        self,
        *,
        service: AnalyticsService,
        settings: ExtractionSettings | None = None,
        delay: Delay | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._service = service
        self._settings = settings or ExtractionSettings()
        self._delay = delay
        self._validator = ExtractionParametersValidator(clock=clock)

    def validate(self, params: ExtractionParameters) -> ExtractionParameters:
        return self._validator.validate(params)

    def extract(self, params: ExtractionParameters) -> Iterator[OutputRow]:
        """
        Validate eagerly, then return a lazy iterator of output rows.
        """

        resolved = self.validate(params)
        template = ReportRequestTemplate.from_parameters(
            resolved,
            page_size=self._settings.report_page_size,
            include_empty_rows=self._settings.include_empty_rows,
        )
        throttle = RequestThrottle(
            threshold=self._settings.throttle_threshold,
            delay=self._delay or self._default_delay(),
        )
        return self._iter_rows(resolved, template, throttle)

    def _iter_rows(
        self,
        params: ExtractionParameters,
        template: ReportRequestTemplate,
        throttle: RequestThrottle,
    ) -> Iterator[OutputRow]:
        walker = CatalogWalker(self._service)
        views_processed = 0
        rows_emitted = 0

        for entry in walker.list_views(params.properties, params.views):
            log_event(
                logger,
                logging.INFO,
                "view_extraction_started",
                property=entry.property_name,
                view_id=entry.view_id,
                view=entry.view_name,
            )
            view_rows = 0
            for row in self._iter_view_rows(entry, template.for_view(entry.view_id), throttle):
                view_rows += 1
                yield row

            views_processed += 1
            rows_emitted += view_rows
            log_event(
                logger,
                logging.INFO,
                "view_extraction_completed",
                property=entry.property_name,
                view_id=entry.view_id,
                view=entry.view_name,
                rows=view_rows,
            )

        log_event(
            logger,
            logging.INFO,
            "extraction_completed",
            views=views_processed,
            rows=rows_emitted,
            requests=throttle.request_count,
        )

    def _iter_view_rows(
        self,
        entry: CatalogEntry,
        request: ReportRequestTemplate,
        throttle: RequestThrottle,
    ) -> Iterator[OutputRow]:
        for report in self._iter_reports(request, throttle):
            headers = read_column_headers(report)
            for dimension_values, metric_values in iter_report_rows(report):
                row = map_row(headers.dimensions, headers.metrics, dimension_values, metric_values)
                row[PROPERTY_FIELD] = entry.property_name
                row[SUMMARY_FIELD] = entry.view_name
                yield row

    def _iter_reports(
        self,
        request: ReportRequestTemplate,
        throttle: RequestThrottle,
    ) -> Iterator[Mapping[str, Any]]:
        """
        Yield report blocks for one view in returned order.

        Only the first page is requested unless ``follow_next_page`` is set.
        """

        while True:
            body = request.batch_body()
            throttle.before_request()
            response = self._service.batch_get(body)
            reports = list(response.get("reports") or [])
            if not reports:
                log_event(
                    logger,
                    logging.WARNING,
                    "report_batch_empty",
                    view_id=request.view_id,
                    request=body,
                )
                return

            yield from reports

            next_page_token = reports[-1].get("nextPageToken")
            if not self._settings.follow_next_page or not next_page_token:
                return
            request = request.with_page_token(next_page_token)

    def _default_delay(self) -> Delay:
        return SleepDelay(
            seconds=self._settings.throttle_delay_seconds,
            jitter_seconds=self._settings.throttle_jitter_seconds,
        )
