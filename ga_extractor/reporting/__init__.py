"""
Report extraction core: request building, throttling, catalog walking,
row mapping and the engine that ties them together.
"""

from ga_extractor.reporting.base import AnalyticsService
from ga_extractor.reporting.catalog import CatalogWalker
from ga_extractor.reporting.engine import ExtractionEngine
from ga_extractor.reporting.request_builder import (
    ReportRequestTemplate,
    build_date_range,
    build_dimension_specs,
    build_metric_specs,
)
from ga_extractor.reporting.row_mapper import map_row
from ga_extractor.reporting.throttle import CountingDelay, NullDelay, RequestThrottle, SleepDelay

__all__ = [
    "AnalyticsService",
    "CatalogWalker",
    "CountingDelay",
    "ExtractionEngine",
    "NullDelay",
    "ReportRequestTemplate",
    "RequestThrottle",
    "SleepDelay",
    "build_date_range",
    "build_dimension_specs",
    "build_metric_specs",
    "map_row",
]
