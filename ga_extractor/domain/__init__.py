"""
ga_extractor/domain package marker.
"""

from ga_extractor.domain.extraction import (
    MAX_DIMENSIONS,
    MAX_METRICS,
    CatalogEntry,
    ExtractionParameters,
    MetricDescriptor,
    MetricType,
    OutputRow,
    ReportColumnHeaders,
)

__all__ = [
    "MAX_DIMENSIONS",
    "MAX_METRICS",
    "CatalogEntry",
    "ExtractionParameters",
    "MetricDescriptor",
    "MetricType",
    "OutputRow",
    "ReportColumnHeaders",
]
