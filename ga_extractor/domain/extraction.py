"""
ga_extractor/domain/extraction.py

Domain models for one report extraction run.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping

MAX_DIMENSIONS = 7
MAX_METRICS = 10

OutputRow = dict[str, Any]


class MetricType(str, Enum):
    """
    Formatting types accepted by the Reporting API for metric expressions.
    """

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    TIME = "TIME"
    CURRENCY = "CURRENCY"
    PERCENT = "PERCENT"


@dataclass(frozen=True)
class MetricDescriptor:
    """
    One requested metric and its declared formatting type.
    """

    name: str
    type: MetricType

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "MetricDescriptor":
        return cls(name=str(raw["name"]), type=MetricType(str(raw["type"]).upper()))


@dataclass(frozen=True)
class ExtractionParameters:
    """
    Caller input for one extraction run.

    ``end_date`` may be left empty; validation resolves it to yesterday.
    Empty ``properties``/``views`` sets disable the corresponding filter.
    """

    dimensions: tuple[str, ...] | None
    metrics: tuple[MetricDescriptor, ...] | None
    start_date: str | None
    end_date: str | None = None
    properties: frozenset[str] = field(default_factory=frozenset)
    views: frozenset[str] = field(default_factory=frozenset)

    def with_end_date(self, end_date: str) -> "ExtractionParameters":
        return replace(self, end_date=end_date)


@dataclass(frozen=True)
class CatalogEntry:
    """
    One view discovered while walking the account catalog.
    """

    property_name: str
    view_id: str
    view_name: str


@dataclass(frozen=True)
class ReportColumnHeaders:
    """
    Column headers of one returned report block.
    """

    dimensions: tuple[str, ...]
    metrics: tuple[str, ...]
