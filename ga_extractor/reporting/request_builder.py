"""
Reporting API v4 request construction.

Builds the date range, dimension and metric sub-structures of a
``ReportRequest`` and the immutable per-run request template from which
one request per view is derived.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ga_extractor.config import REPORT_PAGE_SIZE
from ga_extractor.domain.extraction import ExtractionParameters, MetricDescriptor

METRIC_PREFIX = "ga:"


@dataclass(frozen=True)
class DateRangeSpec:
    start_date: str
    end_date: str

    def to_body(self) -> dict[str, str]:
        return {"startDate": self.start_date, "endDate": self.end_date}


@dataclass(frozen=True)
class DimensionSpec:
    name: str

    def to_body(self) -> dict[str, str]:
        return {"name": self.name}


@dataclass(frozen=True)
class MetricSpec:
    """
    One metric expression with its alias and formatting type.

    The alias is what the Reporting API echoes back as the metric header
    name, so rows are keyed by it.
    """

    expression: str
    alias: str
    formatting_type: str

    def to_body(self) -> dict[str, str]:
        return {
            "expression": self.expression,
            "alias": self.alias,
            "formattingType": self.formatting_type,
        }


def metric_alias(name: str) -> str:
    if name.startswith(METRIC_PREFIX):
        return name[len(METRIC_PREFIX) :]
    return name


def build_date_range(start: str, end: str) -> DateRangeSpec:
    """
    Date strings are passed through; the API rejects malformed dates.
    """

    return DateRangeSpec(start_date=start, end_date=end)


def build_dimension_specs(names: Iterable[str]) -> list[DimensionSpec]:
    return [DimensionSpec(name=name) for name in names]


def build_metric_specs(
    metrics: Iterable[MetricDescriptor | Mapping[str, Any]],
) -> list[MetricSpec]:
    specs: list[MetricSpec] = []
    for metric in metrics:
        if not isinstance(metric, MetricDescriptor):
            metric = MetricDescriptor.from_mapping(metric)
        specs.append(
            MetricSpec(
                expression=metric.name,
                alias=metric_alias(metric.name),
                formatting_type=metric.type.value,
            )
        )
    return specs


@dataclass(frozen=True)
class ReportRequestTemplate:
    """
    Shared request skeleton for one run.

    Only the view id (and, when continuation is enabled, the page token)
    differ between calls; both are set on derived copies.
    """

    date_range: DateRangeSpec
    dimensions: tuple[DimensionSpec, ...]
    metrics: tuple[MetricSpec, ...]
    page_size: int = REPORT_PAGE_SIZE
    include_empty_rows: bool = True
    view_id: str = ""
    page_token: str | None = None

    @classmethod
    def from_parameters(
        cls,
        params: ExtractionParameters,
        *,
        page_size: int = REPORT_PAGE_SIZE,
        include_empty_rows: bool = True,
    ) -> "ReportRequestTemplate":
        return cls(
            date_range=build_date_range(params.start_date or "", params.end_date or ""),
            dimensions=tuple(build_dimension_specs(params.dimensions or ())),
            metrics=tuple(build_metric_specs(params.metrics or ())),
            page_size=page_size,
            include_empty_rows=include_empty_rows,
        )

    def for_view(self, view_id: str) -> "ReportRequestTemplate":
        return replace(self, view_id=view_id, page_token=None)

    def with_page_token(self, page_token: str | None) -> "ReportRequestTemplate":
        return replace(self, page_token=page_token)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "viewId": self.view_id,
            "dateRanges": [self.date_range.to_body()],
            "dimensions": [dimension.to_body() for dimension in self.dimensions],
            "dimensionFilterClauses": [],
            "metrics": [metric.to_body() for metric in self.metrics],
            "pageSize": self.page_size,
            "includeEmptyRows": self.include_empty_rows,
        }
        if self.page_token:
            body["pageToken"] = self.page_token
        return body

    def batch_body(self) -> dict[str, Any]:
        """
        Wrap the request in a ``GetReportsRequest`` body.
        """

        return {"reportRequests": [self.to_body()]}
