"""
Flattening of Reporting API v4 report blocks into named-field rows.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ga_extractor.domain.extraction import ReportColumnHeaders
from ga_extractor.errors import MalformedResponseError


def read_column_headers(report: Mapping[str, Any]) -> ReportColumnHeaders:
    """
    Read dimension and metric header names from one report block.
    """

    column_header = report.get("columnHeader") or {}
    metric_header = column_header.get("metricHeader") or {}
    entries = metric_header.get("metricHeaderEntries") or []
    metric_names: list[str] = []
    for entry in entries:
        name = entry.get("name") if isinstance(entry, Mapping) else None
        if not name:
            raise MalformedResponseError("Report metric header entry without a name.")
        metric_names.append(name)
    return ReportColumnHeaders(
        dimensions=tuple(column_header.get("dimensions") or ()),
        metrics=tuple(metric_names),
    )


def iter_report_rows(report: Mapping[str, Any]) -> Iterator[tuple[list[Any], list[Any]]]:
    """
    Yield ``(dimension_values, metric_values)`` per row in returned order.

    Only the first date range's metric values are read; requests carry a
    single date range.
    """

    data = report.get("data") or {}
    for row in data.get("rows") or []:
        dimension_values = list(row.get("dimensions") or [])
        date_range_values = row.get("metrics") or []
        metric_values = list(date_range_values[0].get("values") or []) if date_range_values else []
        yield dimension_values, metric_values


def map_row(
    dimension_headers: Sequence[str],
    metric_headers: Sequence[str],
    dimension_values: Sequence[Any],
    metric_values: Sequence[Any],
) -> dict[str, Any]:
    """
    Pair headers with values positionally into one flat mapping.

    Metric values are kept exactly as returned; no numeric coercion.
    """

    if len(dimension_headers) != len(dimension_values):
        raise MalformedResponseError(
            f"Report row has {len(dimension_values)} dimension values "
            f"for {len(dimension_headers)} dimension headers."
        )
    if len(metric_headers) != len(metric_values):
        raise MalformedResponseError(
            f"Report row has {len(metric_values)} metric values "
            f"for {len(metric_headers)} metric headers."
        )

    duplicates = set(dimension_headers) & set(metric_headers)
    if duplicates:
        raise MalformedResponseError(
            f"Report headers name both a dimension and a metric: {', '.join(sorted(duplicates))}."
        )

    row = dict(zip(dimension_headers, dimension_values))
    row.update(zip(metric_headers, metric_values))
    return row
