"""
Shared in-memory fakes for the analytics service.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

import pytest

from ga_extractor.domain.extraction import ExtractionParameters, MetricDescriptor, MetricType


def make_account(properties: Mapping[str, Sequence[tuple[str, str]]], account_id: str = "1") -> dict[str, Any]:
    """
    Account summary with ``{property_name: [(view_id, view_name), ...]}``.
    """

    return {
        "id": account_id,
        "name": f"Account {account_id}",
        "webProperties": [
            {
                "id": f"UA-{account_id}-{index}",
                "name": property_name,
                "profiles": [{"id": view_id, "name": view_name, "type": "WEB"} for view_id, view_name in views],
            }
            for index, (property_name, views) in enumerate(properties.items(), start=1)
        ],
    }


def make_report(
    dimension_headers: Sequence[str],
    metric_headers: Sequence[str],
    rows: Sequence[tuple[Sequence[Any], Sequence[Any]]],
    next_page_token: str | None = None,
) -> dict[str, Any]:
    report: dict[str, Any] = {
        "columnHeader": {
            "dimensions": list(dimension_headers),
            "metricHeader": {
                "metricHeaderEntries": [{"name": name, "type": "INTEGER"} for name in metric_headers],
            },
        },
        "data": {
            "rows": [
                {"dimensions": list(dimensions), "metrics": [{"values": list(metrics)}]}
                for dimensions, metrics in rows
            ],
            "rowCount": len(rows),
        },
    }
    if next_page_token:
        report["nextPageToken"] = next_page_token
    return report


class FakeAnalyticsService:
    """
    Serves a fixed catalog and canned report batches keyed by view id.

    ``responses`` maps a view id to either one ``GetReportsResponse`` body or
    a list of bodies returned for successive calls (continuation pages).
    """

    def __init__(
        self,
        accounts: Sequence[Mapping[str, Any]],
        responses: Mapping[str, Any] | None = None,
        default_response: Mapping[str, Any] | None = None,
    ) -> None:
        self._accounts = list(accounts)
        self._responses = dict(responses or {})
        self._default_response = default_response
        self.catalog_calls = 0
        self.requests: list[dict[str, Any]] = []

    def list_account_summaries(self) -> Iterator[Mapping[str, Any]]:
        self.catalog_calls += 1
        yield from self._accounts

    def batch_get(self, body: Mapping[str, Any]) -> Mapping[str, Any]:
        self.requests.append(dict(body))
        view_id = body["reportRequests"][0]["viewId"]
        response = self._responses.get(view_id, self._default_response)
        if response is None:
            return {"reports": []}
        if isinstance(response, list):
            calls_for_view = sum(1 for request in self.requests if request["reportRequests"][0]["viewId"] == view_id)
            return response[min(calls_for_view, len(response)) - 1]
        return response

    @property
    def requested_view_ids(self) -> list[str]:
        return [request["reportRequests"][0]["viewId"] for request in self.requests]


def default_parameters(**overrides: Any) -> ExtractionParameters:
    values: dict[str, Any] = {
        "dimensions": ("ga:date",),
        "metrics": (
            MetricDescriptor(name="ga:pageviews", type=MetricType.INTEGER),
            MetricDescriptor(name="ga:avgPageLoadTime", type=MetricType.FLOAT),
            MetricDescriptor(name="ga:avgSessionDuration", type=MetricType.TIME),
        ),
        "start_date": "2020-11-01",
        "end_date": "2020-12-15",
    }
    values.update(overrides)
    return ExtractionParameters(**values)


METRIC_HEADERS = ("pageviews", "avgPageLoadTime", "avgSessionDuration")

THREE_ROW_REPORT = make_report(
    ("ga:date",),
    METRIC_HEADERS,
    [
        (["2020-11-11"], [2, 2.2, 2200]),
        (["2020-11-12"], [3, 3.3, 3300]),
        (["2020-11-13"], [5, 5.5, 5500]),
    ],
)


@pytest.fixture()
def parameters() -> ExtractionParameters:
    return default_parameters()


@pytest.fixture()
def single_view_service() -> FakeAnalyticsService:
    """One property with one view and a three-row report."""
    return FakeAnalyticsService(
        accounts=[make_account({"www.example.com": [("1001", "All Data")]})],
        responses={"1001": {"reports": [THREE_ROW_REPORT]}},
    )
