"""
tests/test_catalog_walker.py

Catalog traversal order and property/view inclusion filters.
"""

from __future__ import annotations

import pytest

from conftest import FakeAnalyticsService, make_account
from ga_extractor.domain.extraction import CatalogEntry
from ga_extractor.errors import TransportError
from ga_extractor.reporting.catalog import CatalogWalker, is_wanted


@pytest.fixture()
def walker() -> CatalogWalker:
    service = FakeAnalyticsService(
        accounts=[
            make_account(
                {
                    "www.example.com": [("1001", "All Data")],
                    "shop.example.com": [("2001", "All Data"), ("2002", "Checkout")],
                },
                account_id="1",
            ),
        ]
    )
    return CatalogWalker(service)


def test_empty_filters_yield_every_view_in_catalog_order(walker: CatalogWalker) -> None:
    assert list(walker.list_views()) == [
        CatalogEntry(property_name="www.example.com", view_id="1001", view_name="All Data"),
        CatalogEntry(property_name="shop.example.com", view_id="2001", view_name="All Data"),
        CatalogEntry(property_name="shop.example.com", view_id="2002", view_name="Checkout"),
    ]


def test_property_filter_selects_only_matching_property(walker: CatalogWalker) -> None:
    entries = list(walker.list_views(properties={"shop.example.com"}))

    assert [entry.view_id for entry in entries] == ["2001", "2002"]


def test_view_filter_applies_per_view(walker: CatalogWalker) -> None:
    entries = list(walker.list_views(views={"Checkout"}))

    assert entries == [CatalogEntry(property_name="shop.example.com", view_id="2002", view_name="Checkout")]


def test_excluded_property_hides_explicitly_named_view(walker: CatalogWalker) -> None:
    entries = list(walker.list_views(properties={"www.example.com"}, views={"Checkout"}))

    assert entries == []


def test_unknown_view_yields_nothing(walker: CatalogWalker) -> None:
    assert list(walker.list_views(views={"No Such View"})) == []


def test_matching_is_case_sensitive(walker: CatalogWalker) -> None:
    assert list(walker.list_views(properties={"WWW.EXAMPLE.COM"})) == []


def test_walks_accounts_in_order() -> None:
    service = FakeAnalyticsService(
        accounts=[
            make_account({"b.example.com": [("3", "B")]}, account_id="2"),
            make_account({"a.example.com": [("1", "A")]}, account_id="1"),
        ]
    )

    assert [entry.view_id for entry in CatalogWalker(service).list_views()] == ["3", "1"]


def test_properties_without_views_are_skipped() -> None:
    account = make_account({"empty.example.com": []})
    account["webProperties"].append({"id": "UA-1-9", "name": "bare.example.com"})
    service = FakeAnalyticsService(accounts=[account])

    assert list(CatalogWalker(service).list_views()) == []


def test_views_without_id_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    account = make_account({"www.example.com": [("1001", "All Data")]})
    profiles = account["webProperties"][0]["profiles"]
    profiles.insert(0, {"name": "No Id", "type": "WEB"})
    profiles.append({"id": "  ", "name": "Blank Id", "type": "WEB"})
    service = FakeAnalyticsService(accounts=[account])

    with caplog.at_level("WARNING", logger="ga_extractor.reporting.catalog"):
        entries = list(CatalogWalker(service).list_views())

    assert [entry.view_id for entry in entries] == ["1001"]
    assert "No Id" in caplog.text
    assert "Blank Id" in caplog.text


def test_transport_failure_propagates() -> None:
    class FailingService(FakeAnalyticsService):
        def list_account_summaries(self):
            raise TransportError("catalog unavailable")

    with pytest.raises(TransportError):
        list(CatalogWalker(FailingService(accounts=[])).list_views())


@pytest.mark.parametrize(
    "name, wanted, expected",
    [
        ("All Data", set(), True),
        ("All Data", {"All Data"}, True),
        ("All Data", {"all data"}, False),
        ("All Data", {"All*"}, False),
    ],
)
def test_is_wanted(name: str, wanted: set[str], expected: bool) -> None:
    assert is_wanted(name, wanted) is expected
