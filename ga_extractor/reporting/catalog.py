"""
Account catalog traversal with property and view inclusion filters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import AbstractSet, Any

from ga_extractor.domain.extraction import CatalogEntry
from ga_extractor.reporting.base import AnalyticsService

logger = logging.getLogger(__name__)


def is_wanted(name: str, wanted: AbstractSet[str]) -> bool:
    """
    Exact, case-sensitive match; an empty filter matches everything.
    """

    return not wanted or name in wanted


class CatalogWalker:
    """
    Walks accounts, then web properties, then views in catalog order.

    Property filtering happens first: a property excluded by name is never
    descended into, so none of its views can be selected through the view
    filter.
    """

    def __init__(self, service: AnalyticsService) -> None:
        self._service = service

    def list_views(
        self,
        properties: AbstractSet[str] = frozenset(),
        views: AbstractSet[str] = frozenset(),
    ) -> Iterator[CatalogEntry]:
        for account in self._service.list_account_summaries():
            for web_property in _items(account, "webProperties"):
                property_name = str(web_property.get("name", ""))
                if not is_wanted(property_name, properties):
                    logger.debug("Skipping property name=%s", property_name)
                    continue

                for profile in _items(web_property, "profiles"):
                    view_name = str(profile.get("name", ""))
                    if not is_wanted(view_name, views):
                        continue
                    view_id = str(profile.get("id") or "").strip()
                    if not view_id:
                        logger.warning(
                            "Skipping view without id property=%s view=%s",
                            property_name,
                            view_name,
                        )
                        continue
                    yield CatalogEntry(
                        property_name=property_name,
                        view_id=view_id,
                        view_name=view_name,
                    )


def _items(node: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = node.get(key) or []
    return [item for item in value if isinstance(item, Mapping)]
