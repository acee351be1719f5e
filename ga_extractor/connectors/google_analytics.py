"""
ga_extractor/connectors/google_analytics.py

Google Analytics connector over the Management API v3 (account catalog)
and the Reporting API v4 (report batches).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Mapping
from typing import Any

import requests

from ga_extractor.config import GoogleAnalyticsHTTPSettings
from ga_extractor.connectors.base import AnalyticsHTTPConnector
from ga_extractor.errors import TransportError

logger = logging.getLogger(__name__)


class GoogleAnalyticsClient(AnalyticsHTTPConnector):
    """
    Transport implementing the ``AnalyticsService`` interface.
    """

    def __init__(
        self,
        *,
        http_settings: GoogleAnalyticsHTTPSettings,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(
            source="google_analytics",
            http_settings=http_settings,
            session=session,
            sleep=sleep,
        )
        self._management_base_url = http_settings.management_base_url.rstrip("/")
        self._reporting_base_url = http_settings.reporting_base_url.rstrip("/")
        self._catalog_page_size = max(1, http_settings.catalog_page_size)

    def list_account_summaries(self) -> Iterator[Mapping[str, Any]]:
        """
        Yield every account summary visible to the credentials, page by page.
        """

        url = f"{self._management_base_url}/management/accountSummaries"
        start_index = 1
        while True:
            payload = self._request_json(
                method="GET",
                url=url,
                params={"max-results": self._catalog_page_size, "start-index": start_index},
            )
            if not isinstance(payload, Mapping):
                raise TransportError(f"{self.source}: account summaries response was not an object.")

            items = payload.get("items") or []
            logger.debug(
                "Fetched account summaries start_index=%s count=%s total=%s",
                start_index,
                len(items),
                payload.get("totalResults"),
            )
            yield from items

            if not items or not payload.get("nextLink"):
                return
            start_index += len(items)

    def batch_get(self, body: Mapping[str, Any]) -> Mapping[str, Any]:
        payload = self._request_json(
            method="POST",
            url=f"{self._reporting_base_url}/reports:batchGet",
            json_body=dict(body),
        )
        if not isinstance(payload, Mapping):
            raise TransportError(f"{self.source}: reports response was not an object.")
        return payload
