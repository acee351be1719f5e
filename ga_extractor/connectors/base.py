"""
ga_extractor/connectors/base.py

Shared HTTP mechanics for Google Analytics API connectors.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import requests

from ga_extractor.config import GoogleAnalyticsHTTPSettings
from ga_extractor.errors import TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class AnalyticsHTTPConnector:
    """
    Bearer-authenticated JSON transport with retry and exponential backoff.
    """

    source: str

    def __init__(
        self,
        *,
        source: str,
        http_settings: GoogleAnalyticsHTTPSettings,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.source = source
        self._session = session or requests.Session()
        self._timeout_seconds = http_settings.timeout_seconds
        self._max_retries = http_settings.max_retries
        self._backoff_initial_seconds = http_settings.backoff_initial_seconds
        self._backoff_multiplier = http_settings.backoff_multiplier
        self._sleep = sleep

        headers = {
            "Accept": "application/json",
            "User-Agent": http_settings.application_name,
        }
        if http_settings.access_token:
            headers["Authorization"] = f"Bearer {http_settings.access_token}"
        self._session.headers.update(headers)

    def _request_json(
        self,
        *,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Execute an HTTP request and return parsed JSON with retry support.
        """

        response = self._request(method=method, url=url, params=params, json_body=json_body)
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"{self.source}: response was not valid JSON.") from exc

    def _request(
        self,
        *,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> requests.Response:
        """
        Execute an HTTP request with exponential backoff on transient failures.
        """

        last_error: Exception | None = None
        for attempt in range(self._max_retries + 1):
            try:
                response = self._session.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json_body,
                    timeout=self._timeout_seconds,
                )
                if response.status_code in RETRYABLE_STATUS_CODES:
                    raise requests.HTTPError(
                        f"Retryable HTTP status code: {response.status_code}",
                        response=response,
                    )
                response.raise_for_status()
                return response
            except requests.HTTPError as exc:
                last_error = exc
                status_code = exc.response.status_code if exc.response is not None else None
                if status_code not in RETRYABLE_STATUS_CODES:
                    logger.error(
                        "Analytics request failed source=%s status=%s url=%s error=%s",
                        self.source,
                        status_code,
                        url,
                        exc,
                    )
                    raise TransportError(
                        f"{self.source}: non-retryable request failure (status={status_code})."
                    ) from exc
            except (requests.Timeout, requests.ConnectionError) as exc:
                last_error = exc

            if attempt >= self._max_retries:
                break

            backoff_seconds = self._backoff_initial_seconds * (self._backoff_multiplier**attempt)
            logger.warning(
                "Analytics request retry source=%s attempt=%s/%s wait_seconds=%.2f url=%s",
                self.source,
                attempt + 1,
                self._max_retries,
                backoff_seconds,
                url,
            )
            self._sleep(backoff_seconds)

        logger.error(
            "Analytics request exhausted retries source=%s url=%s error=%s",
            self.source,
            url,
            last_error,
        )
        raise TransportError(f"{self.source}: request failed after retries.") from last_error
