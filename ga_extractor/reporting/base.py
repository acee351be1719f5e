"""
Collaborator interface consumed by the extraction core.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol


class AnalyticsService(Protocol):
    """
    Authenticated handle on the Management and Reporting APIs.
    """

    def list_account_summaries(self) -> Iterable[Mapping[str, Any]]:
        """
        Yield account summaries, each carrying ``webProperties[].profiles[]``.
        """
        ...

    def batch_get(self, body: Mapping[str, Any]) -> Mapping[str, Any]:
        """
        Run a ``reports:batchGet`` call and return the response body.
        """
        ...
