"""
ga_extractor/connectors package marker.
"""

from ga_extractor.connectors.base import AnalyticsHTTPConnector
from ga_extractor.connectors.google_analytics import GoogleAnalyticsClient

__all__ = [
    "AnalyticsHTTPConnector",
    "GoogleAnalyticsClient",
]
