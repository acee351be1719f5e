"""
ga_extractor/services package marker.
"""

from ga_extractor.services.extraction_service import ExtractionService, get_extraction_service

__all__ = ["ExtractionService", "get_extraction_service"]
