"""
ga_extractor/schemas package marker.
"""

from ga_extractor.schemas.extraction_options import ExtractionOptions, MetricOption, parse_extraction_options

__all__ = ["ExtractionOptions", "MetricOption", "parse_extraction_options"]
