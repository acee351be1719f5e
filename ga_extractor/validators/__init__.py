"""
ga_extractor/validators package marker.
"""

from ga_extractor.validators.extraction_validator import ExtractionParametersValidator, yesterday

__all__ = ["ExtractionParametersValidator", "yesterday"]
