"""
ga_extractor/schemas/extraction_options.py

Configuration surface accepted from the surrounding pipeline.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ga_extractor.domain.extraction import ExtractionParameters, MetricDescriptor, MetricType
from ga_extractor.errors import ExtractionValidationError, ValidationErrorDetail


class MetricOption(BaseModel):
    """
    One ``{"name": ..., "type": ...}`` metric entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    type: MetricType

    @field_validator("type", mode="before")
    @classmethod
    def _upper_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ExtractionOptions(BaseModel):
    """
    Recognized options: startDate, endDate, views, properties, dimensions, metrics.

    Count limits and the required start date are enforced by the extraction
    validator so every caller gets the same error codes.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    views: list[str] = Field(default_factory=list)
    properties: list[str] = Field(default_factory=list)
    dimensions: list[str] | None = None
    metrics: list[MetricOption] | None = None

    @field_validator("views", "properties", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date_to_string(cls, value: Any) -> Any:
        if isinstance(value, date):
            return value.isoformat()
        return value

    def to_parameters(self) -> ExtractionParameters:
        return ExtractionParameters(
            dimensions=tuple(self.dimensions) if self.dimensions is not None else None,
            metrics=(
                tuple(MetricDescriptor(name=metric.name, type=metric.type) for metric in self.metrics)
                if self.metrics is not None
                else None
            ),
            start_date=self.start_date or None,
            end_date=self.end_date or None,
            properties=frozenset(self.properties),
            views=frozenset(self.views),
        )


def parse_extraction_options(raw: Mapping[str, Any]) -> ExtractionOptions:
    """
    Validate a raw options mapping, raising ``ExtractionValidationError``.
    """

    try:
        return ExtractionOptions.model_validate(dict(raw))
    except ValidationError as exc:
        errors = [
            ValidationErrorDetail(
                code=f"invalid_option_{error['type']}",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"]) or None,
            )
            for error in exc.errors()
        ]
        raise ExtractionValidationError(
            message="Invalid extraction options.",
            errors=errors,
        ) from exc
