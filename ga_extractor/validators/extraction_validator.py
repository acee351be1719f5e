"""
ga_extractor/validators/extraction_validator.py

Validation of extraction parameters before any network call.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta

from ga_extractor.domain.extraction import MAX_DIMENSIONS, MAX_METRICS, ExtractionParameters
from ga_extractor.errors import ExtractionValidationError, ValidationErrorDetail

DATE_FORMAT = "%Y-%m-%d"


def yesterday(today: date) -> str:
    return (today - timedelta(days=1)).strftime(DATE_FORMAT)


class ExtractionParametersValidator:
    """
    Checks dimension and metric counts and the date range.
    """

    def __init__(self, *, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock

    def validate(self, params: ExtractionParameters) -> ExtractionParameters:
        """
        Raise on invalid parameters; return a copy with the end date resolved.
        """

        errors: list[ValidationErrorDetail] = []

        if params.dimensions is None:
            errors.append(
                ValidationErrorDetail(
                    code="dimensions_missing",
                    message="At least one dimension is required.",
                    field="dimensions",
                )
            )
        elif len(params.dimensions) < 1:
            errors.append(
                ValidationErrorDetail(
                    code="too_few_dimensions",
                    message="At least one dimension is required.",
                    field="dimensions",
                )
            )
        elif len(params.dimensions) > MAX_DIMENSIONS:
            errors.append(
                ValidationErrorDetail(
                    code="too_many_dimensions",
                    message=f"A maximum of {MAX_DIMENSIONS} dimensions is supported.",
                    field="dimensions",
                    context={"count": len(params.dimensions)},
                )
            )

        if params.metrics is None:
            errors.append(
                ValidationErrorDetail(
                    code="metrics_missing",
                    message="At least one metric is required.",
                    field="metrics",
                )
            )
        elif len(params.metrics) < 1:
            errors.append(
                ValidationErrorDetail(
                    code="too_few_metrics",
                    message="At least one metric is required.",
                    field="metrics",
                )
            )
        elif len(params.metrics) > MAX_METRICS:
            errors.append(
                ValidationErrorDetail(
                    code="too_many_metrics",
                    message=f"A maximum of {MAX_METRICS} metrics is supported.",
                    field="metrics",
                    context={"count": len(params.metrics)},
                )
            )

        if not (params.start_date or "").strip():
            errors.append(
                ValidationErrorDetail(
                    code="start_date_missing",
                    message="A start date is required.",
                    field="start_date",
                )
            )

        if errors:
            fields = ", ".join(sorted({error.field for error in errors if error.field}))
            raise ExtractionValidationError(
                message=f"Invalid extraction parameters: {fields}.",
                errors=errors,
            )

        if not (params.end_date or "").strip():
            return params.with_end_date(yesterday(self._clock()))
        return params
