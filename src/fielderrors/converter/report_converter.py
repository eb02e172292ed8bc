"""Conversion of validation reports into field error maps.

Build a converter once from a configuration value and an output format, then
call it with each report as it arrives:

    >>> to_form = make_converter('"${key}" is badly formed.')
    >>> to_form({"details": [{"path": "name", "message": "bad", "type": "any",
    ...                       "context": {"key": "name"}}]})
    {'name': '"name" is badly formed.'}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fielderrors.config.validator import report_from_pydantic
from fielderrors.converter.strategies import ConversionStrategy, select_strategy
from fielderrors.lib.logging_config import get_logger
from fielderrors.models.field_error import FieldError, OutputFormat
from fielderrors.models.report import ValidationReport

logger = get_logger(__name__)

FieldErrorMap = dict[str, str] | dict[str, FieldError]


def _as_report(report: Any) -> ValidationReport | None:
    """Normalize the supported report inputs, or None if not a failure report."""
    if report is None:
        return None
    if isinstance(report, ValidationReport):
        return report
    if isinstance(report, PydanticValidationError):
        return report_from_pydantic(report)
    if isinstance(report, Mapping):
        if report.get("details") is None:
            return None
        return ValidationReport.model_validate(dict(report))
    details = getattr(report, "details", None)
    if details is None:
        return None
    return ValidationReport.model_validate({"details": details})


class ReportConverter:
    """Callable turning a validation report into a map of field messages.

    The strategy and output format are fixed at construction and never
    change, so one instance may be shared between threads.

    Attributes:
        strategy: Strategy applied to every detail
        output_format: Plain messages or structured FieldError records
    """

    def __init__(
        self,
        strategy: ConversionStrategy,
        output_format: OutputFormat = OutputFormat.PLAIN,
    ) -> None:
        """Initialize the converter.

        Args:
            strategy: Strategy applied to every detail
            output_format: Shape of the values in the resulting map
        """
        self.strategy = strategy
        self.output_format = OutputFormat(output_format)

    def __call__(self, report: Any) -> FieldErrorMap | None:
        """Convert one report.

        Args:
            report: ValidationReport, mapping with a ``details`` key, pydantic
                ValidationError, or None

        Returns:
            Map from field path to message (or FieldError record), or None if
            the input is not a validation failure report. When several details
            share a path the last one wins.
        """
        validation_report = _as_report(report)
        if validation_report is None or validation_report.details is None:
            logger.debug("Input is not a validation report, nothing to convert")
            return None

        field_errors: dict[str, Any] = {}
        for detail in validation_report.details:
            message = self.strategy.convert(detail)

            if self.output_format is OutputFormat.STRUCTURED:
                field_errors[detail.path] = FieldError(
                    message=message, path=detail.path, type=detail.type
                )
            else:
                field_errors[detail.path] = message

        logger.debug(
            f"Converted {len(validation_report.details)} details into "
            f"{len(field_errors)} field errors ({self.output_format.value})"
        )
        return field_errors


def make_converter(
    configuration: Any = None,
    output_format: OutputFormat | str = OutputFormat.PLAIN,
) -> ReportConverter:
    """Build a reusable report converter.

    Args:
        configuration: None (keep messages), a template string, a list of
            pattern entries, or a mapping of error type to handler
        output_format: ``plain`` for message strings, ``structured`` for
            FieldError records

    Returns:
        ReportConverter instance

    Raises:
        ConfigError: If the configuration value has an unsupported shape
        ValueError: If the output format is unknown
    """
    return ReportConverter(select_strategy(configuration), OutputFormat(output_format))


def form(configuration: Any = None) -> ReportConverter:
    """Build a converter producing plain message strings."""
    return make_converter(configuration, OutputFormat.PLAIN)


def structured(configuration: Any = None) -> ReportConverter:
    """Build a converter producing FieldError records."""
    return make_converter(configuration, OutputFormat.STRUCTURED)
