"""Pydantic models for validation reports and converted field errors."""

from fielderrors.models.field_error import FieldError, OutputFormat
from fielderrors.models.report import ErrorDetail, ValidationReport

__all__ = [
    "ErrorDetail",
    "FieldError",
    "OutputFormat",
    "ValidationReport",
]
