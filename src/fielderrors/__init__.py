"""fielderrors - Turn validation reports into per-field form messages.

A validator reports failures as a list of details, each with a dotted path, a
default message, an error type, and a context of named values. fielderrors
turns such a report into a flat map from field path to the message a form
should show, so rendering code never depends on the validator's wording.

Main features:
- Keep the validator's messages, or replace them with one fixed template
- Rewrite messages matching ordered substring/regex rules
- Pick templates per error type
- ``${name}`` placeholders filled from each detail's context
- Plain strings or Mongoose-style ValidatorError records
"""

from fielderrors.converter.report_converter import (
    ReportConverter,
    form,
    make_converter,
    structured,
)
from fielderrors.lib.errors import ConfigError, FieldErrorsError
from fielderrors.lib.substitution import substitute_context
from fielderrors.models.field_error import FieldError, OutputFormat
from fielderrors.models.report import ErrorDetail, ValidationReport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ErrorDetail",
    "FieldError",
    "FieldErrorsError",
    "OutputFormat",
    "ReportConverter",
    "ValidationReport",
    "form",
    "make_converter",
    "structured",
    "substitute_context",
]
