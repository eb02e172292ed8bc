"""Bridges between pydantic validation errors and fielderrors reports."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fielderrors.models.report import ErrorDetail, ValidationReport


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten Pydantic ValidationError into human-readable messages.

    Converts Pydantic's nested error structure into a flat list of
    user-friendly error messages that include field names and descriptions.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of human-readable error messages, one per field error

    Example:
        >>> from pydantic import BaseModel, ValidationError
        >>> class Model(BaseModel):
        ...     name: str
        >>> try:
        ...     Model(name=123)
        ... except ValidationError as e:
        ...     msgs = flatten_pydantic_errors(e)
        ...     # msgs contains human-readable descriptions
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"

        msg = error.get("msg", "Unknown error")
        error_type = error.get("type", "")

        if error_type == "value_error":
            input_val = error.get("input")
            formatted = f"Field '{field_path}': {msg} (received: {input_val!r})"
        else:
            formatted = f"Field '{field_path}': {msg}"

        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]


def report_from_pydantic(exc: PydanticValidationError) -> ValidationReport:
    """Build a validation report from a Pydantic ValidationError.

    Each entry of ``exc.errors()`` becomes one detail. The context exposes
    ``key`` and ``label`` (the last location item) and ``value`` (the
    rejected input), overlaid with the error's own ``ctx`` values such as
    ``min_length`` or ``ge``.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        ValidationReport with one detail per field error, in error order
    """
    details: list[ErrorDetail] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        key = str(loc[-1]) if loc else ""

        context: dict[str, Any] = {
            "key": key,
            "label": key,
            "value": error.get("input"),
        }
        context.update(error.get("ctx") or {})

        details.append(
            ErrorDetail(
                path=loc,
                message=error.get("msg", ""),
                type=error.get("type", ""),
                context=context,
            )
        )

    return ValidationReport(details=details)
