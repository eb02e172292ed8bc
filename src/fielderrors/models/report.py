"""Input models for validation reports.

A report is produced by an upstream validator and consumed read-only. The
models accept foreign report documents (for example a decoded Joi error
object) and ignore keys they do not know about.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorDetail(BaseModel):
    """One field-level validation failure.

    Attributes:
        path: Dotted field identifier (e.g. "address.city")
        message: Default human-readable message from the validator
        type: Machine-readable error kind (e.g. "string.min")
        context: Named values available to message placeholders
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    path: str = Field(..., description="Dotted field identifier")
    message: str = Field(..., description="Default message from the validator")
    type: str = Field(..., description="Machine-readable error kind")
    context: dict[str, Any] = Field(
        default_factory=dict, description="Values for message placeholders"
    )

    @field_validator("path", mode="before")
    @classmethod
    def join_path(cls, v: Any) -> Any:
        """Join sequence paths (e.g. a pydantic loc tuple) with dots."""
        if isinstance(v, Sequence) and not isinstance(v, str):
            return ".".join(str(item) for item in v)
        return v

    @field_validator("context", mode="before")
    @classmethod
    def default_context(cls, v: Any) -> Any:
        """Treat a missing context as empty."""
        return {} if v is None else v


class ValidationReport(BaseModel):
    """A validation failure report.

    ``details`` being None means the document is not a validation failure;
    an empty list is a failure report with no field errors.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    details: list[ErrorDetail] | None = Field(
        default=None, description="Ordered field-level failures"
    )
