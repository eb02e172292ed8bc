"""Output models for converted field errors."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from fielderrors.config.defaults import STRUCTURED_ERROR_NAME


class OutputFormat(str, Enum):
    """Shape of the values in a converted field error map."""

    PLAIN = "plain"
    STRUCTURED = "structured"


class FieldError(BaseModel):
    """Structured record for a single field, shaped like a Mongoose ValidatorError."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Resolved human-readable message")
    name: str = Field(default=STRUCTURED_ERROR_NAME, description="Record kind")
    path: str = Field(..., description="Dotted field identifier")
    type: str = Field(..., description="Machine-readable error kind")
