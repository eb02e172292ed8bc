"""Converter configuration models.

These models describe the YAML configuration file read by
:class:`fielderrors.config.loader.ConfigLoader`. A file selects at most one
message strategy:

- ``template``: one template for every field error
- ``patterns``: ordered rules matched against the validator's message
- ``types``: templates keyed by error type
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fielderrors.config.defaults import DEFAULT_OUTPUT_FORMAT
from fielderrors.models.field_error import OutputFormat

STRATEGY_KEYS = ("template", "patterns", "types")


class PatternRule(BaseModel):
    """A pattern rule as written in a configuration file.

    Exactly one of ``contains`` (substring match) or ``search`` (regular
    expression match) must be given.
    """

    model_config = ConfigDict(extra="forbid")

    contains: str | None = Field(default=None, description="Substring to find")
    search: str | None = Field(default=None, description="Regular expression")
    template: str = Field(..., description="Message template for matches")

    @field_validator("search")
    @classmethod
    def validate_search(cls, v: str | None) -> str | None:
        """Validate search is a compilable regular expression."""
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(
                    f"search is not a valid regular expression: {e}"
                ) from e
        return v

    @model_validator(mode="after")
    def check_one_matcher(self) -> "PatternRule":
        """Ensure exactly one of contains/search is set."""
        if (self.contains is None) == (self.search is None):
            raise ValueError("exactly one of 'contains' or 'search' is required")
        return self

    def to_entry(self) -> dict[str, Any]:
        """Return the pattern entry understood by the converter."""
        pattern: str | re.Pattern[str]
        if self.search is not None:
            pattern = re.compile(self.search)
        else:
            pattern = self.contains or ""
        return {"pattern": pattern, "template": self.template}


def _constant_handler(template: str) -> Any:
    def handler(context: Mapping[str, Any]) -> str:
        return template

    return handler


class ConverterConfig(BaseModel):
    """Converter settings loaded from a configuration file.

    Attributes:
        output_format: Plain strings or structured records
        template: Fixed template applied to every detail
        patterns: Ordered pattern rules; the first match wins
        types: Template per error type
    """

    model_config = ConfigDict(extra="forbid")

    output_format: OutputFormat = Field(
        default=OutputFormat(DEFAULT_OUTPUT_FORMAT),
        description="Shape of converted values",
    )
    template: str | None = Field(default=None, description="Fixed template")
    patterns: list[PatternRule] | None = Field(
        default=None, description="Ordered pattern rules"
    )
    types: dict[str, str] | None = Field(
        default=None, description="Template per error type"
    )

    @model_validator(mode="after")
    def check_single_strategy(self) -> "ConverterConfig":
        """Ensure at most one strategy key is configured."""
        configured = [key for key in STRATEGY_KEYS if getattr(self, key) is not None]
        if len(configured) > 1:
            raise ValueError(
                f"only one of {', '.join(STRATEGY_KEYS)} may be set, "
                f"got: {', '.join(configured)}"
            )
        return self

    def to_configuration(self) -> Any:
        """Return the configuration value for ``make_converter``.

        Returns:
            None, a template string, a list of pattern entries, or a mapping
            of error type to handler
        """
        if self.template is not None:
            return self.template
        if self.patterns is not None:
            return [rule.to_entry() for rule in self.patterns]
        if self.types is not None:
            return {
                error_type: _constant_handler(template)
                for error_type, template in self.types.items()
            }
        return None
