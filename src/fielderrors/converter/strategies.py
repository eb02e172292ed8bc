"""Conversion strategies mapping one error detail to its final message.

A strategy is chosen once, when a converter is built, from the shape of the
caller's configuration value:

- ``None``: :class:`PassThrough`
- ``str``: :class:`FixedTemplate`
- ``list``/``tuple``: :class:`PatternList`
- any other mapping: :class:`TypeMap`

Every strategy is an immutable value; ``convert`` is a pure function of the
detail it is given.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from fielderrors.config.validator import flatten_pydantic_errors
from fielderrors.lib.errors import ConfigError
from fielderrors.lib.logging_config import get_logger
from fielderrors.lib.substitution import substitute_context
from fielderrors.models.report import ErrorDetail

logger = get_logger(__name__)

TypeHandler = Callable[[Mapping[str, Any]], str | None]


class PatternEntry(BaseModel):
    """One prioritized rule of a :class:`PatternList`.

    A string pattern matches when it occurs anywhere in the detail message; a
    compiled pattern matches when ``search`` finds it. The keys ``regex`` and
    ``message`` are accepted in place of ``pattern`` and ``template``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str | re.Pattern[str] = Field(
        ..., validation_alias=AliasChoices("pattern", "regex")
    )
    template: str = Field(..., validation_alias=AliasChoices("template", "message"))

    def matches(self, message: str) -> bool:
        """Return True if this entry applies to the given detail message."""
        if isinstance(self.pattern, str):
            return self.pattern in message
        return self.pattern.search(message) is not None


class ConversionStrategy(ABC):
    """Turns a single error detail into a presentable message."""

    @abstractmethod
    def convert(self, detail: ErrorDetail) -> str:
        """Return the message to show for ``detail``."""


@dataclass(frozen=True)
class PassThrough(ConversionStrategy):
    """Keep the validator's own message."""

    def convert(self, detail: ErrorDetail) -> str:
        return detail.message


@dataclass(frozen=True)
class FixedTemplate(ConversionStrategy):
    """Give every detail the same template, filled from its context."""

    template: str

    def convert(self, detail: ErrorDetail) -> str:
        return substitute_context(self.template, detail.context)


@dataclass(frozen=True)
class PatternList(ConversionStrategy):
    """Pick the template of the first entry matching the detail message.

    Entries are tried in order. Details matching no entry keep their own
    message.
    """

    entries: tuple[PatternEntry, ...] = ()

    def convert(self, detail: ErrorDetail) -> str:
        for entry in self.entries:
            if entry.matches(detail.message):
                return substitute_context(entry.template, detail.context)
        return detail.message


@dataclass(frozen=True)
class TypeMap(ConversionStrategy):
    """Look up a template handler by the detail's error type.

    A handler receives the detail context and returns a template, or None
    (or an empty string) to keep the detail's own message.
    """

    handlers: Mapping[str, TypeHandler] = field(default_factory=dict)

    def convert(self, detail: ErrorDetail) -> str:
        handler = self.handlers.get(detail.type)
        template = handler(detail.context) if handler is not None else None
        if not template:
            return detail.message
        return substitute_context(template, detail.context)


def _pattern_entries(configuration: list[Any] | tuple[Any, ...]) -> PatternList:
    entries: list[PatternEntry] = []
    for index, entry in enumerate(configuration):
        if isinstance(entry, PatternEntry):
            entries.append(entry)
            continue
        try:
            entries.append(PatternEntry.model_validate(entry))
        except PydanticValidationError as e:
            raise ConfigError(
                f"patterns[{index}]", "; ".join(flatten_pydantic_errors(e))
            ) from e
    return PatternList(entries=tuple(entries))


def _type_handlers(configuration: Mapping[Any, Any]) -> TypeMap:
    handlers: dict[str, TypeHandler] = {}
    for error_type, handler in configuration.items():
        if not callable(handler):
            raise ConfigError(
                f"types.{error_type}",
                f"Handler must be callable, got {type(handler).__name__}",
            )
        handlers[str(error_type)] = handler
    return TypeMap(handlers=handlers)


def select_strategy(configuration: Any = None) -> ConversionStrategy:
    """Choose the conversion strategy for a configuration value.

    Args:
        configuration: None, a template string, a sequence of pattern entries,
            a mapping of error type to handler, or a ready-made strategy

    Returns:
        The strategy to apply to every detail

    Raises:
        ConfigError: If the configuration has none of the supported shapes,
            or a pattern entry or type handler is malformed
    """
    if configuration is None:
        strategy: ConversionStrategy = PassThrough()
    elif isinstance(configuration, ConversionStrategy):
        strategy = configuration
    elif isinstance(configuration, str):
        strategy = FixedTemplate(template=configuration)
    elif isinstance(configuration, list | tuple):
        strategy = _pattern_entries(configuration)
    elif isinstance(configuration, Mapping):
        strategy = _type_handlers(configuration)
    else:
        raise ConfigError(
            "configuration",
            "Expected None, a template string, a list of pattern entries, "
            f"or a mapping of error types to handlers, got "
            f"{type(configuration).__name__}",
        )

    logger.debug(f"Selected conversion strategy: {type(strategy).__name__}")
    return strategy
