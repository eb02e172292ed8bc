"""Placeholder substitution for error message templates.

Templates carry ``${name}`` tokens that are filled from an error detail's
context mapping. Substitution is literal: neither the token nor the
replacement text is interpreted as a regular expression.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

UNDEFINED_TEXT = "undefined"

_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)

# Escape pairs are kept as-is; bare slashes get escaped
_BARE_SLASH_RE = re.compile(r"(\\.)|/")


def escape_pattern(text: str) -> str:
    """Escape text so it matches itself when used as a regular expression."""
    return re.escape(text)


def replace_all(text: str, find: str, replacement: str) -> str:
    """Replace every literal occurrence of ``find`` in ``text``."""
    return re.sub(escape_pattern(find), lambda _match: replacement, text)


def stringify(value: Any) -> str:
    """Render a context value the way it should appear inside a message.

    Args:
        value: Context value (string, number, None, compiled pattern, ...)

    Returns:
        ``"undefined"`` for None, ``/source/flags`` for compiled patterns
        (bare ``/`` escaped), lowercase ``true``/``false`` for booleans,
        integral floats without ``.0``, ``str(value)`` otherwise.
    """
    if value is None:
        return UNDEFINED_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, re.Pattern):
        flags = "".join(
            letter for flag, letter in _FLAG_LETTERS if value.flags & flag
        )
        source = _BARE_SLASH_RE.sub(
            lambda match: match.group(1) or r"\/", value.pattern
        )
        return f"/{source}/{flags}"
    return str(value)


def substitute_context(message: str, context: Mapping[str, Any] | None) -> str:
    """Expand ``${key}`` placeholders in a message from a context mapping.

    Every occurrence of each key's token is replaced. Tokens without a
    matching key are left in place.

    Args:
        message: Message template
        context: Named values for the placeholders

    Returns:
        The message with all known placeholders expanded

    Example:
        >>> substitute_context('"${key}" is badly formed.', {"key": "name"})
        '"name" is badly formed.'
    """
    if not context:
        return message

    for key, value in context.items():
        message = replace_all(message, "${" + str(key) + "}", stringify(value))

    return message
