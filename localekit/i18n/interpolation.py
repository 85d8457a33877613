"""Placeholder substitution for translated messages.

Placeholders use either ``{{name}}`` or ``%{name}`` syntax. Substitution is a
single pass over the template: every occurrence is replaced independently and
substituted values are never rescanned for placeholders.
"""

import re
from typing import Any, List, Mapping

from localekit.i18n.models import InterpolationResult

PLACEHOLDER = re.compile(r"(?:\{\{|%\{)(.*?)(?:\}\}?)")


def stringify(value: Any) -> str:
    """Coerce an interpolation value to its display string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def missing_value_marker(placeholder: str) -> str:
    """Inline marker for a placeholder without a value."""
    return f"[missing {placeholder} value]"


def placeholders(message: str) -> List[str]:
    """Placeholder names in order of appearance, repeats included."""
    return [match.group(1) for match in PLACEHOLDER.finditer(message)]


def interpolate(message: Any, values: Mapping[str, Any]) -> InterpolationResult:
    """Substitute placeholders in a message.

    Args:
        message: Template string.
        values: Values by placeholder name. A name mapped to None counts as
            missing.

    Returns:
        InterpolationResult with the substituted text, or with an error when
        the message is not a string.
    """
    if not isinstance(message, str):
        return InterpolationResult(
            error=f"cannot interpolate {type(message).__name__}"
        )

    missing: List[str] = []

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = values.get(name)
        if value is None:
            missing.append(name)
            return missing_value_marker(match.group(0))
        # Returned from a callable, so "$" and "\" in the value stay literal
        return stringify(value)

    text = PLACEHOLDER.sub(_substitute, message)
    return InterpolationResult(text=text, missing=tuple(missing))
