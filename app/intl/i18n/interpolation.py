"""Placeholder interpolation for translated strings.

Placeholders use `${name}` or `${nested.path}` syntax. Whitespace inside the
braces is ignored. Unknown placeholders are left untouched.
"""

import re
from typing import Any, Mapping, Optional

from intl.i18n.resolver import get_by_path

PLACEHOLDER_PATTERN = re.compile(r"\$\{\s*([\w.]+)\s*\}")


def interpolate(value: Any, params: Optional[Mapping[str, Any]]) -> Any:
    """Substitute placeholders in value with entries from params.

    Non-string values and calls without params are returned unchanged.
    Substituted text is not scanned again.

    Args:
        value: Resolved translation value.
        params: Flat or nested mapping addressed by placeholder paths.

    Returns:
        The interpolated string, or value unchanged.

    Example:
        >>> interpolate("Hello, ${user.name}!", {"user": {"name": "Ann"}})
        'Hello, Ann!'
        >>> interpolate("Hi ${name}", {"other": "x"})
        'Hi ${name}'
    """
    if params is None or not isinstance(value, str):
        return value

    def _replace(match: "re.Match[str]") -> str:
        found = get_by_path(params, match.group(1))
        return match.group(0) if found is None else str(found)

    return PLACEHOLDER_PATTERN.sub(_replace, value)
