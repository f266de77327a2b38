"""Placeholder substitution for step messages.

Supports:
- Step answers: "Hi {{name}}!" (all values joined with ", ")
- Indexed answers: "{{colors.1}}" (zero-based, single value)
- Custom variables: "Welcome to {{company}}"

Step answers take precedence over custom variables with the same name.
Unresolved placeholders are left verbatim.
"""

import re
from collections.abc import Iterable, Mapping

from scriptchat.core.types import Result

_PLACEHOLDER = re.compile(r"\{\{([^{}]+)\}\}")
_INDEXED = re.compile(r"^(?P<step>.+)\.(?P<index>\d+)$")

VALUE_SEPARATOR = ", "


def _step_values(results: Iterable[Result], step_id: str) -> list[tuple[str | None, ...]]:
    return [result.values for result in results if result.step == step_id]


def _resolve_step(key: str, results: list[Result]) -> str | None:
    matches = _step_values(results, key)
    if matches:
        return VALUE_SEPARATOR.join(
            value if value is not None else "" for values in matches for value in values
        )

    indexed = _INDEXED.match(key)
    if indexed:
        index = int(indexed.group("index"))
        for values in _step_values(results, indexed.group("step")):
            if index < len(values) and values[index]:
                return values[index]

    return None


def substitute(
    template: str,
    results: Iterable[Result],
    variables: Mapping[str, str] | None = None,
) -> str:
    """Replace placeholders in a message template.

    Every placeholder is resolved once against the original template, so
    text produced by a substitution is never expanded again.

    Args:
        template: Message like "You said {{start}}"
        results: Results recorded so far, in traversal order
        variables: Custom variables

    Returns:
        Template with resolvable placeholders replaced.

    Examples:
        >>> substitute("Hi {{name}}!", [Result("name", ("Ann",))])
        'Hi Ann!'
        >>> substitute("{{color.5}}", [Result("color", ("red", "blue"))])
        '{{color.5}}'
    """
    if "{{" not in template:
        return template

    recorded = list(results)
    custom = variables or {}

    def replacer(match: re.Match[str]) -> str:
        key = match.group(1)
        value = _resolve_step(key, recorded)
        if value is None:
            value = custom.get(key)
        if value is None:
            return match.group(0)
        return str(value)

    return _PLACEHOLDER.sub(replacer, template)
