"""Placeholder substitution over compiled templates."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from microtranslate.compiler import CompiledTemplate, Literal

logger = logging.getLogger(__name__)

COUNT_PLACEHOLDER = "n"

_MISSING = object()


def _lookup(replacements: Mapping[str, Any] | Sequence[Any], name: str) -> Any:
    if isinstance(replacements, Mapping):
        value = replacements.get(name)
        if value is None and name.isdigit():
            value = replacements.get(int(name))
    elif name.isdigit() and int(name) < len(replacements):
        value = replacements[int(name)]
    else:
        value = None
    return _MISSING if value is None else value


def assemble(
    compiled: CompiledTemplate,
    replacements: Mapping[str, Any] | Sequence[Any] | None = None,
    count: Any = None,
    as_array: bool = False,
    debug: bool = False,
) -> str | list[Any]:
    """Substitute placeholders in a compiled template.

    Args:
        compiled: Output of the template compiler.
        replacements: Values by placeholder name, or a positional sequence
            addressed by ``{0}``, ``{1}``, ...
        count: Injected for ``{n}`` and ``{}`` when no replacement is given.
        as_array: Return ``[literal, value, literal, ..., literal]`` with the
            substituted values untouched instead of a joined string.
        debug: Log placeholders that could not be filled.

    Returns:
        The rendered string, or the segment list in array mode. A
        :class:`Literal` is always returned as its plain text.
    """
    if isinstance(compiled, Literal):
        return compiled.text

    if replacements is None:
        replacements = {}

    parts: list[Any] = list(compiled.segments)
    for index in range(1, len(parts), 2):
        name = parts[index]
        value = _lookup(replacements, name)
        if value is _MISSING and count is not None and name in (COUNT_PLACEHOLDER, ""):
            value = count
        if value is _MISSING:
            if debug:
                logger.warning(
                    f'Could not find replacement "{name}" in provided replacements: {replacements!r}'
                )
            value = "{" + name + "}"
        parts[index] = value

    if as_array:
        return parts
    return "".join(str(part) for part in parts)
