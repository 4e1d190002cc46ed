"""Template compilation.

A template such as ``"{n} items in {place}"`` is split into alternating
literal text and placeholder names::

    ("", "n", " items in ", "place", "")

The sequence always starts and ends with a literal (possibly empty), so
literals sit at even positions and names at odd positions. Templates with
no placeholders compile to :class:`Literal` and skip assembly entirely.

Compiled forms are memoized per translator in a :class:`TemplateCache`
keyed by the raw template text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

PLACEHOLDER_OPEN = "{"
PLACEHOLDER_CLOSE = "}"


def _is_word_char(char: str) -> bool:
    return char == "_" or ("0" <= char <= "9") or ("a" <= char <= "z") or ("A" <= char <= "Z")


@dataclass(frozen=True)
class Literal:
    """A template without placeholders."""

    text: str


@dataclass(frozen=True)
class Compiled:
    """A template split into ``[literal, name, literal, ..., literal]``."""

    segments: tuple[str, ...]

    @property
    def literals(self) -> tuple[str, ...]:
        return self.segments[0::2]

    @property
    def names(self) -> tuple[str, ...]:
        return self.segments[1::2]


CompiledTemplate = Union[Literal, Compiled]


def scan_placeholders(template: str) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, name)`` for every ``{word}`` token in ``template``.

    ``name`` consists of ASCII letters, digits and underscores and may be
    empty. A brace that does not open a well-formed token is plain text.
    """
    length = len(template)
    pos = 0
    while pos < length:
        start = template.find(PLACEHOLDER_OPEN, pos)
        if start < 0:
            return
        cursor = start + 1
        while cursor < length and _is_word_char(template[cursor]):
            cursor += 1
        if cursor < length and template[cursor] == PLACEHOLDER_CLOSE:
            yield start, cursor + 1, template[start + 1:cursor]
            pos = cursor + 1
        else:
            # Not a token; rescan from the next character so "{{x}" still finds "{x}"
            pos = start + 1


def compile_template(template: str) -> CompiledTemplate:
    """Parse ``template`` into its literal/placeholder form (uncached)."""
    segments: list[str] = []
    last = 0
    for start, end, name in scan_placeholders(template):
        segments.append(template[last:start])
        segments.append(name)
        last = end

    if not segments:
        return Literal(template)

    segments.append(template[last:])
    return Compiled(tuple(segments))


class TemplateCache:
    """Memoizes compiled templates by raw template text.

    Entries live as long as the cache; nothing is ever evicted.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CompiledTemplate] = {}

    def compile(self, template: str) -> CompiledTemplate:
        compiled = self._entries.get(template)
        if compiled is None:
            compiled = compile_template(template)
            self._entries[template] = compiled
        return compiled

    def __contains__(self, template: object) -> bool:
        return template in self._entries

    def __len__(self) -> int:
        return len(self._entries)
