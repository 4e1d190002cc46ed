"""Exceptions raised by microtranslate.

Ordinary lookup problems (missing keys, placeholders or plural forms) never
raise; they fall back to deterministic output. Only the alias pre-processing
pass fails hard, because an unresolvable alias is an authoring bug in the
dictionary itself.
"""

from __future__ import annotations

from typing import Sequence


class TranslationError(Exception):
    """Base exception for all microtranslate errors."""

    pass


class AliasError(TranslationError):
    """Base exception for alias pre-processing failures."""

    def __init__(self, alias: str, message: str) -> None:
        self.alias = alias
        super().__init__(message)


class UnresolvedAliasError(AliasError):
    """Raised when an alias points at a missing or non-string entry."""

    def __init__(self, alias: str) -> None:
        super().__init__(alias, f'No translation for alias "{alias}"')


class CircularAliasError(AliasError):
    """Raised when alias expansion loops back onto itself."""

    def __init__(self, alias: str, chain: Sequence[str] = ()) -> None:
        self.chain = tuple(chain)
        path = " -> ".join([*self.chain, alias])
        super().__init__(alias, f'Circular reference to "{alias}" detected ({path})')


class AliasTargetError(AliasError):
    """Raised when an alias targets a whole mapping without a subkey."""

    def __init__(self, alias: str) -> None:
        super().__init__(
            alias,
            f'Attempted to alias the mapping "{alias}" without a [subkey]',
        )
