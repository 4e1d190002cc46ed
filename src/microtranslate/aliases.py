"""Alias pre-processing for translation dictionaries.

Templates may reference other entries with ``{{key}}`` or, for variant
mappings, ``{{key[subkey]}}``::

    {
        "app": "Foo",
        "hits": {"1": "one hit", "n": "{n} hits"},
        "welcome": "Welcome to {{app}}, {{hits[1]}} so far",
    }

:func:`resolve_aliases` expands these tokens once, ahead of translation
time. Unlike lookup misses during translation, broken aliases are
authoring bugs and raise :class:`~microtranslate.errors.AliasError`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from microtranslate.errors import (
    AliasTargetError,
    CircularAliasError,
    UnresolvedAliasError,
)
from microtranslate.options import DEFAULT_NAMESPACE_SPLITTER
from microtranslate.plural import lookup_variant
from microtranslate.resolver import resolve_key

logger = logging.getLogger(__name__)

ALIAS_PATTERN = re.compile(r"\{\{([^{}\[\]]+)(?:\[([^{}\[\]]*)\])?\}\}")


class _AliasExpander:
    """Expands alias tokens against one root dictionary."""

    def __init__(self, root: Mapping[str, Any], splitter: str | re.Pattern[str]) -> None:
        self._root = root
        self._splitter = splitter
        self._in_progress: list[str] = []
        self._expanded: dict[str, str] = {}

    def expand_mapping(self, mapping: Mapping[Any, Any]) -> dict[Any, Any]:
        return {key: self.expand_value(value) for key, value in mapping.items()}

    def expand_value(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.expand_mapping(value)
        if isinstance(value, str):
            return self.expand_text(value)
        return value

    def expand_text(self, text: str) -> str:
        if "{{" not in text:
            return text
        return ALIAS_PATTERN.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        key, subkey = match.group(1), match.group(2)
        alias = key if subkey is None else f"{key}[{subkey}]"

        if alias in self._expanded:
            return self._expanded[alias]
        if alias in self._in_progress:
            raise CircularAliasError(alias, self._in_progress)

        self._in_progress.append(alias)
        try:
            target = self._target(key, subkey, alias)
            expanded = self.expand_text(target)
        finally:
            self._in_progress.pop()

        logger.debug(f"Expanded alias {alias!r} -> {expanded!r}")
        self._expanded[alias] = expanded
        return expanded

    def _target(self, key: str, subkey: str | None, alias: str) -> str:
        target = resolve_key(self._root, key, self._splitter)

        if subkey is not None:
            if not isinstance(target, Mapping):
                raise UnresolvedAliasError(alias)
            target = lookup_variant(target, subkey)
        elif isinstance(target, Mapping):
            raise AliasTargetError(alias)

        if not isinstance(target, str):
            raise UnresolvedAliasError(alias)
        return target


def resolve_aliases(
    dictionary: Mapping[str, Any],
    splitter: str | re.Pattern[str] = DEFAULT_NAMESPACE_SPLITTER,
) -> dict[str, Any]:
    """Return a copy of ``dictionary`` with every alias token expanded.

    Nested mappings are walked and copied; non-string values pass through.
    The input is never modified.

    Args:
        dictionary: Translation dictionary to expand.
        splitter: Namespace separator used to resolve ``{{ns::key}}``.

    Raises:
        UnresolvedAliasError: An alias target is missing or not a string.
        CircularAliasError: Aliases reference each other in a cycle.
        AliasTargetError: A whole variant mapping is aliased without a subkey.
    """
    return _AliasExpander(dictionary, splitter).expand_mapping(dictionary)
