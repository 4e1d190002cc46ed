"""Key lookup in nested translation dictionaries."""

from __future__ import annotations

import re
from typing import Any, Mapping

from microtranslate.options import DEFAULT_NAMESPACE_SPLITTER
from microtranslate.plural import lookup_variant


def split_key(key: str, splitter: str | re.Pattern[str]) -> list[str]:
    """Split a namespaced key into its path components."""
    if isinstance(splitter, re.Pattern):
        return splitter.split(key)
    return key.split(splitter)


def resolve_key(
    dictionary: Mapping[str, Any],
    key: str,
    splitter: str | re.Pattern[str] = DEFAULT_NAMESPACE_SPLITTER,
) -> Any | None:
    """Find the value stored for ``key``.

    A literal entry named ``key`` always wins, even when the key contains
    the splitter. Otherwise the key is split into components and nested
    mappings are walked one component at a time. Components match
    integer keys too, so ``"hits::1"`` finds ``{"hits": {1: ...}}``.

    Args:
        dictionary: Translation dictionary.
        key: Lookup key, e.g. ``"moduleA::title"``.
        splitter: Namespace separator string or compiled pattern.

    Returns:
        Whatever is stored (string, variant mapping, nested dictionary or
        any other value), or ``None`` when the path does not exist.
    """
    value = dictionary.get(key)
    if value is not None:
        return value

    components = split_key(key, splitter)
    if len(components) < 2:
        return None

    node: Any = dictionary
    for component in components:
        if not isinstance(node, Mapping):
            return None
        node = lookup_variant(node, component)
        if node is None:
            return None
    return node
