"""Per-translator configuration record.

Options are read on every call, so callers may mutate fields (or swap the
whole record) between calls and the next translation picks the change up.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE_SPLITTER = "::"

# Signature of a pluralize function: (magnitude, variants) -> discriminator
PluralizeFunc = Callable[[Any, Mapping[Any, Any]], Any]

_CAMEL_CASE_ALIASES = {
    "namespaceSplitter": "namespace_splitter",
    "resolveAliases": "resolve_aliases",
}


@dataclass
class TranslatorOptions:
    """Configuration for a :class:`~microtranslate.translator.Translator`.

    Attributes:
        debug: Emit diagnostics and wrap missing-translation output in ``@@``.
        namespace_splitter: String or compiled pattern separating namespace
            components in lookup keys.
        pluralize: Maps ``(magnitude, variants)`` to a discriminator.
            ``None`` means identity on the magnitude.
        array: Return segment lists instead of strings for templates that
            contain placeholders.
        resolve_aliases: Expand ``{{alias}}`` tokens once at construction.
    """

    debug: bool = False
    namespace_splitter: str | re.Pattern[str] = DEFAULT_NAMESPACE_SPLITTER
    pluralize: PluralizeFunc | None = None
    array: bool = False
    resolve_aliases: bool = False

    @property
    def splitter(self) -> str | re.Pattern[str]:
        """The namespace splitter in effect (empty values fall back to ``::``)."""
        return self.namespace_splitter or DEFAULT_NAMESPACE_SPLITTER

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TranslatorOptions":
        """Build options from a plain mapping.

        Both snake_case field names and the camelCase spellings
        ``namespaceSplitter``/``resolveAliases`` are accepted. Unknown keys
        are ignored.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                logger.debug(f"Ignoring unknown translator option: {key!r}")
        return cls(**values)

    @classmethod
    def coerce(cls, value: Any) -> "TranslatorOptions":
        """Turn whatever the caller supplied into an options record.

        An existing instance is returned as-is so that it stays the live
        object; mappings are converted; anything else yields defaults.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        if value is not None:
            logger.debug(
                f"Options of type {type(value).__name__} are not a record, using defaults"
            )
        return cls()
