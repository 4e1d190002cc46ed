"""Plural and variant selection.

A variant mapping holds alternative templates keyed by a discriminator:
an explicit number, a category code produced by a pluralize function, or
the wildcard ``"n"`` (also ``"*"``) used as the fallback of last resort::

    {0: "No Hits", 1: "{n} Hit", "n": "{n} Hits"}

Selection works on the magnitude of the count, so ``-13`` picks the same
entry as ``13``. Explicit numeric entries always beat whatever the
pluralize function computes.

The module also ships a few ready-made pluralize functions. Most return
:class:`PluralCategory` codes; :func:`icelandic` keeps the numeric
``0``/``1``/``2`` discriminators of the classic Icelandic rule.

Example:
    from microtranslate import make_translator
    from microtranslate.plural import icelandic

    t = make_translator(
        {"sheep": {0: "Engar kindur", 1: "{n} kind", 2: "{n} kindur"}},
        {"pluralize": icelandic},
    )
    t("sheep", 21)  # -> "21 kind"
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Iterator, Mapping

logger = logging.getLogger(__name__)

WILDCARD_KEYS = ("n", "*")


class PluralCategory(str, Enum):
    """CLDR-style plural category codes."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PluralRuleFunc = Callable[[Any, Mapping[Any, Any]], Any]


# =============================================================================
# Discriminator lookup
# =============================================================================


def _candidate_keys(discriminator: Any) -> Iterator[Any]:
    """Yield the spellings a discriminator may be stored under."""
    if isinstance(discriminator, Enum):
        discriminator = discriminator.value
    yield discriminator

    if isinstance(discriminator, bool):
        return
    if isinstance(discriminator, float) and discriminator.is_integer():
        yield int(discriminator)
        yield str(int(discriminator))
    elif isinstance(discriminator, int):
        yield str(discriminator)
    elif isinstance(discriminator, str):
        stripped = discriminator.strip()
        if stripped.lstrip("-").isdigit():
            yield int(stripped)


def lookup_variant(variants: Mapping[Any, Any], discriminator: Any) -> Any | None:
    """Return the entry stored under ``discriminator`` or ``None``.

    ``1``, ``1.0`` and ``"1"`` address the same entry; entries holding
    ``None`` count as absent.
    """
    if discriminator is None:
        return None
    for key in _candidate_keys(discriminator):
        try:
            value = variants.get(key)
        except TypeError:
            # Unhashable discriminator
            return None
        if value is not None:
            return value
    return None


def wildcard_variant(variants: Mapping[Any, Any]) -> Any | None:
    """Return the default entry (``"n"`` or ``"*"``) of a variant mapping."""
    for key in WILDCARD_KEYS:
        value = variants.get(key)
        if value is not None:
            return value
    return None


def magnitude(count: int | float) -> int | float:
    """Absolute value of ``count``; integral floats become ints."""
    value = abs(count)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def identity_pluralize(magnitude: Any, variants: Mapping[Any, Any]) -> Any:
    """Default pluralize function: the magnitude is the discriminator."""
    return magnitude


# =============================================================================
# Selection
# =============================================================================


def select_variant(
    variants: Mapping[Any, Any],
    count: int | float,
    pluralize: PluralRuleFunc | None = None,
    debug: bool = False,
) -> Any | None:
    """Pick the entry of ``variants`` that matches ``count``.

    Order of precedence:

    1. an explicit entry for the magnitude of ``count``
    2. the entry for the discriminator returned by ``pluralize``
    3. the wildcard entry
    4. ``None`` (logged when ``debug`` is on)

    Args:
        variants: Variant mapping to select from.
        count: Signed count; only its magnitude is used here.
        pluralize: ``(magnitude, variants) -> discriminator``. Defaults to
            :func:`identity_pluralize`.
        debug: Log when no form matches.

    Returns:
        The selected entry, or ``None`` when nothing matches.
    """
    if not variants:
        if debug:
            logger.warning("No plural forms found")
        return None

    mapped = magnitude(count)
    selected = lookup_variant(variants, mapped)
    if selected is not None:
        return selected

    rule = pluralize or identity_pluralize
    selected = lookup_variant(variants, rule(mapped, variants))
    if selected is not None:
        return selected

    selected = wildcard_variant(variants)
    if selected is None and debug:
        logger.warning(f'No plural forms found for count "{count}" in {dict(variants)!r}')
    return selected


# =============================================================================
# Built-in pluralize functions
# =============================================================================


def _integral(n: Any) -> int | None:
    if isinstance(n, bool):
        return None
    if isinstance(n, int):
        return n
    if isinstance(n, float) and n.is_integer():
        return int(n)
    return None


def english(n: Any, variants: Mapping[Any, Any] | None = None) -> PluralCategory:
    """English, German, Dutch, Swedish, ...: one for exactly 1."""
    return PluralCategory.ONE if _integral(n) == 1 else PluralCategory.OTHER


def french(n: Any, variants: Mapping[Any, Any] | None = None) -> PluralCategory:
    """French: one for anything below 2."""
    return PluralCategory.ONE if 0 <= n < 2 else PluralCategory.OTHER


def icelandic(n: Any, variants: Mapping[Any, Any] | None = None) -> int:
    """Icelandic: numbers ending in 1 are singular, unless ending in 11.

    Returns ``0`` for zero, ``1`` for singular and ``2`` for plural.
    """
    if n == 0:
        return 0
    return 2 if (n % 10 != 1 or n % 100 == 11) else 1


def icelandic_category(n: Any, variants: Mapping[Any, Any] | None = None) -> PluralCategory:
    """Icelandic as category codes: one or other."""
    i = _integral(n)
    if i is not None and i % 10 == 1 and i % 100 != 11:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def east_slavic(n: Any, variants: Mapping[Any, Any] | None = None) -> PluralCategory:
    """Russian, Ukrainian, Belarusian."""
    i = _integral(n)
    if i is None:
        return PluralCategory.OTHER

    i10 = i % 10
    i100 = i % 100
    if i10 == 1 and i100 != 11:
        return PluralCategory.ONE
    if 2 <= i10 <= 4 and not (12 <= i100 <= 14):
        return PluralCategory.FEW
    return PluralCategory.MANY


_RULES: dict[str, PluralRuleFunc] = {}

for _lang in ["en", "de", "nl", "it", "es", "pt", "sv", "da", "no", "fi", "et"]:
    _RULES[_lang] = english
_RULES["fr"] = french
_RULES["is"] = icelandic_category
for _lang in ["ru", "uk", "be"]:
    _RULES[_lang] = east_slavic


def get_plural_rule(language: str) -> PluralRuleFunc | None:
    """Return the built-in pluralize function for a language code.

    Region suffixes are ignored (``"pt_BR"`` and ``"pt-BR"`` map to ``"pt"``).
    """
    lang = language.split("_")[0].split("-")[0].lower()
    return _RULES.get(lang)
