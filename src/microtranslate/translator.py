"""The translation function.

:class:`Translator` ties key lookup, variant selection, template
compilation and placeholder assembly together behind one callable::

    t = make_translator({
        "like": "I like {thing}!",
        "hits": {0: "No Hits", 1: "{n} Hit", "n": "{n} Hits"},
        "moduleA": {"title": "Module A"},
    })

    t("like", {"thing": "Sun"})   # -> "I like Sun!"
    t("hits", 5)                  # -> "5 Hits"
    t("moduleA::title")           # -> "Module A"

Count and replacements may be passed in either order after the key. The
``keys`` and ``opts`` attributes are live: reassigning or mutating them
affects the very next call.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from microtranslate.aliases import resolve_aliases
from microtranslate.assembler import COUNT_PLACEHOLDER, assemble
from microtranslate.compiler import TemplateCache
from microtranslate.options import TranslatorOptions
from microtranslate.plural import lookup_variant, select_variant, wildcard_variant
from microtranslate.resolver import resolve_key

logger = logging.getLogger(__name__)

Replacements = Mapping[str, Any] | Sequence[Any]


# =============================================================================
# Argument normalization
# =============================================================================


@dataclass(frozen=True)
class CallArguments:
    """Normalized optional arguments of a translation call.

    Attributes:
        replacements: Placeholder values (mapping or positional sequence).
        discriminator: Count or subkey exactly as the caller passed it.
        number: Numeric value of the discriminator when it is a count.
    """

    replacements: Replacements = field(default_factory=dict)
    discriminator: Any = None
    number: int | float | None = None

    @property
    def has_count(self) -> bool:
        return self.number is not None


def _is_structure(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _as_number(value: Any) -> int | float | None:
    """Numeric value of ``value`` if it is a finite number or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def normalize_arguments(arg2: Any = None, arg3: Any = None) -> CallArguments:
    """Work out which of the two optional arguments is which.

    A mapping or a non-string sequence is the replacements; a number or a
    string is the count/subkey. The first argument of each kind wins.
    """
    replacements: Replacements | None = None
    discriminator = None

    for arg in (arg2, arg3):
        if arg is None:
            continue
        if _is_structure(arg):
            if replacements is None:
                replacements = arg
        elif discriminator is None and (_as_number(arg) is not None or isinstance(arg, str)):
            discriminator = arg

    return CallArguments(
        replacements={} if replacements is None else replacements,
        discriminator=discriminator,
        number=_as_number(discriminator),
    )


def _with_count(replacements: Replacements, count: Any) -> Mapping[str, Any]:
    """Working copy of ``replacements`` with ``n`` set to ``count``.

    The caller's object is never modified; positional sequences become a
    mapping keyed by ``"0"``, ``"1"``, ...
    """
    if isinstance(replacements, Mapping):
        if replacements.get(COUNT_PLACEHOLDER) is not None:
            return replacements
        working = dict(replacements)
    else:
        working = {str(index): value for index, value in enumerate(replacements)}
    working[COUNT_PLACEHOLDER] = count
    return working


# =============================================================================
# Translator
# =============================================================================


class Translator:
    """Callable translation function over a caller-owned dictionary.

    Example:
        t = Translator({"hits": {0: "No Hits", "n": "{n} Hits"}}, {"debug": True})
        t("hits", 0)        # -> "No Hits"
        t("hits", -3)       # -> "-3 Hits"
        t("missing")        # -> "@@missing@@"
    """

    def __init__(
        self,
        keys: Mapping[str, Any] | None = None,
        opts: TranslatorOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            keys: Translation dictionary. Held by reference, not copied.
            opts: Options record or plain mapping of options.

        Raises:
            AliasError: ``resolve_aliases`` is on and the dictionary contains
                a broken alias.
        """
        self.opts = opts
        self.keys = keys
        self._cache = TemplateCache()

        current = self.options
        if current.resolve_aliases:
            self.keys = resolve_aliases(self.keys, current.splitter)

    @property
    def keys(self) -> Mapping[str, Any]:
        """The live translation dictionary."""
        return self._keys

    @keys.setter
    def keys(self, value: Mapping[str, Any] | None) -> None:
        self._keys = value if isinstance(value, Mapping) else {}

    @keys.deleter
    def keys(self) -> None:
        self._keys = {}

    @property
    def opts(self) -> TranslatorOptions | Mapping[str, Any]:
        """The live options object, exactly as the caller supplied it.

        Mappings are held by reference and read on every call, so changes
        to the caller's dict take effect immediately.
        """
        return self._opts

    @opts.setter
    def opts(self, value: TranslatorOptions | Mapping[str, Any] | None) -> None:
        if isinstance(value, (TranslatorOptions, Mapping)):
            self._opts = value
        else:
            self._opts = TranslatorOptions.coerce(value)

    @opts.deleter
    def opts(self) -> None:
        self._opts = TranslatorOptions()

    @property
    def options(self) -> TranslatorOptions:
        """Options in effect right now, resolved from :attr:`opts`."""
        return TranslatorOptions.coerce(self._opts)

    @property
    def template_cache(self) -> TemplateCache:
        """Compiled templates seen by this translator."""
        return self._cache

    def __call__(self, key: str, arg2: Any = None, arg3: Any = None) -> str | list[Any]:
        """Translate ``key``.

        Args:
            key: Lookup key, optionally namespaced (``"ns::key"``).
            arg2: Count, subkey or replacements.
            arg3: Count, subkey or replacements (whichever ``arg2`` is not).

        Returns:
            The rendered string, or a segment list in array mode.
        """
        return self._translate(key, normalize_arguments(arg2, arg3))

    def arr(self, key: str, arg2: Any = None, arg3: Any = None) -> str | list[Any]:
        """Translate ``key`` in array-output mode for this call only."""
        return self._translate(key, normalize_arguments(arg2, arg3), True)

    def _translate(
        self,
        key: str,
        args: CallArguments,
        as_array: bool | None = None,
    ) -> str | list[Any]:
        opts = self.options
        if as_array is None:
            as_array = opts.array
        translation = resolve_key(self.keys, key, opts.splitter)

        if isinstance(translation, Mapping) and args.discriminator is not None:
            translation = self._select(translation, args, opts)

        if not isinstance(translation, str):
            return self._missing(key, args, opts)

        replacements = args.replacements
        if args.has_count:
            replacements = _with_count(replacements, args.discriminator)

        compiled = self._cache.compile(translation)
        count = args.discriminator if args.has_count else None
        return assemble(compiled, replacements, count, as_array, opts.debug)

    def _select(
        self,
        variants: Mapping[Any, Any],
        args: CallArguments,
        opts: TranslatorOptions,
    ) -> Any:
        selected = lookup_variant(variants, args.discriminator)
        if selected is not None:
            return selected

        if args.has_count:
            return select_variant(variants, args.number, opts.pluralize, opts.debug)

        selected = wildcard_variant(variants)
        if selected is None and opts.debug:
            logger.warning(f'No variant "{args.discriminator}" found in {dict(variants)!r}')
        return selected

    def _missing(self, key: str, args: CallArguments, opts: TranslatorOptions) -> str:
        if not opts.debug:
            return key

        logger.warning(f'Translation for "{key}" not found.')
        if args.discriminator is not None:
            return f"@@{key}.{args.discriminator}@@"
        return f"@@{key}@@"


def make_translator(
    dictionary: Mapping[str, Any] | None = None,
    options: TranslatorOptions | Mapping[str, Any] | None = None,
) -> Translator:
    """Create a translation function for ``dictionary``.

    Args:
        dictionary: Nested mapping of keys to templates, variant mappings
            and namespaces. Defaults to an empty dictionary.
        options: :class:`TranslatorOptions` or a mapping such as
            ``{"debug": True, "pluralize": icelandic}``.

    Returns:
        A callable :class:`Translator`.
    """
    return Translator(dictionary, options)
