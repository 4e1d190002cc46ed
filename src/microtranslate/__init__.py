"""Translation lookup with placeholders and multiple plural forms.

microtranslate renders messages from a caller-supplied nested dictionary:

- Namespaced keys (``"moduleA::title"``)
- Named and positional placeholders (``{thing}``, ``{0}``)
- Count injection into ``{n}``
- Variant mappings with explicit, computed and wildcard plural forms
- Optional array output for embedding rich values
- One-time ``{{alias}}`` expansion

Example:
    from microtranslate import make_translator

    t = make_translator({
        "like": "I like {thing}!",
        "hits": {0: "No Hits", 1: "{n} Hit", "n": "{n} Hits"},
    })

    t("like", {"thing": "Sun"})  # -> "I like Sun!"
    t("hits", 1)                 # -> "1 Hit"
    t.arr("like", {"thing": sun_icon})  # -> ["I like ", sun_icon, "!"]
"""

from microtranslate.aliases import resolve_aliases
from microtranslate.assembler import assemble
from microtranslate.compiler import (
    Compiled,
    CompiledTemplate,
    Literal,
    TemplateCache,
    compile_template,
    scan_placeholders,
)
from microtranslate.errors import (
    AliasError,
    AliasTargetError,
    CircularAliasError,
    TranslationError,
    UnresolvedAliasError,
)
from microtranslate.options import TranslatorOptions
from microtranslate.plural import (
    PluralCategory,
    east_slavic,
    english,
    french,
    get_plural_rule,
    icelandic,
    icelandic_category,
    identity_pluralize,
    lookup_variant,
    select_variant,
)
from microtranslate.resolver import resolve_key
from microtranslate.translator import (
    CallArguments,
    Translator,
    make_translator,
    normalize_arguments,
)

__version__ = "1.0.0"

__all__ = [
    # Translator
    "Translator",
    "make_translator",
    "CallArguments",
    "normalize_arguments",
    "TranslatorOptions",
    # Templates
    "Literal",
    "Compiled",
    "CompiledTemplate",
    "TemplateCache",
    "compile_template",
    "scan_placeholders",
    "assemble",
    # Lookup
    "resolve_key",
    "resolve_aliases",
    # Plurals
    "PluralCategory",
    "select_variant",
    "lookup_variant",
    "identity_pluralize",
    "get_plural_rule",
    "english",
    "french",
    "icelandic",
    "icelandic_category",
    "east_slavic",
    # Errors
    "TranslationError",
    "AliasError",
    "UnresolvedAliasError",
    "CircularAliasError",
    "AliasTargetError",
]
