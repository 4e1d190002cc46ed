"""Tests for plural and variant selection."""

import logging

import pytest

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
    magnitude,
    select_variant,
    wildcard_variant,
)


HITS = {0: "No Hits", 1: "{n} Hit", 2: "{n} Hitse", "n": "{n} Hits"}


class TestLookupVariant:
    """Test discriminator lookup."""

    def test_int_and_str_keys_are_equivalent(self):
        """Test 1, "1" and 1.0 address the same entry."""
        assert lookup_variant({1: "a"}, "1") == "a"
        assert lookup_variant({"1": "a"}, 1) == "a"
        assert lookup_variant({"2": "b"}, 2.0) == "b"

    def test_enum_discriminator(self):
        """Test enum discriminators match their value."""
        assert lookup_variant({"one": "single"}, PluralCategory.ONE) == "single"

    def test_none_entries_are_absent(self):
        """Test entries holding None are skipped."""
        assert lookup_variant({1: None, "1": "str"}, 1) == "str"
        assert lookup_variant({1: None}, 1) is None

    def test_missing_and_unhashable(self):
        assert lookup_variant(HITS, 7) is None
        assert lookup_variant(HITS, None) is None
        assert lookup_variant(HITS, ["x"]) is None

    def test_wildcards(self):
        assert wildcard_variant({"n": "default"}) == "default"
        assert wildcard_variant({"*": "star"}) == "star"
        assert wildcard_variant({1: "one"}) is None


class TestMagnitude:
    """Test magnitude normalization."""

    def test_absolute_value(self):
        assert magnitude(-13) == 13
        assert magnitude(2.5) == 2.5

    def test_integral_float_becomes_int(self):
        result = magnitude(-3.0)
        assert result == 3
        assert isinstance(result, int)


class TestSelectVariant:
    """Test select_variant precedence."""

    def test_identity_default(self):
        """Test the magnitude is the default discriminator."""
        assert identity_pluralize(4, HITS) == 4
        assert select_variant(HITS, 0) == "No Hits"
        assert select_variant(HITS, 2) == "{n} Hitse"

    def test_falls_back_to_wildcard(self):
        """Test unknown counts use the wildcard entry."""
        assert select_variant(HITS, 4) == "{n} Hits"
        assert select_variant({"*": "anything"}, 9) == "anything"

    def test_explicit_entry_beats_pluralize(self):
        """Test explicit numeric entries win regardless of the rule."""
        variants = {13: "Baaahd luck!", "p": "plural", "n": "default"}
        rule = lambda n, v: "p"  # noqa: E731

        assert select_variant(variants, 13, rule) == "Baaahd luck!"
        assert select_variant(variants, 12, rule) == "plural"

    def test_negative_counts_match_explicit_entries(self):
        """Test explicit entries match regardless of sign."""
        assert select_variant({13: "thirteen", "n": "default"}, -13) == "thirteen"
        assert select_variant(HITS, -1) == "{n} Hit"

    def test_pluralize_receives_magnitude_and_variants(self):
        """Test the rule is called with the magnitude and the mapping."""
        calls = []

        def rule(n, variants):
            calls.append((n, variants))
            return "other"

        assert select_variant({"other": "x"}, -7, rule) == "x"
        assert calls == [(7, {"other": "x"})]

    def test_nothing_matches(self):
        """Test None is returned without a wildcard."""
        assert select_variant({1: "one"}, 5) is None
        assert select_variant({}, 5) is None

    def test_debug_logs_missing_form(self, caplog):
        """Test missing forms are logged in debug mode."""
        with caplog.at_level(logging.WARNING, logger="microtranslate"):
            select_variant({1: "one"}, 5, debug=True)

        assert 'No plural forms found for count "5"' in caplog.text


class TestBuiltinRules:
    """Test the ready-made pluralize functions."""

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, PluralCategory.ONE),
            (21, PluralCategory.ONE),
            (101, PluralCategory.ONE),
            (0, PluralCategory.OTHER),
            (2, PluralCategory.OTHER),
            (11, PluralCategory.OTHER),
            (111, PluralCategory.OTHER),
            (2.5, PluralCategory.OTHER),
        ],
    )
    def test_icelandic_category(self, n, expected):
        assert icelandic_category(n) == expected

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 0), (1, 1), (2, 2), (11, 2), (21, 1), (29, 2), (101, 1), (111, 2)],
    )
    def test_icelandic_numeric(self, n, expected):
        """Test the classic rule returns 0 for zero, 1 singular, 2 plural."""
        assert icelandic(n) == expected

    def test_english(self):
        assert english(1) == PluralCategory.ONE
        assert english(1.0) == PluralCategory.ONE
        assert english(0) == PluralCategory.OTHER
        assert english(2) == PluralCategory.OTHER

    def test_french(self):
        assert french(0) == PluralCategory.ONE
        assert french(1.5) == PluralCategory.ONE
        assert french(2) == PluralCategory.OTHER

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, PluralCategory.ONE),
            (21, PluralCategory.ONE),
            (3, PluralCategory.FEW),
            (22, PluralCategory.FEW),
            (5, PluralCategory.MANY),
            (11, PluralCategory.MANY),
            (12, PluralCategory.MANY),
            (1.5, PluralCategory.OTHER),
        ],
    )
    def test_east_slavic(self, n, expected):
        assert east_slavic(n) == expected

    def test_category_keys_select_forms(self):
        """Test category codes returned by rules select string-keyed forms."""
        variants = {0: "Engar kindur", "one": "{n} kind", "other": "{n} kindur"}
        assert select_variant(variants, 21, icelandic_category) == "{n} kind"
        assert select_variant(variants, 11, icelandic_category) == "{n} kindur"
        assert select_variant(variants, 0, icelandic_category) == "Engar kindur"

    def test_get_plural_rule(self):
        """Test language codes map to rules, ignoring regions."""
        assert get_plural_rule("is") is icelandic_category
        assert get_plural_rule("ru_RU") is east_slavic
        assert get_plural_rule("pt-BR") is english
        assert get_plural_rule("FR") is french
        assert get_plural_rule("xx") is None
