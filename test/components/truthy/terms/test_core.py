import logging

import pytest
from pydantic import ValidationError

from truthy.terms import (
    DEFAULT_TERMS,
    STOCK_TERMS,
    TermSet,
    resolve,
    stock_term_strings,
)


class TestStockTermStrings:
    """Test the built-in Term Set."""

    def test_minimum_truey_content(self):
        """Test that the required truey words are stock terms."""
        terms = stock_term_strings()
        for term in ("true", "yes", "y", "1", "t"):
            assert term in terms.truey_precise or term in terms.truey_lowercase

    def test_minimum_falsey_content(self):
        """Test that the required falsey words are stock terms."""
        terms = stock_term_strings()
        for term in ("false", "no", "n", "0", "f"):
            assert term in terms.falsey_precise or term in terms.falsey_lowercase

    def test_common_words_are_in_lowercase_lists(self):
        """Case-insensitive stock matching relies on the lowercase lists."""
        terms = stock_term_strings()
        assert {"true", "yes", "on"} <= set(terms.truey_lowercase)
        assert {"false", "no", "off"} <= set(terms.falsey_lowercase)

    def test_returns_same_instance(self):
        """Test that the stock terms are a single shared instance."""
        assert stock_term_strings() is STOCK_TERMS


class TestResolve:
    """Test resolving Term Set values to concrete lists."""

    def test_default_sentinel_resolves_to_stock(self):
        """Test that the default sentinel selects the stock terms."""
        assert resolve(DEFAULT_TERMS) is STOCK_TERMS

    def test_none_resolves_to_stock(self):
        """Test that None behaves like the default sentinel."""
        assert resolve(None) is STOCK_TERMS
        assert resolve() is STOCK_TERMS

    def test_explicit_terms_used_verbatim(self):
        """Test that explicit lists are neither deduplicated nor stripped."""
        terms = TermSet(truey_precise=["Y", "Y", " padded "])
        resolved = resolve(terms)
        assert resolved is terms
        assert resolved.truey_precise == ("Y", "Y", " padded ")

    def test_rejects_other_types(self):
        """Test that a bare list is not accepted as a Term Set."""
        with pytest.raises(TypeError):
            resolve(["true"])


class TestTermSet:
    """Test the TermSet model."""

    def test_defaults_are_empty(self):
        """Test that every list defaults to empty."""
        terms = TermSet()
        assert terms.is_empty
        assert terms.falsey_precise == ()
        assert terms.truey_lowercase == ()

    def test_stock_is_not_empty(self):
        """Test is_empty on the stock terms."""
        assert not STOCK_TERMS.is_empty

    def test_lists_become_tuples(self):
        """Test that lists are stored as tuples."""
        terms = TermSet(falsey_lowercase=["nyet", "nope"])
        assert terms.falsey_lowercase == ("nyet", "nope")

    def test_is_frozen(self):
        """Test that a Term Set cannot be mutated."""
        terms = TermSet()
        with pytest.raises(ValidationError):
            terms.truey_precise = ("Y",)

    def test_unknown_list_rejected(self):
        """Test that unknown list names are rejected."""
        with pytest.raises(ValidationError):
            TermSet(maybe_precise=["perhaps"])

    def test_replace_keeps_other_lists(self):
        """Test replacing one list without touching the stock terms."""
        custom = stock_term_strings().replace(truey_lowercase=["da", "yup"])
        assert custom.truey_lowercase == ("da", "yup")
        assert custom.falsey_lowercase == STOCK_TERMS.falsey_lowercase
        assert custom.truey_precise == STOCK_TERMS.truey_precise
        assert STOCK_TERMS.truey_lowercase == ("true", "yes", "on", "1", "y", "t")

    def test_conflicting_terms_tolerated_and_logged(self, caplog):
        """Test that overlapping falsey and truey terms only warn."""
        with caplog.at_level(logging.WARNING, logger="truthy.terms.core"):
            TermSet(falsey_lowercase=["maybe"], truey_lowercase=["maybe"])
        assert "maybe" in caplog.text
        assert "falsey_lowercase" in caplog.text

    def test_equal_term_sets_compare_equal(self):
        """Test value equality of Term Sets."""
        assert TermSet(truey_precise=["Y"]) == TermSet(truey_precise=("Y",))
