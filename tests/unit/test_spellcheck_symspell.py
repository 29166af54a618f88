"""
Unit tests for the SymSpell backend.
"""
import pickle

import pytest

from spellgate.services.spellcheck_base import GateConfigurationError, SpellCheckerError
from spellgate.services.spellcheck_symspell import SymSpellSpellChecker, WORD_PATTERN, primary_language


class TestWordPattern:
    """Tests for the tokenization regex."""

    def test_basic_words(self):
        assert WORD_PATTERN.findall("Functors and monads") == ["Functors", "and", "monads"]

    def test_numbers_and_underscores_excluded(self):
        words = WORD_PATTERN.findall("Chapter 12 covers snake_case")
        assert "12" not in words
        assert words == ["Chapter", "covers", "snake", "case"]

    def test_inner_apostrophe_kept(self):
        assert WORD_PATTERN.findall("Haskell's types, 'quoted'") == ["Haskell's", "types", "quoted"]

    def test_non_ascii_letters(self):
        assert WORD_PATTERN.findall("naïve café") == ["naïve", "café"]


class TestSymSpellSpellChecker:
    """Tests for SymSpellSpellChecker against a small standard dictionary."""

    @pytest.fixture
    def checker(self, standard_dictionary_path):
        return SymSpellSpellChecker(base_dictionary_path=str(standard_dictionary_path))

    @pytest.fixture
    def personal_dictionary(self, checker, tmp_path):
        word_list = tmp_path / "words"
        word_list.write_text("aspell\nnginx\nHaskell\n", encoding="utf-8")
        dictionary = tmp_path / "spell" / "words.pkl"
        checker.build_dictionary(word_list, dictionary)
        return dictionary

    def test_build_dictionary_writes_pickle(self, checker, tmp_path):
        """Test word list compiles to a pickle file."""
        word_list = tmp_path / "words"
        word_list.write_text("nginx\n\nnginx\naspell\n", encoding="utf-8")
        dictionary = tmp_path / "nested" / "words.pkl"

        count = checker.build_dictionary(word_list, dictionary)

        assert count == 2
        assert dictionary.exists()

    def test_known_words_pass(self, checker, personal_dictionary):
        """Test standard and personal words are both accepted."""
        text = "I used aspell and nginx today."
        assert checker.find_unknown_words(text, [personal_dictionary]) == []

    def test_typo_flagged(self, checker, personal_dictionary):
        assert checker.find_unknown_words("Thsi is a typo.", [personal_dictionary]) == ["Thsi"]

    def test_repeats_kept_in_text_order(self, checker):
        assert checker.find_unknown_words("teh blog teh Thsi") == ["teh", "teh", "Thsi"]

    def test_capitalized_standard_word_accepted(self, checker):
        """Test lowercase dictionary entries accept capitalized text."""
        assert checker.find_unknown_words("Category Theory") == []

    def test_personal_words_case_sensitive(self, checker, personal_dictionary):
        """Test a capitalized personal entry does not accept other casings."""
        assert checker.find_unknown_words("HASKELL Haskell", [personal_dictionary]) == ["HASKELL"]

    def test_possessive_accepted(self, checker, personal_dictionary):
        assert checker.find_unknown_words("Haskell's monad", [personal_dictionary]) == []

    def test_typographic_apostrophe_normalized(self, checker, personal_dictionary):
        assert checker.find_unknown_words("Haskell’s monad", [personal_dictionary]) == []

    def test_without_personal_dictionary(self, checker):
        assert checker.find_unknown_words("nginx blog") == ["nginx"]

    def test_short_words_skipped(self, standard_dictionary_path):
        checker = SymSpellSpellChecker(
            base_dictionary_path=str(standard_dictionary_path),
            min_word_length=3,
        )
        assert checker.find_unknown_words("xy qz blog") == []

    def test_missing_base_dictionary(self, tmp_path):
        checker = SymSpellSpellChecker(base_dictionary_path=str(tmp_path / "missing.txt"))
        with pytest.raises(GateConfigurationError, match="Base dictionary not found"):
            checker.find_unknown_words("text")

    def test_unknown_language_without_base(self):
        checker = SymSpellSpellChecker(language="sl")
        with pytest.raises(GateConfigurationError, match="SYMSPELL_BASE_DICTIONARY_PATH"):
            checker.find_unknown_words("besedilo")

    def test_missing_personal_dictionary(self, checker, tmp_path):
        with pytest.raises(GateConfigurationError, match="Personal dictionary not found"):
            checker.find_unknown_words("blog", [tmp_path / "missing.pkl"])

    def test_foreign_pickle_rejected(self, checker, tmp_path):
        path = tmp_path / "other.pkl"
        with open(path, "wb") as f:
            pickle.dump({"not": "symspell"}, f)

        with pytest.raises(SpellCheckerError, match="not a symspell dictionary"):
            checker.find_unknown_words("blog", [path])

    def test_base_dictionary_loaded_once(self, checker):
        """Test the standard dictionary is cached on the instance."""
        checker.find_unknown_words("blog")
        base = checker._base
        checker.find_unknown_words("post")
        assert checker._base is base

    def test_bundled_english_dictionary(self):
        """Test the default English dictionary shipped with symspellpy."""
        checker = SymSpellSpellChecker(language="en")
        assert checker.find_unknown_words("The house is green. Thsi is wrong.") == ["Thsi"]

    def test_tokenize_preserves_case(self, checker):
        assert checker._tokenize("Ljubljana SLOVENIJA") == ["Ljubljana", "SLOVENIJA"]

    def test_metadata(self, checker):
        assert checker.get_backend_name() == "symspell"
        assert checker.get_language() == "en"
        assert checker.is_available() is True

    def test_regional_english_uses_bundled_dictionary(self):
        """Test en_GB and en-US fall back to the bundled English dictionary."""
        for language in ("en_GB", "en-US"):
            checker = SymSpellSpellChecker(language=language)
            assert checker.find_unknown_words("The house is green. Thsi") == ["Thsi"]
            assert checker.get_language() == language

    def test_regional_unknown_language_without_base(self):
        checker = SymSpellSpellChecker(language="sl_SI")
        with pytest.raises(GateConfigurationError, match="SYMSPELL_BASE_DICTIONARY_PATH"):
            checker.find_unknown_words("besedilo")


def test_primary_language():
    """Test region and script suffixes are dropped from language tags."""
    assert primary_language("en") == "en"
    assert primary_language("en_GB") == "en"
    assert primary_language("en-US") == "en"
    assert primary_language("EN") == "en"
    assert primary_language("sl_SI") == "sl"
