"""
Spell-check backend using SymSpellPy, no external executable required.
"""
import importlib.resources
import pickle
import re
import time
from pathlib import Path
from typing import List, Optional, Sequence

from symspellpy import SymSpell, Verbosity

from spellgate.services.spellcheck_base import (
    DictionaryBuildError,
    GateConfigurationError,
    SpellChecker,
    SpellCheckerError,
    read_word_list,
)
from spellgate.utils.logger import get_logger


logger = get_logger("services.spellcheck_symspell")

# Letters in any script, with inner apostrophes kept (it's, Haskell's)
WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")

BUNDLED_DICTIONARIES = {
    "en": "frequency_dictionary_en_82_765.txt",
}


class SymSpellSpellChecker(SpellChecker):
    """
    Spell-check backend using exact SymSpell lookups.

    The standard dictionary is loaded once per instance, either from the
    frequency dictionary bundled with symspellpy or from a word list file.
    Personal dictionaries are pickled SymSpell indexes.
    """

    BACKEND_NAME = "symspell"

    def __init__(
        self,
        language: str = "en",
        base_dictionary_path: Optional[str] = None,
        prefix_length: int = 7,
        min_word_length: int = 2,
    ):
        """
        Initialize SymSpell backend.

        Args:
            language: Language tag, selects the bundled dictionary when no base path is given
            base_dictionary_path: Standard dictionary file ("word" or "word count" per line)
            prefix_length: SymSpell optimization parameter
            min_word_length: Skip words shorter than this
        """
        self._language = language
        self._base_dictionary_path = Path(base_dictionary_path) if base_dictionary_path else None
        self._prefix_length = prefix_length
        self._min_word_length = min_word_length
        self._base: Optional[SymSpell] = None

        logger.debug(
            "SymSpell backend initialized",
            language=language,
            base_dictionary_path=str(self._base_dictionary_path),
            min_word_length=min_word_length,
        )

    def _new_index(self) -> SymSpell:
        # Edit distance 0: only exact membership is needed
        return SymSpell(max_dictionary_edit_distance=0, prefix_length=self._prefix_length)

    def _load_base(self) -> SymSpell:
        """Load the standard dictionary on first use."""
        if self._base is not None:
            return self._base

        start_time = time.time()
        index = self._new_index()

        if self._base_dictionary_path is not None:
            if not self._base_dictionary_path.exists():
                raise GateConfigurationError(
                    f"Base dictionary not found: {self._base_dictionary_path}"
                )
            word_count = 0
            with open(self._base_dictionary_path, "r", encoding="utf-8") as f:
                for line in f:
                    parts = line.split()
                    if not parts:
                        continue
                    count = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else 1
                    index.create_dictionary_entry(parts[0], max(count, 1))
                    word_count += 1
            source = str(self._base_dictionary_path)
        else:
            bundled = BUNDLED_DICTIONARIES.get(primary_language(self._language))
            if bundled is None:
                raise GateConfigurationError(
                    f"No bundled symspell dictionary for language '{self._language}'; "
                    f"set SYMSPELL_BASE_DICTIONARY_PATH"
                )
            source = str(importlib.resources.files("symspellpy") / bundled)
            if not index.load_dictionary(source, term_index=0, count_index=1, encoding="utf-8"):
                raise GateConfigurationError(f"Bundled dictionary missing: {source}")
            word_count = len(index.words)

        logger.info(
            "Standard dictionary loaded",
            word_count=word_count,
            load_time_seconds=round(time.time() - start_time, 2),
            source=source,
        )
        self._base = index
        return index

    def build_dictionary(self, word_list_path: Path, dictionary_path: Path) -> int:
        """
        Build a SymSpell index from the word list and pickle it.

        Args:
            word_list_path: Word list file (one word per line)
            dictionary_path: Output pickle path

        Returns:
            Number of words compiled
        """
        words = read_word_list(Path(word_list_path))
        dictionary_path = Path(dictionary_path)

        index = self._new_index()
        for word in words:
            index.create_dictionary_entry(word, 1)

        try:
            dictionary_path.parent.mkdir(parents=True, exist_ok=True)
            with open(dictionary_path, "wb") as f:
                pickle.dump(index, f)
        except OSError as e:
            logger.error(
                "Failed to save personal dictionary",
                error=str(e),
                dictionary_path=str(dictionary_path),
            )
            raise DictionaryBuildError(f"Cannot write {dictionary_path}: {e}") from e

        logger.info(
            "Personal dictionary built",
            word_count=len(words),
            dictionary_path=str(dictionary_path),
        )
        return len(words)

    def _load_personal(self, dictionary_path: Path) -> SymSpell:
        """Load a pickled personal dictionary."""
        try:
            with open(dictionary_path, "rb") as f:
                index = pickle.load(f)
        except FileNotFoundError as e:
            raise GateConfigurationError(f"Personal dictionary not found: {dictionary_path}") from e
        except (OSError, pickle.UnpicklingError, EOFError) as e:
            raise SpellCheckerError(f"Cannot load personal dictionary {dictionary_path}: {e}") from e

        if not isinstance(index, SymSpell):
            raise SpellCheckerError(f"{dictionary_path} is not a symspell dictionary")
        return index

    def find_unknown_words(self, text: str, extra_dictionaries: Sequence[Path] = ()) -> List[str]:
        """
        List words absent from the standard and personal dictionaries.

        Args:
            text: Text to check
            extra_dictionaries: Pickled personal dictionaries

        Returns:
            Flagged words in text order, original case
        """
        indexes = [self._load_base()]
        indexes.extend(self._load_personal(Path(path)) for path in extra_dictionaries)

        unknown = []
        for word in self._tokenize(text):
            if len(word) < self._min_word_length:
                continue
            if not any(self._is_known(index, word) for index in indexes):
                unknown.append(word)
        return unknown

    @staticmethod
    def _is_known(index: SymSpell, word: str) -> bool:
        """Exact lookup of word, its lowercase form, and its stem before a final apostrophe."""
        candidates = [word, word.lower()]
        if "'" in word:
            stem = word.rsplit("'", 1)[0]
            candidates.extend([stem, stem.lower()])
        for candidate in candidates:
            if index.lookup(candidate, Verbosity.TOP, max_edit_distance=0):
                return True
        return False

    def _tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into words, normalizing typographic apostrophes.

        Args:
            text: Text to tokenize

        Returns:
            List of words (preserving original case)
        """
        return [word.replace("’", "'") for word in WORD_PATTERN.findall(text)]

    def is_available(self) -> bool:
        """symspellpy is imported at module load, so the backend is always available."""
        return True

    def get_language(self) -> str:
        """Get language tag."""
        return self._language

    def get_backend_name(self) -> str:
        """Get backend name."""
        return self.BACKEND_NAME


def primary_language(language: str) -> str:
    """Primary subtag of a language tag: 'en_GB' and 'en-US' both give 'en'."""
    return language.replace("-", "_").split("_")[0].lower()
