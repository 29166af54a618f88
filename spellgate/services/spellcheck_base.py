"""
Abstract base class and errors for spell-check backends.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence


class SpellCheckerError(Exception):
    """Base exception for tool or configuration failures of the gate."""
    pass


class SpellCheckerUnavailableError(SpellCheckerError):
    """Raised when the backend's executable or package is missing."""

    def __init__(self, dependency: str, message: str = ""):
        self.dependency = dependency
        super().__init__(message or f"Spell-check backend dependency not available: {dependency}")


class DictionaryBuildError(SpellCheckerError):
    """Raised when the personal dictionary cannot be compiled."""
    pass


class GateConfigurationError(SpellCheckerError):
    """Raised when gate inputs (word list, corpus root, base dictionary) are unusable."""
    pass


class SpellChecker(ABC):
    """
    Abstract base class for spell-check backends.

    A backend compiles a project word list into a personal dictionary and
    lists the words of a text that are absent from both its standard
    dictionary and any supplementary personal dictionaries.
    """

    @abstractmethod
    def build_dictionary(self, word_list_path: Path, dictionary_path: Path) -> int:
        """
        Compile a word list into a personal dictionary artifact.

        Args:
            word_list_path: Word list file (one word per line)
            dictionary_path: Where to write the compiled dictionary

        Returns:
            Number of words compiled

        Raises:
            DictionaryBuildError: If compilation fails
            SpellCheckerUnavailableError: If the backend is missing
        """
        pass

    @abstractmethod
    def find_unknown_words(self, text: str, extra_dictionaries: Sequence[Path] = ()) -> List[str]:
        """
        List words of text not found in any dictionary.

        Args:
            text: Text to check
            extra_dictionaries: Personal dictionaries accepted alongside the standard one

        Returns:
            Flagged words in text order, repeats included

        Raises:
            SpellCheckerError: If the backend fails
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend can run in this environment."""
        pass

    @abstractmethod
    def get_language(self) -> str:
        """Get the language tag this backend checks against (e.g., 'en')."""
        pass

    @abstractmethod
    def get_backend_name(self) -> str:
        """Get the backend name used in reports (e.g., 'aspell')."""
        pass


def read_word_list(word_list_path: Path) -> List[str]:
    """
    Read a word list, dropping blank lines and repeats.

    Args:
        word_list_path: Word list file

    Returns:
        Words in file order

    Raises:
        GateConfigurationError: If the file cannot be read
    """
    try:
        with open(word_list_path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise GateConfigurationError(f"Cannot read word list {word_list_path}: {e}") from e

    words = []
    seen = set()
    for line in lines:
        word = line.strip()
        if word and word not in seen:
            seen.add(word)
            words.append(word)
    return words
