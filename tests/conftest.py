"""
Pytest configuration and fixtures for spellgate tests.
"""
import re
from pathlib import Path
from typing import Callable, Dict, List, Sequence

import pytest

from spellgate.schemas.spellcheck import GateConfig
from spellgate.services.spellcheck_base import SpellChecker, read_word_list


# Small standard dictionary shared by the fake backend and the symspell tests
STANDARD_WORDS = [
    "a", "and", "i", "is", "it", "the", "this", "today", "typo", "used",
    "functor", "monad", "category", "theory", "blog", "post", "about",
]


class FakeSpellChecker(SpellChecker):
    """In-memory backend: plain-text personal dictionary, regex tokenizer."""

    def __init__(self, standard_words: Sequence[str] = STANDARD_WORDS, language: str = "en"):
        self.standard_words = set(standard_words)
        self.language = language
        self.build_calls: List[tuple] = []
        self.checked_texts: List[str] = []

    def build_dictionary(self, word_list_path: Path, dictionary_path: Path) -> int:
        words = read_word_list(word_list_path)
        dictionary_path.parent.mkdir(parents=True, exist_ok=True)
        dictionary_path.write_text("\n".join(words), encoding="utf-8")
        self.build_calls.append((word_list_path, dictionary_path))
        return len(words)

    def find_unknown_words(self, text: str, extra_dictionaries: Sequence[Path] = ()) -> List[str]:
        self.checked_texts.append(text)
        known = set(self.standard_words)
        for path in extra_dictionaries:
            known.update(Path(path).read_text(encoding="utf-8").split())
        return [
            word for word in re.findall(r"[A-Za-z]+", text)
            if word not in known and word.lower() not in known
        ]

    def is_available(self) -> bool:
        return True

    def get_language(self) -> str:
        return self.language

    def get_backend_name(self) -> str:
        return "fake"


@pytest.fixture
def fake_checker() -> FakeSpellChecker:
    """Backend double that never spawns a subprocess."""
    return FakeSpellChecker()


@pytest.fixture
def standard_dictionary_path(tmp_path) -> Path:
    """Standard dictionary file in 'word count' format."""
    path = tmp_path / "standard.txt"
    path.write_text("".join(f"{word} 100\n" for word in STANDARD_WORDS), encoding="utf-8")
    return path


@pytest.fixture
def make_project(tmp_path) -> Callable[..., GateConfig]:
    """
    Factory building a project tree and returning its GateConfig.

    Usage:
        config = make_project(words=["nginx"], documents={"post.md": "text"})
    """

    def _make(words: Sequence[str] = (), documents: Dict[str, str] = None) -> GateConfig:
        root = tmp_path / "blog"
        root.mkdir(exist_ok=True)
        spell_dir = root / "spell"
        spell_dir.mkdir(exist_ok=True)
        word_list = spell_dir / "words"
        word_list.write_text("".join(f"{word}\n" for word in words), encoding="utf-8")

        for relative_path, content in (documents or {}).items():
            path = root / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        return GateConfig(
            word_list_path=word_list,
            dictionary_path=spell_dir / "words.rws",
            language="en",
            root_directory=root,
            extensions=[".md"],
            exclude_dirs=[".git"],
        )

    return _make
