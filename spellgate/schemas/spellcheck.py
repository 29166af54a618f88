"""
Pydantic schemas for spell-check gate functionality.
"""
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from spellgate.config import Settings


class GateConfig(BaseModel):
    """Explicit inputs of a single gate run."""

    word_list_path: Path = Field(
        default=Path("spell/words"),
        description="Project word list, one word per line",
    )
    dictionary_path: Path = Field(
        default=Path("spell/words.rws"),
        description="Where the compiled personal dictionary is written",
    )
    language: str = Field(default="en", description="Language tag passed to the backend")
    root_directory: Path = Field(default=Path("."), description="Corpus root directory")
    extensions: List[str] = Field(
        default_factory=lambda: [".md"],
        description="File suffixes included in the corpus",
    )
    exclude_dirs: List[str] = Field(
        default_factory=lambda: [".git"],
        description="Directory names never descended into",
    )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        backend: Optional[str] = None,
        **overrides,
    ) -> "GateConfig":
        """
        Build a gate configuration from process settings.

        Args:
            settings: Loaded Settings instance
            backend: Backend the dictionary is built for (default: SPELLCHECK_BACKEND)
            **overrides: Field values taking precedence over settings (None values are ignored)

        Returns:
            GateConfig instance
        """
        values = {
            "word_list_path": settings.SPELLCHECK_WORDLIST_PATH,
            "dictionary_path": settings.dictionary_path_for(backend),
            "language": settings.SPELLCHECK_LANGUAGE,
            "root_directory": settings.SPELLCHECK_ROOT,
            "extensions": settings.extensions_list,
            "exclude_dirs": settings.exclude_dirs_list,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class MisspellingReport(BaseModel):
    """Distinct flagged words in first-seen order."""

    words: List[str] = Field(default_factory=list, description="Flagged words, case preserved")
    documents_checked: int = Field(default=0, description="Number of corpus files read")
    backend: Optional[str] = Field(default=None, description="Backend that produced the report")

    @property
    def is_clean(self) -> bool:
        return not self.words
