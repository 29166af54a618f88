"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Spell-check gate settings loaded from environment variables."""

    # Backend Configuration
    SPELLCHECK_BACKEND: str = "aspell"  # Options: aspell, symspell
    SPELLCHECK_LANGUAGE: str = "en"
    SPELLCHECK_TIMEOUT_SECONDS: Optional[int] = 300  # Per subprocess call, None disables

    # Input/Output Paths
    SPELLCHECK_WORDLIST_PATH: str = "spell/words"  # Project word list, one word per line
    SPELLCHECK_DICTIONARY_PATH: Optional[str] = None  # Compiled personal dictionary, default per backend
    SPELLCHECK_ROOT: str = "."  # Corpus root directory

    # Corpus Selection (comma-separated)
    SPELLCHECK_EXTENSIONS: str = ".md"
    SPELLCHECK_EXCLUDE_DIRS: str = ".git"

    # aspell Configuration
    ASPELL_COMMAND: str = "aspell"
    ASPELL_MODE: Optional[str] = None  # e.g. "markdown" on aspell >= 0.60.8
    ASPELL_ENCODING: Optional[str] = "utf-8"

    # SymSpell Configuration
    SYMSPELL_BASE_DICTIONARY_PATH: Optional[str] = None  # Defaults to bundled English dictionary
    SYMSPELL_PREFIX_LENGTH: int = 7  # SymSpell optimization parameter
    SPELLCHECK_MIN_WORD_LENGTH: int = 2  # Skip words shorter than this

    # Logging Configuration
    LOG_LEVEL: str = "WARNING"
    APP_LOG_LEVEL: Optional[str] = None
    SYMSPELLPY_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def extensions_list(self) -> List[str]:
        """Parse file extensions from comma-separated string."""
        return _split_csv(self.SPELLCHECK_EXTENSIONS)

    @property
    def exclude_dirs_list(self) -> List[str]:
        """Parse excluded directory names from comma-separated string."""
        return _split_csv(self.SPELLCHECK_EXCLUDE_DIRS)

    def dictionary_path_for(self, backend: Optional[str] = None) -> str:
        """
        Personal dictionary path for a backend.

        SPELLCHECK_DICTIONARY_PATH wins when set; otherwise each backend gets
        a file named after its artifact format.
        """
        if self.SPELLCHECK_DICTIONARY_PATH:
            return self.SPELLCHECK_DICTIONARY_PATH
        backend = (backend or self.SPELLCHECK_BACKEND).lower()
        return DEFAULT_DICTIONARY_PATHS.get(backend, DEFAULT_DICTIONARY_PATHS["aspell"])


# Compiled personal dictionary per backend
DEFAULT_DICTIONARY_PATHS = {
    "aspell": "spell/words.rws",
    "symspell": "spell/words.pkl",
}


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Global settings instance
settings = Settings()
