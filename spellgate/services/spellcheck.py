"""
Spell-check backend factory.
"""
from typing import Optional

from spellgate.config import Settings, settings as default_settings
from spellgate.services.spellcheck_base import SpellChecker, SpellCheckerUnavailableError
from spellgate.utils.logger import get_logger

logger = get_logger("services.spellcheck")

SUPPORTED_BACKENDS = ("aspell", "symspell")


def create_spell_checker(
    backend: str = "aspell",
    language: str = "en",
    settings: Optional[Settings] = None,
) -> SpellChecker:
    """
    Factory function to create a spell-check backend by name.

    Args:
        backend: Backend name ("aspell" or "symspell")
        language: Language tag for the standard dictionary
        settings: Settings supplying backend options (default: global settings)

    Returns:
        SpellChecker implementation

    Raises:
        ValueError: If backend is not supported
        SpellCheckerUnavailableError: If the backend's Python package is not installed
    """
    settings = settings or default_settings
    backend = backend.lower()

    if backend == "aspell":
        from spellgate.services.spellcheck_aspell import AspellSpellChecker
        return AspellSpellChecker(
            language=language,
            command=settings.ASPELL_COMMAND,
            mode=settings.ASPELL_MODE,
            encoding=settings.ASPELL_ENCODING,
            timeout_seconds=settings.SPELLCHECK_TIMEOUT_SECONDS,
        )

    if backend == "symspell":
        # Import here so the aspell backend works without symspellpy installed
        try:
            from spellgate.services.spellcheck_symspell import SymSpellSpellChecker
        except ImportError as e:
            raise SpellCheckerUnavailableError(
                "symspellpy",
                "symspell backend selected but symspellpy package not installed. "
                "Install it with: pip install symspellpy",
            ) from e
        return SymSpellSpellChecker(
            language=language,
            base_dictionary_path=settings.SYMSPELL_BASE_DICTIONARY_PATH,
            prefix_length=settings.SYMSPELL_PREFIX_LENGTH,
            min_word_length=settings.SPELLCHECK_MIN_WORD_LENGTH,
        )

    logger.error("Unsupported spell-check backend", backend=backend)
    raise ValueError(
        f"Unsupported spell-check backend: {backend}. "
        f"Supported backends: {', '.join(SUPPORTED_BACKENDS)}"
    )
