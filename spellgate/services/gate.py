"""
Spell-check gate: build the personal dictionary, check the corpus, report.
"""
import time
from typing import Iterable, List, Optional

from spellgate.schemas.spellcheck import GateConfig, MisspellingReport
from spellgate.services.corpus import (
    FileFilter,
    concatenate_documents,
    extension_filter,
    find_documents,
)
from spellgate.services.spellcheck_base import GateConfigurationError, SpellChecker
from spellgate.utils.logger import get_logger

logger = get_logger("services.gate")


def run_check(
    config: GateConfig,
    checker: SpellChecker,
    file_filter: Optional[FileFilter] = None,
) -> MisspellingReport:
    """
    Run one spell-check pass over the corpus.

    Steps:
    1. Rebuild the personal dictionary from the word list
    2. Find corpus documents under the root directory
    3. Concatenate their contents
    4. List unknown words against the standard and personal dictionaries

    Args:
        config: Gate inputs
        checker: Spell-check backend
        file_filter: Replaces the extension predicate from config when given

    Returns:
        MisspellingReport; is_clean is True when nothing was flagged

    Raises:
        SpellCheckerError: On any tool or configuration failure
    """
    start_time = time.time()

    if not config.word_list_path.is_file():
        raise GateConfigurationError(f"Word list not found: {config.word_list_path}")
    if not config.root_directory.is_dir():
        raise GateConfigurationError(f"Corpus root is not a directory: {config.root_directory}")

    checker.build_dictionary(config.word_list_path, config.dictionary_path)

    documents = find_documents(
        config.root_directory,
        file_filter or extension_filter(config.extensions),
        exclude_dirs=config.exclude_dirs,
    )

    if not documents:
        logger.info("No documents matched, nothing to check", root_directory=str(config.root_directory))
        return MisspellingReport(words=[], documents_checked=0, backend=checker.get_backend_name())

    try:
        text = concatenate_documents(documents)
    except OSError as e:
        raise GateConfigurationError(f"Cannot read corpus document: {e}") from e
    flagged = checker.find_unknown_words(text, [config.dictionary_path])
    words = deduplicate(flagged)

    logger.info(
        "Spell-check finished",
        backend=checker.get_backend_name(),
        language=checker.get_language(),
        documents_checked=len(documents),
        misspelled_count=len(words),
        duration_seconds=round(time.time() - start_time, 2),
    )

    return MisspellingReport(
        words=words,
        documents_checked=len(documents),
        backend=checker.get_backend_name(),
    )


def deduplicate(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping first-seen order; case-sensitive."""
    return list(dict.fromkeys(words))


def format_report(report: MisspellingReport) -> str:
    """
    Render the report as printed by the CLI.

    Args:
        report: Gate result

    Returns:
        Success line, or a header followed by one word per line
    """
    if report.is_clean:
        return "All is well"

    backend = report.backend or "the spell checker"
    if backend == "aspell":
        fix_hint = "run aspell interactively to fix them"
    else:
        fix_hint = "fix them"
    lines = [
        f"Misspelled words detected, {fix_hint}, or include the words in your dict.",
        f"Listed by {backend}:",
        "",
    ]
    lines.extend(report.words)
    return "\n".join(lines)
