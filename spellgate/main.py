#!/usr/bin/env python3
"""
Spell-check gate for markdown documents, suitable as a CI step.

Builds the personal dictionary from the project word list, checks every
matching document under the corpus root, and exits with:
    0  no misspellings
    1  misspellings found (listed on stdout)
    2  spell checker missing or misconfigured

Usage:
    spellgate
    spellgate --root docs --words spell/words --lang en_GB
    spellgate --backend symspell -v
"""
import argparse
import sys
from typing import List, Optional

from spellgate.config import settings
from spellgate.schemas.spellcheck import GateConfig
from spellgate.services.gate import format_report, run_check
from spellgate.services.spellcheck import SUPPORTED_BACKENDS, create_spell_checker
from spellgate.services.spellcheck_base import SpellCheckerError
from spellgate.utils.logger import get_logger, setup_logging

logger = get_logger("main")

EXIT_OK = 0
EXIT_MISSPELLINGS = 1
EXIT_TOOL_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellgate",
        description="Spell-check a document corpus against a dictionary and a project word list",
    )
    parser.add_argument("--words", help=f"Word list file (default: {settings.SPELLCHECK_WORDLIST_PATH})")
    parser.add_argument(
        "--dictionary",
        help=f"Compiled personal dictionary path (default: {settings.dictionary_path_for()})",
    )
    parser.add_argument("--lang", help=f"Dictionary language (default: {settings.SPELLCHECK_LANGUAGE})")
    parser.add_argument("--root", help=f"Corpus root directory (default: {settings.SPELLCHECK_ROOT})")
    parser.add_argument(
        "--ext",
        action="append",
        help=f"File extension to check, repeatable (default: {settings.SPELLCHECK_EXTENSIONS})",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        help=f"Directory name to skip, repeatable (default: {settings.SPELLCHECK_EXCLUDE_DIRS})",
    )
    parser.add_argument(
        "--backend",
        choices=SUPPORTED_BACKENDS,
        help=f"Spell-check backend (default: {settings.SPELLCHECK_BACKEND})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the gate and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    backend = args.backend or settings.SPELLCHECK_BACKEND
    try:
        config = GateConfig.from_settings(
            settings,
            backend=backend,
            word_list_path=args.words,
            dictionary_path=args.dictionary,
            language=args.lang,
            root_directory=args.root,
            extensions=args.ext,
            exclude_dirs=args.exclude,
        )
        checker = create_spell_checker(backend, language=config.language)
        report = run_check(config, checker)
    except (SpellCheckerError, ValueError) as e:
        logger.error("Spell-check gate failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_TOOL_FAILURE

    print(format_report(report))
    return EXIT_OK if report.is_clean else EXIT_MISSPELLINGS


if __name__ == "__main__":
    sys.exit(main())
