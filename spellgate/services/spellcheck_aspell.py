"""
Spell-check backend driving the GNU aspell executable.

Two aspell sub-commands are used:
1. `create master <dict>` compiles the word list (read from stdin) into a
   personal .rws dictionary
2. `list` reads text from stdin and prints every unknown word on its own line,
   with `--add-extra-dicts` pointing at the personal dictionary
"""
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from spellgate.services.spellcheck_base import (
    DictionaryBuildError,
    SpellChecker,
    SpellCheckerError,
    SpellCheckerUnavailableError,
    read_word_list,
)
from spellgate.utils.logger import get_logger


logger = get_logger("services.spellcheck_aspell")


class AspellSpellChecker(SpellChecker):
    """Spell-check backend shelling out to aspell."""

    BACKEND_NAME = "aspell"

    def __init__(
        self,
        language: str = "en",
        command: str = "aspell",
        mode: Optional[str] = None,
        encoding: Optional[str] = "utf-8",
        timeout_seconds: Optional[int] = None,
    ):
        """
        Initialize aspell backend.

        Args:
            language: aspell --lang value
            command: aspell executable name or path
            mode: aspell filter mode (e.g. "markdown"), None for aspell's default
            encoding: aspell --encoding value, None for aspell's default
            timeout_seconds: Wall-clock limit per aspell call, None for no limit
        """
        self._language = language
        self._command = command
        self._mode = mode
        self._encoding = encoding
        self._timeout_seconds = timeout_seconds

        logger.debug(
            "aspell backend initialized",
            language=language,
            command=command,
            mode=mode,
            timeout_seconds=timeout_seconds,
        )

    def _base_command(self) -> List[str]:
        """Options shared by every aspell invocation."""
        cmd = [self._command, f"--lang={self._language}"]
        if self._encoding:
            cmd.append(f"--encoding={self._encoding}")
        return cmd

    def _build_create_command(self, dictionary_path: Path) -> List[str]:
        return self._base_command() + ["create", "master", str(dictionary_path.resolve())]

    def _build_list_command(self, extra_dictionaries: Sequence[Path]) -> List[str]:
        cmd = self._base_command()
        if self._mode:
            cmd.append(f"--mode={self._mode}")
        for dictionary in extra_dictionaries:
            cmd.append(f"--add-extra-dicts={Path(dictionary).resolve()}")
        cmd.append("list")
        return cmd

    def _run(self, cmd: List[str], stdin_text: str) -> subprocess.CompletedProcess:
        """
        Run aspell with text on stdin.

        Raises:
            SpellCheckerUnavailableError: If the executable is missing
            SpellCheckerError: If aspell exceeds the timeout or cannot be started
        """
        try:
            return subprocess.run(
                cmd,
                input=stdin_text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout_seconds,
                check=False,
            )
        except FileNotFoundError as e:
            raise SpellCheckerUnavailableError(
                self._command,
                f"'{self._command}' not found; install aspell and the aspell-{self._language} dictionary",
            ) from e
        except PermissionError as e:
            raise SpellCheckerUnavailableError(
                self._command,
                f"'{self._command}' is not executable: {e}",
            ) from e
        except OSError as e:
            logger.error("aspell could not be started", command=self._command, error=str(e))
            raise SpellCheckerError(f"Cannot run {self._command}: {e}") from e
        except subprocess.TimeoutExpired as e:
            logger.error("aspell timed out", command=cmd[-1], timeout_seconds=self._timeout_seconds)
            raise SpellCheckerError(
                f"aspell did not finish within {self._timeout_seconds}s"
            ) from e

    def build_dictionary(self, word_list_path: Path, dictionary_path: Path) -> int:
        """
        Compile the word list into an aspell master dictionary.

        Args:
            word_list_path: Word list file (one word per line)
            dictionary_path: Output .rws path

        Returns:
            Number of words compiled
        """
        if not self.is_available():
            raise SpellCheckerUnavailableError(self._command)

        words = read_word_list(Path(word_list_path))
        dictionary_path = Path(dictionary_path)
        try:
            dictionary_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                "Cannot create personal dictionary directory",
                error=str(e),
                dictionary_path=str(dictionary_path),
            )
            raise DictionaryBuildError(f"Cannot write {dictionary_path}: {e}") from e

        cmd = self._build_create_command(dictionary_path)
        process = self._run(cmd, "".join(f"{word}\n" for word in words))

        if process.returncode != 0:
            error_msg = process.stderr.strip()
            logger.error(
                "aspell dictionary build failed",
                dictionary_path=str(dictionary_path),
                return_code=process.returncode,
                error=error_msg,
            )
            raise DictionaryBuildError(
                f"aspell could not build {dictionary_path} from {word_list_path}: {error_msg}"
            )

        logger.info(
            "Personal dictionary built",
            word_count=len(words),
            dictionary_path=str(dictionary_path),
        )
        return len(words)

    def find_unknown_words(self, text: str, extra_dictionaries: Sequence[Path] = ()) -> List[str]:
        """
        List unknown words with `aspell list`.

        Args:
            text: Text to check
            extra_dictionaries: Personal .rws dictionaries

        Returns:
            Flagged words in the order aspell printed them
        """
        if not self.is_available():
            raise SpellCheckerUnavailableError(self._command)

        cmd = self._build_list_command(extra_dictionaries)
        process = self._run(cmd, text)

        if process.returncode != 0:
            error_msg = process.stderr.strip()
            logger.error(
                "aspell list failed",
                return_code=process.returncode,
                error=error_msg,
            )
            raise SpellCheckerError(f"aspell list failed: {error_msg}")

        words = [line.strip() for line in process.stdout.splitlines() if line.strip()]
        logger.debug("aspell list finished", flagged_count=len(words))
        return words

    def is_available(self) -> bool:
        """Check if the aspell executable is on PATH."""
        return shutil.which(self._command) is not None

    def get_language(self) -> str:
        """Get language tag."""
        return self._language

    def get_backend_name(self) -> str:
        """Get backend name."""
        return self.BACKEND_NAME
