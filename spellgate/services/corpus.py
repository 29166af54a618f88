"""
Document corpus discovery and concatenation.
"""
import os
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

from spellgate.services.spellcheck_base import GateConfigurationError
from spellgate.utils.logger import get_logger

logger = get_logger("services.corpus")

FileFilter = Callable[[Path], bool]


def extension_filter(extensions: Sequence[str]) -> FileFilter:
    """
    Build a predicate matching file suffixes (case-insensitive).

    Args:
        extensions: Suffixes such as ".md"; a missing leading dot is added

    Returns:
        Predicate taking a file path
    """
    suffixes = tuple(
        (ext if ext.startswith(".") else f".{ext}").lower() for ext in extensions
    )

    def matches(path: Path) -> bool:
        return path.name.lower().endswith(suffixes)

    return matches


def find_documents(
    root_directory: Path,
    file_filter: FileFilter,
    exclude_dirs: Iterable[str] = (),
) -> List[Path]:
    """
    Recursively list files under root_directory accepted by file_filter.

    Directories named in exclude_dirs are pruned. Paths are returned in
    sorted traversal order so repeated runs see the same corpus order.

    Args:
        root_directory: Corpus root
        file_filter: Predicate on file paths
        exclude_dirs: Directory names never descended into

    Returns:
        Matching file paths

    Raises:
        GateConfigurationError: If a directory under the root cannot be listed
    """
    excluded = set(exclude_dirs)
    documents = []

    for dirpath, dirnames, filenames in os.walk(root_directory, onerror=_raise_unreadable):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_file() and file_filter(path):
                documents.append(path)

    logger.debug(
        "Corpus scanned",
        root_directory=str(root_directory),
        document_count=len(documents),
    )
    return documents


def _raise_unreadable(error: OSError) -> None:
    """os.walk error hook: an unlisted directory would leave documents unchecked."""
    logger.error("Cannot list corpus directory", path=str(error.filename), error=str(error))
    raise GateConfigurationError(f"Cannot read corpus directory {error.filename}: {error.strerror}") from error


def concatenate_documents(documents: Iterable[Path]) -> str:
    """
    Join document contents into one text stream.

    Documents are separated by a newline so the last word of one file
    never fuses with the first word of the next.

    Args:
        documents: Files to read, in order

    Returns:
        Concatenated text
    """
    parts = []
    for path in documents:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            parts.append(f.read())
    return "\n".join(parts)
