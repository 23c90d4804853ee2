"""
Filesystem utilities for chartkeeper.

Helpers for reading manifest files and discovering candidate files in a
directory tree. All filesystem errors are normalized to
``FileOperationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from chartkeeper.utils.logger import get_logger
from chartkeeper.exceptions import FileOperationError
from chartkeeper.constants import (
    DEFAULT_FILE_PATTERNS,
    IGNORED_DIRECTORIES,
    MAX_FILE_SIZE,
)

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _validated_file(path: Path) -> Path:
    """Ensure ``path`` is an existing regular file and resolve it."""
    if not path.exists():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read",
        )
    if not path.is_file():
        raise FileOperationError(
            f"Not a file: {path}",
            file_path=str(path),
            operation="read",
        )
    return path.resolve()


def safe_read_file(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
    encoding: str = "utf-8",
) -> str:
    """Read a text file, refusing files larger than ``max_size``.

    Args:
        file_path: Path to the file.
        max_size: Maximum allowed file size in bytes (None disables limit).
        encoding: Text encoding.

    Returns:
        File contents as a string.

    Raises:
        FileOperationError: The file is missing, too large, or unreadable.
    """
    path = _validated_file(Path(file_path))
    size = path.stat().st_size

    if max_size is not None and size > max_size:
        raise FileOperationError(
            f"File too large: {size} bytes (max {max_size})",
            file_path=str(path),
            operation="read",
        )

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(
            f"Failed to read file: {exc}",
            file_path=str(path),
            operation="read",
            original_error=exc,
        ) from exc


def _is_ignored(path: Path, root: Path) -> bool:
    relative_parts = path.relative_to(root).parts[:-1]
    return any(part in IGNORED_DIRECTORIES for part in relative_parts)


def find_manifest_files(
    directory: PathLike = ".",
    *,
    patterns: Iterable[str] = DEFAULT_FILE_PATTERNS,
    recursive: bool = True,
) -> List[Path]:
    """Find candidate manifest files within a directory.

    Args:
        directory: Directory to search.
        patterns: Glob patterns matched against file names.
        recursive: Descend into subdirectories.

    Returns:
        Sorted, de-duplicated list of matching files. Empty if
        ``directory`` is not a directory.
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        logger.debug("Not a directory, nothing to search: %s", root)
        return []

    matches = set()
    for pattern in patterns:
        iterator = root.rglob(pattern) if recursive else root.glob(pattern)
        matches.update(
            path for path in iterator if path.is_file() and not _is_ignored(path, root)
        )

    logger.debug("Found %d candidate file(s) under %s", len(matches), root)
    return sorted(matches)
