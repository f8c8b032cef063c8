"""fs-gear: Filesystem utilities for listing, searching and summarizing trees.

This package wraps the local filesystem behind a small, stateless facade,
featuring:

- Existence and metadata checks
- Filtered directory listings, optionally recursive
- Case-insensitive wildcard name search (``*`` and ``?``)
- Whole-file read, write and append (text or bytes)
- Copy, move, create and remove operations
- Directory statistics and grouping by extension

Example:
    >>> from fs_gear import FileUtils, FilterCriteria
    >>> fu = FileUtils("/path/to/project")
    >>> docs = fu.find_by_name(".", "*.md", recursive=True)
    >>> big = fu.list_with_filter(".", FilterCriteria(min_size=1024, recursive=True))

Statistics Example:
    >>> stats = fu.directory_statistics("src")
    >>> print(stats.file_count, stats.formatted_size)
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from fs_gear._types import DirectoryStatistics, EntryInfo, FilterCriteria, split_extension
from fs_gear.errors import (
    FileIoError,
    FileUtilsError,
    InvalidExtensionError,
    InvalidPathError,
    NotFoundError,
    PathLike,
    PermissionDeniedError,
)
from fs_gear.local_backend import LocalFileBackend
from fs_gear.matching import matches_filter, matches_pattern
from fs_gear.stats import NO_EXTENSION, aggregate, files_to_mapping, format_size, group_by_extension
from fs_gear.traversal import traverse

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

__all__ = [
    "FileUtils",
    "EntryInfo",
    "FilterCriteria",
    "DirectoryStatistics",
    "FileUtilsError",
    "NotFoundError",
    "PermissionDeniedError",
    "FileIoError",
    "InvalidExtensionError",
    "InvalidPathError",
    "NO_EXTENSION",
    "format_size",
    "matches_filter",
    "matches_pattern",
    "__version__",
]


class FileUtils:
    """Stateless filesystem facade.

    Every method is independently callable; nothing is cached between calls,
    so each result reflects the filesystem at the moment of the call. All
    filesystem failures are raised as ``FileUtilsError`` subclasses.

    Args:
        root: Base directory for relative paths (default: the process working
            directory). Absolute paths are used as given.
        atomic_writes: Whether non-append writes go through a temp file that
            is renamed over the target (default: False).

    Example:
        >>> fu = FileUtils("/path/to/project")
        >>> fu.write_string("notes.txt", "hello")
        >>> fu.read_to_string("notes.txt")
        'hello'
        >>> [e.name for e in fu.find_by_extension(".", "txt")]
        ['notes.txt']
    """

    def __init__(self, root: Optional[PathLike] = None, atomic_writes: bool = False) -> None:
        self._root = os.path.abspath(root) if root is not None else None
        self._atomic_writes = atomic_writes
        self._backend = LocalFileBackend()

    @property
    def root(self) -> Optional[str]:
        """Base directory for relative paths, if one was configured."""
        return self._root

    def _resolve(self, path: PathLike) -> str:
        path = os.fspath(path)
        if self._root is None or os.path.isabs(path):
            return path
        return os.path.join(self._root, path)

    # ------------------------------------------------------------------
    # Existence and metadata
    # ------------------------------------------------------------------

    def file_exists(self, path: PathLike) -> bool:
        """Check that ``path`` exists and is a regular file."""
        return os.path.isfile(self._resolve(path))

    def directory_exists(self, path: PathLike) -> bool:
        """Check that ``path`` exists and is a directory."""
        return os.path.isdir(self._resolve(path))

    def path_exists(self, path: PathLike) -> bool:
        """Check that ``path`` exists, whatever its kind."""
        return os.path.exists(self._resolve(path))

    def has_extension(self, path: PathLike, extension: str) -> bool:
        """Check the extension of ``path`` without touching the filesystem.

        The comparison ignores case; ``extension`` is given without the dot.
        """
        ext = split_extension(os.path.basename(os.fspath(path)))
        return ext is not None and ext == extension.lower()

    def is_empty(self, path: PathLike) -> bool:
        """Check whether a file has zero length.

        Raises:
            NotFoundError: If the path does not exist.
        """
        return self.entry_info(path).size == 0

    def entry_info(self, path: PathLike) -> EntryInfo:
        """Get metadata for a single file or directory."""
        return self._backend.stat(self._resolve(path))

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_files(self, dir_path: PathLike) -> list[EntryInfo]:
        """List the files directly inside ``dir_path``."""
        return self.list_with_filter(dir_path, FilterCriteria(include_directories=False))

    def list_directories(self, dir_path: PathLike) -> list[EntryInfo]:
        """List the subdirectories directly inside ``dir_path``."""
        return self.list_with_filter(dir_path, FilterCriteria(include_files=False))

    def list_all(self, dir_path: PathLike) -> list[EntryInfo]:
        """List every entry directly inside ``dir_path``."""
        return self.list_with_filter(dir_path, FilterCriteria())

    def list_with_filter(self, dir_path: PathLike, criteria: FilterCriteria) -> list[EntryInfo]:
        """List entries passing ``criteria``, recursing if it asks to.

        Returns:
            Entries in traversal order: each entry precedes its descendants,
            siblings are in filesystem order.
        """
        return traverse(self._resolve(dir_path), criteria, self._backend)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_by_name(self, dir_path: PathLike, pattern: str, recursive: bool = False) -> list[EntryInfo]:
        """Find files and directories whose name matches a wildcard pattern.

        Args:
            dir_path: Directory to search.
            pattern: Name pattern; ``*`` and ``?`` are wildcards, case is ignored.
            recursive: Whether to search subdirectories too.
        """
        if recursive:
            items = self.list_with_filter(dir_path, FilterCriteria(recursive=True))
        else:
            items = self.list_all(dir_path)
        return [item for item in items if matches_pattern(item.name, pattern)]

    def find_by_extension(self, dir_path: PathLike, extension: str, recursive: bool = False) -> list[EntryInfo]:
        """Find files with the given extension (no dot, case ignored)."""
        criteria = FilterCriteria(
            extensions=frozenset([extension]),
            include_directories=False,
            include_files=True,
            recursive=recursive,
        )
        return self.list_with_filter(dir_path, criteria)

    def find_by_size(
        self,
        dir_path: PathLike,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        recursive: bool = False,
    ) -> list[EntryInfo]:
        """Find files whose size lies within the inclusive bounds given."""
        criteria = FilterCriteria(
            min_size=min_size,
            max_size=max_size,
            include_directories=False,
            include_files=True,
            recursive=recursive,
        )
        return self.list_with_filter(dir_path, criteria)

    def matches_pattern(self, name: str, pattern: str) -> bool:
        """Match a name against a wildcard pattern (see ``fs_gear.matching``)."""
        return matches_pattern(name, pattern)

    # ------------------------------------------------------------------
    # Reading and writing
    # ------------------------------------------------------------------

    def read_to_string(self, path: PathLike) -> str:
        """Read a whole file as UTF-8 text.

        Raises:
            FileIoError: If the content is not valid UTF-8.
        """
        return self._backend.read_text(self._resolve(path))

    def read_to_bytes(self, path: PathLike) -> bytes:
        """Read a whole file as bytes."""
        return self._backend.read_bytes(self._resolve(path))

    def write_string(self, path: PathLike, content: str) -> None:
        """Create or truncate a file and write UTF-8 text to it."""
        self._backend.write_text(self._resolve(path), content, atomic=self._atomic_writes)

    def write_bytes(self, path: PathLike, content: bytes) -> None:
        """Create or truncate a file and write bytes to it."""
        self._backend.write_bytes(self._resolve(path), content, atomic=self._atomic_writes)

    def append_string(self, path: PathLike, content: str) -> None:
        """Append UTF-8 text to a file, creating it if needed."""
        self._backend.write_text(self._resolve(path), content, append=True)

    def append_bytes(self, path: PathLike, content: bytes) -> None:
        """Append bytes to a file, creating it if needed."""
        self._backend.write_bytes(self._resolve(path), content, append=True)

    # ------------------------------------------------------------------
    # Directories, copies and moves
    # ------------------------------------------------------------------

    def create_directory(self, path: PathLike) -> None:
        """Create a directory along with any missing parents."""
        self._backend.make_dirs(self._resolve(path))

    def remove_file(self, path: PathLike) -> None:
        """Remove a file."""
        self._backend.remove_file(self._resolve(path))

    def remove_directory(self, path: PathLike) -> None:
        """Remove an empty directory."""
        self._backend.remove_empty_dir(self._resolve(path))

    def remove_directory_recursive(self, path: PathLike) -> None:
        """Remove a directory and everything inside it."""
        self._backend.remove_tree(self._resolve(path))

    def copy_file(self, src: PathLike, dst: PathLike) -> int:
        """Copy a file, returning the number of bytes copied."""
        return self._backend.copy(self._resolve(src), self._resolve(dst))

    def move_item(self, src: PathLike, dst: PathLike) -> None:
        """Move or rename a file or directory."""
        self._backend.rename(self._resolve(src), self._resolve(dst))

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    def directory_size(self, path: PathLike) -> int:
        """Total size in bytes of all files under ``path``, recursively."""
        files = self.list_with_filter(path, FilterCriteria(include_directories=False, recursive=True))
        return sum(f.size for f in files)

    def count_files(self, path: PathLike, recursive: bool = False) -> int:
        """Count the files under ``path``."""
        criteria = FilterCriteria(include_directories=False, recursive=recursive)
        return len(self.list_with_filter(path, criteria))

    def count_directories(self, path: PathLike, recursive: bool = False) -> int:
        """Count the subdirectories under ``path``."""
        criteria = FilterCriteria(include_files=False, recursive=recursive)
        return len(self.list_with_filter(path, criteria))

    def directory_statistics(self, path: PathLike) -> DirectoryStatistics:
        """Summarize everything under ``path``, recursively.

        Returns:
            DirectoryStatistics with file and directory counts, total size,
            files per extension and the largest file.
        """
        stats = aggregate(self.list_with_filter(path, FilterCriteria(recursive=True)))
        logger.debug(
            f"Statistics for {os.fspath(path)}: {stats.file_count} files, "
            f"{stats.directory_count} directories, {stats.total_size} bytes"
        )
        return stats

    def files_to_mapping(self, entries: Iterable[EntryInfo]) -> dict[str, EntryInfo]:
        """Index entries by name (see ``fs_gear.stats.files_to_mapping``)."""
        return files_to_mapping(entries)

    def group_by_extension(self, entries: Iterable[EntryInfo]) -> dict[str, list[EntryInfo]]:
        """Group files by extension (see ``fs_gear.stats.group_by_extension``)."""
        return group_by_extension(entries)
