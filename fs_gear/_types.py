"""Value types shared by the fs_gear modules."""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass, field
from typing import Iterable, Optional

from fs_gear.errors import PathLike, translating_os_errors


def split_extension(name: str) -> Optional[str]:
    """Return the lowercased extension of a file name, or None.

    The extension is whatever follows the last ``.``; names without a dot,
    and names whose only dot is the leading one (``.bashrc``), have none.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext.lower()


@dataclass(frozen=True)
class EntryInfo:
    """Metadata of a single file or directory, taken from a live stat call."""

    path: str
    """Full path of the entry, as it was reached."""

    name: str
    """Final path component."""

    extension: Optional[str]
    """Lowercased extension without the dot, if any."""

    size: int
    """Size in bytes."""

    is_directory: bool
    """Whether this is a directory."""

    is_file: bool
    """Whether this is a regular file."""

    modified: Optional[int] = None
    """Modification time as whole seconds since the Unix epoch."""

    @classmethod
    def from_path(cls, path: PathLike) -> EntryInfo:
        """Stat ``path`` and build an EntryInfo from the result.

        Symbolic links are followed, so a link reports its target's metadata.

        Raises:
            NotFoundError: If the path does not exist.
            PermissionDeniedError: If the path cannot be stat'ed.
            FileIoError: On any other failure.
        """
        path = os.fspath(path)
        with translating_os_errors(path):
            st = os.stat(path)

        # The filesystem root has no final component and gets an empty name.
        name = os.path.basename(path.rstrip(os.sep))
        mtime = int(st.st_mtime)

        return cls(
            path=path,
            name=name,
            extension=split_extension(name),
            size=st.st_size,
            is_directory=stat_module.S_ISDIR(st.st_mode),
            is_file=stat_module.S_ISREG(st.st_mode),
            modified=mtime if mtime >= 0 else None,
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Which entries a listing should return.

    The default criteria accept every file and directory and do not recurse.
    Extensions are compared without the dot and case-insensitively; any
    iterable of strings (or a single string) is stored as a lowercased
    frozenset.
    """

    extensions: Optional[frozenset[str]] = None
    min_size: Optional[int] = None
    max_size: Optional[int] = None
    include_directories: bool = True
    include_files: bool = True
    recursive: bool = False

    def __post_init__(self) -> None:
        if self.extensions is not None:
            normalized = frozenset(_normalize_extensions(self.extensions))
            object.__setattr__(self, "extensions", normalized)


def _normalize_extensions(extensions: Iterable[str]) -> Iterable[str]:
    if isinstance(extensions, str):
        extensions = [extensions]
    for ext in extensions:
        yield ext.lower()


@dataclass
class DirectoryStatistics:
    """Summary figures for a set of entries."""

    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0
    extensions: dict[str, int] = field(default_factory=dict)
    """Number of files per extension; files without one are not counted here."""

    largest_file_size: int = 0
    largest_file_name: Optional[str] = None

    @property
    def formatted_size(self) -> str:
        return format_size(self.total_size)

    @property
    def formatted_largest_file_size(self) -> str:
        return format_size(self.largest_file_size)


SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Render a byte count for humans.

    Example:
        >>> format_size(512)
        '512 B'
        >>> format_size(1536)
        '1.50 KB'
    """
    if num_bytes == 0:
        return "0 B"

    size = float(num_bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit_index += 1

    if unit_index == 0:
        return f"{num_bytes} {SIZE_UNITS[0]}"
    return f"{size:.2f} {SIZE_UNITS[unit_index]}"
