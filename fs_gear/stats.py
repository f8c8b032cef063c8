"""Summaries over listing results."""

from __future__ import annotations

from typing import Iterable

from fs_gear._types import SIZE_UNITS, DirectoryStatistics, EntryInfo, format_size

NO_EXTENSION = "no-extension"
"""Grouping key for files that have no extension."""

__all__ = [
    "NO_EXTENSION",
    "SIZE_UNITS",
    "aggregate",
    "files_to_mapping",
    "format_size",
    "group_by_extension",
]


def aggregate(entries: Iterable[EntryInfo]) -> DirectoryStatistics:
    """Fold entries into a DirectoryStatistics.

    Files add to the count, the total size and the per-extension table
    (files without an extension are left out of the table). The largest file
    is the first one seen with the maximum size. Directories are only
    counted; other entry kinds are ignored.
    """
    stats = DirectoryStatistics()

    for entry in entries:
        if entry.is_file:
            stats.file_count += 1
            stats.total_size += entry.size

            if entry.extension is not None:
                stats.extensions[entry.extension] = stats.extensions.get(entry.extension, 0) + 1

            if entry.size > stats.largest_file_size:
                stats.largest_file_size = entry.size
                stats.largest_file_name = entry.name
        elif entry.is_directory:
            stats.directory_count += 1

    return stats


def group_by_extension(entries: Iterable[EntryInfo]) -> dict[str, list[EntryInfo]]:
    """Group files by extension, keeping their order within each group.

    Files without an extension go under ``NO_EXTENSION``; directories are
    skipped.
    """
    groups: dict[str, list[EntryInfo]] = {}
    for entry in entries:
        if not entry.is_file:
            continue
        key = entry.extension if entry.extension is not None else NO_EXTENSION
        groups.setdefault(key, []).append(entry)
    return groups


def files_to_mapping(entries: Iterable[EntryInfo]) -> dict[str, EntryInfo]:
    """Index entries by name; later entries replace earlier ones."""
    return {entry.name: entry for entry in entries}
