"""Directory traversal with filtering.

Traversal is pre-order: an entry is reported (if it passes the filter) before
any of its descendants, and siblings come in whatever order the operating
system enumerates them. A directory that fails the filter is still descended
into when the criteria ask for recursion, so files beneath it can match.

There is no guard against symbolic-link cycles; a link pointing at one of its
own ancestors is followed level after level until the operating system
refuses the path, which surfaces as a FileUtilsError.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, Optional

from fs_gear._types import EntryInfo, FilterCriteria
from fs_gear.errors import PathLike
from fs_gear.local_backend import LocalFileBackend
from fs_gear.matching import matches_filter

logger = logging.getLogger(__name__)


def iter_entries(
    root: PathLike,
    criteria: FilterCriteria,
    backend: Optional[LocalFileBackend] = None,
) -> Iterator[EntryInfo]:
    """Lazily yield the entries under ``root`` that pass ``criteria``.

    Any entry that cannot be stat'ed raises and ends the iteration; entries
    already yielded are not rolled back. Use ``traverse`` for an
    all-or-nothing result.
    """
    if backend is None:
        backend = LocalFileBackend()

    # One frame per open directory level: the children not visited yet.
    # Children are read in full so the directory handle is closed before
    # descending into subdirectories.
    stack: list[Iterator[str]] = [iter(backend.scan_dir(root))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        entry = backend.stat(child)

        if matches_filter(entry, criteria):
            yield entry

        if criteria.recursive and entry.is_directory:
            logger.debug(f"Descending into {entry.path}")
            stack.append(iter(backend.scan_dir(entry.path)))


def traverse(
    root: PathLike,
    criteria: Optional[FilterCriteria] = None,
    backend: Optional[LocalFileBackend] = None,
) -> list[EntryInfo]:
    """List the entries under ``root`` that pass ``criteria``.

    Args:
        root: Directory to list.
        criteria: Filter to apply (default: everything, non-recursive).
        backend: Filesystem collaborator (default: the local filesystem).

    Returns:
        Matching entries in traversal order.

    Raises:
        NotFoundError: If ``root`` or an entry vanishes during the listing.
        PermissionDeniedError: If a directory or entry cannot be accessed.
        FileIoError: If ``root`` is not a directory, or on other failures.
    """
    if criteria is None:
        criteria = FilterCriteria()
    logger.debug(
        f"Listing {os.fspath(root)} (recursive={criteria.recursive}, "
        f"files={criteria.include_files}, dirs={criteria.include_directories})"
    )
    return list(iter_entries(root, criteria, backend))
