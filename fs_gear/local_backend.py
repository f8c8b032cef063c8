"""LocalFileBackend: the host filesystem calls fs_gear is built on.

Each method performs a single filesystem operation and translates any
``OSError`` into the fs_gear error taxonomy. Nothing is cached; every call
observes the filesystem as it is at that moment.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil

from fs_gear._types import EntryInfo
from fs_gear.errors import FileIoError, PathLike, translating_os_errors

logger = logging.getLogger(__name__)


class LocalFileBackend:
    """Filesystem collaborator backed by the local operating system.

    All methods accept absolute or process-relative paths and operate on them
    directly; path resolution against a configured root happens in the
    ``FileUtils`` facade.
    """

    def stat(self, path: PathLike) -> EntryInfo:
        """Get entry metadata (symlinks followed)."""
        return EntryInfo.from_path(path)

    def scan_dir(self, path: PathLike) -> list[str]:
        """List the full paths of a directory's immediate children.

        The directory handle is closed before returning. Children come back in
        the order the operating system yields them.

        Raises:
            NotFoundError: If the directory does not exist.
            PermissionDeniedError: If it cannot be opened.
            FileIoError: If it is not a directory or cannot be read.
        """
        with translating_os_errors(path):
            with os.scandir(path) as it:
                return [entry.path for entry in it]

    def read_bytes(self, path: PathLike) -> bytes:
        """Read entire file content as bytes."""
        with translating_os_errors(path):
            with open(path, "rb") as f:
                return f.read()

    def read_text(self, path: PathLike) -> str:
        """Read entire file content as UTF-8 text.

        Raises:
            FileIoError: If the content is not valid UTF-8.
        """
        data = self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FileIoError(f"stream did not contain valid UTF-8: {e}", os.fspath(path)) from e

    def write_bytes(
        self,
        path: PathLike,
        data: bytes,
        append: bool = False,
        atomic: bool = False,
    ) -> None:
        """Write bytes to a file.

        Args:
            path: File path. The parent directory must already exist.
            data: Content to write.
            append: Append to the file (created if missing) instead of
                truncating it.
            atomic: Write through a temp file and rename it over the target.
                Ignored when appending.
        """
        if atomic and not append:
            self._write_atomic(path, data)
            return

        mode = "ab" if append else "wb"
        with translating_os_errors(path):
            with open(path, mode) as f:
                f.write(data)

    def write_text(
        self,
        path: PathLike,
        content: str,
        append: bool = False,
        atomic: bool = False,
    ) -> None:
        """Write UTF-8 text to a file (see ``write_bytes``)."""
        self.write_bytes(path, content.encode("utf-8"), append=append, atomic=atomic)

    def _write_atomic(self, path: PathLike, data: bytes) -> None:
        path = os.fspath(path)
        temp_path = path + ".tmp"
        with translating_os_errors(path):
            try:
                with open(temp_path, "wb") as f:
                    f.write(data)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(temp_path, path)
            except OSError:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

    def make_dirs(self, path: PathLike) -> None:
        """Create a directory and any missing parents; existing ones are fine."""
        logger.debug(f"Creating directory {os.fspath(path)}")
        with translating_os_errors(path):
            os.makedirs(path, exist_ok=True)

    def remove_file(self, path: PathLike) -> None:
        """Remove a single file."""
        logger.debug(f"Removing file {os.fspath(path)}")
        with translating_os_errors(path):
            os.remove(path)

    def remove_empty_dir(self, path: PathLike) -> None:
        """Remove a directory that must already be empty."""
        logger.debug(f"Removing directory {os.fspath(path)}")
        with translating_os_errors(path):
            os.rmdir(path)

    def remove_tree(self, path: PathLike) -> None:
        """Remove a directory with all of its contents."""
        logger.debug(f"Removing directory tree {os.fspath(path)}")
        with translating_os_errors(path):
            shutil.rmtree(path)

    def copy(self, src: PathLike, dst: PathLike) -> int:
        """Copy file content and permission bits from ``src`` to ``dst``.

        Returns:
            Number of bytes copied.
        """
        logger.debug(f"Copying {os.fspath(src)} -> {os.fspath(dst)}")
        with translating_os_errors():
            if os.path.isdir(src):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(src))
            shutil.copyfile(src, dst)
            shutil.copymode(src, dst)
            return os.stat(dst).st_size

    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Rename or move a file or directory."""
        logger.debug(f"Moving {os.fspath(src)} -> {os.fspath(dst)}")
        with translating_os_errors():
            os.rename(src, dst)
