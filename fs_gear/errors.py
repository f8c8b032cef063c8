"""Error types raised by fs_gear.

Every ``OSError`` coming out of the host filesystem is translated into one of
the kinds below at the backend boundary, so callers only ever need to catch
``FileUtilsError`` (or one of its subclasses).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileUtilsError(Exception):
    """Base class for all fs_gear errors.

    Args:
        message: Human readable description.
        path: Path the failing operation was working on, if any.
    """

    kind = "error"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class NotFoundError(FileUtilsError):
    """The target path does not exist."""

    kind = "not found"


class PermissionDeniedError(FileUtilsError):
    """The operating system refused access to the target path."""

    kind = "permission denied"


class FileIoError(FileUtilsError):
    """Any other I/O failure, including undecodable text."""

    kind = "I/O error"


class InvalidExtensionError(FileUtilsError):
    """Reserved for extension validation."""

    kind = "invalid extension"


class InvalidPathError(FileUtilsError):
    """Reserved for path validation."""

    kind = "invalid path"


def translate_os_error(exc: OSError, path: PathLike | None = None) -> FileUtilsError:
    """Map an ``OSError`` onto the fs_gear error taxonomy.

    Args:
        exc: The error raised by the host filesystem call.
        path: Path the call was made on (falls back to ``exc.filename``).

    Returns:
        A ``NotFoundError``, ``PermissionDeniedError`` or ``FileIoError``.
    """
    if path is None and exc.filename is not None:
        path = exc.filename
    shown = os.fspath(path) if path is not None else None
    message = exc.strerror or str(exc)
    if shown is not None:
        message = f"{message}: {shown}"

    if isinstance(exc, FileNotFoundError):
        return NotFoundError(message, shown)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(message, shown)
    return FileIoError(message, shown)


@contextmanager
def translating_os_errors(path: PathLike | None = None) -> Iterator[None]:
    """Re-raise any ``OSError`` from the block as a ``FileUtilsError``."""
    try:
        yield
    except OSError as e:
        raise translate_os_error(e, path) from e
