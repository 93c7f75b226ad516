"""Local filesystem implementation of the capability ports.

Directory and file handles wrap resolved ``pathlib`` paths. Every OS
failure is converted into a Reactions store error with the original
exception chained for diagnostics.
"""

from __future__ import annotations

from contextlib import contextmanager
import mimetypes
import os
from pathlib import Path
import tempfile
from typing import BinaryIO, Iterator

from capability.ports import DirectoryReference, EntryReference, FileReference
from core.constants import FALLBACK_MIME_TYPE
from core.errors import (
    ReactionsAccessError,
    ReactionsNotFoundError,
    ReactionsStoreError,
)
from core.types import FileContent

PARTIAL_FILE_SUFFIX = ".partial"


class LocalDirectory(DirectoryReference):
    """Directory capability backed by a local path."""

    def __init__(self, path: Path) -> None:
        self._path = path.expanduser().resolve()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    def get_child(self, name: str) -> "LocalDirectory":
        child_path = _child_path(self._path, name)
        try:
            is_directory = child_path.is_dir()
        except (OSError, ValueError) as error:
            raise _storage_error("look up directory", child_path, error) from error
        if not is_directory:
            raise ReactionsNotFoundError(f"Directory not found: {child_path}.")
        return LocalDirectory(child_path)

    def get_or_create_child(self, name: str) -> "LocalDirectory":
        child_path = _child_path(self._path, name)
        try:
            child_path.mkdir(exist_ok=True)
        except FileExistsError as error:
            raise ReactionsStoreError(
                f"Cannot create directory {child_path}: a file with that name exists."
            ) from error
        except (OSError, ValueError) as error:
            raise _storage_error("create directory", child_path, error) from error
        return LocalDirectory(child_path)

    def list_entries(self) -> tuple[EntryReference, ...]:
        entries: list[EntryReference] = []
        try:
            for child_path in self._path.iterdir():
                if child_path.name.endswith(PARTIAL_FILE_SUFFIX):
                    continue
                if child_path.is_dir():
                    entries.append(
                        EntryReference(child_path.name, "directory", LocalDirectory(child_path))
                    )
                elif child_path.is_file():
                    entries.append(EntryReference(child_path.name, "file", LocalFile(child_path)))
        except (OSError, ValueError) as error:
            raise _storage_error("list directory", self._path, error) from error
        return tuple(entries)

    def get_or_create_file(self, name: str) -> "LocalFile":
        """Return a handle for ``name``; a new file appears when its first sink closes."""
        file_path = _child_path(self._path, name)
        try:
            is_directory = file_path.is_dir()
        except (OSError, ValueError) as error:
            raise _storage_error("open file", file_path, error) from error
        if is_directory:
            raise ReactionsStoreError(f"Cannot open {file_path} as a file: it is a directory.")
        return LocalFile(file_path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDirectory):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"LocalDirectory({str(self._path)!r})"


class LocalFile(FileReference):
    """File capability backed by a local path."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @contextmanager
    def open_for_write(self) -> Iterator[BinaryIO]:
        """Write into a sibling temp file and swap it in on clean exit.

        Readers never observe a half-written file. When the block raises,
        the temp file is discarded and the previous content stays.
        """
        try:
            handle = tempfile.NamedTemporaryFile(
                mode="wb",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=PARTIAL_FILE_SUFFIX,
                delete=False,
            )
        except (OSError, ValueError) as error:
            raise _storage_error("open for write", self._path, error) from error
        temp_path = Path(handle.name)
        try:
            with handle:
                yield handle
            os.replace(temp_path, self._path)
        except OSError as error:
            temp_path.unlink(missing_ok=True)
            raise _storage_error("write", self._path, error) from error
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def read_content(self) -> FileContent:
        try:
            content = self._path.read_bytes()
        except (OSError, ValueError) as error:
            raise _storage_error("read", self._path, error) from error
        return FileContent(
            name=self._path.name,
            size=len(content),
            mime_type=guess_mime_type(self._path.name),
            content=content,
        )

    def __repr__(self) -> str:
        return f"LocalFile({str(self._path)!r})"


def guess_mime_type(file_name: str) -> str:
    """Guess a media type from a file name."""
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type or FALLBACK_MIME_TYPE


def _child_path(parent: Path, name: str) -> Path:
    """Resolve a direct child path, rejecting names that escape the parent.

    Args:
        parent: Parent directory path.
        name: Child entry name.

    Returns:
        Child path.

    Raises:
        ReactionsStoreError: If name is empty, holds a NUL byte, or is not a
            single path segment.
    """
    forbidden = {"/", "\x00", os.sep, os.altsep} - {None}
    if not name or name in {".", ".."} or any(char in name for char in forbidden):
        raise ReactionsStoreError(
            f"Invalid entry name '{name}': expected a single file or directory name."
        )
    return parent / name


def _storage_error(action: str, path: Path, error: OSError | ValueError) -> ReactionsStoreError:
    """Map an OS error onto the Reactions store error taxonomy.

    Args:
        action: Operation being attempted.
        path: Path the operation targeted.
        error: Original OS error, or the ValueError pathlib raises for
            paths the OS cannot represent.

    Returns:
        Store error instance for the caller to raise.
    """
    reason = error.strerror if isinstance(error, OSError) and error.strerror else error
    message = f"Failed to {action} {path}: {reason}."
    if isinstance(error, PermissionError):
        return ReactionsAccessError(message)
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return ReactionsNotFoundError(message)
    return ReactionsStoreError(message)
