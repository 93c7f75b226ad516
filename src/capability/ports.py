"""Capability ports for directory and file access.

The store layer only talks to these abstractions, so profile and asset
logic stays independent of any one platform's storage API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ContextManager, Protocol, Sequence

from core.types import EntryKind, FileContent


class WritableSink(Protocol):
    """Scoped byte sink for one file; finalized when its context exits."""

    def write(self, data: bytes) -> int:
        """Append bytes to the pending file content."""
        ...


class FileReference(ABC):
    """Capability for a single stored file."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the file base name."""

    @abstractmethod
    def open_for_write(self) -> ContextManager[WritableSink]:
        """Open a scoped sink that replaces the file content on close."""

    @abstractmethod
    def read_content(self) -> FileContent:
        """Read the file bytes with name, size, and media type."""


@dataclass(frozen=True)
class EntryReference:
    """One enumerated directory entry."""

    name: str
    kind: EntryKind
    reference: "DirectoryReference | FileReference"


class DirectoryReference(ABC):
    """Capability for a directory on persistent storage."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the directory base name."""

    @abstractmethod
    def get_child(self, name: str) -> "DirectoryReference":
        """Return an existing child directory.

        Raises:
            ReactionsNotFoundError: If the child does not exist.
        """

    @abstractmethod
    def get_or_create_child(self, name: str) -> "DirectoryReference":
        """Return a child directory, creating it when missing."""

    @abstractmethod
    def list_entries(self) -> Sequence[EntryReference]:
        """Enumerate direct children in storage order."""

    @abstractmethod
    def get_or_create_file(self, name: str) -> FileReference:
        """Return a file handle; a missing file is created when its first sink closes."""

    def same_entry(self, other: "DirectoryReference") -> bool:
        """Return whether both references point at the same directory."""
        return self == other


class DirectoryPicker(ABC):
    """Interactive, user-consented source of directory capabilities."""

    @abstractmethod
    def is_supported(self) -> bool:
        """Return whether the host can present this picker."""

    @abstractmethod
    def request_directory(self) -> DirectoryReference:
        """Ask the user for a directory.

        Raises:
            UserCancelledError: If the user dismisses the prompt.
            PlatformUnsupportedError: If the host lacks the capability.
            ReactionsStoreError: For any other platform failure.
        """
