"""Shared typed models.

This module defines immutable data models used by the capability,
store, and session layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from capability.ports import DirectoryReference

EntryKind = Literal["file", "directory"]


@dataclass(frozen=True)
class FileContent:
    """Bytes and metadata read from one stored file.

    Attributes:
        name: File base name.
        size: Content length in bytes.
        mime_type: Guessed media type.
        content: Raw file bytes.
    """

    name: str
    size: int
    mime_type: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class Profile:
    """One user's working context rooted at a directory.

    Attributes:
        name: Display name, the directory base name.
        directory: Capability for the profile root directory.
    """

    name: str
    directory: "DirectoryReference"


@dataclass(frozen=True)
class SourceFile:
    """Candidate asset chosen by the user before it is stored."""

    name: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class AssetEntry:
    """One file stored in a profile's baseline sub-store.

    Attributes:
        name: File name, unique within the sub-store.
        content: Stored bytes.
        size: Content length in bytes.
        mime_type: Guessed media type.
    """

    name: str
    content: bytes = field(repr=False)
    size: int
    mime_type: str


@dataclass(frozen=True)
class DisplayReference:
    """Process-local revocable handle to an asset's bytes.

    Attributes:
        ref_id: Opaque reference identifier.
        generation: Listing generation that issued the reference.
        name: Asset name the reference renders.
    """

    ref_id: str
    generation: int
    name: str


@dataclass(frozen=True)
class AssetView:
    """Asset row handed to the presentation layer."""

    name: str
    display_reference: DisplayReference


@dataclass(frozen=True)
class WorkspaceView:
    """Presentation snapshot of the current session state.

    Attributes:
        profile_name: Current profile name, empty when none is open.
        assets: Listed assets with their display references.
        busy: Whether a storage command is in flight.
        error_message: Generic banner message, empty when none.
        input_error: Inline profile-name validation message.
        supported: Whether interactive directory selection is available.
        notice: Persistent informational or warning text.
    """

    profile_name: str
    assets: tuple[AssetView, ...]
    busy: bool
    error_message: str
    input_error: str
    supported: bool
    notice: str
