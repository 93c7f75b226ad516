"""Public SDK surface for Reactions.

This module provides a stable import path for embedding the workspace.
It re-exports the session, pickers, store operations, and typed models.
"""

from __future__ import annotations

from capability.image_selection import is_selectable_image, read_source_files
from capability.local_fs import LocalDirectory, LocalFile
from capability.pickers import (
    DialogDirectoryPicker,
    FixedDirectoryPicker,
    PromptDirectoryPicker,
    build_directory_picker,
)
from capability.ports import DirectoryPicker, DirectoryReference, FileReference
from core.config import ReactionsConfig
from core.types import AssetEntry, DisplayReference, Profile, SourceFile, WorkspaceView
from session.workspace_session import WorkspaceSession
from store.asset_store import list_assets, save_assets
from store.display_handles import DisplayHandleTable
from store.profile_store import ProfileStore

__all__ = [
    "AssetEntry",
    "DialogDirectoryPicker",
    "DirectoryPicker",
    "DirectoryReference",
    "DisplayHandleTable",
    "DisplayReference",
    "FileReference",
    "FixedDirectoryPicker",
    "LocalDirectory",
    "LocalFile",
    "Profile",
    "ProfileStore",
    "PromptDirectoryPicker",
    "ReactionsConfig",
    "SourceFile",
    "WorkspaceSession",
    "WorkspaceView",
    "build_directory_picker",
    "is_selectable_image",
    "list_assets",
    "read_source_files",
    "save_assets",
]
