"""Baseline asset sub-store inside a profile.

This module lists and writes files under the fixed baseline directory of
a profile. Listing never creates the directory; writing creates it on
first use.
"""

from __future__ import annotations

from typing import Sequence, cast

from capability.ports import DirectoryReference, FileReference
from core.constants import BASELINE_DIR_NAME, DEFAULT_BASELINE_LIMIT, WRITE_CHUNK_SIZE
from core.errors import (
    AssetWriteError,
    ReactionsConfigError,
    ReactionsNotFoundError,
    ReactionsStoreError,
)
from core.logging_config import get_logger
from core.types import AssetEntry, Profile, SourceFile

_LOGGER = get_logger(__name__)


def list_assets(profile: Profile) -> tuple[AssetEntry, ...]:
    """List every file stored in the profile's baseline directory.

    Directory entries inside the baseline directory are ignored. Order
    follows storage enumeration and is not stable across calls.

    A missing baseline directory is the normal state of a new profile and
    yields an empty listing. Any other read failure is logged and also
    yields an empty listing.

    Args:
        profile: Profile to list.

    Returns:
        Stored asset entries.
    """
    try:
        baseline_dir = profile.directory.get_child(BASELINE_DIR_NAME)
    except ReactionsNotFoundError:
        _LOGGER.debug("baseline_directory_missing", profile_name=profile.name)
        return ()
    except ReactionsStoreError as error:
        _log_listing_failure(profile, error)
        return ()
    try:
        entries = tuple(_read_entries(baseline_dir))
    except ReactionsStoreError as error:
        _log_listing_failure(profile, error)
        return ()
    _LOGGER.debug("baseline_assets_listed", profile_name=profile.name, asset_count=len(entries))
    return entries


def save_assets(
    profile: Profile,
    files: Sequence[SourceFile],
    limit: int = DEFAULT_BASELINE_LIMIT,
) -> tuple[str, ...]:
    """Write up to ``limit`` files into the profile's baseline directory.

    Files are written one at a time and each sink is finalized before the
    next file starts. Existing files with the same name are replaced. A
    failure aborts the rest of the batch; files already written stay.

    Args:
        profile: Target profile.
        files: Candidate files in selection order.
        limit: Maximum number of files taken from ``files``.

    Returns:
        Names of the files written.

    Raises:
        ReactionsConfigError: If limit is not positive.
        AssetWriteError: If the baseline directory or any file fails.
    """
    if limit < 1:
        raise ReactionsConfigError(f"Baseline limit must be positive, got {limit}.")
    batch = list(files)[:limit]
    if len(files) > limit:
        _LOGGER.info(
            "baseline_batch_truncated",
            profile_name=profile.name,
            requested=len(files),
            limit=limit,
        )
    try:
        baseline_dir = profile.directory.get_or_create_child(BASELINE_DIR_NAME)
    except ReactionsStoreError as error:
        raise AssetWriteError(
            f"Unable to prepare {BASELINE_DIR_NAME} in profile '{profile.name}': {error}"
        ) from error
    written: list[str] = []
    for source in batch:
        try:
            _write_file(baseline_dir, source)
        except ReactionsStoreError as error:
            _LOGGER.error(
                "baseline_asset_write_failed",
                profile_name=profile.name,
                file_name=source.name,
                written=list(written),
                error=str(error),
            )
            raise AssetWriteError(
                f"Failed to write baseline file '{source.name}': {error}"
            ) from error
        written.append(source.name)
    _LOGGER.info("baseline_assets_saved", profile_name=profile.name, file_names=written)
    return tuple(written)


def _read_entries(baseline_dir: DirectoryReference) -> list[AssetEntry]:
    """Read every file-kind entry of the baseline directory."""
    assets: list[AssetEntry] = []
    for entry in baseline_dir.list_entries():
        if entry.kind != "file":
            continue
        content = cast(FileReference, entry.reference).read_content()
        assets.append(
            AssetEntry(
                name=content.name,
                content=content.content,
                size=content.size,
                mime_type=content.mime_type,
            )
        )
    return assets


def _write_file(baseline_dir: DirectoryReference, source: SourceFile) -> None:
    """Replace one file's content through a scoped sink."""
    file_ref = baseline_dir.get_or_create_file(source.name)
    payload = memoryview(source.content)
    with file_ref.open_for_write() as sink:
        for offset in range(0, len(payload), WRITE_CHUNK_SIZE):
            sink.write(bytes(payload[offset : offset + WRITE_CHUNK_SIZE]))


def _log_listing_failure(profile: Profile, error: ReactionsStoreError) -> None:
    """Record a read failure that the listing reports as empty."""
    _LOGGER.warning(
        "baseline_listing_failed",
        profile_name=profile.name,
        error_type=type(error).__name__,
        error=str(error),
    )
