"""Profile store over user-chosen directories.

A profile is a directory the user picked, or a named child created under
a picked parent. Opening and creating share the same create-if-missing
child lookup, so reopening a freshly created profile is idempotent.
"""

from __future__ import annotations

from capability.ports import DirectoryPicker, DirectoryReference
from core.constants import DEFAULT_PROFILE_NAME, MESSAGE_NAME_REQUIRED
from core.errors import InvalidProfileNameError
from core.logging_config import get_logger
from core.types import Profile

_LOGGER = get_logger(__name__)
_RESERVED_NAMES = frozenset({".", ".."})
_SEPARATORS = ("/", "\\")


class ProfileStore:
    """Resolve profiles through an injected directory picker."""

    def __init__(self, picker: DirectoryPicker) -> None:
        """Initialize profile store.

        Args:
            picker: Directory picker used for every user selection.
        """
        self._picker = picker

    def open_profile(self) -> Profile:
        """Ask the user for a directory and use it as the profile root.

        Returns:
            Opened profile.

        Raises:
            UserCancelledError: If the user dismisses the picker.
            ReactionsStoreError: If the directory cannot be resolved.
        """
        directory = self._picker.request_directory()
        profile = profile_from_directory(directory)
        _LOGGER.info("profile_opened", profile_name=profile.name)
        return profile

    def create_profile(self, name: str) -> Profile:
        """Create or reopen a named profile under a user-chosen parent.

        Args:
            name: Profile name; surrounding whitespace is ignored.

        Returns:
            Created or existing profile.

        Raises:
            InvalidProfileNameError: If the name is unusable. Raised before
                the picker is shown.
            UserCancelledError: If the user dismisses the picker.
            ReactionsStoreError: If the profile directory cannot be created.
        """
        profile_name = validate_profile_name(name)
        parent = self._picker.request_directory()
        directory = parent.get_or_create_child(profile_name)
        profile = Profile(name=profile_name, directory=directory)
        _LOGGER.info("profile_created", profile_name=profile_name)
        return profile


def validate_profile_name(name: str) -> str:
    """Return the trimmed profile name or raise for unusable input.

    Args:
        name: Raw user input.

    Returns:
        Trimmed profile name.

    Raises:
        InvalidProfileNameError: If name is blank, reserved, a path, or holds
            a NUL character.
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise InvalidProfileNameError(MESSAGE_NAME_REQUIRED)
    if "\x00" in trimmed:
        raise InvalidProfileNameError("Profile name must not contain a NUL character.")
    if trimmed in _RESERVED_NAMES or any(separator in trimmed for separator in _SEPARATORS):
        raise InvalidProfileNameError(
            f"Profile name '{trimmed}' must be a single folder name without path separators."
        )
    return trimmed


def profile_from_directory(directory: DirectoryReference) -> Profile:
    """Wrap a directory capability as a profile named after it."""
    return Profile(name=directory.name or DEFAULT_PROFILE_NAME, directory=directory)
