"""Workspace session: the command boundary for profile and asset work.

The presentation layer issues ``open_profile``, ``create_profile``,
``save_assets`` and ``switch_profile`` and renders ``view()``. Storage
failures never escape a command; they become a generic message while
the detail goes to the log.
"""

from __future__ import annotations

import threading
from typing import Callable, Sequence

from capability.ports import DirectoryPicker
from core.config import ReactionsConfig
from core.constants import (
    MESSAGE_CREATE_FAILED,
    MESSAGE_EMPTY_LISTING,
    MESSAGE_OPEN_FAILED,
    MESSAGE_PLATFORM_UNSUPPORTED,
    MESSAGE_PROFILE_REQUIRED,
    MESSAGE_SAVE_FAILED,
)
from core.errors import (
    AssetWriteError,
    InvalidProfileNameError,
    ReactionsError,
    UserCancelledError,
)
from core.logging_config import get_logger
from core.types import AssetEntry, AssetView, DisplayReference, Profile, SourceFile, WorkspaceView
from store import asset_store
from store.display_handles import DisplayHandleTable
from store.profile_store import ProfileStore

_LOGGER = get_logger(__name__)


class WorkspaceSession:
    """Single-profile workspace state with serialized storage commands.

    At most one profile is current. Every listing replaces the previous
    one wholesale and revokes its display references first.
    """

    def __init__(self, picker: DirectoryPicker, config: ReactionsConfig | None = None) -> None:
        """Create a session.

        Args:
            picker: Directory picker for open and create commands.
            config: Optional runtime configuration.
        """
        self._config = config or ReactionsConfig.from_env()
        self._profiles = ProfileStore(picker)
        self._handles = DisplayHandleTable()
        self._busy = threading.Lock()
        self._supported = picker.is_supported()
        self._profile: Profile | None = None
        self._references: tuple[DisplayReference, ...] = ()
        self._error_message = ""
        self._input_error = ""
        if not self._supported:
            _LOGGER.warning("directory_picker_unsupported", picker=type(picker).__name__)

    @property
    def profile(self) -> Profile | None:
        return self._profile

    @property
    def supported(self) -> bool:
        return self._supported

    def view(self) -> WorkspaceView:
        """Return the presentation snapshot of the current state."""
        assets = tuple(AssetView(name=ref.name, display_reference=ref) for ref in self._references)
        if not self._supported:
            notice = MESSAGE_PLATFORM_UNSUPPORTED
        elif not assets:
            notice = MESSAGE_EMPTY_LISTING
        else:
            notice = ""
        return WorkspaceView(
            profile_name=self._profile.name if self._profile else "",
            assets=assets,
            busy=self._busy.locked(),
            error_message=self._error_message,
            input_error=self._input_error,
            supported=self._supported,
            notice=notice,
        )

    def open_profile(self) -> bool:
        """Open a user-chosen directory as the current profile.

        Returns:
            True when a profile was opened by this call.
        """
        if not self._supported:
            return False
        return self._run_command(
            "open_profile",
            lambda: self._install_profile(self._profiles.open_profile()),
            MESSAGE_OPEN_FAILED,
        )

    def create_profile(self, name: str) -> bool:
        """Create or reopen profile ``name`` under a user-chosen parent.

        Returns:
            True when a profile was created or reopened by this call.
        """
        if not self._supported:
            return False
        return self._run_command(
            "create_profile",
            lambda: self._install_profile(self._profiles.create_profile(name)),
            MESSAGE_CREATE_FAILED,
        )

    def save_assets(self, files: Sequence[SourceFile]) -> bool:
        """Store selected files in the current profile and relist.

        Only the first ``baseline_limit`` files are written. An empty
        selection is ignored.

        Returns:
            True when the whole batch was written.
        """
        profile = self._profile
        if profile is None:
            self._error_message = MESSAGE_PROFILE_REQUIRED
            return False
        if not files:
            return False

        def _save() -> None:
            try:
                asset_store.save_assets(profile, files, self._config.baseline_limit)
            except AssetWriteError:
                self._refresh_listing(profile)
                raise
            self._refresh_listing(profile)

        return self._run_command("save_assets", _save, MESSAGE_SAVE_FAILED)

    def switch_profile(self) -> None:
        """Drop the current profile and every piece of derived state."""
        self._handles.revoke_all(self._references)
        previous = self._profile
        self._profile = None
        self._references = ()
        self._error_message = ""
        self._input_error = ""
        if previous is not None:
            _LOGGER.info("profile_switched", profile_name=previous.name)

    def resolve_display(self, reference: DisplayReference) -> bytes:
        """Return the bytes behind a live display reference.

        Raises:
            DisplayReferenceRevokedError: If the reference is stale.
        """
        return self._handles.resolve(reference)

    def close(self) -> None:
        """Revoke every display reference held by the session."""
        revoked = self._handles.revoke_all(self._references)
        self._references = ()
        _LOGGER.debug("workspace_session_closed", revoked=revoked)

    def __enter__(self) -> "WorkspaceSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run_command(self, command: str, action: Callable[[], None], failure_message: str) -> bool:
        """Run one storage command under the busy guard.

        Concurrent invocations while another command runs are dropped.

        Args:
            command: Command name for logs.
            action: Storage work to perform.
            failure_message: Generic message shown on failure.

        Returns:
            True when the action completed.
        """
        if not self._busy.acquire(blocking=False):
            _LOGGER.info("command_ignored_busy", command=command)
            return False
        try:
            self._error_message = ""
            self._input_error = ""
            action()
            return True
        except UserCancelledError:
            _LOGGER.info("command_cancelled", command=command)
            return False
        except InvalidProfileNameError as error:
            self._input_error = str(error)
            return False
        except ReactionsError as error:
            _LOGGER.error(
                "command_failed",
                command=command,
                error_type=type(error).__name__,
                error=str(error),
            )
            self._error_message = failure_message
            return False
        finally:
            self._busy.release()

    def _install_profile(self, profile: Profile) -> None:
        self._refresh_listing(profile)
        self._profile = profile

    def _refresh_listing(self, profile: Profile) -> None:
        """Recompute the listing and swap in fresh display references."""
        entries: tuple[AssetEntry, ...] = asset_store.list_assets(profile)
        self._handles.revoke_all(self._references)
        self._references = self._handles.materialize(entries)
