"""Directory pickers that resolve user-chosen directory capabilities.

Each picker reports whether the host can present it, so callers can gate
their entry points once at startup. Dismissing a picker raises
``UserCancelledError`` and never mutates storage.
"""

from __future__ import annotations

import importlib.util
import os
from pathlib import Path
import sys
from typing import Callable

from capability.local_fs import LocalDirectory
from capability.ports import DirectoryPicker
from core.config import ReactionsConfig
from core.errors import (
    PlatformUnsupportedError,
    ReactionsConfigError,
    ReactionsNotFoundError,
    ReactionsStoreError,
    UserCancelledError,
)
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class FixedDirectoryPicker(DirectoryPicker):
    """Picker that returns a directory chosen ahead of time."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def is_supported(self) -> bool:
        return True

    def request_directory(self) -> LocalDirectory:
        return _resolve_existing_directory(self._path)


class PromptDirectoryPicker(DirectoryPicker):
    """Terminal picker that asks for a directory path.

    An empty answer, end of input, or an interrupt counts as a cancel.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        start_dir: Path | None = None,
    ) -> None:
        self._input_fn = input_fn
        self._start_dir = start_dir

    def is_supported(self) -> bool:
        if self._input_fn is not input:
            return True
        return sys.stdin is not None and sys.stdin.isatty()

    def request_directory(self) -> LocalDirectory:
        prompt = "Folder path"
        if self._start_dir is not None:
            prompt += f" (relative to {self._start_dir})"
        try:
            answer = self._input_fn(f"{prompt}: ").strip()
        except (EOFError, KeyboardInterrupt) as error:
            raise UserCancelledError("Directory prompt dismissed.") from error
        if not answer:
            raise UserCancelledError("Directory prompt dismissed.")
        path = Path(answer).expanduser()
        if self._start_dir is not None and not path.is_absolute():
            path = self._start_dir / path
        return _resolve_existing_directory(path)


class DialogDirectoryPicker(DirectoryPicker):
    """Native folder dialog backed by ``tkinter.filedialog``."""

    def __init__(self, start_dir: Path | None = None) -> None:
        self._start_dir = start_dir

    def is_supported(self) -> bool:
        if importlib.util.find_spec("tkinter") is None:
            return False
        if sys.platform.startswith("win") or sys.platform == "darwin":
            return True
        return bool(os.getenv("DISPLAY") or os.getenv("WAYLAND_DISPLAY"))

    def request_directory(self) -> LocalDirectory:
        if not self.is_supported():
            raise PlatformUnsupportedError(
                "Folder dialogs need tkinter and a graphical display. "
                "Set REACTIONS_PICKER=prompt or pass a path explicitly."
            )
        import tkinter
        from tkinter import filedialog

        try:
            root = tkinter.Tk()
        except tkinter.TclError as error:
            raise PlatformUnsupportedError(f"Unable to start folder dialog: {error}.") from error
        try:
            root.withdraw()
            root.attributes("-topmost", True)
            chosen = filedialog.askdirectory(
                parent=root,
                initialdir=str(self._start_dir) if self._start_dir else None,
                mustexist=True,
            )
        except tkinter.TclError as error:
            raise ReactionsStoreError(f"Folder dialog failed: {error}.") from error
        finally:
            root.destroy()
        if not chosen:
            raise UserCancelledError("Folder dialog dismissed.")
        return _resolve_existing_directory(Path(chosen))


def build_directory_picker(config: ReactionsConfig) -> DirectoryPicker:
    """Build the interactive picker selected by config.

    Args:
        config: Runtime configuration.

    Returns:
        Directory picker instance.

    Raises:
        ReactionsConfigError: If picker mode is unknown.
    """
    if config.picker_mode == "dialog":
        return DialogDirectoryPicker(start_dir=config.start_dir)
    if config.picker_mode == "prompt":
        return PromptDirectoryPicker(start_dir=config.start_dir)
    raise ReactionsConfigError(f"Unsupported picker mode: {config.picker_mode}.")


def _resolve_existing_directory(path: Path) -> LocalDirectory:
    """Wrap an existing directory path as a capability."""
    resolved = path.expanduser().resolve()
    if not resolved.is_dir():
        raise ReactionsNotFoundError(f"Directory not found: {resolved}.")
    _LOGGER.debug("directory_selected", path=str(resolved))
    return LocalDirectory(resolved)
