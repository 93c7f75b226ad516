"""Core constants used across Reactions modules.

This module centralizes storage names, policy limits, and user messages.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

BASELINE_DIR_NAME = "BaselineImages"
DEFAULT_BASELINE_LIMIT = 3
DEFAULT_PROFILE_NAME = "Profile"
DEFAULT_PICKER_MODE = "dialog"
SUPPORTED_PICKER_MODES = ("dialog", "prompt")
IMAGE_MIME_PREFIX = "image/"
FALLBACK_MIME_TYPE = "application/octet-stream"
WRITE_CHUNK_SIZE = 1024 * 1024

MESSAGE_EMPTY_LISTING = "Select or create a profile to start working with baseline assets."
MESSAGE_PLATFORM_UNSUPPORTED = "This platform does not support interactive folder selection."
MESSAGE_OPEN_FAILED = "Unable to open profile. Please try again."
MESSAGE_CREATE_FAILED = "Unable to create profile. Please try again."
MESSAGE_SAVE_FAILED = "Unable to save baseline images. Please try again."
MESSAGE_NAME_REQUIRED = "Please enter a profile name before creating."
MESSAGE_PROFILE_REQUIRED = "Create or open a profile before selecting images."
