"""Reactions exception hierarchy.

This module defines traceable domain errors with clear boundaries.
The session command boundary converts every storage failure into one of
these types before anything reaches the presentation layer.
"""

from __future__ import annotations


class ReactionsError(Exception):
    """Base exception for all Reactions failures."""


class ReactionsConfigError(ReactionsError):
    """Raised for invalid runtime configuration."""


class UserCancelledError(ReactionsError):
    """Raised when the user dismisses an interactive picker."""


class PlatformUnsupportedError(ReactionsError):
    """Raised when the host lacks an interactive directory picker."""


class InvalidProfileNameError(ReactionsError):
    """Raised for an empty or unusable profile name."""


class ReactionsStoreError(ReactionsError):
    """Raised for profile and asset storage failures."""


class ReactionsAccessError(ReactionsStoreError):
    """Raised when the host denies access to a directory or file."""


class ReactionsNotFoundError(ReactionsStoreError):
    """Raised when a looked-up directory or file does not exist."""


class AssetWriteError(ReactionsStoreError):
    """Raised when one file of a baseline batch fails to write."""


class DisplayReferenceRevokedError(ReactionsError):
    """Raised when a revoked or unknown display reference is resolved."""
