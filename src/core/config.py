"""Runtime configuration model for Reactions.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_BASELINE_LIMIT, DEFAULT_PICKER_MODE, SUPPORTED_PICKER_MODES
from core.errors import ReactionsConfigError


@dataclass(frozen=True)
class ReactionsConfig:
    """Validated runtime configuration.

    Attributes:
        baseline_limit: Maximum files written per baseline save.
        picker_mode: Interactive directory picker kind.
        start_dir: Optional directory the picker starts from.
    """

    baseline_limit: int = DEFAULT_BASELINE_LIMIT
    picker_mode: str = DEFAULT_PICKER_MODE
    start_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "ReactionsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ReactionsConfigError: If environment values are invalid.
        """
        limit_value = os.getenv("REACTIONS_BASELINE_LIMIT", str(DEFAULT_BASELINE_LIMIT))
        picker_value = os.getenv("REACTIONS_PICKER", DEFAULT_PICKER_MODE)
        start_dir_value = os.getenv("REACTIONS_START_DIR")
        return cls(
            baseline_limit=_parse_baseline_limit(limit_value),
            picker_mode=_parse_picker_mode(picker_value),
            start_dir=Path(start_dir_value).expanduser().resolve() if start_dir_value else None,
        )


def _parse_baseline_limit(raw_value: str) -> int:
    """Parse the baseline limit environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer limit.

    Raises:
        ReactionsConfigError: If value is not a positive integer.
    """
    try:
        limit = int(raw_value)
    except ValueError as error:
        raise ReactionsConfigError(
            "Invalid REACTIONS_BASELINE_LIMIT value: "
            f"expected integer, got '{raw_value}'. "
            "Set REACTIONS_BASELINE_LIMIT to a positive number."
        ) from error
    if limit < 1:
        raise ReactionsConfigError(
            f"Invalid REACTIONS_BASELINE_LIMIT value: {limit}. "
            "Set REACTIONS_BASELINE_LIMIT to a positive number."
        )
    return limit


def _parse_picker_mode(raw_value: str) -> str:
    """Normalize and validate the picker mode environment value."""
    mode = raw_value.strip().lower()
    if mode not in SUPPORTED_PICKER_MODES:
        raise ReactionsConfigError(
            f"Invalid REACTIONS_PICKER value: '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_PICKER_MODES)}."
        )
    return mode
