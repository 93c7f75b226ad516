"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import ReactionsConfig
from core.errors import ReactionsConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to three baseline files and the dialog picker."""
    monkeypatch.delenv("REACTIONS_BASELINE_LIMIT", raising=False)
    monkeypatch.delenv("REACTIONS_PICKER", raising=False)
    monkeypatch.delenv("REACTIONS_START_DIR", raising=False)

    config = ReactionsConfig.from_env()

    assert config == ReactionsConfig(baseline_limit=3, picker_mode="dialog", start_dir=None)


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Config should read limit, picker mode, and start directory."""
    monkeypatch.setenv("REACTIONS_BASELINE_LIMIT", "5")
    monkeypatch.setenv("REACTIONS_PICKER", " Prompt ")
    monkeypatch.setenv("REACTIONS_START_DIR", str(tmp_path))

    config = ReactionsConfig.from_env()

    assert (
        config.baseline_limit == 5
        and config.picker_mode == "prompt"
        and config.start_dir == tmp_path.resolve()
    )


def test_from_env_raises_for_invalid_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric baseline limit."""
    monkeypatch.setenv("REACTIONS_BASELINE_LIMIT", "three")

    with pytest.raises(ReactionsConfigError):
        ReactionsConfig.from_env()

    assert os.getenv("REACTIONS_BASELINE_LIMIT") == "three"


def test_from_env_raises_for_non_positive_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject a zero baseline limit."""
    monkeypatch.setenv("REACTIONS_BASELINE_LIMIT", "0")

    with pytest.raises(ReactionsConfigError):
        ReactionsConfig.from_env()


def test_from_env_raises_for_unknown_picker(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject picker modes it cannot build."""
    monkeypatch.delenv("REACTIONS_BASELINE_LIMIT", raising=False)
    monkeypatch.setenv("REACTIONS_PICKER", "carrier-pigeon")

    with pytest.raises(ReactionsConfigError):
        ReactionsConfig.from_env()
