"""Unit tests for image source selection."""

from __future__ import annotations

import pytest

from capability.image_selection import is_selectable_image, read_source_files
from core.errors import ReactionsNotFoundError


def test_is_selectable_image_checks_media_type() -> None:
    """Only image media types should be selectable."""
    assert is_selectable_image("a.PNG") and is_selectable_image("b.jpeg") and not (
        is_selectable_image("notes.txt")
    )


def test_read_source_files_keeps_names_and_skips_non_images(tmp_path) -> None:
    """Selected images keep their base names in selection order."""
    (tmp_path / "b.png").write_bytes(b"bbb")
    (tmp_path / "notes.txt").write_text("skip", encoding="utf-8")
    (tmp_path / "a.jpg").write_bytes(b"aa")

    files = read_source_files(
        [tmp_path / "b.png", tmp_path / "notes.txt", str(tmp_path / "a.jpg")]
    )

    assert [(source.name, source.content) for source in files] == [
        ("b.png", b"bbb"),
        ("a.jpg", b"aa"),
    ]


def test_read_source_files_raises_for_missing_image(tmp_path) -> None:
    """A selected image that does not exist should fail loudly."""
    with pytest.raises(ReactionsNotFoundError):
        read_source_files([tmp_path / "gone.png"])
