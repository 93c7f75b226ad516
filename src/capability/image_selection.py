"""Selection of user-chosen image files as baseline candidates.

Files keep their base names verbatim. A file is selectable when its
guessed media type is an image type; nothing else about the format is
validated.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from capability.local_fs import guess_mime_type
from core.constants import IMAGE_MIME_PREFIX
from core.errors import ReactionsAccessError, ReactionsNotFoundError
from core.logging_config import get_logger
from core.types import SourceFile

_LOGGER = get_logger(__name__)


def is_selectable_image(file_name: str) -> bool:
    """Return whether a file name maps to an image media type."""
    return guess_mime_type(file_name).startswith(IMAGE_MIME_PREFIX)


def read_source_files(paths: Iterable[Path | str]) -> list[SourceFile]:
    """Read selectable image files into source file payloads.

    Args:
        paths: User-chosen file paths, in selection order.

    Returns:
        Source files for every selectable image path.

    Raises:
        ReactionsNotFoundError: If a selected path does not exist.
        ReactionsAccessError: If a selected file cannot be read.
    """
    selected: list[SourceFile] = []
    for raw_path in paths:
        path = Path(raw_path).expanduser()
        if not is_selectable_image(path.name):
            _LOGGER.warning("source_file_skipped", path=str(path), reason="not_an_image")
            continue
        if not path.is_file():
            raise ReactionsNotFoundError(f"Selected file not found: {path}.")
        try:
            content = path.read_bytes()
        except OSError as error:
            raise ReactionsAccessError(f"Failed to read selected file {path}: {error}.") from error
        selected.append(SourceFile(name=path.name, content=content))
    return selected
