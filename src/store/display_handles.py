"""Generation-tagged table of revocable display references.

Each listing materializes a fresh generation of references. Revoking a
reference drops its bytes from the table; resolving it afterwards fails.
"""

from __future__ import annotations

from itertools import count
import threading
from typing import Iterable, Sequence

from core.errors import DisplayReferenceRevokedError
from core.logging_config import get_logger
from core.types import AssetEntry, DisplayReference

_LOGGER = get_logger(__name__)


class DisplayHandleTable:
    """Process-local store of live display references."""

    def __init__(self) -> None:
        self._generations = count(1)
        self._serials = count(1)
        self._live: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def materialize(self, entries: Sequence[AssetEntry]) -> tuple[DisplayReference, ...]:
        """Issue one reference per entry under a new generation.

        Args:
            entries: Listed asset entries.

        Returns:
            References in entry order.
        """
        with self._lock:
            generation = next(self._generations)
            references = []
            for entry in entries:
                ref_id = f"display:{generation}:{next(self._serials)}"
                self._live[ref_id] = entry.content
                references.append(
                    DisplayReference(ref_id=ref_id, generation=generation, name=entry.name)
                )
        _LOGGER.debug(
            "display_references_materialized",
            generation=generation,
            reference_count=len(references),
        )
        return tuple(references)

    def resolve(self, reference: DisplayReference) -> bytes:
        """Return the bytes behind a live reference.

        Raises:
            DisplayReferenceRevokedError: If the reference was revoked or
                never issued by this table.
        """
        with self._lock:
            content = self._live.get(reference.ref_id)
        if content is None:
            raise DisplayReferenceRevokedError(
                f"Display reference {reference.ref_id} for '{reference.name}' is no longer live."
            )
        return content

    def is_live(self, reference: DisplayReference) -> bool:
        with self._lock:
            return reference.ref_id in self._live

    def revoke_all(self, references: Iterable[DisplayReference]) -> int:
        """Revoke every given reference that is still live.

        Args:
            references: References to revoke.

        Returns:
            Number of references revoked by this call.
        """
        revoked = 0
        with self._lock:
            for reference in references:
                if self._live.pop(reference.ref_id, None) is not None:
                    revoked += 1
        if revoked:
            _LOGGER.debug("display_references_revoked", reference_count=revoked)
        return revoked

    def revoke_generation(self, generation: int) -> int:
        """Revoke every live reference issued for one generation."""
        prefix = f"display:{generation}:"
        with self._lock:
            stale = [ref_id for ref_id in self._live if ref_id.startswith(prefix)]
            for ref_id in stale:
                del self._live[ref_id]
        if stale:
            _LOGGER.debug(
                "display_references_revoked",
                generation=generation,
                reference_count=len(stale),
            )
        return len(stale)

    def live_count(self) -> int:
        with self._lock:
            return len(self._live)
