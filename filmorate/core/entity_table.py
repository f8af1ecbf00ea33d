"""Entity Table — generic in-memory owner of one record kind.

Invariants:
    - Ids come from a monotonic counter: strictly increasing, never reused,
      even after the row holding the current maximum is deleted
    - Every public method runs under the table's single lock, so check-then-act
      sequences (uniqueness check + insert) cannot interleave
    - find_by_id never raises; update/delete raise ResourceNotFoundError
    - find_all returns a new list of frozen records (a snapshot)
    - A failed mutation leaves the table untouched

Design Decisions:
    - Template-method hooks (_prepare, _check_unique, _on_created, _on_deleted)
      let UserDirectory/FilmCatalog add their auxiliary indexes under the same lock
    - RLock over Lock: hooks may call public readers without self-deadlock
"""

import logging
import threading
from dataclasses import replace
from typing import Generic, TypeVar

from filmorate.core.domain_types import EntityKind, FIRST_ID
from filmorate.core.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryEntityTable(Generic[T]):
    """Dict-backed table with lock-guarded CRUD and id assignment."""

    kind: EntityKind

    def __init__(self) -> None:
        self._records: dict[int, T] = {}
        self._last_id = FIRST_ID - 1
        self._lock = threading.RLock()

    # ─── Queries ─────────────────────────────────────────────────

    def find_by_id(self, record_id: int) -> T | None:
        with self._lock:
            return self._records.get(record_id)

    def find_all(self) -> list[T]:
        with self._lock:
            return list(self._records.values())

    def exists(self, record_id: int) -> bool:
        with self._lock:
            return record_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # ─── Mutations ───────────────────────────────────────────────

    def create(self, record: T) -> T:
        """Assign a fresh id and store the record."""
        with self._lock:
            record = self._prepare(record)
            self._check_unique(record, exclude_id=None)
            self._last_id += 1
            stored = replace(record, id=self._last_id)
            self._records[self._last_id] = stored
            self._on_created(stored)
        logger.info(f"Created {self.kind.value} id={stored.id}")
        return stored

    def update(self, record: T) -> T:
        """Full-record replace. record.id must reference an existing row."""
        record_id = record.id
        with self._lock:
            if record_id not in self._records:
                raise ResourceNotFoundError(self.kind.value, record_id)
            previous = self._records[record_id]
            record = self._prepare(record)
            self._check_unique(record, exclude_id=record_id)
            self._records[record_id] = record
            self._on_updated(previous, record)
        logger.info(f"Updated {self.kind.value} id={record_id}")
        return record

    def delete(self, record_id: int) -> None:
        """Remove the row and cascade its auxiliary data."""
        with self._lock:
            removed = self._records.pop(record_id, None)
            if removed is None:
                raise ResourceNotFoundError(self.kind.value, record_id)
            self._on_deleted(removed)
        logger.info(f"Deleted {self.kind.value} id={record_id}")

    # ─── Hooks (called with the lock held) ───────────────────────

    def _require(self, record_id: int) -> T:
        record = self._records.get(record_id)
        if record is None:
            raise ResourceNotFoundError(self.kind.value, record_id)
        return record

    def _prepare(self, record: T) -> T:
        return record

    def _check_unique(self, record: T, exclude_id: int | None) -> None:
        pass

    def _on_created(self, record: T) -> None:
        pass

    def _on_updated(self, previous: T, record: T) -> None:
        pass

    def _on_deleted(self, record: T) -> None:
        pass
