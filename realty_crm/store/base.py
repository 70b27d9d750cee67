"""Record store interface."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class RecordStore(ABC, Generic[T]):
    """Asynchronous collection of records keyed by their ``id`` attribute.

    Services treat the store as the single source of truth; the query
    engine only ever reads the snapshot returned by ``get_all``.
    """

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Return a snapshot of every record, newest insert first."""

    @abstractmethod
    async def get(self, record_id: str) -> T | None:
        """Return the record with ``record_id`` or None."""

    @abstractmethod
    async def insert(self, record: T) -> None:
        """Add a new record at the front of the collection."""

    @abstractmethod
    async def replace(self, record_id: str, record: T) -> None:
        """Swap the stored record in place.

        Raises
        ------
        RecordNotFoundError
            If no record has ``record_id``.
        """

    @abstractmethod
    async def remove(self, record_id: str) -> None:
        """Delete a record.

        Raises
        ------
        RecordNotFoundError
            If no record has ``record_id``.
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored records."""


class IdFactory:
    """Time-based string ids, strictly increasing within one process.

    Parameters
    ----------
    clock : Callable[[], int]
        Nanosecond clock (default ``time.time_ns``).
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        millis = self._clock() // 1_000_000
        self._last = max(millis, self._last + 1)
        return str(self._last)
