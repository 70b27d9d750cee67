"""In-memory record store."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, TypeVar

from realty_crm.exceptions import InvalidRecordError, RecordNotFoundError
from realty_crm.store.base import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRecordStore(RecordStore[T]):
    """List-backed store living for the lifetime of the process.

    Each operation suspends once (for ``latency`` seconds when set) and
    then applies its change synchronously, so mutations never interleave.

    Parameters
    ----------
    records : Iterable[T]
        Initial records, kept in the given order.
    latency : float
        Simulated round-trip delay in seconds (default: none).
    name : str
        Collection name used in log and error messages.
    """

    def __init__(
        self,
        records: Iterable[T] = (),
        latency: float = 0.0,
        name: str = "record",
    ) -> None:
        self._records: list[T] = []
        self.latency = latency
        self.name = name
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise InvalidRecordError(f"Duplicate {name} id {record.id}")
            seen.add(record.id)
            self._records.append(record)

    async def get_all(self) -> list[T]:
        await self._round_trip()
        return list(self._records)

    async def get(self, record_id: str) -> T | None:
        await self._round_trip()
        index = self._find(record_id)
        return self._records[index] if index is not None else None

    async def insert(self, record: T) -> None:
        await self._round_trip()
        if self._find(record.id) is not None:
            raise InvalidRecordError(f"Duplicate {self.name} id {record.id}")
        self._records.insert(0, record)

    async def replace(self, record_id: str, record: T) -> None:
        await self._round_trip()
        self._records[self._index(record_id)] = record

    async def remove(self, record_id: str) -> None:
        await self._round_trip()
        del self._records[self._index(record_id)]

    async def count(self) -> int:
        await self._round_trip()
        return len(self._records)

    async def _round_trip(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    def _find(self, record_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _index(self, record_id: str) -> int:
        index = self._find(record_id)
        if index is None:
            raise RecordNotFoundError(f"{self.name.capitalize()} {record_id} not found")
        return index
