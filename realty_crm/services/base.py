"""Shared CRUD plumbing for record services."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Mapping
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, TypeVar

from realty_crm.exceptions import InvalidRecordError, RecordNotFoundError, StoreTimeoutError
from realty_crm.logging import log_context
from realty_crm.query import Page, Query, QueryEngine
from realty_crm.store import IdFactory, RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Assigned by the service, never by callers
SYSTEM_FIELDS = frozenset({"id", "created_at", "updated_at"})


class RecordService(Generic[T]):
    """CRUD over one record store plus query execution.

    Parameters
    ----------
    store : RecordStore[T]
        Backing collection.
    engine : QueryEngine[T]
        Query engine for the entity kind.
    id_factory : Callable[[], str] | None
        Id source for new records (default: time-based ``IdFactory``).
    clock : Callable[[], datetime]
        Time source for timestamps.
    timeout : float | None
        Per store call timeout in seconds; ``None`` waits indefinitely.
    """

    record_type: type
    entity_name = "record"

    def __init__(
        self,
        store: RecordStore[T],
        engine: QueryEngine[T],
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] = datetime.now,
        timeout: float | None = None,
    ) -> None:
        self.store = store
        self.engine = engine
        self.id_factory = id_factory or IdFactory()
        self.clock = clock
        self.timeout = timeout
        self._write_lock = asyncio.Lock()

    async def _call(self, awaitable: Awaitable[R]) -> R:
        if self.timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, self.timeout)
        except asyncio.TimeoutError as e:
            raise StoreTimeoutError(
                f"{self.entity_name.capitalize()} store did not answer within {self.timeout}s"
            ) from e

    async def _all(self) -> list[T]:
        return await self._call(self.store.get_all())

    async def _query(self, query: Query | None) -> Page[T]:
        return self.engine.run(await self._all(), query)

    async def _get(self, record_id: str) -> T | None:
        return await self._call(self.store.get(record_id))

    async def _require(self, record_id: str) -> T:
        record = await self._get(record_id)
        if record is None:
            self._log_missing(record_id)
            raise RecordNotFoundError(f"{self.entity_name.capitalize()} {record_id} not found")
        return record

    async def _create(self, data: Mapping[str, Any], **overrides: Any) -> T:
        fields = dict(data)
        assigned = SYSTEM_FIELDS.intersection(fields)
        if assigned:
            raise InvalidRecordError(f"Cannot set {', '.join(sorted(assigned))} on create")
        fields.update(overrides)
        now = self.clock()
        try:
            record = self.record_type(
                id=self.id_factory(),
                created_at=now,
                updated_at=now,
                **self._normalize(fields),
            )
        except TypeError as e:
            raise InvalidRecordError(f"Invalid {self.entity_name} data: {e}") from e

        async with self._write_lock:
            await self._call(self.store.insert(record))
        logger.info(
            "Created %s %s",
            self.entity_name,
            record.id,
            extra=log_context(self.entity_name, record.id),
        )
        return record

    async def _update(
        self,
        record_id: str,
        patch: Mapping[str, Any] | Callable[[T], Mapping[str, Any]],
    ) -> T:
        """Merge a patch into a stored record.

        ``patch`` may be a callable computing the patch from the current
        record, so read-modify-write updates happen under the write lock.
        """
        async with self._write_lock:
            current = await self._require(record_id)
            if callable(patch):
                patch = patch(current)
            updated = self._merge(current, patch)
            await self._call(self.store.replace(record_id, updated))
        logger.info(
            "Updated %s %s (%s)",
            self.entity_name,
            record_id,
            ", ".join(sorted(patch)),
            extra=log_context(self.entity_name, record_id, fields=sorted(patch)),
        )
        return updated

    async def _delete(self, record_id: str) -> None:
        async with self._write_lock:
            try:
                await self._call(self.store.remove(record_id))
            except RecordNotFoundError:
                self._log_missing(record_id)
                raise
        logger.info(
            "Deleted %s %s",
            self.entity_name,
            record_id,
            extra=log_context(self.entity_name, record_id),
        )

    def _log_missing(self, record_id: str) -> None:
        logger.warning(
            "%s %s not found",
            self.entity_name.capitalize(),
            record_id,
            extra=log_context(self.entity_name, record_id),
        )

    def _merge(self, record: T, patch: Mapping[str, Any]) -> T:
        """Merge ``patch`` over ``record`` and refresh ``updated_at``."""
        frozen = SYSTEM_FIELDS.intersection(patch)
        if frozen:
            raise InvalidRecordError(f"Cannot change {', '.join(sorted(frozen))}")
        known = {f.name for f in dataclasses.fields(record)}
        unknown = set(patch) - known
        if unknown:
            raise InvalidRecordError(
                f"Unknown {self.entity_name} fields: {', '.join(sorted(unknown))}"
            )
        try:
            fields = self._normalize(dict(patch))
        except TypeError as e:
            raise InvalidRecordError(f"Invalid {self.entity_name} data: {e}") from e
        return dataclasses.replace(
            record,
            **fields,
            updated_at=self._next_update_time(record.updated_at),
        )

    def _next_update_time(self, previous: datetime) -> datetime:
        # updated_at must move strictly forward even within one clock tick
        now = self.clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def _normalize(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Coerce raw field values (e.g. enum strings) to model types."""
        return fields


def coerce_enum(kind: type, value: Any) -> Any:
    """Convert ``value`` to enum ``kind``; ``None`` passes through."""
    if value is None:
        return None
    try:
        return kind(value)
    except ValueError as e:
        raise InvalidRecordError(f"Invalid {kind.__name__}: {value!r}") from e


def enum_value(member: Any) -> Any:
    return getattr(member, "value", member)
