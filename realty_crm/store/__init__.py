"""Record stores backing the CRM services."""

from realty_crm.store.base import IdFactory, RecordStore
from realty_crm.store.memory import InMemoryRecordStore

__all__ = ["IdFactory", "InMemoryRecordStore", "RecordStore"]
