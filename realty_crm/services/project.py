"""Development project lookups."""

from __future__ import annotations

from typing import Any

from realty_crm.models import Project
from realty_crm.query import PROJECT_SCHEMA, Page, Query, QueryEngine
from realty_crm.services.base import RecordService
from realty_crm.store import RecordStore


class ProjectService(RecordService[Project]):
    """Read access to development projects."""

    record_type = Project
    entity_name = "project"

    def __init__(self, store: RecordStore[Project], page_size: int = 12, **kwargs: Any) -> None:
        super().__init__(store, QueryEngine(PROJECT_SCHEMA, default_limit=page_size), **kwargs)

    async def list_projects(self, query: Query | None = None) -> Page[Project]:
        return await self._query(query)

    async def get_project(self, project_id: str) -> Project | None:
        return await self._get(project_id)
