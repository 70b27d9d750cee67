"""Tests for ProjectService."""

import pytest

from realty_crm.fixtures import fixture_projects
from realty_crm.models import ProjectStatus
from realty_crm.query import Query
from realty_crm.services import ProjectService
from realty_crm.store import InMemoryRecordStore


@pytest.fixture
def project_service() -> ProjectService:
    return ProjectService(InMemoryRecordStore(fixture_projects(), name="project"))


class TestProjectService:
    """Tests for project lookups."""

    @pytest.mark.asyncio
    async def test_list_all(self, project_service: ProjectService) -> None:
        page = await project_service.list_projects()
        assert page.total == 2
        assert page.limit == 12

    @pytest.mark.asyncio
    async def test_filter_by_status(self, project_service: ProjectService) -> None:
        page = await project_service.list_projects(
            Query(filters={"status": ProjectStatus.CONSTRUCTION})
        )
        assert [p.name for p in page.items] == ["Melosa Garden"]

    @pytest.mark.asyncio
    async def test_search_developer(self, project_service: ProjectService) -> None:
        page = await project_service.list_projects(Query(search="vingroup"))
        assert [p.id for p in page.items] == ["1"]

    @pytest.mark.asyncio
    async def test_sort_by_completion(self, project_service: ProjectService) -> None:
        page = await project_service.list_projects(Query(sort_by="completion"))
        assert [p.id for p in page.items] == ["2", "1"]

    @pytest.mark.asyncio
    async def test_get_project(self, project_service: ProjectService) -> None:
        project = await project_service.get_project("2")
        assert project.developer == "Khang Điền"
        assert project.property_ids == ["2"]

    @pytest.mark.asyncio
    async def test_get_missing(self, project_service: ProjectService) -> None:
        assert await project_service.get_project("nope") is None
