from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from placement_api.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - every lookup is scoped to an organization"""

    @abstractmethod
    async def list_by_organization(self, organization_id: UUID) -> List[Project]:
        """List an organization's projects, newest first"""
        pass

    @abstractmethod
    async def get_for_organization(
        self, project_id: UUID, organization_id: UUID
    ) -> Optional[Project]:
        """Get project by ID only if owned by the organization"""
        pass

    @abstractmethod
    async def get_by_code(self, organization_id: UUID, project_code: str) -> Optional[Project]:
        """Get an organization's project by its project code"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete project"""
        pass
