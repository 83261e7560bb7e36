from abc import ABC, abstractmethod
from typing import Dict, List
from uuid import UUID


class IApplicationRepository(ABC):
    """Application repository interface - application layer"""

    @abstractmethod
    async def count_by_projects(self, project_ids: List[UUID]) -> Dict[UUID, int]:
        """Count applications per project; projects without any are omitted"""
        pass

    @abstractmethod
    async def delete_by_project_id(self, project_id: UUID) -> int:
        """Delete all applications of a project"""
        pass
