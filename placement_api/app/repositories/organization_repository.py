from abc import abstractmethod
from typing import Optional
from uuid import UUID

from placement_api.domain.entities import Organization
from .account_repository import IAccountRepository


class IOrganizationRepository(IAccountRepository):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Organization]:
        """Get organization by login username"""
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        pass
