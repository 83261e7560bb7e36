from abc import ABC, abstractmethod
from typing import Optional

from placement_api.domain.entities import AccountRef


class IAccountRepository(ABC):
    """
    Capability shared by the three account collections: find the owner of a
    recovery email and overwrite its password hash. The identity resolver
    only talks to accounts through this interface.
    """

    @abstractmethod
    async def find_by_recovery_email(self, email: str) -> Optional[AccountRef]:
        """Return a reference to the account owning this recovery email"""
        pass

    @abstractmethod
    async def set_password_hash(self, key: str, password_hash: str) -> bool:
        """Write password hash for the account identified by key; False if absent"""
        pass
