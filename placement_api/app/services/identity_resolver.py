"""
Identity Resolver

Maps a recovery email onto the account that owns it, across the student,
admin and organization collections.
"""

from typing import List, Optional, Tuple

from placement_api.app.repositories.account_repository import IAccountRepository
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import AccountKind, AccountRef


class IdentityResolver:
    """
    Resolves emails to AccountRef values.

    Collections are searched in a fixed priority order (student, admin,
    organization) and the first match wins, so an email registered under
    several kinds always resolves to the same one.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _stores(self) -> List[Tuple[AccountKind, IAccountRepository]]:
        return [
            (AccountKind.student, self.uow.students),
            (AccountKind.admin, self.uow.admins),
            (AccountKind.organization, self.uow.organizations),
        ]

    def _store_for(self, kind: AccountKind) -> IAccountRepository:
        for store_kind, store in self._stores():
            if store_kind == kind:
                return store
        raise ValueError(f"No account store for kind {kind!r}")

    async def resolve(self, email: str) -> Optional[AccountRef]:
        """Return the highest-priority account owning email, or None"""
        for _, store in self._stores():
            account = await store.find_by_recovery_email(email)
            if account is not None:
                return account
        return None

    async def resolve_kind(self, kind: AccountKind, email: str) -> Optional[AccountRef]:
        """Reverse lookup restricted to a single account kind"""
        return await self._store_for(kind).find_by_recovery_email(email)

    async def write_password_hash(
        self, kind: AccountKind, email: str, password_hash: str
    ) -> Optional[AccountRef]:
        """
        Write password_hash to the kind's account owning email.

        Returns the updated account, or None when the account no longer exists.
        """
        account = await self.resolve_kind(kind, email)
        if account is None:
            return None
        written = await self._store_for(kind).set_password_hash(account.key, password_hash)
        return account if written else None
