from .account_repository import IAccountRepository


class IAdminRepository(IAccountRepository):
    """Admin repository interface - application layer"""
