from .account_repository import IAccountRepository


class IStudentRepository(IAccountRepository):
    """Student repository interface - application layer"""
