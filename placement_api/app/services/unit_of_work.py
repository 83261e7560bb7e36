from abc import ABC, abstractmethod

from placement_api.app.repositories.admin_repository import IAdminRepository
from placement_api.app.repositories.application_repository import IApplicationRepository
from placement_api.app.repositories.audit_event_repository import IAuditEventRepository
from placement_api.app.repositories.organization_repository import IOrganizationRepository
from placement_api.app.repositories.project_repository import IProjectRepository
from placement_api.app.repositories.reset_request_repository import IResetRequestRepository
from placement_api.app.repositories.student_repository import IStudentRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    students: IStudentRepository
    admins: IAdminRepository
    organizations: IOrganizationRepository
    projects: IProjectRepository
    applications: IApplicationRepository
    reset_requests: IResetRequestRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
