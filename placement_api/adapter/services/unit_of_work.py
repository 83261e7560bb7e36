from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.adapter.repositories.admin_repository import AdminRepository
from placement_api.adapter.repositories.application_repository import ApplicationRepository
from placement_api.adapter.repositories.audit_event_repository import AuditEventRepository
from placement_api.adapter.repositories.organization_repository import OrganizationRepository
from placement_api.adapter.repositories.project_repository import ProjectRepository
from placement_api.adapter.repositories.reset_request_repository import ResetRequestRepository
from placement_api.adapter.repositories.student_repository import StudentRepository
from placement_api.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.students = StudentRepository(self.session)
        self.admins = AdminRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.reset_requests = ResetRequestRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
