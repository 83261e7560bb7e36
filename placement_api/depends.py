from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from placement_api.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from placement_api.api.error import UnauthenticatedError
from placement_api.api.utils.jwt import verify_jwt
from placement_api.app.services.mail_sender import IMailSender
from placement_api.app.services.reset_confirmation_delivery import ResetConfirmationDelivery
from placement_api.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentOrganization:
    """Acting organization resolved from the bearer credential"""

    id: UUID
    username: str


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mail_sender(request: Request) -> IMailSender:
    return request.app.state.mail_sender


def get_confirmation_delivery(
    mail_sender: IMailSender = Depends(get_mail_sender),
) -> ResetConfirmationDelivery:
    return ResetConfirmationDelivery(
        mail_sender,
        base_url=ApplicationConfig.BACKEND_URL,
        ttl_minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES,
    )


async def get_current_organization(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentOrganization:
    """
    Bearer authentication gate for organization routes.

    Resolves the Authorization header to an existing organization.

    Raises:
        UnauthenticatedError: if the header is missing, the token is invalid or
        expired, or the organization no longer exists
    """
    if credentials is None:
        raise UnauthenticatedError("Authorization token required. Format: Bearer <token>")

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise UnauthenticatedError("Invalid or expired token")

    try:
        organization_id = UUID(str(payload.get("organization_id")))
    except ValueError:
        raise UnauthenticatedError("Invalid token: missing organization ID")

    async with uow:
        org = await uow.organizations.get_by_id(organization_id)
        if org is None:
            raise UnauthenticatedError("Invalid token: unknown organization")
        return CurrentOrganization(id=org.id, username=org.username)


async def init_models():
    """Create missing tables; schema changes beyond that need a migration"""
    from sqlmodel import SQLModel

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
