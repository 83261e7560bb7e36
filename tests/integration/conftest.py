from typing import List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from placement_api.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from placement_api.api.app import create_app
from placement_api.app.services.mail_sender import IMailSender, MailDeliveryError
from placement_api.app.services.passwords import hash_password
from placement_api.depends import get_unit_of_work
from placement_api.domain.entities import Admin, Organization, Student


class RecordingMailSender(IMailSender):
    """Keeps outgoing mail in memory; set fail to simulate a relay outage"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []
        self.fail = False

    async def send(self, to: str, subject: str, html_body: str) -> None:
        if self.fail:
            raise MailDeliveryError("relay unavailable")
        self.sent.append((to, subject, html_body))


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mail_sender():
    return RecordingMailSender()


@pytest_asyncio.fixture
async def client(db_session, mail_sender, monkeypatch):
    # Fast hashing; the policy itself is unchanged
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)

    app = create_app(ApplicationConfig, mail_sender=mail_sender)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class Seeder:
    """Inserts accounts straight into the store, bypassing the API"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _add(self, entity):
        self.session.add(entity)
        await self.session.commit()
        return entity

    async def student(
        self,
        student_id: str = "S-1001",
        email: Optional[str] = "student@example.com",
        alternate_email: Optional[str] = None,
        password: str = "student-pass",
    ) -> Student:
        return await self._add(
            Student(
                student_id=student_id,
                full_name="Asha Rao",
                email=email,
                alternate_email=alternate_email,
                password_hash=hash_password(password, 4),
            )
        )

    async def admin(
        self,
        admin_id: str = "A-01",
        email_address: str = "admin@example.com",
        password: str = "admin-pass",
    ) -> Admin:
        return await self._add(
            Admin(
                admin_id=admin_id,
                full_name="Placement Cell",
                email_address=email_address,
                password_hash=hash_password(password, 4),
            )
        )

    async def organization(
        self,
        username: str = "acme",
        coordinator_email: Optional[str] = "coordinator@acme.example",
        coordinator_alternate_email: Optional[str] = None,
        password: str = "acme-pass",
    ) -> Organization:
        return await self._add(
            Organization(
                username=username,
                org_name=f"{username.title()} Pvt Ltd",
                country="India",
                coordinator_name="Priya",
                coordinator_email=coordinator_email,
                coordinator_alternate_email=coordinator_alternate_email,
                password_hash=hash_password(password, 4),
            )
        )


@pytest.fixture
def seed(db_session):
    return Seeder(db_session)


@pytest.fixture
def login(client):
    """Log an organization in and return its Authorization header"""

    async def _login(username: str = "acme", password: str = "acme-pass") -> dict:
        response = await client.post(
            "/api/organization/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
