from typing import Optional

from sqlalchemy import or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.student_repository import IStudentRepository
from placement_api.domain.entities import AccountKind, AccountRef, Student


class StudentRepository(IStudentRepository):
    """Student repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_recovery_email(self, email: str) -> Optional[AccountRef]:
        """Match the student's primary or alternate email"""
        stmt = (
            select(Student)
            .where(or_(Student.email == email, Student.alternate_email == email))
            .order_by(Student.created_at)
        )
        result = await self.session.execute(stmt)
        student = result.scalars().first()
        if student is None:
            return None
        return AccountRef(kind=AccountKind.student, key=student.student_id, email=email)

    async def set_password_hash(self, key: str, password_hash: str) -> bool:
        stmt = (
            update(Student)
            .where(Student.student_id == key)
            .values(password_hash=password_hash)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
