"""
Student Entity

Student account with a primary and an alternate recovery email.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from placement_api.libs.clock import utcnow


class Student(SQLModel, table=True):
    """
    Student entity - applicant account.

    Business Rules:
    - student_id is unique and identifies the account
    - Either email or alternate_email can be used for password recovery
    - Password stored as bcrypt hash
    """

    __tablename__ = "students"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    student_id: str = Field(unique=True, index=True, max_length=64)

    full_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, index=True, max_length=255)
    alternate_email: Optional[str] = Field(default=None, index=True, max_length=255)
    contact_number: Optional[str] = Field(default=None, max_length=32)

    programme: Optional[str] = Field(default=None, max_length=255)
    semester: Optional[str] = Field(default=None, max_length=32)
    discipline: Optional[str] = Field(default=None, max_length=255)
    cgpa: Optional[str] = Field(default=None, max_length=16)
    skills: Optional[str] = None

    password_hash: Optional[str] = Field(default=None, max_length=60)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
