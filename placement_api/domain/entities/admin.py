"""
Admin Entity

Placement coordinator account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from placement_api.libs.clock import utcnow


class Admin(SQLModel, table=True):
    """
    Admin entity - placement coordinator.

    Business Rules:
    - admin_id is unique and identifies the account
    - email_address is the only recovery email
    """

    __tablename__ = "admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    admin_id: str = Field(unique=True, index=True, max_length=64)

    full_name: Optional[str] = Field(default=None, max_length=255)
    email_address: Optional[str] = Field(default=None, index=True, max_length=255)
    designation: Optional[str] = Field(default=None, max_length=255)
    contact_number: Optional[str] = Field(default=None, max_length=32)

    password_hash: Optional[str] = Field(default=None, max_length=60)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
