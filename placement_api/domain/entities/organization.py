"""
Organization Entity

Company or institute posting internship projects.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from placement_api.libs.clock import utcnow


class Organization(SQLModel, table=True):
    """
    Organization entity - posts projects and logs in with a username.

    Business Rules:
    - username is unique and identifies the account
    - Coordinator email or alternate email is the recovery address
    - The organization id is the subject of issued bearer tokens
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    org_name: str = Field(max_length=255)

    cin_registration_number: Optional[str] = Field(default=None, max_length=64)
    country: Optional[str] = Field(default=None, max_length=128)
    state: Optional[str] = Field(default=None, max_length=128)
    detailed_address: Optional[str] = None

    coordinator_name: Optional[str] = Field(default=None, max_length=255)
    coordinator_designation: Optional[str] = Field(default=None, max_length=255)
    coordinator_email: Optional[str] = Field(default=None, index=True, max_length=255)
    coordinator_alternate_email: Optional[str] = Field(
        default=None, index=True, max_length=255
    )
    coordinator_phone: Optional[str] = Field(default=None, max_length=32)

    password_hash: str = Field(max_length=60)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
