"""
Project Entity

Internship project posted by an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from placement_api.libs.clock import utcnow

from .enums import ProjectStatus


class Project(SQLModel, table=True):
    """
    Project entity - owned by exactly one organization.

    Business Rules:
    - Every read and write is scoped to the owning organization
    - project_code is unique within an organization
    - start_date must not be after end_date
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)

    project_code: str = Field(max_length=64)
    project_name: str = Field(max_length=255)
    description: str = Field(default="")
    status: ProjectStatus = Field(default=ProjectStatus.draft)
    scheduled_time: Optional[str] = Field(default=None, max_length=64)
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    interns_required: Optional[str] = Field(default=None, max_length=16)
    cgpa_requirement: Optional[str] = Field(default=None, max_length=16)
    discipline: Optional[str] = Field(default=None, max_length=255)
    skills: Optional[str] = None
    coordinator_name: Optional[str] = Field(default=None, max_length=255)
    coordinator_email: Optional[str] = Field(default=None, max_length=255)
    coordinator_alt_email: Optional[str] = Field(default=None, max_length=255)
    coordinator_phone: Optional[str] = Field(default=None, max_length=32)
    coordinator_designation: Optional[str] = Field(default=None, max_length=255)
    guidelines_file_path: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        UniqueConstraint("organization_id", "project_code", name="uq_project_org_code"),
        Index("idx_project_org_created", "organization_id", "created_at"),
    )
