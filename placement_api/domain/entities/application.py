"""
Application Entity

A student's application to a project. Only counted by the backend.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from placement_api.libs.clock import utcnow

from .enums import ApplicationStatus


class Application(SQLModel, table=True):
    __tablename__ = "applications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    student_id: str = Field(index=True, max_length=64)
    status: ApplicationStatus = Field(default=ApplicationStatus.pending)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_application_project_student", "project_id", "student_id"),)
