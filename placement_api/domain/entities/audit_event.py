"""
AuditEvent Entity

Append-only log of credential recovery and authentication events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from placement_api.libs.clock import utcnow

from .enums import AccountKind


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable security log entry.

    Business Rules:
    - Never updated or deleted
    - account_kind/account_key are nullable for events without a resolved account
    - Metadata stores additional context (email, status, ...)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_kind: Optional[AccountKind] = Field(default=None)
    account_key: Optional[str] = Field(default=None, index=True, max_length=255)

    action: str = Field(max_length=100)  # e.g., "password_reset_requested"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_action", "action"),
    )
