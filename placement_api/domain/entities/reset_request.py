"""
ResetRequest Entity

In-flight password recovery attempt confirmed through an emailed link pair.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from placement_api.libs.clock import utcnow

from .enums import AccountKind, ResetStatus


class ResetRequest(SQLModel, table=True):
    """
    ResetRequest entity - one recovery attempt for one email.

    Business Rules:
    - At most one request per email; issuing again deletes all prior ones
    - token is unique, unguessable and the only capability to act on it
    - Expires 10 minutes after issuance, evaluated lazily on access
    - Status only moves forward: pending -> approved/denied/expired,
      approved -> used/expired
    """

    __tablename__ = "reset_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(index=True, max_length=255)
    token: str = Field(unique=True, index=True, max_length=64)
    account_kind: AccountKind
    status: ResetStatus = Field(default=ResetStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    issued_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_reset_request_email_issued", "email", "issued_at"),
        Index("idx_reset_request_expires_at", "expires_at"),
    )
