"""
Placement Backend Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountKind(str, Enum):
    """Account collection owning a recovery email, in resolution priority order"""

    student = "student"
    admin = "admin"
    organization = "organization"


class ResetStatus(str, Enum):
    """Life-cycle state of a password reset request"""

    pending = "pending"
    approved = "approved"
    denied = "denied"
    expired = "expired"
    used = "used"


LIVE_RESET_STATUSES = (ResetStatus.pending, ResetStatus.approved)


class ResetDecision(str, Enum):
    """Answer given through one of the emailed confirmation links"""

    approve = "approve"
    deny = "deny"

    @property
    def target_status(self) -> ResetStatus:
        if self is ResetDecision.approve:
            return ResetStatus.approved
        return ResetStatus.denied


class ProjectStatus(str, Enum):
    """Publication state of an internship project"""

    draft = "draft"
    scheduled = "scheduled"
    active = "active"
    completed = "completed"


class ApplicationStatus(str, Enum):
    """Student application state"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
