"""
Placement Backend Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccountKind,
    ResetStatus,
    ResetDecision,
    ProjectStatus,
    ApplicationStatus,
    LIVE_RESET_STATUSES,
)

# Export all entities
from .account_ref import AccountRef
from .student import Student
from .admin import Admin
from .organization import Organization
from .project import Project
from .application import Application
from .reset_request import ResetRequest
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AccountKind",
    "ResetStatus",
    "ResetDecision",
    "ProjectStatus",
    "ApplicationStatus",
    "LIVE_RESET_STATUSES",
    # Values
    "AccountRef",
    # Entities
    "Student",
    "Admin",
    "Organization",
    "Project",
    "Application",
    "ResetRequest",
    "AuditEvent",
]
