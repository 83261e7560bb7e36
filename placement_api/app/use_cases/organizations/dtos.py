"""
Organization Use Case DTOs (Data Transfer Objects)

Command and Response classes for organization login and profile management.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr

from placement_api.domain.entities import Organization


# ============================================================================
# Command DTOs
# ============================================================================


class UpdateProfileCommand(BaseModel):
    """Partial profile update; None means leave unchanged"""

    org_name: Optional[str] = None
    cin_registration_number: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    detailed_address: Optional[str] = None
    coordinator_name: Optional[str] = None
    coordinator_designation: Optional[str] = None
    coordinator_email: Optional[EmailStr] = None
    coordinator_alternate_email: Optional[EmailStr] = None
    coordinator_phone: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationSummary(BaseModel):
    """Organization identity returned on login"""

    organization_id: str
    username: str
    org_name: str


class LoginResponse(BaseModel):
    """Response for organization login use case"""

    message: str
    access_token: str
    token_type: str
    organization: OrganizationSummary


class CoordinatorInfo(BaseModel):
    name: Optional[str] = None
    designation: Optional[str] = None
    email: Optional[str] = None
    alternate_email: Optional[str] = None
    phone: Optional[str] = None


class OrganizationProfile(BaseModel):
    organization_id: str
    username: str
    org_name: str
    cin_registration_number: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    detailed_address: Optional[str] = None
    coordinator: CoordinatorInfo

    @classmethod
    def from_entity(cls, org: Organization) -> "OrganizationProfile":
        return cls(
            organization_id=str(org.id),
            username=org.username,
            org_name=org.org_name,
            cin_registration_number=org.cin_registration_number,
            country=org.country,
            state=org.state,
            detailed_address=org.detailed_address,
            coordinator=CoordinatorInfo(
                name=org.coordinator_name,
                designation=org.coordinator_designation,
                email=org.coordinator_email,
                alternate_email=org.coordinator_alternate_email,
                phone=org.coordinator_phone,
            ),
        )


class UpdateProfileResponse(BaseModel):
    """Response for organization profile update use case"""

    message: str
    organization: OrganizationProfile
