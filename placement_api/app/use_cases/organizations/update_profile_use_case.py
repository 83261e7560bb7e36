"""
Update Organization Profile Use Case

Partial update of the acting organization's profile, with optional password change.
"""

from uuid import UUID

from placement_api.libs.clock import utcnow
from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.passwords import (
    hash_password,
    validate_new_password,
    verify_password,
)
from placement_api.app.services.unit_of_work import UnitOfWork
from .dtos import OrganizationProfile, UpdateProfileCommand, UpdateProfileResponse

_PROFILE_FIELDS = (
    "org_name",
    "cin_registration_number",
    "country",
    "state",
    "detailed_address",
    "coordinator_name",
    "coordinator_designation",
    "coordinator_email",
    "coordinator_alternate_email",
    "coordinator_phone",
)


class UpdateProfileUseCase:
    """
    Use case for updating an organization profile.

    Business Rules:
    - Only provided fields are changed
    - Changing the password requires the current password
    - New password follows the same policy as password reset
    """

    def __init__(self, uow: UnitOfWork, password_min_length: int = 6, bcrypt_rounds: int = 12):
        self.uow = uow
        self.password_min_length = password_min_length
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(
        self, organization_id: UUID, command: UpdateProfileCommand
    ) -> Result[UpdateProfileResponse]:
        """
        Errors:
            - ORGANIZATION_NOT_FOUND: Organization deleted after authentication
            - MISSING_FIELDS: New password given without current password
            - INVALID_CURRENT_PASSWORD: Current password does not match
            - INVALID_PASSWORD: New password too short
        """
        async with self.uow:
            org = await self.uow.organizations.get_by_id(organization_id)
            if org is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            for field in _PROFILE_FIELDS:
                value = getattr(command, field)
                if value is not None:
                    setattr(org, field, value)

            if command.new_password:
                if not command.current_password:
                    return Return.err(
                        Error(
                            "MISSING_FIELDS",
                            "Current password is required to change password",
                        )
                    )

                if not verify_password(command.current_password, org.password_hash):
                    return Return.err(
                        Error("INVALID_CURRENT_PASSWORD", "Current password is incorrect")
                    )

                password_validation = validate_new_password(
                    command.new_password, self.password_min_length
                )
                if password_validation.is_err():
                    return Return.err(password_validation.error)

                org.password_hash = hash_password(command.new_password, self.bcrypt_rounds)

            org.updated_at = utcnow()
            org = await self.uow.organizations.update(org)
            await self.uow.commit()

            return Return.ok(
                UpdateProfileResponse(
                    message="Profile updated successfully",
                    organization=OrganizationProfile.from_entity(org),
                )
            )
