"""
Organization Login Use Case

Authenticates an organization and issues its bearer token.
"""

from typing import Optional

from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.passwords import verify_password
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.api.utils.jwt import generate_jwt
from .dtos import LoginResponse, OrganizationSummary


class OrganizationLoginUseCase:
    """
    Use case for organization login.

    Business Rules:
    - Username and password are both required
    - Password check runs even for unknown usernames (constant time)
    - Same error for unknown username and wrong password
    - Bearer token carries the organization id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, username: Optional[str], password: Optional[str]
    ) -> Result[LoginResponse]:
        if not username or not password:
            return Return.err(Error("MISSING_FIELDS", "Username and password required."))

        async with self.uow:
            org = await self.uow.organizations.get_by_username(username)

            password_valid = verify_password(password, org.password_hash if org else None)
            if org is None or not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password.")
                )

            return Return.ok(
                LoginResponse(
                    message="Login successful",
                    access_token=generate_jwt(org.id),
                    token_type="bearer",
                    organization=OrganizationSummary(
                        organization_id=str(org.id),
                        username=org.username,
                        org_name=org.org_name,
                    ),
                )
            )
