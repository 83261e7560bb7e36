from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from placement_api.api.error import ClientError, ServerError
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.app.use_cases.organizations import (
    OrganizationLoginUseCase,
    UpdateProfileUseCase,
    UpdateProfileCommand,
    LoginResponse,
    UpdateProfileResponse,
)
from placement_api.app.use_cases.projects import (
    ListProjectsUseCase,
    CreateProjectUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
    CreateProjectCommand,
    UpdateProjectCommand,
    ProjectResponse,
    DeleteProjectResponse,
)
from placement_api.depends import CurrentOrganization, get_current_organization, get_unit_of_work

router = APIRouter(prefix="/organization", tags=["Organization"])

_PROJECT_ERROR_STATUS = {
    "MISSING_FIELDS": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATE": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATE_RANGE": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_PROJECT_CODE": status.HTTP_400_BAD_REQUEST,
    "PROJECT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def _raise_project_error(error):
    status_code = _PROJECT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


class LoginRequest(BaseModel):
    """
    Organization login HTTP request payload
    """

    username: Optional[str] = Field(None, description="Organization username")
    password: Optional[str] = Field(None, description="Organization password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Organization Login

    Returns the bearer token required by every other organization route.

    Raises:
        - 400 Bad Request: Username or password missing
        - 401 Unauthorized: Invalid credentials
    """
    use_case = OrganizationLoginUseCase(uow)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_FIELDS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.get("/projects", status_code=status.HTTP_200_OK, response_model=List[ProjectResponse])
async def list_projects(
    current_org: CurrentOrganization = Depends(get_current_organization),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the authenticated organization's projects, newest first"""
    result = await ListProjectsUseCase(uow).execute(current_org.id)

    if result.is_err():
        _raise_project_error(result.error)

    return result.value


@router.post("/projects", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    command: CreateProjectCommand,
    current_org: CurrentOrganization = Depends(get_current_organization),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project

    The owner is taken from the bearer token, never from the body.

    Raises:
        - 400 Bad Request: Missing code/name, bad dates or duplicate code
        - 401 Unauthorized: Missing or invalid bearer token
    """
    result = await CreateProjectUseCase(uow).execute(current_org.id, command)

    if result.is_err():
        _raise_project_error(result.error)

    return result.value


@router.put("/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    command: UpdateProjectCommand,
    current_org: CurrentOrganization = Depends(get_current_organization),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Project

    Raises:
        - 400 Bad Request: Bad dates or duplicate code
        - 401 Unauthorized: Missing or invalid bearer token
        - 404 Not Found: No such project for this organization
    """
    result = await UpdateProjectUseCase(uow).execute(current_org.id, project_id, command)

    if result.is_err():
        _raise_project_error(result.error)

    return result.value


@router.delete(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=DeleteProjectResponse
)
async def delete_project(
    project_id: UUID,
    current_org: CurrentOrganization = Depends(get_current_organization),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete an owned project and its applications"""
    result = await DeleteProjectUseCase(uow).execute(current_org.id, project_id)

    if result.is_err():
        _raise_project_error(result.error)

    return result.value


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=UpdateProfileResponse)
async def update_profile(
    command: UpdateProfileCommand,
    current_org: CurrentOrganization = Depends(get_current_organization),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Organization Profile

    Raises:
        - 400 Bad Request: New password without current password, or too short
        - 401 Unauthorized: Missing/invalid bearer token or wrong current password
        - 404 Not Found: Organization vanished after authentication
    """
    use_case = UpdateProfileUseCase(
        uow,
        password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
        bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS,
    )
    result = await use_case.execute(current_org.id, command)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_FIELDS", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_CURRENT_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ORGANIZATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
