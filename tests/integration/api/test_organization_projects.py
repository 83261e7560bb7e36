"""
Integration tests for /api/organization/projects

Every project route is scoped to the organization in the bearer token.
"""
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlmodel import select

from placement_api.domain.entities import Application, Project

NEW_PROJECT = {
    "project_code": "P-100",
    "project_name": "Warehouse Vision",
    "description": "Detect pallets on shelves",
    "start_date": "2025-06-01",
    "end_date": "2025-08-31",
    "interns_required": "3",
}


@pytest_asyncio.fixture
async def two_orgs(seed, login):
    await seed.organization(username="acme", coordinator_email="lead@acme.example")
    await seed.organization(username="globex", coordinator_email="lead@globex.example")
    return await login("acme", "acme-pass"), await login("globex", "acme-pass")


@pytest.mark.asyncio
async def test_create_and_list_project(client, two_orgs):
    """Test a created project is listed for its owner with zero applications"""
    acme, _ = two_orgs

    created = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)
    listed = await client.get("/api/organization/projects", headers=acme)

    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "draft"
    assert body["applications"] == 0
    assert listed.status_code == 200
    assert [p["id"] for p in listed.json()] == [body["id"]]


@pytest.mark.asyncio
async def test_projects_are_not_visible_to_other_organizations(client, two_orgs):
    """Test listing, updating and deleting are scoped to the owner"""
    # Arrange
    acme, globex = two_orgs
    created = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)
    project_id = created.json()["id"]

    # Act
    listed = await client.get("/api/organization/projects", headers=globex)
    updated = await client.put(
        f"/api/organization/projects/{project_id}",
        json={"project_name": "Hijacked"},
        headers=globex,
    )
    deleted = await client.delete(f"/api/organization/projects/{project_id}", headers=globex)

    # Assert
    assert listed.json() == []
    assert updated.status_code == 404
    assert updated.json()["error"]["code"] == "PROJECT_NOT_FOUND"
    assert deleted.status_code == 404

    owner_view = await client.get("/api/organization/projects", headers=acme)
    assert owner_view.json()[0]["project_name"] == "Warehouse Vision"


@pytest.mark.asyncio
async def test_duplicate_code_within_organization(client, two_orgs):
    acme, globex = two_orgs
    await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)

    clash = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)
    other_org = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=globex)

    assert clash.status_code == 400
    assert clash.json()["error"]["code"] == "DUPLICATE_PROJECT_CODE"
    # Codes are unique per organization only
    assert other_org.status_code == 201


@pytest.mark.asyncio
async def test_invalid_date_range(client, two_orgs):
    acme, _ = two_orgs
    payload = dict(NEW_PROJECT, start_date="2025-09-01", end_date="2025-08-01")

    response = await client.post("/api/organization/projects", json=payload, headers=acme)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"


@pytest.mark.asyncio
async def test_update_project(client, two_orgs):
    acme, _ = two_orgs
    created = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)
    project_id = created.json()["id"]

    response = await client.put(
        f"/api/organization/projects/{project_id}",
        json={"project_name": "Warehouse Vision v2", "status": "active"},
        headers=acme,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["project_name"] == "Warehouse Vision v2"
    assert body["status"] == "active"
    assert body["project_code"] == "P-100"


@pytest.mark.asyncio
async def test_delete_project_with_applications(client, two_orgs, db_session):
    """Test deleting a project also removes its applications"""
    # Arrange
    acme, _ = two_orgs
    created = await client.post("/api/organization/projects", json=NEW_PROJECT, headers=acme)
    project_id = created.json()["id"]
    result = await db_session.execute(select(Project.id).where(Project.project_code == "P-100"))
    stored_id = result.scalar_one()
    db_session.add(Application(project_id=stored_id, student_id="S-1"))
    db_session.add(Application(project_id=stored_id, student_id="S-2"))
    await db_session.commit()

    listed = await client.get("/api/organization/projects", headers=acme)
    assert listed.json()[0]["applications"] == 2

    # Act
    response = await client.delete(f"/api/organization/projects/{project_id}", headers=acme)

    # Assert
    assert response.status_code == 200
    assert response.json()["project_id"] == project_id
    remaining = await db_session.execute(
        select(Application.id).where(Application.project_id == stored_id)
    )
    assert remaining.all() == []


@pytest.mark.asyncio
async def test_unknown_project_id(client, two_orgs):
    acme, _ = two_orgs

    response = await client.delete(f"/api/organization/projects/{uuid4()}", headers=acme)

    assert response.status_code == 404
