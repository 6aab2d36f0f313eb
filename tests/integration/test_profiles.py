"""Integration tests for profile endpoints."""

from uuid import uuid7

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.helpers import auth_headers, create_project, create_user

pytestmark = pytest.mark.integration


class TestReadProfile:
    async def test_own_profile(self, client: AsyncClient, db_session: AsyncSession):
        user, _ = await create_user(db_session, first_name="Ada", last_name="Lovelace")

        response = await client.get("/api/v1/profiles/me", headers=auth_headers(user))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(user.id)
        assert data["email"] == user.email
        assert data["firstName"] == "Ada"
        assert data["lastName"] == "Lovelace"

    async def test_public_profile(self, client: AsyncClient, db_session: AsyncSession):
        user, _ = await create_user(db_session, first_name="Ada")

        response = await client.get(f"/api/v1/profiles/{user.id}")

        assert response.status_code == 200
        assert response.json()["firstName"] == "Ada"

    async def test_unknown_account(self, client: AsyncClient, engine):
        response = await client.get(f"/api/v1/profiles/{uuid7()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    async def test_own_profile_requires_auth(self, client: AsyncClient, engine):
        response = await client.get("/api/v1/profiles/me")
        assert response.status_code == 401


class TestUpsertProfile:
    async def test_partial_update_keeps_other_fields(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        user, _ = await create_user(db_session, first_name="Ada", last_name="Lovelace")

        response = await client.put(
            "/api/v1/profiles",
            json={"title": "Founder", "skills": ["Python", " Design ", "Python"]},
            headers=auth_headers(user),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["firstName"] == "Ada"
        assert data["title"] == "Founder"
        assert data["skills"] == ["Python", "Design"]

    async def test_avatar_updates_account(self, client: AsyncClient, db_session: AsyncSession):
        user, _ = await create_user(db_session)

        response = await client.put(
            "/api/v1/profiles",
            json={"avatarUrl": "https://cdn.example.edu/ada.png"},
            headers=auth_headers(user),
        )

        assert response.json()["avatarUrl"] == "https://cdn.example.edu/ada.png"
        me = await client.get("/api/v1/auth/me", headers=auth_headers(user))
        assert me.json()["avatarUrl"] == "https://cdn.example.edu/ada.png"

    async def test_name_change_shows_up_in_project_owner(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        user, _ = await create_user(db_session)
        project = await create_project(db_session, user)

        before = await client.get(f"/api/v1/projects/{project.id}")
        assert before.json()["owner"]["name"] == user.email

        await client.put(
            "/api/v1/profiles",
            json={"firstName": "Grace", "lastName": "Hopper"},
            headers=auth_headers(user),
        )

        after = await client.get(f"/api/v1/projects/{project.id}")
        assert after.json()["owner"]["name"] == "Grace Hopper"
