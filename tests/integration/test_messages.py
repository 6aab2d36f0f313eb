"""Integration tests for project message threads."""

from datetime import timedelta
from uuid import uuid7

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.models.base import utc_now
from tests.helpers import (
    auth_headers,
    create_application,
    create_collaboration,
    create_message,
    create_project,
    create_user,
)

pytestmark = pytest.mark.integration


@pytest.fixture
async def team(db_session: AsyncSession) -> dict:
    return await create_collaboration(db_session)


class TestPost:
    async def test_owner_posts(self, client: AsyncClient, team):
        response = await client.post(
            f"/api/v1/messages/{team['project'].id}",
            json={"content": "Welcome aboard"},
            headers=auth_headers(team["owner"]),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "Welcome aboard"
        assert data["isOwn"] is True
        assert data["sender"]["name"] == "Olive Owner"

    async def test_approved_applicant_posts(self, client: AsyncClient, team):
        response = await client.post(
            f"/api/v1/messages/{team['project'].id}",
            json={"content": "  Thanks!  "},
            headers=auth_headers(team["collaborator"]),
        )

        assert response.status_code == 201
        assert response.json()["content"] == "Thanks!"

    @pytest.mark.parametrize("status", ["pending", "rejected"])
    async def test_undecided_or_rejected_applicant_forbidden(
        self, client: AsyncClient, db_session: AsyncSession, team, status
    ):
        hopeful, _ = await create_user(db_session)
        await create_application(db_session, team["project"], hopeful, status=status)

        response = await client.post(
            f"/api/v1/messages/{team['project'].id}",
            json={"content": "Can I join the chat?"},
            headers=auth_headers(hopeful),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "User not authorized to access project messages"

    async def test_approval_elsewhere_does_not_count(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        other_project = await create_project(db_session, team["owner"])
        outsider, _ = await create_user(db_session)
        await create_application(db_session, other_project, outsider, status="approved")

        response = await client.post(
            f"/api/v1/messages/{team['project'].id}",
            json={"content": "Hello?"},
            headers=auth_headers(outsider),
        )

        assert response.status_code == 403

    @pytest.mark.parametrize("content", ["", "   \n\t"])
    async def test_blank_content_rejected(self, client: AsyncClient, team, content):
        response = await client.post(
            f"/api/v1/messages/{team['project'].id}",
            json={"content": content},
            headers=auth_headers(team["owner"]),
        )

        assert response.status_code == 400
        assert "Message content is required" in response.json()["detail"]

    async def test_missing_project(self, client: AsyncClient, team):
        response = await client.post(
            f"/api/v1/messages/{uuid7()}",
            json={"content": "Anyone?"},
            headers=auth_headers(team["owner"]),
        )

        assert response.status_code == 404

    async def test_requires_authentication(self, client: AsyncClient, team):
        response = await client.post(
            f"/api/v1/messages/{team['project'].id}", json={"content": "Hi"}
        )

        assert response.status_code == 401


class TestList:
    async def test_oldest_first_with_ownership_flag(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        now = utc_now()
        await create_message(
            db_session, team["project"], team["collaborator"], content="second",
            created_at=now - timedelta(minutes=1),
        )
        await create_message(
            db_session, team["project"], team["owner"], content="first",
            created_at=now - timedelta(minutes=5),
        )

        response = await client.get(
            f"/api/v1/messages/{team['project'].id}", headers=auth_headers(team["owner"])
        )

        assert response.status_code == 200
        messages = response.json()
        assert [m["content"] for m in messages] == ["first", "second"]
        assert [m["isOwn"] for m in messages] == [True, False]
        assert messages[1]["sender"]["name"] == "Cole Laborator"

    async def test_empty_thread(self, client: AsyncClient, team):
        response = await client.get(
            f"/api/v1/messages/{team['project'].id}",
            headers=auth_headers(team["collaborator"]),
        )

        assert response.json() == []

    async def test_stranger_forbidden(self, client: AsyncClient, db_session: AsyncSession, team):
        stranger, _ = await create_user(db_session)

        response = await client.get(
            f"/api/v1/messages/{team['project'].id}", headers=auth_headers(stranger)
        )

        assert response.status_code == 403

    async def test_missing_project(self, client: AsyncClient, team):
        response = await client.get(
            f"/api/v1/messages/{uuid7()}", headers=auth_headers(team["owner"])
        )

        assert response.status_code == 404


class TestConversations:
    async def test_owner_and_collaborator_see_the_thread(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        await create_message(db_session, team["project"], team["collaborator"], content="hey")

        owner_view = (
            await client.get("/api/v1/messages", headers=auth_headers(team["owner"]))
        ).json()
        collaborator_view = (
            await client.get("/api/v1/messages", headers=auth_headers(team["collaborator"]))
        ).json()

        [owned] = owner_view
        assert owned["projectTitle"] == "Campus Coffee Exchange"
        assert owned["isOwner"] is True
        assert owned["messageCount"] == 1
        assert owned["lastMessage"]["content"] == "hey"
        assert owned["lastMessage"]["senderId"] == str(team["collaborator"].id)
        assert [p["name"] for p in owned["participants"]] == ["Cole Laborator"]

        [joined] = collaborator_view
        assert joined["isOwner"] is False
        assert [p["name"] for p in joined["participants"]] == ["Olive Owner"]

    async def test_pending_applicant_sees_nothing(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        hopeful, _ = await create_user(db_session)
        await create_application(db_session, team["project"], hopeful)

        response = await client.get("/api/v1/messages", headers=auth_headers(hopeful))

        assert response.status_code == 200
        assert response.json() == []

    async def test_most_recent_activity_first(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        now = utc_now()
        quiet = await create_project(
            db_session, team["owner"], title="Quiet", created_at=now - timedelta(days=3)
        )
        await create_project(
            db_session, team["owner"], title="Fresh", created_at=now - timedelta(hours=1)
        )
        await create_message(
            db_session, quiet, team["owner"], content="ping",
            created_at=now - timedelta(minutes=10),
        )
        await create_message(
            db_session, team["project"], team["owner"], content="old news",
            created_at=now - timedelta(days=2),
        )

        response = await client.get("/api/v1/messages", headers=auth_headers(team["owner"]))

        titles = [c["projectTitle"] for c in response.json()]
        assert titles == ["Quiet", "Fresh", "Campus Coffee Exchange"]
        by_title = {c["projectTitle"]: c for c in response.json()}
        assert by_title["Fresh"]["lastMessage"] is None
        assert by_title["Fresh"]["messageCount"] == 0
        assert by_title["Fresh"]["participants"] == []

    async def test_latest_message_per_thread(
        self, client: AsyncClient, db_session: AsyncSession, team
    ):
        now = utc_now()
        side_project = await create_project(db_session, team["owner"], title="Side Project")
        for minutes, content in [(30, "early"), (5, "newest"), (20, "middle")]:
            await create_message(
                db_session, team["project"], team["collaborator"], content=content,
                created_at=now - timedelta(minutes=minutes),
            )
        for minutes, content in [(50, "side first"), (40, "side last")]:
            await create_message(
                db_session, side_project, team["owner"], content=content,
                created_at=now - timedelta(minutes=minutes),
            )

        response = await client.get("/api/v1/messages", headers=auth_headers(team["owner"]))

        threads = {c["projectTitle"]: c for c in response.json()}
        assert threads["Campus Coffee Exchange"]["messageCount"] == 3
        assert threads["Campus Coffee Exchange"]["lastMessage"]["content"] == "newest"
        assert threads["Side Project"]["messageCount"] == 2
        assert threads["Side Project"]["lastMessage"]["content"] == "side last"
        assert [c["projectTitle"] for c in response.json()] == [
            "Campus Coffee Exchange",
            "Side Project",
        ]
