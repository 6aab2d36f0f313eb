"""Tests for display-name denormalization."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.cobrew.services.people import UNKNOWN_USER_NAME, PeopleDirectory, build_summary
from tests.factories import ProfileFactory, UserFactory

pytestmark = pytest.mark.unit


class TestBuildSummary:
    def test_profile_name_preferred(self):
        user = UserFactory.build(avatar_url="https://cdn.example.edu/a.png")
        profile = ProfileFactory.named("Ada", "Lovelace", user_id=user.id)

        summary = build_summary(user.id, user, profile)

        assert summary.id == user.id
        assert summary.name == "Ada Lovelace"
        assert summary.avatar_url == "https://cdn.example.edu/a.png"

    def test_single_name_part_is_enough(self):
        user = UserFactory.build()
        profile = ProfileFactory.build(user_id=user.id, first_name="Ada")

        assert build_summary(user.id, user, profile).name == "Ada"

    def test_falls_back_to_email(self):
        user = UserFactory.build(email="ada@example.edu")
        profile = ProfileFactory.build(user_id=user.id, first_name="  ", last_name=None)

        assert build_summary(user.id, user, profile).name == "ada@example.edu"

    def test_missing_profile_falls_back_to_email(self):
        user = UserFactory.build(email="ada@example.edu")

        assert build_summary(user.id, user, None).name == "ada@example.edu"

    def test_missing_account_degrades_to_placeholder(self):
        user_id = uuid4()

        summary = build_summary(user_id, None, None)

        assert summary.id == user_id
        assert summary.name == UNKNOWN_USER_NAME
        assert summary.avatar_url == ""


class TestPeopleDirectory:
    @pytest.fixture
    def user(self):
        return UserFactory.build()

    @pytest.fixture
    def directory(self, user):
        user_repo = MagicMock()
        user_repo.get_many = AsyncMock(return_value={user.id: user})
        profile_repo = MagicMock()
        profile_repo.get_many_by_user_ids = AsyncMock(
            return_value={user.id: ProfileFactory.named("Grace", "Hopper", user_id=user.id)}
        )
        return PeopleDirectory(user_repo, profile_repo)

    async def test_summaries_cover_every_requested_id(self, directory, user):
        missing = uuid4()

        summaries = await directory.summaries([user.id, missing, user.id])

        assert set(summaries) == {user.id, missing}
        assert summaries[user.id].name == "Grace Hopper"
        assert summaries[missing].name == UNKNOWN_USER_NAME

    async def test_lookups_are_batched(self, directory, user):
        await directory.summaries([user.id, uuid4(), uuid4()])

        directory.user_repo.get_many.assert_awaited_once()
        directory.profile_repo.get_many_by_user_ids.assert_awaited_once()

    async def test_single_summary(self, directory, user):
        summary = await directory.summary(user.id)
        assert summary.name == "Grace Hopper"
