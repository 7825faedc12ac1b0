"""Unit tests for Member and Profile entities."""

import pytest

from core.exceptions import MemberAlreadyLeftError, ValidationError
from domain.entities.member import Member
from domain.entities.profile import Profile


class TestMember:
    def test_create_starts_active(self):
        member = Member.create("hello@local.com", "hello")

        assert member.email == "hello@local.com"
        assert member.password == "hello"
        assert member.leaved is False
        assert member.is_active
        assert member.profile is None

    @pytest.mark.parametrize("email,password", [("", "hello"), ("   ", "hello"), ("a@b.c", "")])
    def test_create_rejects_blank_credentials(self, email: str, password: str):
        with pytest.raises(ValidationError):
            Member.create(email, password)

    def test_ids_are_unique(self):
        assert Member.create("a@b.c", "x").id != Member.create("a@b.c", "x").id

    def test_attach_profile_sets_back_reference_by_id(self):
        member = Member.create("hello@local.com", "hello")
        profile = Profile(nickname="1")

        member.attach_profile(profile)

        assert member.profile is profile
        assert profile.member_id == member.id

    def test_leave_is_terminal(self):
        member = Member.create("hello@local.com", "hello")

        member.leave()

        assert member.leaved is True
        assert not member.is_active
        with pytest.raises(MemberAlreadyLeftError):
            member.leave()
        assert member.leaved is True


class TestProfile:
    def test_rejects_blank_nickname(self):
        with pytest.raises(ValidationError):
            Profile(nickname=" ")

    def test_optional_fields_default_to_none(self):
        profile = Profile(nickname="1")

        assert profile.thumbnail_image is None
        assert profile.personal_status is None
        assert profile.member_id is None

    def test_update_details_replaces_fields(self):
        profile = Profile(nickname="1", thumbnail_image="2", personal_status="3")
        before = profile.updated_at

        profile.update_details("4", None, "6")

        assert (profile.nickname, profile.thumbnail_image, profile.personal_status) == ("4", None, "6")
        assert profile.updated_at >= before

    def test_update_details_rejects_blank_nickname(self):
        profile = Profile(nickname="1")

        with pytest.raises(ValidationError):
            profile.update_details("", None, None)

        assert profile.nickname == "1"
