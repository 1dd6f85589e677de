"""Tests for skillteam.models."""

from datetime import datetime, timezone

from pydantic import ValidationError
import pytest

from skillteam.models import Project, SkillTag, Tag, Team, TeamMember, User


NOW = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


def _member(i: int) -> TeamMember:
    return TeamMember(id=f"u{i}", name=f"user{i}", email=f"u{i}@example.com")


class TestTag:
    def test_numeric_category_id_accepted(self):
        tag = Tag.model_validate({"id": "t1", "name": "Python", "category_id": 7})
        assert tag.category_id == 7

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Tag.model_validate({"id": "t1", "name": ""})


class TestUser:
    def test_missing_lists_default_to_empty(self):
        user = User.model_validate({"id": "u1", "name": "A", "skill_tags": None, "dev_tags": None})
        assert user.skill_tags == []
        assert user.dev_tags == []
        assert user.courses_id == []

    def test_skill_tag_ids(self):
        user = User(id="u1", skill_tags=[SkillTag(tag_id="t1"), SkillTag(tag_id="t2")])
        assert user.skill_tag_ids == {"t1", "t2"}

    def test_skill_tag_extra_keys_preserved(self):
        tag = SkillTag.model_validate({"tag_id": "t1", "level": 3})
        assert tag.model_dump() == {"tag_id": "t1", "level": 3}

    def test_skill_tag_requires_tag_id(self):
        with pytest.raises(ValidationError):
            SkillTag.model_validate({"level": 3})


class TestProject:
    def test_requirements_default_empty(self):
        assert Project(id="p1").requirements == []

    def test_requirements_none_becomes_empty(self):
        assert Project.model_validate({"id": "p1", "requirements": None}).requirements == []


class TestTeam:
    def test_member_count_must_match_members(self):
        with pytest.raises(ValidationError, match="memberCount"):
            Team(
                post_id="p1",
                project_name="P",
                member_count=3,
                members=[_member(1), _member(2)],
                created_at=NOW,
            )

    def test_member_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            Team(post_id="p1", project_name="P", member_count=0, members=[], created_at=NOW)

    def test_document_uses_camel_case_without_id(self):
        team = Team(
            id="team1",
            post_id="p1",
            project_name="P",
            required_tag_ids=["t1"],
            member_count=1,
            members=[_member(1)],
            created_at=NOW,
        )
        doc = team.to_document()
        assert "id" not in doc
        assert doc["postId"] == "p1"
        assert doc["projectName"] == "P"
        assert doc["requiredTagIds"] == ["t1"]
        assert doc["memberCount"] == 1
        assert doc["aiAnalysis"] is None
        assert doc["createdAt"].startswith("2026-01-05T12:00:00")

    def test_round_trip_from_document(self):
        team = Team(
            post_id="p1",
            project_name="P",
            member_count=1,
            members=[_member(1)],
            created_at=NOW,
        )
        loaded = Team.model_validate({**team.to_document(), "id": "abc"})
        assert loaded.id == "abc"
        assert loaded.created_at == NOW
        assert loaded.members == team.members

    def test_member_from_user_snapshots_skills(self):
        user = User(id="u1", name="A", email="a@x", skill_tags=[SkillTag(tag_id="t1")])
        member = TeamMember.from_user(user)
        user.skill_tags.append(SkillTag(tag_id="t2"))
        assert [s.tag_id for s in member.skill_tags] == ["t1"]
