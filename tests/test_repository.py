"""Tests for skillteam.repository."""

from datetime import datetime, timezone
from pathlib import Path
import tempfile
from unittest.mock import MagicMock

import pytest

from skillteam.errors import TeamNotFound, TeamPersistenceError, UpstreamUnavailable
from skillteam.models import Team, TeamMember
from skillteam.repository import POSTS, TAGS, TEAMS, USERS, TeamRepository
from skillteam.sample_data import SAMPLE_POSTS, SAMPLE_TAGS, SAMPLE_USERS, seed_sample_data
from skillteam.store import DocumentStore, StoreError


NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def _team() -> Team:
    return Team(
        post_id="p1",
        project_name="Demo",
        required_tag_ids=["t1"],
        member_count=1,
        members=[TeamMember(id="u1", name="A", email="a@example.com")],
        created_at=NOW,
    )


class TestTeamRepository:

    @pytest.fixture
    def data_dir(self):
        with tempfile.TemporaryDirectory() as d:
            yield Path(d)

    @pytest.fixture
    def store(self, data_dir):
        return DocumentStore(data_dir)

    @pytest.fixture
    def repo(self, store):
        return TeamRepository(store)

    # -- reads ----------------------------------------------------------
    def test_get_project_shapes_document(self, repo, store):
        store.set(POSTS, "p1", {"title": "Demo", "requirements": ["t1", "t2"], "extra": True})
        project = repo.get_project("p1")
        assert project.id == "p1"
        assert project.title == "Demo"
        assert project.requirements == ["t1", "t2"]

    def test_get_project_without_requirements(self, repo, store):
        store.set(POSTS, "p1", {"title": "Demo"})
        assert repo.get_project("p1").requirements == []

    def test_get_missing_project_returns_none(self, repo):
        assert repo.get_project("nope") is None

    def test_get_all_users_skips_malformed(self, repo, store):
        store.set(USERS, "u1", {"name": "A", "skill_tags": [{"tag_id": "t1"}]})
        store.set(USERS, "u2", {"name": "B", "skill_tags": [{"level": 2}]})
        store.set(USERS, "u3", {"name": "C"})
        users = repo.get_all_users()
        assert [u.id for u in users] == ["u1", "u3"]
        assert users[1].skill_tags == []

    def test_malformed_single_document_is_upstream_error(self, repo, store):
        store.set(TAGS, "t1", {"category_id": "c1"})
        with pytest.raises(UpstreamUnavailable):
            repo.get_tag("t1")

    def test_unreadable_collection_is_upstream_error(self, repo, data_dir):
        (data_dir / f"{USERS}.json").write_text("garbage", encoding="utf-8")
        with pytest.raises(UpstreamUnavailable):
            repo.get_all_users()

    def test_get_user(self, repo, store):
        store.set(USERS, "u1", {"name": "A", "email": "a@example.com"})
        assert repo.get_user("u1").email == "a@example.com"
        assert repo.get_user("u2") is None

    # -- teams ----------------------------------------------------------
    def test_create_team_assigns_id(self, repo, store):
        saved = repo.create_team(_team())
        assert saved.id
        raw = store.get(TEAMS, saved.id)
        assert raw["postId"] == "p1"
        assert raw["members"][0]["id"] == "u1"

    def test_created_team_can_be_loaded(self, repo):
        saved = repo.create_team(_team())
        loaded = repo.get_team(saved.id)
        assert loaded == saved

    def test_list_teams(self, repo):
        a = repo.create_team(_team())
        b = repo.create_team(_team())
        assert [t.id for t in repo.list_teams()] == [a.id, b.id]

    def test_create_team_store_failure(self):
        store = MagicMock(spec=DocumentStore)
        store.add.side_effect = StoreError("disk full")
        with pytest.raises(TeamPersistenceError, match="could not be saved"):
            TeamRepository(store).create_team(_team())

    def test_persistence_error_is_upstream_unavailable(self):
        assert issubclass(TeamPersistenceError, UpstreamUnavailable)

    def test_update_team_serializes_datetime(self, repo, store):
        saved = repo.create_team(_team())
        later = datetime(2026, 3, 2, tzinfo=timezone.utc)
        repo.update_team(saved.id, {"aiAnalysis": "ok", "aiAnalyzedAt": later})
        assert isinstance(store.get(TEAMS, saved.id)["aiAnalyzedAt"], str)
        loaded = repo.get_team(saved.id)
        assert loaded.ai_analysis == "ok"
        assert loaded.ai_analyzed_at == later

    def test_update_missing_team(self, repo):
        with pytest.raises(TeamNotFound):
            repo.update_team("nope", {"aiAnalysis": "x"})


class TestSampleData:

    def test_seed_writes_all_documents(self):
        with tempfile.TemporaryDirectory() as d:
            store = DocumentStore(d)
            n = seed_sample_data(store)
            repo = TeamRepository(store)
            assert n == len(SAMPLE_TAGS) + len(SAMPLE_USERS) + len(SAMPLE_POSTS)
            assert len(repo.get_all_users()) == len(SAMPLE_USERS)
            assert len(repo.list_tags()) == len(SAMPLE_TAGS)
            assert len(repo.list_projects()) == len(SAMPLE_POSTS)

    def test_sample_requirements_reference_known_tags(self):
        for post in SAMPLE_POSTS.values():
            for tag_id in post.get("requirements", []):
                assert tag_id in SAMPLE_TAGS
