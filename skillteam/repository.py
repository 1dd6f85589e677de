"""Typed access to projects, users, tags and teams.

``TeamDataSource`` is the collaborator interface the engine depends on;
``TeamRepository`` implements it on top of :class:`DocumentStore`. Documents
are shaped into :mod:`skillteam.models` on read and store failures are
surfaced as :class:`UpstreamUnavailable`.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

import pydantic
from pydantic_core import to_jsonable_python

from skillteam.errors import TeamNotFound, TeamPersistenceError, UpstreamUnavailable
from skillteam.models import Project, Tag, Team, User
from skillteam.store import DocumentNotFound, DocumentStore, StoreError


logger = logging.getLogger(__name__)

TAGS = "Tags"
USERS = "Users"
POSTS = "Posts"
TEAMS = "Teams"

_M = TypeVar("_M", bound=pydantic.BaseModel)


class TeamDataSource(Protocol):
    """Collaborators consumed by the composition engine and the analyzer."""

    def get_project(self, post_id: str) -> Project | None: ...

    def get_all_users(self) -> list[User]: ...

    def get_tag(self, tag_id: str) -> Tag | None: ...

    def create_team(self, team: Team) -> Team: ...

    def get_team(self, team_id: str) -> Team | None: ...

    def update_team(self, team_id: str, fields: dict[str, Any]) -> None: ...


class TeamRepository:
    """Document-store backed implementation of :class:`TeamDataSource`."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> DocumentStore:
        return self._store

    # ------------------------------------------------------------------
    # Projects / users / tags (read-only)
    # ------------------------------------------------------------------
    def get_project(self, post_id: str) -> Project | None:
        return self._get_one(POSTS, post_id, Project)

    def list_projects(self) -> list[Project]:
        return self._list(POSTS, Project)

    def get_all_users(self) -> list[User]:
        return self._list(USERS, User)

    def get_user(self, user_id: str) -> User | None:
        return self._get_one(USERS, user_id, User)

    def get_tag(self, tag_id: str) -> Tag | None:
        return self._get_one(TAGS, tag_id, Tag)

    def list_tags(self) -> list[Tag]:
        return self._list(TAGS, Tag)

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def create_team(self, team: Team) -> Team:
        """Persist *team* in one write and return it with its assigned id."""
        try:
            team_id = self._store.add(TEAMS, team.to_document())
        except StoreError as exc:
            raise TeamPersistenceError(
                f"Team was formed but could not be saved: {exc}", post_id=team.post_id
            ) from exc
        return team.model_copy(update={"id": team_id})

    def get_team(self, team_id: str) -> Team | None:
        return self._get_one(TEAMS, team_id, Team)

    def list_teams(self) -> list[Team]:
        return self._list(TEAMS, Team)

    def update_team(self, team_id: str, fields: dict[str, Any]) -> None:
        """Merge camelCase *fields* into the stored team in one write."""
        try:
            self._store.update(TEAMS, team_id, to_jsonable_python(fields))
        except DocumentNotFound as exc:
            raise TeamNotFound(team_id) from exc
        except StoreError as exc:
            raise UpstreamUnavailable(
                f"Failed to update team: {exc}", team_id=team_id
            ) from exc

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _get_one(self, collection: str, doc_id: str, model: type[_M]) -> _M | None:
        try:
            doc = self._store.get(collection, doc_id)
        except StoreError as exc:
            raise UpstreamUnavailable(str(exc), collection=collection) from exc
        if doc is None:
            return None
        try:
            return model.model_validate({**doc, "id": doc_id})
        except pydantic.ValidationError as exc:
            raise UpstreamUnavailable(
                f"Malformed document {collection}/{doc_id}", collection=collection
            ) from exc

    def _list(self, collection: str, model: type[_M]) -> list[_M]:
        """Shape every document, skipping (and logging) malformed ones."""
        try:
            pairs = self._store.list_all(collection)
        except StoreError as exc:
            raise UpstreamUnavailable(str(exc), collection=collection) from exc
        result: list[_M] = []
        for doc_id, doc in pairs:
            try:
                result.append(model.model_validate({**doc, "id": doc_id}))
            except pydantic.ValidationError:
                logger.warning("Skipping malformed document %s/%s", collection, doc_id)
        return result
