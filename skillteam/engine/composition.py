"""Team composition: project lookup → eligibility → selection → persistence.

Single-attempt orchestration. There is no retry, locking or deduplication:
concurrent calls for the same project each create their own team.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
import logging
import random

from skillteam.engine.eligibility import filter_eligible
from skillteam.engine.selection import select_team, validate_team_size
from skillteam.errors import ProjectNotFound, ValidationError
from skillteam.models import Team, TeamMember
from skillteam.repository import TeamDataSource


logger = logging.getLogger(__name__)

UNTITLED_PROJECT_NAME = "未命名项目"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TeamCompositionEngine:
    """Builds and persists a team for a project."""

    def __init__(
        self,
        source: TeamDataSource,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._source = source
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock

    def compose_team(self, post_id: str, member_count: int) -> Team:
        """Select *member_count* eligible users for *post_id* and store the team.

        Raises:
            ValidationError: Missing post id or non-positive member count.
            ProjectNotFound: No project with *post_id*.
            UpstreamUnavailable: The candidate pool could not be read.
            InsufficientCandidates: Fewer eligible users than *member_count*.
            TeamPersistenceError: The team was formed but not saved.
        """
        if not isinstance(post_id, str) or not post_id.strip():
            raise ValidationError("postId is required")
        member_count = validate_team_size(member_count)

        project = self._source.get_project(post_id)
        if project is None:
            raise ProjectNotFound(post_id)
        required_tag_ids = list(project.requirements)

        pool = self._source.get_all_users()
        eligible = filter_eligible(required_tag_ids, pool)
        logger.info(
            "Project %s: %d of %d users eligible for tags %s",
            post_id, len(eligible), len(pool), required_tag_ids,
        )

        chosen = select_team(eligible, member_count, rng=self._rng)

        team = Team(
            post_id=post_id,
            project_name=project.title or UNTITLED_PROJECT_NAME,
            required_tag_ids=required_tag_ids,
            member_count=member_count,
            members=[TeamMember.from_user(u) for u in chosen],
            created_at=self._clock(),
        )
        saved = self._source.create_team(team)
        logger.info("Created team %s for project %s with %d members", saved.id, post_id, member_count)
        return saved
