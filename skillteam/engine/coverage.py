"""Required-skill coverage of a team.

All functions are *pure*. The summary is computed from the member snapshot
stored on the team, never from the live user pool.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from skillteam.models import Team


class TagCoverage(BaseModel):
    """Which members hold a single required tag."""

    tag_id: str
    name: str
    covered_by: list[str] = Field(default_factory=list)

    @property
    def covered(self) -> bool:
        return bool(self.covered_by)


class SkillCoverage(BaseModel):
    """Coverage report across all required tags of a team."""

    tags: list[TagCoverage]
    coverage_ratio: float = Field(ge=0.0, le=1.0)
    missing_tag_ids: list[str] = Field(default_factory=list)


def compute_skill_coverage(team: Team, tag_names: dict[str, str] | None = None) -> SkillCoverage:
    """Summarize how the team's members cover its required tags.

    Args:
        team: A persisted team.
        tag_names: Optional id → name mapping; unresolved tags fall back to their id.

    Returns:
        SkillCoverage. A team with no required tags has a ratio of 1.0.
    """
    tag_names = tag_names or {}
    required = list(dict.fromkeys(team.required_tag_ids))

    tags: list[TagCoverage] = []
    for tag_id in required:
        holders = [
            m.id for m in team.members
            if any(st.tag_id == tag_id for st in m.skill_tags)
        ]
        tags.append(TagCoverage(tag_id=tag_id, name=tag_names.get(tag_id, tag_id), covered_by=holders))

    missing = [t.tag_id for t in tags if not t.covered]
    ratio = 1.0 if not tags else (len(tags) - len(missing)) / len(tags)

    return SkillCoverage(
        tags=tags,
        coverage_ratio=round(ratio, 4),
        missing_tag_ids=missing,
    )
