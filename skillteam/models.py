"""Typed records crossing the document-store boundary.

Raw documents are shaped into these models as soon as they are read, so the
composition engine never sees storage-layer dictionaries.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------
class Tag(BaseModel):
    """A named skill / category reference entity."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category_id: str | int | None = None


class SkillTag(BaseModel):
    """A user's association with a skill tag.

    Extra keys on the stored association (level, years, ...) are preserved.
    """

    model_config = ConfigDict(extra="allow")

    tag_id: str = Field(..., min_length=1)


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v


class User(BaseModel):
    """A candidate with declared skills. Read-only snapshot."""

    id: str = Field(..., min_length=1)
    name: str = ""
    email: str = ""
    skill_tags: list[SkillTag] = Field(default_factory=list)
    major_id: str | None = None
    dev_tags: list[Any] = Field(default_factory=list)
    courses_id: list[Any] = Field(default_factory=list)

    @field_validator("skill_tags", "dev_tags", "courses_id", mode="before")
    @classmethod
    def default_empty_lists(cls, v: Any) -> Any:
        return _none_to_list(v)

    @property
    def skill_tag_ids(self) -> set[str]:
        return {st.tag_id for st in self.skill_tags}


class Project(BaseModel):
    """A project post. Only ``title`` and ``requirements`` matter here."""

    id: str = Field(..., min_length=1)
    title: str | None = None
    requirements: list[str] = Field(default_factory=list)

    @field_validator("requirements", mode="before")
    @classmethod
    def default_empty_requirements(cls, v: Any) -> Any:
        return _none_to_list(v)


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------
class TeamMember(BaseModel):
    """A member as recorded on the team at selection time."""

    id: str = Field(..., min_length=1)
    name: str = ""
    email: str = ""
    skill_tags: list[SkillTag] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> TeamMember:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            skill_tags=[st.model_copy() for st in user.skill_tags],
        )


class Team(BaseModel):
    """An immutable-membership record of users selected for one project.

    Stored and served with camelCase keys; Python code uses snake_case.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    post_id: str = Field(..., alias="postId", min_length=1)
    project_name: str = Field(..., alias="projectName")
    required_tag_ids: list[str] = Field(default_factory=list, alias="requiredTagIds")
    member_count: int = Field(..., alias="memberCount", gt=0)
    members: list[TeamMember]
    created_at: datetime = Field(..., alias="createdAt")
    ai_analysis: str | None = Field(default=None, alias="aiAnalysis")
    ai_analyzed_at: datetime | None = Field(default=None, alias="aiAnalyzedAt")

    @model_validator(mode="after")
    def validate_member_count(self) -> Team:
        if len(self.members) != self.member_count:
            raise ValueError(
                f"Team has {len(self.members)} members but memberCount is {self.member_count}"
            )
        return self

    def to_document(self) -> dict[str, Any]:
        """Serialize for storage (camelCase keys, no id)."""
        return self.model_dump(by_alias=True, mode="json", exclude={"id"})

    def to_response(self) -> dict[str, Any]:
        """Serialize for API responses (camelCase keys, with id)."""
        return self.model_dump(by_alias=True, mode="json")


class AnalysisResult(BaseModel):
    """Outcome of a successful team analysis."""

    team_id: str
    analysis: str = Field(..., min_length=1)
    analyzed_at: datetime
