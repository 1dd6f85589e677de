"""Skill-based team composition and LLM team analysis."""

from .errors import TeamEngineError
from .models import AnalysisResult, Project, Tag, Team, TeamMember, User

__all__ = [
    "AnalysisResult",
    "Project",
    "Tag",
    "Team",
    "TeamEngineError",
    "TeamMember",
    "User",
]
