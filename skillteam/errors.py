"""Failure taxonomy for team composition and analysis.

Each kind maps onto exactly one HTTP status at the API boundary. ``details``
carries diagnostics (ids, counts) for logging; callers only need the type.
"""

from __future__ import annotations

from typing import Any


class TeamEngineError(Exception):
    """Base class for all typed failures surfaced to callers."""

    http_status: int = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(TeamEngineError):
    """Missing or malformed input."""

    http_status = 400


class InsufficientCandidates(TeamEngineError):
    """Fewer eligible candidates than the requested team size."""

    http_status = 400

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Only {available} eligible users found, cannot form a team of {required}",
            required=required,
            available=available,
        )
        self.required = required
        self.available = available


class ProjectNotFound(TeamEngineError):
    http_status = 404

    def __init__(self, post_id: str) -> None:
        super().__init__(f"Project '{post_id}' not found", post_id=post_id)
        self.post_id = post_id


class TeamNotFound(TeamEngineError):
    http_status = 404

    def __init__(self, team_id: str) -> None:
        super().__init__(f"Team '{team_id}' not found", team_id=team_id)
        self.team_id = team_id


class UserNotFound(TeamEngineError):
    http_status = 404

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User '{user_id}' not found", user_id=user_id)
        self.user_id = user_id


class UpstreamUnavailable(TeamEngineError):
    """The document store could not be read or written."""

    http_status = 503


class TeamPersistenceError(UpstreamUnavailable):
    """A team was selected but could not be saved."""


class AnalysisProviderUnconfigured(TeamEngineError):
    """No credential / client configured for text generation."""

    http_status = 401


class AnalysisProviderError(TeamEngineError):
    """The text-generation call failed, timed out or returned nothing."""

    http_status = 502
