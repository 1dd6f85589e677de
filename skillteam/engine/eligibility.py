"""Eligibility filter for team candidates.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from skillteam.models import User


def is_eligible(required: set[str], user: User) -> bool:
    """A user is eligible when they hold at least one required tag.

    An empty requirement set means the project imposes no requirement, so
    every user qualifies.
    """
    if not required:
        return True
    return not required.isdisjoint(user.skill_tag_ids)


def filter_eligible(required_tag_ids: Iterable[str], candidates: Sequence[User]) -> list[User]:
    """Return the candidates whose skill tags intersect *required_tag_ids*.

    Linear scan over the in-memory pool, O(pool size). Input order is kept.
    """
    required = set(required_tag_ids)
    return [user for user in candidates if is_eligible(required, user)]
