"""Random team selection.

The random source is always an injected ``random.Random`` instance so a
seeded generator reproduces the exact same team.
"""

from __future__ import annotations

from collections.abc import Sequence
import random
from typing import TypeVar

from skillteam.errors import InsufficientCandidates, ValidationError


T = TypeVar("T")


def validate_team_size(size: object) -> int:
    """Return *size* if it is a positive ``int``; raise ``ValidationError`` otherwise."""
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValidationError(f"memberCount must be a positive integer, got {size!r}")
    return size


def select_team(
    eligible: Sequence[T],
    size: int,
    rng: random.Random | None = None,
) -> list[T]:
    """Sample exactly *size* distinct candidates uniformly, without replacement.

    Args:
        eligible: Candidates to draw from. Not modified.
        size: Team size (positive).
        rng: Random source. A fresh private ``random.Random()`` when omitted.

    Returns:
        A new list of *size* candidates in sampling order.

    Raises:
        InsufficientCandidates: If ``len(eligible) < size``.
    """
    size = validate_team_size(size)
    if len(eligible) < size:
        raise InsufficientCandidates(required=size, available=len(eligible))
    rng = rng if rng is not None else random.Random()
    return rng.sample(list(eligible), size)
