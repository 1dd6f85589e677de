"""Tag id → name resolution and simple tag search."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Protocol

from skillteam.errors import UpstreamUnavailable, ValidationError
from skillteam.models import Tag


logger = logging.getLogger(__name__)


class TagSource(Protocol):
    def get_tag(self, tag_id: str) -> Tag | None: ...

    def list_tags(self) -> list[Tag]: ...


class TagResolver:
    """Best-effort lookup of human-readable tag names."""

    def __init__(self, source: TagSource) -> None:
        self._source = source

    def resolve_names(self, tag_ids: Iterable[str]) -> dict[str, str]:
        """Map each known tag id to its name.

        Unknown or unreadable ids are omitted, not reported: callers must
        tolerate a partial mapping. Insertion order follows *tag_ids*.
        """
        names: dict[str, str] = {}
        for tag_id in tag_ids:
            if tag_id in names:
                continue
            try:
                tag = self._source.get_tag(tag_id)
            except UpstreamUnavailable as exc:
                logger.warning("Tag %s could not be read, skipping: %s", tag_id, exc.message)
                continue
            if tag is None:
                logger.debug("Tag %s not found, skipping", tag_id)
                continue
            names[tag_id] = tag.name
        return names

    def search(self, query: str) -> list[Tag]:
        """Case-insensitive substring match on tag names (no ranking)."""
        if not query or not query.strip():
            raise ValidationError("Query parameter 'q' is required")
        needle = query.strip().lower()
        return [tag for tag in self._source.list_tags() if needle in tag.name.lower()]
