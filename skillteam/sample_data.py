"""Sample tags, users and project posts for local runs of the dashboard/API.

Documents use the same raw shape as the production collections
(``skill_tags`` entries keyed by ``tag_id``, ``requirements`` as tag ids).
"""

from __future__ import annotations

from typing import Any

from skillteam.repository import POSTS, TAGS, USERS
from skillteam.store import DocumentStore


# ---------------------------------------------------------------------------
# Skill tags
# ---------------------------------------------------------------------------
SAMPLE_TAGS: dict[str, dict[str, Any]] = {
    "t_python": {"name": "Python", "category_id": "c_lang"},
    "t_react": {"name": "React", "category_id": "c_frontend"},
    "t_ml": {"name": "机器学习", "category_id": "c_ai"},
    "t_ui": {"name": "UI 设计", "category_id": "c_design"},
    "t_db": {"name": "数据库", "category_id": "c_backend"},
    "t_pm": {"name": "项目管理", "category_id": "c_soft"},
}


def _skills(*tag_ids: str) -> list[dict[str, str]]:
    return [{"tag_id": t} for t in tag_ids]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
SAMPLE_USERS: dict[str, dict[str, Any]] = {
    "u01": {"name": "赵冲", "email": "zhao@example.com", "skill_tags": _skills("t_python", "t_ml"), "major_id": "cs"},
    "u02": {"name": "钱迅", "email": "qian@example.com", "skill_tags": _skills("t_react", "t_ui"), "major_id": "se"},
    "u03": {"name": "孙策", "email": "sun@example.com", "skill_tags": _skills("t_db", "t_python"), "major_id": "cs"},
    "u04": {"name": "李稳", "email": "li@example.com", "skill_tags": _skills("t_pm"), "major_id": "mgmt"},
    "u05": {"name": "周驱", "email": "zhou@example.com", "skill_tags": _skills("t_ml"), "major_id": "math"},
    "u06": {"name": "吴救", "email": "wu@example.com", "skill_tags": _skills("t_ui"), "major_id": "design"},
    "u07": {"name": "郑谋", "email": "zheng@example.com", "skill_tags": _skills("t_react", "t_db"), "major_id": "se"},
    "u08": {"name": "王探", "email": "wang@example.com", "skill_tags": [], "major_id": "cs"},
}


# ---------------------------------------------------------------------------
# Project posts
# ---------------------------------------------------------------------------
SAMPLE_POSTS: dict[str, dict[str, Any]] = {
    "p_ai_lab": {"title": "校园 AI 助手", "requirements": ["t_python", "t_ml"]},
    "p_web": {"title": "社团管理网站", "requirements": ["t_react", "t_ui", "t_db"]},
    "p_open": {"title": "开放式创意项目"},
}


def seed_sample_data(store: DocumentStore) -> int:
    """Write the sample documents into *store*, replacing same-id documents.

    Returns:
        Number of documents written.
    """
    count = 0
    for collection, docs in ((TAGS, SAMPLE_TAGS), (USERS, SAMPLE_USERS), (POSTS, SAMPLE_POSTS)):
        for doc_id, doc in docs.items():
            store.set(collection, doc_id, doc)
            count += 1
    return count
