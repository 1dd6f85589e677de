"""LLM skill-gap analysis of a persisted team.

The prompt is built from the team's own member snapshot; the live user pool
is never re-read. On success the narrative and timestamp are written in a
single update, overwriting any earlier analysis. On failure the team is left
untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import json
import logging
from typing import Protocol

from skillteam.engine.composition import utc_now
from skillteam.engine.coverage import SkillCoverage, compute_skill_coverage
from skillteam.engine.tag_resolver import TagResolver
from skillteam.errors import (
    AnalysisProviderError,
    AnalysisProviderUnconfigured,
    TeamNotFound,
    ValidationError,
)
from skillteam.models import AnalysisResult, Team
from skillteam.repository import TeamDataSource
from skillteam.settings import AnalysisSettings


logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate_text(self, prompt: str, *, temperature: float, max_output_tokens: int) -> str: ...


TEAM_ANALYSIS_PROMPT = """你是专业的团队技能分析专家，请分析以下团队：
1. 项目名称：{project_name}
2. 项目需要的技能标签：{tag_names}（ID：{tag_ids}）
3. 团队人数：{member_count}
4. 团队成员：{members_json}
5. 技能覆盖情况：{coverage_summary}

请按以下结构用中文输出分析结果：
1. 技能匹配度总结：评估团队技能是否满足项目需求，给出百分比评分；
2. 优势：团队当前的核心技能优势；
3. 不足：缺少的关键技能或技能分布问题；
4. 优化建议：针对不足给出具体的人员调整/技能补充建议。"""


def _format_coverage(coverage: SkillCoverage) -> str:
    if not coverage.tags:
        return "项目未指定技能要求"
    parts = [f"{t.name}：{len(t.covered_by)}人" for t in coverage.tags]
    return f"{'，'.join(parts)}（覆盖率 {coverage.coverage_ratio:.0%}）"


def build_analysis_prompt(team: Team, tag_names: dict[str, str]) -> str:
    """Render the analysis prompt for *team*.

    Args:
        team: The persisted team.
        tag_names: Resolved id → name mapping; may be partial.
    """
    members = [m.model_dump(mode="json") for m in team.members]
    coverage = compute_skill_coverage(team, tag_names)
    return TEAM_ANALYSIS_PROMPT.format(
        project_name=team.project_name,
        tag_names=", ".join(tag_names[t] for t in team.required_tag_ids if t in tag_names),
        tag_ids=", ".join(team.required_tag_ids),
        member_count=team.member_count,
        members_json=json.dumps(members, ensure_ascii=False),
        coverage_summary=_format_coverage(coverage),
    )


class AnalysisOrchestrator:
    """Generates and stores the narrative analysis for a team."""

    def __init__(
        self,
        source: TeamDataSource,
        tag_resolver: TagResolver,
        generator: TextGenerator | None,
        settings: AnalysisSettings | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._source = source
        self._tags = tag_resolver
        self._generator = generator
        self._settings = settings or AnalysisSettings()
        self._clock = clock

    def analyze_team(self, team_id: str) -> AnalysisResult:
        """Analyze a team's skill coverage and persist the result.

        Raises:
            ValidationError: Missing team id.
            TeamNotFound: No team with *team_id*.
            AnalysisProviderUnconfigured: No text-generation client configured.
            AnalysisProviderError: The provider call failed or returned nothing.
        """
        if not isinstance(team_id, str) or not team_id.strip():
            raise ValidationError("teamId is required")

        team = self._source.get_team(team_id)
        if team is None:
            raise TeamNotFound(team_id)

        tag_names = self._tags.resolve_names(team.required_tag_ids)

        if self._generator is None:
            raise AnalysisProviderUnconfigured("Text-generation credential is not configured")

        prompt = build_analysis_prompt(team, tag_names)
        logger.info("Analyzing team %s (%d members)", team_id, team.member_count)
        try:
            text = self._generator.generate_text(
                prompt,
                temperature=self._settings.temperature,
                max_output_tokens=self._settings.max_output_tokens,
            )
        except Exception as exc:
            logger.error("Analysis provider failed for team %s: %s", team_id, exc)
            raise AnalysisProviderError(f"Analysis failed: {exc}", team_id=team_id) from exc

        if not text or not text.strip():
            raise AnalysisProviderError("Analysis provider returned no text", team_id=team_id)

        analyzed_at = self._clock()
        self._source.update_team(team_id, {"aiAnalysis": text, "aiAnalyzedAt": analyzed_at})
        logger.info("Stored analysis for team %s", team_id)

        return AnalysisResult(team_id=team_id, analysis=text, analyzed_at=analyzed_at)
