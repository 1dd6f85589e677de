"""👥 项目组队仪表盘: Streamlit app.

Three tabs:
1. 生成团队  – pick a project post and team size, compose a team
2. 团队详情  – members, required-skill coverage chart
3. AI 分析   – run / re-run the Gemini skill-gap analysis
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
import plotly.graph_objects as go  # type: ignore[import-untyped]
import streamlit as st

from skillteam.api import Services, build_services
from skillteam.engine.coverage import compute_skill_coverage
from skillteam.errors import TeamEngineError
from skillteam.models import Team
from skillteam.sample_data import seed_sample_data
from skillteam.settings import AppSettings

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="项目组队", page_icon="👥", layout="wide")
st.title("👥 项目组队与技能分析")


@st.cache_resource
def _services() -> Services:
    return build_services(AppSettings.from_env())


SERVICES = _services()


def _selected_team() -> Team | None:
    team_id = st.session_state.get("team_id")
    if not team_id:
        return None
    try:
        return SERVICES.repository.get_team(team_id)
    except TeamEngineError as e:
        st.error(f"加载团队失败: {e.message}")
        return None


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.caption(f"数据目录: {SERVICES.repository.store.data_dir}")
    if st.button("📥 导入示例数据"):
        n = seed_sample_data(SERVICES.repository.store)
        st.success(f"已写入 {n} 条示例数据")
        st.rerun()

    teams = SERVICES.repository.list_teams()
    if teams:
        labels = {t.id: f"{t.project_name} · {t.member_count}人 · {t.created_at:%m-%d %H:%M}" for t in teams}
        chosen = st.selectbox("历史团队", options=list(labels), format_func=lambda i: labels[i])
        if st.button("查看该团队"):
            st.session_state.team_id = chosen
            st.rerun()


tab1, tab2, tab3 = st.tabs(["🧩 生成团队", "📋 团队详情", "🤖 AI 分析"])

# =========================================================================
# Tab 1: compose
# =========================================================================
with tab1:
    projects = SERVICES.repository.list_projects()
    if not projects:
        st.info("暂无项目，请先在侧边栏导入示例数据。")
    else:
        names = {p.id: p.title or p.id for p in projects}
        post_id = st.selectbox("项目", options=list(names), format_func=lambda i: names[i])
        member_count = st.number_input("团队人数", min_value=1, max_value=20, value=3, step=1)
        if st.button("生成团队", type="primary"):
            try:
                team = SERVICES.composer.compose_team(post_id, int(member_count))
            except TeamEngineError as e:
                st.error(e.message)
            else:
                st.session_state.team_id = team.id
                st.success(f"团队生成成功（{team.id}）")

# =========================================================================
# Tab 2: team detail + coverage chart
# =========================================================================
with tab2:
    team = _selected_team()
    if team is None:
        st.info("请先生成或选择一个团队。")
    else:
        st.subheader(team.project_name)
        st.dataframe(
            [
                {"ID": m.id, "姓名": m.name, "邮箱": m.email, "技能": ", ".join(s.tag_id for s in m.skill_tags)}
                for m in team.members
            ],
            use_container_width=True,
        )

        tag_names = SERVICES.tags.resolve_names(team.required_tag_ids)
        coverage = compute_skill_coverage(team, tag_names)
        st.metric("需求技能覆盖率", f"{coverage.coverage_ratio:.0%}")
        if coverage.tags:
            fig = go.Figure(go.Bar(
                x=[t.name for t in coverage.tags],
                y=[len(t.covered_by) for t in coverage.tags],
                text=[str(len(t.covered_by)) for t in coverage.tags],
                textposition="outside",
                marker_color=["#4CAF50" if t.covered else "#F44336" for t in coverage.tags],
            ))
            fig.update_layout(title="各需求技能的成员数", height=350)
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.caption("该项目未指定技能要求。")

# =========================================================================
# Tab 3: AI analysis
# =========================================================================
with tab3:
    team = _selected_team()
    if team is None:
        st.info("请先生成或选择一个团队。")
    else:
        if st.button("🤖 运行 AI 分析"):
            with st.spinner("分析中..."):
                try:
                    SERVICES.analyzer.analyze_team(team.id)
                except TeamEngineError as e:
                    st.error(e.message)
                else:
                    st.rerun()
        if team.ai_analysis:
            st.caption(f"分析时间: {team.ai_analyzed_at:%Y-%m-%d %H:%M:%S}")
            st.markdown(team.ai_analysis)
        else:
            st.caption("尚未分析。")
