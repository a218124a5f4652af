"""Page: Coordination Assessment. Quick two-score demo and full sample-agent assessment."""

from datetime import datetime, timezone

import pandas as pd
import streamlit as st

from coordination_framework.data.sample_agents import get_sample_agent, list_sample_agents
from coordination_framework.models.enumerations import CulturalBackground
from coordination_framework.scoring.coordination_calculator import CoordinationScorer
from coordination_framework.scoring.demo_calculator import quick_coordination
from components.charts import LEVEL_COLORS, breakdown_bar, component_radar

CULTURES = [c.value for c in CulturalBackground]


def _render_quick_demo():
    st.markdown("### Quick Coordination Check")
    st.caption("Two coherence scores plus cultural backgrounds → coordination potential")

    c1, c2 = st.columns(2)
    with c1:
        score_a = st.slider("Agent A coherence", 0.0, 1.0, 0.75, 0.01)
        culture_a = st.selectbox("Agent A culture", CULTURES, index=0)
    with c2:
        score_b = st.slider("Agent B coherence", 0.0, 1.0, 0.65, 0.01)
        culture_b = st.selectbox("Agent B culture", CULTURES, index=1)

    result = quick_coordination(score_a, score_b, culture_a, culture_b)

    m1, m2, m3 = st.columns(3)
    m1.metric("Coordination Potential", f"{result.coordination_potential:.3f}")
    m2.metric("Cultural Compatibility", f"{result.cultural_compatibility:.2f}")
    m3.metric("Level", result.level.value)

    color = LEVEL_COLORS.get(result.level.value, "#6b7280")
    st.markdown(
        f"<span style='color:{color};font-weight:600'>{result.interpretation}</span>",
        unsafe_allow_html=True,
    )
    st.caption(result.recommendation)


def _render_full_assessment():
    st.markdown("### Full Assessment: Sample Agents")

    keys = list_sample_agents()
    c1, c2, c3 = st.columns([1, 1, 1])
    key_a = c1.selectbox("First agent", keys, index=0)
    key_b = c2.selectbox("Second agent", keys, index=min(1, len(keys) - 1))
    task = c3.text_input("Task context", "collaboration_demo")

    if not st.button("Assess Coordination", type="primary"):
        return

    now = datetime.now(timezone.utc)
    agent_a = get_sample_agent(key_a, now=now)
    agent_b = get_sample_agent(key_b, now=now)
    result = CoordinationScorer().assess(agent_a, agent_b, context={"task": task}, now=now)

    m1, m2, m3 = st.columns(3)
    m1.metric("Coordination Potential", f"{result.coordination_potential:.3f}")
    m2.metric("Recommendation", result.recommendation.level.value)
    m3.metric("Confidence", result.recommendation.confidence.value)

    if result.meets_threshold:
        st.success(result.recommendation.description)
    else:
        st.warning(result.recommendation.description)
    st.markdown(f"**Action:** {result.recommendation.action}")

    left, right = st.columns(2)
    with left:
        st.plotly_chart(
            breakdown_bar(
                [
                    f"Coherence ({agent_a.name})",
                    f"Coherence ({agent_b.name})",
                    "PRF Compatibility",
                    "Capability Overlap",
                    "Cultural Coordination",
                ],
                [
                    result.coherence_a.total_score,
                    result.coherence_b.total_score,
                    result.prf_compatibility,
                    result.capability_overlap,
                    result.cultural_coordination,
                ],
                "Coordination Breakdown",
            ),
            use_container_width=True,
        )
    with right:
        st.plotly_chart(
            component_radar({
                agent_a.name: result.coherence_a.components.as_dict(),
                agent_b.name: result.coherence_b.components.as_dict(),
            }),
            use_container_width=True,
        )

    st.markdown("#### Intervention Strategies")
    if not result.intervention_strategies:
        st.info("No interventions needed.")
        return

    df = pd.DataFrame([
        {
            "Type": s.type.value,
            "Priority": s.priority.value,
            "Strategy": s.strategy,
            "Timeline": s.timeline,
            "Expected Improvement": s.expected_improvement,
        }
        for s in result.intervention_strategies
    ])
    st.dataframe(df, use_container_width=True, hide_index=True)


def render():
    st.title("🤝 Coordination Assessment")
    st.caption(
        "Potential = 0.30·min(coherence) + 0.25·PRF + 0.25·capability overlap + 0.20·cultural"
    )
    _render_quick_demo()
    st.divider()
    _render_full_assessment()
