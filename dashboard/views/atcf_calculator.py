"""Page: ATCF Calculator. Slider demo plus sample-agent scoring."""

from datetime import datetime, timezone

import pandas as pd
import streamlit as st

from coordination_framework.data.sample_agents import get_sample_agent, list_sample_agents
from coordination_framework.scoring.coherence_calculator import CoherenceScorer
from coordination_framework.scoring.demo_calculator import component_score
from components.charts import COMPONENT_LABELS, COMPONENT_ORDER, component_radar, score_gauge

SLIDER_DEFAULTS = {"HC": 0.70, "PI": 0.60, "PC": 0.50, "MCC": 0.80}


def _load_sample(agent_key: str) -> None:
    """Score a sample agent and push its components onto the sliders."""
    now = datetime.now(timezone.utc)
    agent = get_sample_agent(agent_key, now=now)
    result = CoherenceScorer().score_culturally_adapted(agent, now=now)
    for key, value in result.components.as_dict().items():
        st.session_state[f"slider_{key}"] = round(value, 2)
    st.session_state["atcf_sample"] = (agent, result)


def render():
    st.title("⏳ ATCF Calculator")
    st.caption("ATCF = α·HC + β·PI + γ·PC + δ·MCC (equal weights in slider mode)")

    for key, default in SLIDER_DEFAULTS.items():
        st.session_state.setdefault(f"slider_{key}", default)

    left, right = st.columns([1, 1])

    with left:
        st.markdown("### Components")
        values = {
            key: st.slider(
                COMPONENT_LABELS[key], 0.0, 1.0, step=0.01, key=f"slider_{key}",
            )
            for key in COMPONENT_ORDER
        }

        st.markdown("### Try Sample Agents")
        cols = st.columns(len(list_sample_agents()))
        for col, agent_key in zip(cols, list_sample_agents()):
            col.button(
                f"Load {agent_key}",
                on_click=_load_sample, args=(agent_key,),
                use_container_width=True,
            )

    result = component_score(values["HC"], values["PI"], values["PC"], values["MCC"])

    with right:
        st.plotly_chart(
            score_gauge(result.total_score, result.interpretation.level.value, "ATCF Score"),
            use_container_width=True,
        )
        st.markdown(f"**{result.interpretation.description}**")
        st.caption(result.interpretation.recommendation)

    sample = st.session_state.get("atcf_sample")
    if sample is None:
        return

    agent, assessment = sample
    st.divider()
    st.markdown(f"### Agent: {agent.name}")

    c1, c2, c3 = st.columns(3)
    c1.metric("Cultural Background", agent.cultural_background.value if agent.cultural_background else "—")
    c2.metric("Overall ATCF", f"{assessment.total_score:.3f}")
    c3.metric("Level", assessment.interpretation.level.value)

    st.markdown(f"**Identity Kernel:** {', '.join(agent.identity_kernel)}")
    st.markdown(f"**Recommendation:** {assessment.interpretation.recommendation}")

    adaptation = assessment.cultural_adaptation
    if adaptation is not None:
        st.markdown("#### Cultural weight adaptation")
        st.dataframe(
            pd.DataFrame({
                "Original": adaptation.original_weights.as_dict(),
                "Adapted": adaptation.adapted_weights.as_dict(),
            }).round(4),
            use_container_width=True,
        )

    st.plotly_chart(
        component_radar({agent.name: assessment.components.as_dict()}),
        use_container_width=True,
    )
