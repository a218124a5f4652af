# dashboard/app.py
# Interactive demos for the Capability-Based Coordination Framework
#
# Run with:  streamlit run dashboard/app.py

import streamlit as st
from dotenv import load_dotenv

from coordination_framework.core.logging_config import configure_logging

load_dotenv()
configure_logging()

st.set_page_config(
    page_title="Coordination Framework",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.markdown("## 🧭 Coordination Framework")
st.sidebar.caption("Capability-Based Coordination — interactive demos")
st.sidebar.divider()

page = st.sidebar.radio(
    "Navigate",
    [
        "⏳ ATCF Calculator",
        "🤝 Coordination Assessment",
    ],
)

st.sidebar.divider()
st.sidebar.caption("Adaptive Temporal Coherence Function (ATCF)")


if page == "⏳ ATCF Calculator":
    from views import atcf_calculator
    atcf_calculator.render()
else:
    from views import coordination
    coordination.render()
