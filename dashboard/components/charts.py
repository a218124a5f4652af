"""
components/charts.py — Plotly chart builders for the demo dashboard.
"""

from typing import Dict, List

import plotly.graph_objects as go

COMPONENT_ORDER = ["HC", "PI", "PC", "MCC"]

COMPONENT_LABELS = {
    "HC": "Historical Continuity",
    "PI": "Present Integration",
    "PC": "Prospective Coherence",
    "MCC": "Meta-Constructor Capacity",
}

LEVEL_COLORS = {
    "excellent": "#10b981",
    "good": "#059669",
    "moderate": "#d97706",
    "low": "#dc2626",
    "very_low": "#991b1b",
}

AGENT_COLORS = ["#3b82f6", "#f97316"]


def component_radar(profiles: Dict[str, Dict[str, float]]) -> go.Figure:
    """Radar chart of ATCF components, one trace per agent."""
    fig = go.Figure()
    categories = [COMPONENT_LABELS[c] for c in COMPONENT_ORDER]

    for i, (name, components) in enumerate(profiles.items()):
        values = [components.get(c, 0.0) for c in COMPONENT_ORDER]
        color = AGENT_COLORS[i % len(AGENT_COLORS)]
        fig.add_trace(go.Scatterpolar(
            r=values + values[:1], theta=categories + categories[:1], name=name,
            fill="toself", opacity=0.3,
            line=dict(color=color, width=3), fillcolor=color,
        ))

    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 1])),
        height=420, margin=dict(l=60, r=60, t=40, b=40),
        showlegend=True,
    )
    return fig


def score_gauge(score: float, level: str, title: str) -> go.Figure:
    """Gauge for a [0, 1] score, coloured by interpretation level."""
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        number=dict(valueformat=".3f"),
        title=dict(text=title),
        gauge=dict(
            axis=dict(range=[0, 1]),
            bar=dict(color=LEVEL_COLORS.get(level, "#6b7280")),
            steps=[
                dict(range=[0, 0.3], color="#fee2e2"),
                dict(range=[0.3, 0.5], color="#fef3c7"),
                dict(range=[0.5, 0.7], color="#fef9c3"),
                dict(range=[0.7, 0.8], color="#dcfce7"),
                dict(range=[0.8, 1.0], color="#bbf7d0"),
            ],
        ),
    ))
    fig.update_layout(height=260, margin=dict(l=30, r=30, t=60, b=20))
    return fig


def breakdown_bar(labels: List[str], values: List[float], title: str) -> go.Figure:
    """Horizontal bars for coordination sub-scores."""
    fig = go.Figure(go.Bar(
        x=values, y=labels, orientation="h",
        marker_color="#6366f1", text=[f"{v:.3f}" for v in values],
        textposition="outside",
    ))
    fig.update_layout(
        title=title,
        xaxis=dict(range=[0, 1.1]),
        yaxis=dict(autorange="reversed"),
        height=300, margin=dict(l=160, r=40, t=50, b=40),
        showlegend=False, plot_bgcolor="white",
    )
    return fig
