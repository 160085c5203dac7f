"""Reusable KPI metric card widgets."""

import streamlit as st

from models.stats import AllocationStats


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            delta = m.get("delta")
            delta_color = m.get("delta_color", "normal")
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=delta,
                delta_color=delta_color,
            )


def render_stats_row(stats: AllocationStats):
    render_metric_row([
        {"label": "Total Students", "value": stats.total_students},
        {"label": "Allocated", "value": stats.allocated_students},
        {"label": "Rooms Used", "value": stats.rooms_used},
        {"label": "Total Capacity", "value": stats.total_capacity},
        {"label": "Wasted Seats", "value": stats.wasted_seats},
        {"label": "Blocks Used", "value": stats.blocks_used},
        {"label": "Efficiency", "value": f"{stats.efficiency:.1f}%"},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
