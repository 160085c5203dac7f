"""Plotly chart builders for the Exam Seat Allocator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def room_fill_bar(
    utilization_data: List[dict],
    block_filter: str = None,
) -> go.Figure:
    """Stacked horizontal bar per room: one segment per section, grey for empty seats."""
    rows = []
    for room in utilization_data:
        if block_filter and room["block_name"] != block_filter:
            continue
        for occ in room["occupants"]:
            rows.append({"room_id": room["room_id"], "segment": occ["group"], "seats": occ["seats"]})
        if room["empty_seats"] > 0:
            rows.append({"room_id": room["room_id"], "segment": "Empty", "seats": room["empty_seats"]})

    df = pd.DataFrame(rows, columns=["room_id", "segment", "seats"])
    fig = px.bar(
        df, x="seats", y="room_id", color="segment",
        orientation="h",
        title=f"Room Fill{' — ' + block_filter if block_filter else ''}",
        labels={"seats": "Seats", "room_id": "Room", "segment": "Section"},
        color_discrete_map={"Empty": "#B0B0B0"},
    )
    n_rooms = df["room_id"].nunique()
    fig.update_layout(barmode="stack", height=max(300, n_rooms * 35), yaxis_type="category")
    return fig


def utilization_donut(used: int, total: int, title: str = "Seat Utilization") -> go.Figure:
    """Donut chart showing seated students against opened capacity."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Seated", "Empty"],
        values=[used, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def block_capacity_bar(
    utilization_data: List[dict],
    title: str = "Capacity vs Seated by Block",
) -> go.Figure:
    """Bar chart comparing opened capacity and seated students by block."""
    df = pd.DataFrame(utilization_data, columns=["block_name", "capacity", "used_seats"])
    df = df.groupby("block_name", sort=False, as_index=False)[["capacity", "used_seats"]].sum()
    fig = px.bar(
        df, x="block_name", y=["capacity", "used_seats"],
        barmode="group",
        labels={"value": "Seats", "block_name": "Block", "variable": ""},
        title=title,
        color_discrete_map={"capacity": "#4A90D9", "used_seats": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=400)
    return fig
