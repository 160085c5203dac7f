"""Tab 2: Room View — room-wise seat distribution for the last allocation run."""

import streamlit as st
import pandas as pd

from data.session_store import get_room_blocks, get_last_result, get_last_stats, is_catalog_loaded
from engine.stats import get_room_utilization
from components.charts import room_fill_bar, utilization_donut, block_capacity_bar
from components.tables import render_styled_table
from config.defaults import ROOM_FULL_THRESHOLD, ROOM_UNDERFILLED_THRESHOLD


def render(sidebar_state):
    """Render the room-wise distribution tab."""
    st.header("Room-wise Seat Distribution")

    if not is_catalog_loaded():
        st.info("No room data loaded. Please load it in the Room Data tab.")
        return

    result = get_last_result()
    stats = get_last_stats()
    if result is None or stats is None:
        st.info("No allocation yet. Run one from the Allocation tab.")
        return

    blocks = get_room_blocks()
    room_util = get_room_utilization(blocks, result)
    if not room_util:
        st.warning("No room received any students.")
        return

    used_blocks = [b.name for b in blocks if any(r["block_name"] == b.name for r in room_util)]
    selected_block = st.selectbox("Filter by Block", ["All"] + used_blocks, key="rooms_block")
    block_filter = selected_block if selected_block != "All" else None

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(room_fill_bar(room_util, block_filter), use_container_width=True)
    with col2:
        st.plotly_chart(utilization_donut(stats.allocated_students, stats.total_capacity),
                        use_container_width=True)
        full = sum(1 for r in room_util if r["fill_pct"] >= ROOM_FULL_THRESHOLD)
        underfilled = sum(1 for r in room_util if r["fill_pct"] < ROOM_UNDERFILLED_THRESHOLD)
        st.metric("Full Rooms", full)
        st.metric("Rooms under half full", underfilled)

    st.plotly_chart(block_capacity_bar(room_util), use_container_width=True)

    st.divider()

    detail_rows = []
    for ru in room_util:
        if block_filter and ru["block_name"] != block_filter:
            continue
        occupants = ", ".join(
            f"{o['group']}: {o['seats']} ({o['start_seat']}-{o['end_seat']})"
            + (" partial" if o["partial"] else "")
            for o in ru["occupants"]
        )
        detail_rows.append({
            "Room": ru["room_id"],
            "Block": ru["block_name"],
            "Capacity": ru["capacity"],
            "Used": ru["used_seats"],
            "Empty": ru["empty_seats"],
            "Filled": f"{ru['fill_pct']:.1%}",
            "Sections (seats)": occupants,
        })

    render_styled_table(pd.DataFrame(detail_rows), title="Room Detail", height=400)
