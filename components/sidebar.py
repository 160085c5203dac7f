"""Global sidebar controls for strategy and minimum chunk selection."""

import streamlit as st
from dataclasses import dataclass

from config.defaults import STRATEGIES, STRATEGY_LABELS, DEFAULT_STRATEGY, DEFAULT_MIN_CHUNK, MIN_CHUNK_FLOOR
from data.session_store import is_catalog_loaded, get_room_blocks
from engine.explainer import explain_strategy


@dataclass
class SidebarState:
    strategy: str
    min_chunk: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Exam Seat Allocator")
        st.divider()

        strategy = st.selectbox(
            "Allocation Algorithm",
            options=STRATEGIES,
            format_func=lambda s: STRATEGY_LABELS.get(s, s),
            index=STRATEGIES.index(DEFAULT_STRATEGY),
            key="sidebar_strategy",
        )

        min_chunk = st.number_input(
            "Minimum students per section in a room",
            min_value=MIN_CHUNK_FLOOR,
            value=DEFAULT_MIN_CHUNK,
            step=1,
            key="sidebar_min_chunk",
        )

        st.caption(explain_strategy(strategy))

        st.divider()

        if is_catalog_loaded():
            blocks = get_room_blocks()
            rooms = sum(len(b.rooms) for b in blocks)
            st.success(f"Room data loaded: {len(blocks)} blocks, {rooms} rooms")
        else:
            st.warning("No room data loaded — go to the Room Data tab")

    return SidebarState(strategy=strategy, min_chunk=int(min_chunk))
