"""Tab 3: Room Data — room catalog upload, validation, and block order preview."""

import streamlit as st
import pandas as pd

from data.loader import load_file, parse_room_catalog
from data.validator import validate_room_catalog
from data.sample_data import generate_room_catalog_df
from data.session_store import (
    set_room_blocks, set_block_order, get_room_blocks, get_block_order, is_catalog_loaded,
)
from engine.rooms import block_order_for


def _load_and_validate(catalog_df: pd.DataFrame) -> bool:
    """Validate and store an uploaded room catalog."""
    validation = validate_room_catalog(catalog_df)
    if not validation.is_valid:
        for e in validation.errors:
            st.error(e)
        return False
    for w in validation.warnings:
        st.warning(w)

    blocks = parse_room_catalog(catalog_df)
    set_room_blocks(blocks)
    set_block_order(block_order_for(blocks))

    rooms = sum(len(b.rooms) for b in blocks)
    seats = sum(b.total_capacity for b in blocks)
    st.success(f"Room data loaded: {len(blocks)} blocks, {rooms} rooms, {seats:,} seats")
    return True


def render(sidebar_state):
    """Render the Room Data tab."""
    st.header("Room Data")

    st.caption(
        "Upload the room information sheet with columns **BLOCK**, **ROOM NO**, **Total Count** "
        "and optionally **ROW-1** … **ROW-8** (use `x` for a row that does not exist)."
    )
    catalog_file = st.file_uploader("Room information", type=["csv", "xlsx"], key="upload_catalog")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload_catalog"):
            if catalog_file:
                try:
                    _load_and_validate(load_file(catalog_file))
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload a room information file.")

    with col_sample:
        if st.button("Load Sample Data", key="btn_sample_catalog"):
            _load_and_validate(generate_room_catalog_df())

    if not is_catalog_loaded():
        return

    st.divider()
    st.subheader("Loaded Rooms")
    if get_block_order() is not None:
        st.caption("Best-Fit fills blocks in the standard room order.")
    else:
        st.caption("Best-Fit fills blocks in the order they appear in the sheet.")
    rows = []
    for block in get_room_blocks():
        for room in block.rooms:
            rows.append({
                "Block": block.name,
                "Room": room.room_id,
                "Capacity": room.capacity,
                "Rows": " / ".join(str(n) for n in room.layout) if room.layout else "—",
            })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, height=400)
