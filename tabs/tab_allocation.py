"""Tab 1: Allocation — section editor, allocation run, and per-section results."""

import streamlit as st
import pandas as pd

from data.loader import parse_groups, groups_to_df
from data.validator import validate_groups
from data.session_store import (
    get_groups, get_room_blocks, get_block_order,
    get_last_result, get_last_stats, set_result, is_catalog_loaded,
)
from engine.allocation_engine import run_allocation_with_stats
from engine.errors import AllocationError
from engine.explainer import explain_run
from engine.stats import summarize_groups
from components.metrics_cards import render_stats_row, render_alert_card
from components.tables import render_status_table, render_allocation_table
from config.defaults import (
    GROUP_CATEGORY_COLUMN, GROUP_SUBCATEGORY_COLUMN, GROUP_SIZE_COLUMN,
    NEW_GROUP_SIZE, STRATEGY_LABELS,
)


def _render_group_editor():
    st.subheader("Student Sections")
    edited = st.data_editor(
        groups_to_df(get_groups()),
        num_rows="dynamic",
        use_container_width=True,
        column_config={
            GROUP_CATEGORY_COLUMN: st.column_config.TextColumn("Branch", help="e.g. CSE"),
            GROUP_SUBCATEGORY_COLUMN: st.column_config.TextColumn("Section", help="e.g. 1"),
            GROUP_SIZE_COLUMN: st.column_config.NumberColumn(
                "Students", min_value=0, step=1, default=NEW_GROUP_SIZE,
            ),
        },
        key="group_editor",
    )
    return edited


def _run(edited: pd.DataFrame, sidebar_state) -> bool:
    validation = validate_groups(edited)
    for w in validation.warnings:
        st.warning(w)
    if not validation.is_valid:
        for e in validation.errors:
            st.error(e)
        return False

    groups = parse_groups(edited)
    try:
        result, stats = run_allocation_with_stats(
            groups,
            get_room_blocks(),
            strategy=sidebar_state.strategy,
            min_chunk=sidebar_state.min_chunk,
            block_order=get_block_order(),
        )
    except AllocationError as e:
        st.error(str(e))
        return False

    set_result(result, stats)
    return True


def _render_results():
    result = get_last_result()
    stats = get_last_stats()
    if result is None or stats is None:
        return

    st.divider()
    st.subheader(f"Results — {STRATEGY_LABELS.get(result.strategy, result.strategy)}")
    render_stats_row(stats)

    with st.expander("How this run went"):
        for step in explain_run(result, stats):
            st.write(step)

    unseated = sum(r.seat_count for r in result.error_records)
    if unseated:
        render_alert_card(
            f"{unseated} students could not be seated. Add rooms or lower the minimum chunk.",
            level="error",
        )

    summary = summarize_groups(result)
    summary_df = pd.DataFrame([{
        "Section": s["group"],
        "Students": s["total"],
        "Seated": s["seated"],
        "Unseated": s["unseated"],
        "Rooms": ", ".join(s["rooms"]) if s["rooms"] else "—",
        "Status": s["status"],
    } for s in summary])
    st.subheader("Section Summary")
    render_status_table(summary_df)

    st.subheader("Seat Allocation Results")
    records_df = pd.DataFrame([{
        "Section": r.group_label,
        "Room": r.room_id,
        "Block": r.block_name or "",
        "Students": r.seat_count,
        "Seats": f"{r.start_seat}-{r.end_seat}" if not r.error else "",
        "Partial": "Partial" if r.partial else "",
    } for r in result.records])
    render_allocation_table(records_df)


def render(sidebar_state):
    """Render the Allocation tab."""
    st.header("Seat Allocation")

    edited = _render_group_editor()

    if st.button("Allocate Seats", type="primary", key="btn_allocate"):
        if not is_catalog_loaded():
            st.warning("Room data is not loaded yet. Load it in the Room Data tab first.")
        elif _run(edited, sidebar_state):
            st.success("Allocation complete.")

    _render_results()
