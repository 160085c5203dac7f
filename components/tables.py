"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional

from config.defaults import STATUS_SEATED, STATUS_SPLIT, STATUS_NO_SPACE, NO_SPACE_ROOM_ID


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_status_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a table with color-coded section statuses."""
    def color_status(val):
        if val == STATUS_NO_SPACE:
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == STATUS_SPLIT:
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        elif val == STATUS_SEATED:
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        return ""

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)


def render_allocation_table(df: pd.DataFrame, error_column: str = "Room"):
    """Render per-record allocations, highlighting unseated rows."""
    def color_error(val):
        if val == NO_SPACE_ROOM_ID:
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        return ""

    if error_column in df.columns:
        styled = df.style.map(color_error, subset=[error_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
