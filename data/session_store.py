"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional

from models.group import Group
from models.room import Block
from models.allocation import AllocationResult
from models.stats import AllocationStats
from config.defaults import DEFAULT_GROUPS


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "room_blocks": [],
        "block_order": None,
        "groups": [Group(branch, section, students) for branch, section, students in DEFAULT_GROUPS],
        "catalog_loaded": False,
        "last_result": None,
        "last_stats": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_room_blocks() -> List[Block]:
    return st.session_state.get("room_blocks", [])


def get_block_order() -> Optional[List[List[str]]]:
    return st.session_state.get("block_order")


def get_groups() -> List[Group]:
    return st.session_state.get("groups", [])


def get_last_result() -> Optional[AllocationResult]:
    return st.session_state.get("last_result")


def get_last_stats() -> Optional[AllocationStats]:
    return st.session_state.get("last_stats")


def is_catalog_loaded() -> bool:
    return st.session_state.get("catalog_loaded", False)


# --- Setters ---

def set_room_blocks(blocks: List[Block]):
    st.session_state["room_blocks"] = blocks
    st.session_state["catalog_loaded"] = bool(blocks)
    clear_result()


def set_block_order(block_order: Optional[List[List[str]]]):
    st.session_state["block_order"] = block_order


def set_result(result: AllocationResult, stats: AllocationStats):
    st.session_state["last_result"] = result
    st.session_state["last_stats"] = stats


def clear_result():
    st.session_state["last_result"] = None
    st.session_state["last_stats"] = None
