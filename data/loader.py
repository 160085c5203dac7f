"""File upload parsing: room catalog and group lists into typed model lists."""

import logging
import pandas as pd
from typing import List

from models.group import Group
from models.room import Block, Room
from config.defaults import (
    CATALOG_BLOCK_COLUMN, CATALOG_ROOM_COLUMN, CATALOG_CAPACITY_COLUMN,
    ROW_COLUMNS, ABSENT_ROW_MARKER, BLOCK_NAME_SUFFIX,
    GROUP_CATEGORY_COLUMN, GROUP_SUBCATEGORY_COLUMN, GROUP_SIZE_COLUMN,
)

logger = logging.getLogger(__name__)


def _parse_int(value) -> int:
    """Parse a spreadsheet cell as an int; blanks and junk become 0."""
    if pd.isna(value):
        return 0
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return 0


def _parse_size(value):
    """Parse a group size cell. Blanks become 0; anything else is passed on
    as a number (or the raw text) so group normalization can reject it.
    """
    if value is None or pd.isna(value) or str(value).strip() == "":
        return 0
    number = pd.to_numeric(str(value).strip(), errors="coerce")
    if pd.isna(number):
        return str(value).strip()
    number = float(number)
    return int(number) if number.is_integer() else number


def _parse_layout(row: pd.Series, columns) -> List[int]:
    layout = []
    for col in ROW_COLUMNS:
        if col not in columns:
            continue
        value = row[col]
        if pd.isna(value) or str(value).strip() == "":
            continue
        if str(value).strip().lower() == ABSENT_ROW_MARKER:
            continue
        layout.append(_parse_int(value))
    return layout


def parse_room_catalog(df: pd.DataFrame) -> List[Block]:
    """Convert a room information DataFrame into Blocks.

    Rows are grouped by BLOCK in order of first appearance; rooms within a
    block are sorted by room number.
    """
    blocks = {}
    for _, row in df.iterrows():
        block_key = str(row[CATALOG_BLOCK_COLUMN]).strip()
        capacity = _parse_int(row[CATALOG_CAPACITY_COLUMN])
        if capacity <= 0:
            logger.warning("Room %s has no usable capacity (%r)",
                           row[CATALOG_ROOM_COLUMN], row[CATALOG_CAPACITY_COLUMN])
        blocks.setdefault(block_key, []).append(Room(
            room_id=str(row[CATALOG_ROOM_COLUMN]).strip(),
            capacity=capacity,
            layout=_parse_layout(row, df.columns),
        ))

    return [
        Block(name=f"{name}{BLOCK_NAME_SUFFIX}", rooms=sorted(rooms, key=lambda r: r.room_id))
        for name, rooms in blocks.items()
    ]


def parse_groups(df: pd.DataFrame) -> List[Group]:
    """Convert a group editor DataFrame into Group objects.

    Blank cells become empty strings / 0 so the normalizer can drop them.
    Fractional or non-numeric sizes are kept as given and rejected there.
    """
    groups = []
    for _, row in df.iterrows():
        category = row.get(GROUP_CATEGORY_COLUMN)
        subcategory = row.get(GROUP_SUBCATEGORY_COLUMN)
        groups.append(Group(
            category="" if pd.isna(category) else str(category).strip(),
            subcategory="" if pd.isna(subcategory) else str(subcategory).strip(),
            size=_parse_size(row.get(GROUP_SIZE_COLUMN)),
        ))
    return groups


def groups_to_df(groups: List[Group]) -> pd.DataFrame:
    return pd.DataFrame(
        [{
            GROUP_CATEGORY_COLUMN: g.category,
            GROUP_SUBCATEGORY_COLUMN: g.subcategory,
            GROUP_SIZE_COLUMN: g.size,
        } for g in groups],
        columns=[GROUP_CATEGORY_COLUMN, GROUP_SUBCATEGORY_COLUMN, GROUP_SIZE_COLUMN],
    )


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return pd.read_csv(path)
