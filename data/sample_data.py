"""Generate a synthetic room catalog and section list for the Exam Seat Allocator."""

import os
import random
import pandas as pd

from config.defaults import (
    DEFAULT_BLOCK_ORDER, DEFAULT_GROUPS,
    CATALOG_BLOCK_COLUMN, CATALOG_ROOM_COLUMN, CATALOG_CAPACITY_COLUMN,
    ROW_COLUMNS, ABSENT_ROW_MARKER,
    GROUP_CATEGORY_COLUMN, GROUP_SUBCATEGORY_COLUMN, GROUP_SIZE_COLUMN,
)


def block_key_for_room(room_id: str) -> str:
    """'002/8A' -> '8A', 'APJ-3' -> 'APJ'."""
    if "/" in room_id:
        return room_id.split("/", 1)[1]
    return room_id.split("-", 1)[0]


def generate_room_catalog_df() -> pd.DataFrame:
    """Room information sheet covering every room of the default block order."""
    random.seed(42)
    rows = []
    for block in DEFAULT_BLOCK_ORDER:
        for room_id in block:
            n_rows = random.randint(4, len(ROW_COLUMNS))
            seats_per_row = random.choice([6, 8, 10])
            row = {
                CATALOG_BLOCK_COLUMN: block_key_for_room(room_id),
                CATALOG_ROOM_COLUMN: room_id,
                CATALOG_CAPACITY_COLUMN: n_rows * seats_per_row,
            }
            for i, col in enumerate(ROW_COLUMNS):
                row[col] = seats_per_row if i < n_rows else ABSENT_ROW_MARKER
            rows.append(row)
    return pd.DataFrame(rows)


def generate_groups_df() -> pd.DataFrame:
    """Default section list shown in the group editor."""
    return pd.DataFrame(
        [{
            GROUP_CATEGORY_COLUMN: branch,
            GROUP_SUBCATEGORY_COLUMN: section,
            GROUP_SIZE_COLUMN: students,
        } for branch, section, students in DEFAULT_GROUPS],
    )


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_room_catalog_df().to_csv(os.path.join(output_dir, "room information.csv"), index=False)
    generate_groups_df().to_csv(os.path.join(output_dir, "sections.csv"), index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    print("Sample CSV files generated in sample_files/")
