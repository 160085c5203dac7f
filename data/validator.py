"""Schema validation for uploaded room catalogs and group lists."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import (
    CATALOG_BLOCK_COLUMN, CATALOG_ROOM_COLUMN, CATALOG_CAPACITY_COLUMN,
    ROW_COLUMNS, ABSENT_ROW_MARKER,
    GROUP_CATEGORY_COLUMN, GROUP_SUBCATEGORY_COLUMN, GROUP_SIZE_COLUMN,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


CATALOG_REQUIRED_COLUMNS = [
    CATALOG_BLOCK_COLUMN,
    CATALOG_ROOM_COLUMN,
    CATALOG_CAPACITY_COLUMN,
]

GROUP_REQUIRED_COLUMNS = [
    GROUP_CATEGORY_COLUMN,
    GROUP_SUBCATEGORY_COLUMN,
    GROUP_SIZE_COLUMN,
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _row_total(row: pd.Series, columns) -> int:
    total = 0
    for col in ROW_COLUMNS:
        if col not in columns:
            continue
        value = pd.to_numeric(row[col], errors="coerce")
        if pd.notna(value):
            total += int(value)
    return total


def validate_room_catalog(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, CATALOG_REQUIRED_COLUMNS, "Room Catalog")
    if not result.is_valid:
        return result

    capacity = pd.to_numeric(df[CATALOG_CAPACITY_COLUMN], errors="coerce")
    bad_rooms = df.loc[capacity.isna() | (capacity <= 0), CATALOG_ROOM_COLUMN].astype(str).tolist()
    if bad_rooms:
        result.warnings.append(
            f"Room Catalog: Rooms without a positive numeric capacity will not be used: {', '.join(bad_rooms)}"
        )
    if bad_rooms and len(bad_rooms) == len(df):
        result.is_valid = False
        result.errors.append("Room Catalog: No room has a usable capacity.")

    dupes = df.duplicated(subset=[CATALOG_ROOM_COLUMN], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Room Catalog: Duplicate room numbers: {df[dupes][CATALOG_ROOM_COLUMN].astype(str).unique().tolist()}"
        )

    row_columns = [c for c in ROW_COLUMNS if c in df.columns]
    if row_columns:
        mismatched = []
        for idx, row in df.iterrows():
            has_rows = any(
                pd.notna(row[c]) and str(row[c]).strip().lower() != ABSENT_ROW_MARKER
                for c in row_columns
            )
            if has_rows and pd.notna(capacity[idx]) and _row_total(row, df.columns) != int(capacity[idx]):
                mismatched.append(str(row[CATALOG_ROOM_COLUMN]))
        if mismatched:
            result.warnings.append(
                f"Room Catalog: Row seat counts do not add up to Total Count for: {', '.join(mismatched)}"
            )

    return result


def validate_groups(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, GROUP_REQUIRED_COLUMNS, "Sections")
    if not result.is_valid:
        return result

    sizes = pd.to_numeric(df[GROUP_SIZE_COLUMN], errors="coerce")
    raw = df[GROUP_SIZE_COLUMN]
    non_numeric = raw.notna() & (raw.astype(str).str.strip() != "") & sizes.isna()
    if non_numeric.any():
        result.is_valid = False
        result.errors.append(
            f"Sections: Student counts must be numbers: {raw[non_numeric].astype(str).tolist()}"
        )
    if (sizes < 0).any():
        result.is_valid = False
        result.errors.append("Sections: Student counts cannot be negative.")
    if (sizes.notna() & (sizes % 1 != 0)).any():
        result.is_valid = False
        result.errors.append("Sections: Student counts must be whole numbers.")

    identity = pd.DataFrame({
        "category": df[GROUP_CATEGORY_COLUMN].fillna("").astype(str).str.strip(),
        "subcategory": df[GROUP_SUBCATEGORY_COLUMN].fillna("").astype(str).str.strip(),
    })
    blank = (identity["category"] == "") | (identity["subcategory"] == "") | (sizes.isna() & ~non_numeric) | (sizes == 0)

    named = identity[(identity["category"] != "") & (identity["subcategory"] != "")]
    dupes = named[named.duplicated(keep=False)].drop_duplicates()
    if not dupes.empty:
        result.is_valid = False
        labels = [f"{c}-{s}" for c, s in zip(dupes["category"], dupes["subcategory"])]
        result.errors.append(f"Sections: Duplicate sections: {labels}")

    if blank.any():
        result.warnings.append(f"Sections: {int(blank.sum())} incomplete row(s) will be ignored.")

    return result
