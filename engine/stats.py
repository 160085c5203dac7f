"""Aggregate statistics and per-room / per-group views of an allocation run."""

import numbers
from typing import Iterable, List, Sequence

from models.allocation import AllocationResult
from models.group import Group
from models.room import Block
from models.stats import AllocationStats
from engine.rooms import capacity_lookup
from config.defaults import STATUS_SEATED, STATUS_SPLIT, STATUS_NO_SPACE


def _requested(size) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Real) or size != size:
        return 0
    return int(size)


def compute_stats(
    groups: Iterable[Group],
    result: AllocationResult,
    catalog: Sequence[Block],
) -> AllocationStats:
    """Derive run totals. `groups` is the raw input, before any filtering."""
    total_students = sum(_requested(g.size) for g in groups)
    placed = result.placed_records
    allocated = sum(r.seat_count for r in placed)
    rooms_used = len({r.room_id for r in placed})
    blocks_used = len({r.block_name for r in placed if r.block_name})

    capacities = capacity_lookup(catalog)
    total_capacity = sum(
        capacities.get(room_id, 0)
        for room_id, used in result.room_usage.items()
        if used > 0
    )
    efficiency = 100.0 * allocated / total_capacity if total_capacity > 0 else 0.0

    return AllocationStats(
        total_students=total_students,
        allocated_students=allocated,
        rooms_used=rooms_used,
        blocks_used=blocks_used,
        total_capacity=total_capacity,
        wasted_seats=total_capacity - allocated,
        efficiency=efficiency,
    )


def get_room_utilization(
    catalog: Sequence[Block],
    result: AllocationResult,
    include_empty: bool = False,
) -> List[dict]:
    """Per-room fill levels and occupants, in catalog order."""
    rows = []
    for block in catalog:
        for room in block.rooms:
            occupants = result.records_in_room(room.room_id)
            if not occupants and not include_empty:
                continue
            capacity = room.usable_capacity
            used = sum(r.seat_count for r in occupants)
            rows.append({
                "room_id": room.room_id,
                "block_name": block.name,
                "capacity": capacity,
                "used_seats": used,
                "empty_seats": capacity - used,
                "fill_pct": used / capacity if capacity > 0 else 0,
                "occupants": [
                    {
                        "group": r.group_label,
                        "seats": r.seat_count,
                        "start_seat": r.start_seat,
                        "end_seat": r.end_seat,
                        "partial": r.partial,
                    }
                    for r in occupants
                ],
            })
    return rows


def summarize_groups(result: AllocationResult) -> List[dict]:
    """One row per group, in order of first appearance in the run."""
    summary = {}
    for record in result.records:
        row = summary.setdefault(record.group_key, {
            "group": record.group_label,
            "total": 0,
            "seated": 0,
            "unseated": 0,
            "rooms": [],
            "has_partial": False,
        })
        row["total"] += record.seat_count
        if record.error:
            row["unseated"] += record.seat_count
        else:
            row["seated"] += record.seat_count
            row["rooms"].append(record.room_id)
            row["has_partial"] = row["has_partial"] or record.partial

    rows = []
    for row in summary.values():
        if row["unseated"] > 0:
            status = STATUS_NO_SPACE
        elif row["has_partial"]:
            status = STATUS_SPLIT
        else:
            status = STATUS_SEATED
        rows.append({
            "group": row["group"],
            "total": row["total"],
            "seated": row["seated"],
            "unseated": row["unseated"],
            "rooms": row["rooms"],
            "status": status,
        })
    return rows
