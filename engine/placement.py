"""Record emission and the minimum-chunk guard shared by all strategies."""

from typing import Dict, List

from models.allocation import AllocationRecord
from models.group import Group
from config.defaults import NO_SPACE_ROOM_ID
from engine.rooms import RoomSlot


def chunk_allowed(
    chunk: int,
    remaining: int,
    room_used: int,
    room_usage: Dict[str, int],
    min_chunk: int,
) -> bool:
    """Minimum-chunk guard.

    A chunk below min_chunk may only top off a room that already has occupants,
    or be the very first placement of the run when it seats the group's whole
    remaining demand.
    """
    if chunk >= min_chunk:
        return True
    if room_used > 0:
        return True
    run_is_empty = not any(used > 0 for used in room_usage.values())
    return run_is_empty and chunk == remaining


def place_chunk(
    records: List[AllocationRecord],
    room_usage: Dict[str, int],
    group: Group,
    slot: RoomSlot,
    chunk: int,
    original_size: int,
) -> AllocationRecord:
    """Seat `chunk` members of `group` after the room's current fill level."""
    used = room_usage.get(slot.room_id, 0)
    record = AllocationRecord(
        category=group.category,
        subcategory=group.subcategory,
        room_id=slot.room_id,
        seat_count=chunk,
        block_name=slot.block_name,
        start_seat=used + 1,
        end_seat=used + chunk,
        partial=chunk != original_size,
    )
    records.append(record)
    room_usage[slot.room_id] = used + chunk
    return record


def no_space_record(group: Group, remaining: int) -> AllocationRecord:
    return AllocationRecord(
        category=group.category,
        subcategory=group.subcategory,
        room_id=NO_SPACE_ROOM_ID,
        seat_count=remaining,
        error=True,
    )
