"""Greedy Lookahead: fill one room at a time from a shared pool of groups."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from models.allocation import AllocationRecord, AllocationResult
from models.group import Group
from models.room import Block
from config.defaults import STRATEGY_GREEDY_LOOKAHEAD
from engine.normalizer import normalize_groups, validate_min_chunk
from engine.placement import chunk_allowed, no_space_record, place_chunk
from engine.rooms import RoomSlot, rooms_by_capacity

logger = logging.getLogger(__name__)


@dataclass
class PoolEntry:
    group: Group
    remaining: int


def _find_perfect_fit(pool: List[PoolEntry], spare: int) -> Optional[int]:
    for index, entry in enumerate(pool):
        if entry.remaining == spare:
            return index
    return None


def _find_largest_whole_fit(pool: List[PoolEntry], spare: int) -> Optional[int]:
    """Index of the largest entry that fits entirely; first one wins on ties."""
    best_index = None
    best_size = 0
    for index, entry in enumerate(pool):
        if best_size < entry.remaining <= spare:
            best_size = entry.remaining
            best_index = index
    return best_index


def _place(
    pool: List[PoolEntry],
    index: int,
    chunk: int,
    slot: RoomSlot,
    records: List[AllocationRecord],
    room_usage: Dict[str, int],
):
    entry = pool[index]
    place_chunk(records, room_usage, entry.group, slot, chunk, entry.group.size)
    entry.remaining -= chunk
    if entry.remaining == 0:
        pool.pop(index)


def _fill_room(
    slot: RoomSlot,
    pool: List[PoolEntry],
    result: AllocationResult,
    min_chunk: int,
):
    usage = result.room_usage

    def spare() -> int:
        return slot.capacity - usage.get(slot.room_id, 0)

    def allowed(entry: PoolEntry, chunk: int) -> bool:
        return chunk_allowed(chunk, entry.remaining, usage.get(slot.room_id, 0), usage, min_chunk)

    # Perfect fit: one group exactly fills the empty room
    index = _find_perfect_fit(pool, spare())
    if index is not None and allowed(pool[index], pool[index].remaining):
        _place(pool, index, pool[index].remaining, slot, result.records, usage)

    while spare() > 0 and pool:
        index = _find_largest_whole_fit(pool, spare())
        if index is not None and allowed(pool[index], pool[index].remaining):
            _place(pool, index, pool[index].remaining, slot, result.records, usage)
            continue

        # Nothing fits whole, or the whole fit is too small to open the room:
        # split the largest remaining group
        pool.sort(key=lambda e: e.remaining, reverse=True)
        entry = pool[0]
        chunk = min(spare(), entry.remaining)
        if not allowed(entry, chunk):
            break
        _place(pool, 0, chunk, slot, result.records, usage)


def allocate_greedy_lookahead(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    min_chunk: int,
) -> AllocationResult:
    """Visit rooms largest first and pack each one before moving on.

    Per room: a group that fills it exactly, else the largest groups that fit
    whole, else a slice of the largest group. Whatever is left in the pool
    after the last room becomes one NO SPACE record per group.
    """
    min_chunk = validate_min_chunk(min_chunk)
    pool = [PoolEntry(group, group.size) for group in normalize_groups(groups)]
    result = AllocationResult(strategy=STRATEGY_GREEDY_LOOKAHEAD, min_chunk=min_chunk)

    for slot in rooms_by_capacity(catalog):
        if not pool:
            break
        if slot.capacity <= 0:
            continue
        _fill_room(slot, pool, result, min_chunk)

    for entry in pool:
        logger.warning("%s: %d of %d students could not be seated",
                       entry.group.label, entry.remaining, entry.group.size)
        result.records.append(no_space_record(entry.group, entry.remaining))

    return result
