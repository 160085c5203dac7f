"""Simple Greedy and Greedy-with-Min-Chunk strategies.

Both walk the rooms in one fixed order (largest capacity first) for every
group, largest group first, and pour as much of the group as each room takes.
They share one mechanism; the min-chunk preset only differs in the threshold
callers usually pair it with.
"""

import logging
from typing import Iterable, Sequence

from models.allocation import AllocationResult
from models.group import Group
from models.room import Block
from config.defaults import STRATEGY_SIMPLE_GREEDY, STRATEGY_GREEDY_MIN_CHUNK
from engine.normalizer import normalize_groups, validate_min_chunk
from engine.placement import chunk_allowed, no_space_record, place_chunk
from engine.rooms import rooms_by_capacity

logger = logging.getLogger(__name__)


def _allocate_greedy(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    min_chunk: int,
    strategy: str,
) -> AllocationResult:
    min_chunk = validate_min_chunk(min_chunk)
    rooms = rooms_by_capacity(catalog)
    result = AllocationResult(strategy=strategy, min_chunk=min_chunk)

    for group in normalize_groups(groups):
        remaining = group.size
        for slot in rooms:
            if remaining == 0:
                break
            used = result.room_usage.get(slot.room_id, 0)
            spare = slot.capacity - used
            if spare <= 0:
                continue

            chunk = min(spare, remaining)
            if not chunk_allowed(chunk, remaining, used, result.room_usage, min_chunk):
                logger.debug("%s: skipping %s, chunk %d below %d", group.label, slot.room_id, chunk, min_chunk)
                continue

            place_chunk(result.records, result.room_usage, group, slot, chunk, group.size)
            remaining -= chunk

        if remaining > 0:
            logger.warning("%s: %d of %d students could not be seated", group.label, remaining, group.size)
            result.records.append(no_space_record(group, remaining))

    return result


def allocate_simple_greedy(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    min_chunk: int = 1,
) -> AllocationResult:
    """Fill rooms largest first with as much of each group as fits."""
    return _allocate_greedy(groups, catalog, min_chunk, STRATEGY_SIMPLE_GREEDY)


def allocate_greedy_min_chunk(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    min_chunk: int,
) -> AllocationResult:
    """Simple Greedy that refuses to open an empty room with fewer than min_chunk students."""
    return _allocate_greedy(groups, catalog, min_chunk, STRATEGY_GREEDY_MIN_CHUNK)
