"""Best-Fit / First-Fit Decreasing with front-to-back block unlocking.

Rooms are visited in an externally supplied block ordering. Only blocks up to
a cursor are open; once every room of the block under the cursor has an
occupant, the next block opens. The cursor carries over from group to group
within a run and never moves back.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from models.allocation import AllocationResult
from models.group import Group
from models.room import Block
from config.defaults import STRATEGY_BEST_FIT_FFD
from engine.normalizer import normalize_groups, validate_min_chunk
from engine.placement import chunk_allowed, no_space_record, place_chunk
from engine.rooms import RoomSlot, ordered_room_blocks

logger = logging.getLogger(__name__)


def _eligible(blocks: List[List[RoomSlot]], max_block_index: int):
    for block in blocks[:max_block_index + 1]:
        for slot in block:
            yield slot


def _best_fit(
    blocks: List[List[RoomSlot]],
    max_block_index: int,
    usage: Dict[str, int],
    remaining: int,
) -> Optional[Tuple[RoomSlot, int]]:
    """Tightest open room that takes the whole remainder; first encountered wins ties."""
    best = None
    best_spare = None
    for slot in _eligible(blocks, max_block_index):
        spare = slot.capacity - usage.get(slot.room_id, 0)
        if spare >= remaining and (best_spare is None or spare < best_spare):
            best, best_spare = slot, spare
    if best is None:
        return None
    return best, usage.get(best.room_id, 0)


def _block_filled(block: List[RoomSlot], usage: Dict[str, int]) -> bool:
    # Rooms without usable capacity can never be occupied and do not hold a block back
    return all(usage.get(slot.room_id, 0) > 0 for slot in block if slot.capacity > 0)


def _advance_cursor(blocks: List[List[RoomSlot]], max_block_index: int, usage: Dict[str, int]) -> int:
    if max_block_index < len(blocks) - 1 and _block_filled(blocks[max_block_index], usage):
        logger.debug("Block %d filled, unlocking block %d", max_block_index, max_block_index + 1)
        return max_block_index + 1
    return max_block_index


def allocate_best_fit_ffd(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    min_chunk: int,
    block_order: Optional[Sequence[Sequence[str]]] = None,
) -> AllocationResult:
    """Seat each group in the tightest open room, falling back to first fit.

    `block_order` lists room ids per block in fill priority; it defaults to the
    catalog's own block order.
    """
    min_chunk = validate_min_chunk(min_chunk)
    blocks = ordered_room_blocks(catalog, block_order)
    result = AllocationResult(strategy=STRATEGY_BEST_FIT_FFD, min_chunk=min_chunk)
    usage = result.room_usage
    max_block_index = 0

    for group in normalize_groups(groups):
        result.block_unlock_trace.append(max_block_index)
        remaining = group.size

        while remaining > 0:
            placed = 0

            best = _best_fit(blocks, max_block_index, usage, remaining)
            if best is not None:
                slot, used = best
                if chunk_allowed(remaining, remaining, used, usage, min_chunk):
                    place_chunk(result.records, usage, group, slot, remaining, group.size)
                    placed = remaining

            if not placed:
                for slot in _eligible(blocks, max_block_index):
                    used = usage.get(slot.room_id, 0)
                    spare = slot.capacity - used
                    if spare <= 0:
                        continue
                    chunk = min(spare, remaining)
                    if not chunk_allowed(chunk, remaining, used, usage, min_chunk):
                        continue
                    place_chunk(result.records, usage, group, slot, chunk, group.size)
                    placed = chunk
                    break

            if not placed:
                break

            remaining -= placed
            max_block_index = _advance_cursor(blocks, max_block_index, usage)

        if remaining > 0:
            logger.warning("%s: %d of %d students could not be seated", group.label, remaining, group.size)
            result.records.append(no_space_record(group, remaining))

    return result
