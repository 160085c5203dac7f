"""Flattened room views over the catalog. The catalog itself is never modified."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from models.room import Block
from config.defaults import DEFAULT_BLOCK_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomSlot:
    room_id: str
    capacity: int       # Usable capacity, 0 for malformed rooms
    block_name: str


def flatten_rooms(catalog: Sequence[Block]) -> List[RoomSlot]:
    """All rooms in catalog order, tagged with their block name."""
    return [
        RoomSlot(room.room_id, room.usable_capacity, block.name)
        for block in catalog
        for room in block.rooms
    ]


def rooms_by_capacity(catalog: Sequence[Block]) -> List[RoomSlot]:
    """All rooms sorted by capacity descending; equal capacities keep catalog order."""
    return sorted(flatten_rooms(catalog), key=lambda s: s.capacity, reverse=True)


def count_rooms(catalog: Sequence[Block]) -> int:
    return sum(len(block.rooms) for block in catalog)


def capacity_lookup(catalog: Sequence[Block]) -> Dict[str, int]:
    return {slot.room_id: slot.capacity for slot in flatten_rooms(catalog)}


def block_order_for(
    catalog: Sequence[Block],
    block_order: Sequence[Sequence[str]] = DEFAULT_BLOCK_ORDER,
) -> Optional[Sequence[Sequence[str]]]:
    """Return block_order if it covers every catalog room, otherwise None (catalog order)."""
    ordered_ids = {room_id for room_ids in block_order for room_id in room_ids}
    missing = [slot.room_id for slot in flatten_rooms(catalog) if slot.room_id not in ordered_ids]
    if missing:
        logger.info("Block order does not cover %d catalog room(s), using catalog block order", len(missing))
        return None
    return block_order


def ordered_room_blocks(
    catalog: Sequence[Block],
    block_order: Optional[Sequence[Sequence[str]]] = None,
) -> List[List[RoomSlot]]:
    """Resolve a block ordering (lists of room ids) against the catalog.

    Without an explicit ordering each catalog block becomes one ordered block.
    Room ids missing from the catalog are skipped. Blocks left with no room of
    usable capacity are dropped.
    """
    if block_order is None:
        return _seatable_blocks([
            [RoomSlot(room.room_id, room.usable_capacity, block.name) for room in block.rooms]
            for block in catalog
        ])

    by_id = {slot.room_id: slot for slot in flatten_rooms(catalog)}
    resolved = []
    for index, room_ids in enumerate(block_order):
        slots = []
        for room_id in room_ids:
            slot = by_id.get(room_id)
            if slot is None:
                logger.warning("Block order entry %r (block %d) is not in the room catalog", room_id, index)
                continue
            slots.append(slot)
        if not slots:
            logger.warning("Block %d of the block order has no catalog rooms, skipping it", index)
        resolved.append(slots)
    return _seatable_blocks(resolved)


def _seatable_blocks(blocks: List[List[RoomSlot]]) -> List[List[RoomSlot]]:
    seatable = []
    for index, slots in enumerate(blocks):
        if any(slot.capacity > 0 for slot in slots):
            seatable.append(slots)
        elif slots:
            logger.warning("Block %d has no room with usable capacity, skipping it: %s",
                           index, ", ".join(slot.room_id for slot in slots))
    return seatable
