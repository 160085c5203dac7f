import numbers
from dataclasses import dataclass, field
from typing import List


@dataclass
class Room:
    room_id: str
    capacity: int
    layout: List[int] = field(default_factory=list)  # Seats per row, informational only

    @property
    def usable_capacity(self) -> int:
        """Capacity usable for allocation; malformed or non-positive values count as 0."""
        capacity = self.capacity
        if isinstance(capacity, bool):
            return 0
        if isinstance(capacity, float) and capacity.is_integer():
            capacity = int(capacity)
        if not isinstance(capacity, numbers.Integral) or capacity <= 0:
            return 0
        return int(capacity)


@dataclass
class Block:
    name: str
    rooms: List[Room] = field(default_factory=list)

    @property
    def total_capacity(self) -> int:
        return sum(r.usable_capacity for r in self.rooms)
