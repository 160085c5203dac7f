from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class AllocationRecord:
    category: str
    subcategory: str
    room_id: str                      # "NO SPACE" for error records
    seat_count: int
    block_name: Optional[str] = None
    start_seat: Optional[int] = None  # 1-based, inclusive
    end_seat: Optional[int] = None
    partial: bool = False             # Fewer than the group's original size
    error: bool = False               # Unseatable remainder
    emergency: bool = False           # Reserved, never set by any strategy

    @property
    def group_key(self) -> Tuple[str, str]:
        return (self.category, self.subcategory)

    @property
    def group_label(self) -> str:
        return f"{self.category}-{self.subcategory}"


@dataclass
class AllocationResult:
    """Output of a single allocation run."""
    strategy: str
    min_chunk: int
    records: List[AllocationRecord] = field(default_factory=list)
    room_usage: Dict[str, int] = field(default_factory=dict)   # room_id -> seats filled
    block_unlock_trace: List[int] = field(default_factory=list)  # Best-Fit only: block cursor per group

    @property
    def placed_records(self) -> List[AllocationRecord]:
        return [r for r in self.records if not r.error]

    @property
    def error_records(self) -> List[AllocationRecord]:
        return [r for r in self.records if r.error]

    def records_for(self, group_key: Tuple[str, str]) -> List[AllocationRecord]:
        return [r for r in self.records if r.group_key == group_key]

    def records_in_room(self, room_id: str) -> List[AllocationRecord]:
        return [r for r in self.records if not r.error and r.room_id == room_id]
