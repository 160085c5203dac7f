from dataclasses import dataclass


@dataclass
class AllocationStats:
    total_students: int      # Requested, across all input groups
    allocated_students: int  # Seated in a room
    rooms_used: int
    blocks_used: int
    total_capacity: int      # Capacity of every room with at least one occupant
    wasted_seats: int        # total_capacity - allocated_students
    efficiency: float        # 0-100
