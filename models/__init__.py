from models.group import Group
from models.room import Room, Block
from models.allocation import AllocationRecord, AllocationResult
from models.stats import AllocationStats
