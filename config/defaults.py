"""Default configuration constants for the Exam Seat Allocator."""

# Allocation strategies
STRATEGY_SIMPLE_GREEDY = "simple_greedy"
STRATEGY_GREEDY_MIN_CHUNK = "greedy_min_chunk"
STRATEGY_GREEDY_LOOKAHEAD = "greedy_lookahead"
STRATEGY_BEST_FIT_FFD = "best_fit_ffd"

STRATEGIES = [
    STRATEGY_SIMPLE_GREEDY,
    STRATEGY_GREEDY_MIN_CHUNK,
    STRATEGY_GREEDY_LOOKAHEAD,
    STRATEGY_BEST_FIT_FFD,
]

STRATEGY_LABELS = {
    STRATEGY_SIMPLE_GREEDY: "1. Simple Greedy",
    STRATEGY_GREEDY_MIN_CHUNK: "2. Greedy with Min Chunk",
    STRATEGY_GREEDY_LOOKAHEAD: "3. Greedy Lookahead",
    STRATEGY_BEST_FIT_FFD: "4. Best-Fit/First-Fit Decreasing",
}

DEFAULT_STRATEGY = STRATEGY_GREEDY_LOOKAHEAD

# Smallest number of a group's members allowed to open an empty room
DEFAULT_MIN_CHUNK = 10
MIN_CHUNK_FLOOR = 1

# Sentinel room id carried by records for students that could not be seated
NO_SPACE_ROOM_ID = "NO SPACE"

# Room catalog source columns
CATALOG_BLOCK_COLUMN = "BLOCK"
CATALOG_ROOM_COLUMN = "ROOM NO"
CATALOG_CAPACITY_COLUMN = "Total Count"
MAX_ROWS_PER_ROOM = 8
ROW_COLUMNS = [f"ROW-{i}" for i in range(1, MAX_ROWS_PER_ROOM + 1)]
ABSENT_ROW_MARKER = "x"
BLOCK_NAME_SUFFIX = " Block"

# Group editor columns
GROUP_CATEGORY_COLUMN = "Branch"
GROUP_SUBCATEGORY_COLUMN = "Section"
GROUP_SIZE_COLUMN = "Students"

# Default cohort list shown in the group editor: (branch, section, students)
DEFAULT_GROUPS = [
    ("BT", "1", 77),
    ("CSE", "1", 123),
    ("CSE", "2", 123),
    ("CSAI", "1", 81),
    ("CSAI", "2", 76),
    ("CSDS", "1", 80),
    ("EE", "1", 92),
    ("EE", "2", 90),
    ("ECE", "1", 110),
    ("ECE", "2", 111),
    ("IT", "1", 79),
    ("IT", "2", 81),
    ("ITNS", "1", 75),
    ("ICE", "1", 90),
    ("ICE", "2", 91),
    ("MAC", "1", 90),
    ("ME", "1", 110),
    ("ME", "2", 104),
    ("VLSI", "1", 71),
]

# New rows added in the group editor start with this size
NEW_GROUP_SIZE = 50

# Room fill order for the Best-Fit/FFD strategy, one list per unlockable block
DEFAULT_BLOCK_ORDER = [
    ["APJ-1", "APJ-2", "APJ-3", "APJ-4", "APJ-5", "APJ-6", "APJ-7", "APJ-8", "APJ-9", "APJ-10", "APJ-11"],
    ["S-01", "S-02", "S-03", "S-04"],
    ["002/8A", "003/8A", "102/8A", "103/8A", "110/8A"],
    ["13/5", "14/5", "15/5", "17/5", "22/5", "24/5", "27/5", "28/5"],
    ["116/5", "119/5", "138/5"],
    ["215/5", "216/5", "217/5", "219/5", "221/5", "222/5"],
    ["301/5", "305/5", "306/5", "307/5", "311/5", "312/5"],
    ["113/6", "114/6", "117/6", "127/6"],
    ["313/6", "314/6"],
    ["13/4", "14/4", "17/4", "24/4"],
    ["MPC-01", "MPC-02"],
]

# Room fill thresholds for the room-wise view
ROOM_FULL_THRESHOLD = 1.0
ROOM_UNDERFILLED_THRESHOLD = 0.50

# Group result statuses
STATUS_SEATED = "Seated"
STATUS_SPLIT = "Split"
STATUS_NO_SPACE = "No space"
