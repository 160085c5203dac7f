"""Human-readable descriptions of the allocation strategies and of a finished run."""

from typing import List

from models.allocation import AllocationResult
from models.stats import AllocationStats
from config.defaults import (
    STRATEGY_SIMPLE_GREEDY, STRATEGY_GREEDY_MIN_CHUNK,
    STRATEGY_GREEDY_LOOKAHEAD, STRATEGY_BEST_FIT_FFD,
    STRATEGY_LABELS,
)

STRATEGY_EXPLANATIONS = {
    STRATEGY_SIMPLE_GREEDY: (
        "Simple Greedy: Fills each room with as much of the current section as possible, "
        "then moves to the next room/section. Fast and simple, but can leave small numbers "
        "of students from a section in a room."
    ),
    STRATEGY_GREEDY_MIN_CHUNK: (
        "Greedy with Min Chunk: Like Simple Greedy, but never opens an empty room with fewer "
        "than the threshold number of students from a section, unless it is the very first "
        "placement. Reduces tiny fragments, but may leave some seats empty if no good fit is found."
    ),
    STRATEGY_GREEDY_LOOKAHEAD: (
        "Greedy Lookahead: Works room by room. Looks for a section that fills the room exactly, "
        "then for the largest sections that fit whole, and only splits a section when nothing "
        "else fits. Fewer awkward splits, more balanced rooms."
    ),
    STRATEGY_BEST_FIT_FFD: (
        "Best-Fit/First-Fit Decreasing: Places each section, largest first, in the open room that "
        "fits it most tightly, falling back to the first room with space. Blocks open one at a "
        "time in priority order, so front blocks fill before back blocks are used."
    ),
}


def explain_strategy(strategy: str) -> str:
    return STRATEGY_EXPLANATIONS.get(strategy, "")


def explain_run(result: AllocationResult, stats: AllocationStats) -> List[str]:
    """Produce a step-by-step summary of an allocation run."""
    steps = []

    steps.append(
        f"Step 1 - Strategy: {STRATEGY_LABELS.get(result.strategy, result.strategy)} "
        f"with a minimum chunk of {result.min_chunk}"
    )

    split_groups = {r.group_key for r in result.placed_records if r.partial}
    steps.append(
        f"Step 2 - Placement: {stats.allocated_students} of {stats.total_students} students seated "
        f"in {stats.rooms_used} rooms across {stats.blocks_used} blocks; "
        f"{len(split_groups)} sections split across rooms"
    )

    steps.append(
        f"Step 3 - Capacity: {stats.total_capacity} seats opened, {stats.wasted_seats} left empty "
        f"=> efficiency {stats.efficiency:.1f}%"
    )

    if result.block_unlock_trace:
        steps.append(
            f"Step 4 - Blocks: front {result.block_unlock_trace[-1] + 1} block(s) were open "
            f"when the last section was processed"
        )

    errors = result.error_records
    if errors:
        unseated = sum(r.seat_count for r in errors)
        steps.append(
            f"Note: {unseated} students from {len(errors)} sections could not be seated "
            f"under the current capacity and minimum chunk"
        )

    return steps
