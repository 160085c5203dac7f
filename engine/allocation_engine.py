"""Strategy dispatch: the single entry point for an allocation run."""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from models.allocation import AllocationResult
from models.group import Group
from models.room import Block
from models.stats import AllocationStats
from config.defaults import (
    STRATEGY_SIMPLE_GREEDY, STRATEGY_GREEDY_MIN_CHUNK,
    STRATEGY_GREEDY_LOOKAHEAD, STRATEGY_BEST_FIT_FFD,
    STRATEGIES, DEFAULT_STRATEGY, DEFAULT_MIN_CHUNK,
)
from engine.errors import EmptyCatalogError, InvalidConfigurationError
from engine.normalizer import validate_min_chunk
from engine.rooms import count_rooms
from engine.greedy import allocate_simple_greedy, allocate_greedy_min_chunk
from engine.lookahead import allocate_greedy_lookahead
from engine.best_fit import allocate_best_fit_ffd
from engine.stats import compute_stats

logger = logging.getLogger(__name__)


def validate_catalog(catalog: Sequence[Block]):
    if not catalog or count_rooms(catalog) == 0:
        raise EmptyCatalogError("Room catalog is empty; load room data before allocating.")


def run_allocation(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    strategy: str = DEFAULT_STRATEGY,
    min_chunk: int = DEFAULT_MIN_CHUNK,
    block_order: Optional[Sequence[Sequence[str]]] = None,
) -> AllocationResult:
    """Validate the run configuration and execute the selected strategy.

    Raises EmptyCatalogError / InvalidConfigurationError for structurally
    invalid input. Capacity shortfall is reported through NO SPACE records.
    `block_order` is only consulted by the Best-Fit/FFD strategy.
    """
    validate_catalog(catalog)
    validate_min_chunk(min_chunk)
    if strategy not in STRATEGIES:
        raise InvalidConfigurationError(f"Unknown strategy {strategy!r}. Expected one of: {STRATEGIES}")

    groups = list(groups)
    logger.info("Allocating %d groups into %d rooms (strategy=%s, min_chunk=%d)",
                len(groups), count_rooms(catalog), strategy, min_chunk)

    if strategy == STRATEGY_SIMPLE_GREEDY:
        result = allocate_simple_greedy(groups, catalog, min_chunk)
    elif strategy == STRATEGY_GREEDY_MIN_CHUNK:
        result = allocate_greedy_min_chunk(groups, catalog, min_chunk)
    elif strategy == STRATEGY_GREEDY_LOOKAHEAD:
        result = allocate_greedy_lookahead(groups, catalog, min_chunk)
    else:
        result = allocate_best_fit_ffd(groups, catalog, min_chunk, block_order)

    logger.info("Allocation finished: %d records, %d rooms used, %d unseated records",
                len(result.records), len(result.room_usage), len(result.error_records))
    return result


def run_allocation_with_stats(
    groups: Iterable[Group],
    catalog: Sequence[Block],
    strategy: str = DEFAULT_STRATEGY,
    min_chunk: int = DEFAULT_MIN_CHUNK,
    block_order: Optional[Sequence[Sequence[str]]] = None,
) -> Tuple[AllocationResult, AllocationStats]:
    """Full pipeline: allocate, then aggregate statistics over the raw input groups."""
    groups = list(groups)
    result = run_allocation(groups, catalog, strategy, min_chunk, block_order)
    return result, compute_stats(groups, result, catalog)
