"""Group normalization and input checks shared by every strategy."""

import copy
import logging
import numbers
from typing import Iterable, List

from models.group import Group
from config.defaults import MIN_CHUNK_FLOOR
from engine.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def validate_min_chunk(min_chunk) -> int:
    """Return min_chunk if it is an integer >= 1, otherwise raise."""
    if isinstance(min_chunk, bool) or not isinstance(min_chunk, int):
        raise InvalidConfigurationError(f"min_chunk must be an integer, got {min_chunk!r}")
    if min_chunk < MIN_CHUNK_FLOOR:
        raise InvalidConfigurationError(f"min_chunk must be >= {MIN_CHUNK_FLOOR}, got {min_chunk}")
    return min_chunk


def coerce_size(group: Group) -> int:
    """Group size as an int. Whole floats are accepted, anything else is rejected."""
    size = group.size
    if isinstance(size, float) and size.is_integer():
        size = int(size)
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidConfigurationError(f"{group.label}: size must be an integer, got {group.size!r}")
    if size < 0:
        raise InvalidConfigurationError(f"{group.label}: size cannot be negative ({size})")
    return int(size)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def normalize_groups(groups: Iterable[Group]) -> List[Group]:
    """Filter placeholder entries and return working copies sorted largest first.

    Entries with a blank category/subcategory or a size of 0 are dropped.
    Negative or non-integer sizes and duplicate identities raise
    InvalidConfigurationError. Ties in size keep input order.
    """
    working: List[Group] = []
    seen = set()
    for group in groups:
        if _is_blank(group.category) or _is_blank(group.subcategory):
            logger.debug("Dropping group with blank identity: %r", group)
            continue
        size = coerce_size(group)
        if size == 0:
            logger.debug("Dropping empty group %s", group.label)
            continue
        if group.key in seen:
            raise InvalidConfigurationError(f"Duplicate group {group.label}")
        seen.add(group.key)

        clone = copy.deepcopy(group)
        clone.size = size
        working.append(clone)

    working.sort(key=lambda g: g.size, reverse=True)
    return working
