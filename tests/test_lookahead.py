"""Tests for the Greedy Lookahead strategy."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import copy
import pytest

from models.group import Group
from models.room import Room, Block
from engine.lookahead import allocate_greedy_lookahead
from config.defaults import STRATEGY_GREEDY_LOOKAHEAD


def make_catalog(*rooms, block="Main Block"):
    return [Block(block, [Room(room_id, cap) for room_id, cap in rooms])]


def make_group(name="X", size=40, section="1"):
    return Group(name, section, size)


def seats(record):
    return (record.category, record.room_id, record.seat_count, record.start_seat, record.end_seat)


class TestGreedyLookahead:
    def test_three_room_scenario(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 20))
        groups = [make_group("X", 40), make_group("Y", 60)]

        result = allocate_greedy_lookahead(groups, catalog, min_chunk=10)

        assert [seats(r) for r in result.records] == [
            ("X", "A", 40, 1, 40),
            ("Y", "A", 10, 41, 50),
            ("Y", "B", 30, 1, 30),
            ("Y", "C", 20, 1, 20),
        ]
        assert [r.partial for r in result.records] == [False, True, True, True]
        assert result.error_records == []
        assert result.strategy == STRATEGY_GREEDY_LOOKAHEAD

    def test_perfect_fit_takes_priority(self):
        catalog = make_catalog(("A", 50), ("B", 30))
        groups = [make_group("P", 30), make_group("Q", 50), make_group("R", 20)]

        result = allocate_greedy_lookahead(groups, catalog, min_chunk=1)

        placed = [seats(r) for r in result.placed_records]
        assert placed == [("Q", "A", 50, 1, 50), ("P", "B", 30, 1, 30)]
        assert result.error_records[0].category == "R"
        assert result.error_records[0].seat_count == 20

    def test_combines_whole_groups_in_one_room(self):
        catalog = make_catalog(("A", 50))
        groups = [make_group("P", 30), make_group("Q", 20), make_group("R", 25)]

        result = allocate_greedy_lookahead(groups, catalog, min_chunk=1)

        # Largest whole fit first (P), then the largest that fits the 20 left (Q)
        assert [seats(r) for r in result.placed_records] == [
            ("P", "A", 30, 1, 30),
            ("Q", "A", 20, 31, 50),
        ]
        assert [(r.category, r.seat_count) for r in result.error_records] == [("R", 25)]

    def test_splits_when_nothing_fits_whole(self):
        catalog = make_catalog(("A", 40), ("B", 40))
        result = allocate_greedy_lookahead([make_group("P", 70)], catalog, min_chunk=10)

        assert [seats(r) for r in result.records] == [
            ("P", "A", 40, 1, 40),
            ("P", "B", 30, 1, 30),
        ]
        assert all(r.partial for r in result.records)

    def test_small_group_refused_for_empty_room(self):
        catalog = make_catalog(("A", 50), ("B", 5))
        groups = [make_group("P", 50), make_group("Q", 3)]

        result = allocate_greedy_lookahead(groups, catalog, min_chunk=10)

        assert "B" not in result.room_usage
        assert [(r.category, r.seat_count) for r in result.error_records] == [("Q", 3)]

    def test_splits_larger_group_when_whole_fit_is_too_small(self):
        catalog = make_catalog(("A", 100), ("B", 50))
        groups = [make_group("P", 100), make_group("Q", 70), make_group("R", 5)]

        result = allocate_greedy_lookahead(groups, catalog, min_chunk=10)

        assert [seats(r) for r in result.placed_records] == [
            ("P", "A", 100, 1, 100),
            ("Q", "B", 50, 1, 50),
        ]
        assert [(r.category, r.seat_count) for r in result.error_records] == [("Q", 20), ("R", 5)]

    def test_first_placement_may_be_small(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 20))
        result = allocate_greedy_lookahead([make_group("X", 5)], catalog, min_chunk=10)

        assert [seats(r) for r in result.records] == [("X", "A", 5, 1, 5)]

    def test_overflow_single_error_per_group(self):
        catalog = make_catalog(("A", 50))
        result = allocate_greedy_lookahead([make_group("X", 60)], catalog, min_chunk=10)

        assert [r.seat_count for r in result.placed_records] == [50]
        assert [r.seat_count for r in result.error_records] == [10]
        assert result.records[-1].error

    def test_input_groups_not_mutated(self):
        catalog = make_catalog(("A", 40), ("B", 40))
        groups = [make_group("P", 70)]
        before = copy.deepcopy(groups)

        allocate_greedy_lookahead(groups, catalog, min_chunk=10)
        assert groups == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
