"""Tests for the Simple Greedy and Greedy-with-Min-Chunk strategies."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import copy
import pytest

from models.group import Group
from models.room import Room, Block
from engine.greedy import allocate_simple_greedy, allocate_greedy_min_chunk
from config.defaults import STRATEGY_SIMPLE_GREEDY, STRATEGY_GREEDY_MIN_CHUNK, NO_SPACE_ROOM_ID


def make_catalog(*rooms, block="Main Block"):
    return [Block(block, [Room(room_id, cap) for room_id, cap in rooms])]


def make_group(name="X", size=40, section="1"):
    return Group(name, section, size)


def seats(record):
    return (record.room_id, record.seat_count, record.start_seat, record.end_seat)


class TestSimpleGreedy:
    def test_three_room_scenario(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 20))
        groups = [make_group("X", 40), make_group("Y", 60)]

        result = allocate_simple_greedy(groups, catalog, min_chunk=10)

        # Largest group first: Y opens A, X tops off B and takes C
        assert [(r.category, *seats(r)) for r in result.records] == [
            ("Y", "A", 50, 1, 50),
            ("Y", "B", 10, 1, 10),
            ("X", "B", 20, 11, 30),
            ("X", "C", 20, 1, 20),
        ]
        assert result.error_records == []
        assert result.room_usage == {"A": 50, "B": 30, "C": 20}
        assert result.strategy == STRATEGY_SIMPLE_GREEDY

    def test_first_placement_may_be_small(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 20))
        result = allocate_simple_greedy([make_group("X", 5)], catalog, min_chunk=10)

        assert len(result.records) == 1
        assert seats(result.records[0]) == ("A", 5, 1, 5)
        assert result.records[0].partial is False

    def test_overflow_becomes_single_error_record(self):
        catalog = make_catalog(("A", 50))
        result = allocate_simple_greedy([make_group("X", 60)], catalog, min_chunk=10)

        assert len(result.records) == 2
        placed, error = result.records
        assert placed.seat_count == 50 and placed.partial
        assert error.error and error.room_id == NO_SPACE_ROOM_ID
        assert error.seat_count == 10
        assert error.start_seat is None and error.end_seat is None

    def test_rooms_visited_largest_first(self):
        catalog = make_catalog(("small", 20), ("big", 80), ("mid", 40))
        result = allocate_simple_greedy([make_group("X", 30)], catalog)
        assert result.records[0].room_id == "big"

    def test_malformed_capacity_rooms_are_skipped(self):
        catalog = [Block("Main Block", [Room("Z", "abc"), Room("N", -5), Room("A", 20)])]
        result = allocate_simple_greedy([make_group("X", 15)], catalog)
        assert [r.room_id for r in result.records] == ["A"]

    def test_inputs_not_mutated(self):
        catalog = make_catalog(("A", 50), ("B", 30))
        groups = [make_group("X", 40), make_group("Y", 60)]
        catalog_before = copy.deepcopy(catalog)
        groups_before = copy.deepcopy(groups)

        allocate_simple_greedy(groups, catalog, min_chunk=10)

        assert catalog == catalog_before
        assert groups == groups_before

    def test_block_name_carried_on_records(self):
        catalog = make_catalog(("A", 50), block="APJ Block")
        result = allocate_simple_greedy([make_group("X", 10)], catalog)
        assert result.records[0].block_name == "APJ Block"


class TestMinChunkGuard:
    def test_small_remainder_refused_for_empty_room(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 5))
        groups = [make_group("P", 50), make_group("Q", 33)]

        result = allocate_greedy_min_chunk(groups, catalog, min_chunk=10)

        q_records = result.records_for(("Q", "1"))
        assert [seats(r) for r in q_records if not r.error] == [("B", 30, 1, 30)]
        assert q_records[-1].error and q_records[-1].seat_count == 3
        assert "C" not in result.room_usage
        assert result.strategy == STRATEGY_GREEDY_MIN_CHUNK

    def test_threshold_of_one_seats_the_remainder(self):
        catalog = make_catalog(("A", 50), ("B", 30), ("C", 5))
        groups = [make_group("P", 50), make_group("Q", 33)]

        result = allocate_simple_greedy(groups, catalog, min_chunk=1)

        assert result.error_records == []
        assert result.room_usage["C"] == 3

    def test_small_chunk_may_top_off_occupied_room(self):
        catalog = make_catalog(("A", 50), ("B", 30))
        groups = [make_group("P", 45), make_group("Q", 34)]

        result = allocate_greedy_min_chunk(groups, catalog, min_chunk=10)

        q_records = result.records_for(("Q", "1"))
        assert [seats(r) for r in q_records] == [("A", 5, 46, 50), ("B", 29, 1, 29)]

    def test_first_placement_exception_needs_whole_remainder(self):
        catalog = make_catalog(("A", 8), ("B", 8))
        result = allocate_greedy_min_chunk([make_group("P", 12)], catalog, min_chunk=10)

        assert len(result.records) == 1
        assert result.records[0].error
        assert result.records[0].seat_count == 12
        assert result.room_usage == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
