"""Tests for run statistics, room/section views and run explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.group import Group
from models.room import Room, Block
from engine.greedy import allocate_simple_greedy, allocate_greedy_min_chunk
from engine.stats import compute_stats, get_room_utilization, summarize_groups
from engine.explainer import explain_run, explain_strategy
from config.defaults import STRATEGIES, STATUS_SEATED, STATUS_SPLIT, STATUS_NO_SPACE


def make_catalog():
    return [Block("Main Block", [Room("A", 50), Room("B", 30), Room("C", 20)])]


def make_groups():
    return [Group("X", "1", 40), Group("Y", "1", 60)]


class TestComputeStats:
    def test_fully_packed_run(self):
        catalog, groups = make_catalog(), make_groups()
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        stats = compute_stats(groups, result, catalog)

        assert stats.total_students == 100
        assert stats.allocated_students == 100
        assert stats.rooms_used == 3
        assert stats.blocks_used == 1
        assert stats.total_capacity == 100
        assert stats.wasted_seats == 0
        assert stats.efficiency == pytest.approx(100.0)

    def test_partial_room_counts_full_capacity(self):
        catalog = make_catalog()
        groups = [Group("X", "1", 5)]
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        stats = compute_stats(groups, result, catalog)

        assert stats.total_capacity == 50
        assert stats.wasted_seats == 45
        assert stats.efficiency == pytest.approx(10.0)

    def test_total_counts_raw_input_before_filtering(self):
        catalog = [Block("Main Block", [Room("A", 50)])]
        groups = [Group("X", "1", 60), Group("", "1", 7)]
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        stats = compute_stats(groups, result, catalog)

        assert stats.total_students == 67
        assert stats.allocated_students == 50
        assert stats.total_capacity == 50
        assert stats.wasted_seats == 0

    def test_zero_capacity_gives_zero_efficiency(self):
        catalog = [Block("Main Block", [Room("A", 8)])]
        groups = [Group("X", "1", 12)]
        result = allocate_greedy_min_chunk(groups, catalog, min_chunk=10)
        stats = compute_stats(groups, result, catalog)

        assert stats.allocated_students == 0
        assert stats.total_capacity == 0
        assert stats.efficiency == 0
        assert stats.rooms_used == 0

    def test_blocks_counted_by_name(self):
        catalog = [
            Block("APJ Block", [Room("APJ-1", 30)]),
            Block("S Block", [Room("S-01", 30)]),
        ]
        groups = [Group("X", "1", 50)]
        result = allocate_simple_greedy(groups, catalog)
        stats = compute_stats(groups, result, catalog)
        assert stats.blocks_used == 2


class TestRoomUtilization:
    def test_fill_and_occupants(self):
        catalog, groups = make_catalog(), [Group("X", "1", 65)]
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        util = get_room_utilization(catalog, result)

        assert [u["room_id"] for u in util] == ["A", "B"]
        assert util[1]["used_seats"] == 15
        assert util[1]["empty_seats"] == 15
        assert util[1]["fill_pct"] == pytest.approx(0.5)
        assert util[1]["occupants"] == [
            {"group": "X-1", "seats": 15, "start_seat": 1, "end_seat": 15, "partial": True},
        ]

    def test_include_empty_rooms(self):
        catalog, groups = make_catalog(), [Group("X", "1", 10)]
        result = allocate_simple_greedy(groups, catalog)
        util = get_room_utilization(catalog, result, include_empty=True)
        assert len(util) == 3
        assert util[2]["used_seats"] == 0


class TestSummarizeGroups:
    def test_statuses(self):
        catalog = [Block("Main Block", [Room("A", 50), Room("B", 30)])]
        groups = [Group("P", "1", 50), Group("Q", "1", 20), Group("R", "1", 25)]
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        summary = {s["group"]: s for s in summarize_groups(result)}

        # P fills A, R takes 25 of B, Q gets the 5 seats left and the rest overflows
        assert summary["P-1"]["status"] == STATUS_SEATED
        assert summary["R-1"]["status"] == STATUS_SEATED
        assert summary["Q-1"]["status"] == STATUS_NO_SPACE
        assert summary["Q-1"]["seated"] == 5
        assert summary["Q-1"]["unseated"] == 15
        assert summary["Q-1"]["total"] == 20

    def test_split_status(self):
        catalog, groups = make_catalog(), [Group("X", "1", 65)]
        result = allocate_simple_greedy(groups, catalog)
        summary = summarize_groups(result)
        assert summary[0]["status"] == STATUS_SPLIT
        assert summary[0]["rooms"] == ["A", "B"]


class TestExplainer:
    def test_every_strategy_has_explanation(self):
        for strategy in STRATEGIES:
            assert explain_strategy(strategy)

    def test_run_steps_note_unseated(self):
        catalog = [Block("Main Block", [Room("A", 50)])]
        groups = [Group("X", "1", 60)]
        result = allocate_simple_greedy(groups, catalog, min_chunk=10)
        steps = explain_run(result, compute_stats(groups, result, catalog))

        assert steps[0].startswith("Step 1")
        assert any(s.startswith("Note: 10 students") for s in steps)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
