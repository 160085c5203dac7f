"""Tests for group normalization and run configuration checks."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.group import Group
from engine.errors import InvalidConfigurationError
from engine.normalizer import normalize_groups, validate_min_chunk


def make_group(category="CSE", subcategory="1", size=60):
    return Group(category, subcategory, size)


class TestNormalizeGroups:
    def test_sorted_largest_first(self):
        groups = [make_group("A", "1", 30), make_group("B", "1", 50), make_group("C", "1", 40)]
        result = normalize_groups(groups)
        assert [g.size for g in result] == [50, 40, 30]

    def test_ties_keep_input_order(self):
        groups = [make_group("A", "1", 30), make_group("B", "1", 50), make_group("C", "1", 30)]
        result = normalize_groups(groups)
        assert [g.category for g in result] == ["B", "A", "C"]

    def test_blank_identity_and_zero_size_dropped(self):
        groups = [
            make_group("", "1", 40),
            make_group("IT", "  ", 40),
            make_group("ME", "1", 0),
            make_group("EE", "2", 25),
        ]
        result = normalize_groups(groups)
        assert len(result) == 1
        assert result[0].key == ("EE", "2")

    def test_negative_size_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            normalize_groups([make_group(size=-5)])

    def test_non_integer_size_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            normalize_groups([make_group(size=12.5)])
        with pytest.raises(InvalidConfigurationError):
            normalize_groups([make_group(size="12")])

    def test_whole_float_size_accepted(self):
        result = normalize_groups([make_group(size=40.0)])
        assert result[0].size == 40
        assert isinstance(result[0].size, int)

    def test_duplicate_identity_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            normalize_groups([make_group("CSE", "1", 10), make_group("CSE", "1", 20)])

    def test_returns_copies(self):
        original = make_group(size=60)
        result = normalize_groups([original])
        result[0].size = 1
        assert original.size == 60
        assert result[0] is not original


class TestValidateMinChunk:
    def test_accepts_positive_int(self):
        assert validate_min_chunk(1) == 1
        assert validate_min_chunk(10) == 10

    def test_rejects_zero_and_negative(self):
        with pytest.raises(InvalidConfigurationError):
            validate_min_chunk(0)
        with pytest.raises(InvalidConfigurationError):
            validate_min_chunk(-3)

    def test_rejects_non_int(self):
        for value in (True, "10", 2.5, None):
            with pytest.raises(InvalidConfigurationError):
                validate_min_chunk(value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
