"""
Unit tests for the index scanner.
"""

import pytest

from betwixt.core.scanner import Occurrence, index_of, last_index_of, scan, scan_any
from betwixt.utils.errors import ArgumentError


class TestScan:
    """Tests for single-marker scanning."""

    def test_scan_basic(self):
        """Test that every position is reported in order."""
        assert scan("abcabc", "abc") == [0, 3]

    def test_scan_overlapping(self):
        """Test that overlapping matches are all reported."""
        assert scan("aaa", "aa") == [0, 1]
        assert scan("aaaa", "a") == [0, 1, 2, 3]

    def test_scan_not_found(self):
        """Test scanning for an absent marker."""
        assert scan("hello", "z") == []

    def test_scan_empty_text(self):
        """Test that empty or None text yields no positions."""
        assert scan("", "a") == []
        assert scan(None, "a") == []

    def test_scan_empty_marker_rejected(self):
        """Test that an empty marker raises before scanning."""
        with pytest.raises(ArgumentError, match="marker"):
            scan("abc", "")

    def test_scan_none_marker_rejected(self):
        """Test that a None marker raises."""
        with pytest.raises(ArgumentError):
            scan("abc", None)

    def test_scan_ignore_case(self):
        """Test case-insensitive scanning."""
        assert scan("Ab ab AB", "ab") == [3]
        assert scan("Ab ab AB", "ab", ignore_case=True) == [0, 3, 6]

    def test_scan_ignore_case_overlapping(self):
        """Test that case-insensitive scanning also reports overlaps."""
        assert scan("AaA", "aa", ignore_case=True) == [0, 1]

    def test_scan_regex_characters_are_literal(self):
        """Test that markers are never interpreted as patterns."""
        assert scan("a.b.c", ".", ignore_case=True) == [1, 3]
        assert scan("1+1=2", "+") == [1]


class TestScanAny:
    """Tests for multi-marker scanning."""

    def test_scan_any_basic(self):
        """Test scanning for several markers."""
        result = scan_any("a,b;c", [",", ";"])
        assert result == [Occurrence(1, ","), Occurrence(3, ";")]

    def test_scan_any_grouped_by_marker(self):
        """Test that results are grouped by marker, not sorted by position."""
        result = scan_any("; , ;", [",", ";"])
        assert result == [Occurrence(2, ","), Occurrence(0, ";"), Occurrence(4, ";")]

    def test_scan_any_single_string(self):
        """Test that a plain string is one marker, not a set of characters."""
        assert scan_any("a, b", ", ") == [Occurrence(1, ", ")]

    def test_scan_any_empty_marker_rejected(self):
        """Test that any empty marker in the set raises."""
        with pytest.raises(ArgumentError):
            scan_any("abc", ["a", ""])

    def test_scan_any_no_text(self):
        """Test scanning None text."""
        assert scan_any(None, ["a", "b"]) == []

    def test_occurrence_end(self):
        """Test the end offset of an occurrence."""
        assert Occurrence(4, "abc").end == 7


class TestIndexLookup:
    """Tests for first and last index lookups."""

    def test_index_of_from_start(self):
        """Test searching from a start offset."""
        assert index_of("abcabc", "c") == 2
        assert index_of("abcabc", "c", 3) == 5

    def test_index_of_missing(self):
        """Test lookups that find nothing."""
        assert index_of("abc", "z") == -1
        assert index_of(None, "z") == -1

    def test_index_of_ignore_case(self):
        """Test a case-insensitive lookup."""
        assert index_of("xABc", "bC", ignore_case=True) == 2
        assert index_of("xABc", "bC") == -1

    def test_last_index_of(self):
        """Test finding the last occurrence."""
        assert last_index_of("abcabc", "b") == 4
        assert last_index_of("aBab", "b", ignore_case=True) == 3
        assert last_index_of("abc", "z") == -1
