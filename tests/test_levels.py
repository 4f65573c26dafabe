# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Tests for severity and verbosity."""

import pytest

from joblog import Severity, Verbosity


class TestSeverity:
    """Tests for Severity."""

    def test_total_order(self):
        """Test DEBUG < INFO < WARN < ERROR."""
        assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR
        assert sorted([Severity.ERROR, Severity.DEBUG, Severity.WARN, Severity.INFO]) == list(Severity)

    def test_labels(self):
        """Test labels are upper-case names."""
        assert [s.label for s in Severity] == ["DEBUG", "INFO", "WARN", "ERROR"]

    @pytest.mark.parametrize("text,expected", [
        ("debug", Severity.DEBUG),
        ("INFO", Severity.INFO),
        ("Warn", Severity.WARN),
        ("warning", Severity.WARN),
        (" error ", Severity.ERROR),
    ])
    def test_parse(self, text, expected):
        """Test parsing severity names."""
        assert Severity.parse(text) is expected

    def test_parse_passes_through_severity(self):
        """Test that parse returns Severity members unchanged."""
        assert Severity.parse(Severity.ERROR) is Severity.ERROR

    def test_parse_invalid(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Invalid severity"):
            Severity.parse("fatal")


class TestVerbosity:
    """Tests for Verbosity."""

    @pytest.mark.parametrize("severity", list(Severity))
    def test_quiet_admits_nothing(self, severity):
        """Test that QUIET suppresses every severity."""
        assert not Verbosity.QUIET.admits(severity)

    @pytest.mark.parametrize("severity", list(Severity))
    def test_verbose_admits_everything(self, severity):
        """Test that VERBOSE suppresses nothing."""
        assert Verbosity.VERBOSE.admits(severity)

    def test_normal_drops_debug_only(self):
        """Test that NORMAL suppresses DEBUG only."""
        assert not Verbosity.NORMAL.admits(Severity.DEBUG)
        assert Verbosity.NORMAL.admits(Severity.INFO)
        assert Verbosity.NORMAL.admits(Severity.WARN)
        assert Verbosity.NORMAL.admits(Severity.ERROR)

    def test_parse(self):
        """Test parsing verbosity names."""
        assert Verbosity.parse("Quiet") is Verbosity.QUIET
        assert Verbosity.parse("normal") is Verbosity.NORMAL
        assert Verbosity.parse(Verbosity.VERBOSE) is Verbosity.VERBOSE

    def test_parse_invalid(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Invalid verbosity"):
            Verbosity.parse("loud")

    def test_str(self):
        """Test string conversion."""
        assert str(Verbosity.NORMAL) == "normal"
