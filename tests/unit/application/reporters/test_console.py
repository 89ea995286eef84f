"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values, customization, FAIL-FIRST validation
- ConsoleReporter report() output format
- Filtering (codes) and truncation (max_violations)
- Per-code summary section
"""

import re

import pytest

from tests.factories import make_coded_list, make_violation
from violationlist.application.reporters.console import ConsoleConfig, ConsoleReporter
from violationlist.domain.model.violation_list import ViolationList

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(output: str) -> str:
    """Strip ANSI escape sequences."""
    return ANSI.sub("", output)


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_summary is True
        assert config.max_violations is None
        assert config.codes is None
        assert config.width == 120

    def test_custom_values(self) -> None:
        """Custom values can be set."""
        config = ConsoleConfig(
            show_summary=False,
            max_violations=10,
            codes=frozenset({"A"}),
            width=80,
        )
        assert config.show_summary is False
        assert config.max_violations == 10
        assert config.codes == frozenset({"A"})
        assert config.width == 80

    def test_negative_max_violations_raises(self) -> None:
        with pytest.raises(ValueError, match="max_violations must be >= 0"):
            ConsoleConfig(max_violations=-1)

    def test_zero_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be positive"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains VIOLATIONS header."""
        output = ConsoleReporter().report(ViolationList())
        assert "VIOLATIONS" in output

    def test_report_empty_list(self) -> None:
        """Empty list: zero count, no table, no summary."""
        output = plain(ConsoleReporter().report(ViolationList()))
        assert "Violations: 0" in output
        assert "Message" not in output
        assert "BY CODE" not in output

    def test_report_contains_count(self) -> None:
        output = plain(ConsoleReporter().report(make_coded_list("A", "B", "A")))
        assert "Violations: 3" in output

    def test_report_rows(self) -> None:
        """Each violation renders message, code and property path."""
        lst = ViolationList(
            [
                make_violation("Name is blank.", code="BLANK", property_path="name"),
                make_violation("Age too low.", property_path="age"),
            ]
        )
        output = plain(ConsoleReporter().report(lst))
        assert "Name is blank." in output
        assert "BLANK" in output
        assert "name" in output
        assert "Age too low." in output

    def test_report_markup_in_message_escaped(self) -> None:
        lst = ViolationList([make_violation("Key [bold] is invalid.", property_path="[bold]")])
        output = plain(ConsoleReporter().report(lst))
        assert "Key [bold] is invalid." in output

    def test_report_keeps_offsets(self) -> None:
        lst = make_coded_list("A", "B", "C")
        lst.remove(0)
        lst.remove(1)
        output = plain(ConsoleReporter().report(lst))
        assert "violation 2" in output
        assert "violation 0" not in output

    def test_report_summary_by_code(self) -> None:
        output = plain(ConsoleReporter().report(make_coded_list("A", "B", "A", None)))
        assert "BY CODE" in output
        assert "A: 2" in output
        assert "B: 1" in output
        assert "-: 1" in output

    def test_report_without_summary(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(show_summary=False))
        output = plain(reporter.report(make_coded_list("A")))
        assert "BY CODE" not in output

    def test_report_max_violations(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(max_violations=1))
        output = plain(reporter.report(make_coded_list("A", "B", "C")))
        assert "violation 0" in output
        assert "violation 1" not in output
        assert "... 2 more" in output

    def test_report_codes_filter(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(codes=frozenset({"B"})))
        lst = make_coded_list("A", "B", "A")
        output = plain(reporter.report(lst))
        assert "Violations: 1" in output
        assert "violation 1" in output
        assert "violation 0" not in output
        assert lst.count() == 3

    def test_report_returns_str(self) -> None:
        assert isinstance(ConsoleReporter().report(ViolationList()), str)
