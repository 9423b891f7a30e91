"""Tests for console report formatting."""

import pytest

from matchsim.output.formatter import format_banner, format_report
from matchsim.simulation.models import MatchResult
from matchsim.simulation.statistics import SimulationStatistics, calculate_statistics


class TestFormatReport:
    """Test cases for format_report."""

    @pytest.fixture
    def single_report(self) -> str:
        results = [MatchResult(2, 1)]
        stats = SimulationStatistics(1, 1, 0, 0, 2.0, 1.0, 1.0, 3.0)
        return format_report(results, stats, 1.5, 1.2)

    def test_header(self, single_report: str):
        """Test the header shows the title and both rates."""
        assert "SOCCER MATCH SIMULATOR" in single_report
        assert "Team A Seed: 1.50" in single_report
        assert "Team B Seed: 1.20" in single_report
        assert "Simulations: 1" in single_report

    def test_results_table_columns(self, single_report: str):
        """Test the results table has every column."""
        for column in ("Sim #", "Team A", "Team B", "Spread", "Total"):
            assert column in single_report

    def test_summary_section(self, single_report: str):
        """Test the summary block labels."""
        assert "SUMMARY" in single_report
        assert "Team A Wins:" in single_report
        assert "Draws:" in single_report
        assert "Team B Wins:" in single_report
        assert "Avg Goals Team A:" in single_report
        assert "Avg Goals Team B:" in single_report
        assert "Avg Total Goals:" in single_report

    def test_spread_sign(self):
        """Test spreads are rendered with an explicit sign."""
        results = [MatchResult(2, 1), MatchResult(1, 3), MatchResult(0, 0)]
        report = format_report(results, calculate_statistics(results), 1.5, 1.2)

        assert "│     +1 │" in report
        assert "│     -2 │" in report
        assert "│     +0 │" in report

    def test_simulation_numbers(self):
        """Test rows are numbered from 1."""
        results = [MatchResult(2, 1), MatchResult(1, 0), MatchResult(3, 2)]
        report = format_report(results, calculate_statistics(results), 1.5, 1.2)

        assert "│      1 │" in report
        assert "│      2 │" in report
        assert "│      3 │" in report
        assert "│      4 │" not in report

    def test_percentages_and_averages(self, sample_results: list[MatchResult]):
        """Test percentages use one decimal and averages two."""
        report = format_report(sample_results, calculate_statistics(sample_results), 1.5, 1.2)

        assert "( 40.0%)" in report
        assert "( 20.0%)" in report
        assert "Avg Goals Team A:  1.40" in report
        assert "Avg Goals Team B:  1.20" in report
        assert "Avg Spread:       +0.20" in report
        assert "Avg Total Goals:   2.60" in report

    def test_negative_average_spread(self):
        """Test a negative average spread keeps its sign."""
        results = [MatchResult(0, 2)]
        report = format_report(results, calculate_statistics(results), 0.5, 2.0)
        assert "Avg Spread:       -2.00" in report

    def test_boxes_are_aligned(self, single_report: str):
        """Test every line of a box has the same width."""
        lines = single_report.splitlines()
        header = [line for line in lines if line[:1] in ("╔", "║", "╠", "╚")]
        summary_start = next(i for i, line in enumerate(lines) if "SUMMARY" in line) - 2
        summary = [line for line in lines[summary_start:] if line]

        assert len({len(line) for line in header}) == 1
        assert len({len(line) for line in summary}) == 1

    def test_ends_with_newline(self, single_report: str):
        """Test the report is newline-terminated."""
        assert single_report.endswith("\n")


class TestFormatBanner:
    """Test cases for the interactive banner."""

    def test_banner(self):
        """Test the banner has a title between borders of equal width."""
        top, title, bottom = format_banner()
        assert "SOCCER MATCH SIMULATOR - MONTE CARLO" in title
        assert len(top) == len(title) == len(bottom)
