"""Tests for the report generation module."""

from jetcycle.cycle.solver import solve_cycle
from jetcycle.reports.summary import generate_text_report


class TestTextReport:
    def test_sections(self):
        report = generate_text_report(solve_cycle(35000.0, 0.85, 1400.0), title="Cruise")
        assert "Cycle Report" in report
        assert "Cruise" in report
        assert "OPERATING POINT" in report
        assert "AMBIENT (ISA)" in report
        assert "PERFORMANCE" in report
        assert "STATIONS" in report
        assert "DESIGN POINT" in report
        assert "Turbine S5" in report
        assert "NOTE:" not in report

    def test_operating_point_values(self):
        report = generate_text_report(solve_cycle(35000.0, 0.85, 1400.0))
        assert "35000 ft" in report
        assert "0.85" in report
        assert "1400 K" in report

    def test_sentinel_tsfc(self):
        report = generate_text_report(solve_cycle(0.0, 0.0, 1200.0))
        tsfc_line = next(line for line in report.splitlines() if line.strip().startswith("TSFC"))
        assert "—" in tsfc_line
        assert "NOTE:" in report
