"""Integration tests for end-to-end CLI workflows.

Tests solve → JSON/report and sweep → JSON pipelines.
"""

import json
import os
import tempfile

import pytest
from click.testing import CliRunner

from jetcycle.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


class TestAtmosphere:
    def test_sea_level(self, runner):
        result = runner.invoke(cli, ["atmosphere", "--altitude", "0"])
        assert result.exit_code == 0, result.output
        assert "101.325" in result.output

    def test_metric_altitude(self, runner):
        result = runner.invoke(cli, ["atmosphere", "--altitude", "11", "--unit", "km"])
        assert result.exit_code == 0, result.output
        assert "216.65" in result.output


class TestSolve:
    def test_solve_saves_json(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "cruise.json")
        result = runner.invoke(cli, [
            "solve", "--altitude", "35000", "--mach", "0.85", "--t4", "1400", "-o", out
        ])
        assert result.exit_code == 0, result.output
        assert os.path.exists(out)

        with open(out) as f:
            data = json.load(f)
        assert data["performance"]["thrust"] > 0
        assert data["stations"]["s0"]["S"] == 0.0
        assert data["design"]["pi_c"] == 12.0

    def test_solve_from_throttle(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "throttle.json")
        result = runner.invoke(cli, [
            "solve", "--altitude", "10000", "--mach", "0.5", "--throttle", "50", "-o", out
        ])
        assert result.exit_code == 0, result.output

        with open(out) as f:
            data = json.load(f)
        assert data["inputs"]["t4"] == pytest.approx(1300.0)

    def test_solve_with_schedule_file(self, runner, tmp_dir):
        sched = os.path.join(tmp_dir, "schedule.json")
        with open(sched, "w") as f:
            json.dump({"t4_min": 1000.0, "t4_max": 1400.0}, f)
        out = os.path.join(tmp_dir, "run.json")
        result = runner.invoke(cli, [
            "solve", "--mach", "0.4", "--throttle", "100", "--schedule", sched, "-o", out
        ])
        assert result.exit_code == 0, result.output
        with open(out) as f:
            assert json.load(f)["inputs"]["t4"] == pytest.approx(1400.0)

    def test_report_written(self, runner, tmp_dir):
        report = os.path.join(tmp_dir, "report.txt")
        result = runner.invoke(cli, [
            "solve", "--altitude", "20000", "--mach", "0.6", "--t4", "1500", "--report", report
        ])
        assert result.exit_code == 0, result.output
        with open(report) as f:
            assert "PERFORMANCE" in f.read()

    def test_static_point_does_not_fail(self, runner):
        result = runner.invoke(cli, ["solve", "--mach", "0", "--t4", "1200"])
        assert result.exit_code == 0, result.output

    def test_needs_exactly_one_throttle_input(self, runner):
        assert runner.invoke(cli, ["solve", "--mach", "0.5"]).exit_code != 0
        assert runner.invoke(cli, ["solve", "--t4", "1200", "--throttle", "50"]).exit_code != 0

    def test_negative_mach_rejected(self, runner):
        result = runner.invoke(cli, ["solve", "--mach", "-0.5", "--t4", "1200"])
        assert result.exit_code != 0

    def test_invalid_bounds_rejected(self, runner):
        result = runner.invoke(cli, [
            "solve", "--throttle", "50", "--t4-min", "1500", "--t4-max", "900"
        ])
        assert result.exit_code != 0


class TestSweep:
    def test_mach_sweep_json(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "mach.json")
        result = runner.invoke(cli, [
            "sweep", "mach", "--altitude", "30000", "--t4", "1400",
            "--start", "0", "--stop", "1.0", "--step", "0.25", "-o", out,
        ])
        assert result.exit_code == 0, result.output

        with open(out) as f:
            data = json.load(f)
        sweep = data["sweeps"]["mach"]
        assert sweep["mach"] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
        assert sweep["tsfc"][0] is None  # static point has no useful thrust

    def test_throttle_sweep_json(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "throttle.json")
        result = runner.invoke(cli, [
            "sweep", "throttle", "--altitude", "10000", "--mach", "0.6",
            "--step", "25", "-o", out,
        ])
        assert result.exit_code == 0, result.output

        with open(out) as f:
            data = json.load(f)
        sweep = data["sweeps"]["throttle"]
        assert sweep["throttle_pct"] == [0.0, 25.0, 50.0, 75.0, 100.0]
        assert sweep["fuel_flow"] == sorted(sweep["fuel_flow"])

    def test_bad_step(self, runner):
        result = runner.invoke(cli, ["sweep", "mach", "--step", "0"])
        assert result.exit_code != 0

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, ["-v", "sweep", "mach", "--start", "0", "--stop", "0.5", "--step", "0.5"])
        assert result.exit_code == 0, result.output


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
