"""Tests for the command line front end."""

import json

import pytest

import main
from core.idx_range import IdxRange


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("WINDOW_SIZE", "WINDOW_STEP"):
        monkeypatch.delenv(name, raising=False)


class TestCommandLine:

    def test_prints_partition(self, capsys):
        main.main(["8", "--size", "3"])
        assert capsys.readouterr().out.splitlines() == ["0 3", "3 6", "6 8"]

    def test_prints_json_with_step(self, capsys):
        main.main(["5", "-s", "3", "--step", "4", "--json"])
        assert json.loads(capsys.readouterr().out) == [
            {"low": 0, "high": 3},
            {"low": 4, "high": 5},
        ]

    def test_count(self, capsys):
        main.main(["13", "-s", "5", "--count"])
        assert capsys.readouterr().out.strip() == "3"

    def test_size_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("WINDOW_SIZE", "19")
        main.main(["13"])
        assert capsys.readouterr().out.splitlines() == ["0 13"]

    def test_empty_output_for_zero_size(self, capsys):
        main.main(["7", "-s", "0"])
        assert capsys.readouterr().out == ""

    def test_invalid_step_exits(self, caplog):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["10", "-s", "3", "--step", "0"])
        assert excinfo.value.code == 1
        assert "step must be positive" in caplog.text

    def test_missing_length(self):
        with pytest.raises(SystemExit) as excinfo:
            main.main([])
        assert excinfo.value.code == 2


class TestFormatting:

    def test_plain_and_json(self):
        ranges = [IdxRange(0, 3), IdxRange(3, 5)]
        assert main.format_ranges(ranges) == "0 3\n3 5"
        assert main.format_ranges(ranges, as_json=True) == '[{"low": 0, "high": 3}, {"low": 3, "high": 5}]'
        assert main.format_ranges([]) == ""


class TestBenchmark:

    def test_report_lines(self, monkeypatch):
        monkeypatch.setattr(main, "BENCHMARK_LENGTHS", [181, 1711])
        monkeypatch.setattr(main, "BENCHMARK_REPEATS", 1)
        lines = main.run_benchmark(17)
        assert len(lines) == 2
        assert "11 ranges" in " ".join(lines[0].split())
        assert "101 ranges" in " ".join(lines[1].split())

    def test_time_partition_is_non_negative(self):
        assert main.time_partition(1711, 17, repeats=2) >= 0.0
