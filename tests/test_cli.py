import pytest

from aoc2025 import day1, day2, day3, day4, day5, day6
from aoc2025.cli import get_day, main, time_fmt

DAY1_INPUT = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_time_fmt_milliseconds():
    assert time_fmt(0.25) == "250ms"
    assert time_fmt(3.0).endswith("ms")


def test_time_fmt_microseconds():
    assert time_fmt(0.0) == "0μs"
    assert time_fmt(0.001).endswith("μs")
    assert time_fmt(0.0099).endswith("μs")


@pytest.mark.parametrize(
    "day, module",
    [("1", day1), ("2", day2), ("3", day3), ("4", day4), ("5", day5), ("6", day6)],
)
def test_get_day(day, module):
    assert get_day(day) is module.solve


def test_get_day_unknown():
    with pytest.raises(ValueError):
        get_day("7")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "inputs").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_main_prints_answers(workdir, capsys):
    (workdir / "inputs" / "day1.txt").write_text(DAY1_INPUT, encoding="utf-8")
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    expected = day1.solve(DAY1_INPUT)
    assert out.startswith(f"{expected.part1}\n\n{expected.part2}\n\nTime elapsed = ")
    assert out.rstrip("\n").count("\n") == 4


def test_main_extra_argument_reads_test_file(workdir, capsys):
    (workdir / "inputs" / "day1_test.txt").write_text("R50\n", encoding="utf-8")
    assert main(["1", "test"]) == 0
    out = capsys.readouterr().out
    expected = day1.solve("R50\n")
    assert out.startswith(f"{expected.part1}\n\n{expected.part2}\n\n")


def test_main_missing_file(workdir):
    with pytest.raises(SystemExit) as excinfo:
        main(["1"])
    assert "File not found" in str(excinfo.value.code)


def test_main_unknown_day(workdir):
    (workdir / "inputs" / "day9.txt").write_text("1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["9"])
    assert excinfo.value.code == 2