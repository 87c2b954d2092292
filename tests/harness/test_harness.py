import os
import re
import subprocess
import sys
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SOLVER = os.path.join(REPO_ROOT, "aoc_solver.py")

TEST_DIR = os.path.dirname(__file__)

# pass_day<N>.txt / fail_day<N>.txt, the day number comes from the name
txt_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".txt"))

VALID_FILES = [f for f in txt_files if f.startswith("pass")]
INVALID_FILES = [f for f in txt_files if f.startswith("fail")]

EXPECTED = {
    "pass_day1.txt": (11, 31),
    "pass_day2.txt": (2, 4),
    "pass_day3.txt": (161, 1),
}

if not VALID_FILES:
    raise RuntimeError("No pass*.txt files found in harness directory")
if not INVALID_FILES:
    raise RuntimeError("No fail*.txt files found in harness directory")


def _day(filename):
    return re.search(r"day(\d+)", filename).group(1)


def _run(filename, *extra):
    path = os.path.join(TEST_DIR, filename)
    cmd = [sys.executable, SOLVER, "--day", _day(filename), "--input", path, *extra]
    return subprocess.run(cmd, capture_output=True, text=True)


@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_input_prints_both_parts(filename):
    result = _run(filename)
    assert result.returncode == 0, f"Expected 0 from {filename}, got {result.returncode}"
    part1, part2 = EXPECTED[filename]
    assert result.stdout.splitlines() == [
        f"day {_day(filename)}",
        f"part 1: {part1}",
        f"part 2: {part2}",
    ]


@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_input_returns_1(filename):
    result = _run(filename)
    assert result.returncode == 1, f"Expected 1 from {filename}, got {result.returncode}"
    assert "part 1" not in result.stdout
    assert "ParseError" in result.stderr


@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_input_with_exit_zero(filename):
    result = _run(filename, "--exit-zero")
    assert result.returncode == 0
    assert result.stdout == ""
