import subprocess
import sys

import pytest

from mg1_queue.scripts.run_simulation import main


def test_help_runs():
    proc = subprocess.run(
        [sys.executable, "-m", "mg1_queue", "-h"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0
    out = proc.stdout + proc.stderr
    assert "arrival-rate" in out
    assert "service-sigma" in out


def test_default_run_prints_thousand_lines():
    proc = subprocess.run(
        [sys.executable, "-m", "mg1_queue", "--seed", "3"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0
    lines = proc.stdout.splitlines()
    assert len(lines) == 1000
    assert lines[0] == "0.0\t0\tNone"
    for line in lines:
        clock, count, waiting = line.split("\t")
        float(clock)
        int(count)
        assert waiting == "None" or int(waiting) >= 0


def test_invalid_rate_is_rejected():
    proc = subprocess.run(
        [sys.executable, "-m", "mg1_queue", "--arrival-rate", "0"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 2
    assert "arrival_rate" in proc.stderr


def test_main_in_process(capsys):
    main(["--steps", "3", "--seed", "1"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0] == "0.0\t0\tNone"


@pytest.mark.parametrize("args", [
    ["--arrival-rate", "inf"],
    ["--service-mean", "nan"],
    ["--service-sigma", "nan"],
])
def test_non_finite_parameters_are_rejected(args):
    proc = subprocess.run(
        [sys.executable, "-m", "mg1_queue", *args, "-n", "2"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 2
    assert "finite" in proc.stderr
    assert "Traceback" not in proc.stderr
