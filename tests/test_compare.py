import pytest

from simulations.common import summarize_values
from simulations.compare import format_report, main


def _row(report, label):
    for line in report.splitlines():
        if line.split() and line.split()[0] == label:
            return line.split()
    raise AssertionError(f"row {label!r} not found")


def test_report_layout():
    report = format_report(
        summarize_values([10, 20, 30]),
        summarize_values([10, 20]),
        summarize_values([0, 30]),
        summarize_values([10, 50]),
    )

    header = report.splitlines()[0]
    for group in ("Paid", "Free", "Total"):
        assert f"{group} avg" in header
        assert f"{group} median" in header

    assert _row(report, "A") == ["A", "20.0", "10", "30", "20"] + ["-"] * 8
    assert _row(report, "B") == [
        "B",
        "15.0", "10", "20", "15",
        "15.0", "0", "30", "15",
        "30.0", "10", "50", "30",
    ]


def test_main_prints_report(capsys):
    assert main(["--trials", "30", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Simulation started...")
    assert "Paid avg" in out
    assert out.rstrip().endswith("Simulation finished")


def test_main_reports_capped_trials(capsys):
    assert main(["--trials", "5", "--seed", "1", "--max-paid-batches", "1"]) == 1
    assert "target not reached" in capsys.readouterr().err


def test_main_rejects_bad_trials():
    with pytest.raises(SystemExit) as exc:
        main(["--trials", "-1"])
    assert exc.value.code == 2
