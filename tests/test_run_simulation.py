from __future__ import annotations

import pytest

from hundred_prisoners.io_utils import reset_logger
from hundred_prisoners.run_simulation import main, parse_args


@pytest.fixture(autouse=True)
def _fresh_logger():
    reset_logger()
    yield
    reset_logger()


def _lines(out: str) -> dict[str, str]:
    rows = {}
    for line in out.splitlines():
        key, _, value = line.partition(":")
        rows[key.strip()] = value.strip()
    return rows


def test_defaults() -> None:
    args = parse_args([])
    assert args.runs == 1000
    assert args.prisoners == 100
    assert args.attempt_limit is None
    assert args.repeats == 1
    assert args.seed is None


def test_summary_printed(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "150", "--seed", "3", "--no-progress"])
    rows = _lines(capsys.readouterr().out)
    assert rows["Attempts"] == "150"
    assert int(rows["Successes"]) + int(rows["Fails"]) == 150
    assert rows["Success Rate"].endswith("%")
    assert rows["Expected Rate"] == "31.1828 %"
    assert rows["Time"].endswith("ms")


def test_seeded_runs_repeat_exactly(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "120", "--seed", "10", "--no-progress"])
    first = _lines(capsys.readouterr().out)
    main(["--runs", "120", "--seed", "10", "--no-progress"])
    second = _lines(capsys.readouterr().out)
    assert first["Successes"] == second["Successes"]


def test_few_runs_warns(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "5", "--seed", "1", "--no-progress"])
    captured = capsys.readouterr()
    assert "Less than 100 runs may return inaccurate results." in captured.err
    assert "Attempts: 5" in captured.out


def test_enough_runs_does_not_warn(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "100", "--seed", "1", "--no-progress"])
    assert "inaccurate" not in capsys.readouterr().err


@pytest.mark.parametrize("value", ["0", "-4"])
def test_non_positive_runs_rejected(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--runs", value])
    assert exc.value.code == 2
    assert "runs must be greater than 0" in capsys.readouterr().err


def test_small_room_defaults_to_half_the_boxes(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "100", "--prisoners", "4", "--seed", "2", "--no-progress"])
    captured = capsys.readouterr()
    assert "attempt_limit=2" in captured.err
    # 4 prisoners, limit 2: exactly the 10 of 24 permutations without a 3- or 4-cycle.
    assert _lines(captured.out)["Expected Rate"] == "41.6667 %"


def test_repeats_summary(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "100", "--repeats", "3", "--seed", "4", "--no-progress"])
    rows = _lines(capsys.readouterr().out)
    assert rows["Repeats"] == "3"
    assert rows["Attempts"] == "300"
    assert rows["Mean Success Rate"].endswith("%")
    assert rows["Std Success Rate"].endswith("%")


def test_log_file_receives_records(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = tmp_path / "logs" / "run.log"
    main(["--runs", "100", "--seed", "9", "--no-progress", "--log-file", str(log_path)])
    reset_logger()
    text = log_path.read_text(encoding="utf-8")
    assert "RUN START" in text
    assert "RUN END" in text


@pytest.mark.parametrize("value", ["-1", "-12345"])
def test_negative_seed_rejected(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--runs", "100", "--seed", value, "--no-progress"])
    assert exc.value.code == 2
    assert "seed must be 0 or greater" in capsys.readouterr().err


def test_zero_seed_accepted(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--runs", "100", "--seed", "0", "--no-progress"])
    assert "Attempts: 100" in capsys.readouterr().out
