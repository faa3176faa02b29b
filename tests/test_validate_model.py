from __future__ import annotations

import pytest

from hundred_prisoners import config, validate_model


def test_validation_script_completes(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(config, "VALIDATION_RUNS", 20)
    monkeypatch.setattr(config, "VALIDATION_CYCLE_SAMPLE", 20)

    validate_model.main()

    out = capsys.readouterr().out
    assert "attempt_limit=1: success=False" in out
    assert "attempt_limit=2: success=True" in out
    assert "prisoner 1 needs 2 attempts" in out
    assert out.count("exact=") == len(config.VALIDATION_ATTEMPT_LIMITS)
    assert "[VALIDATION COMPLETE]" in out
