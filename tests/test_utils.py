import logging

import pytest

import lifecanvas
from lifecanvas import RunState, Telemetry
from testutils import run_tests


def test_log_exception(caplog):
    log_exception = lifecanvas._coreutils.log_exception

    for _ in range(3):
        with log_exception("Error in test:"):
            raise RuntimeError("something at 0x7f001234 went wrong")

    records = [r for r in caplog.records if r.name == "lifecanvas"]
    assert len(records) == 3
    assert all(r.levelno == logging.ERROR for r in records)
    assert records[0].exc_info is not None
    assert records[1].getMessage().endswith("(2)")
    assert records[2].getMessage().endswith("(3)")


def test_log_exception_does_not_catch_base_exceptions():
    log_exception = lifecanvas._coreutils.log_exception
    with pytest.raises(KeyboardInterrupt):
        with log_exception("Error in test:"):
            raise KeyboardInterrupt()


def test_get_env_int(monkeypatch):
    get_env_int = lifecanvas._coreutils.get_env_int

    monkeypatch.delenv("LIFECANVAS_TEST_VALUE", raising=False)
    assert get_env_int("LIFECANVAS_TEST_VALUE", 3) == 3

    monkeypatch.setenv("LIFECANVAS_TEST_VALUE", " 12 ")
    assert get_env_int("LIFECANVAS_TEST_VALUE", 3) == 12

    for value in ["x", "1.5", "0", "-2"]:
        monkeypatch.setenv("LIFECANVAS_TEST_VALUE", value)
        assert get_env_int("LIFECANVAS_TEST_VALUE", 3) == 3


def test_get_env_bool(monkeypatch):
    get_env_bool = lifecanvas._coreutils.get_env_bool

    monkeypatch.delenv("LIFECANVAS_TEST_FLAG", raising=False)
    assert get_env_bool("LIFECANVAS_TEST_FLAG", True) is True

    for value in ["1", "true", "Yes", "ON"]:
        monkeypatch.setenv("LIFECANVAS_TEST_FLAG", value)
        assert get_env_bool("LIFECANVAS_TEST_FLAG", False) is True
    for value in ["0", "false", "No", "off", ""]:
        monkeypatch.setenv("LIFECANVAS_TEST_FLAG", value)
        assert get_env_bool("LIFECANVAS_TEST_FLAG", True) is False

    monkeypatch.setenv("LIFECANVAS_TEST_FLAG", "maybe")
    assert get_env_bool("LIFECANVAS_TEST_FLAG", True) is True


def test_run_state_enum():
    assert RunState.paused == "paused"
    assert RunState.running == "running"
    assert "paused" in RunState
    assert "stopped" not in RunState
    assert list(RunState) == ["paused", "running"]
    assert len(RunState) == 2

    with pytest.raises(RuntimeError):
        RunState.paused = "x"
    with pytest.raises(RuntimeError):
        RunState()


def test_telemetry_labels():
    texts = []
    telemetry = Telemetry(rate=texts.append, speed=texts.append)

    telemetry.publish_step(25.0, 7)
    telemetry.publish_speed(3)
    telemetry.publish_run_state(RunState.running)
    telemetry.publish_iterations(0)

    assert texts == ["25.0 frames per second.", "3 iterations per second."]


def test_telemetry_infinite_rate():
    texts = []
    telemetry = Telemetry(rate=texts.append)
    telemetry.publish_step(float("inf"), 1)
    assert texts == ["Infinity frames per second."]


def test_telemetry_run_state_labels():
    texts = []
    telemetry = Telemetry(run_state=texts.append)
    telemetry.publish_run_state(RunState.running)
    telemetry.publish_run_state(RunState.paused)
    assert texts == ["Pause", "Restart"]

    with pytest.raises(ValueError):
        telemetry.publish_run_state("stopped")


def test_telemetry_invalid_label():
    with pytest.raises(TypeError):
        Telemetry(rate="not callable")


if __name__ == "__main__":
    run_tests(globals())
