import io

import pytest

from tomatoclock.cli import Button, handle_buttons, main, parse_buttons
from tomatoclock.pomodoro import PomodoroClock, PomodoroObserver, PomodoroState


class Recorder(PomodoroObserver):
    def __init__(self):
        self.updates = []
        self.extensions = []

    def on_clock_update(self, update):
        self.updates.append(update)

    def on_additional_work(self, update):
        self.extensions.append(update)


@pytest.fixture
def clock_and_recorder():
    clock = PomodoroClock()
    recorder = Recorder()
    clock.add_observer(recorder)
    return clock, recorder


def test_parse_buttons():
    assert parse_buttons("a c\n") == frozenset({Button.A, Button.C})
    assert parse_buttons("B") == frozenset({Button.B})
    assert parse_buttons("  \n") == frozenset()


def test_parse_buttons_rejects_unknown():
    with pytest.raises(ValueError):
        parse_buttons("x")


@pytest.mark.parametrize(
    "button, flavor", [(Button.A, 0), (Button.B, 1), (Button.C, 2)]
)
def test_idle_starts_work_with_flavor(clock_and_recorder, button, flavor):
    clock, recorder = clock_and_recorder
    handle_buttons(clock, {button}, now=1000)
    assert clock.state is PomodoroState.WORK
    assert recorder.updates[-1].work_flavor == flavor


def test_idle_prefers_earlier_button(clock_and_recorder):
    clock, recorder = clock_and_recorder
    handle_buttons(clock, {Button.B, Button.C}, now=1000)
    assert recorder.updates[-1].work_flavor == 1


def test_no_buttons_lets_time_pass(clock_and_recorder):
    clock, recorder = clock_and_recorder
    handle_buttons(clock, set(), now=1000)
    assert clock.state is PomodoroState.IDLE
    assert recorder.updates[-1].now == 1000


def test_work_b_extends(clock_and_recorder):
    clock, recorder = clock_and_recorder
    handle_buttons(clock, {Button.A}, now=1000)
    handle_buttons(clock, {Button.B}, now=1100)
    assert clock.state is PomodoroState.WORK
    assert len(recorder.extensions) == 1


def test_work_c_cancels(clock_and_recorder):
    clock, _ = clock_and_recorder
    handle_buttons(clock, {Button.A}, now=1000)
    handle_buttons(clock, {Button.C}, now=1100)
    assert clock.state is PomodoroState.IDLE


def test_work_b_and_c_extend_then_cancel(clock_and_recorder):
    clock, recorder = clock_and_recorder
    handle_buttons(clock, {Button.A}, now=1000)
    handle_buttons(clock, {Button.B, Button.C}, now=1100)
    assert len(recorder.extensions) == 1
    assert clock.state is PomodoroState.IDLE


def test_break_ignores_b_and_cancels_on_c(clock_and_recorder):
    clock, _ = clock_and_recorder
    clock.start_work(0, 1500, 300, now=1000)
    clock.passage_of_time(2500)
    handle_buttons(clock, {Button.B}, now=2600)
    assert clock.state is PomodoroState.BREAK
    handle_buttons(clock, {Button.C}, now=2700)
    assert clock.state is PomodoroState.IDLE


def test_main_starts_work_from_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "IDLE" in out
    assert "WORK 0" in out


def test_main_reports_bad_button(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "unknown button" in captured.err
    assert "WORK" not in captured.out


def test_main_missing_config(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--config", str(tmp_path / "missing.ini")]) == 1
    assert "Failed to load configuration" in capsys.readouterr().err


def test_main_with_config_without_timezone(tmp_path, monkeypatch, capsys):
    path = tmp_path / "config.ini"
    path.write_text("[wifi]\nssid=example\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("b\n"))
    assert main(["--config", str(path)]) == 0
    assert "WORK 1" in capsys.readouterr().out