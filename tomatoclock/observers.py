"""Observers that present the pomodoro clock: text face, bell, LED strips, log."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

from .pomodoro import (
    AdditionalWork,
    BreakToIdle,
    ClockUpdate,
    IdleToWork,
    PomodoroObserver,
    PomodoroState,
    WorkToBreak,
    WorkToIdle,
)

Color = tuple[int, int, int]

_STATE_COLORS: dict[PomodoroState, Color] = {
    PomodoroState.IDLE: (0, 0, 0),
    PomodoroState.WORK: (0, 255, 0),
    PomodoroState.BREAK: (255, 0, 0),
}

INTERNAL_LEDS = 10
EXTERNAL_LEDS = 30
LED_BRIGHTNESS = 200


def format_clock(now: int) -> str:
    """Local wall-clock time of ``now`` as HH:MM:SS."""
    return time.strftime("%H:%M:%S", time.localtime(now))


def format_remaining(seconds: int) -> str:
    """Minutes and seconds of a duration as MM:SS, wrapping every hour."""
    within_hour = seconds % 3600
    minutes, secs = divmod(within_hour, 60)
    return f"{minutes:02d}:{secs:02d}"


def color_for_state(state: PomodoroState) -> Color:
    """RGB colour that represents a clock state."""
    return _STATE_COLORS[PomodoroState(state)]


class LoggerProbe(PomodoroObserver):
    """Logs every clock event."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger("Pomodoro")
        self._logger.info("LoggerProbe created")

    def on_clock_update(self, update: ClockUpdate) -> None:
        self._logger.info(
            "ClockUpdate: now=%d, state=%d, remaining_time_in_state=%d",
            update.now,
            int(update.state),
            update.remaining_time_in_state,
        )

    def on_idle_to_work(self, update: IdleToWork) -> None:
        self._logger.info("IdleToWork: now=%d", update.now)

    def on_work_to_break(self, update: WorkToBreak) -> None:
        self._logger.info(
            "WorkToBreak: now=%d, work_duration=%d", update.now, update.work_duration
        )

    def on_break_to_idle(self, update: BreakToIdle) -> None:
        self._logger.info(
            "BreakToIdle: now=%d, break_duration=%d", update.now, update.break_duration
        )

    def on_work_to_idle(self, update: WorkToIdle) -> None:
        self._logger.info(
            "WorkToIdle: now=%d, cancelled_work_duration=%d",
            update.now,
            update.cancelled_work_duration,
        )

    def on_additional_work(self, update: AdditionalWork) -> None:
        self._logger.info(
            "AdditionalWork: now=%d, new_work_duration=%d",
            update.now,
            update.new_work_duration,
        )


class ClockFace(PomodoroObserver):
    """Writes one text line per clock update to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def render(self, update: ClockUpdate) -> str:
        """Text for an update: state, work flavor, wall clock and time left."""
        clock = format_clock(update.now)
        state = PomodoroState(update.state)
        if state is PomodoroState.IDLE:
            return f"IDLE {clock}"
        remaining = format_remaining(update.remaining_time_in_state)
        if state is PomodoroState.WORK:
            return f"WORK {update.work_flavor} {clock} {remaining}"
        return f"BREAK {clock} {remaining}"

    def on_clock_update(self, update: ClockUpdate) -> None:
        self._stream.write(self.render(update) + "\n")
        self._stream.flush()


def _ring_bell() -> None:
    sys.stdout.write("\a")
    sys.stdout.flush()


class Gong(PomodoroObserver):
    """Sounds whenever work starts, a break starts, or a break ends."""

    def __init__(self, player: Callable[[], None] | None = None) -> None:
        self._player = player if player is not None else _ring_bell

    def play(self) -> None:
        """Sound the gong once."""
        self._player()

    def on_idle_to_work(self, update: IdleToWork) -> None:
        self.play()

    def on_work_to_break(self, update: WorkToBreak) -> None:
        self.play()

    def on_break_to_idle(self, update: BreakToIdle) -> None:
        self.play()


class Leds(PomodoroObserver):
    """Two LED strips that show the colour of the current state."""

    brightness = LED_BRIGHTNESS

    def __init__(
        self, internal_count: int = INTERNAL_LEDS, external_count: int = EXTERNAL_LEDS
    ) -> None:
        if internal_count < 0 or external_count < 0:
            raise ValueError("LED counts must not be negative")
        off = color_for_state(PomodoroState.IDLE)
        self.internal: list[Color] = [off] * internal_count
        self.external: list[Color] = [off] * external_count

    def on_clock_update(self, update: ClockUpdate) -> None:
        color = color_for_state(update.state)
        self.internal = [color] * len(self.internal)
        self.external = [color] * len(self.external)