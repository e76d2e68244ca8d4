"""Pomodoro state machine that announces its transitions to observers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum

MAX_POMODORO_OBSERVERS = 5
WORK_DEFAULT_DURATION_SECONDS = 25 * 60
BREAK_DEFAULT_DURATION_SECONDS = 5 * 60


class PomodoroState(IntEnum):
    """States of the clock."""

    IDLE = 1
    WORK = 2
    BREAK = 4


@dataclass(frozen=True)
class ClockUpdate:
    """Periodic report of where the clock stands."""

    now: int
    state: PomodoroState
    work_flavor: int
    remaining_time_in_state: int


@dataclass(frozen=True)
class IdleToWork:
    """A work period has started."""

    work_flavor: int
    now: int


@dataclass(frozen=True)
class WorkToBreak:
    """A work period ran out and a break began."""

    now: int
    work_duration: int


@dataclass(frozen=True)
class BreakToIdle:
    """A break ended, either naturally or by cancellation."""

    now: int
    break_duration: int


@dataclass(frozen=True)
class WorkToIdle:
    """A work period was cancelled."""

    now: int
    cancelled_work_duration: int


@dataclass(frozen=True)
class AdditionalWork:
    """The current work period was extended."""

    now: int
    work_flavor: int
    new_work_duration: int


class TooManyObserversError(RuntimeError):
    """Raised when a clock already holds its maximum number of observers."""


_HANDLERS = {
    ClockUpdate: "on_clock_update",
    IdleToWork: "on_idle_to_work",
    WorkToBreak: "on_work_to_break",
    BreakToIdle: "on_break_to_idle",
    WorkToIdle: "on_work_to_idle",
    AdditionalWork: "on_additional_work",
}


class PomodoroObserver:
    """Receives clock events; override the ``on_*`` hooks that matter."""

    def notification(self, event) -> None:
        """Dispatch an event to the hook for its type."""
        try:
            name = _HANDLERS[type(event)]
        except KeyError:
            raise TypeError(f"unknown pomodoro event: {event!r}") from None
        getattr(self, name)(event)

    def on_clock_update(self, update: ClockUpdate) -> None:
        pass

    def on_idle_to_work(self, update: IdleToWork) -> None:
        pass

    def on_work_to_break(self, update: WorkToBreak) -> None:
        pass

    def on_break_to_idle(self, update: BreakToIdle) -> None:
        pass

    def on_work_to_idle(self, update: WorkToIdle) -> None:
        pass

    def on_additional_work(self, update: AdditionalWork) -> None:
        pass


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else now


class PomodoroClock:
    """Work/break timer driven by explicit calls carrying the current time."""

    max_observers = MAX_POMODORO_OBSERVERS

    def __init__(self) -> None:
        self._observers: list[PomodoroObserver] = []
        self._last_update_at = 0
        self._last_state_change_at = 0
        self._state_ends_at = 0
        self._work_flavor = 0
        self._state = PomodoroState.IDLE
        self._break_duration = 0

    def add_observer(self, observer: PomodoroObserver) -> None:
        """Register an observer; adding one already present does nothing."""
        if observer in self._observers:
            return
        if len(self._observers) >= self.max_observers:
            raise TooManyObserversError(
                f"at most {self.max_observers} observers may be registered"
            )
        self._observers.append(observer)

    def remove_observer(self, observer: PomodoroObserver) -> None:
        """Unregister an observer if it is registered."""
        if observer in self._observers:
            self._observers.remove(observer)

    def clear_observers(self) -> None:
        """Unregister all observers."""
        self._observers.clear()

    def _notify(self, event) -> None:
        for observer in list(self._observers):
            observer.notification(event)

    @property
    def state(self) -> PomodoroState:
        """The current state of the clock."""
        return self._state

    def start_work(
        self,
        flavor: int,
        work_duration: int = WORK_DEFAULT_DURATION_SECONDS,
        break_duration: int = BREAK_DEFAULT_DURATION_SECONDS,
        now: int | None = None,
    ) -> bool:
        """Begin a work period; returns False unless the clock was idle."""
        now = _now(now)
        if self._state is not PomodoroState.IDLE:
            return False
        self._state_ends_at = now + work_duration
        self._last_update_at = now
        self._last_state_change_at = now
        self._state = PomodoroState.WORK
        self._work_flavor = flavor
        self._break_duration = break_duration
        self._notify(IdleToWork(self._work_flavor, now))
        self.passage_of_time(now)
        return True

    def extend_work(self, additional_work_duration: int = 0, now: int | None = None) -> bool:
        """Lengthen the running work period.

        A non-positive extension adds one break's length. Returns False
        unless the clock is working.
        """
        now = _now(now)
        if self._state is not PomodoroState.WORK:
            return False
        self._state_ends_at += (
            additional_work_duration if additional_work_duration > 0 else self._break_duration
        )
        update = AdditionalWork(now, self._work_flavor, self._state_ends_at)
        self._last_update_at = now
        self._notify(update)
        self.passage_of_time(now)
        return True

    def cancel(self, now: int | None = None) -> bool:
        """Return to idle from work or break; returns False if already idle."""
        now = _now(now)
        elapsed = now - self._last_state_change_at
        result = False
        if self._state is PomodoroState.WORK:
            self._state = PomodoroState.IDLE
            self._last_state_change_at = now
            self._notify(WorkToIdle(now, elapsed))
            result = True
        elif self._state is PomodoroState.BREAK:
            self._state = PomodoroState.IDLE
            self._last_state_change_at = now
            self._notify(BreakToIdle(now, elapsed))
            result = True
        self.passage_of_time(now)
        return result

    def passage_of_time(self, now: int | None = None) -> None:
        """Advance the clock to ``now``, making any due transition."""
        now = _now(now)
        state_change = self._state_ends_at != 0 and now >= self._state_ends_at
        duration = self._state_ends_at - self._last_state_change_at
        if state_change:
            if self._state is PomodoroState.WORK:
                self._state = PomodoroState.BREAK
                self._last_state_change_at = now
                self._state_ends_at += self._break_duration
                self._work_flavor = 0
                self._notify(WorkToBreak(now, duration))
            elif self._state is PomodoroState.BREAK:
                self._state = PomodoroState.IDLE
                self._last_state_change_at = self._state_ends_at
                self._state_ends_at = 0
                self._work_flavor = 0
                self._notify(BreakToIdle(now, duration))
        self._last_update_at = now
        self._notify(
            ClockUpdate(now, self._state, self._work_flavor, self._state_ends_at - now)
        )