"""Interactive terminal pomodoro timer driven by three buttons."""

from __future__ import annotations

import argparse
import logging
import os
import queue
import sys
import threading
import time
from enum import Enum
from typing import Iterable, TextIO

from .configuration import load_configuration
from .observers import ClockFace, Gong, Leds, LoggerProbe
from .pomodoro import PomodoroClock, PomodoroState


class Button(Enum):
    """The three buttons of the timer."""

    A = "a"
    B = "b"
    C = "c"


def parse_buttons(line: str) -> frozenset[Button]:
    """Buttons named by the letters a, b and c in ``line``; whitespace is ignored."""
    pressed = set()
    for char in line.lower():
        if char.isspace():
            continue
        try:
            pressed.add(Button(char))
        except ValueError:
            raise ValueError(f"unknown button: {char!r}") from None
    return frozenset(pressed)


def handle_buttons(
    clock: PomodoroClock, pressed: Iterable[Button], now: int | None = None
) -> None:
    """Act on pressed buttons, or let time pass when none is pressed.

    Idle: A, B or C starts work of flavor 0, 1 or 2. Work: B extends,
    C cancels. Break: C cancels.
    """
    pressed = frozenset(pressed)
    if not pressed:
        clock.passage_of_time(now)
        return
    state = clock.state
    if state is PomodoroState.IDLE:
        for flavor, button in enumerate(Button):
            if button in pressed:
                clock.start_work(flavor, now=now)
                break
    elif state is PomodoroState.WORK:
        if Button.B in pressed:
            clock.extend_work(now=now)
        if Button.C in pressed:
            clock.cancel(now)
    elif state is PomodoroState.BREAK:
        if Button.C in pressed:
            clock.cancel(now)


def _read_lines(stream: TextIO, lines: queue.Queue) -> None:
    for line in stream:
        lines.put(line)
    lines.put(None)


def _apply_timezone(tz: str) -> None:
    os.environ["TZ"] = tz
    if hasattr(time, "tzset"):
        time.tzset()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tomatoclock",
        description="Pomodoro timer. Type a, b or c and Enter to press buttons.",
    )
    parser.add_argument("--config", help="INI file; [ntp] tz sets the time zone")
    parser.add_argument("--verbose", action="store_true", help="log every clock event")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the timer until standard input ends."""
    args = _build_parser().parse_args(argv)

    if args.config is not None:
        try:
            config = load_configuration(args.config)
        except OSError as exc:
            print(f"Failed to load configuration: {exc}", file=sys.stderr)
            return 1
        tz = config["ntp"].get("tz", "")
        if tz:
            _apply_timezone(tz)

    clock = PomodoroClock()
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        clock.add_observer(LoggerProbe())
    clock.add_observer(ClockFace())
    clock.add_observer(Gong())
    clock.add_observer(Leds())

    lines: queue.Queue = queue.Queue()
    threading.Thread(target=_read_lines, args=(sys.stdin, lines), daemon=True).start()

    pressed: frozenset[Button] = frozenset()
    try:
        while True:
            handle_buttons(clock, pressed)
            pressed = frozenset()
            # Wait for the next second, or for a button press.
            deadline = int(time.time()) + 1
            while True:
                timeout = deadline - time.time()
                if timeout <= 0:
                    break
                try:
                    line = lines.get(timeout=timeout)
                except queue.Empty:
                    break
                if line is None:
                    return 0
                try:
                    pressed = parse_buttons(line)
                except ValueError as exc:
                    print(exc, file=sys.stderr)
                    continue
                if pressed:
                    break
    except KeyboardInterrupt:
        return 0