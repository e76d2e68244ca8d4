# tomatoclock

A Pomodoro clock: a work period followed by a break, then back to idle.
The clock itself only keeps state and announces what happens; displays,
sounds, lights and logs are observers that react to its events.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
tomatoclock [--config FILE] [--verbose]
```

The clock runs in the terminal and is driven by three buttons, `A`, `B`
and `C`. Press them by typing the letters `a`, `b` or `c` and Enter
(case and whitespace are ignored; an unknown letter is reported and the
line is skipped). Once a second, or right after a press, the clock acts:

| State | A              | B                  | C                  |
|-------|----------------|--------------------|--------------------|
| idle  | start work (0) | start work (1)     | start work (2)     |
| work  |                | extend the work    | cancel             |
| break |                |                    | cancel             |

The number in brackets is the work "flavor", a small tag you can use to
tell kinds of work apart; if several buttons are pressed while idle, the
first of A, B, C wins. A work period lasts 25 minutes and the break 5
minutes; extending adds one break's length. When no button is pressed the
clock moves on with time: work turns into a break when it runs out, and
the break turns back into idle.

Each second a line is printed:

```
IDLE 14:03:07
WORK 1 14:03:08 24:59
BREAK 14:28:10 04:57
```

showing the state, the flavor while working, the local time and the time
left in the state. The terminal bell rings when work starts, when a break
starts and when a break ends. The program stops at the end of standard
input or on Ctrl-C.

Options:

- `--config FILE` – read an INI file; if its `[ntp]` section has a `tz`
  value, that time zone is used for the local time. A file that cannot be
  read makes the program exit with status 1.
- `--verbose` – log every clock event.

## Using the clock in code

```python
from tomatoclock.pomodoro import PomodoroClock, PomodoroObserver, PomodoroState


class Printer(PomodoroObserver):
    def on_work_to_break(self, update):
        print(f"Worked for {update.work_duration} s, take a break")

    def on_break_to_idle(self, update):
        print(f"Break of {update.break_duration} s is over")


clock = PomodoroClock()
clock.add_observer(Printer())

clock.start_work(1, 1500, 300, 1000)   # flavor 1, 25 min work, 5 min break
clock.passage_of_time(2500)            # work ends -> break
assert clock.state is PomodoroState.BREAK
clock.passage_of_time(2800)            # break ends -> idle
```

`start_work` only succeeds from idle, `extend_work` only while working
(an extension of zero or less adds one break's length), and `cancel`
returns the clock to idle from work or break. Each returns whether it did
anything. Every call ends with a `ClockUpdate` telling observers the
current state, flavor and remaining time. `now` may be left out, in which
case the current system time in whole seconds is used.

Events sent to observers, each handled by the matching `on_*` method of
`PomodoroObserver`:

- `ClockUpdate` – `on_clock_update`
- `IdleToWork` – `on_idle_to_work`
- `WorkToBreak` – `on_work_to_break`
- `BreakToIdle` – `on_break_to_idle`
- `WorkToIdle` – `on_work_to_idle`
- `AdditionalWork` – `on_additional_work`

A clock accepts at most five observers; adding more raises
`TooManyObserversError`. Adding an observer already registered does
nothing; `remove_observer` and `clear_observers` unregister them.

`tomatoclock.cli.handle_buttons(clock, pressed, now)` applies the button
table above to a clock, and `parse_buttons(line)` turns a line of text
into a set of `Button` values.

## Ready-made observers

`tomatoclock.observers` provides:

- `ClockFace` – writes one text line per clock update to a stream
  (standard output by default); `render` returns that line.
- `Gong` – calls a player function (the terminal bell by default) when
  work starts, when a break starts and when it ends.
- `Leds` – keeps two lists of RGB colours, `internal` and `external`
  (10 and 30 entries by default), in the colour of the current state:
  off when idle, green while working, red during a break.
- `LoggerProbe` – logs every event to a `logging` logger.

It also has the helpers `format_clock`, `format_remaining` and
`color_for_state`.

## Configuration

`tomatoclock.configuration` reads simple INI-style files: `[section]`
headers and `key=value` lines split at the first `=`, with trailing
whitespace trimmed and other lines ignored. Looking up a section that
does not exist gives an empty one.

```python
from tomatoclock.configuration import Configuration

config = Configuration()
config.loads("[ntp]\nhost=time.example.com\n")
print(config["ntp"]["host"])
```

`load_configuration(path)` creates and fills one from a file.

## What it does not do

The clock drives no screen, speaker or LED hardware: `ClockFace` prints
text, `Gong` rings the terminal bell, and `Leds` only holds colours in
memory. It does not connect to a network or set the time from a time
server; it relies on the system clock, and of the configuration file the
command uses only the `[ntp]` `tz` value.