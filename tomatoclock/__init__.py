"""A Pomodoro work/break clock with observers, INI configuration and a terminal command."""

__version__ = "0.1.0"
__all__ = ["cli", "configuration", "observers", "pomodoro"]