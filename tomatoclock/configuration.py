"""INI-style configuration made of named sections of key/value strings."""

from __future__ import annotations

import os

_TRAILING_WHITESPACE = " \n\r\t"


class Configuration:
    """Sections of string settings read from a simple INI file.

    Lines are stripped of trailing whitespace only; ``[name]`` starts a
    section, ``key=value`` sets a value split at the first ``=``, and any
    other line is ignored. Keys before the first section go to section ``""``.
    """

    def __init__(self) -> None:
        self._sections: dict[str, dict[str, str]] = {}

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read settings from a file; a missing file raises OSError."""
        with open(path, encoding="utf-8", newline="") as handle:
            self.loads(handle.read())

    def loads(self, text: str) -> None:
        """Read settings from a string."""
        section = ""
        for raw in text.split("\n"):
            line = raw.rstrip(_TRAILING_WHITESPACE)
            if not line:
                continue
            if line.startswith("[") and line.endswith("]") and len(line) >= 2:
                section = line[1:-1]
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            self[section][key] = value

    def __getitem__(self, section: str) -> dict[str, str]:
        """Return a section, creating it empty if absent."""
        return self._sections.setdefault(section, {})

    def sections(self) -> dict[str, dict[str, str]]:
        """Return a copy of all sections."""
        return {name: dict(values) for name, values in self._sections.items()}


def load_configuration(path: str | os.PathLike[str]) -> Configuration:
    """Create a configuration and fill it from ``path``."""
    config = Configuration()
    config.load(path)
    return config