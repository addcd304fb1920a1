"""
Output destinations for rendered log lines.

The renderer never writes to a stream directly: it passes each finished line
and its action's severity to a Sink. Two are provided:

  - ConsoleSink writes through the shared Rich consoles, stdout for "info"
    actions and stderr for "error" actions.
  - FakeSink keeps lines in memory (`logs`) and writes nothing. A Logger in
    fake mode uses it, and tests can pass one to a normal Logger to capture
    fully styled output.

Any object with a matching `write(line, severity)` method can be used.
"""

from typing import Protocol

from rich.console import Console
from rich.text import Text

from .actions import Severity
from .console import console, err_console


class Sink(Protocol):
    def write(self, line: str, severity: Severity) -> None: ...


class ConsoleSink:
    """Writes lines to the terminal through Rich.

    Lines already carry ANSI escapes, so they are decoded with Text.from_ansi
    and printed without markup or highlighting. Rich then downgrades or strips
    the colors when the stream is not a color terminal.
    """

    def __init__(self, out: Console | None = None, err: Console | None = None):
        self.out = out or console
        self.err = err or err_console

    def write(self, line: str, severity: Severity) -> None:
        target = self.err if severity == "error" else self.out
        target.print(Text.from_ansi(line), highlight=False, soft_wrap=True)


class FakeSink:
    """Collects lines in memory instead of writing them."""

    def __init__(self) -> None:
        self.logs: list[str] = []

    def write(self, line: str, severity: Severity) -> None:
        self.logs.append(line)
