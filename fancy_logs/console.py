"""
Shared Rich Console instances for terminal output.

Every line fancy_logs writes to the terminal goes through one of these two
consoles. Rich keeps track of terminal capabilities (color support, width,
whether output is piped), so sharing one instance per stream keeps that
detection in a single place.

  - `console` writes to stdout: info-severity log lines and CLI output.
  - `err_console` writes to stderr: error-severity log lines and warnings.

Tests can patch either object (or pass their own Console to ConsoleSink) to
capture output.
"""

from rich.console import Console

console = Console()

err_console = Console(stderr=True)
