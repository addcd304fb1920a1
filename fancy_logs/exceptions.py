"""Exception types raised by fancy_logs.

Log input itself never raises: strings, option mappings and exception objects
are all rendered. The errors below signal programming mistakes in how a
Logger is used, so they are raised eagerly and never caught internally.
"""


class FancyLogsError(Exception):
    """Base class for every error raised by fancy_logs."""


class UnknownActionError(FancyLogsError, LookupError):
    """Raised when logging with an action name that was never registered."""

    def __init__(self, name: str, registered: list[str]):
        self.name = name
        self.registered = registered
        super().__init__(
            f"Unknown action '{name}'. Registered actions: {', '.join(registered)}"
        )


class ActionRegistrationError(FancyLogsError):
    """Raised when registering an action name that already exists."""
