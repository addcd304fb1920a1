"""
The Logger: tagged, colorized, aligned log lines for command-line tools.

    from fancy_logs import Logger

    logger = Logger()
    logger.success("Compiled %s files", "12")
    logger.watch({"message": "Watching src/", "prefix": "[dev]"})
    logger.fatal(exc)

Each call goes through the same pipeline:

  1. The action name is looked up in the registry. Unknown names raise
     UnknownActionError straight away, paused or not.
  2. The message is normalized into a MessageRecord (see messages.py).
  3. While paused, the record is queued and the call returns None.
     Otherwise the Renderer composes the line and writes it to the sink.

Construct with `fake=True` to capture lines in `logger.logs` instead of
printing them. Captured lines have no colors, no icons and a single space
between label and message.
"""

import dataclasses
from typing import Any

from .actions import Action, ActionDefinition, ActionRegistry, action_name
from .config import LoggerConfig, load_logger_config
from .deferred import DeferredQueue, FilterFn
from .messages import MessageInput, normalize_message
from .renderer import Renderer
from .sink import ConsoleSink, FakeSink, Sink


class Logger:
    """Prints fancy log lines and supports pausing with later replay."""

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        registry: ActionRegistry | None = None,
        sink: Sink | None = None,
        **options: Any,
    ):
        self.config = dataclasses.replace(config or LoggerConfig(), **options)
        self.actions = registry if registry is not None else ActionRegistry()

        if sink is None:
            sink = FakeSink() if self.config.fake else ConsoleSink()
        self.sink = sink

        self._renderer = Renderer(self.actions, sink, fake=self.config.fake)
        self._deferred = DeferredQueue()

    @classmethod
    def from_env(cls, **options: Any) -> "Logger":
        """Logger configured from FANCY_LOGS_* variables and the config file."""
        return cls(load_logger_config(), **options)

    @property
    def logs(self) -> list[str]:
        """Lines captured by a FakeSink, in render order."""
        return getattr(self.sink, "logs", [])

    @property
    def paused(self) -> bool:
        return self._deferred.paused

    @property
    def biggest_label(self) -> int:
        return self._renderer.biggest_label

    def register_action(
        self, name: str, definition: ActionDefinition, replace: bool = False
    ) -> None:
        """Add a custom action and re-align labels to account for it."""
        self.actions.register(name, definition, replace=replace)
        self._renderer.refresh()

    def log(self, name: Action | str, message: MessageInput, *args: Any) -> str | None:
        """Log `message` with the given action.

        Returns the rendered line, or None when the logger is paused.
        """
        key = action_name(name)
        self.actions.get(key)

        record = normalize_message(key, message, args, self.config)
        if self._deferred.paused:
            self._deferred.push(record)
            return None

        return self._renderer.render(record)

    def success(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.SUCCESS, message, *args)

    def error(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.ERROR, message, *args)

    def fatal(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.FATAL, message, *args)

    def info(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.INFO, message, *args)

    def complete(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.COMPLETE, message, *args)

    def pending(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.PENDING, message, *args)

    def create(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.CREATE, message, *args)

    def update(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.UPDATE, message, *args)

    def delete(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.DELETE, message, *args)

    def watch(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.WATCH, message, *args)

    def start(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.START, message, *args)

    def stop(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.STOP, message, *args)

    def compile(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.COMPILE, message, *args)

    def skip(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.SKIP, message, *args)

    def warn(self, message: MessageInput, *args: Any) -> str | None:
        return self.log(Action.WARN, message, *args)

    def pause_logger(self) -> None:
        """Queue log calls in memory until resume_logger() is called."""
        self._deferred.pause()

    def resume_logger(self, filter_fn: FilterFn | None = None) -> list[str]:
        """Print everything queued while paused, oldest first.

        `filter_fn` receives each queued MessageRecord; records it rejects are
        discarded. Returns the lines that were rendered.
        """
        return self._deferred.resume(self._renderer.render, filter_fn)
