"""
Action registry for fancy_logs.

An action is a named category of log line ("success", "error", "watch", ...).
Each action has a fixed color, a badge glyph drawn before the label, and a
severity that decides which stream the line is written to. This module is the
single source of truth for those definitions: the Logger's wrapper methods,
the label-width computation and the demo CLI all read from it.

The default set mirrors the glyphs of the `figures` collection used by many
terminal tools, so output looks familiar next to other CLIs.

Custom actions can be added to an ActionRegistry before it is handed to a
Logger (or through Logger.register_action, which also refreshes alignment).
"""

from collections.abc import ItemsView, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Literal

from .exceptions import ActionRegistrationError, UnknownActionError

Severity = Literal["info", "error"]


class Action(str, Enum):
    """Names of the built-in actions."""

    SUCCESS = "success"
    FATAL = "fatal"
    ERROR = "error"
    INFO = "info"
    COMPLETE = "complete"
    PENDING = "pending"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    WATCH = "watch"
    START = "start"
    STOP = "stop"
    COMPILE = "compile"
    SKIP = "skip"
    WARN = "warn"


@dataclass(frozen=True)
class ActionDefinition:
    """How one action is drawn.

    `color` is any Rich color name, `badge` a short glyph and `severity`
    picks stdout ("info") or stderr ("error").
    """

    color: str
    badge: str
    severity: Severity = "info"


TICK = "✔"
CROSS = "✖"
INFO = "ℹ"
CHECKBOX_ON = "☒"
CHECKBOX_OFF = "☐"
ELLIPSIS = "…"
PLAY = "▶"
SQUARE_SMALL_FILLED = "◼"
POINTER = "❯"
BULLET = "●"
WARNING = "⚠"

DEFAULT_ACTIONS: Mapping[str, ActionDefinition] = MappingProxyType(
    {
        Action.SUCCESS.value: ActionDefinition("green", TICK),
        Action.FATAL.value: ActionDefinition("red", CROSS, "error"),
        Action.ERROR.value: ActionDefinition("red", CROSS, "error"),
        Action.INFO.value: ActionDefinition("blue", INFO),
        Action.COMPLETE.value: ActionDefinition("cyan", CHECKBOX_ON),
        Action.PENDING.value: ActionDefinition("magenta", CHECKBOX_OFF),
        Action.CREATE.value: ActionDefinition("green", TICK),
        Action.UPDATE.value: ActionDefinition("yellow", TICK),
        Action.DELETE.value: ActionDefinition("blue", TICK),
        Action.WATCH.value: ActionDefinition("yellow", ELLIPSIS),
        Action.START.value: ActionDefinition("green", PLAY),
        Action.STOP.value: ActionDefinition("magenta", SQUARE_SMALL_FILLED),
        Action.COMPILE.value: ActionDefinition("yellow", POINTER),
        Action.SKIP.value: ActionDefinition("magenta", BULLET),
        Action.WARN.value: ActionDefinition("yellow", WARNING),
    }
)


def action_name(name: Action | str) -> str:
    """Return the plain string name for an Action member or a string."""
    return name.value if isinstance(name, Action) else name


class ActionRegistry:
    """Lookup table from action name to ActionDefinition.

    Every registry starts from DEFAULT_ACTIONS. Lookups of unknown names raise
    UnknownActionError instead of returning None, since a missing definition
    would otherwise surface later as a half-drawn line.
    """

    def __init__(self, actions: Mapping[str, ActionDefinition] | None = None):
        self._actions: dict[str, ActionDefinition] = dict(DEFAULT_ACTIONS)
        if actions:
            self._actions.update(actions)

    def get(self, name: Action | str) -> ActionDefinition:
        key = action_name(name)
        try:
            return self._actions[key]
        except KeyError:
            raise UnknownActionError(key, self.names()) from None

    def register(
        self, name: str, definition: ActionDefinition, replace: bool = False
    ) -> None:
        """Add a new action. Existing names need `replace=True`."""
        if name in self._actions and not replace:
            raise ActionRegistrationError(f"Action '{name}' is already registered")
        self._actions[name] = definition

    def names(self) -> list[str]:
        return list(self._actions)

    def items(self) -> ItemsView[str, ActionDefinition]:
        return self._actions.items()

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Action):
            name = name.value
        return name in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)
